"""Tests for context extraction."""

from collections import Counter

import pytest

from lesk_wsd.errors import ConfigurationError
from lesk_wsd.wsd.bag_of_words import BagOfWordsBuilder
from lesk_wsd.wsd.base import Sentence, Token
from lesk_wsd.wsd.context import (
    ContextOption,
    extract_context,
    parse_context_option,
    select_context_tokens,
    validate_window_size,
)


def make_sentence(words_and_tags):
    """Build an annotated sentence from (word, POS) pairs."""
    return Sentence(
        tuple(
            Token(surface=word, position=i, lemma=word.lower(), pos=pos)
            for i, (word, pos) in enumerate(words_and_tags)
        )
    )


SENTENCE = make_sentence(
    [
        ("fishermen", "NOUN"),
        ("sat", "VERB"),
        ("on", "ADP"),
        ("the", "DET"),
        ("bank", "NOUN"),
        ("watching", "VERB"),
        ("the", "DET"),
        ("river", "NOUN"),
    ]
)


def surfaces(tokens):
    return [t.surface for t in tokens]


class TestSelectContextTokens:
    """Tests for the four context policies."""

    def test_all_words(self):
        """ALL_WORDS keeps the whole sentence, target included."""
        tokens = select_context_tokens(SENTENCE, 4, ContextOption.ALL_WORDS)

        assert surfaces(tokens) == surfaces(SENTENCE)

    def test_all_words_r_excludes_target(self):
        """ALL_WORDS_R drops exactly the ambiguous word."""
        tokens = select_context_tokens(SENTENCE, 4, ContextOption.ALL_WORDS_R)

        assert "bank" not in surfaces(tokens)
        assert len(tokens) == len(SENTENCE) - 1

    def test_all_words_r_keeps_other_occurrences(self):
        """Only the target position is removed, not other copies of the word."""
        sentence = Sentence.from_words(["bank", "by", "the", "bank"])

        tokens = select_context_tokens(sentence, 3, ContextOption.ALL_WORDS_R)

        assert surfaces(tokens) == ["bank", "by", "the"]

    def test_window_centered(self):
        """WINDOW of 3 takes one neighbor on each side."""
        tokens = select_context_tokens(SENTENCE, 4, ContextOption.WINDOW, window_size=3)

        assert surfaces(tokens) == ["the", "bank", "watching"]

    def test_window_clipped_at_sentence_start(self):
        """A window at the first token uses only the available neighbors."""
        tokens = select_context_tokens(SENTENCE, 0, ContextOption.WINDOW, window_size=3)

        assert surfaces(tokens) == ["fishermen", "sat"]

    def test_window_clipped_at_sentence_end(self):
        """A window at the last token uses only the available neighbors."""
        tokens = select_context_tokens(SENTENCE, 7, ContextOption.WINDOW, window_size=5)

        assert surfaces(tokens) == ["watching", "the", "river"]

    def test_window_larger_than_sentence(self):
        """A window wider than the sentence covers the sentence."""
        sentence = Sentence.from_words(["river", "bank"])

        tokens = select_context_tokens(sentence, 1, ContextOption.WINDOW, window_size=9)

        assert surfaces(tokens) == ["river", "bank"]

    def test_pos_policy(self):
        """POS keeps the words tagged like the ambiguous word."""
        tokens = select_context_tokens(SENTENCE, 4, ContextOption.POS)

        assert surfaces(tokens) == ["fishermen", "bank", "river"]

    def test_pos_policy_falls_back_to_given_tag(self):
        """Untagged sentences use the occurrence's POS against token tags."""
        sentence = make_sentence([("bank", None), ("river", "NOUN"), ("flows", "VERB")])

        tokens = select_context_tokens(sentence, 0, ContextOption.POS, pos="noun")

        assert surfaces(tokens) == ["river"]

    def test_pos_policy_without_any_tag(self):
        """Without any POS information the context is empty."""
        sentence = Sentence.from_words(["river", "bank"])

        assert select_context_tokens(sentence, 1, ContextOption.POS) == []

    def test_position_out_of_range(self):
        """Positions outside the sentence are rejected."""
        with pytest.raises(IndexError):
            select_context_tokens(SENTENCE, 8, ContextOption.ALL_WORDS)


class TestExtractContext:
    """Tests for context bags."""

    def test_filters_stopwords(self):
        """Context bags go through the same normalization as signatures."""
        builder = BagOfWordsBuilder(stopwords={"the", "on"})

        bag = extract_context(SENTENCE, 4, "ALL_WORDS", builder)

        assert bag == Counter(
            {"fishermen": 1, "sat": 1, "bank": 1, "watching": 1, "river": 1}
        )

    def test_window_at_first_token(self):
        """A window at position 0 does not fail on clipping."""
        builder = BagOfWordsBuilder(stopwords={"the"})
        sentence = Sentence.from_words(["bank", "of", "the", "river"])

        bag = extract_context(sentence, 0, ContextOption.WINDOW, builder, window_size=3)

        assert bag == Counter({"bank": 1, "of": 1})

    def test_window_size_validated(self):
        """Even window sizes are rejected."""
        with pytest.raises(ConfigurationError):
            extract_context(SENTENCE, 4, "WINDOW", BagOfWordsBuilder(), window_size=4)


class TestOptionValidation:
    """Tests for option parsing and window validation."""

    def test_parse_is_case_insensitive(self):
        """Option names can be given in any case."""
        assert parse_context_option("all_words_r") is ContextOption.ALL_WORDS_R
        assert parse_context_option(ContextOption.POS) is ContextOption.POS

    def test_unknown_option(self):
        """Unknown option names are configuration errors."""
        with pytest.raises(ConfigurationError, match="SENTENCE"):
            parse_context_option("SENTENCE")

    @pytest.mark.parametrize("window_size", [1, 2, 4, 10, -3, 0])
    def test_invalid_window_sizes(self, window_size):
        """Window sizes must be odd and at least 3."""
        with pytest.raises(ConfigurationError):
            validate_window_size(window_size)

    @pytest.mark.parametrize("window_size", [3, 5, 11])
    def test_valid_window_sizes(self, window_size):
        """Odd window sizes from 3 up are accepted."""
        assert validate_window_size(window_size) == window_size

    def test_non_integer_window_size(self):
        """Window sizes must be integers."""
        with pytest.raises(ConfigurationError):
            validate_window_size(3.0)
