"""Context extraction around an ambiguous word.

Policies:
- ALL_WORDS:   every word of the sentence
- ALL_WORDS_R: every word except the ambiguous word itself
- WINDOW:      words within (window_size - 1) / 2 positions of the ambiguous word,
               clipped to the sentence bounds
- POS:         words sharing the POS tag the annotator gave the ambiguous word

Stopwords and punctuation are removed by the BagOfWordsBuilder in every case.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from lesk_wsd.constants import (
    CONTEXT_ALL_WORDS,
    CONTEXT_ALL_WORDS_R,
    CONTEXT_POS,
    CONTEXT_WINDOW,
    DEFAULT_WINDOW_SIZE,
    MIN_WINDOW_SIZE,
)
from lesk_wsd.errors import ConfigurationError
from lesk_wsd.wsd.bag_of_words import BagOfWordsBuilder
from lesk_wsd.wsd.base import BagOfWords, Sentence, Token


class ContextOption(str, Enum):
    """Context construction policies."""

    ALL_WORDS = CONTEXT_ALL_WORDS
    ALL_WORDS_R = CONTEXT_ALL_WORDS_R
    WINDOW = CONTEXT_WINDOW
    POS = CONTEXT_POS


def parse_context_option(value: str | ContextOption) -> ContextOption:
    """Parse a context option name (case-insensitive).

    Raises:
        ConfigurationError: If the name is not a known option
    """
    if isinstance(value, ContextOption):
        return value
    try:
        return ContextOption(str(value).strip().upper())
    except ValueError as exc:
        valid = ", ".join(option.value for option in ContextOption)
        raise ConfigurationError(
            f"Invalid context option '{value}' (expected one of: {valid})"
        ) from exc


def validate_window_size(window_size: int) -> int:
    """Check that the window size is an odd integer >= 3.

    Raises:
        ConfigurationError: If the window size is even or too small
    """
    if isinstance(window_size, bool) or not isinstance(window_size, int):
        raise ConfigurationError(f"Window size must be an integer, got {window_size!r}")
    if window_size < MIN_WINDOW_SIZE:
        raise ConfigurationError(
            f"Window size must be at least {MIN_WINDOW_SIZE}, got {window_size}"
        )
    if window_size % 2 == 0:
        raise ConfigurationError(f"Window size must be odd, got {window_size}")
    return window_size


def select_context_tokens(
    sentence: Sentence,
    position: int,
    option: ContextOption,
    window_size: int = DEFAULT_WINDOW_SIZE,
    pos: Optional[str] = None,
) -> List[Token]:
    """Pick the tokens that form the context of the word at ``position``."""
    if not 0 <= position < len(sentence):
        raise IndexError(f"position {position} out of range for sentence of length {len(sentence)}")

    if option is ContextOption.ALL_WORDS:
        return list(sentence)

    if option is ContextOption.ALL_WORDS_R:
        return [token for i, token in enumerate(sentence) if i != position]

    if option is ContextOption.WINDOW:
        half_width = (window_size - 1) // 2
        start = max(0, position - half_width)
        end = min(len(sentence), position + half_width + 1)
        return list(sentence.tokens[start:end])

    target_pos = sentence[position].pos or pos
    if not target_pos:
        return []
    target_pos = target_pos.upper()
    return [token for token in sentence if token.pos and token.pos.upper() == target_pos]


def extract_context(
    sentence: Sentence,
    position: int,
    option: str | ContextOption,
    bag_builder: BagOfWordsBuilder,
    window_size: int = DEFAULT_WINDOW_SIZE,
    pos: Optional[str] = None,
) -> BagOfWords:
    """Build the context bag of words for the word at ``position``.

    Args:
        sentence: Annotated sentence containing the ambiguous word
        position: 0-based index of the ambiguous word
        option: Context policy
        bag_builder: Builder applying stopword/punctuation filtering
        window_size: Odd window size >= 3 (WINDOW policy only)
        pos: Fallback POS tag (POS policy only), used when the annotator gave
             the ambiguous word no tag of its own

    Returns:
        Bag of words of the selected context tokens
    """
    option = parse_context_option(option)
    if option is ContextOption.WINDOW:
        validate_window_size(window_size)
    tokens = select_context_tokens(sentence, position, option, window_size=window_size, pos=pos)
    return bag_builder.from_tokens(tokens)
