from __future__ import annotations

import pytest

from lesk_wsd.errors import ResourceUnavailableError
from lesk_wsd.text_processing import SpacyAnnotator, initialize_spacy_model, tokenize_and_annotate


@pytest.fixture(scope="session")
def nlp():
    try:
        return initialize_spacy_model()
    except ResourceUnavailableError:
        pytest.skip("spaCy model en_core_web_sm is not installed")


def test_tokenize_simple_sentence(nlp) -> None:
    sentences = tokenize_and_annotate("Cats are running.", nlp)

    lemmas = [t.lemma for sentence in sentences for t in sentence]
    assert "cat" in lemmas
    assert "run" in lemmas


def test_pos_tags_are_universal(nlp) -> None:
    sentences = tokenize_and_annotate("The bank approved the loan.", nlp)

    tags = {t.surface: t.pos for t in sentences[0]}
    assert tags["bank"] == "NOUN"
    assert tags["approved"] == "VERB"


def test_pretokenized_keeps_whitespace_positions(nlp) -> None:
    text = "He said , `` Do n't go ! ''"

    sentences = tokenize_and_annotate(text, nlp, pretokenized=True)

    tokens = [t for sentence in sentences for t in sentence]
    assert [t.surface for t in tokens] == text.split()


def test_multiple_sentences(nlp) -> None:
    sentences = tokenize_and_annotate("It rained. We stayed home.", nlp)

    assert len(sentences) == 2
    assert [t.position for t in sentences[1]] == list(range(len(sentences[1])))


def test_empty_text(nlp) -> None:
    assert tokenize_and_annotate("", nlp) == []
    assert tokenize_and_annotate("   ", nlp, pretokenized=True) == []


def test_annotator_pretokenizes_corpus_and_tokenizes_glosses(nlp) -> None:
    annotator = SpacyAnnotator(nlp=nlp)

    corpus_sentence = annotator.annotate("fishermen sat on the bank")
    gloss_tokens = annotator.tokenize("sloping land (especially the slope beside a body of water)")

    assert [t.surface for s in corpus_sentence for t in s] == ["fishermen", "sat", "on", "the", "bank"]
    assert "(" in [t.surface for t in gloss_tokens]
    assert "slope" in [t.lemma for t in gloss_tokens]


def test_missing_model() -> None:
    with pytest.raises(ResourceUnavailableError, match="python -m spacy download"):
        initialize_spacy_model("xx_no_such_model_sm")
