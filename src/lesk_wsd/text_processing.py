"""spaCy-based tokenization, lemmatization and POS tagging."""

from __future__ import annotations

import threading
from functools import lru_cache
from typing import List

import spacy
from spacy.language import Language
from spacy.tokens import Doc

from .constants import ANNOTATION_DISABLED, COMPONENT_SENTER, DEFAULT_MODEL_NAME
from .errors import ResourceUnavailableError
from .wsd.base import Annotator, Sentence, Token


@lru_cache
def initialize_spacy_model(model_name: str = DEFAULT_MODEL_NAME) -> Language:
    """Load and cache spaCy model."""

    try:
        nlp = spacy.load(model_name, disable=ANNOTATION_DISABLED)
    except OSError as exc:
        raise ResourceUnavailableError(
            f"spaCy model '{model_name}' is not installed "
            f"(run: python -m spacy download {model_name})"
        ) from exc
    if COMPONENT_SENTER in nlp.disabled:
        nlp.enable_pipe(COMPONENT_SENTER)
    return nlp


def tokenize_and_annotate(text: str, nlp: Language, *, pretokenized: bool = False) -> List[Sentence]:
    """Annotate text and return one Sentence per spaCy sentence.

    Args:
        text: Raw text
        nlp: Loaded spaCy pipeline
        pretokenized: Treat whitespace-separated words as the tokens instead of
            running spaCy's tokenizer, so token positions follow the input

    Returns:
        List of sentences with surface, lemma and universal POS per token
    """

    if text is None:
        raise ValueError("text must not be None")

    if pretokenized:
        words = text.split()
        if not words:
            return []
        doc = nlp(Doc(nlp.vocab, words=words))
    else:
        doc = nlp(text)

    if not doc.has_annotation("SENT_START"):
        return [_to_sentence(doc)] if len(doc) else []

    sentences: List[Sentence] = []
    for sent in doc.sents:
        sentences.append(_to_sentence(sent))
    return sentences


def _to_sentence(span) -> Sentence:
    tokens = tuple(
        Token(
            surface=token.text,
            position=position,
            lemma=token.lemma_.lower() or None,
            pos=token.pos_ or None,
        )
        for position, token in enumerate(span)
    )
    return Sentence(tokens)


class SpacyAnnotator(Annotator):
    """Annotator adapter backed by a spaCy pipeline.

    Corpus lines are whitespace pre-tokenized by default so that the token
    positions of the test corpus address the annotated sentence directly.
    Free text (glosses) always goes through spaCy's own tokenizer.
    Calls into the shared pipeline are serialized with a lock.

    Example:
        >>> annotator = SpacyAnnotator()
        >>> [t.lemma for t in annotator.tokenize("Cats are running.")]
        ['cat', 'be', 'run', '.']
    """

    def __init__(
        self,
        model_name: str = DEFAULT_MODEL_NAME,
        *,
        pretokenized: bool = True,
        nlp: Language | None = None,
    ):
        self.model_name = model_name
        self.pretokenized = pretokenized
        self.nlp = nlp if nlp is not None else initialize_spacy_model(model_name)
        self._lock = threading.Lock()

    def annotate(self, raw_line: str) -> List[Sentence]:
        with self._lock:
            return tokenize_and_annotate(raw_line, self.nlp, pretokenized=self.pretokenized)

    def tokenize(self, text: str) -> List[Token]:
        with self._lock:
            sentences = tokenize_and_annotate(text, self.nlp, pretokenized=False)
        return [token for sentence in sentences for token in sentence]

