"""Test-corpus reader.

The corpus is a sequence of records::

    The Fulton County Grand Jury said Friday an investigation ...
    2
    5 say VERB say%2:32:00::
    8 investigation NOUN investigation%1:09:00::,investigation%1:04:00::

i.e. the raw sentence, the number N of ambiguous words, then N lines of
``<position> <lemma> <POS> <comma-separated sense keys>`` with 0-based token
positions. Blank lines between records are ignored.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, List

from lesk_wsd.constants import ENCODING_UTF8, OCCURRENCE_FIELD_COUNT, SENSE_KEY_SEP
from lesk_wsd.errors import MalformedRecordError
from lesk_wsd.text_io import read_lines
from lesk_wsd.wsd.base import AmbiguousOccurrence, Annotator, Sentence, Token

logger = logging.getLogger(__name__)


@dataclass
class AnnotatedCorpus:
    """Sentences and the ambiguous occurrences that refer to them.

    Attributes:
        path: File the corpus was read from
        sentences: One annotated sentence per record
        occurrences: All occurrences in corpus order
    """

    path: Path
    sentences: List[Sentence] = field(default_factory=list)
    occurrences: List[AmbiguousOccurrence] = field(default_factory=list)

    def sentence_for(self, occurrence: AmbiguousOccurrence) -> Sentence:
        return self.sentences[occurrence.sentence_index]

    def __len__(self) -> int:
        return len(self.occurrences)


def parse_sense_keys(sense_str: str) -> FrozenSet[str]:
    """Split a comma-separated list of sense keys.

    Examples:
        >>> sorted(parse_sense_keys("become%2:30:00::,become%2:42:01::"))
        ['become%2:30:00::', 'become%2:42:01::']
    """
    return frozenset(key.strip() for key in sense_str.split(SENSE_KEY_SEP) if key.strip())


def merge_sentences(sentences: List[Sentence]) -> Sentence:
    """Concatenate annotated sentences into one, renumbering token positions."""
    tokens: List[Token] = []
    for sentence in sentences:
        for token in sentence:
            tokens.append(Token(surface=token.surface, position=len(tokens), lemma=token.lemma, pos=token.pos))
    return Sentence(tuple(tokens))


def parse_occurrence_line(
    line: str,
    sentence: Sentence,
    sentence_index: int,
    path: Path,
    line_number: int,
) -> AmbiguousOccurrence:
    """Parse ``<position> <lemma> <POS> <sense keys>`` into an occurrence.

    Raises:
        MalformedRecordError: On wrong field count, a non-integer or
            out-of-range position, or an empty sense-key list
    """
    fields = line.split()
    if len(fields) != OCCURRENCE_FIELD_COUNT:
        raise MalformedRecordError(
            path,
            line_number,
            f"expected {OCCURRENCE_FIELD_COUNT} fields "
            f"'<position> <lemma> <POS> <sense keys>', got {len(fields)}: {line!r}",
        )

    position_str, lemma, pos, sense_str = fields
    try:
        position = int(position_str)
    except ValueError:
        raise MalformedRecordError(path, line_number, f"position is not an integer: {position_str!r}") from None

    if not 0 <= position < len(sentence):
        raise MalformedRecordError(
            path,
            line_number,
            f"position {position} is outside the sentence ({len(sentence)} tokens)",
        )

    ground_truth = parse_sense_keys(sense_str)
    if not ground_truth:
        raise MalformedRecordError(path, line_number, "empty ground-truth sense key list")

    return AmbiguousOccurrence(
        sentence_index=sentence_index,
        position=position,
        lemma=lemma,
        pos=pos.upper(),
        ground_truth=ground_truth,
    )


def parse_test_corpus(lines: List[str], annotator: Annotator, path: Path) -> AnnotatedCorpus:
    """Parse corpus lines into sentences and occurrences.

    Raises:
        MalformedRecordError: On the first record that breaks the format; no
            partial corpus is returned
    """
    corpus = AnnotatedCorpus(path=path)
    numbered = iter(enumerate(lines, start=1))

    for line_number, line in numbered:
        if not line.strip():
            continue

        sentence = merge_sentences(annotator.annotate(line))
        sentence_index = len(corpus.sentences)
        corpus.sentences.append(sentence)

        count_line_number, count_line = next(numbered, (line_number + 1, None))
        if count_line is None:
            raise MalformedRecordError(
                path, count_line_number, "unexpected end of file: missing occurrence count"
            )
        try:
            count = int(count_line.strip())
        except ValueError:
            raise MalformedRecordError(
                path, count_line_number, f"occurrence count is not an integer: {count_line!r}"
            ) from None
        if count < 0:
            raise MalformedRecordError(path, count_line_number, f"negative occurrence count: {count}")

        occ_line_number = count_line_number
        for _ in range(count):
            occ_line_number, occ_line = next(numbered, (occ_line_number + 1, None))
            if occ_line is None:
                raise MalformedRecordError(
                    path,
                    occ_line_number,
                    f"unexpected end of file: record starting at line {line_number} "
                    f"declares {count} occurrences",
                )
            corpus.occurrences.append(
                parse_occurrence_line(occ_line, sentence, sentence_index, path, occ_line_number)
            )

    return corpus


def read_test_corpus(file_path: Path | str, annotator: Annotator, encoding: str = ENCODING_UTF8) -> AnnotatedCorpus:
    """Read and annotate a test corpus file.

    Args:
        file_path: Path to the corpus file
        annotator: Annotator used to tokenize each raw sentence
        encoding: File encoding

    Returns:
        Parsed AnnotatedCorpus

    Raises:
        ResourceUnavailableError: If the file cannot be read
        MalformedRecordError: If a record breaks the format
    """
    path = Path(file_path)
    lines = read_lines(path, encoding=encoding)
    corpus = parse_test_corpus(lines, annotator, path)
    logger.info(
        f"Loaded {len(corpus.sentences)} sentences with {len(corpus.occurrences)} "
        f"ambiguous words from {path}"
    )
    return corpus
