"""Base classes and types for Lesk Word Sense Disambiguation.

This module defines the records shared by every stage of the pipeline
(tokens, sentences, occurrences, sense candidates, signatures, predictions)
and the abstract interfaces of the two external collaborators:

- SenseInventory: lexical knowledge base (WordNet in production)
- Annotator: tokenizer, lemmatizer and POS tagger (spaCy in production)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, Iterator, List, Optional, Tuple

from lesk_wsd.constants import F1, GROUND_TRUTH, LEMMA, POS, POSITION, PRECISION, RECALL, SENTENCE_ID

# Multiset of normalized words
BagOfWords = Counter

# Sense key -> similarity(context, signature)
PredictionMap = Dict[str, float]


class InventoryPOS(str, Enum):
    """Parts of speech the sense inventory can disambiguate."""

    ADJECTIVE = "ADJECTIVE"
    ADVERB = "ADVERB"
    NOUN = "NOUN"
    VERB = "VERB"


# Corpus POS tags (universal tagset) to inventory POS
CORPUS_TO_INVENTORY_POS: dict[str, InventoryPOS] = {
    "ADJ": InventoryPOS.ADJECTIVE,
    "ADV": InventoryPOS.ADVERB,
    "NOUN": InventoryPOS.NOUN,
    "VERB": InventoryPOS.VERB,
}


def to_inventory_pos(pos: Optional[str]) -> Optional[InventoryPOS]:
    """Map a corpus POS tag to the inventory POS vocabulary.

    Accepts the corpus tags (ADJ, ADV, NOUN, VERB) as well as the inventory
    names themselves (ADJECTIVE, ADVERB, NOUN, VERB), case-insensitively.

    Args:
        pos: POS tag from the corpus or annotator

    Returns:
        InventoryPOS, or None when the word cannot be disambiguated

    Examples:
        >>> to_inventory_pos("ADJ")
        <InventoryPOS.ADJECTIVE: 'ADJECTIVE'>
        >>> to_inventory_pos("DET") is None
        True
    """
    if not pos:
        return None

    pos_upper = pos.strip().upper()
    if pos_upper in CORPUS_TO_INVENTORY_POS:
        return CORPUS_TO_INVENTORY_POS[pos_upper]
    try:
        return InventoryPOS(pos_upper)
    except ValueError:
        return None


# =============================================================================
# CORPUS RECORDS
# =============================================================================


@dataclass(frozen=True)
class Token:
    """A single annotated word of a sentence.

    Attributes:
        surface: The word as it appears in the text
        position: 0-based index in the owning sentence
        lemma: Lemmatized form, if the annotator produced one
        pos: Universal POS tag (NOUN, VERB, ADJ, ...), if available
    """

    surface: str
    position: int
    lemma: Optional[str] = None
    pos: Optional[str] = None


@dataclass(frozen=True)
class Sentence:
    """Ordered, immutable sequence of tokens."""

    tokens: Tuple[Token, ...] = ()

    def __len__(self) -> int:
        return len(self.tokens)

    def __getitem__(self, index: int) -> Token:
        return self.tokens[index]

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)

    @property
    def text(self) -> str:
        """Surface forms joined by single spaces."""
        return " ".join(token.surface for token in self.tokens)

    @classmethod
    def from_words(cls, words: List[str]) -> "Sentence":
        """Build an unannotated sentence from surface forms."""
        return cls(tuple(Token(surface=word, position=i) for i, word in enumerate(words)))


@dataclass(frozen=True)
class AmbiguousOccurrence:
    """A word occurrence that needs to be disambiguated.

    Attributes:
        sentence_index: Index of the sentence in the corpus
        position: 0-based token index in that sentence
        lemma: Lemma to look up in the sense inventory
        pos: Corpus POS tag (ADJ, ADV, NOUN, VERB)
        ground_truth: Acceptable sense keys; any match counts as correct
    """

    sentence_index: int
    position: int
    lemma: str
    pos: str
    ground_truth: FrozenSet[str] = field(default_factory=frozenset)

    def to_dict(self) -> dict:
        """Convert to dictionary for DataFrame operations."""
        return {
            SENTENCE_ID: self.sentence_index,
            POSITION: self.position,
            LEMMA: self.lemma,
            POS: self.pos,
            GROUND_TRUTH: ",".join(sorted(self.ground_truth)),
        }


# =============================================================================
# SENSES AND PREDICTIONS
# =============================================================================


@dataclass(frozen=True)
class SenseCandidate:
    """One sense of a (lemma, POS) pair as returned by the sense inventory.

    Attributes:
        sense_key: Unique sense identifier (e.g., "take%2:30:01::")
        gloss: Definition text of the sense
        frequency: Usage count from a sense-tagged corpus, if known
    """

    sense_key: str
    gloss: str
    frequency: Optional[int] = None


@dataclass(frozen=True)
class Signature:
    """Bag-of-words signature of one candidate sense."""

    sense_key: str
    bag: BagOfWords
    frequency: Optional[int] = None


@dataclass(frozen=True)
class Prediction:
    """Similarity scores of every candidate sense for one occurrence."""

    occurrence: AmbiguousOccurrence
    scores: PredictionMap

    @property
    def has_candidates(self) -> bool:
        return bool(self.scores)


@dataclass(frozen=True)
class EvaluationResult:
    """Top-K precision, recall and F1."""

    precision: float
    recall: float
    f1: float

    def to_dict(self) -> dict:
        return {PRECISION: self.precision, RECALL: self.recall, F1: self.f1}


# =============================================================================
# EXTERNAL COLLABORATORS
# =============================================================================


class SenseInventory(ABC):
    """Abstract lexical knowledge base.

    Implementations need not be thread-safe: SignatureGenerator serializes
    lookups when predictions run on worker threads.
    """

    @abstractmethod
    def lookup_senses(self, lemma: str, pos: InventoryPOS) -> List[SenseCandidate]:
        """Return all senses of (lemma, pos) in inventory order.

        An empty list means the lemma is unknown; it is not an error.
        """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this inventory for logging/display."""


class Annotator(ABC):
    """Abstract linguistic annotator (tokenization, lemmatization, POS tagging)."""

    @abstractmethod
    def annotate(self, raw_line: str) -> List[Sentence]:
        """Split a raw line into annotated sentences."""

    def tokenize(self, text: str) -> List[Token]:
        """Annotate free text and return its tokens as a flat list.

        Used for glosses, where sentence boundaries carry no meaning.
        """
        return [token for sentence in self.annotate(text) for token in sentence]
