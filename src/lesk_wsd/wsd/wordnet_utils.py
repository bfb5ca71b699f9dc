"""WordNet sense inventory for Lesk disambiguation.

This module provides:
- Mapping of inventory POS to WordNet POS tags
- Gloss construction for synsets (definition plus usage examples)
- WordNetSenseInventory: SenseInventory backed by nltk's WordNet reader
"""

import logging
import threading
from typing import List, Optional

from nltk.corpus import wordnet as wn
from nltk.corpus.reader.wordnet import Lemma, Synset

from lesk_wsd.errors import ResourceUnavailableError
from lesk_wsd.wsd.base import InventoryPOS, SenseCandidate, SenseInventory

logger = logging.getLogger(__name__)

# =============================================================================
# POS MAPPING
# =============================================================================

# Inventory POS to WordNet POS tags
# Literal tags: wn.NOUN would load the corpus on import
INVENTORY_TO_WORDNET_POS: dict[InventoryPOS, str] = {
    InventoryPOS.NOUN: "n",
    InventoryPOS.VERB: "v",
    InventoryPOS.ADJECTIVE: "a",
    InventoryPOS.ADVERB: "r",
}


def ensure_wordnet_available() -> None:
    """Check that the WordNet corpus can be loaded.

    Raises:
        ResourceUnavailableError: If the nltk WordNet data is not installed
    """
    try:
        wn.ensure_loaded()
    except LookupError as exc:
        raise ResourceUnavailableError(
            "WordNet data is not installed (run: python -m nltk.downloader wordnet)"
        ) from exc


def normalize_lemma(lemma: str) -> str:
    """Lower-case a lemma and join multi-word expressions with underscores."""
    return "_".join(lemma.lower().split())


# =============================================================================
# GLOSSES
# =============================================================================


def get_gloss(synset: Synset, include_examples: bool = True) -> str:
    """Build the gloss text of a synset.

    The gloss is the definition followed by the quoted usage examples, the
    way WordNet browsers print it:
    ``sloping land (especially the slope beside a body of water); "they pulled the canoe up on the bank"``

    Args:
        synset: WordNet Synset object
        include_examples: Whether to append usage examples

    Returns:
        Gloss string; empty if the synset has neither definition nor examples

    Examples:
        >>> from nltk.corpus import wordnet as wn
        >>> get_gloss(wn.synset("bank.n.01"), include_examples=False)
        'sloping land (especially the slope beside a body of water)'
    """
    parts = []
    definition = (synset.definition() or "").strip()
    if definition:
        parts.append(definition)
    if include_examples:
        parts.extend(f'"{example.strip()}"' for example in synset.examples() if example.strip())
    return "; ".join(parts)


def get_frequency(lemma: Lemma) -> Optional[int]:
    """Tag count of a WordNet lemma in the sense-tagged corpus (None if unavailable)."""
    try:
        return int(lemma.count())
    except (LookupError, ValueError):
        return None


# =============================================================================
# SENSE INVENTORY
# =============================================================================


class WordNetSenseInventory(SenseInventory):
    """Sense inventory backed by WordNet.

    Every WordNet lemma of (lemma, POS) is one sense: its key is the WordNet
    sense key (e.g. ``bank%1:17:01::``), its gloss is the synset gloss and its
    frequency is the SemCor tag count. Senses come back in WordNet sense order.

    Example:
        >>> inventory = WordNetSenseInventory()
        >>> senses = inventory.lookup_senses("bank", InventoryPOS.NOUN)
        >>> senses[0].sense_key
        'bank%1:17:01::'
    """

    def __init__(self, include_examples: bool = True):
        self.include_examples = include_examples
        ensure_wordnet_available()
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return "WordNet"

    def lookup_senses(self, lemma: str, pos: InventoryPOS) -> List[SenseCandidate]:
        if not lemma or not lemma.strip():
            return []

        wn_pos = INVENTORY_TO_WORDNET_POS[InventoryPOS(pos)]
        normalized = normalize_lemma(lemma)
        # nltk reads data files through shared seekable handles
        with self._lock:
            lemmas = wn.lemmas(normalized, pos=wn_pos)
            if not lemmas:
                logger.debug(f"No WordNet senses for ({normalized}, {wn_pos})")
                return []

            return [
                SenseCandidate(
                    sense_key=wn_lemma.key(),
                    gloss=get_gloss(wn_lemma.synset(), include_examples=self.include_examples),
                    frequency=get_frequency(wn_lemma),
                )
                for wn_lemma in lemmas
            ]
