"""Signature generation: one bag of words per candidate sense."""

from __future__ import annotations

import logging
import threading
from collections import Counter
from dataclasses import replace
from typing import Dict, List, Tuple

from lesk_wsd.wsd.bag_of_words import BagOfWordsBuilder
from lesk_wsd.wsd.base import InventoryPOS, SenseInventory, Signature, to_inventory_pos

logger = logging.getLogger(__name__)


class SignatureGenerator:
    """Build signatures for every sense of a (lemma, POS) pair.

    Signatures are cached per (lemma, inventory POS). Cache misses are
    computed under a lock, so the inventory and the gloss annotator are never
    called from two threads at once. Callers receive their own copies of the
    cached bags.

    Example:
        >>> generator = SignatureGenerator(WordNetSenseInventory(), BagOfWordsBuilder())
        >>> [s.sense_key for s in generator.signatures("bank", "NOUN")][:2]
        ['bank%1:17:01::', 'bank%1:14:00::']
    """

    def __init__(self, inventory: SenseInventory, bag_builder: BagOfWordsBuilder):
        self.inventory = inventory
        self.bag_builder = bag_builder
        self._cache: Dict[Tuple[str, InventoryPOS], Tuple[Signature, ...]] = {}
        self._lock = threading.Lock()

    def signatures(self, lemma: str, pos: str | InventoryPOS | None) -> List[Signature]:
        """Return the signatures of all senses of (lemma, pos) in inventory order.

        Args:
            lemma: Lemma to look up
            pos: Corpus POS tag (ADJ, ADV, NOUN, VERB) or InventoryPOS

        Returns:
            List of signatures; empty when the POS is not disambiguable or the
            lemma is unknown to the inventory
        """
        inventory_pos = pos if isinstance(pos, InventoryPOS) else to_inventory_pos(pos)
        if inventory_pos is None or not lemma:
            return []

        key = (lemma.lower(), inventory_pos)
        cached = self._cache.get(key)
        if cached is None:
            with self._lock:
                cached = self._cache.get(key)
                if cached is None:
                    cached = self._build(lemma, inventory_pos)
                    self._cache[key] = cached
        return [replace(signature, bag=Counter(signature.bag)) for signature in cached]

    def _build(self, lemma: str, inventory_pos: InventoryPOS) -> Tuple[Signature, ...]:
        candidates = self.inventory.lookup_senses(lemma, inventory_pos)
        signatures = tuple(
            Signature(
                sense_key=candidate.sense_key,
                bag=self.bag_builder.to_bag(candidate.gloss),
                frequency=candidate.frequency,
            )
            for candidate in candidates
        )
        if not signatures:
            logger.debug(f"No senses for ({lemma}, {inventory_pos.value}) in {self.inventory.name}")
        return signatures
