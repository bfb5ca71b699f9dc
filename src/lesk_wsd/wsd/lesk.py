"""Lesk Word Sense Disambiguation.

For each ambiguous word in a corpus, this module:
1. Builds a signature (bag of words of the gloss) for every candidate sense
2. Builds the context bag of words from the word's sentence
3. Scores every signature against the context with the selected similarity
4. Returns the sense key -> score map for the occurrence

Occurrences are independent of each other, so they can be scored on a
thread pool; results always come back in corpus order.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING, List, Sequence

from tqdm import tqdm

from lesk_wsd.constants import (
    DEFAULT_CONTEXT_OPTION,
    DEFAULT_SIMILARITY,
    DEFAULT_WINDOW_SIZE,
)
from lesk_wsd.errors import ConfigurationError
from lesk_wsd.wsd.bag_of_words import BagOfWordsBuilder
from lesk_wsd.wsd.base import AmbiguousOccurrence, Prediction, PredictionMap, Sentence
from lesk_wsd.wsd.context import (
    ContextOption,
    extract_context,
    parse_context_option,
    validate_window_size,
)
from lesk_wsd.wsd.signatures import SignatureGenerator
from lesk_wsd.wsd.similarity import SimilarityMetric, compute_similarity, parse_similarity_metric

if TYPE_CHECKING:
    from lesk_wsd.corpus import AnnotatedCorpus

logger = logging.getLogger(__name__)


class LeskPredictor:
    """Score the candidate senses of ambiguous words by gloss/context overlap.

    Attributes:
        signature_generator: Produces one signature per candidate sense
        bag_builder: Builds context bags (same normalization as signatures)

    Example:
        >>> predictor = LeskPredictor(generator, builder)
        >>> predictions = predictor.predict(sentences, occurrences, "WINDOW", 5, "COSINE")
        >>> sorted(predictions[0].scores)  # one entry per candidate sense
        ['bank%1:04:00::', 'bank%1:06:00::', ...]
    """

    def __init__(self, signature_generator: SignatureGenerator, bag_builder: BagOfWordsBuilder):
        self.signature_generator = signature_generator
        self.bag_builder = bag_builder

    @property
    def name(self) -> str:
        return f"Lesk ({self.signature_generator.inventory.name})"

    # =========================================================================
    # SINGLE OCCURRENCE
    # =========================================================================

    def predict_occurrence(
        self,
        sentence: Sentence,
        occurrence: AmbiguousOccurrence,
        context_option: ContextOption = ContextOption.ALL_WORDS,
        window_size: int = DEFAULT_WINDOW_SIZE,
        similarity: SimilarityMetric = SimilarityMetric.JACCARD,
    ) -> PredictionMap:
        """Score every candidate sense of one occurrence.

        Returns:
            Map from sense key to similarity; empty when the inventory has no
            senses for the occurrence's (lemma, POS)
        """
        signatures = self.signature_generator.signatures(occurrence.lemma, occurrence.pos)
        if not signatures:
            return {}

        context = extract_context(
            sentence,
            occurrence.position,
            context_option,
            self.bag_builder,
            window_size=window_size,
            pos=occurrence.pos,
        )
        return {
            signature.sense_key: compute_similarity(context, signature.bag, similarity)
            for signature in signatures
        }

    # =========================================================================
    # CORPUS
    # =========================================================================

    def predict(
        self,
        sentences: Sequence[Sentence],
        occurrences: Sequence[AmbiguousOccurrence],
        context_option: str | ContextOption = DEFAULT_CONTEXT_OPTION,
        window_size: int = DEFAULT_WINDOW_SIZE,
        similarity: str | SimilarityMetric = DEFAULT_SIMILARITY,
        max_workers: int = 1,
        show_progress: bool = False,
    ) -> List[Prediction]:
        """Predict sense scores for every occurrence, in corpus order.

        Args:
            sentences: Annotated sentences, indexed by occurrence.sentence_index
            occurrences: Ambiguous words to disambiguate
            context_option: One of ALL_WORDS, ALL_WORDS_R, WINDOW, POS
            window_size: Odd window size >= 3 (validated for every option)
            similarity: One of JACCARD, COSINE
            max_workers: Number of worker threads (1 = sequential)
            show_progress: Whether to show a progress bar

        Returns:
            One Prediction per occurrence

        Raises:
            ConfigurationError: If an option is invalid (checked before any work)
        """
        option = parse_context_option(context_option)
        validate_window_size(window_size)
        metric = parse_similarity_metric(similarity)
        if max_workers < 1:
            raise ConfigurationError(f"max_workers must be at least 1, got {max_workers}")

        def run(occurrence: AmbiguousOccurrence) -> Prediction:
            sentence = sentences[occurrence.sentence_index]
            scores = self.predict_occurrence(sentence, occurrence, option, window_size, metric)
            return Prediction(occurrence=occurrence, scores=scores)

        logger.info(
            f"Predicting {len(occurrences)} occurrences with {self.name} "
            f"(context={option.value}, window={window_size}, similarity={metric.value})"
        )

        if max_workers == 1:
            iterator = occurrences
            if show_progress:
                iterator = tqdm(occurrences, desc="Disambiguating", unit="word")
            predictions = [run(occurrence) for occurrence in iterator]
        else:
            with ThreadPoolExecutor(max_workers=max_workers) as executor:
                results = executor.map(run, occurrences)
                if show_progress:
                    results = tqdm(results, desc="Disambiguating", unit="word", total=len(occurrences))
                predictions = list(results)

        missing = sum(1 for prediction in predictions if not prediction.has_candidates)
        if missing:
            logger.info(f"{missing}/{len(predictions)} occurrences have no candidate senses")
        return predictions

    def predict_corpus(self, corpus: "AnnotatedCorpus", **options) -> List[Prediction]:
        """Predict every occurrence of an AnnotatedCorpus (see ``predict``)."""
        return self.predict(corpus.sentences, corpus.occurrences, **options)

