"""End-to-end Lesk run: settings -> corpus -> predictions -> metrics."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Tuple

from lesk_wsd.config import LeskSettings
from lesk_wsd.corpus import AnnotatedCorpus, read_test_corpus
from lesk_wsd.errors import ResourceUnavailableError
from lesk_wsd.text_io import load_stopwords
from lesk_wsd.text_processing import SpacyAnnotator
from lesk_wsd.wsd.bag_of_words import BagOfWordsBuilder
from lesk_wsd.wsd.base import Annotator, EvaluationResult, Prediction
from lesk_wsd.wsd.evaluation import evaluate, rank_senses
from lesk_wsd.wsd.lesk import LeskPredictor
from lesk_wsd.wsd.signatures import SignatureGenerator
from lesk_wsd.wsd.wordnet_utils import WordNetSenseInventory

logger = logging.getLogger(__name__)


@dataclass
class LeskRun:
    """Everything produced by one run."""

    settings: LeskSettings
    corpus: AnnotatedCorpus
    predictions: List[Prediction]
    result: EvaluationResult


def build_predictor(settings: LeskSettings) -> Tuple[LeskPredictor, Annotator]:
    """Wire the production collaborators (stopwords, spaCy, WordNet).

    Returns:
        The predictor and the annotator it uses, so the corpus can be read
        with the same annotation

    Raises:
        ResourceUnavailableError: If the stopword file, spaCy model or
            WordNet data cannot be loaded
    """
    stopwords = load_stopwords(settings.stopwords_path)
    logger.info(f"Loading spaCy model {settings.spacy_model}...")
    annotator = SpacyAnnotator(settings.spacy_model)
    inventory = WordNetSenseInventory()
    bag_builder = BagOfWordsBuilder(stopwords=stopwords, annotator=annotator)
    generator = SignatureGenerator(inventory, bag_builder)
    return LeskPredictor(generator, bag_builder), annotator


def run_lesk(
    corpus_path: Path | str,
    settings: LeskSettings,
    *,
    show_progress: bool = False,
) -> LeskRun:
    """Predict and evaluate every ambiguous word of a test corpus.

    Args:
        corpus_path: Test corpus file
        settings: Validated run settings (see ``load_settings``)
        show_progress: Whether to show a progress bar

    Returns:
        LeskRun with the parsed corpus, the predictions and the averaged metrics
    """
    settings = settings.validate()
    predictor, annotator = build_predictor(settings)
    corpus = read_test_corpus(corpus_path, annotator)

    predictions = predictor.predict_corpus(
        corpus,
        context_option=settings.context_option,
        window_size=settings.window_size,
        similarity=settings.similarity,
        max_workers=settings.workers,
        show_progress=show_progress,
    )
    result = evaluate(predictions, k=settings.top_k)
    return LeskRun(settings=settings, corpus=corpus, predictions=predictions, result=result)


def save_report(run: LeskRun, output_path: Path) -> None:
    """Write settings, metrics and per-occurrence top senses as JSON.

    Raises:
        ResourceUnavailableError: If the report file cannot be written
    """
    report = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "corpus_path": str(run.corpus.path),
        "settings": {
            "context_option": run.settings.context_option,
            "window_size": run.settings.window_size,
            "similarity": run.settings.similarity,
            "top_k": run.settings.top_k,
        },
        "total_occurrences": len(run.predictions),
        "metrics": run.result.to_dict(),
        "occurrences": [
            {
                **prediction.occurrence.to_dict(),
                "top_senses": [
                    {"sense_key": sense_key, "score": score}
                    for sense_key, score in rank_senses(prediction.scores, run.settings.top_k)
                ],
            }
            for prediction in run.predictions
        ],
    }

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(report, f, indent=2)
    except OSError as exc:
        raise ResourceUnavailableError(f"Failed to write report {output_path}: {exc}") from exc
    logger.info(f"Report saved: {output_path}")
