"""Top-K evaluation of Lesk predictions against ground-truth sense keys.

Usage:
    from lesk_wsd.wsd.evaluation import evaluate

    predictions = predictor.predict_corpus(corpus)
    result = evaluate(predictions, k=1)
    print(result.precision, result.recall, result.f1)
"""

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

import pandas as pd

from lesk_wsd.constants import (
    EVALUATION_COLUMNS,
    METRIC_COLUMNS,
    N_CANDIDATES,
    TOP_SCORE,
    TOP_SENSE,
    TOTAL,
)
from lesk_wsd.errors import ConfigurationError
from lesk_wsd.wsd.base import EvaluationResult, Prediction, PredictionMap

logger = logging.getLogger(__name__)

ZERO_RESULT = EvaluationResult(precision=0.0, recall=0.0, f1=0.0)


def _check_k(k: int) -> None:
    if k < 1:
        raise ConfigurationError(f"K must be at least 1, got {k}")


def rank_senses(prediction_map: PredictionMap, k: Optional[int] = None) -> List[Tuple[str, float]]:
    """Rank sense keys by score (descending), breaking ties by sense key (ascending).

    Args:
        prediction_map: Sense key -> similarity
        k: Keep only the top k entries (all when None)

    Returns:
        List of (sense_key, score) pairs

    Examples:
        >>> rank_senses({"b%1": 0.5, "a%1": 0.5, "c%1": 0.9})
        [('c%1', 0.9), ('a%1', 0.5), ('b%1', 0.5)]
    """
    ranked = sorted(prediction_map.items(), key=lambda item: (-item[1], item[0]))
    return ranked if k is None else ranked[:k]


def f1_score(precision: float, recall: float) -> float:
    """Harmonic mean of precision and recall (0.0 when both are 0)."""
    if precision + recall == 0:
        return 0.0
    return 2 * precision * recall / (precision + recall)


def evaluate_single(
    ground_truth: Iterable[str],
    prediction_map: PredictionMap,
    k: int,
) -> EvaluationResult:
    """Precision/recall/F1 at top K for one occurrence.

    A predicted key is a true positive if it is any of the ground-truth keys.

    Args:
        ground_truth: Acceptable sense keys (never empty for a well-formed occurrence)
        prediction_map: Sense key -> similarity
        k: Number of top-ranked senses to consider

    Returns:
        EvaluationResult with:
        - precision = TP / min(k, number of candidates), 0 without candidates
        - recall = TP / |ground_truth|
        - f1 = harmonic mean of both
    """
    _check_k(k)
    gold = set(ground_truth)
    top_k = [sense_key for sense_key, _ in rank_senses(prediction_map, k)]
    if not top_k or not gold:
        return ZERO_RESULT

    true_positives = sum(1 for sense_key in top_k if sense_key in gold)
    precision = true_positives / len(top_k)
    recall = true_positives / len(gold)
    return EvaluationResult(precision=precision, recall=recall, f1=f1_score(precision, recall))


def compute_metrics(results: Sequence[EvaluationResult]) -> EvaluationResult:
    """Average each metric arithmetically over all results (zeros when empty)."""
    if not results:
        return ZERO_RESULT

    total = len(results)
    return EvaluationResult(
        precision=sum(r.precision for r in results) / total,
        recall=sum(r.recall for r in results) / total,
        f1=sum(r.f1 for r in results) / total,
    )


def evaluate(predictions: Sequence[Prediction], k: int = 1) -> EvaluationResult:
    """Average top-K precision/recall/F1 over every predicted occurrence.

    Occurrences without candidate senses count with zeros, so inventory
    misses lower the averages.
    """
    _check_k(k)
    results = [
        evaluate_single(prediction.occurrence.ground_truth, prediction.scores, k)
        for prediction in predictions
    ]
    metrics = compute_metrics(results)
    logger.info(
        f"Evaluated {len(results)} occurrences at K={k}: "
        f"P={metrics.precision:.4f} R={metrics.recall:.4f} F1={metrics.f1:.4f}"
    )
    return metrics


# =============================================================================
# REPORTING
# =============================================================================


def evaluation_to_dataframe(predictions: Sequence[Prediction], k: int = 1) -> pd.DataFrame:
    """One row per occurrence with its top sense and top-K metrics."""
    _check_k(k)
    records = []
    for prediction in predictions:
        ranked = rank_senses(prediction.scores, 1)
        result = evaluate_single(prediction.occurrence.ground_truth, prediction.scores, k)
        records.append(
            {
                **prediction.occurrence.to_dict(),
                TOP_SENSE: ranked[0][0] if ranked else None,
                TOP_SCORE: ranked[0][1] if ranked else None,
                N_CANDIDATES: len(prediction.scores),
                **result.to_dict(),
            }
        )
    return pd.DataFrame(records, columns=EVALUATION_COLUMNS)


def compute_metrics_by_segment(df: pd.DataFrame, segment_key: str) -> pd.DataFrame:
    """Average metrics per segment (e.g., 'pos', 'lemma').

    Args:
        df: Output of evaluation_to_dataframe
        segment_key: Column to group by

    Returns:
        DataFrame indexed by segment with precision, recall, f1 and total
    """
    if segment_key not in df.columns:
        raise ValueError(f"Unknown segment column: {segment_key}")

    if df.empty:
        return pd.DataFrame(columns=[*METRIC_COLUMNS, TOTAL])

    grouped = df.groupby(segment_key, sort=True)
    summary = grouped[METRIC_COLUMNS].mean()
    summary[TOTAL] = grouped.size()
    return summary
