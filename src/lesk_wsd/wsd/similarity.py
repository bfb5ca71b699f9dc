"""Similarity measures between two bags of words."""

from __future__ import annotations

import math
from enum import Enum

import numpy as np

from lesk_wsd.constants import SIM_COSINE, SIM_JACCARD
from lesk_wsd.errors import ConfigurationError
from lesk_wsd.wsd.base import BagOfWords


class SimilarityMetric(str, Enum):
    """Supported overlap measures."""

    JACCARD = SIM_JACCARD
    COSINE = SIM_COSINE


def parse_similarity_metric(value: str | SimilarityMetric) -> SimilarityMetric:
    """Parse a metric name (case-insensitive).

    Raises:
        ConfigurationError: If the name is not a known metric
    """
    if isinstance(value, SimilarityMetric):
        return value
    try:
        return SimilarityMetric(str(value).strip().upper())
    except ValueError as exc:
        valid = ", ".join(m.value for m in SimilarityMetric)
        raise ConfigurationError(
            f"Invalid similarity metric '{value}' (expected one of: {valid})"
        ) from exc


def jaccard_similarity(bag_a: BagOfWords, bag_b: BagOfWords) -> float:
    """Jaccard index over the distinct words of both bags.

    Returns 0.0 when both bags are empty.
    """
    words_a = {word for word, count in bag_a.items() if count > 0}
    words_b = {word for word, count in bag_b.items() if count > 0}
    union = words_a | words_b
    if not union:
        return 0.0
    return len(words_a & words_b) / len(union)


def cosine_similarity(bag_a: BagOfWords, bag_b: BagOfWords) -> float:
    """Cosine similarity of the term-frequency vectors of both bags.

    Dot product and squared norms are integer sums, so a bag compared with
    itself scores exactly 1.0 and equal overlaps give equal scores.

    Returns 0.0 when either bag is empty.
    """
    vocabulary = sorted(set(bag_a) | set(bag_b))
    if not vocabulary:
        return 0.0

    vec_a = np.array([bag_a.get(word, 0) for word in vocabulary], dtype=np.int64)
    vec_b = np.array([bag_b.get(word, 0) for word in vocabulary], dtype=np.int64)
    sq_a = int(np.dot(vec_a, vec_a))
    sq_b = int(np.dot(vec_b, vec_b))
    if sq_a == 0 or sq_b == 0:
        return 0.0

    score = int(np.dot(vec_a, vec_b)) / math.sqrt(sq_a * sq_b)
    return min(max(score, 0.0), 1.0)


def compute_similarity(
    bag_a: BagOfWords,
    bag_b: BagOfWords,
    metric: str | SimilarityMetric = SimilarityMetric.JACCARD,
) -> float:
    """Score the overlap of two bags with the selected metric.

    Both metrics are symmetric and bounded to [0, 1].

    Examples:
        >>> from collections import Counter
        >>> compute_similarity(Counter(["river", "flow"]), Counter(["river"]), "JACCARD")
        0.5
    """
    metric = parse_similarity_metric(metric)
    if metric is SimilarityMetric.JACCARD:
        return jaccard_similarity(bag_a, bag_b)
    return cosine_similarity(bag_a, bag_b)
