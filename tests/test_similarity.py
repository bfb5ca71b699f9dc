"""Tests for bag-of-words similarity measures."""

from collections import Counter

import pytest

from lesk_wsd.errors import ConfigurationError
from lesk_wsd.wsd.similarity import (
    SimilarityMetric,
    compute_similarity,
    cosine_similarity,
    jaccard_similarity,
    parse_similarity_metric,
)

CONTEXT = Counter({"bank": 1, "river": 1, "flow": 1})
RIVER_GLOSS = Counter({"sloping": 1, "land": 1, "river": 1, "water": 1, "flow": 1})
FINANCE_GLOSS = Counter({"financial": 1, "institution": 1, "accepts": 1, "deposits": 1})


class TestJaccardSimilarity:
    """Tests for Jaccard similarity over distinct words."""

    def test_partial_overlap(self):
        """|{river, flow}| / |union of 6 words|."""
        assert jaccard_similarity(CONTEXT, RIVER_GLOSS) == pytest.approx(2 / 6)

    def test_no_overlap(self):
        """Disjoint bags score 0."""
        assert jaccard_similarity(CONTEXT, FINANCE_GLOSS) == 0.0

    def test_identical_bags(self):
        """A non-empty bag is fully similar to itself."""
        assert jaccard_similarity(RIVER_GLOSS, RIVER_GLOSS) == 1.0

    def test_ignores_counts(self):
        """Jaccard works on the set of distinct words."""
        assert jaccard_similarity(Counter({"river": 3}), Counter({"river": 1})) == 1.0

    def test_empty_bags(self):
        """Empty input scores 0 instead of dividing by zero."""
        assert jaccard_similarity(Counter(), Counter()) == 0.0
        assert jaccard_similarity(Counter(), CONTEXT) == 0.0

    def test_symmetric(self):
        """sim(a, b) == sim(b, a)."""
        assert jaccard_similarity(CONTEXT, RIVER_GLOSS) == jaccard_similarity(RIVER_GLOSS, CONTEXT)


class TestCosineSimilarity:
    """Tests for cosine similarity over count vectors."""

    @pytest.mark.parametrize(
        "bag",
        [
            Counter({"w0": 1, "w1": 1}),
            Counter({"river": 2, "water": 1}),
            Counter({"bank": 1}),
            Counter({f"w{i}": i % 3 + 1 for i in range(17)}),
            Counter({f"w{i}": i % 5 + 1 for i in range(29)}),
        ],
    )
    def test_identical_bags(self, bag):
        """A non-empty bag is exactly 1.0 similar to itself."""
        assert cosine_similarity(bag, bag) == 1.0

    def test_equal_overlaps_score_equal(self):
        """Glosses with the same overlap profile tie exactly."""
        context = Counter({"a": 1, "b": 1, "c": 1})

        first = cosine_similarity(context, Counter({"a": 1, "b": 1, "x": 1}))
        second = cosine_similarity(context, Counter({"b": 1, "c": 1, "y": 1}))

        assert first == second

    def test_partial_overlap(self):
        """2 / (sqrt(3) * sqrt(5)) for two shared words."""
        expected = 2 / (3 ** 0.5 * 5 ** 0.5)

        assert cosine_similarity(CONTEXT, RIVER_GLOSS) == pytest.approx(expected)

    def test_uses_counts(self):
        """Repeated words change the angle."""
        a = Counter({"river": 2, "bank": 1})
        b = Counter({"river": 1, "bank": 2})

        assert cosine_similarity(a, b) == pytest.approx(4 / 5)

    def test_no_overlap_and_empty(self):
        """Disjoint or empty bags score 0."""
        assert cosine_similarity(CONTEXT, FINANCE_GLOSS) == 0.0
        assert cosine_similarity(Counter(), CONTEXT) == 0.0
        assert cosine_similarity(Counter(), Counter()) == 0.0

    def test_symmetric_and_bounded(self):
        """Scores are symmetric and within [0, 1]."""
        a = Counter({"river": 5, "bank": 1, "water": 2})
        b = Counter({"river": 1, "flow": 4})

        assert cosine_similarity(a, b) == pytest.approx(cosine_similarity(b, a))
        assert 0.0 <= cosine_similarity(a, b) <= 1.0


class TestComputeSimilarity:
    """Tests for metric dispatch."""

    def test_dispatches_by_name(self):
        """Metric names are case-insensitive strings or enum members."""
        assert compute_similarity(CONTEXT, RIVER_GLOSS, "jaccard") == pytest.approx(2 / 6)
        assert compute_similarity(CONTEXT, RIVER_GLOSS, SimilarityMetric.COSINE) == pytest.approx(
            cosine_similarity(CONTEXT, RIVER_GLOSS)
        )

    def test_default_is_jaccard(self):
        """Without a metric, Jaccard is used."""
        assert compute_similarity(CONTEXT, RIVER_GLOSS) == jaccard_similarity(CONTEXT, RIVER_GLOSS)

    def test_unknown_metric(self):
        """Unknown metric names are configuration errors."""
        with pytest.raises(ConfigurationError, match="DICE"):
            parse_similarity_metric("DICE")
