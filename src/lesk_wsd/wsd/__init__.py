"""Word Sense Disambiguation (WSD) module.

This module implements the simplified Lesk algorithm: every candidate sense of
an ambiguous word is scored by the overlap between its gloss and the word's
sentence context.

Main components:
- BagOfWordsBuilder: Normalized bags of words for glosses and contexts
- SignatureGenerator: One gloss bag per candidate sense
- Context extraction: ALL_WORDS, ALL_WORDS_R, WINDOW and POS policies
- Similarity: Jaccard and cosine scores between bags
- LeskPredictor: Sense key -> score maps for every occurrence of a corpus
- Evaluation: Top-K precision, recall and F1
- WordNetSenseInventory: SenseInventory backed by WordNet
"""

from lesk_wsd.wsd.bag_of_words import BagOfWordsBuilder, regex_tokenize
from lesk_wsd.wsd.base import (
    AmbiguousOccurrence,
    Annotator,
    BagOfWords,
    EvaluationResult,
    InventoryPOS,
    Prediction,
    PredictionMap,
    SenseCandidate,
    SenseInventory,
    Sentence,
    Signature,
    Token,
    to_inventory_pos,
)
from lesk_wsd.wsd.context import (
    ContextOption,
    extract_context,
    parse_context_option,
    select_context_tokens,
    validate_window_size,
)
from lesk_wsd.wsd.evaluation import (
    compute_metrics,
    compute_metrics_by_segment,
    evaluate,
    evaluate_single,
    evaluation_to_dataframe,
    rank_senses,
)
from lesk_wsd.wsd.lesk import LeskPredictor
from lesk_wsd.wsd.signatures import SignatureGenerator
from lesk_wsd.wsd.similarity import (
    SimilarityMetric,
    compute_similarity,
    cosine_similarity,
    jaccard_similarity,
    parse_similarity_metric,
)
from lesk_wsd.wsd.wordnet_utils import WordNetSenseInventory, get_gloss

__all__ = [
    # Base
    "AmbiguousOccurrence",
    "Annotator",
    "BagOfWords",
    "EvaluationResult",
    "InventoryPOS",
    "Prediction",
    "PredictionMap",
    "SenseCandidate",
    "SenseInventory",
    "Sentence",
    "Signature",
    "Token",
    "to_inventory_pos",
    # Bags of words
    "BagOfWordsBuilder",
    "regex_tokenize",
    # Signatures
    "SignatureGenerator",
    # Context
    "ContextOption",
    "extract_context",
    "parse_context_option",
    "select_context_tokens",
    "validate_window_size",
    # Similarity
    "SimilarityMetric",
    "compute_similarity",
    "cosine_similarity",
    "jaccard_similarity",
    "parse_similarity_metric",
    # Predictor
    "LeskPredictor",
    # Evaluation
    "compute_metrics",
    "compute_metrics_by_segment",
    "evaluate",
    "evaluate_single",
    "evaluation_to_dataframe",
    "rank_senses",
    # WordNet
    "WordNetSenseInventory",
    "get_gloss",
]
