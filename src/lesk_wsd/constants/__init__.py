"""Project-wide constants."""

from lesk_wsd.constants.columns import (
    EVALUATION_COLUMNS,
    F1,
    GROUND_TRUTH,
    LEMMA,
    METRIC_COLUMNS,
    N_CANDIDATES,
    POS,
    POSITION,
    PRECISION,
    RECALL,
    SENTENCE_ID,
    TOP_SCORE,
    TOP_SENSE,
    TOTAL,
)
from lesk_wsd.constants.defaults import (
    CONTEXT_ALL_WORDS,
    CONTEXT_ALL_WORDS_R,
    CONTEXT_POS,
    CONTEXT_WINDOW,
    DEFAULT_CONTEXT_OPTION,
    DEFAULT_SIMILARITY,
    DEFAULT_TOP_K,
    DEFAULT_WINDOW_SIZE,
    DEFAULT_WORKERS,
    ENCODING_UTF8,
    MIN_WINDOW_SIZE,
    OCCURRENCE_FIELD_COUNT,
    SENSE_KEY_SEP,
    SIM_COSINE,
    SIM_JACCARD,
)
from lesk_wsd.constants.paths import DATA_DIR, DEFAULT_STOPWORDS_PATH
from lesk_wsd.constants.spacy_config import (
    ANNOTATION_DISABLED,
    COMPONENT_NER,
    COMPONENT_PARSER,
    COMPONENT_SENTER,
    COMPONENT_TEXTCAT,
    DEFAULT_MODEL_NAME,
)

__all__ = [
    # Columns
    "SENTENCE_ID",
    "POSITION",
    "LEMMA",
    "POS",
    "TOP_SENSE",
    "TOP_SCORE",
    "N_CANDIDATES",
    "GROUND_TRUTH",
    "PRECISION",
    "RECALL",
    "F1",
    "TOTAL",
    "METRIC_COLUMNS",
    "EVALUATION_COLUMNS",
    # Defaults
    "ENCODING_UTF8",
    "CONTEXT_ALL_WORDS",
    "CONTEXT_ALL_WORDS_R",
    "CONTEXT_WINDOW",
    "CONTEXT_POS",
    "DEFAULT_CONTEXT_OPTION",
    "DEFAULT_WINDOW_SIZE",
    "MIN_WINDOW_SIZE",
    "SIM_JACCARD",
    "SIM_COSINE",
    "DEFAULT_SIMILARITY",
    "DEFAULT_TOP_K",
    "DEFAULT_WORKERS",
    "SENSE_KEY_SEP",
    "OCCURRENCE_FIELD_COUNT",
    # Paths
    "DATA_DIR",
    "DEFAULT_STOPWORDS_PATH",
    # spaCy
    "DEFAULT_MODEL_NAME",
    "COMPONENT_PARSER",
    "COMPONENT_NER",
    "COMPONENT_TEXTCAT",
    "COMPONENT_SENTER",
    "ANNOTATION_DISABLED",
]
