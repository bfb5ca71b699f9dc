"""Default values for functions and processing."""

# File encoding
ENCODING_UTF8 = "utf-8"

# Context construction defaults
CONTEXT_ALL_WORDS = "ALL_WORDS"
CONTEXT_ALL_WORDS_R = "ALL_WORDS_R"
CONTEXT_WINDOW = "WINDOW"
CONTEXT_POS = "POS"
DEFAULT_CONTEXT_OPTION = CONTEXT_ALL_WORDS

# Window must be odd and cover at least one neighbour on each side
DEFAULT_WINDOW_SIZE = 3
MIN_WINDOW_SIZE = 3

# Similarity defaults
SIM_JACCARD = "JACCARD"
SIM_COSINE = "COSINE"
DEFAULT_SIMILARITY = SIM_JACCARD

# Evaluation defaults
DEFAULT_TOP_K = 1

# Worker threads for prediction (1 = sequential)
DEFAULT_WORKERS = 1

# Corpus record format
SENSE_KEY_SEP = ","
OCCURRENCE_FIELD_COUNT = 4
