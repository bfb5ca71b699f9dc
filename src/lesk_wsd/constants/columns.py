"""DataFrame column name constants."""

# Occurrence columns
SENTENCE_ID = "sentence_id"
POSITION = "position"
LEMMA = "lemma"
POS = "pos"

# Prediction columns
TOP_SENSE = "top_sense"
TOP_SCORE = "top_score"
N_CANDIDATES = "n_candidates"
GROUND_TRUTH = "ground_truth"

# Metric columns
PRECISION = "precision"
RECALL = "recall"
F1 = "f1"
TOTAL = "total"

METRIC_COLUMNS = [PRECISION, RECALL, F1]

EVALUATION_COLUMNS = [
    SENTENCE_ID,
    POSITION,
    LEMMA,
    POS,
    TOP_SENSE,
    TOP_SCORE,
    N_CANDIDATES,
    GROUND_TRUTH,
    PRECISION,
    RECALL,
    F1,
]
