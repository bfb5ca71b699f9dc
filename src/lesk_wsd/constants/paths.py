"""Data directory paths.

All data paths should be imported from here to avoid magic strings.
"""

from pathlib import Path

# Base directories (relative to project root)
DATA_DIR = Path("data")

# Bundled English stopword list
DEFAULT_STOPWORDS_PATH = DATA_DIR / "stopwords.txt"
