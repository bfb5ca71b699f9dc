"""Text input utilities: stopword lists and corpus files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import FrozenSet, List

from lesk_wsd.constants import ENCODING_UTF8
from lesk_wsd.errors import ResourceUnavailableError

logger = logging.getLogger(__name__)


def read_lines(file_path: Path, encoding: str = ENCODING_UTF8) -> List[str]:
    """Read a text file into a list of lines without trailing newlines.

    Args:
        file_path: Path to the text file.
        encoding: File encoding (default UTF-8).

    Returns:
        The file's lines.

    Raises:
        ResourceUnavailableError: If the file is missing, unreadable or cannot
            be decoded.
    """

    file_path = Path(file_path)
    if not file_path.is_file():
        raise ResourceUnavailableError(f"File not found: {file_path}")

    try:
        text = file_path.read_text(encoding=encoding)
    except UnicodeDecodeError as exc:
        raise ResourceUnavailableError(
            f"Failed to decode file {file_path} with encoding {encoding}"
        ) from exc
    except OSError as exc:
        raise ResourceUnavailableError(f"Failed to read file {file_path}: {exc}") from exc

    return text.splitlines()


def load_stopwords(file_path: Path, encoding: str = ENCODING_UTF8) -> FrozenSet[str]:
    """Load a stopword list (one word per line).

    Blank lines are ignored; entries are stripped and lower-cased.

    Raises:
        ResourceUnavailableError: If the file cannot be read.
    """

    lines = read_lines(file_path, encoding=encoding)
    stopwords = frozenset(line.strip().lower() for line in lines if line.strip())
    if not stopwords:
        logger.warning(f"Stopword file {file_path} is empty; no words will be filtered")
    else:
        logger.info(f"Loaded {len(stopwords)} stopwords from {file_path}")
    return stopwords
