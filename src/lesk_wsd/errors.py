"""Exceptions raised by the Lesk WSD pipeline.

A lemma that the sense inventory does not know is *not* an error: it produces
an empty signature list and an empty prediction map, and is only penalized at
evaluation time.
"""

from __future__ import annotations

from pathlib import Path


class LeskError(Exception):
    """Base class for all lesk_wsd errors."""


class ConfigurationError(LeskError):
    """Raised when run options are invalid (context option, window size, metric, K)."""


class ResourceUnavailableError(LeskError):
    """Raised when a required resource (stopwords, spaCy model, WordNet) cannot be loaded."""


class MalformedRecordError(LeskError):
    """Raised when a test-corpus record does not match the expected format.

    Attributes:
        path: Corpus file the record was read from
        line_number: 1-based line number of the offending line
        reason: Human-readable description of the problem
    """

    def __init__(self, path: Path | str, line_number: int, reason: str):
        self.path = Path(path)
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"{self.path}:{line_number}: {reason}")
