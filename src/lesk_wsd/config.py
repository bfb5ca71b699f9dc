"""Run configuration.

Settings are resolved in order of precedence:
1. Explicit keyword overrides (CLI flags)
2. Environment variables (a ``.env`` file in the working directory is loaded)
3. Defaults from ``lesk_wsd.constants``

Environment variables:
    LESK_STOPWORDS_PATH, LESK_SPACY_MODEL, LESK_CONTEXT_OPTION,
    LESK_WINDOW_SIZE, LESK_SIMILARITY, LESK_TOP_K, LESK_WORKERS
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from dotenv import find_dotenv, load_dotenv

from lesk_wsd.constants import (
    DEFAULT_CONTEXT_OPTION,
    DEFAULT_MODEL_NAME,
    DEFAULT_SIMILARITY,
    DEFAULT_STOPWORDS_PATH,
    DEFAULT_TOP_K,
    DEFAULT_WINDOW_SIZE,
    DEFAULT_WORKERS,
)
from lesk_wsd.errors import ConfigurationError
from lesk_wsd.wsd.context import parse_context_option, validate_window_size
from lesk_wsd.wsd.similarity import parse_similarity_metric

ENV_PREFIX = "LESK_"


@dataclass(frozen=True)
class LeskSettings:
    """Options of one Lesk run."""

    stopwords_path: Path = DEFAULT_STOPWORDS_PATH
    spacy_model: str = DEFAULT_MODEL_NAME
    context_option: str = DEFAULT_CONTEXT_OPTION
    window_size: int = DEFAULT_WINDOW_SIZE
    similarity: str = DEFAULT_SIMILARITY
    top_k: int = DEFAULT_TOP_K
    workers: int = DEFAULT_WORKERS

    def validate(self) -> "LeskSettings":
        """Check every option and return the normalized settings.

        Raises:
            ConfigurationError: If any option is invalid
        """
        context_option = parse_context_option(self.context_option).value
        similarity = parse_similarity_metric(self.similarity).value
        validate_window_size(self.window_size)
        if self.top_k < 1:
            raise ConfigurationError(f"top_k must be at least 1, got {self.top_k}")
        if self.workers < 1:
            raise ConfigurationError(f"workers must be at least 1, got {self.workers}")
        return replace(self, context_option=context_option, similarity=similarity)


def _env_int(name: str) -> int | None:
    raw = os.getenv(ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from exc


def _env_str(name: str) -> str | None:
    raw = os.getenv(ENV_PREFIX + name)
    return raw.strip() if raw and raw.strip() else None


def load_settings(**overrides: Any) -> LeskSettings:
    """Build validated settings from defaults, environment and overrides.

    Args:
        **overrides: LeskSettings fields; ``None`` values are ignored so that
            unset CLI options fall through to the environment/defaults

    Raises:
        ConfigurationError: If a value is invalid or a field is unknown
    """
    load_dotenv(find_dotenv(usecwd=True))

    values: dict[str, Any] = {}
    stopwords_path = _env_str("STOPWORDS_PATH")
    if stopwords_path is not None:
        values["stopwords_path"] = Path(stopwords_path)
    for field_name, env_name in (
        ("spacy_model", "SPACY_MODEL"),
        ("context_option", "CONTEXT_OPTION"),
        ("similarity", "SIMILARITY"),
    ):
        value = _env_str(env_name)
        if value is not None:
            values[field_name] = value
    for field_name, env_name in (
        ("window_size", "WINDOW_SIZE"),
        ("top_k", "TOP_K"),
        ("workers", "WORKERS"),
    ):
        value = _env_int(env_name)
        if value is not None:
            values[field_name] = value

    for key, value in overrides.items():
        if key not in LeskSettings.__dataclass_fields__:
            raise ConfigurationError(f"Unknown setting: {key}")
        if value is not None:
            values[key] = Path(value) if key == "stopwords_path" else value

    return LeskSettings(**values).validate()
