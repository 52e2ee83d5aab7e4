"""Parsing and normalization helpers for configuration values."""

import logging
from typing import Any, Optional

logger = logging.getLogger(__name__)

_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_VALID_DOCS_FORMATS = {"text", "markdown"}


def _try_parse_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    normalized = str(value).strip().lower()
    if normalized in {"true", "1", "yes", "on"}:
        return True
    if normalized in {"false", "0", "no", "off"}:
        return False
    return None


def _normalize_log_level(value: Any, default: str = "WARNING") -> str:
    normalized = str(value).strip().upper()
    if normalized not in _VALID_LOG_LEVELS:
        logger.warning(
            "Invalid log level '%s'. Falling back to '%s'. Valid options: %s",
            value,
            default,
            ", ".join(sorted(_VALID_LOG_LEVELS)),
        )
        return default
    return normalized


def _normalize_docs_format(value: Any, default: str = "text") -> str:
    normalized = str(value).strip().lower()
    if normalized not in _VALID_DOCS_FORMATS:
        logger.warning(
            "Invalid docs format '%s'. Falling back to '%s'. Valid options: %s",
            value,
            default,
            ", ".join(sorted(_VALID_DOCS_FORMATS)),
        )
        return default
    return normalized
