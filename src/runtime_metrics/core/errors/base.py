"""Error-to-error-code mapping registry.

Provides a centralized mapping from exception types to the stable error codes
reported by the CLI, so every surface names a given failure the same way.

Usage:
    from runtime_metrics.core.errors.base import error_code_for

    try:
        parse_metric_name(raw)
    except Exception as e:
        code = error_code_for(e)
        if code is None:
            raise  # Unknown error, re-raise
"""

from __future__ import annotations

from typing import Dict, Optional, Type

from runtime_metrics.core.errors.catalog import (
    DuplicateMetricError,
    EmptyDescriptionError,
    InvalidKindError,
    MalformedNameError,
    MetricsCatalogError,
)
from runtime_metrics.core.errors.config import ConfigError

ERROR_CODES: Dict[Type[Exception], str] = {
    # --- Naming errors ---
    MalformedNameError: "MALFORMED_NAME",
    # --- Catalog data errors ---
    DuplicateMetricError: "DUPLICATE_METRIC",
    EmptyDescriptionError: "EMPTY_DESCRIPTION",
    InvalidKindError: "INVALID_KIND",
    MetricsCatalogError: "CATALOG_ERROR",
    # --- Configuration errors ---
    ConfigError: "CONFIG_ERROR",
}


def error_code_for(exc: Exception) -> Optional[str]:
    """Return the error code for a known exception, or None if unknown.

    Walks the exception's MRO so subclasses without their own entry fall back
    to the closest registered base.

    Args:
        exc: The exception to classify.

    Returns:
        The registered error code, or None if no class in the MRO is mapped.
    """
    for klass in type(exc).__mro__:
        code = ERROR_CODES.get(klass)
        if code is not None:
            return code
    return None
