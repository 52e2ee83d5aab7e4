"""Unified error hierarchy for runtime-metrics.

All custom exception classes are defined in domain-specific modules within
this package. This __init__.py re-exports everything for convenient access.

Usage:
    from runtime_metrics.core.errors import MalformedNameError, error_code_for
"""

# --- Base / Registry ---
from runtime_metrics.core.errors.base import ERROR_CODES, error_code_for

# --- Catalog errors ---
from runtime_metrics.core.errors.catalog import (
    DuplicateMetricError,
    EmptyDescriptionError,
    InvalidKindError,
    MalformedNameError,
    MetricsCatalogError,
)

# --- Configuration errors ---
from runtime_metrics.core.errors.config import ConfigError

__all__ = [
    # Base / Registry
    "ERROR_CODES",
    "error_code_for",
    # Catalog errors
    "MetricsCatalogError",
    "MalformedNameError",
    "DuplicateMetricError",
    "EmptyDescriptionError",
    "InvalidKindError",
    # Configuration errors
    "ConfigError",
]
