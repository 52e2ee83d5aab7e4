"""Catalog construction and naming error classes."""

from typing import Any, Optional


class MetricsCatalogError(Exception):
    """Base class for defects in the metric catalog's source data."""

    pass


class MalformedNameError(MetricsCatalogError, ValueError):
    """Raised when a metric name does not follow the ``<path>:<unit>`` grammar.

    Attributes:
        name: The offending metric name.
        reason: Description of which part of the grammar was violated.
    """

    def __init__(self, name: str, reason: Optional[str] = None) -> None:
        self.name = name
        self.reason = reason
        message = f"Malformed metric name {name!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class DuplicateMetricError(MetricsCatalogError):
    """Raised when two catalog entries share a name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Duplicate metric name {name!r}")


class EmptyDescriptionError(MetricsCatalogError):
    """Raised when a catalog entry has a blank description."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Metric {name!r} has an empty description")


class InvalidKindError(MetricsCatalogError):
    """Raised when a catalog entry has no usable value kind.

    Attributes:
        name: The metric name.
        kind: The rejected kind value.
    """

    def __init__(self, name: str, kind: Any) -> None:
        self.name = name
        self.kind = kind
        super().__init__(f"Metric {name!r} has invalid value kind {kind!r}")
