"""Core catalog operations for runtime-metrics."""

from runtime_metrics.core.metrics import (
    MetricDescriptor,
    ValueKind,
    all_metrics,
    get_metric,
    parse_metric_name,
)

__all__ = [
    "MetricDescriptor",
    "ValueKind",
    "all_metrics",
    "get_metric",
    "parse_metric_name",
]
