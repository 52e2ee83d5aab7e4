"""runtime-metrics: catalog of runtime telemetry metric descriptions.

Usage:
    from runtime_metrics import all_metrics, ValueKind

    histograms = [d for d in all_metrics() if d.kind is ValueKind.FLOAT64_HISTOGRAM]
"""

from runtime_metrics.core.errors import MalformedNameError, MetricsCatalogError
from runtime_metrics.core.metrics import (
    METRICS_CATALOG,
    MetricDescriptor,
    MetricName,
    ValueKind,
    all_metrics,
    get_metric,
    parse_metric_name,
)

__version__ = "0.1.0"

__all__ = [
    "METRICS_CATALOG",
    "MalformedNameError",
    "MetricDescriptor",
    "MetricName",
    "MetricsCatalogError",
    "ValueKind",
    "all_metrics",
    "get_metric",
    "parse_metric_name",
]
