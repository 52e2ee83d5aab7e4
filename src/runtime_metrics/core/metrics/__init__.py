"""
Runtime metrics catalog: descriptors, naming grammar and reference docs.

This package consolidates the catalog:
- kinds: ValueKind
- naming: MetricName, parse_metric_name, is_valid_metric_name, validate_metric_name
- registry: MetricDescriptor, METRICS_CATALOG, all_metrics and lookups
- docs: render_catalog_text, export_catalog_as_markdown
"""

from runtime_metrics.core.metrics.docs import (
    export_catalog_as_markdown,
    render_catalog_text,
)
from runtime_metrics.core.metrics.kinds import ValueKind
from runtime_metrics.core.metrics.naming import (
    HISTOGRAM_COUNT_UNIT,
    MetricName,
    is_valid_metric_name,
    parse_metric_name,
    validate_metric_name,
)
from runtime_metrics.core.metrics.registry import (
    METRICS_CATALOG,
    MetricDescriptor,
    all_metrics,
    catalog_convention_issues,
    get_cumulative_metrics,
    get_metric,
    get_metrics_by_kind,
    get_metrics_by_prefix,
    metric_names,
    validate_catalog,
)

__all__ = [
    # kinds
    "ValueKind",
    # naming
    "HISTOGRAM_COUNT_UNIT",
    "MetricName",
    "is_valid_metric_name",
    "parse_metric_name",
    "validate_metric_name",
    # registry
    "METRICS_CATALOG",
    "MetricDescriptor",
    "all_metrics",
    "catalog_convention_issues",
    "get_cumulative_metrics",
    "get_metric",
    "get_metrics_by_kind",
    "get_metrics_by_prefix",
    "metric_names",
    "validate_catalog",
    # docs
    "export_catalog_as_markdown",
    "render_catalog_text",
]
