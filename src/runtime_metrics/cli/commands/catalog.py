"""Catalog commands for the runtime-metrics CLI.

Provides commands for exploring the metrics catalog:
- Listing metrics with kind, cumulative and path filters
- Showing a single metric by name
- Rendering reference docs
- Validating the catalog
"""

from typing import Optional

import click

from runtime_metrics.cli.logging import cli_command, get_cli_logger
from runtime_metrics.cli.output import emit_error, emit_success
from runtime_metrics.config import CatalogSettings
from runtime_metrics.core.errors import MetricsCatalogError, error_code_for
from runtime_metrics.core.metrics import (
    ValueKind,
    HISTOGRAM_COUNT_UNIT,
    all_metrics,
    catalog_convention_issues,
    export_catalog_as_markdown,
    get_metric,
    parse_metric_name,
    render_catalog_text,
    validate_catalog,
)

logger = get_cli_logger()

_KIND_CHOICES = [kind.label for kind in ValueKind if kind is not ValueKind.BAD]


@click.command("list")
@click.option("--kind", type=click.Choice(_KIND_CHOICES), help="Only metrics of this value kind.")
@click.option(
    "--cumulative/--all",
    "cumulative_only",
    default=False,
    help="Only cumulative metrics, or all metrics (default).",
)
@click.option("--prefix", help="Only metrics whose path lies under this prefix (e.g. /memory/classes).")
@cli_command("list")
def list_cmd(kind: Optional[str], cumulative_only: bool, prefix: Optional[str]) -> None:
    """List catalog entries in declaration order."""
    entries = all_metrics()
    if kind:
        wanted = ValueKind.from_label(kind)
        entries = [desc for desc in entries if desc.kind is wanted]
    if cumulative_only:
        entries = [desc for desc in entries if desc.cumulative]
    if prefix:
        entries = [desc for desc in entries if desc.is_under(prefix)]

    logger.debug("Listing %d metrics", len(entries))
    emit_success(
        {
            "metrics": [desc.to_dict() for desc in entries],
            "total_count": len(entries),
        }
    )


@click.command("show")
@click.argument("name")
@cli_command("show")
def show_cmd(name: str) -> None:
    """Show a single metric.

    NAME is the full metric name, e.g. /gc/heap/goal:bytes.
    """
    try:
        parse_metric_name(name)
    except MetricsCatalogError as e:
        emit_error(str(e), code=error_code_for(e) or "CATALOG_ERROR", details={"name": name})
        return

    desc = get_metric(name)
    if desc is None:
        emit_error(f"Metric not found: {name}", code="NOT_FOUND", details={"name": name})
        return

    data = desc.to_dict()
    if desc.count_unit is not None:
        data["count_unit"] = desc.count_unit
    emit_success({"metric": data})


@click.command("docs")
@click.option(
    "--format",
    "docs_format",
    type=click.Choice(["text", "markdown"]),
    help="Output format (default: from config).",
)
@click.pass_obj
@cli_command("docs")
def docs_cmd(settings: CatalogSettings, docs_format: Optional[str]) -> None:
    """Render reference documentation for every metric.

    Writes the rendered document to stdout as-is, not wrapped in JSON.
    """
    fmt = docs_format or settings.docs_format
    if fmt == "markdown":
        click.echo(export_catalog_as_markdown(), nl=False)
    else:
        click.echo(render_catalog_text(), nl=False)


@click.command("validate")
@click.option(
    "--strict",
    is_flag=True,
    help="Fail when an entry breaks a writing convention, not only a hard rule.",
)
@cli_command("validate")
def validate_cmd(strict: bool) -> None:
    """Check every catalog entry against the naming, data and writing rules."""
    try:
        entries = validate_catalog(all_metrics())
    except MetricsCatalogError as e:
        emit_error(str(e), code=error_code_for(e) or "CATALOG_ERROR")
        return

    issues = catalog_convention_issues(entries)
    for issue in issues:
        logger.warning("Convention issue in %s: %s", issue["name"], issue["issue"])
    if strict and issues:
        emit_error(
            f"{len(issues)} catalog entries break writing conventions",
            code="CONVENTION_VIOLATION",
            details={"convention_issues": issues},
        )
        return

    histograms = [desc for desc in entries if desc.is_histogram]
    emit_success(
        {
            "valid": True,
            "total_count": len(entries),
            "histogram_count": len(histograms),
            "cumulative_count": sum(1 for desc in entries if desc.cumulative),
            "histogram_count_unit": HISTOGRAM_COUNT_UNIT,
            "conventions_ok": not issues,
            "convention_issues": issues,
        }
    )
