"""CLI commands."""

from runtime_metrics.cli.commands.catalog import docs_cmd, list_cmd, show_cmd, validate_cmd

__all__ = [
    "docs_cmd",
    "list_cmd",
    "show_cmd",
    "validate_cmd",
]
