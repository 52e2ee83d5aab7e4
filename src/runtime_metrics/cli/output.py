"""JSON envelope output for CLI commands.

Every command writes exactly one JSON document to stdout::

    {"success": true, "data": {...}, "error": null}

Errors use the same envelope with ``success`` false, the error code in
``data.error_code`` and exit status 1. Logs go to stderr.
"""

import json
import sys
from typing import Any, Dict, Optional

import click


def _emit(payload: Dict[str, Any]) -> None:
    click.echo(json.dumps(payload, indent=2, ensure_ascii=False))


def emit_success(data: Dict[str, Any]) -> None:
    """Write a success envelope to stdout."""
    _emit({"success": True, "data": data, "error": None})


def emit_error(
    message: str,
    *,
    code: str,
    details: Optional[Dict[str, Any]] = None,
    exit_code: int = 1,
) -> None:
    """Write an error envelope to stdout and exit.

    Args:
        message: Human-readable error message.
        code: Stable machine-readable error code (e.g. ``NOT_FOUND``).
        details: Extra fields merged into ``data``.
        exit_code: Process exit status.
    """
    data: Dict[str, Any] = {"error_code": code}
    if details:
        data.update(details)
    _emit({"success": False, "data": data, "error": message})
    sys.exit(exit_code)
