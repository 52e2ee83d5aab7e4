"""Reference documentation rendered from the metrics catalog."""

from __future__ import annotations

import textwrap
from typing import Iterable, List, Optional

from runtime_metrics.core.metrics.registry import MetricDescriptor, all_metrics

DESCRIPTION_WIDTH = 70


def _entries(descriptors: Optional[Iterable[MetricDescriptor]]) -> List[MetricDescriptor]:
    return list(descriptors) if descriptors is not None else all_metrics()


def render_catalog_text(descriptors: Optional[Iterable[MetricDescriptor]] = None) -> str:
    """Render the catalog in package-doc layout.

    Each metric is a tab-indented name followed by its description, wrapped
    and indented by two tabs, with a blank line between entries::

        \t/gc/heap/goal:bytes
        \t\tHeap size target for the end of the GC cycle.

    Args:
        descriptors: Entries to render (default: the whole catalog).

    Returns:
        The rendered text, ending in a newline.
    """
    blocks = []
    for desc in _entries(descriptors):
        wrapped = textwrap.wrap(
            desc.description,
            width=DESCRIPTION_WIDTH,
            break_long_words=False,
            break_on_hyphens=False,
        )
        lines = [f"\t{desc.name}"] + [f"\t\t{line}" for line in wrapped]
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks) + "\n"


def _escape_cell(value: str) -> str:
    return value.replace("|", "\\|")


def export_catalog_as_markdown(descriptors: Optional[Iterable[MetricDescriptor]] = None) -> str:
    """Render the catalog as a markdown table.

    Args:
        descriptors: Entries to render (default: the whole catalog).

    Returns:
        Markdown document with a heading and one table row per metric.
    """
    rows = [
        "# Runtime Metrics",
        "",
        "| Name | Kind | Cumulative | Description |",
        "|------|------|------------|-------------|",
    ]
    for desc in _entries(descriptors):
        rows.append(
            f"| `{desc.name}` | {desc.kind.label} | "
            f"{'yes' if desc.cumulative else 'no'} | {_escape_cell(desc.description)} |"
        )
    return "\n".join(rows) + "\n"
