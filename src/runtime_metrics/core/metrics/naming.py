"""Metric naming grammar.

Every metric name has the form ``<path>:<unit>``:

- ``<path>`` starts with ``/`` and contains no ``:``. Segments between ``/``
  characters may hold any Unicode codepoint, but by convention are lowercase
  words joined by hyphens (``/memory/heap/free``).
- ``<unit>`` is one or more unit terms joined by ``*`` or ``/``
  (``bytes``, ``bytes/second``, ``byte*cpu-seconds``). Terms contain no
  ``:``, ``*`` or ``/``.

For histograms the unit names the bucket dimension. The count dimension is
always "samples", with the kind of sample evident from the metric's path.
"""

import re
from dataclasses import dataclass
from typing import Final, Tuple

from runtime_metrics.core.errors import MalformedNameError

NAME_PATTERN: Final = re.compile(r"(?P<path>/[^:]+):(?P<unit>[^:*/]+(?:[*/][^:*/]+)*)")

HISTOGRAM_COUNT_UNIT: Final = "samples"

_UNIT_DELIMITERS: Final = re.compile(r"[*/]")


@dataclass(frozen=True)
class MetricName:
    """A metric name split into its path and unit."""

    path: str
    unit: str

    @property
    def unit_terms(self) -> Tuple[str, ...]:
        """Individual unit terms with the ``*`` and ``/`` delimiters removed."""
        return tuple(_UNIT_DELIMITERS.split(self.unit))

    @property
    def segments(self) -> Tuple[str, ...]:
        """Path segments without the leading ``/``."""
        return tuple(self.path[1:].split("/"))

    def __str__(self) -> str:
        return f"{self.path}:{self.unit}"


def _explain(name: str) -> str:
    if not name:
        return "name is empty"
    if not name.startswith("/"):
        return "path must start with '/'"
    colons = name.count(":")
    if colons == 0:
        return "missing ':' between path and unit"
    if colons > 1:
        return "name must contain exactly one ':'"
    path, unit = name.split(":")
    if path == "/":
        return "path is empty"
    if not unit:
        return "unit is empty"
    return "unit terms must be non-empty and joined by '*' or '/'"


def parse_metric_name(name: str) -> MetricName:
    """Split a metric name into path and unit.

    Args:
        name: Full metric name, e.g. ``/gc/heap/goal:bytes``.

    Returns:
        The parsed MetricName.

    Raises:
        MalformedNameError: If the name does not follow the grammar.
    """
    if not isinstance(name, str):
        raise MalformedNameError(repr(name), "name must be a string")
    match = NAME_PATTERN.fullmatch(name)
    if match is None:
        raise MalformedNameError(name, _explain(name))
    return MetricName(path=match.group("path"), unit=match.group("unit"))


def is_valid_metric_name(name: str) -> bool:
    """Return True if *name* follows the grammar."""
    return isinstance(name, str) and NAME_PATTERN.fullmatch(name) is not None


def validate_metric_name(name: str) -> str:
    """Return *name* unchanged, raising MalformedNameError if it is malformed."""
    parse_metric_name(name)
    return name
