"""Catalog of runtime metrics.

The catalog is a fixed table of MetricDescriptor entries built and validated
once at import time. It is never mutated afterwards, so it can be read from
any number of threads without locking.

Consumers that sample live values key them by ``MetricDescriptor.name``; the
names and the naming grammar are a compatibility contract with the sampler.

Usage:
    from runtime_metrics.core.metrics.registry import all_metrics

    for desc in all_metrics():
        if desc.kind is ValueKind.FLOAT64_HISTOGRAM:
            ...
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict, Iterable, List, Optional, Tuple

from runtime_metrics.core.errors import (
    DuplicateMetricError,
    EmptyDescriptionError,
    InvalidKindError,
)
from runtime_metrics.core.metrics.kinds import ValueKind
from runtime_metrics.core.metrics.naming import (
    HISTOGRAM_COUNT_UNIT,
    MetricName,
    parse_metric_name,
)

logger = logging.getLogger(__name__)

TERMINAL_PUNCTUATION = (".", "!", "?")


@lru_cache(maxsize=256)
def _split_name(name: str) -> MetricName:
    return parse_metric_name(name)


@dataclass(frozen=True)
class MetricDescriptor:
    """Describes a single runtime metric.

    Attributes:
        name: Full metric name including the unit, e.g. ``/gc/heap/goal:bytes``.
        description: English sentence describing the metric.
        kind: Kind of value the metric produces. Lets consumers skip metrics
            whose values they cannot interpret.
        cumulative: Whether the value (or, for distributions, every bucket
            count) only increases over the process lifetime, making a rate
            meaningful.
    """

    name: str
    description: str
    kind: ValueKind
    cumulative: bool = False

    @property
    def parsed_name(self) -> MetricName:
        return _split_name(self.name)

    @property
    def path(self) -> str:
        return self.parsed_name.path

    @property
    def unit(self) -> str:
        return self.parsed_name.unit

    @property
    def is_histogram(self) -> bool:
        return self.kind.is_histogram

    @property
    def count_unit(self) -> Optional[str]:
        """Unit of a histogram's bucket counts; None for scalar metrics."""
        return HISTOGRAM_COUNT_UNIT if self.is_histogram else None

    def is_under(self, prefix: str) -> bool:
        """Return True if the metric path equals *prefix* or lies beneath it."""
        base = prefix.rstrip("/")
        return self.path == base or self.path.startswith(base + "/")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "path": self.path,
            "unit": self.unit,
            "description": self.description,
            "kind": self.kind.label,
            "cumulative": self.cumulative,
        }


def validate_catalog(descriptors: Iterable[MetricDescriptor]) -> Tuple[MetricDescriptor, ...]:
    """Check catalog entries and return them as an immutable tuple.

    Args:
        descriptors: Catalog entries in declaration order.

    Returns:
        The entries, unchanged and in order.

    Raises:
        MalformedNameError: If a name does not follow the naming grammar.
        DuplicateMetricError: If a name appears more than once.
        EmptyDescriptionError: If a description is blank.
        InvalidKindError: If an entry's kind is not a usable ValueKind.
    """
    entries = tuple(descriptors)
    seen: set[str] = set()
    for desc in entries:
        parse_metric_name(desc.name)
        if desc.name in seen:
            raise DuplicateMetricError(desc.name)
        seen.add(desc.name)
        if not desc.description or not desc.description.strip():
            raise EmptyDescriptionError(desc.name)
        if not isinstance(desc.kind, ValueKind) or desc.kind is ValueKind.BAD:
            raise InvalidKindError(desc.name, desc.kind)
    return entries


def catalog_convention_issues(descriptors: Iterable[MetricDescriptor]) -> List[Dict[str, str]]:
    """Report entries that load fine but break the catalog's writing conventions.

    Checked conventions:
    - descriptions are sentences ending in terminal punctuation
    - histogram bucket units are not "samples", which is the unit of the
      bucket counts themselves

    Returns:
        One ``{"name", "issue"}`` dict per violation, in declaration order.
    """
    issues: List[Dict[str, str]] = []
    for desc in descriptors:
        if not desc.description.rstrip().endswith(TERMINAL_PUNCTUATION):
            issues.append({"name": desc.name, "issue": "description does not end with terminal punctuation"})
        if desc.is_histogram and HISTOGRAM_COUNT_UNIT in parse_metric_name(desc.name).unit_terms:
            issues.append(
                {
                    "name": desc.name,
                    "issue": f"histogram bucket unit overlaps the '{HISTOGRAM_COUNT_UNIT}' count unit",
                }
            )
    return issues


# =============================================================================
# Catalog
# =============================================================================
# The descriptions below must be kept in sync with the reference docs produced
# by runtime_metrics.core.metrics.docs.

_CATALOG_ENTRIES: List[MetricDescriptor] = [
    MetricDescriptor(
        name="/gc/cycles/automatic:gc-cycles",
        description="Count of completed GC cycles generated by the Go runtime.",
        kind=ValueKind.UINT64,
        cumulative=True,
    ),
    MetricDescriptor(
        name="/gc/cycles/forced:gc-cycles",
        description="Count of completed GC cycles forced by the application.",
        kind=ValueKind.UINT64,
        cumulative=True,
    ),
    MetricDescriptor(
        name="/gc/cycles/total:gc-cycles",
        description="Count of all completed GC cycles.",
        kind=ValueKind.UINT64,
        cumulative=True,
    ),
    MetricDescriptor(
        name="/gc/heap/allocs-by-size:bytes",
        description=(
            "Distribution of heap allocations by approximate size. "
            "Note that this does not include tiny objects as defined by "
            "/gc/heap/tiny/allocs:objects, only tiny blocks."
        ),
        kind=ValueKind.FLOAT64_HISTOGRAM,
        cumulative=True,
    ),
    MetricDescriptor(
        name="/gc/heap/allocs:bytes",
        description="Cumulative sum of memory allocated to the heap by the application.",
        kind=ValueKind.UINT64,
        cumulative=True,
    ),
    MetricDescriptor(
        name="/gc/heap/allocs:objects",
        description=(
            "Cumulative count of heap allocations triggered by the application. "
            "Note that this does not include tiny objects as defined by "
            "/gc/heap/tiny/allocs:objects, only tiny blocks."
        ),
        kind=ValueKind.UINT64,
        cumulative=True,
    ),
    MetricDescriptor(
        name="/gc/heap/frees-by-size:bytes",
        description=(
            "Distribution of freed heap allocations by approximate size. "
            "Note that this does not include tiny objects as defined by "
            "/gc/heap/tiny/allocs:objects, only tiny blocks."
        ),
        kind=ValueKind.FLOAT64_HISTOGRAM,
        cumulative=True,
    ),
    MetricDescriptor(
        name="/gc/heap/frees:bytes",
        description="Cumulative sum of heap memory freed by the garbage collector.",
        kind=ValueKind.UINT64,
        cumulative=True,
    ),
    MetricDescriptor(
        name="/gc/heap/frees:objects",
        description=(
            "Cumulative count of heap allocations whose storage was freed "
            "by the garbage collector. "
            "Note that this does not include tiny objects as defined by "
            "/gc/heap/tiny/allocs:objects, only tiny blocks."
        ),
        kind=ValueKind.UINT64,
        cumulative=True,
    ),
    MetricDescriptor(
        name="/gc/heap/goal:bytes",
        description="Heap size target for the end of the GC cycle.",
        kind=ValueKind.UINT64,
    ),
    MetricDescriptor(
        name="/gc/heap/objects:objects",
        description="Number of objects, live or unswept, occupying heap memory.",
        kind=ValueKind.UINT64,
    ),
    MetricDescriptor(
        name="/gc/heap/tiny/allocs:objects",
        description=(
            "Count of small allocations that are packed together into blocks. "
            "These allocations are counted separately from other allocations "
            "because each individual allocation is not tracked by the runtime, "
            "only their block. Each block is already accounted for in "
            "allocs-by-size and frees-by-size."
        ),
        kind=ValueKind.UINT64,
        cumulative=True,
    ),
    MetricDescriptor(
        name="/gc/pauses:seconds",
        description="Distribution individual GC-related stop-the-world pause latencies.",
        kind=ValueKind.FLOAT64_HISTOGRAM,
        cumulative=True,
    ),
    MetricDescriptor(
        name="/gc/stack/starting-size:bytes",
        description="The stack size of new goroutines.",
        kind=ValueKind.UINT64,
    ),
    MetricDescriptor(
        name="/memory/classes/heap/free:bytes",
        description=(
            "Memory that is completely free and eligible to be returned to the underlying system, "
            "but has not been. This metric is the runtime's estimate of free address space that is "
            "backed by physical memory."
        ),
        kind=ValueKind.UINT64,
    ),
    MetricDescriptor(
        name="/memory/classes/heap/objects:bytes",
        description=(
            "Memory occupied by live objects and dead objects that have not yet been marked "
            "free by the garbage collector."
        ),
        kind=ValueKind.UINT64,
    ),
    MetricDescriptor(
        name="/memory/classes/heap/released:bytes",
        description=(
            "Memory that is completely free and has been returned to the underlying system. This "
            "metric is the runtime's estimate of free address space that is still mapped into the "
            "process, but is not backed by physical memory."
        ),
        kind=ValueKind.UINT64,
    ),
    MetricDescriptor(
        name="/memory/classes/heap/stacks:bytes",
        description=(
            "Memory allocated from the heap that is reserved for stack space, whether or not "
            "it is currently in-use."
        ),
        kind=ValueKind.UINT64,
    ),
    MetricDescriptor(
        name="/memory/classes/heap/unused:bytes",
        description="Memory that is reserved for heap objects but is not currently used to hold heap objects.",
        kind=ValueKind.UINT64,
    ),
    MetricDescriptor(
        name="/memory/classes/metadata/mcache/free:bytes",
        description="Memory that is reserved for runtime mcache structures, but not in-use.",
        kind=ValueKind.UINT64,
    ),
    MetricDescriptor(
        name="/memory/classes/metadata/mcache/inuse:bytes",
        description="Memory that is occupied by runtime mcache structures that are currently being used.",
        kind=ValueKind.UINT64,
    ),
    MetricDescriptor(
        name="/memory/classes/metadata/mspan/free:bytes",
        description="Memory that is reserved for runtime mspan structures, but not in-use.",
        kind=ValueKind.UINT64,
    ),
    MetricDescriptor(
        name="/memory/classes/metadata/mspan/inuse:bytes",
        description="Memory that is occupied by runtime mspan structures that are currently being used.",
        kind=ValueKind.UINT64,
    ),
    MetricDescriptor(
        name="/memory/classes/metadata/other:bytes",
        description="Memory that is reserved for or used to hold runtime metadata.",
        kind=ValueKind.UINT64,
    ),
    MetricDescriptor(
        name="/memory/classes/os-stacks:bytes",
        description="Stack memory allocated by the underlying operating system.",
        kind=ValueKind.UINT64,
    ),
    MetricDescriptor(
        name="/memory/classes/other:bytes",
        description=(
            "Memory used by execution trace buffers, structures for debugging the runtime, "
            "finalizer and profiler specials, and more."
        ),
        kind=ValueKind.UINT64,
    ),
    MetricDescriptor(
        name="/memory/classes/profiling/buckets:bytes",
        description="Memory that is used by the stack trace hash map used for profiling.",
        kind=ValueKind.UINT64,
    ),
    MetricDescriptor(
        name="/memory/classes/total:bytes",
        description=(
            "All memory mapped by the Go runtime into the current process as read-write. "
            "Note that this does not include memory mapped by code called via cgo or via the "
            "syscall package. Sum of all metrics in /memory/classes."
        ),
        kind=ValueKind.UINT64,
    ),
    MetricDescriptor(
        name="/sched/goroutines:goroutines",
        description="Count of live goroutines.",
        kind=ValueKind.UINT64,
    ),
    MetricDescriptor(
        name="/sched/latencies:seconds",
        description=(
            "Distribution of the time goroutines have spent in the scheduler in a runnable "
            "state before actually running."
        ),
        kind=ValueKind.FLOAT64_HISTOGRAM,
    ),
]

# Import fails on a corrupt table; a process must not start with one.
METRICS_CATALOG: Tuple[MetricDescriptor, ...] = validate_catalog(_CATALOG_ENTRIES)
del _CATALOG_ENTRIES

_BY_NAME: Dict[str, MetricDescriptor] = {desc.name: desc for desc in METRICS_CATALOG}

logger.debug("Loaded metrics catalog with %d entries", len(METRICS_CATALOG))


# =============================================================================
# Accessors
# =============================================================================


def all_metrics() -> List[MetricDescriptor]:
    """Return every catalog entry in declaration order.

    Each call returns a new list, so callers may sort or filter it freely.
    The order is stable within a process but carries no meaning.
    """
    return list(METRICS_CATALOG)


def metric_names() -> List[str]:
    """Return the names of all catalog entries in declaration order."""
    return [desc.name for desc in METRICS_CATALOG]


def get_metric(name: str) -> Optional[MetricDescriptor]:
    """Look up a catalog entry by its full name, or None if not registered."""
    return _BY_NAME.get(name)


def get_metrics_by_kind(kind: ValueKind) -> List[MetricDescriptor]:
    """Return entries whose values have the given kind."""
    return [desc for desc in METRICS_CATALOG if desc.kind is kind]


def get_cumulative_metrics() -> List[MetricDescriptor]:
    """Return entries for which a rate of change is meaningful."""
    return [desc for desc in METRICS_CATALOG if desc.cumulative]


def get_metrics_by_prefix(prefix: str) -> List[MetricDescriptor]:
    """Return entries whose path lies under *prefix*.

    ``/memory/classes`` matches ``/memory/classes/total:bytes`` but not
    ``/memory/classes-extra:bytes``.
    """
    return [desc for desc in METRICS_CATALOG if desc.is_under(prefix)]
