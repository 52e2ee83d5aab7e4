"""Value kinds reported by the runtime sampler.

The members mirror the sampler's value kinds one-to-one. Adding a member here
is only meaningful together with the sampler producing that kind.
"""

from enum import Enum


class ValueKind(Enum):
    """Shape of the values a metric produces."""

    BAD = 0
    UINT64 = 1
    FLOAT64 = 2
    FLOAT64_HISTOGRAM = 3

    @property
    def is_histogram(self) -> bool:
        return self is ValueKind.FLOAT64_HISTOGRAM

    @property
    def label(self) -> str:
        """Lowercase name used in JSON and docs output (e.g. ``float64-histogram``)."""
        return self.name.lower().replace("_", "-")

    @classmethod
    def from_label(cls, label: str) -> "ValueKind":
        """Look up a kind by its label or member name, case-insensitively.

        Raises:
            ValueError: If no kind matches.
        """
        normalized = label.strip().lower().replace("_", "-")
        for kind in cls:
            if kind.label == normalized:
                return kind
        valid = ", ".join(kind.label for kind in cls)
        raise ValueError(f"Unknown value kind {label!r}. Valid kinds: {valid}")
