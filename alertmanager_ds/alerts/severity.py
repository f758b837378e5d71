"""Severity label → numeric rank (lower is more urgent)."""

from __future__ import annotations

from enum import IntEnum


class SeverityRank(IntEnum):
    """Plottable severity rank: ordered so sorting puts critical first."""

    CRITICAL = 1
    WARNING = 2
    INFO = 3
    UNKNOWN = 4


_SEVERITY_RANKS: dict[str, SeverityRank] = {
    "critical": SeverityRank.CRITICAL,
    "warning": SeverityRank.WARNING,
    "info": SeverityRank.INFO,
}


def classify_severity(label: str | None) -> int:
    """Rank a ``severity`` label value; unknown or missing labels rank 4."""
    if label is None:
        return int(SeverityRank.UNKNOWN)
    return int(_SEVERITY_RANKS.get(label, SeverityRank.UNKNOWN))
