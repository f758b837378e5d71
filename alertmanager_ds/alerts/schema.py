"""Column derivation: the union of attribute keys across a batch of alerts."""

from __future__ import annotations

from collections.abc import Sequence

from alertmanager_ds.core.types import AlertRecord, Column, FieldKind

TIME_COLUMN = "Time"
SEVERITY_COLUMN = "SeverityValue"

# Appended after annotations and labels; filled from the alert status
STATUS_KEYS: tuple[str, ...] = ("alertstatus", "alertstatus_code")

# Number of fixed columns preceding the attribute columns
FIXED_COLUMN_COUNT = 2


def _fixed_columns() -> list[Column]:
    return [
        Column(name=TIME_COLUMN, kind=FieldKind.TIME),
        Column(name=SEVERITY_COLUMN, kind=FieldKind.NUMBER),
    ]


def attribute_names(alerts: Sequence[AlertRecord]) -> list[str]:
    """Annotation keys, then label keys, then the status keys.

    Keys are collected in record order and then key order, and each name
    keeps the position of its first occurrence.
    """
    names: list[str] = []
    for alert in alerts:
        names.extend(alert.annotations)
    for alert in alerts:
        names.extend(alert.labels)
    names.extend(STATUS_KEYS)
    # dict preserves insertion order, so this is a stable dedup
    return list(dict.fromkeys(names))


def derive_columns(alerts: Sequence[AlertRecord]) -> list[Column]:
    """Build the table schema for a batch.

    An empty batch yields only ``Time`` and ``SeverityValue``.
    """
    columns = _fixed_columns()
    if not alerts:
        return columns
    columns.extend(
        Column(name=name, kind=FieldKind.STRING) for name in attribute_names(alerts)
    )
    return columns
