"""Row extraction: one alert flattened against a frozen column list."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from alertmanager_ds.alerts.schema import FIXED_COLUMN_COUNT
from alertmanager_ds.alerts.severity import classify_severity
from alertmanager_ds.alerts.status import status_value
from alertmanager_ds.core.types import AlertRecord, Column


def attribute_value(alert: AlertRecord, name: str) -> str:
    """Annotation value if non-empty, else label value, else ``""``.

    The status columns fall back to the alert's ``status`` object.
    """
    return alert.annotations.get(name) or alert.labels.get(name) or status_value(alert, name)


def extract_row(columns: Sequence[Column], alert: AlertRecord) -> list[Any]:
    """Flatten *alert* into a row aligned to *columns*.

    The first two cells are the raw ``startsAt`` string and the severity
    rank; every attribute the alert does not carry becomes ``""``.
    """
    row: list[Any] = [alert.starts_at, classify_severity(alert.labels.get("severity"))]
    row.extend(attribute_value(alert, col.name) for col in columns[FIXED_COLUMN_COUNT:])
    return row
