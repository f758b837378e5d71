"""Alert batch → table: derive the schema once, then extract every row."""

from __future__ import annotations

from collections.abc import Sequence

import structlog

from alertmanager_ds.alerts.rows import extract_row
from alertmanager_ds.alerts.schema import derive_columns
from alertmanager_ds.core.types import AlertRecord, AlertTable

logger = structlog.stdlib.get_logger()


def build_alert_table(ref_id: str, alerts: Sequence[AlertRecord]) -> AlertTable:
    """Convert a batch of alerts into a table tagged with *ref_id*.

    Row width is fixed by the union of attributes across the whole batch,
    so the schema must be derived before any row is extracted. Rows keep
    the input order.
    """
    columns = derive_columns(alerts)
    rows = [extract_row(columns, alert) for alert in alerts]
    logger.debug(
        "alert_table_built",
        ref_id=ref_id,
        columns=len(columns),
        rows=len(rows),
    )
    return AlertTable(ref_id=ref_id, columns=columns, rows=rows)


def empty_table(ref_id: str) -> AlertTable:
    """A table with no columns at all, returned for hidden or unsupported queries."""
    return AlertTable(ref_id=ref_id)
