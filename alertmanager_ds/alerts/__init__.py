"""Alert list → table conversion and alert query construction."""

from alertmanager_ds.alerts.query import build_alert_params, encode_component, split_matchers
from alertmanager_ds.alerts.rows import attribute_value, extract_row
from alertmanager_ds.alerts.schema import (
    SEVERITY_COLUMN,
    STATUS_KEYS,
    TIME_COLUMN,
    attribute_names,
    derive_columns,
)
from alertmanager_ds.alerts.severity import SeverityRank, classify_severity
from alertmanager_ds.alerts.status import status_code, status_value
from alertmanager_ds.alerts.table import build_alert_table, empty_table

__all__ = [
    "SEVERITY_COLUMN",
    "STATUS_KEYS",
    "SeverityRank",
    "TIME_COLUMN",
    "attribute_names",
    "attribute_value",
    "build_alert_params",
    "build_alert_table",
    "classify_severity",
    "derive_columns",
    "empty_table",
    "encode_component",
    "extract_row",
    "split_matchers",
    "status_code",
    "status_value",
]
