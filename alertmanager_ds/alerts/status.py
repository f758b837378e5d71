"""Values of the ``alertstatus`` / ``alertstatus_code`` columns.

They come from the alert's ``status`` object, not its labels, so they
never take part in label-key ordering.
"""

from __future__ import annotations

from alertmanager_ds.alerts.schema import STATUS_KEYS
from alertmanager_ds.core.types import AlertRecord

# Alertmanager state → alertstatus_code (anything unlisted is 0)
_STATUS_CODES: dict[str, int] = {
    "unprocessed": 0,
    "active": 1,
    "suppressed": 2,
}


def status_code(state: str) -> int:
    return _STATUS_CODES.get(state, 0)


def status_value(alert: AlertRecord, name: str) -> str:
    """Cell value for a status column, ``""`` for other names or no status."""
    if name not in STATUS_KEYS or alert.status is None or not alert.status.state:
        return ""
    state_key, _ = STATUS_KEYS
    if name == state_key:
        return alert.status.state
    return str(status_code(alert.status.state))
