"""Alertmanager HTTP datasource."""

from alertmanager_ds.datasource.client import AlertmanagerDatasource, parse_alerts
from alertmanager_ds.datasource.exceptions import (
    DatasourceConnectionError,
    DatasourceError,
    DatasourceParseError,
)

__all__ = [
    "AlertmanagerDatasource",
    "DatasourceConnectionError",
    "DatasourceError",
    "DatasourceParseError",
    "parse_alerts",
]
