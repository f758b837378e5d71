"""Exception hierarchy for the Alertmanager datasource client."""

from __future__ import annotations


class DatasourceError(Exception):
    """Base exception for all datasource errors."""


class DatasourceConnectionError(DatasourceError):
    """Transport failure, non-2xx response, or client not connected."""


class DatasourceParseError(DatasourceError):
    """The backend returned something that is not a list of alerts."""
