"""Async Alertmanager datasource: fetches alert lists and turns them into tables."""

from __future__ import annotations

import asyncio
from collections.abc import Iterable, Sequence
from types import TracebackType
from typing import Any

import httpx
import structlog
from pydantic import ValidationError

from alertmanager_ds.alerts.query import build_alert_params
from alertmanager_ds.alerts.table import build_alert_table, empty_table
from alertmanager_ds.core.config import AlertmanagerConfig, get_settings
from alertmanager_ds.core.logging import bind_query_context
from alertmanager_ds.core.types import (
    AlertQuery,
    AlertRecord,
    AlertTable,
    DatasourceStatus,
    QueryScenario,
    TemplateVariable,
)
from alertmanager_ds.datasource.exceptions import (
    DatasourceConnectionError,
    DatasourceParseError,
)

logger = structlog.stdlib.get_logger()


def parse_alerts(body: Any) -> list[AlertRecord]:
    """Validate a decoded ``/api/v2/alerts`` body into AlertRecords."""
    if not isinstance(body, list):
        raise DatasourceParseError(
            f"Expected a list of alerts, got {type(body).__name__}"
        )
    try:
        return [AlertRecord.model_validate(item) for item in body]
    except ValidationError as exc:
        raise DatasourceParseError(f"Malformed alert in response: {exc}") from exc


class AlertmanagerDatasource:
    """Queries an Alertmanager-compatible backend for alert tables.

    Usage::

        async with AlertmanagerDatasource() as ds:
            tables = await ds.query([AlertQuery(ref_id="A", filters='env="prod"')])
    """

    def __init__(self, config: AlertmanagerConfig | None = None) -> None:
        cfg = config or get_settings().alertmanager
        self._config = cfg
        self._url = cfg.url.rstrip("/")
        self._headers: dict[str, str] = {"Content-Type": "application/json"}
        basic_auth = cfg.basic_auth.get_secret_value()
        if basic_auth:
            self._headers["Authorization"] = basic_auth
        self._http: httpx.AsyncClient | None = None

    @property
    def url(self) -> str:
        return self._url

    @property
    def headers(self) -> dict[str, str]:
        return dict(self._headers)

    @property
    def connected(self) -> bool:
        """Whether the HTTP client is active."""
        return self._http is not None and not self._http.is_closed

    async def connect(self) -> None:
        """Create the httpx async client."""
        self._http = httpx.AsyncClient(
            headers=self._headers,
            timeout=httpx.Timeout(self._config.timeout_secs),
        )
        logger.info("datasource_connected", url=self._url)

    async def close(self) -> None:
        """Close the httpx async client."""
        if self._http is not None:
            await self._http.aclose()
            self._http = None
            logger.info("datasource_closed", url=self._url)

    async def __aenter__(self) -> AlertmanagerDatasource:
        await self.connect()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.close()

    @property
    def http(self) -> httpx.AsyncClient:
        """Access the HTTP client, raising if not connected."""
        if self._http is None:
            raise DatasourceConnectionError("HTTP client not connected")
        return self._http

    # ── Queries ──────────────────────────────────────────────────

    def alerts_url(self, params: Sequence[str]) -> str:
        """Full alert-listing URL; *params* are already encoded."""
        url = f"{self._url}{self._config.alerts_path}"
        if params:
            url = f"{url}?{'&'.join(params)}"
        return url

    async def query(
        self,
        queries: Sequence[AlertQuery],
        variables: Iterable[TemplateVariable] = (),
    ) -> list[AlertTable]:
        """Run every query concurrently; results keep the query order.

        If any query fails, the others still in flight are cancelled and
        the first error is raised.
        """
        variable_list = list(variables)
        tasks = [
            asyncio.ensure_future(self._run_query(q, variable_list)) for q in queries
        ]
        try:
            return list(await asyncio.gather(*tasks))
        except BaseException:
            for task in tasks:
                task.cancel()
            # Collect the cancelled siblings so none is left unawaited
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

    async def _run_query(
        self,
        query: AlertQuery,
        variables: list[TemplateVariable],
    ) -> AlertTable:
        # Runs in its own task, so the bound context stays per-query
        bind_query_context(query.ref_id, scenario=str(query.scenario))

        if query.hide:
            return empty_table(query.ref_id)

        if query.scenario != QueryScenario.ALERTS:
            logger.warning("unsupported_query_scenario")
            return empty_table(query.ref_id)

        params = build_alert_params(query, variables)
        alerts = await self.fetch_alerts(params)
        table = build_alert_table(query.ref_id, alerts)
        logger.info(
            "alerts_query_completed",
            alerts=len(alerts),
            columns=len(table.columns),
        )
        return table

    async def fetch_alerts(self, params: Sequence[str]) -> list[AlertRecord]:
        """GET the alert list for the given encoded parameters."""
        url = self.alerts_url(params)
        try:
            response = await self.http.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise DatasourceConnectionError(
                f"Alertmanager returned {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise DatasourceConnectionError(f"Alertmanager request failed: {exc}") from exc

        try:
            body = response.json()
        except ValueError as exc:
            raise DatasourceParseError("Alertmanager returned invalid JSON") from exc

        return parse_alerts(body)

    # ── Health ───────────────────────────────────────────────────

    async def test_datasource(self) -> DatasourceStatus:
        """Check that the backend answers at its base URL. Never raises."""
        try:
            response = await self.http.get(self._url)
        except (httpx.HTTPError, DatasourceConnectionError) as exc:
            logger.warning("datasource_test_failed", url=self._url, error=str(exc))
            return DatasourceStatus(
                status="error",
                message=f"Unknown error in datasource: {exc}",
                title="Error",
            )

        if response.is_success:
            return DatasourceStatus(
                status="success",
                message="Datasource is working",
                title="Success",
            )

        logger.warning(
            "datasource_test_failed",
            url=self._url,
            status_code=response.status_code,
        )
        return DatasourceStatus(
            status="error",
            message=f"Datasource is not working: {response.text}",
            title="Error",
        )
