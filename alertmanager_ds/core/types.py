"""Domain types for Alertmanager queries and the alert tables built from them."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Sentinel a template variable carries when "All" is selected
ALL_VALUE = "$__all"


# ── Alert payload ───────────────────────────────────────────────


class AlertStatus(BaseModel):
    """The ``status`` object of an Alertmanager v2 alert."""

    model_config = ConfigDict(populate_by_name=True)

    state: str = ""
    silenced_by: list[str] = Field(default_factory=list, alias="silencedBy")
    inhibited_by: list[str] = Field(default_factory=list, alias="inhibitedBy")


class AlertRecord(BaseModel):
    """One alert as returned by ``GET /api/v2/alerts``.

    Only the fields the table needs are modelled; everything else in the
    payload (fingerprint, receivers, generatorURL, ...) is ignored.
    """

    model_config = ConfigDict(populate_by_name=True)

    starts_at: str = Field(default="", alias="startsAt")
    labels: dict[str, str] = Field(default_factory=dict)
    annotations: dict[str, str] = Field(default_factory=dict)
    status: AlertStatus | None = None


# ── Table Types ─────────────────────────────────────────────────


class FieldKind(StrEnum):
    """Column type understood by the rendering layer."""

    TIME = "time"
    NUMBER = "number"
    STRING = "string"


class Column(BaseModel):
    """A named, typed table column."""

    name: str
    kind: FieldKind = FieldKind.STRING


class AlertTable(BaseModel):
    """Columns plus rows aligned positionally to them, tagged by query."""

    ref_id: str = ""
    columns: list[Column] = Field(default_factory=list)
    rows: list[list[Any]] = Field(default_factory=list)

    @property
    def column_names(self) -> list[str]:
        return [col.name for col in self.columns]

    @property
    def empty(self) -> bool:
        return not self.rows

    def records(self) -> list[dict[str, Any]]:
        """Rows as dicts keyed by column name."""
        names = self.column_names
        return [dict(zip(names, row)) for row in self.rows]

    def to_dict(self) -> dict[str, Any]:
        """Frame-style representation: refId, typed fields and row values."""
        return {
            "refId": self.ref_id,
            "fields": [{"name": col.name, "type": col.kind.value} for col in self.columns],
            "rows": [list(row) for row in self.rows],
        }


# ── Query Types ─────────────────────────────────────────────────


class QueryScenario(StrEnum):
    """Kind of data a query asks the backend for."""

    ALERTS = "alerts"


class AlertQuery(BaseModel):
    """A single alert-listing query as authored in the editor."""

    ref_id: str = "A"
    hide: bool = False
    scenario: str = QueryScenario.ALERTS
    active: bool = True
    silenced: bool = False
    inhibited: bool = False
    unprocessed: bool = True
    receiver: str = ""
    filters: str = ""


class TemplateVariable(BaseModel):
    """A dashboard variable and its current selection."""

    name: str
    current: str | list[str] = Field(default_factory=list)
    multi: bool = False
    include_all: bool = False
    options: list[str] = Field(default_factory=list)
    all_value: str | None = None

    @property
    def all_selected(self) -> bool:
        if isinstance(self.current, str):
            return self.current == ALL_VALUE
        return ALL_VALUE in self.current


class DatasourceStatus(BaseModel):
    """Outcome of a datasource connection test."""

    status: str
    message: str
    title: str = ""

    @property
    def ok(self) -> bool:
        return self.status == "success"
