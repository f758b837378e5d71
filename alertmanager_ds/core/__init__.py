"""Core module: config, types, logging."""

from alertmanager_ds.core.config import (
    AlertmanagerConfig,
    Settings,
    get_settings,
    load_settings,
    reset_settings,
)
from alertmanager_ds.core.logging import setup_logging
from alertmanager_ds.core.types import (
    ALL_VALUE,
    AlertQuery,
    AlertRecord,
    AlertStatus,
    AlertTable,
    Column,
    DatasourceStatus,
    FieldKind,
    QueryScenario,
    TemplateVariable,
)

__all__ = [
    "ALL_VALUE",
    "AlertQuery",
    "AlertRecord",
    "AlertStatus",
    "AlertTable",
    "AlertmanagerConfig",
    "Column",
    "DatasourceStatus",
    "FieldKind",
    "QueryScenario",
    "Settings",
    "TemplateVariable",
    "get_settings",
    "load_settings",
    "reset_settings",
    "setup_logging",
]
