"""Pydantic settings loaded from YAML configuration."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, SecretStr

_settings: Settings | None = None

_DEFAULT_CONFIG_PATH = Path("config/settings.yaml")

CONFIG_PATH_ENV = "ALERTMANAGER_DS_CONFIG"
URL_ENV = "ALERTMANAGER_URL"


class AlertmanagerConfig(BaseModel):
    """Alertmanager backend connection configuration."""

    url: str = "http://localhost:9093"
    alerts_path: str = "/api/v2/alerts"
    basic_auth: SecretStr = SecretStr("")
    timeout_secs: float = 10.0


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    format: str = "json"


class Settings(BaseModel):
    """Root settings container."""

    alertmanager: AlertmanagerConfig = AlertmanagerConfig()
    logging: LoggingConfig = LoggingConfig()


def _resolve_config_path(path: str | Path | None) -> Path:
    if path:
        return Path(path)
    env_path = os.environ.get(CONFIG_PATH_ENV)
    return Path(env_path) if env_path else _DEFAULT_CONFIG_PATH


def _read_yaml(config_path: Path) -> dict[str, Any]:
    if not config_path.exists():
        return {}
    with open(config_path) as f:
        raw = yaml.safe_load(f)
    return raw if isinstance(raw, dict) else {}


def load_settings(path: str | Path | None = None) -> Settings:
    """Load settings from YAML, apply env overrides, and cache globally.

    Args:
        path: Path to YAML config. Falls back to ``$ALERTMANAGER_DS_CONFIG``,
            then config/settings.yaml. A missing file means defaults.

    Returns:
        Parsed Settings instance. ``$ALERTMANAGER_URL``, when set, replaces
        ``alertmanager.url``.
    """
    global _settings  # noqa: PLW0603

    settings = Settings(**_read_yaml(_resolve_config_path(path)))
    env_url = os.environ.get(URL_ENV)
    if env_url:
        settings.alertmanager.url = env_url

    _settings = settings
    return _settings


def get_settings() -> Settings:
    """Return the cached settings, loading defaults if not yet loaded."""
    global _settings  # noqa: PLW0603
    if _settings is None:
        _settings = load_settings()
    return _settings


def reset_settings() -> None:
    """Reset the cached settings (useful for testing)."""
    global _settings  # noqa: PLW0603
    _settings = None
