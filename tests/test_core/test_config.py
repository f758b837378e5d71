"""Tests for alertmanager_ds/core/config.py: YAML loading, defaults, SecretStr."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from alertmanager_ds.core.config import (
    CONFIG_PATH_ENV,
    URL_ENV,
    AlertmanagerConfig,
    LoggingConfig,
    Settings,
    get_settings,
    load_settings,
    reset_settings,
)


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Reset the global settings cache and env overrides before each test."""
    monkeypatch.delenv(URL_ENV, raising=False)
    monkeypatch.delenv(CONFIG_PATH_ENV, raising=False)
    reset_settings()


class TestDefaults:
    """Settings should have sensible defaults when no YAML is provided."""

    def test_default_alertmanager_config(self) -> None:
        cfg = AlertmanagerConfig()
        assert cfg.url == "http://localhost:9093"
        assert cfg.alerts_path == "/api/v2/alerts"
        assert cfg.timeout_secs == 10.0
        assert cfg.basic_auth.get_secret_value() == ""

    def test_default_logging_config(self) -> None:
        cfg = LoggingConfig()
        assert cfg.level == "INFO"
        assert cfg.format == "json"

    def test_default_settings(self) -> None:
        s = Settings()
        assert s.alertmanager.url == "http://localhost:9093"
        assert s.logging.level == "INFO"


class TestYamlLoading:
    """Settings should load correctly from YAML files."""

    def test_load_from_yaml(self, tmp_path: Path) -> None:
        config_data = {
            "alertmanager": {
                "url": "https://am.example.com",
                "basic_auth": "Basic dXNlcjpwYXNz",
                "timeout_secs": 3.5,
            },
            "logging": {
                "level": "DEBUG",
                "format": "console",
            },
        }
        config_file = tmp_path / "settings.yaml"
        config_file.write_text(yaml.dump(config_data))

        settings = load_settings(config_file)

        assert settings.alertmanager.url == "https://am.example.com"
        assert settings.alertmanager.basic_auth.get_secret_value() == "Basic dXNlcjpwYXNz"
        assert settings.alertmanager.timeout_secs == 3.5
        assert settings.logging.level == "DEBUG"
        assert settings.logging.format == "console"

    def test_load_missing_file_uses_defaults(self, tmp_path: Path) -> None:
        settings = load_settings(tmp_path / "nonexistent.yaml")
        assert settings.alertmanager.url == "http://localhost:9093"

    def test_load_empty_file_uses_defaults(self, tmp_path: Path) -> None:
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")
        settings = load_settings(config_file)
        assert settings.alertmanager.alerts_path == "/api/v2/alerts"

    def test_partial_yaml_merges_with_defaults(self, tmp_path: Path) -> None:
        config_file = tmp_path / "settings.yaml"
        config_file.write_text(yaml.dump({"alertmanager": {"timeout_secs": 1.0}}))

        settings = load_settings(config_file)
        assert settings.alertmanager.timeout_secs == 1.0
        # Other defaults still intact
        assert settings.alertmanager.url == "http://localhost:9093"
        assert settings.logging.format == "json"

    def test_get_settings_caches(self, tmp_path: Path) -> None:
        config_file = tmp_path / "settings.yaml"
        config_file.write_text(yaml.dump({"alertmanager": {"url": "http://am:9093"}}))
        loaded = load_settings(config_file)
        assert get_settings() is loaded


class TestSecretStr:
    """The Authorization header value should not leak through repr."""

    def test_secret_str_repr_does_not_leak(self) -> None:
        cfg = AlertmanagerConfig(basic_auth="Basic c2VjcmV0")  # type: ignore[arg-type]
        repr_str = repr(cfg)
        assert "c2VjcmV0" not in repr_str
        assert "**********" in repr_str


class TestEnvOverrides:
    """Environment variables pick the config file and override the URL."""

    def test_url_env_replaces_yaml_url(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        config_file = tmp_path / "settings.yaml"
        config_file.write_text(yaml.dump({"alertmanager": {"url": "http://am:9093"}}))
        monkeypatch.setenv(URL_ENV, "http://override:9093")

        settings = load_settings(config_file)
        assert settings.alertmanager.url == "http://override:9093"

    def test_config_path_env_used_without_explicit_path(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        config_file = tmp_path / "from_env.yaml"
        config_file.write_text(yaml.dump({"alertmanager": {"timeout_secs": 2.0}}))
        monkeypatch.setenv(CONFIG_PATH_ENV, str(config_file))

        assert load_settings().alertmanager.timeout_secs == 2.0

    def test_explicit_path_wins_over_env(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        env_file = tmp_path / "env.yaml"
        env_file.write_text(yaml.dump({"alertmanager": {"timeout_secs": 2.0}}))
        explicit = tmp_path / "explicit.yaml"
        explicit.write_text(yaml.dump({"alertmanager": {"timeout_secs": 7.0}}))
        monkeypatch.setenv(CONFIG_PATH_ENV, str(env_file))

        assert load_settings(explicit).alertmanager.timeout_secs == 7.0

    def test_url_env_does_not_leak_into_defaults(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        monkeypatch.setenv(URL_ENV, "http://override:9093")
        load_settings(tmp_path / "missing.yaml")
        assert Settings().alertmanager.url == "http://localhost:9093"
