"""Tests for the query_alerts CLI helpers: variable parsing, table rendering."""

from __future__ import annotations

import pytest

from alertmanager_ds.alerts.table import build_alert_table
from alertmanager_ds.core.types import AlertRecord

from scripts.query_alerts import parse_variable, render_table


class TestParseVariable:
    def test_single_value(self) -> None:
        var = parse_variable("env=prod")
        assert var.name == "env"
        assert var.current == "prod"
        assert not var.multi

    def test_multiple_values(self) -> None:
        var = parse_variable("env=prod, staging")
        assert var.current == ["prod", "staging"]
        assert var.multi

    def test_empty_value(self) -> None:
        assert parse_variable("env=").current == ""

    @pytest.mark.parametrize("spec", ["env", "=prod"])
    def test_invalid(self, spec: str) -> None:
        with pytest.raises(ValueError, match="name=value"):
            parse_variable(spec)


class TestRenderTable:
    def test_header_and_rows(self) -> None:
        table = build_alert_table("A", [
            AlertRecord(
                startsAt="2024-05-01T10:00:00Z",
                labels={"alertname": "DiskFull", "severity": "critical"},
            ),
        ])
        lines = render_table(table).splitlines()
        assert lines[0].split() == [
            "Time",
            "SeverityValue",
            "alertname",
            "severity",
            "alertstatus",
            "alertstatus_code",
        ]
        assert set(lines[1]) == {"-"}
        assert lines[2].split() == ["2024-05-01T10:00:00Z", "1", "DiskFull", "critical"]

    def test_long_cells_truncated(self) -> None:
        table = build_alert_table("A", [
            AlertRecord(startsAt="t", annotations={"description": "x" * 100}),
        ])
        assert "x" * 41 not in render_table(table)
