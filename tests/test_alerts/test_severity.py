"""Tests for severity classification."""

from __future__ import annotations

import pytest

from alertmanager_ds.alerts.severity import SeverityRank, classify_severity


class TestClassifySeverity:
    @pytest.mark.parametrize(
        ("label", "rank"),
        [("critical", 1), ("warning", 2), ("info", 3)],
    )
    def test_known_labels(self, label: str, rank: int) -> None:
        assert classify_severity(label) == rank

    @pytest.mark.parametrize("label", ["", "CRITICAL", "page", "error", "none"])
    def test_unknown_labels_rank_four(self, label: str) -> None:
        assert classify_severity(label) == 4

    def test_missing_label_ranks_four(self) -> None:
        assert classify_severity(None) == 4

    def test_returns_plain_int(self) -> None:
        rank = classify_severity("warning")
        assert type(rank) is int

    def test_ranks_sort_critical_first(self) -> None:
        labels = ["info", "bogus", "critical", "warning"]
        assert sorted(labels, key=classify_severity) == ["critical", "warning", "info", "bogus"]

    def test_rank_enum_values(self) -> None:
        assert [r.value for r in SeverityRank] == [1, 2, 3, 4]
