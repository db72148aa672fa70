"""Tests for the JSONFormatter."""

from __future__ import annotations

import json

from refcheck.formatters import JSONFormatter
from refcheck.formatters.protocols import IOutputFormatter


class TestJSONFormatter:
    def test_format_returns_valid_json(self, jane_doe) -> None:
        data = json.loads(JSONFormatter().format(jane_doe))
        assert data["subject"]["name"] == "Jane Doe"
        assert len(data["category_breakdown"]) == 2

    def test_enums_and_dates_serialized(self, jane_doe) -> None:
        data = json.loads(JSONFormatter().format(jane_doe))
        assert data["recommendation"]["label"] == "strongly-recommend"
        assert data["session_details"]["completed_at"] == "2026-10-12T15:30:00"

    def test_transcript_none_preserved(self, jane_doe) -> None:
        data = json.loads(JSONFormatter().format(jane_doe))
        assert data["transcript"] is None

    def test_format_to_file(self, jane_doe, tmp_path) -> None:
        path = tmp_path / "report.json"
        assert JSONFormatter().format_to_file(jane_doe, path) == path
        assert json.loads(path.read_text())["executive_summary"].startswith("Based on")

    def test_content_type(self) -> None:
        assert JSONFormatter().content_type == "application/json"

    def test_implements_protocol(self) -> None:
        assert isinstance(JSONFormatter(), IOutputFormatter)
