"""Tests for layout, observability and API config defaults and env overrides."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from refcheck.core.config import APIConfig, AppSettings, ObservabilityConfig, ReportLayoutConfig


class TestReportLayoutConfigDefaults:
    def test_page_size_default(self) -> None:
        assert ReportLayoutConfig().page_size == "a4"

    def test_geometry_defaults(self) -> None:
        cfg = ReportLayoutConfig()
        assert cfg.margin_mm == 20.0
        assert cfg.header_top_mm == 12.0
        assert cfg.header_height_mm == 8.0
        assert cfg.bottom_margin_mm == 25.0

    def test_labels_default(self) -> None:
        cfg = ReportLayoutConfig()
        assert cfg.report_title == "Reference Check Report"
        assert cfg.report_kind == "Reference Check"
        assert cfg.confidentiality_label == "CONFIDENTIAL"

    def test_include_metadata_default(self) -> None:
        assert ReportLayoutConfig().include_metadata is True

    def test_invariant_default(self) -> None:
        assert ReportLayoutConfig().invariant is True

    def test_font_family_default(self) -> None:
        assert ReportLayoutConfig().font_family == "Helvetica"


class TestReportLayoutConfigEnvOverrides:
    def test_page_size_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("REFCHECK_PDF_PAGE_SIZE", "letter")
        assert ReportLayoutConfig().page_size == "letter"

    def test_margin_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("REFCHECK_PDF_MARGIN_MM", "15")
        assert ReportLayoutConfig().margin_mm == 15.0

    def test_include_metadata_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("REFCHECK_PDF_INCLUDE_METADATA", "false")
        assert ReportLayoutConfig().include_metadata is False

    def test_rejects_unknown_page_size(self, monkeypatch) -> None:
        monkeypatch.setenv("REFCHECK_PDF_PAGE_SIZE", "a3")
        with pytest.raises(ValidationError):
            ReportLayoutConfig()

    def test_font_family_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("REFCHECK_PDF_FONT_FAMILY", "Times-Roman")
        assert ReportLayoutConfig().font_family == "Times-Roman"

    def test_rejects_font_without_standard_faces(self, monkeypatch) -> None:
        monkeypatch.setenv("REFCHECK_PDF_FONT_FAMILY", "Arial")
        with pytest.raises(ValidationError):
            ReportLayoutConfig()


class TestOtherConfig:
    def test_observability_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("REFCHECK_OBSERVABILITY_LOG_LEVEL", "DEBUG")
        assert ObservabilityConfig().log_level == "DEBUG"

    def test_api_defaults(self) -> None:
        assert APIConfig().title == "refcheck-report"

    def test_app_settings_groups(self) -> None:
        settings = AppSettings()
        assert isinstance(settings.pdf, ReportLayoutConfig)
        assert isinstance(settings.observability, ObservabilityConfig)
        assert isinstance(settings.api, APIConfig)
