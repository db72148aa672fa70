"""Shared fixtures for refcheck-report tests."""

from __future__ import annotations

import dataclasses
from datetime import date

import pytest

from refcheck.core.config import ReportLayoutConfig
from refcheck.formatters.layout import PageManager
from refcheck.formatters.pdf_styles import build_text_styles, page_dimensions
from refcheck.models import ReportContentModel
from tests.fakes.fake_surface import FakeSurface
from tests.fakes.sample_report import REPORT_DATE, make_report, make_transcript


@pytest.fixture
def report_date() -> date:
    return REPORT_DATE


@pytest.fixture
def jane_doe() -> ReportContentModel:
    return make_report()


@pytest.fixture
def jane_doe_with_transcript() -> ReportContentModel:
    return make_report(transcript=make_transcript(20))


@pytest.fixture
def layout_config() -> ReportLayoutConfig:
    return ReportLayoutConfig()


@pytest.fixture
def surface() -> FakeSurface:
    return FakeSurface()


@pytest.fixture
def manager(surface: FakeSurface, layout_config: ReportLayoutConfig) -> PageManager:
    """Page manager on an A4 fake surface, positioned at the first content line."""
    return PageManager(
        surface,
        layout_config,
        build_text_styles(),
        subject_name="Jane Doe",
        footer_date=REPORT_DATE.isoformat(),
    )


@pytest.fixture
def fake_surface_factory():
    """Surface factory for ``ReportCompositor`` that remembers what it built."""
    created: list[FakeSurface] = []

    def factory(config: ReportLayoutConfig, model: ReportContentModel) -> FakeSurface:
        surface = FakeSurface(*page_dimensions(config.page_size))
        created.append(surface)
        return surface

    factory.created = created
    return factory


@pytest.fixture
def unregistered_font(monkeypatch: pytest.MonkeyPatch) -> str:
    """Make the compositor build every style on a font reportlab does not know."""
    font = "NoSuchFontFamily"

    def styles(font_family: str = "Helvetica", body_size: int = 10):
        real = build_text_styles(font_family, body_size)
        return {name: dataclasses.replace(style, font=font) for name, style in real.items()}

    monkeypatch.setattr("refcheck.formatters.pdf_formatter.build_text_styles", styles)
    return font
