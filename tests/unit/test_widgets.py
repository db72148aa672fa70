"""Tests for the visual widgets."""

from __future__ import annotations

import pytest

from refcheck.formatters.pdf_styles import (
    CRITICAL_COLOR,
    INFO_COLOR,
    PRIMARY_COLOR,
    SEVERITY_COLORS,
    SUCCESS_COLOR,
    WARNING_COLOR,
)
from refcheck.formatters.widgets import (
    CheckboxMarker,
    LabeledRow,
    RecommendationPanel,
    ScoreBar,
    ScoreGauge,
    SectionTitle,
    SeverityBadge,
    SignatureBlock,
)
from refcheck.models import Recommendation, RecommendationLabel, Severity


class TestScoreBar:
    @pytest.mark.parametrize(
        ("score", "color"),
        [(4.5, SUCCESS_COLOR), (3.5, INFO_COLOR), (2.5, WARNING_COLOR), (1, CRITICAL_COLOR)],
    )
    def test_fill_color_tiers(self, score, color) -> None:
        assert ScoreBar(score, 5).fill_color == color

    def test_ratio_clamped(self) -> None:
        assert ScoreBar(7, 5).ratio == 1.0
        assert ScoreBar(-1, 5).ratio == 0.0

    def test_fill_proportional(self, manager, surface) -> None:
        ScoreBar(4, 5).place(manager)
        track, fill = surface.of_kind("rect")
        assert fill.params["width"] == pytest.approx(track.params["width"] * 0.8)
        assert "4/5" in surface.texts()

    def test_zero_score_draws_track_only(self, manager, surface) -> None:
        ScoreBar(0, 5).place(manager)
        assert len(surface.of_kind("rect")) == 1

    def test_never_split(self, manager, surface) -> None:
        manager.advance(245)
        ScoreBar(3, 5).place(manager)
        assert {c.page for c in surface.of_kind("rect")} == {2}

    def test_label_drawn_above_bar(self, manager, surface) -> None:
        bar = ScoreBar(3, 5, label="Communication")
        assert bar.height(manager) > ScoreBar(3, 5).height(manager)
        bar.place(manager)
        label = [c for c in surface.of_kind("text") if c.params["text"] == "Communication"][0]
        track = surface.of_kind("rect")[0]
        assert label.params["y"] < track.params["y"]


class TestScoreGauge:
    def test_sweep_proportional(self) -> None:
        assert ScoreGauge(75).sweep_degrees == pytest.approx(270.0)
        assert ScoreGauge(100).sweep_degrees == pytest.approx(360.0)

    def test_arc_starts_at_twelve_and_runs_clockwise(self, manager, surface) -> None:
        ScoreGauge(50).place(manager)
        (segment,) = surface.of_kind("segment")
        assert segment.params["start_deg"] == 90
        assert segment.params["extent_deg"] == pytest.approx(-180.0)
        assert segment.params["color"] == PRIMARY_COLOR

    def test_zero_score_renders_empty_gauge(self, manager, surface) -> None:
        ScoreGauge(0).place(manager)
        assert surface.of_kind("segment") == []
        assert len(surface.of_kind("circle")) == 1
        assert "0" in surface.texts()
        assert "/100" in surface.texts()

    def test_height(self, manager) -> None:
        assert ScoreGauge(50).height(manager) == pytest.approx(56.0)

    def test_never_split(self, manager, surface) -> None:
        manager.advance(220)
        ScoreGauge(60).place(manager)
        assert {c.page for c in surface.of_kind("circle")} == {2}


class TestSeverityBadge:
    @pytest.mark.parametrize("severity", list(Severity))
    def test_color_per_severity(self, severity) -> None:
        assert SeverityBadge(severity).color == SEVERITY_COLORS[severity]

    def test_draws_label(self, manager, surface) -> None:
        SeverityBadge(Severity.MODERATE).place(manager)
        (rect,) = surface.of_kind("rect")
        assert rect.params["fill"] == WARNING_COLOR
        assert rect.params["radius"] > 0
        assert "MODERATE" in surface.texts()


class TestSectionTitle:
    def test_title_and_rule(self, manager, surface) -> None:
        SectionTitle("Key Findings").place(manager)
        assert surface.texts() == ["Key Findings"]
        assert len(surface.of_kind("line")) == 1
        assert manager.cursor_y == pytest.approx(36.0)

    def test_kept_with_following_line(self, manager) -> None:
        manager.advance(240)
        SectionTitle("Red Flags").place(manager, keep_with=6)
        assert manager.page_number == 2


class TestMarkers:
    def test_checked_box_is_filled_and_ticked(self, manager, surface) -> None:
        CheckboxMarker(True).draw(manager, 20, 6)
        (rect,) = surface.of_kind("rect")
        assert rect.params["fill"] == PRIMARY_COLOR
        assert len(surface.of_kind("line")) == 2

    def test_unchecked_box_is_outline(self, manager, surface) -> None:
        CheckboxMarker(False).draw(manager, 20, 6)
        (rect,) = surface.of_kind("rect")
        assert rect.params["fill"] is None
        assert rect.params["stroke"] is not None
        assert surface.of_kind("line") == []


class TestRecommendationPanel:
    def _panel(self) -> RecommendationPanel:
        return RecommendationPanel(
            Recommendation(
                overall_score=64,
                label=RecommendationLabel.CONCERNS,
                confidence_level=0.5,
                reasoning_summary="Mixed.",
            )
        )

    def test_reserve_covers_rest_of_box(self, manager) -> None:
        panel = self._panel()
        assert panel.height(manager) + panel.reserve == pytest.approx(RecommendationPanel.BOX_HEIGHT)

    def test_draws_box_and_rows(self, manager, surface) -> None:
        self._panel().place(manager, keep_with=self._panel().reserve)
        (box,) = surface.of_kind("rect")
        assert box.params["height"] == pytest.approx(45.0)
        texts = surface.texts()
        assert "64/100" in texts
        assert "Some Concerns" in texts
        assert "50%" in texts


class TestOtherWidgets:
    def test_labeled_row(self, manager, surface) -> None:
        LabeledRow("Confidence:", "85%").place(manager)
        assert surface.texts() == ["Confidence:", "85%"]

    def test_signature_block(self, manager, surface) -> None:
        SignatureBlock().place(manager)
        assert "Reviewed By" in surface.texts()
        assert "Date" in surface.texts()
        assert len(surface.of_kind("line")) == 2
