"""Centralized style constants for PDF output formatting."""

from __future__ import annotations

from dataclasses import dataclass

from refcheck.models import RecommendationLabel, Severity, SpeakerRole

# ── Palette (hex strings) ────────────────────────────────────────────
# Kept as plain hex so the drawing surface can convert to whatever color
# object the rendering library requires (e.g. reportlab HexColor).

PRIMARY_COLOR = "#5B67F3"
SUCCESS_COLOR = "#22C55E"
INFO_COLOR = "#3B82F6"
WARNING_COLOR = "#FB923C"
CRITICAL_COLOR = "#EF4444"
MUTED_COLOR = "#64748B"
TEXT_COLOR = "#323232"
SECONDARY_TEXT_COLOR = "#646464"
CHROME_TEXT_COLOR = "#969696"
RULE_COLOR = "#C8C8C8"
TRACK_COLOR = "#E6E6E6"
WHITE = "#FFFFFF"
PANEL_BG_COLOR = "#F0F9FF"

SEVERITY_COLORS: dict[Severity, str] = {
    Severity.CRITICAL: CRITICAL_COLOR,
    Severity.MODERATE: WARNING_COLOR,
    Severity.MINOR: "#FACC15",
}

# Score ratio tiers, checked top-down; the first threshold met wins.
SCORE_TIERS: list[tuple[float, str]] = [
    (0.8, SUCCESS_COLOR),
    (0.6, INFO_COLOR),
    (0.4, WARNING_COLOR),
    (0.0, CRITICAL_COLOR),
]

RECOMMENDATION_DISPLAY_NAMES: dict[RecommendationLabel, str] = {
    RecommendationLabel.STRONGLY_RECOMMEND: "Strongly Recommend",
    RecommendationLabel.RECOMMEND: "Recommend",
    RecommendationLabel.NEUTRAL: "Neutral",
    RecommendationLabel.CONCERNS: "Some Concerns",
    RecommendationLabel.NOT_RECOMMEND: "Not Recommended",
}

SPEAKER_DISPLAY_NAMES: dict[SpeakerRole, str] = {
    SpeakerRole.INTERVIEWER: "AI Recruiter",
    SpeakerRole.REFEREE: "Referee",
}

SPEAKER_COLORS: dict[SpeakerRole, str] = {
    SpeakerRole.INTERVIEWER: INFO_COLOR,
    SpeakerRole.REFEREE: MUTED_COLOR,
}

# ── Page sizes (millimetres) ─────────────────────────────────────────

_PAGE_SIZES_MM: dict[str, tuple[float, float]] = {
    "a4": (210.0, 297.0),
    "letter": (215.9, 279.4),
}


def page_dimensions(page_size: str) -> tuple[float, float]:
    """Return ``(width, height)`` in millimetres for a configured page size."""
    return _PAGE_SIZES_MM.get(page_size, _PAGE_SIZES_MM["a4"])


def score_color(score: float, max_score: float) -> str:
    """Pick the tier color for ``score / max_score``."""
    ratio = score / max_score if max_score else 0.0
    for threshold, color in SCORE_TIERS:
        if ratio >= threshold:
            return color
    return CRITICAL_COLOR


# ── Text styles ──────────────────────────────────────────────────────


# Regular, bold and italic faces of the standard Type 1 families.
FONT_FAMILIES: dict[str, tuple[str, str, str]] = {
    "Helvetica": ("Helvetica", "Helvetica-Bold", "Helvetica-Oblique"),
    "Times-Roman": ("Times-Roman", "Times-Bold", "Times-Italic"),
    "Courier": ("Courier", "Courier-Bold", "Courier-Oblique"),
}


@dataclass(frozen=True)
class TextStyle:
    """Font, size (points), color and line height (millimetres)."""

    font: str
    size: float
    color: str = TEXT_COLOR
    leading: float = 6.0

    @property
    def baseline_offset(self) -> float:
        """Distance from the top of a line box to its baseline."""
        return self.leading * 0.75


def build_text_styles(font_family: str = "Helvetica", body_size: int = 10) -> dict[str, TextStyle]:
    """Named text styles, scaled from the configured body size."""
    regular, bold, italic = FONT_FAMILIES[font_family]
    small = body_size - 1
    return {
        "body": TextStyle(regular, body_size, TEXT_COLOR, 6.0),
        "body_bold": TextStyle(bold, body_size, TEXT_COLOR, 6.0),
        "evidence": TextStyle(regular, small, SECONDARY_TEXT_COLOR, 5.0),
        "caption": TextStyle(italic, small, SECONDARY_TEXT_COLOR, 6.0),
        "note": TextStyle(italic, small, SECONDARY_TEXT_COLOR, 5.0),
        "section_title": TextStyle(bold, body_size + 4, PRIMARY_COLOR, 8.0),
        "subheading": TextStyle(bold, body_size + 1, TEXT_COLOR, 7.0),
        "highlight_heading": TextStyle(bold, body_size, PRIMARY_COLOR, 7.0),
        "label": TextStyle(bold, body_size, TEXT_COLOR, 7.0),
        "transcript_heading": TextStyle(bold, small, TEXT_COLOR, 5.0),
        "transcript_body": TextStyle(regular, small, TEXT_COLOR, 5.0),
        "score_text": TextStyle(bold, small, TEXT_COLOR, 5.0),
        "badge": TextStyle(bold, body_size - 2, WHITE, 6.0),
        "gauge_score": TextStyle(bold, body_size + 10, PRIMARY_COLOR, 8.0),
        "gauge_suffix": TextStyle(regular, body_size, PRIMARY_COLOR, 6.0),
        "panel_score": TextStyle(bold, body_size + 4, PRIMARY_COLOR, 8.0),
        "chrome": TextStyle(regular, body_size - 2, CHROME_TEXT_COLOR, 4.0),
        "cover_title": TextStyle(bold, body_size + 18, WHITE, 12.0),
        "cover_heading": TextStyle(bold, body_size + 2, TEXT_COLOR, 10.0),
        "cover_label": TextStyle(bold, body_size, TEXT_COLOR, 8.0),
        "cover_value": TextStyle(regular, body_size, TEXT_COLOR, 8.0),
    }
