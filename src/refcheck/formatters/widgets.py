"""Visual widgets built on the placement primitives.

Every widget here is an ``AtomicBlock`` (never split across pages) or a
``Marker`` drawn beside the first line of a ``FlowBlock``.
"""

from __future__ import annotations

from refcheck.formatters.layout import AtomicBlock, PageManager
from refcheck.formatters.pdf_styles import (
    PANEL_BG_COLOR,
    PRIMARY_COLOR,
    RECOMMENDATION_DISPLAY_NAMES,
    RULE_COLOR,
    SEVERITY_COLORS,
    TRACK_COLOR,
    WHITE,
    TextStyle,
    score_color,
)
from refcheck.models import Recommendation, Severity


def _fmt_score(value: float) -> str:
    return f"{value:g}"


# ── Headings ─────────────────────────────────────────────────────────


class SectionTitle(AtomicBlock):
    """Section heading with an underline rule and a fixed gap after it."""

    kind = "section_title"
    RULE_OFFSET = 8.0
    GAP_AFTER = 8.0

    def __init__(self, text: str) -> None:
        self.text = text

    def height(self, manager: PageManager) -> float:
        return self.RULE_OFFSET + self.GAP_AFTER

    def draw(self, manager: PageManager, top: float) -> None:
        style = manager.styles["section_title"]
        manager.surface.draw_text(manager.margin, top + 6, self.text, style)
        rule_y = top + self.RULE_OFFSET
        manager.surface.draw_line(
            manager.margin, rule_y, manager.page_width - manager.margin, rule_y, PRIMARY_COLOR
        )


class Heading(AtomicBlock):
    """Single-line heading in a given style (subsections, per-item titles)."""

    kind = "heading"

    def __init__(self, text: str, style: TextStyle, *, indent: float = 0.0) -> None:
        self.text = text
        self.style = style
        self.indent = indent

    def height(self, manager: PageManager) -> float:
        return self.style.leading

    def draw(self, manager: PageManager, top: float) -> None:
        manager.surface.draw_text(
            manager.margin + self.indent, top + self.style.baseline_offset, self.text, self.style
        )


class LabeledRow(AtomicBlock):
    """``Label:  value`` on one line, the value starting at a fixed column."""

    kind = "row"

    def __init__(self, label: str, value: str, *, value_column: float = 45.0) -> None:
        self.label = label
        self.value = value
        self.value_column = value_column

    def height(self, manager: PageManager) -> float:
        return manager.styles["label"].leading

    def draw(self, manager: PageManager, top: float) -> None:
        label_style = manager.styles["label"]
        baseline = top + label_style.baseline_offset
        manager.surface.draw_text(manager.margin, baseline, self.label, label_style)
        manager.surface.draw_text(
            manager.margin + self.value_column, baseline, self.value, manager.styles["body"]
        )


# ── Score visuals ────────────────────────────────────────────────────


class ScoreBar(AtomicBlock):
    """Optional label line, then a bar filled in proportion to ``score / max_score``."""

    kind = "score_bar"
    BAR_WIDTH = 100.0
    BAR_HEIGHT = 6.0
    GAP_AFTER = 6.0

    def __init__(self, score: float, max_score: float, label: str = "") -> None:
        self.score = score
        self.max_score = max_score
        self.label = label

    @property
    def ratio(self) -> float:
        if self.max_score <= 0:
            return 0.0
        return min(max(self.score / self.max_score, 0.0), 1.0)

    @property
    def fill_color(self) -> str:
        return score_color(self.score, self.max_score)

    def height(self, manager: PageManager) -> float:
        label = manager.styles["subheading"].leading if self.label else 0.0
        return label + self.BAR_HEIGHT + self.GAP_AFTER

    def draw(self, manager: PageManager, top: float) -> None:
        surface = manager.surface
        x = manager.margin
        if self.label:
            style = manager.styles["subheading"]
            surface.draw_text(x, top + style.baseline_offset, self.label, style)
            top += style.leading
        surface.draw_rect(x, top, self.BAR_WIDTH, self.BAR_HEIGHT, fill=TRACK_COLOR)
        fill_width = self.BAR_WIDTH * self.ratio
        if fill_width > 0:
            surface.draw_rect(x, top, fill_width, self.BAR_HEIGHT, fill=self.fill_color)
        surface.draw_text(
            x + self.BAR_WIDTH + 5,
            top + 4.5,
            f"{_fmt_score(self.score)}/{_fmt_score(self.max_score)}",
            manager.styles["score_text"],
        )


class ScoreGauge(AtomicBlock):
    """Ring gauge: grey track plus an arc sweeping ``360 * score / max`` degrees.

    The arc starts at twelve o'clock and runs clockwise.  A zero score draws
    the empty track only.
    """

    kind = "score_gauge"
    CAPTION_HEIGHT = 8.0
    RADIUS = 20.0
    GAP_AFTER = 8.0
    RING_WIDTH = 8.5  # points

    def __init__(self, score: float, max_score: float = 100, caption: str = "Overall Assessment") -> None:
        self.score = score
        self.max_score = max_score
        self.caption = caption

    @property
    def sweep_degrees(self) -> float:
        if self.max_score <= 0:
            return 0.0
        return 360.0 * min(max(self.score / self.max_score, 0.0), 1.0)

    def height(self, manager: PageManager) -> float:
        return self.CAPTION_HEIGHT + 2 * self.RADIUS + self.GAP_AFTER

    def draw(self, manager: PageManager, top: float) -> None:
        surface = manager.surface
        if self.caption:
            surface.draw_text(manager.margin, top + 5, self.caption, manager.styles["subheading"])
        cx = manager.page_width / 2
        cy = top + self.CAPTION_HEIGHT + self.RADIUS
        surface.draw_circle(cx, cy, self.RADIUS, stroke=RULE_COLOR, line_width=self.RING_WIDTH)
        if self.sweep_degrees > 0:
            surface.draw_circle_segment(
                cx, cy, self.RADIUS, 90, -self.sweep_degrees, PRIMARY_COLOR, line_width=self.RING_WIDTH
            )
        surface.draw_text(cx, cy + 2, _fmt_score(self.score), manager.styles["gauge_score"], align="center")
        surface.draw_text(
            cx, cy + 8, f"/{_fmt_score(self.max_score)}", manager.styles["gauge_suffix"], align="center"
        )


class SeverityBadge(AtomicBlock):
    """Rounded pill with the severity name, colored per severity."""

    kind = "severity_badge"
    WIDTH = 25.0
    BADGE_HEIGHT = 6.0
    GAP_AFTER = 3.0

    def __init__(self, severity: Severity) -> None:
        self.severity = severity

    @property
    def color(self) -> str:
        return SEVERITY_COLORS[self.severity]

    def height(self, manager: PageManager) -> float:
        return self.BADGE_HEIGHT + self.GAP_AFTER

    def draw(self, manager: PageManager, top: float) -> None:
        surface = manager.surface
        x = manager.margin
        surface.draw_rect(x, top, self.WIDTH, self.BADGE_HEIGHT, fill=self.color, radius=2)
        surface.draw_text(
            x + self.WIDTH / 2, top + 4.2, self.severity.value.upper(), manager.styles["badge"], align="center"
        )


class RecommendationPanel(AtomicBlock):
    """Shaded box with the overall score, label and confidence.

    Only the header rows count toward the block height; ``reserve`` is the
    rest of the box, which the caller fills with the reasoning paragraph.
    """

    kind = "recommendation_panel"
    BOX_HEIGHT = 45.0
    ROWS_HEIGHT = 26.0
    PADDING = 5.0

    def __init__(self, recommendation: Recommendation) -> None:
        self.recommendation = recommendation

    @property
    def reserve(self) -> float:
        return self.BOX_HEIGHT - self.ROWS_HEIGHT

    def height(self, manager: PageManager) -> float:
        return self.ROWS_HEIGHT

    def draw(self, manager: PageManager, top: float) -> None:
        surface = manager.surface
        rec = self.recommendation
        x = manager.margin + self.PADDING
        surface.draw_rect(manager.margin, top, manager.content_width, self.BOX_HEIGHT, fill=PANEL_BG_COLOR, radius=3)

        label_style = manager.styles["label"]
        surface.draw_text(x, top + 8, "Overall Score:", label_style)
        surface.draw_text(x + 35, top + 8, f"{_fmt_score(rec.overall_score)}/100", manager.styles["panel_score"])
        surface.draw_text(x, top + 16, "Recommendation:", label_style)
        surface.draw_text(x + 40, top + 16, RECOMMENDATION_DISPLAY_NAMES[rec.label], manager.styles["body"])
        surface.draw_text(x, top + 23, "Confidence:", label_style)
        surface.draw_text(x + 40, top + 23, f"{round(rec.confidence_level * 100)}%", manager.styles["body"])


class SignatureBlock(AtomicBlock):
    """Two signature rules captioned ``Reviewed By`` and ``Date``."""

    kind = "signature"
    RULE_WIDTH = 60.0
    GAP_BEFORE = 15.0

    def height(self, manager: PageManager) -> float:
        return self.GAP_BEFORE + 10.0

    def draw(self, manager: PageManager, top: float) -> None:
        surface = manager.surface
        style = manager.styles["evidence"]
        rule_y = top + self.GAP_BEFORE
        left = manager.margin
        right = manager.page_width - manager.margin
        surface.draw_line(left, rule_y, left + self.RULE_WIDTH, rule_y, RULE_COLOR)
        surface.draw_line(right - self.RULE_WIDTH, rule_y, right, rule_y, RULE_COLOR)
        surface.draw_text(left, rule_y + 5, "Reviewed By", style)
        surface.draw_text(right - self.RULE_WIDTH / 2, rule_y + 5, "Date", style, align="center")


# ── First-line markers ───────────────────────────────────────────────


class BulletMarker:
    """Filled dot left of the first line."""

    def __init__(self, color: str, x_offset: float = 2.0) -> None:
        self.color = color
        self.x_offset = x_offset

    def draw(self, manager: PageManager, top: float, line_height: float) -> None:
        manager.surface.draw_circle(
            manager.margin + self.x_offset, top + line_height * 0.55, 1.0, fill=self.color
        )


class CheckboxMarker:
    """Outlined square, filled and ticked when *checked*."""

    SIZE = 3.5

    def __init__(self, checked: bool) -> None:
        self.checked = checked

    def draw(self, manager: PageManager, top: float, line_height: float) -> None:
        surface = manager.surface
        x = manager.margin
        y = top + (line_height - self.SIZE) / 2
        if self.checked:
            surface.draw_rect(x, y, self.SIZE, self.SIZE, fill=PRIMARY_COLOR, stroke=PRIMARY_COLOR)
            surface.draw_line(x + 0.7, y + 1.9, x + 1.5, y + 2.8, WHITE, width=1.0)
            surface.draw_line(x + 1.5, y + 2.8, x + 2.9, y + 0.8, WHITE, width=1.0)
        else:
            surface.draw_rect(x, y, self.SIZE, self.SIZE, stroke=RULE_COLOR)


class LabelMarker:
    """Short bold label (``Q:``, ``A:``) left of the first line."""

    def __init__(self, text: str, style: TextStyle) -> None:
        self.text = text
        self.style = style

    def draw(self, manager: PageManager, top: float, line_height: float) -> None:
        manager.surface.draw_text(manager.margin, top + line_height * 0.75, self.text, self.style)
