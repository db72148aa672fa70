"""Section renderers for the reference-check PDF.

Each renderer draws one part of the report through the shared
``PageManager``.  ``SECTION_PIPELINE`` fixes the order; the cover page is
drawn separately because it uses absolute coordinates.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from refcheck.formatters.layout import FlowBlock, PageManager
from refcheck.formatters.pdf_styles import (
    CRITICAL_COLOR,
    MUTED_COLOR,
    PRIMARY_COLOR,
    RECOMMENDATION_DISPLAY_NAMES,
    SPEAKER_COLORS,
    SPEAKER_DISPLAY_NAMES,
    SUCCESS_COLOR,
    TEXT_COLOR,
    TextStyle,
)
from refcheck.formatters.widgets import (
    BulletMarker,
    CheckboxMarker,
    Heading,
    LabeledRow,
    LabelMarker,
    RecommendationPanel,
    ScoreBar,
    ScoreGauge,
    SectionTitle,
    SeverityBadge,
    SignatureBlock,
)
from refcheck.models import ReportContentModel


@dataclass(frozen=True)
class ExportOptions:
    """Per-export switches supplied by the caller."""

    include_transcript: bool = False
    include_signature: bool = True
    include_metadata: bool = True


def format_timestamp(seconds: float) -> str:
    """``125`` -> ``2:05``; negative offsets read as ``0:00``."""
    total = max(int(seconds), 0)
    return f"{total // 60}:{total % 60:02d}"


def _section_title(manager: PageManager, text: str) -> None:
    # Keep the title with at least one body line.
    SectionTitle(text).place(manager, keep_with=manager.styles["body"].leading)


def _placeholder(manager: PageManager, text: str) -> None:
    FlowBlock(text, manager.styles["caption"]).place(manager)


# ── Cover ────────────────────────────────────────────────────────────


def render_cover(manager: PageManager, model: ReportContentModel, options: ExportOptions) -> None:
    """Banner, candidate table and report information at fixed positions."""
    surface = manager.surface
    styles = manager.styles
    centre = manager.page_width / 2

    surface.draw_rect(0, 0, manager.page_width, 80, fill=PRIMARY_COLOR)
    surface.draw_text(centre, 40, "REFERENCE CHECK", styles["cover_title"], align="center")
    surface.draw_text(centre, 52, "REPORT", styles["cover_title"], align="center")

    counterpart = model.counterpart
    session = model.session_details
    rows = [("Candidate:", model.subject.name)]
    if model.subject.role:
        rows.append(("Position:", model.subject.role))
    rows += [
        ("Referee:", counterpart.name),
        ("Relationship:", counterpart.relationship),
        ("Company:", counterpart.organization),
    ]
    if counterpart.tenure:
        rows.append(("Years Known:", counterpart.tenure))
    rows += [
        ("Interview Mode:", session.mode),
        ("Duration:", f"{round(session.duration_seconds / 60)} minutes"),
        ("Questions Asked:", str(session.turns_count)),
        ("Completed:", session.completed_at.date().isoformat()),
    ]
    y = _cover_table(manager, 100, "Candidate Information", rows)

    if options.include_metadata and model.metadata is not None:
        meta = model.metadata
        _cover_table(
            manager,
            y + 12,
            "Report Information",
            [
                ("Report ID:", meta.report_id),
                ("Generated:", meta.generated_at.strftime("%Y-%m-%d %H:%M")),
                ("Status:", meta.status.upper()),
                ("Version:", str(meta.version)),
            ],
        )


def _cover_table(manager: PageManager, top: float, heading: str, rows: list[tuple[str, str]]) -> float:
    surface = manager.surface
    styles = manager.styles
    surface.draw_text(manager.margin, top, heading, styles["cover_heading"])
    y = top + styles["cover_heading"].leading
    value_width = manager.content_width - 50
    for label, value in rows:
        surface.draw_text(manager.margin, y, label, styles["cover_label"])
        # Single line per value; the cover never wraps or breaks.
        lines = surface.measure(value, value_width, styles["cover_value"]) or [""]
        text = lines[0] if len(lines) == 1 else lines[0].rstrip() + "..."
        surface.draw_text(manager.margin + 50, y, text, styles["cover_value"])
        y += styles["cover_label"].leading
    return y


# ── Narrative sections ───────────────────────────────────────────────


def render_executive_summary(manager: PageManager, model: ReportContentModel, options: ExportOptions) -> None:
    styles = manager.styles
    rec = model.recommendation
    _section_title(manager, "Executive Summary")
    FlowBlock(model.executive_summary, styles["body"]).place(manager)
    manager.skip(5)
    ScoreGauge(rec.overall_score, 100).place(manager)
    LabeledRow("Recommendation:", RECOMMENDATION_DISPLAY_NAMES[rec.label]).place(
        manager, keep_with=styles["label"].leading
    )
    LabeledRow("Confidence:", f"{round(rec.confidence_level * 100)}%").place(manager)
    manager.skip(3)


def render_key_findings(manager: PageManager, model: ReportContentModel, options: ExportOptions) -> None:
    findings = model.key_findings
    _section_title(manager, "Key Findings")
    groups = [
        ("Strengths", SUCCESS_COLOR, findings.strengths, "No notable strengths recorded."),
        ("Concerns", CRITICAL_COLOR, findings.concerns, "No significant concerns identified."),
        ("Additional Observations", MUTED_COLOR, findings.neutral_observations, "No additional observations."),
    ]
    for i, (title, color, items, empty_text) in enumerate(groups):
        if i:
            manager.skip(3)
        _bullet_group(manager, title, color, items, empty_text)


def _bullet_group(
    manager: PageManager, title: str, color: str, items: tuple[str, ...], empty_text: str
) -> None:
    styles = manager.styles
    base = styles["subheading"]
    heading_style = TextStyle(base.font, base.size, color, base.leading)
    Heading(title, heading_style).place(manager, keep_with=styles["body"].leading)
    if not items:
        _placeholder(manager, empty_text)
        return
    for item in items:
        FlowBlock(item, styles["body"], indent=6, marker=BulletMarker(TEXT_COLOR)).place(manager)


def render_category_breakdown(manager: PageManager, model: ReportContentModel, options: ExportOptions) -> None:
    styles = manager.styles
    _section_title(manager, "Category Analysis")
    if not model.category_breakdown:
        _placeholder(manager, "No category scores available.")
        return
    for category in model.category_breakdown:
        ScoreBar(category.score, category.max_score, label=category.category).place(
            manager, keep_with=styles["body"].leading
        )
        FlowBlock(category.summary, styles["body"]).place(manager)
        if category.evidence:
            Heading("Supporting Evidence:", styles["caption"]).place(manager, keep_with=styles["evidence"].leading)
            for evidence in category.evidence:
                FlowBlock(f'"{evidence}"', styles["evidence"], indent=5, space_after=3).place(manager)
        manager.skip(5)


def render_conversation_highlights(
    manager: PageManager, model: ReportContentModel, options: ExportOptions
) -> None:
    styles = manager.styles
    _section_title(manager, "Conversation Highlights")
    if not model.conversation_highlights:
        _placeholder(manager, "No conversation highlights recorded.")
        return
    label_style = styles["body_bold"]
    for index, highlight in enumerate(model.conversation_highlights, 1):
        title = f"Highlight {index}  [{format_timestamp(highlight.timestamp_seconds)}]"
        Heading(title, styles["highlight_heading"]).place(manager, keep_with=styles["body"].leading)
        for label, text in (("Q:", highlight.question), ("A:", highlight.answer)):
            marker = LabelMarker(label, label_style)
            FlowBlock(text, styles["body"], indent=8, marker=marker, space_after=3).place(manager)
        FlowBlock(f"Significance: {highlight.significance}", styles["note"]).place(manager)
        manager.skip(6)


def render_red_flags(manager: PageManager, model: ReportContentModel, options: ExportOptions) -> None:
    styles = manager.styles
    _section_title(manager, "Red Flags & Concerns")
    if not model.red_flags:
        _placeholder(manager, "No red flags identified.")
        return
    for flag in model.red_flags:
        # Never strand a badge at the foot of a page without its description.
        SeverityBadge(flag.severity).place(manager, keep_with=styles["body_bold"].leading)
        FlowBlock(flag.description, styles["body_bold"], space_after=3).place(manager)
        if flag.evidence:
            Heading("Evidence:", styles["note"]).place(manager, keep_with=styles["evidence"].leading)
            FlowBlock(f'"{flag.evidence}"', styles["evidence"], indent=5, space_after=3).place(manager)
        manager.skip(5)


def render_verification_items(manager: PageManager, model: ReportContentModel, options: ExportOptions) -> None:
    styles = manager.styles
    _section_title(manager, "Verification Items")
    if not model.verification_items:
        _placeholder(manager, "No verification items identified.")
        return
    for item in model.verification_items:
        marker = CheckboxMarker(item.verified)
        FlowBlock(item.claim, styles["body"], indent=8, marker=marker, space_after=0).place(manager)
        if item.notes:
            FlowBlock(f"Notes: {item.notes}", styles["note"], indent=8, space_after=0).place(manager)
        manager.skip(5)


def render_final_recommendation(
    manager: PageManager, model: ReportContentModel, options: ExportOptions
) -> None:
    """Shaded panel; long reasoning is allowed to flow past the box."""
    _section_title(manager, "Final Recommendation")
    panel = RecommendationPanel(model.recommendation)
    top = panel.place(manager, keep_with=panel.reserve)
    page = manager.page_number
    FlowBlock(
        model.recommendation.reasoning_summary,
        manager.styles["evidence"],
        indent=RecommendationPanel.PADDING,
        space_after=0,
    ).place(manager)
    manager.skip_to(top + RecommendationPanel.BOX_HEIGHT, page)
    manager.skip(10)


def render_transcript(manager: PageManager, model: ReportContentModel, options: ExportOptions) -> None:
    styles = manager.styles
    turns = model.transcript or ()
    _section_title(manager, "Full Interview Transcript")
    FlowBlock(f"Total conversation turns: {len(turns)}", styles["evidence"], space_after=5).place(manager)
    base = styles["transcript_heading"]
    for turn in turns:
        speaker = SPEAKER_DISPLAY_NAMES[turn.speaker_role]
        heading_style = TextStyle(base.font, base.size, SPEAKER_COLORS[turn.speaker_role], base.leading)
        Heading(f"[{format_timestamp(turn.timestamp_seconds)}] {speaker}:", heading_style).place(
            manager, keep_with=styles["transcript_body"].leading
        )
        FlowBlock(turn.text, styles["transcript_body"], indent=5, space_after=5).place(manager)


def render_signature(manager: PageManager, model: ReportContentModel, options: ExportOptions) -> None:
    SignatureBlock().place(manager)


# ── Pipeline ─────────────────────────────────────────────────────────

SectionRenderer = Callable[[PageManager, ReportContentModel, ExportOptions], None]
SectionPredicate = Callable[[ReportContentModel, ExportOptions], bool]


def _always(model: ReportContentModel, options: ExportOptions) -> bool:
    return True


SECTION_PIPELINE: list[tuple[str, SectionRenderer, SectionPredicate]] = [
    ("executive_summary", render_executive_summary, _always),
    ("key_findings", render_key_findings, _always),
    ("category_breakdown", render_category_breakdown, _always),
    ("conversation_highlights", render_conversation_highlights, _always),
    ("red_flags", render_red_flags, _always),
    ("verification_items", render_verification_items, _always),
    ("final_recommendation", render_final_recommendation, _always),
    ("transcript", render_transcript, lambda m, o: o.include_transcript and m.has_transcript),
    ("signature", render_signature, lambda m, o: o.include_signature),
]

__all__ = ["SECTION_PIPELINE", "ExportOptions", "format_timestamp", "render_cover"]
