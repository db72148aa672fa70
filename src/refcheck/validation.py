"""Pre-render checks on a ``ReportContentModel``.

Runs before the compositor starts a page, so a failing model never produces a
partial document.
"""

from __future__ import annotations

from refcheck.exceptions import InvalidReportDataError, MissingRequiredDataError
from refcheck.models import RecommendationLabel, ReportContentModel, Severity, SpeakerRole


def validate_report(model: ReportContentModel) -> None:
    """Raise a ``ReportValidationError`` subclass on the first problem found."""
    _check_required(model)
    _check_recommendation(model)
    _check_categories(model)
    _check_enumerations(model)
    _check_timestamps(model)


def _require_text(value: str | None, field_path: str) -> None:
    if value is None or not str(value).strip():
        raise MissingRequiredDataError(field_path)


def _check_required(model: ReportContentModel) -> None:
    _require_text(model.subject.name, "subject.name")
    _require_text(model.counterpart.name, "counterpart.name")
    _require_text(model.executive_summary, "executive_summary")
    _require_text(model.recommendation.reasoning_summary, "recommendation.reasoning_summary")
    for i, category in enumerate(model.category_breakdown):
        _require_text(category.category, f"category_breakdown[{i}].category")
    for i, flag in enumerate(model.red_flags):
        _require_text(flag.description, f"red_flags[{i}].description")
    for i, item in enumerate(model.verification_items):
        _require_text(item.claim, f"verification_items[{i}].claim")


def _check_recommendation(model: ReportContentModel) -> None:
    rec = model.recommendation
    if not 0 <= rec.overall_score <= 100:
        raise InvalidReportDataError(
            "recommendation.overall_score", f"{rec.overall_score} is outside [0, 100]"
        )
    if not 0 <= rec.confidence_level <= 1:
        raise InvalidReportDataError(
            "recommendation.confidence_level", f"{rec.confidence_level} is outside [0, 1]"
        )


def _check_categories(model: ReportContentModel) -> None:
    for i, category in enumerate(model.category_breakdown):
        path = f"category_breakdown[{i}]"
        if category.max_score <= 0:
            raise InvalidReportDataError(f"{path}.max_score", "must be positive")
        if not 0 <= category.score <= category.max_score:
            raise InvalidReportDataError(
                f"{path}.score", f"{category.score} is outside [0, {category.max_score}]"
            )


def _check_enumerations(model: ReportContentModel) -> None:
    if not isinstance(model.recommendation.label, RecommendationLabel):
        raise InvalidReportDataError(
            "recommendation.label", f"unknown label {model.recommendation.label!r}"
        )
    for i, flag in enumerate(model.red_flags):
        if not isinstance(flag.severity, Severity):
            raise InvalidReportDataError(f"red_flags[{i}].severity", f"unknown severity {flag.severity!r}")
    for i, turn in enumerate(model.transcript or ()):
        if not isinstance(turn.speaker_role, SpeakerRole):
            raise InvalidReportDataError(
                f"transcript[{i}].speaker_role", f"unknown speaker role {turn.speaker_role!r}"
            )


def _check_timestamps(model: ReportContentModel) -> None:
    for i, highlight in enumerate(model.conversation_highlights):
        if highlight.timestamp_seconds < 0:
            raise InvalidReportDataError(f"conversation_highlights[{i}].timestamp_seconds", "must not be negative")
    for i, turn in enumerate(model.transcript or ()):
        if turn.timestamp_seconds < 0:
            raise InvalidReportDataError(f"transcript[{i}].timestamp_seconds", "must not be negative")
