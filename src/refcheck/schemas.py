"""Pydantic schemas for report payloads arriving as JSON.

Payloads may use ``camelCase`` (as produced by the interview front end) or
``snake_case`` keys.  ``ReportPayload.to_model()`` converts a validated
payload into the frozen ``ReportContentModel`` the compositor renders.
"""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from refcheck.exceptions import InvalidReportDataError
from refcheck.models import (
    CategoryScore,
    ConversationHighlight,
    CounterpartInfo,
    KeyFindings,
    Recommendation,
    RecommendationLabel,
    RedFlag,
    ReportContentModel,
    ReportMetadata,
    SessionDetails,
    Severity,
    SpeakerRole,
    SubjectInfo,
    TranscriptTurn,
    VerificationItem,
)


class _Schema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class SubjectSchema(_Schema):
    name: str
    role: str = ""


class CounterpartSchema(_Schema):
    name: str
    relationship: str = ""
    organization: str = ""
    tenure: str | None = None


class SessionDetailsSchema(_Schema):
    mode: str = "video"
    duration_seconds: int = Field(default=0, ge=0)
    turns_count: int = Field(default=0, ge=0)
    completed_at: datetime


class KeyFindingsSchema(_Schema):
    strengths: list[str] = Field(default_factory=list)
    concerns: list[str] = Field(default_factory=list)
    neutral_observations: list[str] = Field(default_factory=list)


class CategoryScoreSchema(_Schema):
    category: str
    score: float = Field(ge=0)
    summary: str = ""
    evidence: list[str] = Field(default_factory=list)
    max_score: float = Field(default=5, gt=0)


class ConversationHighlightSchema(_Schema):
    question: str
    answer: str
    significance: str = ""
    timestamp_seconds: float = Field(default=0, ge=0)


class RedFlagSchema(_Schema):
    description: str
    severity: Severity
    evidence: str = ""


class VerificationItemSchema(_Schema):
    claim: str
    verified: bool = False
    notes: str | None = None


class RecommendationSchema(_Schema):
    overall_score: float = Field(ge=0, le=100)
    label: RecommendationLabel
    confidence_level: float = Field(ge=0, le=1)
    reasoning_summary: str


class TranscriptTurnSchema(_Schema):
    speaker_role: SpeakerRole
    text: str
    timestamp_seconds: float = Field(default=0, ge=0)


class ReportMetadataSchema(_Schema):
    report_id: str
    generated_at: datetime
    status: str = "draft"
    version: int = Field(default=1, ge=1)


class ReportPayload(_Schema):
    """A complete reference-check report as submitted for export."""

    subject: SubjectSchema
    counterpart: CounterpartSchema
    session_details: SessionDetailsSchema
    executive_summary: str
    key_findings: KeyFindingsSchema = Field(default_factory=KeyFindingsSchema)
    category_breakdown: list[CategoryScoreSchema] = Field(default_factory=list)
    conversation_highlights: list[ConversationHighlightSchema] = Field(default_factory=list)
    red_flags: list[RedFlagSchema] = Field(default_factory=list)
    verification_items: list[VerificationItemSchema] = Field(default_factory=list)
    recommendation: RecommendationSchema
    transcript: list[TranscriptTurnSchema] | None = None
    metadata: ReportMetadataSchema | None = None

    def to_model(self) -> ReportContentModel:
        """Build the immutable model, preserving list order."""
        findings = self.key_findings
        rec = self.recommendation
        return ReportContentModel(
            subject=SubjectInfo(name=self.subject.name, role=self.subject.role),
            counterpart=CounterpartInfo(
                name=self.counterpart.name,
                relationship=self.counterpart.relationship,
                organization=self.counterpart.organization,
                tenure=self.counterpart.tenure,
            ),
            session_details=SessionDetails(
                mode=self.session_details.mode,
                duration_seconds=self.session_details.duration_seconds,
                turns_count=self.session_details.turns_count,
                completed_at=self.session_details.completed_at,
            ),
            executive_summary=self.executive_summary,
            key_findings=KeyFindings(
                strengths=tuple(findings.strengths),
                concerns=tuple(findings.concerns),
                neutral_observations=tuple(findings.neutral_observations),
            ),
            recommendation=Recommendation(
                overall_score=rec.overall_score,
                label=rec.label,
                confidence_level=rec.confidence_level,
                reasoning_summary=rec.reasoning_summary,
            ),
            category_breakdown=tuple(
                CategoryScore(
                    category=c.category,
                    score=c.score,
                    summary=c.summary,
                    evidence=tuple(c.evidence),
                    max_score=c.max_score,
                )
                for c in self.category_breakdown
            ),
            conversation_highlights=tuple(
                ConversationHighlight(
                    question=h.question,
                    answer=h.answer,
                    significance=h.significance,
                    timestamp_seconds=h.timestamp_seconds,
                )
                for h in self.conversation_highlights
            ),
            red_flags=tuple(
                RedFlag(description=f.description, severity=f.severity, evidence=f.evidence)
                for f in self.red_flags
            ),
            verification_items=tuple(
                VerificationItem(claim=v.claim, verified=v.verified, notes=v.notes)
                for v in self.verification_items
            ),
            transcript=(
                tuple(
                    TranscriptTurn(
                        speaker_role=t.speaker_role,
                        text=t.text,
                        timestamp_seconds=t.timestamp_seconds,
                    )
                    for t in self.transcript
                )
                if self.transcript is not None
                else None
            ),
            metadata=(
                ReportMetadata(
                    report_id=self.metadata.report_id,
                    generated_at=self.metadata.generated_at,
                    status=self.metadata.status,
                    version=self.metadata.version,
                )
                if self.metadata is not None
                else None
            ),
        )


def load_report_file(path: Path) -> ReportContentModel:
    """Read a JSON report from *path*.

    Schema violations are re-raised as ``InvalidReportDataError`` naming the
    first offending field.
    """
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise InvalidReportDataError(str(path), f"not valid JSON ({exc.msg})") from exc
    try:
        payload = ReportPayload.model_validate(raw)
    except ValidationError as exc:
        first = exc.errors()[0]
        field_path = ".".join(str(part) for part in first["loc"]) or "<root>"
        raise InvalidReportDataError(field_path, first["msg"]) from exc
    return payload.to_model()
