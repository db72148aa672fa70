"""Reference-check report models: enums and frozen dataclasses.

A ``ReportContentModel`` is assembled upstream by the interview analysis step
and handed to the compositor whole.  The compositor only reads it; every
collection is a tuple so presentation order is the order it was built in.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

# ── Closed enumerations ──────────────────────────────────────────────


class Severity(str, Enum):
    """Red-flag severity levels."""

    CRITICAL = "critical"
    MODERATE = "moderate"
    MINOR = "minor"


class RecommendationLabel(str, Enum):
    """Hiring recommendation produced by the analysis step."""

    STRONGLY_RECOMMEND = "strongly-recommend"
    RECOMMEND = "recommend"
    NEUTRAL = "neutral"
    CONCERNS = "concerns"
    NOT_RECOMMEND = "not-recommend"


class SpeakerRole(str, Enum):
    """Who spoke a transcript turn."""

    INTERVIEWER = "interviewer"
    REFEREE = "referee"


# ── People and session ───────────────────────────────────────────────


@dataclass(frozen=True)
class SubjectInfo:
    """The candidate the reference check is about."""

    name: str
    role: str = ""


@dataclass(frozen=True)
class CounterpartInfo:
    """The referee who was interviewed."""

    name: str
    relationship: str
    organization: str
    tenure: str | None = None


@dataclass(frozen=True)
class SessionDetails:
    mode: str
    duration_seconds: int
    turns_count: int
    completed_at: datetime


# ── Analysed content ─────────────────────────────────────────────────


@dataclass(frozen=True)
class KeyFindings:
    strengths: tuple[str, ...] = ()
    concerns: tuple[str, ...] = ()
    neutral_observations: tuple[str, ...] = ()


@dataclass(frozen=True)
class CategoryScore:
    """Score for one assessment category, with supporting evidence quotes."""

    category: str
    score: float
    summary: str
    evidence: tuple[str, ...] = ()
    max_score: float = 5


@dataclass(frozen=True)
class ConversationHighlight:
    question: str
    answer: str
    significance: str
    timestamp_seconds: float = 0


@dataclass(frozen=True)
class RedFlag:
    description: str
    severity: Severity
    evidence: str = ""


@dataclass(frozen=True)
class VerificationItem:
    claim: str
    verified: bool
    notes: str | None = None


@dataclass(frozen=True)
class Recommendation:
    """Overall verdict: score out of 100, label, and confidence in [0, 1]."""

    overall_score: float
    label: RecommendationLabel
    confidence_level: float
    reasoning_summary: str


@dataclass(frozen=True)
class TranscriptTurn:
    speaker_role: SpeakerRole
    text: str
    timestamp_seconds: float = 0


@dataclass(frozen=True)
class ReportMetadata:
    """Editorial information about the report itself (cover page)."""

    report_id: str
    generated_at: datetime
    status: str = "draft"
    version: int = 1


@dataclass(frozen=True)
class ReportContentModel:
    """Fully analysed reference-check record rendered by the compositor."""

    subject: SubjectInfo
    counterpart: CounterpartInfo
    session_details: SessionDetails
    executive_summary: str
    key_findings: KeyFindings
    recommendation: Recommendation
    category_breakdown: tuple[CategoryScore, ...] = ()
    conversation_highlights: tuple[ConversationHighlight, ...] = ()
    red_flags: tuple[RedFlag, ...] = ()
    verification_items: tuple[VerificationItem, ...] = ()
    transcript: tuple[TranscriptTurn, ...] | None = None
    metadata: ReportMetadata | None = field(default=None)

    @property
    def has_transcript(self) -> bool:
        return bool(self.transcript)
