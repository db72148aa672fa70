"""Sample report models shared by the test suite."""

from __future__ import annotations

from datetime import date, datetime

from refcheck.models import (
    CategoryScore,
    ConversationHighlight,
    CounterpartInfo,
    KeyFindings,
    Recommendation,
    RecommendationLabel,
    ReportContentModel,
    ReportMetadata,
    SessionDetails,
    SpeakerRole,
    SubjectInfo,
    TranscriptTurn,
    VerificationItem,
)

REPORT_DATE = date(2026, 10, 17)


def make_transcript(turns: int = 20) -> tuple[TranscriptTurn, ...]:
    result = []
    for i in range(turns):
        if i % 2 == 0:
            role = SpeakerRole.INTERVIEWER
            text = f"Question {i // 2 + 1}: can you describe how Jane handled competing priorities on the team?"
        else:
            role = SpeakerRole.REFEREE
            text = (
                "She was very methodical. Each sprint she would sit down with the product owner, rank the "
                "backlog and explain to the team which tickets could slip. Nobody was ever surprised by a "
                "missed deadline because she flagged risks early and offered alternatives."
            )
        result.append(TranscriptTurn(speaker_role=role, text=text, timestamp_seconds=i * 35))
    return tuple(result)


def make_report(**overrides) -> ReportContentModel:
    """Jane Doe: 2 categories, 3 highlights, no red flags, no transcript."""
    fields = dict(
        subject=SubjectInfo(name="Jane Doe", role="Senior Backend Engineer"),
        counterpart=CounterpartInfo(
            name="John Smith",
            relationship="Former manager",
            organization="Acme Corp",
            tenure="3 years",
        ),
        session_details=SessionDetails(
            mode="video",
            duration_seconds=1500,
            turns_count=12,
            completed_at=datetime(2026, 10, 12, 15, 30),
        ),
        executive_summary=(
            "Based on a video interview with John Smith (former manager at Acme Corp), Jane Doe demonstrates "
            "strong professional capabilities. The conversation revealed consistent patterns of reliability, "
            "technical competence and positive interpersonal skills. John provided detailed examples of "
            "Jane's contributions to the payments platform and her impact on team delivery, including the "
            "migration of the ledger service and the mentoring of two junior engineers."
        ),
        key_findings=KeyFindings(
            strengths=(
                "Strong technical skills and problem-solving ability",
                "Excellent communication and collaboration with team members",
                "Consistent reliability and meeting deadlines",
            ),
            concerns=("Occasionally took on too much work without delegating",),
            neutral_observations=(
                "Relatively short tenure in current role",
                "Limited experience with the specific tools mentioned in the job requirements",
            ),
        ),
        category_breakdown=(
            CategoryScore(
                category="Technical Skills",
                score=4.5,
                summary=(
                    "Jane Doe demonstrated excellent performance in technical skills, leading the design of "
                    "the ledger migration and owning its rollout end to end."
                ),
                evidence=(
                    "She rewrote the reconciliation job and cut its runtime from hours to minutes.",
                    "Other teams came to her for reviews of their database schemas.",
                ),
            ),
            CategoryScore(
                category="Teamwork",
                score=3.5,
                summary="Jane Doe demonstrated good performance in teamwork and mentoring.",
                evidence=("She paired with new hires every week during their first month.",),
            ),
        ),
        conversation_highlights=tuple(
            ConversationHighlight(
                question=f"Highlight question number {i}: how did Jane respond when a release went wrong?",
                answer=(
                    "She owned the incident, wrote the postmortem herself and made sure the follow-up "
                    "actions were scheduled. The team trusted her judgement because she never looked for "
                    "someone else to blame and always focused on the fix first."
                ),
                significance="Shows accountability and calm under pressure.",
                timestamp_seconds=60 * i + 5,
            )
            for i in range(1, 4)
        ),
        red_flags=(),
        verification_items=(
            VerificationItem(claim="Employment dates at Acme Corp", verified=True, notes="Confirmed by referee"),
            VerificationItem(claim="Title of Senior Engineer", verified=False),
        ),
        recommendation=Recommendation(
            overall_score=82,
            label=RecommendationLabel.STRONGLY_RECOMMEND,
            confidence_level=0.85,
            reasoning_summary=(
                "Consistent evidence of strong delivery, ownership and mentoring across the interview."
            ),
        ),
        transcript=None,
        metadata=ReportMetadata(report_id="RPT-0042", generated_at=datetime(2026, 10, 17, 9, 0)),
    )
    fields.update(overrides)
    return ReportContentModel(**fields)




def sample_payload() -> dict:
    """camelCase JSON payload, as posted by the interview front end."""
    return {
        "subject": {"name": "Jane Doe", "role": "Engineer"},
        "counterpart": {"name": "John Smith", "relationship": "Manager", "organization": "Acme", "tenure": "3 years"},
        "sessionDetails": {"mode": "phone", "durationSeconds": 900, "turnsCount": 8, "completedAt": "2026-10-12T15:30:00"},
        "executiveSummary": "Strong candidate.",
        "keyFindings": {"strengths": ["Reliable"], "concerns": [], "neutralObservations": ["New to Go"]},
        "categoryBreakdown": [
            {"category": "Technical", "score": 4, "summary": "Good", "evidence": ["Shipped X"], "maxScore": 5},
        ],
        "conversationHighlights": [
            {"question": "Q?", "answer": "A.", "significance": "S.", "timestampSeconds": 42},
        ],
        "redFlags": [{"description": "Late once", "severity": "minor"}],
        "verificationItems": [{"claim": "Dates", "verified": True}],
        "recommendation": {
            "overallScore": 80,
            "label": "recommend",
            "confidenceLevel": 0.8,
            "reasoningSummary": "Consistent evidence.",
        },
        "transcript": [
            {"speakerRole": "interviewer", "text": "Hi", "timestampSeconds": 0},
            {"speakerRole": "referee", "text": "Hello", "timestampSeconds": 2},
        ],
    }
