"""Tests for the report data model."""

from __future__ import annotations

import dataclasses

import pytest

from refcheck.models import RecommendationLabel, Severity, SpeakerRole
from tests.fakes.sample_report import make_report, make_transcript


def test_models_are_frozen(jane_doe) -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        jane_doe.executive_summary = "changed"


@pytest.mark.parametrize(("transcript", "expected"), [(None, False), ((), False), (make_transcript(2), True)])
def test_has_transcript(transcript, expected) -> None:
    assert make_report(transcript=transcript).has_transcript is expected


def test_enums_are_closed_string_sets() -> None:
    assert [s.value for s in Severity] == ["critical", "moderate", "minor"]
    assert RecommendationLabel("not-recommend") is RecommendationLabel.NOT_RECOMMEND
    assert SpeakerRole("referee") is SpeakerRole.REFEREE
    with pytest.raises(ValueError):
        Severity("catastrophic")
