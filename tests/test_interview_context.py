import pytest

from resume_signal_ai.schemas import (
    ContactFields,
    ExperienceProfile,
    ResumeAnalysis,
    Role,
    SectionSet,
    SkillsProfile,
    TechnicalSkill,
)
from resume_signal_ai.services.interview_context import (
    assess_quality_band,
    build_interview_context,
    estimate_difficulty,
    skill_category,
)


def test_context_lines():
    analysis = ResumeAnalysis(
        text="resume",
        contact=ContactFields(name="Jane Doe", confidence={"name": 0.9}),
        sections=SectionSet.from_blocks([("summary", "Backend engineer. " * 20)]),
        skills=SkillsProfile(technical=[TechnicalSkill(name=n) for n in ("Python", "Go", "SQL", "Redis", "AWS", "Rust")]),
        experience=ExperienceProfile(total_years=6, roles=[Role(title="Staff Engineer"), Role(title="Engineer")]),
    )
    lines = build_interview_context(analysis).split("\n")
    assert lines[0] == "Candidate: Jane Doe"
    assert lines[1] == "Experience: 6 years"
    assert lines[2] == "Technical Skills: Python, Go, SQL, Redis, AWS"
    assert lines[3] == "Recent Role: Staff Engineer"
    assert lines[4].startswith("Summary: Backend engineer.")
    assert len(lines[4]) == len("Summary: ") + 200


def test_empty_analysis_gives_empty_context():
    assert build_interview_context(ResumeAnalysis(text="x")) == ""


@pytest.mark.parametrize(
    "score, acceptable, verdict",
    [
        (0, False, "below acceptable"),
        (39, False, "below acceptable"),
        (40, True, "adequate"),
        (69, True, "adequate"),
        (70, True, "professional"),
        (100, True, "professional"),
    ],
)
def test_quality_bands(score, acceptable, verdict):
    feedback = assess_quality_band(score)
    assert feedback.is_acceptable is acceptable
    assert verdict in feedback.feedback[0]


def test_professional_band_has_no_recommendations():
    assert assess_quality_band(85).recommendations == []


@pytest.mark.parametrize(
    "years, level",
    [(0, "beginner"), (0.5, "beginner"), (1, "intermediate"), (3, "advanced"), (4.9, "advanced"), (5, "expert")],
)
def test_difficulty(years, level):
    assert estimate_difficulty(years) == level


def test_skill_category_is_exposed():
    assert skill_category("Docker") == "devops"
    assert skill_category("COBOL") == "other"
