"""Helpers that turn a ResumeAnalysis into inputs for interview question generation."""

from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field

from resume_signal_ai.cv_pipeline.skill_categorizer import skill_category
from resume_signal_ai.schemas.resume_analysis import ResumeAnalysis

Difficulty = Literal["beginner", "intermediate", "advanced", "expert"]

ACCEPTABLE_SCORE = 40
PROFESSIONAL_SCORE = 70
CONTEXT_SKILLS = 5
CONTEXT_SUMMARY_CHARS = 200

__all__ = [
    "QualityFeedback",
    "assess_quality_band",
    "build_interview_context",
    "estimate_difficulty",
    "skill_category",
]


class QualityFeedback(BaseModel):
    """Plain-language verdict on a quality score."""

    model_config = ConfigDict(frozen=True)

    is_acceptable: bool = Field(..., description="Score is at or above the acceptable threshold")
    feedback: List[str] = Field(default_factory=list, description="Verdict lines")
    recommendations: List[str] = Field(default_factory=list, description="Suggested improvements")


def build_interview_context(analysis: ResumeAnalysis) -> str:
    """Short multi-line candidate summary fed to the question generator."""
    lines: List[str] = []
    if analysis.contact.name:
        lines.append(f"Candidate: {analysis.contact.name}")
    if analysis.experience.total_years > 0:
        lines.append(f"Experience: {analysis.experience.total_years} years")
    if analysis.skills.technical:
        names = [s.name for s in analysis.skills.technical[:CONTEXT_SKILLS]]
        lines.append(f"Technical Skills: {', '.join(names)}")
    if analysis.experience.roles:
        lines.append(f"Recent Role: {analysis.experience.roles[0].title}")
    if analysis.sections.summary:
        lines.append(f"Summary: {analysis.sections.summary[:CONTEXT_SUMMARY_CHARS]}")
    return "\n".join(lines)


def assess_quality_band(score: int) -> QualityFeedback:
    if score < ACCEPTABLE_SCORE:
        return QualityFeedback(
            is_acceptable=False,
            feedback=["Resume quality is below acceptable standards"],
            recommendations=[
                "Consider reformatting for better structure and clarity",
                "Add more specific technical details and achievements",
            ],
        )
    if score < PROFESSIONAL_SCORE:
        return QualityFeedback(
            is_acceptable=True,
            feedback=["Resume quality is adequate but could be improved"],
            recommendations=[
                "Add more quantified achievements and impact metrics",
                "Ensure consistent formatting and clear section headers",
            ],
        )
    return QualityFeedback(is_acceptable=True, feedback=["Resume quality meets professional standards"])


def estimate_difficulty(years: float) -> Difficulty:
    """Question difficulty from years of experience."""
    if years < 1:
        return "beginner"
    if years < 3:
        return "intermediate"
    if years < 5:
        return "advanced"
    return "expert"
