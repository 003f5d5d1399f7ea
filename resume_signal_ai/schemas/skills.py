"""Categorized skills profile."""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from resume_signal_ai.utils.helpers import dedupe_casefold

SkillCategory = Literal["programming", "database", "cloud", "devops", "frontend", "backend", "mobile", "other"]
Proficiency = Literal["beginner", "intermediate", "advanced", "expert"]


class TechnicalSkill(BaseModel):
    """One technical skill with its closed-set category."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Canonical skill name")
    category: SkillCategory = Field(default="other", description="Skill category")
    proficiency: Optional[Proficiency] = Field(default=None, description="Estimated proficiency")
    years_of_experience: Optional[float] = Field(default=None, ge=0, description="Years using the skill")


class SkillsProfile(BaseModel):
    """Skills bucketed into six lists. Names are unique per list, case-insensitively."""

    model_config = ConfigDict(frozen=True)

    technical: List[TechnicalSkill] = Field(default_factory=list, description="Technical skills with categories")
    soft: List[str] = Field(default_factory=list, description="Soft skills")
    frameworks: List[str] = Field(default_factory=list, description="Frameworks and libraries")
    languages: List[str] = Field(default_factory=list, description="Programming languages")
    tools: List[str] = Field(default_factory=list, description="Tools and software")
    certifications: List[str] = Field(default_factory=list, description="Certifications")

    @field_validator("soft", "frameworks", "languages", "tools", "certifications")
    @classmethod
    def _unique_names(cls, v: List[str]) -> List[str]:
        return dedupe_casefold(v)

    @field_validator("technical")
    @classmethod
    def _unique_technical(cls, v: List[TechnicalSkill]) -> List[TechnicalSkill]:
        seen: set[str] = set()
        result: List[TechnicalSkill] = []
        for skill in v:
            key = skill.name.strip().casefold()
            if key not in seen:
                seen.add(key)
                result.append(skill)
        return result

    def is_empty(self) -> bool:
        return not any((self.technical, self.soft, self.frameworks, self.languages, self.tools, self.certifications))
