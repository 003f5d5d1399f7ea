"""Lenient pydantic models for validating classifier JSON before it reaches the domain models."""

from typing import Any, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from resume_signal_ai.dictionaries import SKILL_CATEGORIES

_PROFICIENCIES = ("beginner", "intermediate", "advanced", "expert")


def _string_list(v: Any) -> List[str]:
    """None -> [], a bare string -> [string], drop non-string and blank items."""
    if v is None:
        return []
    if isinstance(v, str):
        v = [v]
    if not isinstance(v, list):
        return []
    return [str(i).strip() for i in v if isinstance(i, (str, int, float)) and str(i).strip()]


def _optional_string(v: Any) -> Optional[str]:
    if v is None or isinstance(v, (dict, list, bool)):
        return None
    s = str(v).strip()
    return s if s and s.lower() not in ("null", "none", "n/a") else None


class _LenientModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class AITechnicalSkill(_LenientModel):
    name: str = Field(..., min_length=1)
    category: str = "other"
    proficiency: Optional[str] = None
    years_of_experience: Optional[float] = Field(
        default=None, validation_alias=AliasChoices("yearsOfExperience", "years_of_experience")
    )

    @field_validator("name", mode="before")
    @classmethod
    def _name(cls, v: Any) -> str:
        return _optional_string(v) or ""

    @field_validator("category", mode="before")
    @classmethod
    def _category(cls, v: Any) -> str:
        value = (_optional_string(v) or "other").lower()
        return value if value in SKILL_CATEGORIES else "other"

    @field_validator("proficiency", mode="before")
    @classmethod
    def _proficiency(cls, v: Any) -> Optional[str]:
        value = (_optional_string(v) or "").lower()
        return value if value in _PROFICIENCIES else None

    @field_validator("years_of_experience", mode="before")
    @classmethod
    def _years(cls, v: Any) -> Optional[float]:
        try:
            years = float(v)
        except (TypeError, ValueError):
            return None
        return years if years >= 0 else None


class AISkillsResponse(_LenientModel):
    technical: List[AITechnicalSkill] = Field(default_factory=list)
    soft: List[str] = Field(default_factory=list)
    frameworks: List[str] = Field(default_factory=list)
    languages: List[str] = Field(default_factory=list)
    tools: List[str] = Field(default_factory=list)
    certifications: List[str] = Field(default_factory=list)

    @field_validator("technical", mode="before")
    @classmethod
    def _technical(cls, v: Any) -> List[Any]:
        if not isinstance(v, list):
            return []
        items = []
        for item in v:
            if isinstance(item, str) and item.strip():
                items.append({"name": item})
            elif isinstance(item, dict) and _optional_string(item.get("name")):
                items.append(item)
        return items

    @field_validator("soft", "frameworks", "languages", "tools", "certifications", mode="before")
    @classmethod
    def _lists(cls, v: Any) -> List[str]:
        return _string_list(v)


class AIPersonalInfo(_LenientModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    linkedin: Optional[str] = None
    github: Optional[str] = None
    website: Optional[str] = None
    summary: Optional[str] = None
    confidence: Optional[float] = None

    @field_validator("name", "email", "phone", "location", "linkedin", "github", "website", "summary", mode="before")
    @classmethod
    def _strings(cls, v: Any) -> Optional[str]:
        return _optional_string(v)

    @field_validator("confidence", mode="before")
    @classmethod
    def _confidence(cls, v: Any) -> Optional[float]:
        try:
            value = float(v)
        except (TypeError, ValueError):
            return None
        return value if 0.0 <= value <= 1.0 else None


class AIExperienceEntry(_LenientModel):
    company: Optional[str] = None
    position: Optional[str] = Field(default=None, validation_alias=AliasChoices("position", "title"))
    start_date: Optional[str] = Field(default=None, validation_alias=AliasChoices("startDate", "start_date"))
    end_date: Optional[str] = Field(default=None, validation_alias=AliasChoices("endDate", "end_date"))
    duration: Optional[str] = None
    description: List[str] = Field(default_factory=list)
    technologies: List[str] = Field(default_factory=list)
    achievements: List[str] = Field(default_factory=list)

    @field_validator("company", "position", "start_date", "end_date", "duration", mode="before")
    @classmethod
    def _strings(cls, v: Any) -> Optional[str]:
        return _optional_string(v)

    @field_validator("description", "technologies", "achievements", mode="before")
    @classmethod
    def _lists(cls, v: Any) -> List[str]:
        return _string_list(v)


class AIEducationEntry(_LenientModel):
    institution: Optional[str] = None
    degree: Optional[str] = None
    field: Optional[str] = None
    start_date: Optional[str] = Field(default=None, validation_alias=AliasChoices("startDate", "start_date"))
    end_date: Optional[str] = Field(default=None, validation_alias=AliasChoices("endDate", "end_date"))
    gpa: Optional[str] = None
    achievements: List[str] = Field(default_factory=list)

    @field_validator("institution", "degree", "field", "start_date", "end_date", "gpa", mode="before")
    @classmethod
    def _strings(cls, v: Any) -> Optional[str]:
        return _optional_string(v)

    @field_validator("achievements", mode="before")
    @classmethod
    def _lists(cls, v: Any) -> List[str]:
        return _string_list(v)


class AIProjectEntry(_LenientModel):
    name: Optional[str] = None
    description: Optional[str] = None
    technologies: List[str] = Field(default_factory=list)
    url: Optional[str] = None
    github: Optional[str] = None
    achievements: List[str] = Field(default_factory=list)

    @field_validator("name", "description", "url", "github", mode="before")
    @classmethod
    def _strings(cls, v: Any) -> Optional[str]:
        return _optional_string(v)

    @field_validator("technologies", "achievements", mode="before")
    @classmethod
    def _lists(cls, v: Any) -> List[str]:
        return _string_list(v)
