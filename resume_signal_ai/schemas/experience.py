"""Work experience profile."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

UNKNOWN = "Unknown"


class Role(BaseModel):
    """A job role. Heuristic stubs carry 'Unknown' company/duration until enriched."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="Job title line")
    company: str = Field(default=UNKNOWN, description="Employer name")
    duration: str = Field(default=UNKNOWN, description="Date range or duration text")
    responsibilities: List[str] = Field(default_factory=list, description="Responsibilities and achievements")
    technologies: List[str] = Field(default_factory=list, description="Technologies used in the role")


class ExperienceProfile(BaseModel):
    """Experience summary. total_years is derived from date ranges, never authored."""

    model_config = ConfigDict(frozen=True)

    total_years: int = Field(default=0, ge=0, description="Sum of year-range durations")
    roles: List[Role] = Field(default_factory=list, description="Detected roles")
    companies: List[str] = Field(default_factory=list, description="Detected company names")
    industries: List[str] = Field(default_factory=list, description="Industry tags")
