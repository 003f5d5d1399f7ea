"""Project entries."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Project(BaseModel):
    """A portfolio / side project listed on the resume."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Project name")
    description: str = Field(default="", description="Short description")
    technologies: List[str] = Field(default_factory=list, description="Technologies mentioned")
    url: Optional[str] = Field(default=None, description="Live / demo URL")
    github: Optional[str] = Field(default=None, description="Source repository URL")
    achievements: List[str] = Field(default_factory=list, description="Outcomes and results")
