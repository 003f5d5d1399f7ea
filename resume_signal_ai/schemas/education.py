"""Education entries."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from resume_signal_ai.schemas.experience import UNKNOWN


class EducationEntry(BaseModel):
    """One degree line. Institution is 'Unknown' when it cannot be separated from the line."""

    model_config = ConfigDict(frozen=True)

    institution: str = Field(default=UNKNOWN, description="University / college name")
    degree: str = Field(..., description="Degree text")
    field: Optional[str] = Field(default=None, description="Field of study")
    start_date: Optional[str] = Field(default=None, description="Start year")
    end_date: Optional[str] = Field(default=None, description="End / graduation year")
    gpa: Optional[str] = Field(default=None, description="GPA as written, e.g. 3.8/4.0")
    achievements: List[str] = Field(default_factory=list, description="Honours and awards")
