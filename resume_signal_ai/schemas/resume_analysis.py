"""Root aggregate returned by the pipeline."""

from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field

from resume_signal_ai.schemas.contact import ContactFields
from resume_signal_ai.schemas.document import DocumentMetadata, SourceFormat
from resume_signal_ai.schemas.education import EducationEntry
from resume_signal_ai.schemas.experience import ExperienceProfile
from resume_signal_ai.schemas.project import Project
from resume_signal_ai.schemas.quality import QualityMetrics
from resume_signal_ai.schemas.sections import SectionSet
from resume_signal_ai.schemas.skills import SkillsProfile

ExtractionMethod = Literal["ai", "heuristic", "mixed"]


class ResumeAnalysis(BaseModel):
    """
    Structured candidate profile for one uploaded resume.
    Always fully populated: stages that failed contribute their empty defaults.
    """

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., description="Cleaned resume text the analysis ran on")
    contact: ContactFields = Field(default_factory=ContactFields, description="Personal / contact fields")
    sections: SectionSet = Field(default_factory=SectionSet, description="Detected sections")
    skills: SkillsProfile = Field(default_factory=SkillsProfile, description="Categorized skills")
    experience: ExperienceProfile = Field(default_factory=ExperienceProfile, description="Experience profile")
    education: List[EducationEntry] = Field(default_factory=list, description="Education entries")
    projects: List[Project] = Field(default_factory=list, description="Projects")
    achievements: List[str] = Field(default_factory=list, description="Achievements / awards lines")
    quality: QualityMetrics = Field(default_factory=QualityMetrics, description="Quality metrics")
    parse_source: SourceFormat = Field(default=SourceFormat.TEXT, description="Format the text came from")
    metadata: DocumentMetadata = Field(default_factory=DocumentMetadata, description="Converter metadata")
    extraction_method: ExtractionMethod = Field(default="heuristic", description="Which strategy produced the data")
    degraded_stages: List[str] = Field(default_factory=list, description="Stages that fell back to defaults")
