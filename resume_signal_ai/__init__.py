"""Resume extraction and scoring pipeline."""

from .cv_pipeline import ResumePipeline, run_resume_pipeline
from .errors import ClassifierError, ResumeInputError, ResumePipelineError
from .schemas import (
    ContactFields,
    DocumentMetadata,
    EducationEntry,
    ExperienceProfile,
    PipelineConfig,
    Project,
    QualityMetrics,
    RawDocument,
    ResumeAnalysis,
    Role,
    SectionSet,
    SkillsProfile,
    SourceFormat,
    TechnicalSkill,
)

__all__ = [
    "ResumePipeline",
    "run_resume_pipeline",
    "ResumePipelineError",
    "ResumeInputError",
    "ClassifierError",
    "ContactFields",
    "DocumentMetadata",
    "EducationEntry",
    "ExperienceProfile",
    "PipelineConfig",
    "Project",
    "QualityMetrics",
    "RawDocument",
    "ResumeAnalysis",
    "Role",
    "SectionSet",
    "SkillsProfile",
    "SourceFormat",
    "TechnicalSkill",
]
