"""Schema exports."""

from .contact import ContactFields
from .document import DocumentMetadata, RawDocument, SourceFormat
from .education import EducationEntry
from .experience import ExperienceProfile, Role
from .pipeline_config import PipelineConfig
from .project import Project
from .quality import QualityMetrics
from .resume_analysis import ExtractionMethod, ResumeAnalysis
from .sections import SectionKind, SectionSet
from .skills import SkillsProfile, TechnicalSkill

__all__ = [
    "ContactFields",
    "DocumentMetadata",
    "EducationEntry",
    "ExperienceProfile",
    "ExtractionMethod",
    "PipelineConfig",
    "Project",
    "QualityMetrics",
    "RawDocument",
    "ResumeAnalysis",
    "Role",
    "SectionKind",
    "SectionSet",
    "SkillsProfile",
    "SourceFormat",
    "TechnicalSkill",
]
