"""Resume pipeline stages: segmentation, extraction, scoring, orchestration."""

from .education_extractor import EducationExtractor, extract_education
from .experience_analyzer import ExperienceAnalyzer, analyze_experience
from .field_extractor import enhance_contact_fields, extract_contact_fields
from .orchestrator import ResumePipeline, resolve_extraction_method, run_resume_pipeline
from .portfolio_extractor import ProjectExtractor, extract_achievements, extract_projects
from .quality_scorer import score_quality
from .section_segmenter import detect_header, segment_sections
from .skill_categorizer import SkillCategorizer, categorize_skills_heuristic, skill_category

__all__ = [
    "ResumePipeline",
    "run_resume_pipeline",
    "resolve_extraction_method",
    "segment_sections",
    "detect_header",
    "extract_contact_fields",
    "enhance_contact_fields",
    "SkillCategorizer",
    "categorize_skills_heuristic",
    "skill_category",
    "ExperienceAnalyzer",
    "analyze_experience",
    "EducationExtractor",
    "extract_education",
    "ProjectExtractor",
    "extract_projects",
    "extract_achievements",
    "score_quality",
]
