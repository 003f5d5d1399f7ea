"""
Resume pipeline orchestration: clean and validate input, segment, run the
extraction stages concurrently, score, and assemble one ResumeAnalysis.

Each stage is guarded on its own. A stage that raises or exceeds the stage
timeout contributes its empty default and is listed in `degraded_stages`;
only invalid input fails the run.
"""

import asyncio
import time
from typing import Any, Awaitable, Callable, Dict, List, Optional, Tuple, Union

from resume_signal_ai.cv_pipeline.education_extractor import EducationExtractor
from resume_signal_ai.cv_pipeline.experience_analyzer import ExperienceAnalyzer
from resume_signal_ai.cv_pipeline.field_extractor import enhance_contact_fields, extract_contact_fields
from resume_signal_ai.cv_pipeline.portfolio_extractor import ProjectExtractor, extract_achievements
from resume_signal_ai.cv_pipeline.quality_scorer import score_quality
from resume_signal_ai.cv_pipeline.section_segmenter import segment_sections
from resume_signal_ai.cv_pipeline.skill_categorizer import SkillCategorizer
from resume_signal_ai.errors import ResumeInputError
from resume_signal_ai.schemas.contact import ContactFields
from resume_signal_ai.schemas.document import DocumentMetadata, RawDocument, SourceFormat
from resume_signal_ai.schemas.experience import ExperienceProfile
from resume_signal_ai.schemas.pipeline_config import PipelineConfig
from resume_signal_ai.schemas.resume_analysis import ExtractionMethod, ResumeAnalysis
from resume_signal_ai.schemas.skills import SkillsProfile
from resume_signal_ai.services.classifier import Classifier, build_default_classifier
from resume_signal_ai.services.text_cleaner import clean_resume_text
from resume_signal_ai.utils.logger import get_logger

logger = get_logger(__name__)

StageResult = Tuple[Any, bool]


def resolve_extraction_method(ai_eligible: Dict[str, bool]) -> ExtractionMethod:
    """
    'ai' when every AI-eligible stage used its AI path, 'heuristic' when none did
    (or none was eligible), 'mixed' otherwise.
    """
    if not ai_eligible:
        return "heuristic"
    used = sum(1 for v in ai_eligible.values() if v)
    if used == 0:
        return "heuristic"
    if used == len(ai_eligible):
        return "ai"
    return "mixed"


class ResumePipeline:
    """Runs the extraction stages over one resume and merges their results."""

    def __init__(
        self,
        classifier: Optional[Classifier] = None,
        config: Optional[PipelineConfig] = None,
        today_year: Optional[int] = None,
    ) -> None:
        self.config = config or PipelineConfig()
        self.classifier = classifier
        self._today_year = today_year
        self._stats: Dict[str, float] = {"runs": 0, "ai_runs": 0, "degraded_runs": 0, "total_duration_ms": 0.0}

    @classmethod
    def from_env(cls, config: Optional[PipelineConfig] = None, today_year: Optional[int] = None) -> "ResumePipeline":
        """Pipeline with the OpenAI classifier when configured, heuristic-only otherwise."""
        config = config or PipelineConfig()
        return cls(classifier=build_default_classifier(config), config=config, today_year=today_year)

    def _prepare(self, document: Union[RawDocument, str]) -> RawDocument:
        if isinstance(document, RawDocument):
            raw = document
        elif isinstance(document, str):
            raw = RawDocument(text=document)
        else:
            raise ResumeInputError(f"Unsupported document type: {type(document).__name__}")
        text = clean_resume_text(raw.text, self.config.max_text_chars)
        if not text:
            raise ResumeInputError("Resume text is empty", length=0)
        if len(text) < self.config.min_text_length:
            raise ResumeInputError(
                f"Resume text too short: {len(text)} < {self.config.min_text_length} characters",
                length=len(text),
            )
        return raw.model_copy(update={"text": text})

    async def _guarded(
        self,
        name: str,
        stage: Callable[[], Awaitable[StageResult]],
        default: Any,
        degraded: List[str],
    ) -> StageResult:
        try:
            return await asyncio.wait_for(stage(), timeout=self.config.stage_timeout_seconds)
        except asyncio.TimeoutError:
            logger.warning("Stage %s timed out after %.1fs; using default", name, self.config.stage_timeout_seconds)
        except Exception as e:
            logger.warning("Stage %s failed (%s: %s); using default", name, type(e).__name__, e, exc_info=True)
        degraded.append(name)
        return default, False

    async def _contact_stage(self, text: str) -> StageResult:
        contact = extract_contact_fields(text, self.config.contact_window_chars)
        if not (self.config.enhanced and self.classifier is not None):
            return contact, False
        return await enhance_contact_fields(
            contact,
            text,
            self.classifier,
            self.config.ai_timeout_seconds,
            self.config.contact_window_chars,
        )

    async def analyze(self, document: Union[RawDocument, str]) -> ResumeAnalysis:
        """
        Analyze one resume. Raises ResumeInputError for missing or too-short text;
        every other failure degrades the affected stage instead of the run.
        """
        started = time.perf_counter()
        raw = self._prepare(document)
        text = raw.text
        sections = segment_sections(text, self.config.header_max_length)

        cfg = self.config
        enhanced_ai = cfg.enhanced and self.classifier is not None
        skills = SkillCategorizer(self.classifier, cfg.ai_timeout_seconds)
        experience = ExperienceAnalyzer(self.classifier, cfg.enhanced, cfg.ai_timeout_seconds, self._today_year)
        education = EducationExtractor(self.classifier, cfg.enhanced, cfg.ai_timeout_seconds)
        projects = ProjectExtractor(self.classifier, cfg.enhanced, cfg.ai_timeout_seconds)

        degraded: List[str] = []
        (
            (contact_out, contact_ai),
            (skills_out, skills_ai),
            (experience_out, experience_ai),
            (education_out, education_ai),
            (projects_out, projects_ai),
        ) = await asyncio.gather(
            self._guarded("contact", lambda: self._contact_stage(text), ContactFields(), degraded),
            self._guarded("skills", lambda: skills.categorize(text, sections), SkillsProfile(), degraded),
            self._guarded("experience", lambda: experience.analyze(text, sections), ExperienceProfile(), degraded),
            self._guarded("education", lambda: education.extract(text, sections), [], degraded),
            self._guarded("projects", lambda: projects.extract(text, sections), [], degraded),
        )

        ai_eligible: Dict[str, bool] = {}
        if self.classifier is not None:
            ai_eligible["skills"] = skills_ai
        if enhanced_ai:
            ai_eligible.update(
                contact=contact_ai,
                experience=experience_ai,
                education=education_ai,
                projects=projects_ai,
            )
        method = resolve_extraction_method(ai_eligible)

        quality = score_quality(text, sections, contact_out)
        analysis = ResumeAnalysis(
            text=text,
            contact=contact_out,
            sections=sections,
            skills=skills_out,
            experience=experience_out,
            education=education_out,
            projects=projects_out,
            achievements=extract_achievements(sections),
            quality=quality,
            parse_source=raw.source_format,
            metadata=raw.metadata,
            extraction_method=method,
            degraded_stages=sorted(degraded),
        )

        duration_ms = (time.perf_counter() - started) * 1000
        self._record(analysis, duration_ms)
        logger.info(
            "Resume analyzed: method=%s score=%s sections=%s degraded=%s duration_ms=%.1f",
            method,
            quality.score,
            len(sections),
            ",".join(analysis.degraded_stages) or "none",
            duration_ms,
        )
        return analysis

    def _record(self, analysis: ResumeAnalysis, duration_ms: float) -> None:
        self._stats["runs"] += 1
        if analysis.extraction_method != "heuristic":
            self._stats["ai_runs"] += 1
        if analysis.degraded_stages:
            self._stats["degraded_runs"] += 1
        self._stats["total_duration_ms"] += duration_ms

    def stats(self) -> Dict[str, float]:
        """Counters over successful runs of this pipeline instance."""
        runs = int(self._stats["runs"])
        return {
            "runs": runs,
            "ai_runs": int(self._stats["ai_runs"]),
            "degraded_runs": int(self._stats["degraded_runs"]),
            "average_duration_ms": self._stats["total_duration_ms"] / runs if runs else 0.0,
        }


def run_resume_pipeline(
    text: str,
    source_format: SourceFormat = SourceFormat.TEXT,
    metadata: Optional[Union[DocumentMetadata, Dict[str, Any]]] = None,
    classifier: Optional[Classifier] = None,
    config: Optional[PipelineConfig] = None,
    today_year: Optional[int] = None,
) -> ResumeAnalysis:
    """
    Synchronous entry point. Without an explicit classifier the environment decides
    (OpenAI when configured, heuristic-only otherwise). Safe to call from sync code.
    """
    if isinstance(metadata, dict):
        metadata = DocumentMetadata(**metadata)
    document = RawDocument(text=text or "", source_format=source_format, metadata=metadata or DocumentMetadata())
    if classifier is None:
        pipeline = ResumePipeline.from_env(config, today_year)
    else:
        pipeline = ResumePipeline(classifier=classifier, config=config, today_year=today_year)
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    try:
        return loop.run_until_complete(pipeline.analyze(document))
    finally:
        loop.close()
