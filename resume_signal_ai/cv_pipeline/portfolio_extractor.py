"""Projects and achievements from their dedicated sections."""

import re
from typing import Any, Dict, List, Optional, Tuple

from pydantic import ValidationError

from resume_signal_ai.config import AI_TIMEOUT_SECONDS, PROMPT_CHAR_LIMITS
from resume_signal_ai.cv_pipeline.skill_categorizer import detect_technologies
from resume_signal_ai.schemas.ai_responses import AIProjectEntry
from resume_signal_ai.schemas.project import Project
from resume_signal_ai.schemas.sections import SectionSet
from resume_signal_ai.services.classifier import Classifier, classify_with_timeout
from resume_signal_ai.utils.helpers import is_bullet, non_empty_lines, strip_bullet
from resume_signal_ai.utils.json_extract import parse_json_array
from resume_signal_ai.utils.logger import get_logger

logger = get_logger(__name__)

_URL_RX = re.compile(r"(?:https?://|www\.)[^\s,;|()<>]+|(?<![\w.])github\.com/[^\s,;|()<>]+", re.IGNORECASE)
_NAME_SPLIT = re.compile(r"\s*[:|–—]\s*|\s+-\s+")


def _split_urls(line: str) -> Tuple[str, List[str]]:
    urls = [u.rstrip("/.,") for u in _URL_RX.findall(line)]
    return _URL_RX.sub(" ", line), urls


def extract_projects(sections: SectionSet) -> List[Project]:
    """
    Heuristic projects: each non-bullet line of the projects section starts a project
    ('Name - description' or 'Name: description'); following bullets are its outcomes.
    No projects section means no projects.
    """
    if not sections.projects:
        return []
    drafts: List[Dict[str, Any]] = []
    for line in non_empty_lines(sections.projects):
        text, urls = _split_urls(line)
        if is_bullet(line) and drafts:
            draft = drafts[-1]
            detail = strip_bullet(text).strip()
            if detail:
                draft["details"].append(detail)
        else:
            parts = _NAME_SPLIT.split(strip_bullet(text).strip(), maxsplit=1)
            draft = {"name": parts[0].strip(), "description": parts[1].strip() if len(parts) > 1 else "", "details": [], "urls": []}
            drafts.append(draft)
        draft["urls"].extend(urls)
        draft.setdefault("raw", []).append(line)

    projects: List[Project] = []
    for draft in drafts:
        if not draft["name"]:
            continue
        details = list(draft["details"])
        description = draft["description"] or (details.pop(0) if details else "")
        github = next((u for u in draft["urls"] if "github.com" in u.lower()), None)
        url = next((u for u in draft["urls"] if "github.com" not in u.lower()), None)
        projects.append(
            Project(
                name=draft["name"],
                description=description,
                technologies=detect_technologies("\n".join(draft["raw"])),
                url=url,
                github=github,
                achievements=details,
            )
        )
    return projects


def extract_achievements(sections: SectionSet) -> List[str]:
    """Lines of the achievements section with bullet markers removed."""
    return [strip_bullet(line) for line in non_empty_lines(sections.achievements) if strip_bullet(line)]


def _projects_from_ai(items: List[Any]) -> List[Project]:
    projects: List[Project] = []
    for item in items:
        if not isinstance(item, dict):
            continue
        try:
            entry = AIProjectEntry.model_validate(item)
        except ValidationError as e:
            logger.warning("Skipping project entry that failed validation: %s", e)
            continue
        if not entry.name:
            continue
        projects.append(
            Project(
                name=entry.name,
                description=entry.description or "",
                technologies=entry.technologies,
                url=entry.url,
                github=entry.github,
                achievements=entry.achievements,
            )
        )
    return projects


class ProjectExtractor:
    """Section-based project extraction, optionally replaced by AI-extracted projects in enhanced mode."""

    def __init__(
        self,
        classifier: Optional[Classifier] = None,
        enhanced: bool = False,
        timeout_seconds: float = AI_TIMEOUT_SECONDS,
    ) -> None:
        self._classifier = classifier
        self._enhanced = enhanced
        self._timeout_seconds = timeout_seconds

    @property
    def uses_ai(self) -> bool:
        return self._enhanced and self._classifier is not None

    async def extract(self, text: str, sections: SectionSet) -> Tuple[List[Project], bool]:
        """Return (projects, used_ai)."""
        projects = extract_projects(sections)
        if not self.uses_ai:
            return projects, False
        source = sections.projects or text
        response = await classify_with_timeout(
            self._classifier,
            "extract_projects",
            {"text": source[: PROMPT_CHAR_LIMITS["extract_projects"]]},
            self._timeout_seconds,
        )
        if response is None:
            return projects, False
        items = parse_json_array(response)
        ai_projects = _projects_from_ai(items) if items else []
        if not ai_projects:
            logger.warning("Projects response had no usable entries; keeping section-based projects")
            return projects, False
        return ai_projects, True
