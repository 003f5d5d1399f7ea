"""Work experience analysis: tenure from year ranges, companies, industries, roles."""

import re
from typing import Any, Dict, List, Optional, Tuple

from pydantic import ValidationError

from resume_signal_ai.config import AI_TIMEOUT_SECONDS, PROMPT_CHAR_LIMITS
from resume_signal_ai.cv_pipeline.section_segmenter import detect_header
from resume_signal_ai.dictionaries import COMPANY_SUFFIXES, INDUSTRY_KEYWORDS, ROLE_KEYWORDS
from resume_signal_ai.schemas.ai_responses import AIExperienceEntry
from resume_signal_ai.schemas.experience import UNKNOWN, ExperienceProfile, Role
from resume_signal_ai.schemas.sections import SectionSet
from resume_signal_ai.services.classifier import Classifier, classify_with_timeout
from resume_signal_ai.utils.date_parser import YEAR_RANGE_PATTERN, find_year_ranges, sum_range_years
from resume_signal_ai.utils.helpers import dedupe_exact, is_bullet, strip_bullet
from resume_signal_ai.utils.json_extract import parse_json_array
from resume_signal_ai.utils.logger import get_logger

logger = get_logger(__name__)

_COMPANY_RX = re.compile(rf"\b(?:{'|'.join(COMPANY_SUFFIXES)})\b\.?", re.IGNORECASE)
_ROLE_RX = re.compile(rf"\b(?:{'|'.join(ROLE_KEYWORDS)})s?\b", re.IGNORECASE)
# "Title - Company", "Company – Title", "Title | Company"; hyphens inside names are kept
_PART_SPLIT = re.compile(r"\s+-\s+|\s*[–—|]\s*")
_AT_SPLIT = re.compile(r"\s+(?:at|@)\s+", re.IGNORECASE)
_EDGE_PUNCT = " ,;:-–—|()"
MAX_HEADLINE_CHARS = 120  # longer lines are prose, not role/company headlines
MIN_PROSE_WORDS = 6


def _without_ranges(line: str) -> str:
    return re.sub(r"\s{2,}", " ", YEAR_RANGE_PATTERN.sub(" ", line)).strip(_EDGE_PUNCT)


def _trim_company(part: str) -> str:
    """Drop a trailing ', City' after the organisational suffix."""
    company = part.strip(_EDGE_PUNCT)
    m = _COMPANY_RX.search(company)
    if m:
        comma = company.find(",", m.end())
        if comma != -1:
            company = company[:comma]
    return company.strip(_EDGE_PUNCT)


def extract_company(line: str) -> Optional[str]:
    """
    Company name from a line carrying an organisational suffix: the dash-separated
    part holding the suffix (else the first part), minus any 'Title at' prefix.
    """
    cleaned = _without_ranges(strip_bullet(line))
    parts = [p for p in _PART_SPLIT.split(cleaned) if p.strip()]
    if not parts:
        return None
    part = next((p for p in parts if _COMPANY_RX.search(p)), parts[0])
    part = _AT_SPLIT.split(part)[-1]
    company = _trim_company(part)
    return company if len(company) > 2 else None


def parse_role_line(line: str) -> Role:
    """Role stub from a headline; company and duration stay 'Unknown' unless on the same line."""
    ranges = YEAR_RANGE_PATTERN.search(line)
    duration = ranges.group(0) if ranges else UNKNOWN
    cleaned = _without_ranges(strip_bullet(line))
    title, company = cleaned, UNKNOWN
    at_parts = _AT_SPLIT.split(cleaned, maxsplit=1)
    if len(at_parts) == 2:
        title, company = at_parts[0], _trim_company(at_parts[1]) or UNKNOWN
    else:
        parts = [p for p in _PART_SPLIT.split(cleaned) if p.strip()]
        if len(parts) > 1:
            title = next((p for p in parts if _ROLE_RX.search(p)), parts[0])
            company_part = next((p for p in parts if p != title and _COMPANY_RX.search(p)), None)
            if company_part:
                company = _trim_company(company_part) or UNKNOWN
    title = title.strip(_EDGE_PUNCT) or line.strip()
    return Role(title=title, company=company, duration=duration)


def extract_industries(text: str) -> List[str]:
    """Industry keywords present anywhere in the text, excluding section header lines."""
    body = "\n".join(line for line in (text or "").split("\n") if detect_header(line) is None).lower()
    return [keyword for keyword in INDUSTRY_KEYWORDS if keyword in body]


def analyze_experience(text: str, sections: SectionSet, today_year: Optional[int] = None) -> ExperienceProfile:
    """
    Heuristic experience profile over the experience section (full text when absent).
    total_years sums every year range found; overlapping jobs are counted twice.
    """
    source = sections.experience or text or ""
    total_years = sum_range_years(find_year_ranges(source, today_year))

    companies: List[str] = []
    drafts: List[Dict[str, Any]] = []
    current: Optional[Dict[str, Any]] = None
    for raw in source.split("\n"):
        line = raw.strip()
        if not line:
            continue
        if detect_header(line) is not None:
            current = None
            continue
        bullet = is_bullet(line)
        headline = not bullet and len(line) <= MAX_HEADLINE_CHARS
        company = extract_company(line) if headline and _COMPANY_RX.search(line) else None
        if company:
            companies.append(company)
        if headline and len(line) > 2 and _ROLE_RX.search(line):
            current = parse_role_line(line).model_dump()
            drafts.append(current)
            continue
        if current is None:
            continue
        if bullet:
            current["responsibilities"].append(strip_bullet(line))
            continue
        range_match = YEAR_RANGE_PATTERN.search(line)
        if company and current["company"] == UNKNOWN:
            current["company"] = company
        if range_match and current["duration"] == UNKNOWN:
            current["duration"] = range_match.group(0)
        if not company and not range_match and len(line.split()) >= MIN_PROSE_WORDS:
            current["responsibilities"].append(line)

    return ExperienceProfile(
        total_years=total_years,
        roles=[Role(**d) for d in drafts],
        companies=dedupe_exact(companies),
        industries=extract_industries(text or source),
    )


def _roles_from_ai(items: List[Any]) -> List[Role]:
    roles: List[Role] = []
    for item in items:
        if not isinstance(item, dict):
            continue
        try:
            entry = AIExperienceEntry.model_validate(item)
        except ValidationError as e:
            logger.warning("Skipping experience entry that failed validation: %s", e)
            continue
        if not (entry.position or entry.company):
            continue
        dates = " - ".join(d for d in (entry.start_date, entry.end_date) if d)
        roles.append(
            Role(
                title=entry.position or UNKNOWN,
                company=entry.company or UNKNOWN,
                duration=entry.duration or dates or UNKNOWN,
                responsibilities=entry.description + entry.achievements,
                technologies=entry.technologies,
            )
        )
    return roles


class ExperienceAnalyzer:
    """Heuristic analysis, optionally enriched with AI-extracted roles in enhanced mode."""

    def __init__(
        self,
        classifier: Optional[Classifier] = None,
        enhanced: bool = False,
        timeout_seconds: float = AI_TIMEOUT_SECONDS,
        today_year: Optional[int] = None,
    ) -> None:
        self._classifier = classifier
        self._enhanced = enhanced
        self._timeout_seconds = timeout_seconds
        self._today_year = today_year

    @property
    def uses_ai(self) -> bool:
        return self._enhanced and self._classifier is not None

    async def analyze(self, text: str, sections: SectionSet) -> Tuple[ExperienceProfile, bool]:
        """Return (profile, used_ai)."""
        profile = analyze_experience(text, sections, self._today_year)
        if not self.uses_ai:
            return profile, False
        source = sections.experience or text
        response = await classify_with_timeout(
            self._classifier,
            "extract_experience",
            {"text": source[: PROMPT_CHAR_LIMITS["extract_experience"]]},
            self._timeout_seconds,
        )
        if response is None:
            return profile, False
        items = parse_json_array(response)
        roles = _roles_from_ai(items) if items else []
        if not roles:
            logger.warning("Experience response had no usable roles; keeping heuristic roles")
            return profile, False
        companies = dedupe_exact(profile.companies + [r.company for r in roles if r.company != UNKNOWN])
        return profile.model_copy(update={"roles": roles, "companies": companies}), True
