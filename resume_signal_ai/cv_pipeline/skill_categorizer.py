"""
Skill categorization: AI classification first, keyword dictionary fallback.

The AI path asks the classifier for skills already bucketed into the six
SkillsProfile lists. Any call failure, timeout or malformed response drops to
the dictionary path, which always terminates and never raises.
"""

import re
from typing import Any, Dict, List, NamedTuple, Optional, Tuple

from pydantic import ValidationError

from resume_signal_ai.config import AI_TIMEOUT_SECONDS, PROMPT_CHAR_LIMITS
from resume_signal_ai.dictionaries import (
    CERTIFICATION_KEYWORDS,
    FRAMEWORK_CATEGORIES,
    LANGUAGE_CATEGORIES,
    NON_FRAMEWORK_SKILLS,
    SKILL_ALIASES,
    SOFT_SKILLS,
    SPOKEN_LANGUAGES,
    TECH_SKILLS_BY_CATEGORY,
    TOOL_CATEGORIES,
    TOOLS,
)
from resume_signal_ai.schemas.ai_responses import AISkillsResponse
from resume_signal_ai.schemas.sections import SectionSet
from resume_signal_ai.schemas.skills import SkillsProfile, TechnicalSkill
from resume_signal_ai.services.classifier import Classifier, classify_with_timeout
from resume_signal_ai.utils.helpers import (
    dedupe_casefold,
    non_empty_lines,
    strip_bullet,
    strip_label,
    term_pattern,
)
from resume_signal_ai.utils.json_extract import parse_json_object
from resume_signal_ai.utils.logger import get_logger

logger = get_logger(__name__)

_SKILL_RESPONSE_KEYS = ("technical", "soft", "frameworks", "languages", "tools", "certifications")
_ITEM_SPLIT = re.compile(r"[,;|•·\n]")
MAX_UNKNOWN_ITEM_CHARS = 40
MAX_UNKNOWN_ITEM_WORDS = 4


class _TermMatch(NamedTuple):
    start: int
    end: int
    name: str
    category: str


def _build_term_index() -> Tuple[Tuple[str, str, str], ...]:
    """(surface form, canonical name, category) for every technical term and alias."""
    canonical_category: Dict[str, str] = {}
    index: List[Tuple[str, str, str]] = []
    for category, names in TECH_SKILLS_BY_CATEGORY.items():
        for name in names:
            canonical_category.setdefault(name, category)
            index.append((name, name, category))
    for alias, name in SKILL_ALIASES.items():
        index.append((alias, name, canonical_category[name]))
    return tuple(index)


_TERM_INDEX = _build_term_index()
_CANONICAL_CATEGORY: Dict[str, str] = {surface.lower(): category for surface, _, category in _TERM_INDEX}


def skill_category(name: str) -> str:
    """Dictionary category for a skill name or alias; 'other' when unknown."""
    return _CANONICAL_CATEGORY.get((name or "").strip().lower(), "other")


def _technical_matches(text: str) -> List[_TermMatch]:
    """
    Dictionary hits in text ordered by position. Where hits overlap
    ("React Native" vs "React"), the longest one wins.
    """
    candidates: List[_TermMatch] = []
    for surface, name, category in _TERM_INDEX:
        for m in term_pattern(surface).finditer(text):
            candidates.append(_TermMatch(m.start(), m.end(), name, category))
    candidates.sort(key=lambda c: (c.start, -(c.end - c.start), c.name))
    kept: List[_TermMatch] = []
    for c in candidates:
        if any(c.start < k.end and k.start < c.end for k in kept):
            continue
        kept.append(c)
    return kept


def detect_technologies(text: str) -> List[str]:
    """Canonical technical skill names mentioned in text, in order of appearance."""
    return dedupe_casefold(m.name for m in _technical_matches(text or ""))


def _keyword_hits(text: str, keywords: Tuple[str, ...]) -> List[str]:
    """Keywords present in text, ordered by first occurrence."""
    hits: List[Tuple[int, str]] = []
    for keyword in keywords:
        m = term_pattern(keyword).search(text)
        if m:
            hits.append((m.start(), keyword))
    return [k for _, k in sorted(hits)]


def _is_known_item(item: str) -> bool:
    if _technical_matches(item) or _keyword_hits(item, TOOLS) or _keyword_hits(item, SOFT_SKILLS):
        return True
    return item.lower() in SPOKEN_LANGUAGES


def _unknown_listed_items(skills_text: str) -> List[str]:
    """Items of an explicit skills list that no dictionary recognises."""
    items: List[str] = []
    for raw in _ITEM_SPLIT.split(skills_text):
        item = strip_label(strip_bullet(raw)).strip(" .-–:")
        if len(item) < 2 or len(item) > MAX_UNKNOWN_ITEM_CHARS:
            continue
        if len(item.split()) > MAX_UNKNOWN_ITEM_WORDS or not re.search(r"[A-Za-z]", item):
            continue
        if not _is_known_item(item):
            items.append(item)
    return items


def _certifications(text: str, certifications_section: Optional[str]) -> List[str]:
    if certifications_section:
        return [strip_bullet(line) for line in non_empty_lines(certifications_section)]
    return _keyword_hits(text, CERTIFICATION_KEYWORDS)


def categorize_skills_heuristic(
    skills_text: str,
    is_skills_section: bool = False,
    certifications_section: Optional[str] = None,
) -> SkillsProfile:
    """
    Keyword-dictionary categorization. Every technical hit becomes a TechnicalSkill
    and also lands in languages / frameworks / tools according to its category.
    When `skills_text` is a real skills section, unrecognised list items are kept
    as technical skills in category 'other'.
    """
    text = skills_text or ""
    technical: List[TechnicalSkill] = []
    languages: List[str] = []
    frameworks: List[str] = []
    tools: List[str] = []
    for match in _technical_matches(text):
        technical.append(TechnicalSkill(name=match.name, category=match.category))
        if match.category in LANGUAGE_CATEGORIES:
            languages.append(match.name)
        elif match.category in FRAMEWORK_CATEGORIES and match.name not in NON_FRAMEWORK_SKILLS:
            frameworks.append(match.name)
        elif match.category in TOOL_CATEGORIES:
            tools.append(match.name)
    tools.extend(_keyword_hits(text, TOOLS))

    if is_skills_section:
        technical.extend(TechnicalSkill(name=item, category="other") for item in _unknown_listed_items(text))

    return SkillsProfile(
        technical=technical,
        soft=_keyword_hits(text, SOFT_SKILLS),
        frameworks=frameworks,
        languages=languages,
        tools=tools,
        certifications=_certifications(text, certifications_section),
    )


def parse_ai_skills(response: Any) -> Optional[SkillsProfile]:
    """
    Turn a classifier response into a SkillsProfile, or None if it is unusable.
    A JSON object with none of the six bucket keys counts as unusable.
    """
    data = parse_json_object(response)
    if data is None or not any(key in data for key in _SKILL_RESPONSE_KEYS):
        return None
    try:
        parsed = AISkillsResponse.model_validate(data)
    except ValidationError as e:
        logger.warning("Skills response failed validation: %s", e)
        return None
    technical = [
        TechnicalSkill(
            name=s.name,
            category=s.category if s.category != "other" else skill_category(s.name),
            proficiency=s.proficiency,
            years_of_experience=s.years_of_experience,
        )
        for s in parsed.technical
    ]
    return SkillsProfile(
        technical=technical,
        soft=parsed.soft,
        frameworks=parsed.frameworks,
        languages=parsed.languages,
        tools=parsed.tools,
        certifications=parsed.certifications,
    )


class SkillCategorizer:
    """Two-path skill categorization over the skills section (or the full text)."""

    def __init__(self, classifier: Optional[Classifier] = None, timeout_seconds: float = AI_TIMEOUT_SECONDS) -> None:
        self._classifier = classifier
        self._timeout_seconds = timeout_seconds

    async def categorize(self, text: str, sections: SectionSet) -> Tuple[SkillsProfile, bool]:
        """Return (profile, used_ai)."""
        skills_text = sections.skills or text
        if self._classifier is not None:
            limit = PROMPT_CHAR_LIMITS["categorize_skills"]
            response = await classify_with_timeout(
                self._classifier,
                "categorize_skills",
                {"text": skills_text[:limit], "has_skills_section": sections.skills is not None},
                self._timeout_seconds,
            )
            if response is not None:
                profile = parse_ai_skills(response)
                if profile is not None:
                    return self._with_section_certifications(profile, sections), True
                logger.warning("Skills response was not usable JSON; falling back to keyword dictionary")
        profile = categorize_skills_heuristic(
            skills_text,
            is_skills_section=sections.skills is not None,
            certifications_section=sections.certifications,
        )
        return profile, False

    @staticmethod
    def _with_section_certifications(profile: SkillsProfile, sections: SectionSet) -> SkillsProfile:
        """Certifications listed in their own section are kept even if the model missed them."""
        if not sections.certifications:
            return profile
        listed = [strip_bullet(line) for line in non_empty_lines(sections.certifications)]
        merged = dedupe_casefold(profile.certifications + listed)
        return profile.model_copy(update={"certifications": merged})

