"""Line-based degree / institution / year extraction from the education section."""

import re
from typing import Any, List, Optional, Tuple

from pydantic import ValidationError

from resume_signal_ai.config import AI_TIMEOUT_SECONDS, PROMPT_CHAR_LIMITS
from resume_signal_ai.dictionaries import DEGREE_PATTERNS, EDUCATION_HONOURS, FIELDS_OF_STUDY, INSTITUTION_KEYWORDS
from resume_signal_ai.schemas.ai_responses import AIEducationEntry
from resume_signal_ai.schemas.education import EducationEntry
from resume_signal_ai.schemas.experience import UNKNOWN
from resume_signal_ai.schemas.sections import SectionSet
from resume_signal_ai.services.classifier import Classifier, classify_with_timeout
from resume_signal_ai.utils.date_parser import YEAR_PATTERN, find_years
from resume_signal_ai.utils.helpers import strip_bullet
from resume_signal_ai.utils.json_extract import parse_json_array
from resume_signal_ai.utils.logger import get_logger

logger = get_logger(__name__)

_DEGREE_RXS = tuple((level, re.compile(pattern, re.IGNORECASE)) for level, pattern in DEGREE_PATTERNS)
_INSTITUTION_RX = re.compile(rf"\b(?:{'|'.join(INSTITUTION_KEYWORDS)})\b", re.IGNORECASE)
_GPA_RX = re.compile(
    r"\bGPA\b\s*[:\-]?\s*(\d\.\d{1,2}(?:\s*/\s*\d(?:\.\d{1,2})?)?)|(\d\.\d{1,2}\s*/\s*\d(?:\.\d{1,2})?)\s*GPA\b",
    re.IGNORECASE,
)
_SEGMENT_SPLIT = re.compile(r"\s*[,|–—]\s*|\s+-\s+")
_FROM_SPLIT = re.compile(r"\s+(?:at|from)\s+", re.IGNORECASE)
_EDGE_PUNCT = " ,;:-–—|()"


def degree_level(line: str) -> Optional[str]:
    """bachelor / master / doctorate / associate for a line naming a degree, else None."""
    for level, rx in _DEGREE_RXS:
        if rx.search(line):
            return level
    return None


def _strip_years(segment: str) -> str:
    cleaned = re.sub(r"\(?\s*" + YEAR_PATTERN.pattern + r"(?:\s*[-–]\s*(?:" + YEAR_PATTERN.pattern + r"|present|current))?\s*\)?", " ", segment, flags=re.IGNORECASE)
    return re.sub(r"\s{2,}", " ", cleaned).strip(_EDGE_PUNCT)


def _field_of_study(line: str) -> Optional[str]:
    lowered = line.lower()
    for field in FIELDS_OF_STUDY:
        if field in lowered:
            return field.title()
    return None


def _institution_from(segments: List[str], degree_segment: str) -> Optional[str]:
    for segment in segments:
        if segment != degree_segment and _INSTITUTION_RX.search(segment):
            return _strip_years(segment)
    parts = _FROM_SPLIT.split(degree_segment, maxsplit=1)
    if len(parts) == 2 and _INSTITUTION_RX.search(parts[1]):
        return _strip_years(parts[1])
    return None


def parse_degree_line(line: str, neighbours: Tuple[str, ...] = ()) -> EducationEntry:
    """
    One EducationEntry from a degree line. Institution comes from the same line or,
    failing that, an adjacent non-degree line naming a university/college/etc.
    """
    text = strip_bullet(line)
    gpa_match = _GPA_RX.search(text)
    gpa = (gpa_match.group(1) or gpa_match.group(2)).replace(" ", "") if gpa_match else None
    without_gpa = _GPA_RX.sub(" ", text) if gpa_match else text

    years = find_years(text)
    start_date = years[0] if len(years) >= 2 else None
    end_date = years[1] if len(years) >= 2 else (years[0] if years else None)

    segments = [s.strip() for s in _SEGMENT_SPLIT.split(without_gpa) if s.strip()]
    degree_segment = next((s for s in segments if degree_level(s)), without_gpa.strip())
    institution = _institution_from(segments, degree_segment)
    degree = degree_segment
    if institution:
        degree = _FROM_SPLIT.split(degree_segment, maxsplit=1)[0]
    else:
        for neighbour in neighbours:
            if neighbour and not degree_level(neighbour) and _INSTITUTION_RX.search(neighbour):
                institution = _strip_years(strip_bullet(neighbour))
                break

    lowered = text.lower()
    return EducationEntry(
        institution=institution or UNKNOWN,
        degree=_strip_years(degree) or text.strip(),
        field=_field_of_study(text),
        start_date=start_date,
        end_date=end_date,
        gpa=gpa,
        achievements=[h.title() for h in EDUCATION_HONOURS if h in lowered and not _is_shadowed(h, lowered)],
    )


def _is_shadowed(honour: str, lowered: str) -> bool:
    """'cum laude' is not reported separately when 'magna/summa cum laude' is present."""
    return any(h != honour and honour in h and h in lowered for h in EDUCATION_HONOURS)


def extract_education(text: str, sections: SectionSet) -> List[EducationEntry]:
    """Each line of the education section (full text when absent) naming a degree becomes an entry."""
    source = sections.education or text or ""
    lines = [line.strip() for line in source.split("\n") if line.strip()]
    entries: List[EducationEntry] = []
    for i, line in enumerate(lines):
        if degree_level(line) is None:
            continue
        neighbours = tuple(lines[j] for j in (i - 1, i + 1) if 0 <= j < len(lines))
        entries.append(parse_degree_line(line, neighbours))
    return entries


def _entries_from_ai(items: List[Any]) -> List[EducationEntry]:
    entries: List[EducationEntry] = []
    for item in items:
        if not isinstance(item, dict):
            continue
        try:
            entry = AIEducationEntry.model_validate(item)
        except ValidationError as e:
            logger.warning("Skipping education entry that failed validation: %s", e)
            continue
        if not (entry.degree or entry.institution):
            continue
        entries.append(
            EducationEntry(
                institution=entry.institution or UNKNOWN,
                degree=entry.degree or UNKNOWN,
                field=entry.field,
                start_date=entry.start_date,
                end_date=entry.end_date,
                gpa=entry.gpa,
                achievements=entry.achievements,
            )
        )
    return entries


class EducationExtractor:
    """Line-based extraction, optionally replaced by AI-extracted entries in enhanced mode."""

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

    async def extract(self, text: str, sections: SectionSet) -> Tuple[List[EducationEntry], bool]:
        """Return (entries, used_ai)."""
        entries = extract_education(text, sections)
        if not self.uses_ai:
            return entries, False
        source = sections.education or text
        response = await classify_with_timeout(
            self._classifier,
            "extract_education",
            {"text": source[: PROMPT_CHAR_LIMITS["extract_education"]]},
            self._timeout_seconds,
        )
        if response is None:
            return entries, False
        items = parse_json_array(response)
        ai_entries = _entries_from_ai(items) if items else []
        if not ai_entries:
            logger.warning("Education response had no usable entries; keeping line-based entries")
            return entries, False
        return ai_entries, True
