"""
Resume quality score: four 0-25 subscores summed into a 0-100 total.

- completeness: +5 each for name, email, phone, an experience section, and
  an education or skills section
- clarity: +10 over 100 words, +10 over 300 words, +5 for line structure;
  then -5 under 80 words or -10 over 1200 words, floored at 0
- relevance: 8 per relevance keyword found, capped at 25
- formatting: +5 summary section, +10 for 3+ sections, +5 for a year, +5 for '@'
"""

import re

from resume_signal_ai.dictionaries import RELEVANCE_KEYWORDS
from resume_signal_ai.schemas.contact import ContactFields
from resume_signal_ai.schemas.quality import SCORE_MAX, SUBSCORE_MAX, QualityMetrics
from resume_signal_ai.schemas.sections import SectionSet
from resume_signal_ai.utils.date_parser import has_year

SHORT_TEXT_WORDS = 80
LONG_TEXT_WORDS = 1200


def word_count(text: str) -> int:
    """Number of whitespace-separated chunks; empty leading/trailing chunks count."""
    return len(re.split(r"\s+", text))


def _completeness(sections: SectionSet, contact: ContactFields) -> int:
    points = 0
    for value in (contact.name, contact.email, contact.phone):
        if value:
            points += 5
    if sections.experience:
        points += 5
    if sections.education or sections.skills:
        points += 5
    return points


def _clarity(text: str) -> int:
    words = word_count(text)
    points = 0
    if words > 100:
        points += 10
    if words > 300:
        points += 10
    if "\n" in text:
        points += 5
    if words < SHORT_TEXT_WORDS:
        points = max(0, points - 5)
    elif words > LONG_TEXT_WORDS:
        points = max(0, points - 10)
    return points


def _relevance(text: str) -> int:
    lowered = text.lower()
    found = sum(1 for keyword in RELEVANCE_KEYWORDS if keyword in lowered)
    return min(SUBSCORE_MAX, 8 * found)


def _formatting(text: str, sections: SectionSet) -> int:
    points = 0
    if sections.summary:
        points += 5
    if len(sections) >= 3:
        points += 10
    if has_year(text):
        points += 5
    if "@" in text:
        points += 5
    return points


def score_quality(text: str, sections: SectionSet, contact: ContactFields) -> QualityMetrics:
    """Pure function of the cleaned text, detected sections and contact fields."""
    text = text or ""
    completeness = _completeness(sections, contact)
    clarity = _clarity(text)
    relevance = _relevance(text)
    formatting = _formatting(text, sections)
    return QualityMetrics(
        score=min(SCORE_MAX, completeness + clarity + relevance + formatting),
        completeness=completeness,
        clarity=clarity,
        relevance=relevance,
        formatting=formatting,
    )
