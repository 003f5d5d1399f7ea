"""Helper utilities shared by the extraction stages."""

import re
from typing import Iterable, List, Optional

EMAIL_PATTERN = re.compile(r"[A-Za-z0-9._%+\-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
BULLET_PATTERN = re.compile(r"^\s*(?:[-–•*▪◦●·>]|\d{1,2}[.)])\s+")
_LABEL_PATTERN = re.compile(r"^[A-Za-z /&]{2,30}:\s*")


def extract_emails(text: str) -> List[str]:
    """Extract email addresses from text using regex, first occurrence order, lowercased."""
    if not text:
        return []
    return list(dict.fromkeys(m.lower() for m in EMAIL_PATTERN.findall(text)))


def term_pattern(term: str) -> re.Pattern:
    """
    Case-insensitive pattern for a dictionary term, bounded by non-letters.
    Symbols inside the term (c++, node.js, ci/cd) are matched literally.
    """
    return re.compile(rf"(?<![a-z]){re.escape(term.lower())}(?![a-z])", re.IGNORECASE)


def dedupe_casefold(items: Iterable[str]) -> List[str]:
    """Drop blanks and case-insensitive duplicates; keep first spelling and order."""
    seen: set[str] = set()
    result: List[str] = []
    for item in items:
        value = (item or "").strip()
        key = value.casefold()
        if value and key not in seen:
            seen.add(key)
            result.append(value)
    return result


def dedupe_exact(items: Iterable[str]) -> List[str]:
    """Drop blanks and exact (case-sensitive) duplicates; keep order."""
    return list(dict.fromkeys(i.strip() for i in items if i and i.strip()))


def is_bullet(line: str) -> bool:
    return BULLET_PATTERN.match(line) is not None


def strip_bullet(line: str) -> str:
    """Remove a leading bullet marker and surrounding whitespace."""
    return BULLET_PATTERN.sub("", line, count=1).strip()


def strip_label(item: str) -> str:
    """Remove a leading 'Label:' prefix such as 'Languages: ' from a list item."""
    return _LABEL_PATTERN.sub("", item, count=1).strip()


def non_empty_lines(text: Optional[str]) -> List[str]:
    """Split on newlines, trim, drop empties."""
    if not text:
        return []
    return [line.strip() for line in text.split("\n") if line.strip()]
