"""Split resume text into labeled sections by matching short header lines."""

import re
from typing import List, Optional, Tuple

from resume_signal_ai.config import HEADER_MAX_LENGTH
from resume_signal_ai.dictionaries import SECTION_HEADER_PATTERNS, SECTION_HEADER_QUALIFIERS
from resume_signal_ai.schemas.sections import SectionKind, SectionSet
from resume_signal_ai.utils.logger import get_logger

logger = get_logger(__name__)

# A header is the section name alone on its line, after at most two qualifier words
# ("Relevant Experience"), optionally "X & Y" / "X and Y", optionally followed by ":"
# and inline content ("Skills: Python, SQL").
_QUALIFIERS = "|".join(SECTION_HEADER_QUALIFIERS)
_HEADER_REGEXES: Tuple[Tuple[SectionKind, re.Pattern], ...] = tuple(
    (
        kind,
        re.compile(
            rf"^[^\w]*(?:(?:{_QUALIFIERS})\s+){{0,2}}(?:{pattern})(?:\s+(?:and|&)\s+[a-z][a-z ]*?)?\s*(?::\s*(?P<rest>.*?))?[\s:\-–]*$",
            re.IGNORECASE,
        ),
    )
    for kind, pattern in SECTION_HEADER_PATTERNS
)


def detect_header(line: str, max_length: int = HEADER_MAX_LENGTH) -> Optional[Tuple[SectionKind, str]]:
    """
    Return (kind, inline_content) if the line is a section header, else None.
    Lines of `max_length` characters or more are never headers. First matching kind wins.
    """
    stripped = line.strip()
    if not stripped or len(stripped) >= max_length:
        return None
    for kind, rx in _HEADER_REGEXES:
        m = rx.match(stripped)
        if m:
            return kind, (m.group("rest") or "").strip()
    return None


def segment_sections(text: str, max_header_length: int = HEADER_MAX_LENGTH) -> SectionSet:
    """
    Scan text line by line and accumulate lines under the most recent header.
    Lines before the first header and blank lines are not part of any section.
    Never raises; text without headers yields an empty SectionSet.
    """
    blocks: List[Tuple[SectionKind, str]] = []
    current: Optional[SectionKind] = None
    buffer: List[str] = []

    def flush() -> None:
        if current is not None and buffer:
            content = "\n".join(buffer).strip()
            if content:
                blocks.append((current, content))

    for line in (text or "").split("\n"):
        header = detect_header(line, max_header_length)
        if header is not None:
            flush()
            current, inline = header
            buffer = [inline] if inline else []
        elif current is not None and line.strip():
            buffer.append(line)
    flush()

    sections = SectionSet.from_blocks(blocks)
    logger.debug("Segmented %s section(s): %s", len(sections), ", ".join(sections.order) or "none")
    return sections
