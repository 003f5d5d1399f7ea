"""Clean and normalize resume text before segmentation."""

import re
import unicodedata

from resume_signal_ai.config import MAX_TEXT_CHARS

# Zero-width and BOM characters some converters leave behind
_INVISIBLE = re.compile("[\u200b\u200c\u200d\u2060\ufeff]")


def _normalize_unicode(text: str) -> str:
    """Normalize unicode (NFC), non-breaking spaces and invisible characters."""
    if not text:
        return ""
    t = unicodedata.normalize("NFC", text)
    t = t.replace("\u00a0", " ")
    return _INVISIBLE.sub("", t)


def clean_resume_text(text: str, max_chars: int = MAX_TEXT_CHARS) -> str:
    """
    Normalize converter output for the heuristic stages.
    Line structure is preserved (the segmenter works line by line); only runs of
    spaces/tabs and 3+ consecutive blank lines are collapsed.
    """
    if not text or not text.strip():
        return ""
    t = _normalize_unicode(text)
    t = t.replace("\r\n", "\n").replace("\r", "\n")
    t = re.sub(r"[ \t]+", " ", t)
    t = re.sub(r" *\n *", "\n", t)
    t = re.sub(r"\n\s*\n\s*\n", "\n\n", t)
    t = t.strip()
    if len(t) > max_chars:
        t = t[:max_chars]
    return t
