"""Deterministic contact field extraction (name, email, phone, profile links)."""

import re
from typing import Dict, List, Optional, Tuple

from pydantic import ValidationError

from resume_signal_ai.config import CONTACT_WINDOW_CHARS
from resume_signal_ai.cv_pipeline.section_segmenter import detect_header
from resume_signal_ai.dictionaries import ROLE_KEYWORDS
from resume_signal_ai.schemas.ai_responses import AIPersonalInfo
from resume_signal_ai.schemas.contact import ContactFields
from resume_signal_ai.services.classifier import Classifier, classify_with_timeout
from resume_signal_ai.utils.helpers import extract_emails
from resume_signal_ai.utils.json_extract import parse_json_object
from resume_signal_ai.utils.logger import get_logger

logger = get_logger(__name__)

PHONE_PATTERN = re.compile(r"(?:\+\d{1,3}[\s.-]?)?(?:\(?\d{3}\)?[\s.-]?){2,4}\d{3,4}")
E164_PATTERN = re.compile(r"^\+\d{7,15}$")
LINKEDIN_PATTERN = re.compile(r"(?:https?://)?(?:[a-z]{2,3}\.)?linkedin\.com/(?:in|pub)/[A-Za-z0-9_\-%]+/?", re.IGNORECASE)
GITHUB_PATTERN = re.compile(r"(?:https?://)?(?:www\.)?github\.com/[A-Za-z0-9_\-]+/?", re.IGNORECASE)
WEBSITE_PATTERN = re.compile(r"(?:https?://|www\.)[^\s,;|()<>]+", re.IGNORECASE)

_NAME_DISQUALIFIERS = (
    re.compile(r"https?://", re.IGNORECASE),
    re.compile(r"www\.", re.IGNORECASE),
    re.compile(r"@"),
    re.compile(r"linkedin\.com|github\.com", re.IGNORECASE),
    re.compile(r"\d"),
    re.compile(r"[,|:]"),
    re.compile(rf"\b(?:{'|'.join(ROLE_KEYWORDS)})s?\b", re.IGNORECASE),
)
_TITLE_CASE_WORD = re.compile(r"^[A-Z][a-z'\-]{1,}$")
_ALL_CAPS_WORD = re.compile(r"^[A-Z]{2,}$")
NAME_SCAN_LINES = 12

# Confidence by extraction method
TOP_MATCH_CONFIDENCE = 0.95
PATTERN_MATCH_CONFIDENCE = 0.9
STRONG_NAME_CONFIDENCE = 0.9
WEAK_NAME_CONFIDENCE = 0.7
AI_DEFAULT_CONFIDENCE = 0.7
AI_FILLABLE_FIELDS = ("name", "location", "linkedin", "github", "website", "summary")


def _find_phone(text: str) -> Optional[Tuple[str, str]]:
    """Return (normalized, raw) for the best phone candidate; E.164-like numbers win."""
    candidates: List[Tuple[str, str]] = []
    for m in PHONE_PATTERN.finditer(text):
        raw = m.group(0)
        normalized = re.sub(r"[^\d+]", "", raw)
        digits = re.sub(r"\D", "", normalized)
        if 7 <= len(digits) <= 15:
            candidates.append((normalized, raw))
    if not candidates:
        return None
    for normalized, raw in candidates:
        if E164_PATTERN.match(normalized):
            return normalized, raw
    return candidates[0]


def _find_name(window: str, skip: List[str]) -> Optional[Tuple[str, int]]:
    """Score the first non-empty lines and return (best line, score)."""
    lines = [line.strip() for line in window.split("\n") if line.strip()][:NAME_SCAN_LINES]
    best: Optional[str] = None
    best_score = 0
    for line in lines:
        if any(s and s in line for s in skip):
            continue
        if any(rx.search(line) for rx in _NAME_DISQUALIFIERS):
            continue
        if detect_header(line) is not None:
            continue
        if len(line) < 2 or len(line) > 60:
            continue
        words = line.split()
        title_case = sum(1 for w in words if _TITLE_CASE_WORD.match(w))
        all_caps = sum(1 for w in words if _ALL_CAPS_WORD.match(w))
        score = 0
        if 2 <= len(words) <= 6:
            score += 2
        score += min(3, title_case)
        if all_caps:
            score -= 1
        if len(words) > 1:
            score += 1
        if score > best_score:
            best, best_score = line, score
    return (best, best_score) if best else None


def _first_match(pattern: re.Pattern, window: str, text: str) -> Optional[Tuple[str, float]]:
    m = pattern.search(window)
    if m:
        return m.group(0).rstrip("/.,"), TOP_MATCH_CONFIDENCE
    m = pattern.search(text)
    if m:
        return m.group(0).rstrip("/.,"), PATTERN_MATCH_CONFIDENCE
    return None


def extract_contact_fields(text: str, window_chars: int = CONTACT_WINDOW_CHARS) -> ContactFields:
    """
    Regex-only contact extraction. The leading `window_chars` characters are searched
    first (higher confidence), then the whole text. Absent fields are omitted.
    """
    text = (text or "").replace("\r\n", "\n")
    window = text[:window_chars]
    fields: Dict[str, str] = {}
    confidence: Dict[str, float] = {}

    top_emails = extract_emails(window)
    emails = top_emails or extract_emails(text)
    if emails:
        fields["email"] = emails[0]
        confidence["email"] = TOP_MATCH_CONFIDENCE if top_emails and len(top_emails) == 1 else PATTERN_MATCH_CONFIDENCE

    phone = _find_phone(window)
    phone_at_top = phone is not None
    if phone is None:
        phone = _find_phone(text)
    phone_raw = ""
    if phone:
        fields["phone"], phone_raw = phone
        strong = phone_at_top and E164_PATTERN.match(fields["phone"]) is not None
        confidence["phone"] = TOP_MATCH_CONFIDENCE if strong else PATTERN_MATCH_CONFIDENCE

    for key, pattern in (("linkedin", LINKEDIN_PATTERN), ("github", GITHUB_PATTERN)):
        found = _first_match(pattern, window, text)
        if found:
            fields[key], confidence[key] = found

    for m in WEBSITE_PATTERN.finditer(window):
        url = m.group(0).rstrip("/.,")
        if "linkedin.com" not in url.lower() and "github.com" not in url.lower():
            fields["website"], confidence["website"] = url, PATTERN_MATCH_CONFIDENCE
            break

    name = _find_name(window, [fields.get("email", ""), fields.get("phone", ""), phone_raw])
    if name:
        fields["name"] = name[0]
        confidence["name"] = STRONG_NAME_CONFIDENCE if name[1] >= 4 else WEAK_NAME_CONFIDENCE

    return ContactFields(confidence=confidence, **fields)


async def enhance_contact_fields(
    contact: ContactFields,
    text: str,
    classifier: Classifier,
    timeout_seconds: float,
    window_chars: int = CONTACT_WINDOW_CHARS,
) -> Tuple[ContactFields, bool]:
    """
    Ask the classifier for personal info and fill only fields the regex pass left empty.
    Email and phone are never taken from the model. Returns (fields, used_ai).
    """
    response = await classify_with_timeout(
        classifier, "extract_personal_info", {"text": text[:window_chars]}, timeout_seconds
    )
    if response is None:
        return contact, False
    try:
        data = parse_json_object(response)
        if data is None:
            logger.warning("Personal info response had no JSON object; keeping regex fields")
            return contact, False
        info = AIPersonalInfo.model_validate(data)
    except ValidationError as e:
        logger.warning("Personal info response rejected: %s", e)
        return contact, False

    reported = info.confidence if info.confidence is not None else AI_DEFAULT_CONFIDENCE
    updates: Dict[str, object] = {}
    confidence = dict(contact.confidence)
    for key in AI_FILLABLE_FIELDS:
        value = getattr(info, key)
        if value and getattr(contact, key) is None:
            updates[key] = value
            confidence[key] = reported
    if not updates:
        return contact, False
    return ContactFields(**{**contact.model_dump(exclude={"confidence"}), **updates}, confidence=confidence), True
