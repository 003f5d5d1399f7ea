"""Parse year ranges and standalone years from resume text."""

import re
from datetime import datetime, timezone
from typing import List, NamedTuple, Optional

# 2019-2022, 2019 – present, 2018-current
YEAR_RANGE_PATTERN = re.compile(
    r"\b((?:19|20)\d{2})\s*[-–]\s*((?:19|20)\d{2}|present|current)\b",
    re.IGNORECASE,
)
YEAR_PATTERN = re.compile(r"\b(?:19|20)\d{2}\b")


class YearRange(NamedTuple):
    """One matched range. `end` is already resolved for present/current."""

    start: int
    end: int
    raw: str

    @property
    def years(self) -> int:
        return max(0, self.end - self.start)


def current_year() -> int:
    return datetime.now(timezone.utc).year


def find_year_ranges(text: str, today_year: Optional[int] = None) -> List[YearRange]:
    """
    Find every YYYY-YYYY / YYYY-present range in text, in order.
    'present' and 'current' resolve to `today_year` (defaults to the current year).
    """
    if not text:
        return []
    resolved_now = today_year if today_year is not None else current_year()
    ranges: List[YearRange] = []
    for m in YEAR_RANGE_PATTERN.finditer(text):
        start = int(m.group(1))
        end_raw = m.group(2).lower()
        end = resolved_now if end_raw in ("present", "current") else int(end_raw)
        ranges.append(YearRange(start=start, end=end, raw=m.group(0)))
    return ranges


def sum_range_years(ranges: List[YearRange]) -> int:
    """Sum of per-range durations. Overlapping ranges are counted twice."""
    return sum(r.years for r in ranges)


def find_years(text: str) -> List[str]:
    """All standalone 4-digit years (1900-2099) in order of appearance."""
    if not text:
        return []
    return YEAR_PATTERN.findall(text)


def has_year(text: str) -> bool:
    return bool(text) and YEAR_PATTERN.search(text) is not None
