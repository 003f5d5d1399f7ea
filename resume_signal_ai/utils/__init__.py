"""Utility exports."""

from .date_parser import find_year_ranges, find_years, has_year, sum_range_years
from .helpers import dedupe_casefold, dedupe_exact, extract_emails
from .json_extract import extract_json_span, parse_json_array, parse_json_object
from .logger import get_logger

__all__ = [
    "get_logger",
    "extract_emails",
    "dedupe_casefold",
    "dedupe_exact",
    "find_year_ranges",
    "find_years",
    "has_year",
    "sum_range_years",
    "extract_json_span",
    "parse_json_object",
    "parse_json_array",
]
