"""Lenient JSON extraction from model output that may wrap JSON in prose or code fences."""

import json
from typing import Any, Iterator, List, Optional

_CLOSERS = {"{": "}", "[": "]"}


def _balanced_spans(text: str, opener: str) -> Iterator[str]:
    """
    Yield every balanced span that starts with `opener`, left to right.
    Brackets inside JSON string literals (and escaped quotes) are ignored.
    An unterminated span ends the scan for that start position only.
    """
    closer = _CLOSERS[opener]
    start = text.find(opener)
    while start != -1:
        depth = 0
        in_string = False
        escaped = False
        end = -1
        for i in range(start, len(text)):
            ch = text[i]
            if in_string:
                if escaped:
                    escaped = False
                elif ch == "\\":
                    escaped = True
                elif ch == '"':
                    in_string = False
                continue
            if ch == '"':
                in_string = True
            elif ch == opener:
                depth += 1
            elif ch == closer:
                depth -= 1
                if depth == 0:
                    end = i
                    break
        if end != -1:
            yield text[start : end + 1]
        start = text.find(opener, start + 1)


def extract_json_span(text: str, opener: str = "{") -> Optional[str]:
    """Return the first balanced span starting with `opener` that decodes as JSON."""
    if not text or opener not in _CLOSERS:
        return None
    for span in _balanced_spans(text, opener):
        try:
            json.loads(span)
        except json.JSONDecodeError:
            continue
        return span
    return None


def parse_json_object(response: Any) -> Optional[dict]:
    """
    Parse a JSON object out of a classifier response.
    Dicts pass through; strings are scanned for the first decodable {...} block.
    """
    if isinstance(response, dict):
        return response
    if not isinstance(response, str):
        return None
    span = extract_json_span(response, "{")
    if span is None:
        return None
    value = json.loads(span)
    return value if isinstance(value, dict) else None


def parse_json_array(response: Any) -> Optional[List[Any]]:
    """
    Parse a JSON array out of a classifier response.
    Lists pass through; a dict wrapping a single list value (e.g. {"items": [...]})
    is unwrapped; strings are scanned for the first decodable [...] block.
    """
    if isinstance(response, list):
        return response
    if isinstance(response, dict):
        lists = [v for v in response.values() if isinstance(v, list)]
        return lists[0] if len(lists) == 1 else None
    if not isinstance(response, str):
        return None
    span = extract_json_span(response, "[")
    if span is None:
        obj = parse_json_object(response)
        return parse_json_array(obj) if obj is not None else None
    value = json.loads(span)
    return value if isinstance(value, list) else None
