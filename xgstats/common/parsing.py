"""Lenient text-to-value helpers shared by the extractors.

Matched fragments that fail to convert become zero, never an exception:
callers treat zero as "unknown".
"""
import html
import re

_WS = re.compile(r"\s+")
_DIGIT_RUN = re.compile(r"\d+")


def clean_text(s: str | None) -> str:
    """Unescape HTML entities and collapse whitespace; empty string for None."""
    if not s:
        return ""
    return _WS.sub(" ", html.unescape(s)).strip()


def to_int(s: str | None) -> int:
    if not s:
        return 0
    try:
        return int(s.strip())
    except ValueError:
        return 0


def to_float(s: str | None) -> float:
    if not s:
        return 0.0
    try:
        return float(s.strip().replace(",", "."))
    except ValueError:
        return 0.0


def last_int(s: str | None) -> int:
    """Last run of digits in ``s`` as an int, 0 when there is none."""
    runs = _DIGIT_RUN.findall(s or "")
    if not runs:
        return 0
    try:
        return int(runs[-1])
    except ValueError:
        # longer than the interpreter's int conversion limit
        return 0
