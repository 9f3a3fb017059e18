"""Top-level match fields of an xgstat.com match page.

Every field group has its own rule: one compiled pattern anchored to the markup
that surrounds the field, and a function turning the match into field values.
Rules are independent; a rule that does not match leaves its fields at the
zero value and the remaining rules still run.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field, fields as dc_fields
from typing import Any, Callable

from xgstats.common.parsing import clean_text, last_int, to_float, to_int

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchFields:
    home_team: str = ""
    away_team: str = ""
    home_score: int = 0
    away_score: int = 0
    home_xg: float = 0.0
    away_xg: float = 0.0
    gameweek: int = 0
    date_label: str = ""
    # team names exactly as rendered, used to find the shot-map headings
    home_team_raw: str = field(default="", compare=False)
    away_team_raw: str = field(default="", compare=False)


@dataclass(frozen=True)
class FieldRule:
    name: str
    pattern: re.Pattern[str]
    apply: Callable[[re.Match[str]], dict[str, Any]]


# <span class="hidden lg:inline">Arsenal</span><span class="lg:hidden">ARS</span></a>
# <span class="font-bold"> 2 - 1 </span><a ...><span class="hidden lg:inline">Chelsea</span>
TEAMS_SCORE = re.compile(
    r'<span class="hidden lg:inline">([^<]+)</span>\s*<span class="lg:hidden">[^<]+</span>\s*</a>\s*'
    r'<span class="font-bold">\s*(\d+)\s*-\s*(\d+)\s*</span>\s*'
    r'<a[^>]*>\s*<span class="hidden lg:inline">([^<]+)</span>'
)

# Expected Goals block: 1.25 - 0.87
AGGREGATE_XG = re.compile(
    r'<span class="tabular-nums">(\d+\.\d+)</span>\s*<span[^>]*>-</span>\s*'
    r'<span class="tabular-nums">(\d+\.\d+)</span>'
)

GAMEWEEK = re.compile(r">GW(\d+)</span>")

# "25 Jan 16:30" - the page never shows a year
DATE_LABEL = re.compile(r'<span class="text-foreground text-nowrap">(\d+)\s+(\w+)\s+(\d+:\d+)</span>')


def _teams_score(m: re.Match[str]) -> dict[str, Any]:
    return {
        "home_team": clean_text(m.group(1)),
        "home_team_raw": m.group(1).strip(),
        "home_score": to_int(m.group(2)),
        "away_score": to_int(m.group(3)),
        "away_team": clean_text(m.group(4)),
        "away_team_raw": m.group(4).strip(),
    }


def _aggregate_xg(m: re.Match[str]) -> dict[str, Any]:
    return {"home_xg": to_float(m.group(1)), "away_xg": to_float(m.group(2))}


def _gameweek(m: re.Match[str]) -> dict[str, Any]:
    return {"gameweek": to_int(m.group(1))}


def _date_label(m: re.Match[str]) -> dict[str, Any]:
    return {"date_label": " ".join(m.groups())}


FIELD_RULES: tuple[FieldRule, ...] = (
    FieldRule("teams_score", TEAMS_SCORE, _teams_score),
    FieldRule("aggregate_xg", AGGREGATE_XG, _aggregate_xg),
    FieldRule("gameweek", GAMEWEEK, _gameweek),
    FieldRule("date_label", DATE_LABEL, _date_label),
)

_KNOWN_FIELDS = {f.name for f in dc_fields(MatchFields)}


def extract_fields(markup: str, rules: tuple[FieldRule, ...] = FIELD_RULES) -> MatchFields:
    """Run every rule over ``markup``; unmatched rules leave zero values."""
    values: dict[str, Any] = {}
    for rule in rules:
        m = rule.pattern.search(markup or "")
        if not m:
            logger.debug("field rule %s did not match", rule.name)
            continue
        found = rule.apply(m)
        unknown = set(found) - _KNOWN_FIELDS
        if unknown:
            raise ValueError(f"field rule {rule.name} produced unknown fields: {sorted(unknown)}")
        values.update(found)
        logger.debug("field rule %s matched: %s", rule.name, found)
    return MatchFields(**values)


def extract_id_from_url(url: str) -> int:
    """Use the last number found in the URL as the external ID (0 without digits)."""
    return last_int(url)
