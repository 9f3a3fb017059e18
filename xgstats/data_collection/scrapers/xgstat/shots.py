"""
Shot extraction from one team's shot-map section.

Two passes over the section text:

1. Player table: rows with shown number, player name, xG and goals are
   collected into a name-keyed mapping. A name seen twice keeps the last row.
2. Markers: one pattern per marker kind. The SVG signatures are disjoint
   (fill colour / opacity), so a marker matches exactly one kind.

Markers carry no player reference, so shots are not joined to table rows and
keep empty player name and zero xG. The table is returned next to the shots.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from xgstats.common.parsing import clean_text, to_float, to_int
from xgstats.domain.models import Shot, ShotType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlayerShotData:
    name: str
    number: int = 0
    xg: float = 0.0
    goals: int = 0

    @property
    def is_goal(self) -> bool:
        return self.goals > 0


@dataclass(frozen=True)
class MarkerRule:
    shot_type: ShotType
    pattern: re.Pattern[str]


@dataclass
class ShotMapExtraction:
    shots: list[Shot] = field(default_factory=list)
    players: dict[str, PlayerShotData] = field(default_factory=dict)


PLAYER_ROW = re.compile(
    r'<span class="flex size-4[^>]*>(\d+)</span><span[^>]*>([^<]+)</span>'
    r'.*?<div class="rounded[^>]*>(\d+\.?\d*)</div>'
    r'.*?<div class="rounded[^>]*>(\d+)</div>',
    re.DOTALL,
)

_CIRCLE = r'<circle r="[\d.]+" cx="([\d.]+)" cy="([\d.]+)"[^>]*'

MARKER_RULES: tuple[MarkerRule, ...] = (
    MarkerRule(ShotType.OFF_TARGET, re.compile(_CIRCLE + r'fill="var\(--foreground\)" fill-opacity="0\.3"')),
    MarkerRule(ShotType.BLOCKED, re.compile(_CIRCLE + r'fill="var\(--chart-red\)"')),
    MarkerRule(ShotType.ON_TARGET, re.compile(_CIRCLE + r'fill="var\(--foreground\)" fill-opacity="0\.9"')),
    # goals are star-shaped <svg> elements positioned by x/y
    MarkerRule(ShotType.GOAL, re.compile(r'<svg[^>]*x="([\d.]+)" y="([\d.]+)"[^>]*fill="var\(--brand-yellow\)"')),
)


def extract_player_rows(section: str) -> dict[str, PlayerShotData]:
    players: dict[str, PlayerShotData] = {}
    for m in PLAYER_ROW.finditer(section or ""):
        name = clean_text(m.group(2))
        if not name:
            continue
        # last seen wins
        players[name] = PlayerShotData(
            name=name,
            number=to_int(m.group(1)),
            xg=to_float(m.group(3)),
            goals=to_int(m.group(4)),
        )
    return players


def match_markers(section: str, rule: MarkerRule) -> list[Shot]:
    """One Shot per occurrence of ``rule`` in document order."""
    return [
        Shot(
            x=to_float(m.group(1)),
            y=to_float(m.group(2)),
            shot_type=rule.shot_type,
            is_goal=rule.shot_type is ShotType.GOAL,
        )
        for m in rule.pattern.finditer(section or "")
    ]


def extract_shots(section: str, rules: tuple[MarkerRule, ...] = MARKER_RULES) -> list[Shot]:
    shots: list[Shot] = []
    for rule in rules:
        shots.extend(match_markers(section, rule))
    return shots


def extract_shot_map(section: str) -> ShotMapExtraction:
    result = ShotMapExtraction(
        shots=extract_shots(section),
        players=extract_player_rows(section),
    )
    logger.debug(
        "Extracted %d shots and %d player rows from section",
        len(result.shots),
        len(result.players),
    )
    return result
