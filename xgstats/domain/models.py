"""
Domain models for scraped xG shot maps using Pydantic.

Both models are frozen value objects. Their serialized field names are the
wire format of the API and must not change.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ShotType(str, Enum):
    OFF_TARGET = "off_target"
    BLOCKED = "blocked"
    ON_TARGET = "on_target"
    GOAL = "goal"


class Shot(BaseModel):
    """One shot marker from a team's shot map (coordinates in SVG space, not normalized)."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    xg: float = 0.0
    is_goal: bool = False
    shot_type: ShotType
    player_name: str = ""
    minute: int = 0


class Fixture(BaseModel):
    """One match's xG record. Zero-valued fields mean "not found on the page", not a confirmed zero."""

    model_config = ConfigDict(frozen=True)

    gameweek: int = 0
    id: int = 0
    # Best effort only: the page shows "25 Jan 16:30" without a year, so this stays None
    date: Optional[datetime] = None
    home_team: str = ""
    away_team: str = ""
    home_score: int = 0
    away_score: int = 0
    home_xg: float = 0.0
    away_xg: float = 0.0
    home_shots: tuple[Shot, ...] = ()
    away_shots: tuple[Shot, ...] = ()
    # raw date tokens as rendered; kept out of the serialized form
    date_label: str = Field(default="", exclude=True)

    @property
    def total_shots(self) -> int:
        return len(self.home_shots) + len(self.away_shots)
