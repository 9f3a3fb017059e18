"""Compose extracted parts into a Fixture and run the whole parsing stage."""
from __future__ import annotations

import logging
from typing import Sequence

from xgstats.domain.models import Fixture, Shot

from .fields import MatchFields, extract_fields, extract_id_from_url
from .sections import locate_shot_section
from .shots import extract_shot_map

logger = logging.getLogger(__name__)


def assemble_fixture(
    fixture_id: int,
    fields: MatchFields,
    home_shots: Sequence[Shot],
    away_shots: Sequence[Shot],
) -> Fixture:
    return Fixture(
        id=fixture_id,
        gameweek=fields.gameweek,
        date=None,
        date_label=fields.date_label,
        home_team=fields.home_team,
        away_team=fields.away_team,
        home_score=fields.home_score,
        away_score=fields.away_score,
        home_xg=fields.home_xg,
        away_xg=fields.away_xg,
        home_shots=tuple(home_shots),
        away_shots=tuple(away_shots),
    )


def parse_xgstat_page(markup: str, url: str) -> Fixture:
    """Parse rendered xgstat.com markup into a Fixture.

    Never raises for missing or malformed sections; unknown values stay zero.
    """
    fields = extract_fields(markup)
    fixture_id = extract_id_from_url(url)

    home = extract_shot_map(locate_shot_section(markup, fields.home_team_raw or fields.home_team))
    away = extract_shot_map(locate_shot_section(markup, fields.away_team_raw or fields.away_team))
    if fields.home_team and not home.shots:
        logger.debug("No home shots found for %s", fields.home_team)
    if fields.away_team and not away.shots:
        logger.debug("No away shots found for %s", fields.away_team)

    fixture = assemble_fixture(fixture_id, fields, home.shots, away.shots)
    logger.debug(
        "Extracted fixture %s: %s vs %s with %d total shots (%d/%d player rows)",
        fixture.id,
        fixture.home_team,
        fixture.away_team,
        fixture.total_shots,
        len(home.players),
        len(away.players),
    )
    return fixture
