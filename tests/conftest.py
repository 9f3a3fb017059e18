"""Global pytest fixtures for the test suite.

Centralizes:
 - Project root path insertion (so tests run without an editable install)
 - Rendered xgstat.com pages built from tests.markup
"""

import sys
from pathlib import Path

import pytest

# Ensure project root (containing xgstats/) is on sys.path once
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from tests.markup import (  # noqa: E402
    MATCH_URL,
    blocked,
    goal,
    header_html,
    meta_html,
    off_target,
    on_target,
    page,
    player_row,
    section_html,
    xg_html,
)


@pytest.fixture
def match_url():
    return MATCH_URL


@pytest.fixture
def minimal_match_html():
    """One header, one xG block, one gameweek label, one off-target shot for the home side."""
    return page(
        header_html(),
        meta_html(),
        xg_html(),
        section_html("Arsenal", markers=off_target("50.2", "30.1")),
    )


@pytest.fixture
def full_match_html():
    home_markers = "".join(
        [
            off_target("12.5", "40.0"),
            blocked("20.1", "33.3"),
            off_target("14.0", "22.7"),
            on_target("9.8", "30.2"),
            goal("6.5", "31.0"),
            goal("8.1", "36.4"),
        ]
    )
    home_players = "".join(
        [
            player_row(7, "Bukayo Saka", "0.82", 1),
            player_row(29, "Kai Havertz", "0.31", 1),
            player_row(8, "Martin &Oslash;degaard", "0.12", 0),
        ]
    )
    away_markers = "".join([on_target("88.0", "31.5"), goal("91.2", "28.7"), blocked("80.5", "22.0")])
    away_players = player_row(20, "Cole Palmer", "0.87", 1)
    return page(
        header_html(),
        meta_html(),
        xg_html(),
        section_html("Arsenal", home_markers, home_players),
        section_html("Chelsea", away_markers, away_players),
    )
