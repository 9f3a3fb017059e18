"""
Database services for scraped xG fixtures and their shots.
"""

from __future__ import annotations

import logging

from sqlalchemy import delete, func, select
from sqlalchemy import insert as insert_rows
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from xgstats.database.manager import DatabaseManager
from xgstats.database.schema import XGStatFixture, XGStatShot
from xgstats.domain.models import Fixture, Shot

logger = logging.getLogger(__name__)


class RepositoryError(RuntimeError):
    pass


class FixtureNotFoundError(RepositoryError):
    def __init__(self, fixture_id: int):
        super().__init__("fixture not found")
        self.fixture_id = fixture_id


# dialects with INSERT ... ON CONFLICT DO UPDATE
_UPSERT_INSERTS = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}

_UPSERT_KEY = ("fixture_id", "gameweek")


def _fixture_values(fixture: Fixture) -> dict:
    return {
        "fixture_id": fixture.id,
        "gameweek": fixture.gameweek,
        "fixture_date": fixture.date,
        "home_team": fixture.home_team,
        "away_team": fixture.away_team,
        "home_score": fixture.home_score,
        "away_score": fixture.away_score,
        "home_xg": fixture.home_xg,
        "away_xg": fixture.away_xg,
    }


def _shot_values(fixture_pk: int, fixture: Fixture) -> list[dict]:
    sides = (("home", fixture.home_shots), ("away", fixture.away_shots))
    rows: list[dict] = []
    for team_type, shots in sides:
        for shot in shots:
            rows.append(
                {
                    "fixture_id": fixture_pk,
                    "position": len(rows),
                    "team_type": team_type,
                    "x": shot.x,
                    "y": shot.y,
                    "xg": shot.xg,
                    "is_goal": shot.is_goal,
                    "shot_type": shot.shot_type.value,
                    "player_name": shot.player_name,
                    "minute": shot.minute,
                }
            )
    return rows


def _upsert_fixture_row(session: Session, fixture: Fixture) -> int:
    """Single-statement upsert keyed by (fixture_id, gameweek); returns the row id."""
    dialect = session.get_bind().dialect.name
    insert = _UPSERT_INSERTS.get(dialect)
    if insert is None:
        raise RepositoryError(f"upsert is not supported for the {dialect} dialect")

    values = _fixture_values(fixture)
    stmt = insert(XGStatFixture).values(**values)
    changes = {name: stmt.excluded[name] for name in values if name not in _UPSERT_KEY}
    changes["updated_at"] = func.now()
    stmt = stmt.on_conflict_do_update(index_elements=list(_UPSERT_KEY), set_=changes)
    return session.execute(stmt.returning(XGStatFixture.id)).scalar_one()


def save_fixture(db: DatabaseManager, fixture: Fixture) -> int:
    """Upsert a fixture keyed by (fixture_id, gameweek) and replace its shots.

    Concurrent saves of the same fixture both succeed; the later one wins.
    Returns the database primary key of the fixture row.
    """
    try:
        with db.transaction() as session:
            pk = _upsert_fixture_row(session, fixture)
            # existing shots are dropped to avoid duplicates
            session.execute(delete(XGStatShot).where(XGStatShot.fixture_id == pk))
            shots = _shot_values(pk, fixture)
            if shots:
                session.execute(insert_rows(XGStatShot), shots)
    except SQLAlchemyError as e:
        raise RepositoryError(f"failed to save fixture {fixture.id}: {e}") from e

    logger.info(f"Saved fixture {fixture.id} (GW{fixture.gameweek}) with {fixture.total_shots} shots")
    return pk


def _to_fixture(row: XGStatFixture) -> Fixture:
    home: list[Shot] = []
    away: list[Shot] = []
    for s in row.shots:
        shot = Shot(
            x=s.x,
            y=s.y,
            xg=s.xg,
            is_goal=s.is_goal,
            shot_type=s.shot_type,
            player_name=s.player_name,
            minute=s.minute,
        )
        (home if s.team_type == "home" else away).append(shot)
    return Fixture(
        id=row.fixture_id,
        gameweek=row.gameweek,
        date=row.fixture_date,
        home_team=row.home_team,
        away_team=row.away_team,
        home_score=row.home_score,
        away_score=row.away_score,
        home_xg=row.home_xg,
        away_xg=row.away_xg,
        home_shots=home,
        away_shots=away,
    )


def get_fixture_by_id(db: DatabaseManager, fixture_id: int) -> Fixture:
    """Stored fixture for the external ID; the most recent gameweek wins if several exist."""
    try:
        with db.get_session() as session:
            row = session.execute(
                select(XGStatFixture)
                .where(XGStatFixture.fixture_id == fixture_id)
                .order_by(XGStatFixture.gameweek.desc())
                .limit(1)
            ).scalar_one_or_none()
            if row is None:
                raise FixtureNotFoundError(fixture_id)
            return _to_fixture(row)
    except SQLAlchemyError as e:
        raise RepositoryError(f"failed to query fixture {fixture_id}: {e}") from e
