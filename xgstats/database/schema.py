"""
Database Schema
SQLAlchemy Models für gescrapte xG-Fixtures und Schüsse
"""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import declarative_base, relationship
from sqlalchemy.sql import func

Base = declarative_base()


class XGStatFixture(Base):
    __tablename__ = "xgstat_fixtures"
    __table_args__ = (UniqueConstraint("fixture_id", "gameweek", name="uq_xgstat_fixture_gameweek"),)

    id = Column(Integer, primary_key=True)
    fixture_id = Column(Integer, nullable=False, index=True)
    gameweek = Column(Integer, nullable=False, default=0)
    fixture_date = Column(DateTime, nullable=True)
    home_team = Column(String(200), nullable=False, default="")
    away_team = Column(String(200), nullable=False, default="")
    home_score = Column(Integer, nullable=False, default=0)
    away_score = Column(Integer, nullable=False, default=0)
    home_xg = Column(Float, nullable=False, default=0.0)
    away_xg = Column(Float, nullable=False, default=0.0)
    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())

    # Relationships
    shots = relationship(
        "XGStatShot",
        back_populates="fixture",
        cascade="all, delete-orphan",
        order_by="XGStatShot.position",
    )


class XGStatShot(Base):
    __tablename__ = "xgstat_shots"

    id = Column(Integer, primary_key=True)
    fixture_id = Column(Integer, ForeignKey("xgstat_fixtures.id", ondelete="CASCADE"), nullable=False)
    # document order within the fixture
    position = Column(Integer, nullable=False, default=0)
    team_type = Column(String(4), nullable=False)  # home | away
    x = Column(Float, nullable=False)
    y = Column(Float, nullable=False)
    xg = Column(Float, nullable=False, default=0.0)
    is_goal = Column(Boolean, nullable=False, default=False)
    shot_type = Column(String(20), nullable=False)
    player_name = Column(String(200), nullable=False, default="")
    minute = Column(Integer, nullable=False, default=0)

    # Relationships
    fixture = relationship("XGStatFixture", back_populates="shots")
