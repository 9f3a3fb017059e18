"""
Database Manager
Datenbankzugriff mit SQLAlchemy (Engine, Sessions, Tabellen)
"""

import logging
from contextlib import contextmanager
from typing import Any, Iterator, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from xgstats.database.schema import Base


class DatabaseManager:
    """Datenbankverwaltung mit SQLAlchemy"""

    def __init__(self, database_url: str, *, echo: bool = False):
        self.database_url = database_url
        self.echo = echo
        self.engine: Optional[Engine] = None
        self.SessionLocal: Optional[sessionmaker] = None
        self.logger = logging.getLogger(__name__)

    def _engine_args(self) -> dict[str, Any]:
        args: dict[str, Any] = {"echo": self.echo, "future": True}
        if self.database_url.startswith("sqlite"):
            args["connect_args"] = {"check_same_thread": False}
            # in-memory SQLite lives only as long as its single connection
            if ":memory:" in self.database_url or self.database_url.rstrip("/") == "sqlite:":
                args["poolclass"] = StaticPool
        else:
            args["pool_pre_ping"] = True
        return args

    def initialize(self, *, create_tables: bool = True) -> None:
        """Initialisiert Engine und SessionFactory"""
        try:
            self.engine = create_engine(self.database_url, **self._engine_args())
            self.SessionLocal = sessionmaker(bind=self.engine, autocommit=False, autoflush=False)
            # Leichter Verbindungscheck
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except Exception as e:
            self.logger.error(f"Failed to initialize database: {e}")
            self.engine = None
            self.SessionLocal = None
            raise
        if create_tables:
            self.create_tables()
        self.logger.info("Database engine initialized (SQLAlchemy)")

    def get_session(self) -> Session:
        """Gibt eine neue SQLAlchemy Session zurück"""
        if not self.SessionLocal:
            raise RuntimeError("Database not initialized. Call initialize() first.")
        return self.SessionLocal()

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        """Session im Transaktionskontext: Commit bei Erfolg, Rollback bei Fehler"""
        session = self.get_session()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def create_tables(self) -> None:
        """Erstellt alle Tabellen"""
        if not self.engine:
            raise RuntimeError("Database not initialized")

        Base.metadata.create_all(bind=self.engine)
        self.logger.info("Database tables created")

    def health_check(self) -> dict[str, Any]:
        """Führt einen Gesundheitscheck der Datenbank durch"""
        try:
            with self.get_session() as session:
                session.execute(text("SELECT 1"))
            return {"database": "healthy"}
        except Exception as e:
            self.logger.error(f"Database health check failed: {e}")
            return {"database": "unhealthy", "error": str(e)}

    def close(self) -> None:
        """Schließt alle Datenbankverbindungen"""
        if self.engine:
            self.engine.dispose()
            self.logger.info("Database engine disposed")
        self.engine = None
        self.SessionLocal = None
