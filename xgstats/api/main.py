"""
FastAPI Application Main
Hauptanwendung für die xG Stats API
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from xgstats.api.endpoints import fixtures
from xgstats.api.models import APIResponse, HealthResponse
from xgstats.core.config import Settings
from xgstats.data_collection.scrapers.xgstat.scraper import XGStatScraper
from xgstats.database.manager import DatabaseManager

SERVICE_NAME = "xgstats-api"


def create_fastapi_app(
    settings: Settings,
    *,
    scraper: Optional[XGStatScraper] = None,
    db_manager: Optional[DatabaseManager] = None,
    persist: bool = True,
) -> FastAPI:
    """Factory function to create the FastAPI app.

    ``scraper`` and ``db_manager`` may be injected (tests); otherwise they are
    built from ``settings``. With ``persist=False`` scraped fixtures are not saved.
    """
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application Lifespan Management"""
        logger.info(f"Starting {settings.app_name} v{settings.app_version} in {settings.environment} environment")

        app.state.scraper = scraper or XGStatScraper(options=settings.render_options())

        owns_db = db_manager is None
        app.state.db = None
        if persist:
            app.state.db = db_manager or DatabaseManager(settings.database_url, echo=settings.database_echo)
            if owns_db:
                app.state.db.initialize()
                logger.info("Database connection established")

        try:
            yield
        finally:
            if owns_db and app.state.db is not None:
                app.state.db.close()
            logger.info("API shutdown complete")

    app = FastAPI(
        title="xG Stats Scraper API",
        description="Scrape xG statistics and shot map data from xgstat.com",
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        body = APIResponse(success=False, error="Invalid request body")
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump(mode="json"))

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health(request: Request):
        db = getattr(request.app.state, "db", None)
        return HealthResponse(
            status="healthy",
            service=SERVICE_NAME,
            database=db.health_check()["database"] if db is not None else None,
        )

    app.include_router(fixtures.router, prefix="/api", tags=["scraper"])

    return app
