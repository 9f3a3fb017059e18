"""
xG Stats API Endpoints
Scrapen und Abrufen von xG-Shotmaps
"""

import logging
import time
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from xgstats.api.dependencies import get_db_manager, get_scraper
from xgstats.api.models import APIResponse, ScrapeRequest
from xgstats.common.playwright_utils import RenderError
from xgstats.data_collection.scrapers.xgstat.scraper import InvalidRequestError, XGStatScraper
from xgstats.database.manager import DatabaseManager
from xgstats.database.services.xgstat_fixtures import (
    FixtureNotFoundError,
    RepositoryError,
    get_fixture_by_id,
    save_fixture,
)

router = APIRouter()
logger = logging.getLogger(__name__)


def envelope(status_code: int, start_time: float, *, data=None, error: Optional[str] = None) -> JSONResponse:
    body = APIResponse(
        success=error is None,
        data=data,
        error=error,
        execution_time_ms=(time.time() - start_time) * 1000,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


@router.post("/scrape/xgstats", response_model=APIResponse)
async def scrape_xgstats(
    request: ScrapeRequest,
    scraper: XGStatScraper = Depends(get_scraper),
    db: Optional[DatabaseManager] = Depends(get_db_manager),
):
    """Scrape xG statistics and shot map data from an xgstat.com match URL"""
    start_time = time.time()

    if not request.url.strip():
        return envelope(status.HTTP_400_BAD_REQUEST, start_time, error="URL is required")

    try:
        fixture = await scraper.scrape(request.url)
    except InvalidRequestError as e:
        return envelope(status.HTTP_400_BAD_REQUEST, start_time, error=str(e))
    except RenderError as e:
        return envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, start_time, error=str(e))

    if db is not None:
        try:
            await run_in_threadpool(save_fixture, db, fixture)
        except RepositoryError as e:
            logger.error(f"Failed to save fixture {fixture.id}: {e}")
            return envelope(
                status.HTTP_500_INTERNAL_SERVER_ERROR, start_time, error=f"Failed to save data: {e}"
            )

    return envelope(status.HTTP_200_OK, start_time, data=fixture.model_dump(mode="json"))


@router.get("/xgstats", response_model=APIResponse)
async def get_xgstats(
    fixture_id: Optional[str] = Query(None, alias="id"),
    db: Optional[DatabaseManager] = Depends(get_db_manager),
):
    """Retrieve saved xG statistics and shot map data by fixture ID"""
    start_time = time.time()

    if not fixture_id:
        return envelope(status.HTTP_400_BAD_REQUEST, start_time, error="Fixture ID is required")
    try:
        fid = int(fixture_id)
    except ValueError:
        return envelope(status.HTTP_400_BAD_REQUEST, start_time, error="Invalid fixture ID")

    if db is None:
        return envelope(status.HTTP_503_SERVICE_UNAVAILABLE, start_time, error="Database not configured")

    try:
        fixture = await run_in_threadpool(get_fixture_by_id, db, fid)
    except FixtureNotFoundError:
        return envelope(status.HTTP_404_NOT_FOUND, start_time, error="Fixture not found")
    except RepositoryError as e:
        return envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, start_time, error=str(e))

    return envelope(status.HTTP_200_OK, start_time, data=fixture.model_dump(mode="json"))
