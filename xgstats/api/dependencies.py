"""
API Dependencies
Dependency Injection für FastAPI
"""

from typing import Optional

from fastapi import Request

from xgstats.data_collection.scrapers.xgstat.scraper import XGStatScraper
from xgstats.database.manager import DatabaseManager


async def get_scraper(request: Request) -> XGStatScraper:
    """Dependency für den Scraper (geteilt über App-Lebenszyklus)"""
    return request.app.state.scraper


async def get_db_manager(request: Request) -> Optional[DatabaseManager]:
    """Dependency für Database Manager; None wenn Persistenz deaktiviert ist"""
    return request.app.state.db
