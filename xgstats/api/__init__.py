"""
API Module
FastAPI Anwendung, Endpoints und Models
"""

from .dependencies import get_db_manager, get_scraper
from .main import create_fastapi_app
from .models import APIResponse, HealthResponse, ScrapeRequest

__all__ = [
    "create_fastapi_app",
    "APIResponse",
    "HealthResponse",
    "ScrapeRequest",
    "get_db_manager",
    "get_scraper",
]
