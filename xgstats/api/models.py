"""
API Models
Pydantic Models für API Requests und Responses
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field


class APIResponse(BaseModel):
    """Standard API Response Model"""

    success: bool
    data: Optional[Any] = None
    error: Optional[str] = None
    execution_time_ms: Optional[float] = None
    timestamp: datetime = Field(default_factory=datetime.now)


class ScrapeRequest(BaseModel):
    """Request model for scraping one xgstat.com match page"""

    url: str = ""


class HealthResponse(BaseModel):
    """Health check response model"""

    status: str
    service: str
    database: Optional[str] = None
