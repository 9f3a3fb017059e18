"""
xgstat.com Shot-Map Scraper

Rendert eine Match-Seite mit Playwright und extrahiert Fixture + Schüsse.
"""
from __future__ import annotations

import logging
from typing import Optional

from xgstats.common.playwright_utils import PageRenderer, RenderError, RenderOptions
from xgstats.domain.models import Fixture

from .assembler import parse_xgstat_page


class InvalidRequestError(ValueError):
    """The scrape request itself is unusable (e.g. empty URL)."""


class XGStatScraper:
    """Scraper für xG-Shotmaps von xgstat.com"""

    DESCRIPTION = "Rendered xG shot maps (teams, score, xG, per-shot markers) from xgstat.com"

    def __init__(self, renderer: Optional[PageRenderer] = None, options: Optional[RenderOptions] = None):
        self.renderer = renderer or PageRenderer(options)
        self.logger = logging.getLogger("scraper.xgstat")

    async def scrape(self, url: str) -> Fixture:
        """Render ``url`` and parse it into a Fixture.

        Raises InvalidRequestError for an empty URL and RenderError subclasses
        when the page cannot be rendered. Nothing is retried here.
        """
        url = (url or "").strip()
        if not url:
            raise InvalidRequestError("URL is required")

        self.logger.info(f"Scraping xG stats from {url}")
        try:
            markup = await self.renderer.render(url)
        except RenderError as e:
            self.logger.error(f"Failed to scrape {url}: {e}")
            raise

        fixture = parse_xgstat_page(markup, url)
        self.logger.info(
            f"Successfully scraped xG stats: {fixture.home_team or '?'} vs {fixture.away_team or '?'} "
            f"({fixture.total_shots} shots)"
        )
        return fixture
