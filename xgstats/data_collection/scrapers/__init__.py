"""
Data Collection Scrapers Package

Note: avoid importing scraper modules at package import time to keep imports
lightweight (the extraction tests never need Playwright). Import concrete
scrapers from their modules directly, e.g.:

    from xgstats.data_collection.scrapers.xgstat.scraper import XGStatScraper
"""

__all__ = []
