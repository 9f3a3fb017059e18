"""
xgstat.com Scraper Package

Pure text extraction (fields, sections, shots, assembler) plus the
Playwright-backed scraper. Extraction modules do not import Playwright.
"""

from .assembler import assemble_fixture, parse_xgstat_page
from .fields import MatchFields, extract_fields, extract_id_from_url
from .sections import locate_shot_section
from .shots import PlayerShotData, ShotMapExtraction, extract_player_rows, extract_shot_map, extract_shots

__all__ = [
    "MatchFields",
    "PlayerShotData",
    "ShotMapExtraction",
    "assemble_fixture",
    "extract_fields",
    "extract_id_from_url",
    "extract_player_rows",
    "extract_shot_map",
    "extract_shots",
    "locate_shot_section",
    "parse_xgstat_page",
]
