"""
xG Stats Pipeline
Scraping und Extraktion von xG-Shotmaps gerenderter Match-Seiten
"""

__version__ = "0.1.0"
__author__ = "Sports Data Team"

# NOTE:
# Keep "import xgstats" free of side effects (no settings, no Playwright) so
# unit tests can import the pure extraction modules without a browser stack.

__all__ = []
