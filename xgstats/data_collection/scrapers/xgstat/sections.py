"""Carve one team's shot-map block out of the rendered page."""
import html
import re

SECTION_TAIL = r"</h3>.*?</div>\s*</div>\s*</div>"


def shot_section_pattern(team: str) -> re.Pattern[str]:
    # the heading may carry the name as rendered ("Man&nbsp;Utd") or as plain
    # text that the page HTML-escapes ("Brighton & Hove Albion" -> "&amp;")
    spellings = dict.fromkeys([team, html.escape(team, quote=False)])
    names = "|".join(re.escape(name) for name in spellings)
    return re.compile(r"<h3[^>]*>(?:" + names + r") xG Shot Map" + SECTION_TAIL, re.DOTALL)


def locate_shot_section(markup: str, team: str) -> str:
    """Substring from the team's "<team> xG Shot Map" heading to the end of its block.

    ``team`` is either the name as it appears in the markup or its unescaped
    text. Returns "" when the team name is empty or the heading is absent.
    """
    if not team or not markup:
        return ""
    m = shot_section_pattern(team).search(markup)
    return m.group(0) if m else ""
