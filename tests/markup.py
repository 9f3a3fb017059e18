"""Builders for rendered xgstat.com markup, shaped like the live page."""

MATCH_URL = "https://xgstat.com/competitions/premier-league/2024-2025/matches/arsenal-chelsea-4821"


def header_html(home="Arsenal", away="Chelsea", home_short="ARS", away_short="CHE", score="2 - 1"):
    return (
        '<div class="flex items-center justify-center gap-2">'
        f'<a href="/teams/{home_short.lower()}"><span class="hidden lg:inline">{home}</span>'
        f'<span class="lg:hidden">{home_short}</span></a>'
        f'<span class="font-bold"> {score} </span>'
        f'<a href="/teams/{away_short.lower()}"><span class="hidden lg:inline">{away}</span>'
        f'<span class="lg:hidden">{away_short}</span></a>'
        "</div>"
    )


def xg_html(home_xg="1.25", away_xg="0.87"):
    return (
        '<div class="flex justify-between"><span class="text-muted-foreground">Expected Goals</span>'
        f'<span class="tabular-nums">{home_xg}</span><span class="mx-1">-</span>'
        f'<span class="tabular-nums">{away_xg}</span></div>'
    )


def meta_html(gameweek="GW23", date="25 Jan 16:30"):
    return (
        '<div class="flex gap-2 text-sm">'
        f'<span class="rounded bg-muted px-1">{gameweek}</span>'
        f'<span class="text-foreground text-nowrap">{date}</span>'
        "</div>"
    )


def section_html(team, markers="", players=""):
    return (
        '<div class="grid"><div class="card">'
        f'<h3 class="text-card-title font-semibold">{team} xG Shot Map</h3>'
        '<div class="pitch"><svg viewBox="0 0 100 68" class="w-full">'
        f"{markers}"
        "</svg>"
        f'<div class="players">{players}</div>'
        "</div></div></div>"
    )


def off_target(cx, cy, r="2.4"):
    return f'<circle r="{r}" cx="{cx}" cy="{cy}" stroke="var(--background)" fill="var(--foreground)" fill-opacity="0.3"></circle>'


def on_target(cx, cy, r="3.1"):
    return f'<circle r="{r}" cx="{cx}" cy="{cy}" stroke="var(--background)" fill="var(--foreground)" fill-opacity="0.9"></circle>'


def blocked(cx, cy, r="1.8"):
    return f'<circle r="{r}" cx="{cx}" cy="{cy}" fill="var(--chart-red)"></circle>'


def goal(x, y):
    return (
        f'<svg width="8" height="8" x="{x}" y="{y}" viewBox="0 0 24 24" fill="var(--brand-yellow)">'
        '<path d="M12 2l3 7h7l-5.5 4 2 7-6.5-4.5L5.5 20l2-7L2 9h7z"></path></svg>'
    )


def player_row(number, name, xg, goals):
    return (
        '<div class="flex items-center gap-2">'
        f'<span class="flex size-4 items-center justify-center rounded-full text-xs">{number}</span>'
        f'<span class="truncate">{name}</span>'
        f'<div class="rounded bg-muted px-1 tabular-nums">{xg}</div>'
        f'<div class="rounded bg-muted px-1 tabular-nums">{goals}</div>'
        "</div>"
    )


def page(*parts, title="Arsenal vs Chelsea | xGStat"):
    return f"<html><head><title>{title}</title></head><body><main>{''.join(parts)}</main></body></html>"


