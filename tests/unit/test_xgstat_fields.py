from tests.markup import header_html, meta_html, page, xg_html
from xgstats.data_collection.scrapers.xgstat.fields import (
    FIELD_RULES,
    FieldRule,
    MatchFields,
    extract_fields,
    extract_id_from_url,
)


def test_extracts_all_field_groups(minimal_match_html):
    fields = extract_fields(minimal_match_html)
    assert fields == MatchFields(
        home_team="Arsenal",
        away_team="Chelsea",
        home_score=2,
        away_score=1,
        home_xg=1.25,
        away_xg=0.87,
        gameweek=23,
        date_label="25 Jan 16:30",
    )


def test_missing_team_block_keeps_xg():
    fields = extract_fields(page(xg_html("2.10", "0.45")))
    assert fields.home_team == ""
    assert fields.away_team == ""
    assert fields.home_score == 0
    assert fields.away_score == 0
    assert fields.home_xg == 2.10
    assert fields.away_xg == 0.45


def test_missing_xg_keeps_teams():
    fields = extract_fields(page(header_html(score="0 - 0")))
    assert (fields.home_team, fields.away_team) == ("Arsenal", "Chelsea")
    assert (fields.home_score, fields.away_score) == (0, 0)
    assert (fields.home_xg, fields.away_xg) == (0.0, 0.0)
    assert fields.gameweek == 0
    assert fields.date_label == ""


def test_empty_markup_yields_zero_values():
    assert extract_fields("") == MatchFields()


def test_team_names_are_unescaped():
    fields = extract_fields(page(header_html(home="Brighton &amp; Hove Albion", home_short="BHA")))
    assert fields.home_team == "Brighton & Hove Albion"


def test_gameweek_and_date_are_independent():
    fields = extract_fields(page(meta_html(gameweek="GW7", date="3 Mar 20:00")))
    assert fields.gameweek == 7
    assert fields.date_label == "3 Mar 20:00"
    assert fields.home_team == ""


def test_rule_producing_unknown_field_is_rejected():
    import re

    import pytest

    bad = FieldRule("bad", re.compile("x"), lambda m: {"venue": "Emirates"})
    with pytest.raises(ValueError):
        extract_fields("x", rules=(bad,))


def test_rules_are_named_and_independent():
    assert [r.name for r in FIELD_RULES] == ["teams_score", "aggregate_xg", "gameweek", "date_label"]


def test_extract_id_from_url():
    assert extract_id_from_url("https://site/match/2024/ 4821") == 4821
    assert extract_id_from_url("https://xgstat.com/matches/arsenal-chelsea-4821") == 4821
    assert extract_id_from_url("https://xgstat.com/2024/matches/17?tab=shots") == 17
    assert extract_id_from_url("https://xgstat.com/matches/arsenal-chelsea") == 0


def test_rendered_team_text_is_kept_for_section_lookup():
    fields = extract_fields(page(header_html(home="Man&nbsp;Utd", home_short="MUN")))
    assert fields.home_team == "Man Utd"
    assert fields.home_team_raw == "Man&nbsp;Utd"
    assert fields.away_team_raw == "Chelsea"
