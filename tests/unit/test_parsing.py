from xgstats.common.parsing import clean_text, last_int, to_float, to_int


def test_clean_text_unescapes_and_collapses():
    assert clean_text("  Brighton &amp; Hove\n Albion ") == "Brighton & Hove Albion"
    assert clean_text(None) == ""


def test_numbers_are_lenient():
    assert to_int("23") == 23
    assert to_int("2x") == 0
    assert to_int(None) == 0
    assert to_float("1.25") == 1.25
    assert to_float("0,87") == 0.87
    assert to_float("1.2.3") == 0.0


def test_last_int():
    assert last_int("https://site/match/2024/ 4821") == 4821
    assert last_int("https://site/match/abc") == 0
    assert last_int("") == 0


def test_last_int_with_oversized_digit_run_is_zero():
    assert last_int("https://xgstat.com/match/" + "9" * 5000) == 0
