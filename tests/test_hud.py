import pytest

from remixconnect.ui.hud import format_time, score_digits, streak_label


def test_score_digits():
    assert score_digits(42) == "00042"
    assert score_digits(0) == "00000"
    assert score_digits(123456) == "123456"
    with pytest.raises(ValueError):
        score_digits(-1)


def test_format_time():
    assert format_time(19.7) == "19"
    assert format_time(0.4) == "0"
    assert format_time(-3) == "0"


def test_streak_label():
    assert streak_label(0) == streak_label(1) == ""
    assert streak_label(3) == "x3"
