import pytest

from moonfield.enums import LunarPhase, Season
from moonfield.gametime import GameTime


def _at(seconds):
    t = GameTime()
    t.game_time = seconds
    return t


def test_clock_starts_at_six_on_first_day():
    cal = GameTime().calendar()
    assert (cal.date.solar, cal.date.lunar, cal.date.day) == (1, 1, 1)
    assert cal.date.hour == 6
    assert cal.date.minute == 0
    assert cal.environment.season is Season.SPRING
    assert cal.environment.phase is LunarPhase.NEW_MOON


def test_one_real_second_is_one_game_minute():
    t = GameTime()
    t.update(1.0)
    assert t.game_time == 60
    assert t.calendar().date.minute == 1


def test_game_time_setter_round_trip():
    t = _at(3600)
    assert t.game_time == 3600


@pytest.mark.parametrize("minutes", [0, 1, 59])
def test_minute_reading(minutes):
    assert _at(60 * minutes).calendar().date.minute == minutes


def test_midnight_starts_next_day():
    cal = _at(18 * 3600).calendar()
    assert cal.date.hour == 0
    assert cal.date.day == 2


def test_one_day_advances_day_and_phase():
    base = GameTime().calendar()
    later = _at(86400).calendar()
    assert later.date.day == base.date.day + 1
    assert later.environment.phase.value == base.environment.phase.value + 1
    assert later.date.hour == base.date.hour


def test_day_wraps_after_eight_days():
    base = GameTime().calendar()
    later = _at(86400 * 8).calendar()
    assert later.date.day == base.date.day
    assert later.date.lunar == base.date.lunar + 1
    assert later.environment.phase is base.environment.phase


def test_season_changes_after_sixteen_days():
    later = _at(86400 * 16).calendar()
    assert later.environment.season is Season.SUMMER


def test_solar_year_after_sixty_four_days():
    base = GameTime().calendar()
    later = _at(86400 * 64).calendar()
    assert later.date.solar == base.date.solar + 1
    assert later.environment.season is Season.SPRING
    assert later.date.lunar == base.date.lunar


def test_format_date_initial():
    assert GameTime().format_date() == "Solar 1, Lunar 1, Day 01 - 06:00"


def test_format_season_follows_calendar():
    assert GameTime().format_season() == "Spring"
    assert _at(86400 * 48).format_season() == "Winter"