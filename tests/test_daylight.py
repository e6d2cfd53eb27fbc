import pygame
import pytest

from moonfield.daylight import DayNightCycle, light_intensity_at
from moonfield.enums import LunarPhase, Season
from moonfield.gametime import GameTime


@pytest.mark.parametrize("season", list(Season))
def test_noon_is_fully_lit(season):
    assert light_intensity_at(12.0, season, LunarPhase.NEW_MOON) == 1.0


@pytest.mark.parametrize("season", list(Season))
def test_midnight_new_moon_is_dark(season):
    assert light_intensity_at(0.0, season, LunarPhase.NEW_MOON) == 0.0


def test_full_moon_lights_the_night():
    assert light_intensity_at(0.0, Season.SPRING, LunarPhase.FULL_MOON) == pytest.approx(0.2)


def test_moon_brightness_ordering():
    levels = [
        light_intensity_at(0.0, Season.SPRING, phase)
        for phase in (LunarPhase.NEW_MOON, LunarPhase.WAXING_CRESCENT,
                      LunarPhase.FIRST_QUARTER, LunarPhase.WAXING_GIBBOUS,
                      LunarPhase.FULL_MOON)
    ]
    assert levels == sorted(levels)
    assert len(set(levels)) == len(levels)


def test_spring_dawn_midpoint():
    assert light_intensity_at(5.75, Season.SPRING, LunarPhase.NEW_MOON) == pytest.approx(0.5)


def test_summer_days_start_earlier_than_spring():
    summer = light_intensity_at(5.5, Season.SUMMER, LunarPhase.NEW_MOON)
    spring = light_intensity_at(5.5, Season.SPRING, LunarPhase.NEW_MOON)
    assert summer > spring


def test_winter_mornings_are_darker():
    assert light_intensity_at(7.0, Season.WINTER, LunarPhase.NEW_MOON) < 1.0
    assert light_intensity_at(7.0, Season.SPRING, LunarPhase.NEW_MOON) == 1.0


def test_dusk_dims_monotonically():
    hours = [18.0, 18.1, 18.25, 18.4, 18.5, 19.0]
    levels = [light_intensity_at(h, Season.SPRING, LunarPhase.NEW_MOON) for h in hours]
    assert levels == sorted(levels, reverse=True)


@pytest.mark.parametrize("season", list(Season))
@pytest.mark.parametrize("phase", list(LunarPhase))
def test_light_is_bounded(season, phase):
    for quarter in range(96):
        level = light_intensity_at(quarter / 4, season, phase)
        assert 0.0 <= level <= 1.0


def test_cycle_at_start_is_daylight():
    cycle = DayNightCycle(GameTime())
    assert cycle.light_intensity == 1.0
    assert cycle.overlay_alpha == 0


def test_cycle_follows_clock():
    clock = GameTime()
    cycle = DayNightCycle(clock)
    clock.game_time = 18 * 3600
    cycle.update()
    assert cycle.light_intensity < 0.5
    assert cycle.overlay_alpha > 125


def test_draw_overlay_in_daylight_leaves_surface_unchanged():
    surface = pygame.Surface((4, 4))
    surface.fill((255, 255, 255))
    DayNightCycle(GameTime()).draw_overlay(surface)
    assert tuple(surface.get_at((1, 1)))[:3] == (255, 255, 255)


def test_draw_overlay_at_night_darkens_surface():
    clock = GameTime()
    clock.game_time = 18 * 3600
    cycle = DayNightCycle(clock)
    surface = pygame.Surface((4, 4))
    surface.fill((255, 255, 255))
    cycle.draw_overlay(surface)
    assert surface.get_at((2, 2))[0] < 50