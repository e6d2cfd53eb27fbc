"""Day/night lighting driven by the game calendar."""

from __future__ import annotations

import pygame

from moonfield.enums import LunarPhase, Season
from moonfield.gametime import GameTime

_MOON_LIGHT = {
    LunarPhase.NEW_MOON: 0.00,
    LunarPhase.WAXING_CRESCENT: 0.05,
    LunarPhase.FIRST_QUARTER: 0.10,
    LunarPhase.WAXING_GIBBOUS: 0.30,
    LunarPhase.FULL_MOON: 1.00,
    LunarPhase.WANING_GIBBOUS: 0.30,
    LunarPhase.LAST_QUARTER: 0.10,
    LunarPhase.WANING_CRESCENT: 0.05,
}

_MOON_WEIGHT = 0.2
_MAX_OVERLAY_ALPHA = 250


def _season_hours(season: Season) -> tuple[float, float, float]:
    """Return (day start, night start, transition length) for a season."""
    day, night = 6.0, 18.0
    if season in (Season.SPRING, Season.AUTUMN):
        return day, night, 0.5
    if season is Season.SUMMER:
        return day - 1.0, night + 1.0, 1.5
    if season is Season.WINTER:
        return day + 1.5, night - 1.5, 0.5
    return day, night, 1.0


def light_intensity_at(hour: float, season: Season, phase: LunarPhase) -> float:
    """Return the ambient light level in [0, 1] for a fractional hour of the day."""
    day, night, transition = _season_hours(season)
    dawn = day - transition
    dusk = night + transition

    if night <= hour <= dusk:
        light = 1.0 - (hour - night) / transition
    elif dawn <= hour < day:
        light = (hour - dawn) / transition
    elif day <= hour < night:
        light = 1.0
    else:
        light = 0.0

    if hour < day or hour >= night:
        light += _MOON_LIGHT.get(phase, 0.0) * _MOON_WEIGHT

    return min(max(light, 0.0), 1.0)


class DayNightCycle:
    """Tracks the light level for a game clock and darkens the screen accordingly."""

    def __init__(self, game_time: GameTime) -> None:
        self._game_time = game_time
        self._light = 1.0
        self.update()

    def update(self) -> None:
        """Recompute the light level from the current calendar."""
        cal = self._game_time.calendar()
        hour = cal.date.hour + cal.date.minute / 60.0
        self._light = light_intensity_at(
            hour, cal.environment.season, cal.environment.phase
        )

    @property
    def light_intensity(self) -> float:
        return self._light

    @property
    def overlay_alpha(self) -> int:
        """Opacity (0-250) of the black overlay for the current light level."""
        return int((1.0 - self._light) * _MAX_OVERLAY_ALPHA)

    def draw_overlay(self, surface: pygame.Surface) -> None:
        """Blend a translucent black layer over the whole surface."""
        overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, self.overlay_alpha))
        surface.blit(overlay, (0, 0))