"""Seasons and lunar phases of the game calendar."""

from __future__ import annotations

from enum import Enum


class Season(Enum):
    """Season of the year, in calendar order."""

    SPRING = 0
    SUMMER = 1
    AUTUMN = 2
    WINTER = 3

    def __str__(self) -> str:
        return _SEASON_NAMES[self]


class LunarPhase(Enum):
    """Phase of the moon, in cycle order."""

    NEW_MOON = 0
    WAXING_CRESCENT = 1
    FIRST_QUARTER = 2
    WAXING_GIBBOUS = 3
    FULL_MOON = 4
    WANING_GIBBOUS = 5
    LAST_QUARTER = 6
    WANING_CRESCENT = 7

    def __str__(self) -> str:
        return _PHASE_NAMES[self]


_SEASON_NAMES = {
    Season.SPRING: "Spring",
    Season.SUMMER: "Summer",
    Season.AUTUMN: "Autumn",
    Season.WINTER: "Winter",
}

_PHASE_NAMES = {
    LunarPhase.NEW_MOON: "New Moon",
    LunarPhase.WAXING_CRESCENT: "Waxing Crescent",
    LunarPhase.FIRST_QUARTER: "First Quarter",
    LunarPhase.WAXING_GIBBOUS: "Waxing Gibbous",
    LunarPhase.FULL_MOON: "Full Moon",
    LunarPhase.WANING_GIBBOUS: "Waning Gibbous",
    LunarPhase.LAST_QUARTER: "Last Quarter",
    LunarPhase.WANING_CRESCENT: "Waning Crescent",
}