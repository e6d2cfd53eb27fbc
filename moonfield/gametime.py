"""Game clock and the calendar derived from it.

One real second is one in-game minute. Game time is counted in in-game
seconds; the clock starts at 06:00 of the first day.
"""

from __future__ import annotations

from dataclasses import dataclass

from moonfield.enums import LunarPhase, Season

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400
SECONDS_PER_LUNAR = SECONDS_PER_DAY * 8
SECONDS_PER_SEASON = SECONDS_PER_LUNAR * 2
SECONDS_PER_SOLAR = SECONDS_PER_SEASON * 4

GAME_SECONDS_PER_REAL_SECOND = 60.0
START_OFFSET = 6 * SECONDS_PER_HOUR


def _tdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _tmod(a: int, b: int) -> int:
    """Remainder matching truncating division."""
    return a - b * _tdiv(a, b)


@dataclass(frozen=True)
class GameDate:
    """Calendar date: solar year, lunar month, day (all 1-based), hour and minute."""

    solar: int
    lunar: int
    day: int
    hour: int
    minute: int


@dataclass(frozen=True)
class GameSeasonalState:
    """Season and moon phase for a moment in game time."""

    season: Season
    phase: LunarPhase


@dataclass(frozen=True)
class GameCalendar:
    """A full calendar reading."""

    date: GameDate
    environment: GameSeasonalState


class GameTime:
    """Accumulates real time and converts it to game time."""

    def __init__(self) -> None:
        self.real_time = 0.0

    def update(self, delta: float) -> None:
        """Advance the clock by `delta` real seconds."""
        self.real_time += delta

    @property
    def game_time(self) -> int:
        """Elapsed in-game seconds."""
        return int(self.real_time * GAME_SECONDS_PER_REAL_SECOND)

    @game_time.setter
    def game_time(self, value: int) -> None:
        self.real_time = value / GAME_SECONDS_PER_REAL_SECOND

    def calendar(self) -> GameCalendar:
        """Return the calendar reading for the current game time."""
        t = self.game_time + START_OFFSET

        solar = _tdiv(t, SECONDS_PER_SOLAR)
        lunar = _tmod(_tdiv(t, SECONDS_PER_LUNAR), 8)
        day = _tmod(_tdiv(t, SECONDS_PER_DAY), 8)
        hour = _tmod(_tdiv(t, SECONDS_PER_HOUR), 24)
        minute = _tmod(_tdiv(t, SECONDS_PER_MINUTE), 60)

        season = Season(_tmod(_tdiv(t, SECONDS_PER_SEASON), 4))
        phase = LunarPhase(_tmod(_tdiv(t, SECONDS_PER_DAY), 8))

        return GameCalendar(
            GameDate(solar + 1, lunar + 1, day + 1, hour, minute),
            GameSeasonalState(season, phase),
        )

    def format_date(self) -> str:
        """Return the date as 'Solar S, Lunar L, Day DD - HH:MM'."""
        d = self.calendar().date
        return (
            f"Solar {d.solar}, Lunar {d.lunar}, "
            f"Day {d.day:02d} - {d.hour:02d}:{d.minute:02d}"
        )

    def format_season(self) -> str:
        """Return the name of the current season."""
        return str(self.calendar().environment.season)