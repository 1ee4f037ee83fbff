"""Extremes over a daily forecast sequence.

Both scans keep the earliest day on ties and return ``None`` when there
is nothing to report, so callers never index with a sentinel.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from owm_report.datasources.openweather.models import DailyForecast

#: The day-length scan only looks at the first days of the forecast.
DURATION_WINDOW = 5


@dataclass(frozen=True)
class TemperatureDifference:
    """Smallest feels-like gap and the position of the day that has it."""

    value: float
    index: int


@dataclass(frozen=True)
class DayDuration:
    """Longest sunrise-to-sunset interval and the position of that day."""

    value: timedelta
    index: int


def min_temperature_difference(days: Sequence[DailyForecast]) -> TemperatureDifference | None:
    """
    Find the day whose night feels-like temperature is closest to the actual one.

    Returns:
        The minimum ``abs(feels_like - temperature)`` with its index, or
        ``None`` for an empty sequence.
    """
    best: TemperatureDifference | None = None
    for i, day in enumerate(days):
        diff = day.feels_like_difference
        if best is None or diff < best.value:
            best = TemperatureDifference(value=diff, index=i)
    return best


def max_day_duration(days: Sequence[DailyForecast]) -> DayDuration | None:
    """
    Find the day with the longest interval between sunrise and sunset.

    Only positive durations count: if every day has ``sunset <= sunrise``
    the result is ``None`` even for a non-empty sequence.
    """
    best: DayDuration | None = None
    longest = timedelta(0)
    for i, day in enumerate(days):
        duration = day.day_length
        if duration > longest:
            longest = duration
            best = DayDuration(value=duration, index=i)
    return best
