"""Plain-text rendering of forecast records and analysis results.

Labels are Russian, matching the tool's audience.
"""

from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import datetime

    from owm_report.analysis.daily_extremes import DayDuration, TemperatureDifference
    from owm_report.datasources.openweather.models import DailyForecast
    from owm_report.schemas import UnitSystem


def format_timestamp(dt: datetime) -> str:
    """Full date-time, e.g. ``2021-05-01 09:00:00 UTC``."""
    return dt.strftime("%Y-%m-%d %H:%M:%S %Z")


def format_date(dt: datetime) -> str:
    """Day-first date, e.g. ``01/05/2021``."""
    return dt.strftime("%d/%m/%Y")


def format_duration(duration: timedelta) -> str:
    """
    Format a duration as ``HH:MM:SS`` after rounding to the nearest second.

    Hours are not wrapped at 24.
    """
    micros = duration // timedelta(microseconds=1)
    sign = "-" if micros < 0 else ""
    # half a second rounds away from zero
    total = (abs(micros) + 500_000) // 1_000_000
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d}"


def format_forecast(day: DailyForecast) -> str:
    """Multi-line description of a single day."""
    return (
        f"Дата и время: {format_timestamp(day.timestamp)}\n"
        f"Время рассвета: {format_timestamp(day.sunrise)}\n"
        f"Время заката: {format_timestamp(day.sunset)}\n"
        f"Фактическая температура: {day.night_temperature:.3f}\n"
        f"Ощущаемая температура: {day.night_feels_like:.3f}\n"
    )


def render_min_difference_line(
    result: TemperatureDifference, days: Sequence[DailyForecast], units: UnitSystem
) -> str:
    day = days[result.index]
    return (
        'День с минимальной разницей между фактической и "ощущаемой" температурой '
        f"({result.value:.3f} {units.abbreviation}): {format_date(day.timestamp)}"
    )


def render_max_duration_line(result: DayDuration, days: Sequence[DailyForecast]) -> str:
    day = days[result.index]
    return (
        "День с максимальной продолжительностью дня "
        f"({format_duration(result.value)}): {format_date(day.timestamp)}"
    )


def render_report(
    difference: TemperatureDifference,
    duration: DayDuration,
    days: Sequence[DailyForecast],
    units: UnitSystem,
) -> str:
    """Both report lines, temperature difference first."""
    return "\n".join(
        [
            render_min_difference_line(difference, days, units),
            render_max_duration_line(duration, days),
        ]
    )
