"""Analysis over fetched forecast records.

Public API:
  - daily_extremes: min_temperature_difference, max_day_duration
"""

from owm_report.analysis.daily_extremes import (
    DURATION_WINDOW,
    DayDuration,
    TemperatureDifference,
    max_day_duration,
    min_temperature_difference,
)

__all__ = [
    "DURATION_WINDOW",
    "DayDuration",
    "TemperatureDifference",
    "max_day_duration",
    "min_temperature_difference",
]
