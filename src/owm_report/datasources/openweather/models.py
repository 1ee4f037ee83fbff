"""OpenWeather daily forecast model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime, timedelta


@dataclass(frozen=True)
class DailyForecast:
    """The consumed subset of one ``daily`` element. All times are UTC."""

    timestamp: datetime
    sunrise: datetime
    sunset: datetime
    night_temperature: float
    night_feels_like: float

    @property
    def day_length(self) -> timedelta:
        """Time between sunrise and sunset (negative if the data is inverted)."""
        return self.sunset - self.sunrise

    @property
    def feels_like_difference(self) -> float:
        """Absolute gap between the feels-like and actual night temperature."""
        return abs(self.night_feels_like - self.night_temperature)
