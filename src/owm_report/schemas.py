"""
Domain models for owm_report.

Enumerated option values for the One Call API and pydantic models for the
part of its JSON response we consume. The datasource normalizes the raw
models into ``DailyForecast`` records.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum

from pydantic import BaseModel, StrictFloat, StrictInt

from owm_report.errors import ConfigurationError

# =============================================================================
# Request options
# =============================================================================


class UnitSystem(StrEnum):
    """Temperature unit system accepted by the ``units`` query parameter."""

    STANDARD = "standard"
    METRIC = "metric"
    IMPERIAL = "imperial"

    @property
    def abbreviation(self) -> str:
        """Display abbreviation (K, C or F)."""
        return _UNIT_ABBREVIATIONS[self]


_UNIT_ABBREVIATIONS: dict[UnitSystem, str] = {
    UnitSystem.STANDARD: "K",
    UnitSystem.METRIC: "C",
    UnitSystem.IMPERIAL: "F",
}


class ExcludeField(StrEnum):
    """Data blocks the API can be asked to leave out of its response."""

    CURRENT = "current"
    MINUTELY = "minutely"
    HOURLY = "hourly"
    DAILY = "daily"
    ALERTS = "alerts"


EXCLUDE_ALL: tuple[ExcludeField, ...] = tuple(ExcludeField)
ONLY_DAILY: tuple[ExcludeField, ...] = tuple(f for f in ExcludeField if f is not ExcludeField.DAILY)


def is_unit_valid(value: str) -> bool:
    """Whether ``value`` is one of the supported unit tags."""
    return value in {u.value for u in UnitSystem}


def parse_units(value: str | UnitSystem) -> UnitSystem:
    """
    Look up a unit system by its tag.

    Raises:
        ConfigurationError: ``value`` is not ``standard``, ``metric`` or ``imperial``.
    """
    if not is_unit_valid(value):
        choices = ", ".join(u.value for u in UnitSystem)
        raise ConfigurationError(f"Unknown temperature units {value!r} (expected one of {choices})")
    return UnitSystem(value)


def invalid_exclude_fields(values: Iterable[str]) -> list[str]:
    """Return the entries of ``values`` that are not known exclude fields."""
    known = {f.value for f in ExcludeField}
    return [v for v in values if v not in known]


# =============================================================================
# Geographic
# =============================================================================


class Coordinate(BaseModel):
    """Latitude/longitude pair. Ranges are left to the remote API."""

    model_config = {"frozen": True}

    latitude: float
    longitude: float


# =============================================================================
# One Call API payload (consumed subset)
# =============================================================================


class NightReading(BaseModel):
    """Per-period temperature block; only the night value is used."""

    night: StrictFloat


class RawDailyForecast(BaseModel):
    """One element of the ``daily`` array as returned by the API."""

    dt: StrictInt
    sunrise: StrictInt
    sunset: StrictInt
    temp: NightReading
    feels_like: NightReading


class OneCallResponse(BaseModel):
    """Top-level One Call response; every other block is ignored."""

    daily: list[RawDailyForecast]
