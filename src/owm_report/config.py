"""
Runtime settings.

Defaults point at Ufa, Russia in metric units. The API key comes from the
``OPENWEATHER_API_KEY`` environment variable unless a CLI flag overrides it.
"""

from __future__ import annotations

import os

from pydantic import BaseModel, Field, ValidationError

from owm_report.errors import ConfigurationError
from owm_report.schemas import ONLY_DAILY, ExcludeField, UnitSystem

API_KEY_ENV = "OPENWEATHER_API_KEY"
LANG_ENV = "OWM_REPORT_LANG"
TIMEOUT_ENV = "OWM_REPORT_TIMEOUT"

DEFAULT_LATITUDE = 54.733334
DEFAULT_LONGITUDE = 56.0


class Settings(BaseModel):
    """Application settings resolved from the environment."""

    app_name: str = "owm-report"
    api_key: str | None = None
    latitude: float = DEFAULT_LATITUDE
    longitude: float = DEFAULT_LONGITUDE
    units: UnitSystem = UnitSystem.METRIC
    language: str = ""
    exclude: tuple[ExcludeField, ...] = ONLY_DAILY
    http_timeout: float | None = Field(default=None, gt=0, allow_inf_nan=False)


def get_settings() -> Settings:
    """
    Build settings from environment variables.

    Raises:
        ConfigurationError: An environment value fails validation.
    """
    try:
        return Settings(
            api_key=os.environ.get(API_KEY_ENV) or None,
            language=os.environ.get(LANG_ENV, ""),
            http_timeout=os.environ.get(TIMEOUT_ENV) or None,
        )
    except ValidationError as e:
        raise ConfigurationError(f"Invalid environment settings: {e}") from e


def resolve_api_key(flag_value: str | None, settings: Settings) -> str:
    """
    Pick the API key, preferring a non-empty CLI flag over the environment.

    Raises:
        ConfigurationError: Neither source provides a key.
    """
    if flag_value:
        return flag_value
    if settings.api_key:
        return settings.api_key
    raise ConfigurationError(
        f"An OpenWeather API key is required: pass -api_key or set {API_KEY_ENV}"
    )
