"""OpenWeather One Call data source.

Public API:
  - client: ONE_CALL_API, build_request_url
  - models: DailyForecast
  - forecast: fetch_forecast, parse_daily, decode_unix_seconds
"""

from owm_report.datasources.openweather.client import ONE_CALL_API, build_request_url
from owm_report.datasources.openweather.forecast import (
    decode_unix_seconds,
    fetch_forecast,
    parse_daily,
)
from owm_report.datasources.openweather.models import DailyForecast

__all__ = [
    "ONE_CALL_API",
    "DailyForecast",
    "build_request_url",
    "decode_unix_seconds",
    "fetch_forecast",
    "parse_daily",
]
