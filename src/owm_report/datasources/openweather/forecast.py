"""Daily forecast from the OpenWeather One Call API."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Any

import requests
from pydantic import ValidationError

from owm_report.datasources.openweather.models import DailyForecast
from owm_report.errors import DecodeError, TransportError
from owm_report.schemas import OneCallResponse
from owm_report.services.http import session

logger = logging.getLogger(__name__)


def decode_unix_seconds(value: Any) -> datetime:
    """
    Convert seconds since the Unix epoch to an aware UTC datetime.

    Raises:
        DecodeError: ``value`` is not an integer.
    """
    # bool is an int subclass but never a valid timestamp
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f"Expected integer Unix timestamp, got {value!r}")
    try:
        return datetime.fromtimestamp(value, tz=UTC)
    except (OverflowError, OSError, ValueError) as e:
        raise DecodeError(f"Unix timestamp out of range: {value}") from e


def parse_daily(payload: Any) -> list[DailyForecast]:
    """
    Map a decoded One Call body to daily records, preserving API order.

    Raises:
        DecodeError: ``daily`` is missing or an element has the wrong shape.
    """
    try:
        response = OneCallResponse.model_validate(payload)
    except ValidationError as e:
        raise DecodeError(f"Unexpected forecast payload: {e}") from e

    return [
        DailyForecast(
            timestamp=decode_unix_seconds(day.dt),
            sunrise=decode_unix_seconds(day.sunrise),
            sunset=decode_unix_seconds(day.sunset),
            night_temperature=day.temp.night,
            night_feels_like=day.feels_like.night,
        )
        for day in response.daily
    ]


def fetch_forecast(url: str, *, http: requests.Session | None = None) -> list[DailyForecast]:
    """
    Fetch and decode the daily forecast from a prepared request URL.

    Args:
        url: Full One Call URL (see ``build_request_url``).
        http: Session to use (default: the shared module session).

    Returns:
        Daily records in the order the API returned them.

    Raises:
        TransportError: Connection failure or HTTP error status.
        DecodeError: The body is not JSON or lacks a valid ``daily`` array.
    """
    client = http or session
    logger.debug("GET %s", url.split("?", 1)[0])
    try:
        resp = client.get(url)
    except requests.RequestException as e:
        raise TransportError(f"Forecast request failed: {e}") from e

    try:
        resp.raise_for_status()
        payload = resp.json()
    except requests.HTTPError as e:
        raise TransportError(f"Forecast request failed: {e}") from e
    except ValueError as e:
        raise DecodeError(f"Forecast response is not valid JSON: {e}") from e
    finally:
        resp.close()

    days = parse_daily(payload)
    logger.info("Fetched %d forecast days", len(days))
    return days
