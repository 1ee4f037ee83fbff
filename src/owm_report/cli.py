"""
Command-line interface for the application.

Fetches the daily forecast for one location and prints two lines: the day
with the smallest gap between actual and feels-like night temperature, and
the day with the longest daylight among the first five days.
"""

from __future__ import annotations

import argparse
import logging
import sys

from owm_report import __version__
from owm_report.analysis import (
    DURATION_WINDOW,
    max_day_duration,
    min_temperature_difference,
)
from owm_report.config import API_KEY_ENV, Settings, get_settings, resolve_api_key
from owm_report.datasources.openweather import build_request_url, fetch_forecast
from owm_report.errors import ForecastError
from owm_report.renderers import render_report
from owm_report.schemas import Coordinate, parse_units
from owm_report.services.http import create_session

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def create_parser(settings: Settings | None = None) -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    settings = settings or Settings()
    parser = argparse.ArgumentParser(
        prog="owm-report",
        description="Night temperature and day length summary from OpenWeather",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "-api_key",
        type=str,
        default="",
        help=f"OpenWeather API key (overrides {API_KEY_ENV})",
    )
    parser.add_argument(
        "-latitude",
        type=float,
        default=settings.latitude,
        help=f"Latitude (default: {settings.latitude})",
    )
    parser.add_argument(
        "-longitude",
        type=float,
        default=settings.longitude,
        help=f"Longitude (default: {settings.longitude})",
    )
    parser.add_argument(
        "-units",
        type=str,
        default=settings.units.value,
        help="Temperature units: standard (Kelvin), metric (Celsius), imperial (Fahrenheit)",
    )
    parser.add_argument(
        "-lang",
        type=str,
        default=settings.language,
        help="Response language code (default: API default)",
    )
    return parser


def configure_logging(debug: bool = False) -> None:
    """Send log records to stderr."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )


def run_report(args: argparse.Namespace, settings: Settings) -> int:
    """Fetch, analyze and print. Raises ``ForecastError`` on any failure."""
    api_key = resolve_api_key(args.api_key, settings)
    units = parse_units(args.units)

    url = build_request_url(
        Coordinate(latitude=args.latitude, longitude=args.longitude),
        api_key,
        units=units,
        language=args.lang or settings.language,
        exclude=settings.exclude,
    )
    with create_session(timeout=settings.http_timeout) as http:
        days = fetch_forecast(url, http=http)

    difference = min_temperature_difference(days)
    if difference is None:
        raise ForecastError("The forecast contains no days")
    duration = max_day_duration(days[:DURATION_WINDOW])
    if duration is None:
        raise ForecastError(f"No day with sunset after sunrise in the first {DURATION_WINDOW} days")

    print(render_report(difference, duration, days, units))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.debug)

    try:
        settings = get_settings()
        return run_report(args, settings)
    except ForecastError as e:
        logger.error("%s", e)
        logger.debug("Traceback", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
