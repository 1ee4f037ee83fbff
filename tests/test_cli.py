"""
Tests for CLI functionality.

These tests verify the command-line interface logic.
"""

from __future__ import annotations

import argparse
import logging
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING
from unittest.mock import Mock, patch
from urllib.parse import parse_qs, urlsplit

import pytest

from owm_report.cli import configure_logging, create_parser, main, run_report
from owm_report.config import Settings
from owm_report.datasources.openweather import DailyForecast
from owm_report.errors import ConfigurationError, ForecastError, TransportError

if TYPE_CHECKING:
    from collections.abc import Iterator


def _forecast(n: int) -> list[DailyForecast]:
    days = []
    for i in range(n):
        sunrise = datetime(2021, 6, 1 + i, 0, 0, tzinfo=UTC)
        days.append(
            DailyForecast(
                timestamp=sunrise + timedelta(hours=7),
                sunrise=sunrise,
                sunset=sunrise + timedelta(hours=15, minutes=i),
                night_temperature=10.0 + i,
                night_feels_like=10.0 + i - (3 - i) ** 2,
            )
        )
    return days


@pytest.fixture
def settings() -> Iterator[Settings]:
    """Patch get_settings with a key-bearing environment."""
    s = Settings(api_key="env-key")
    with patch("owm_report.cli.get_settings", return_value=s):
        yield s


@pytest.fixture(autouse=True)
def _no_logging_setup() -> Iterator[Mock]:
    with patch("owm_report.cli.configure_logging") as mock_configure:
        yield mock_configure


class TestCreateParser:
    """Tests for create_parser function."""

    def test_creates_parser(self) -> None:
        parser = create_parser()
        assert isinstance(parser, argparse.ArgumentParser)
        assert parser.prog == "owm-report"

    def test_parser_has_version(self) -> None:
        parser = create_parser()
        with pytest.raises(SystemExit):
            parser.parse_args(["--version"])

    def test_defaults(self) -> None:
        args = create_parser().parse_args([])
        assert args.api_key == ""
        assert args.latitude == 54.733334
        assert args.longitude == 56.0
        assert args.units == "metric"
        assert args.lang == ""
        assert args.debug is False

    def test_single_dash_flags(self) -> None:
        args = create_parser().parse_args(
            ["-api_key", "k", "-latitude", "-33.9", "-longitude", "151.2", "-units", "imperial"]
        )
        assert args.api_key == "k"
        assert args.latitude == -33.9
        assert args.longitude == 151.2
        assert args.units == "imperial"

    def test_defaults_follow_settings(self) -> None:
        parser = create_parser(Settings(language="ru"))
        assert parser.parse_args([]).lang == "ru"


class TestRunReport:
    """Tests for run_report orchestration."""

    def _args(self, **overrides: object) -> argparse.Namespace:
        values: dict[str, object] = {
            "api_key": "",
            "latitude": 54.733334,
            "longitude": 56.0,
            "units": "metric",
            "lang": "",
            "debug": False,
        }
        values.update(overrides)
        return argparse.Namespace(**values)

    def test_prints_two_lines(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch("owm_report.cli.fetch_forecast", return_value=_forecast(7)) as mock_fetch:
            exit_code = run_report(self._args(), Settings(api_key="env-key"))

        assert exit_code == 0
        url = mock_fetch.call_args.args[0]
        query = parse_qs(urlsplit(url).query)
        assert query["appid"] == ["env-key"]
        assert query["units"] == ["metric"]
        assert query["exclude"] == ["current,minutely,hourly,alerts"]
        assert "lang" not in query

        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            'День с минимальной разницей между фактической и "ощущаемой" температурой '
            "(0.000 C): 04/06/2021",
            "День с максимальной продолжительностью дня (15:04:00): 05/06/2021",
        ]

    def test_flag_key_and_lang(self) -> None:
        with patch("owm_report.cli.fetch_forecast", return_value=_forecast(5)) as mock_fetch:
            run_report(self._args(api_key="flag-key", lang="ru"), Settings(api_key="env-key"))

        query = parse_qs(urlsplit(mock_fetch.call_args.args[0]).query)
        assert query["appid"] == ["flag-key"]
        assert query["lang"] == ["ru"]

    def test_lang_from_settings(self) -> None:
        with patch("owm_report.cli.fetch_forecast", return_value=_forecast(5)) as mock_fetch:
            run_report(self._args(), Settings(api_key="k", language="ru"))

        query = parse_qs(urlsplit(mock_fetch.call_args.args[0]).query)
        assert query["lang"] == ["ru"]

    def test_session_closed_after_fetch(self) -> None:
        with (
            patch("owm_report.cli.create_session") as mock_create,
            patch("owm_report.cli.fetch_forecast", return_value=_forecast(5)) as mock_fetch,
        ):
            run_report(self._args(), Settings(api_key="k", http_timeout=5.0))

        mock_create.assert_called_once_with(timeout=5.0)
        http = mock_create.return_value.__enter__.return_value
        assert mock_fetch.call_args.kwargs["http"] is http
        mock_create.return_value.__exit__.assert_called_once()

    def test_session_closed_on_fetch_error(self) -> None:
        with (
            patch("owm_report.cli.create_session") as mock_create,
            patch("owm_report.cli.fetch_forecast", side_effect=TransportError("boom")),
            pytest.raises(TransportError),
        ):
            run_report(self._args(), Settings(api_key="k"))

        mock_create.return_value.__exit__.assert_called_once()

    def test_invalid_units_before_fetch(self) -> None:
        with (
            patch("owm_report.cli.fetch_forecast") as mock_fetch,
            pytest.raises(ConfigurationError),
        ):
            run_report(self._args(units="kelvin"), Settings(api_key="k"))
        mock_fetch.assert_not_called()

    def test_missing_key_before_fetch(self) -> None:
        with (
            patch("owm_report.cli.fetch_forecast") as mock_fetch,
            pytest.raises(ConfigurationError),
        ):
            run_report(self._args(), Settings())
        mock_fetch.assert_not_called()

    def test_empty_forecast(self, capsys: pytest.CaptureFixture[str]) -> None:
        with (
            patch("owm_report.cli.fetch_forecast", return_value=[]),
            pytest.raises(ForecastError, match="no days"),
        ):
            run_report(self._args(), Settings(api_key="k"))
        assert capsys.readouterr().out == ""

    def test_no_positive_daylight(self, capsys: pytest.CaptureFixture[str]) -> None:
        days = [
            DailyForecast(
                timestamp=datetime(2021, 12, 21, tzinfo=UTC),
                sunrise=datetime(2021, 12, 21, tzinfo=UTC),
                sunset=datetime(2021, 12, 21, tzinfo=UTC),
                night_temperature=-30.0,
                night_feels_like=-38.0,
            )
        ]
        with (
            patch("owm_report.cli.fetch_forecast", return_value=days),
            pytest.raises(ForecastError, match="sunset after sunrise"),
        ):
            run_report(self._args(), Settings(api_key="k"))
        assert capsys.readouterr().out == ""

    def test_short_forecast_uses_available_days(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with patch("owm_report.cli.fetch_forecast", return_value=_forecast(2)):
            assert run_report(self._args(), Settings(api_key="k")) == 0
        assert "(15:01:00): 02/06/2021" in capsys.readouterr().out


class TestMain:
    """Tests for main function."""

    @pytest.mark.usefixtures("settings")
    def test_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch("owm_report.cli.fetch_forecast", return_value=_forecast(7)):
            assert main([]) == 0
        assert len(capsys.readouterr().out.splitlines()) == 2

    def test_missing_key_exits_nonzero(self, caplog: pytest.LogCaptureFixture) -> None:
        with (
            patch("owm_report.cli.get_settings", return_value=Settings()),
            patch("owm_report.cli.fetch_forecast") as mock_fetch,
            caplog.at_level(logging.ERROR),
        ):
            assert main([]) == 1
        mock_fetch.assert_not_called()
        assert "OPENWEATHER_API_KEY" in caplog.text

    @pytest.mark.usefixtures("settings")
    def test_invalid_units_exits_nonzero(self, caplog: pytest.LogCaptureFixture) -> None:
        with (
            patch("owm_report.cli.fetch_forecast") as mock_fetch,
            caplog.at_level(logging.ERROR),
        ):
            assert main(["-units", "kelvin"]) == 1
        mock_fetch.assert_not_called()
        assert "kelvin" in caplog.text

    @pytest.mark.usefixtures("settings")
    def test_transport_error_exits_nonzero(
        self, capsys: pytest.CaptureFixture[str], caplog: pytest.LogCaptureFixture
    ) -> None:
        with (
            patch("owm_report.cli.fetch_forecast", side_effect=TransportError("boom")),
            caplog.at_level(logging.ERROR),
        ):
            assert main([]) == 1
        assert capsys.readouterr().out == ""
        assert "boom" in caplog.text

    def test_bad_environment_exits_nonzero(self) -> None:
        with patch(
            "owm_report.cli.get_settings", side_effect=ConfigurationError("bad timeout")
        ):
            assert main([]) == 1

    def test_version_ignores_bad_environment(self) -> None:
        with (
            patch(
                "owm_report.cli.get_settings", side_effect=ConfigurationError("bad timeout")
            ) as mock_settings,
            pytest.raises(SystemExit) as exc_info,
        ):
            main(["--version"])
        assert exc_info.value.code == 0
        mock_settings.assert_not_called()

    def test_bad_environment_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with (
            patch(
                "owm_report.cli.get_settings", side_effect=ConfigurationError("bad timeout")
            ),
            patch("owm_report.cli.fetch_forecast") as mock_fetch,
            caplog.at_level(logging.ERROR),
        ):
            assert main(["-units", "imperial"]) == 1
        mock_fetch.assert_not_called()
        assert "bad timeout" in caplog.text

    @pytest.mark.usefixtures("settings")
    def test_debug_flag(self, _no_logging_setup: Mock) -> None:
        with patch("owm_report.cli.fetch_forecast", return_value=_forecast(5)):
            main(["--debug"])
        _no_logging_setup.assert_called_once_with(True)


class TestConfigureLogging:
    """Tests for configure_logging (the module-level import is unpatched)."""

    @pytest.mark.parametrize(("debug", "level"), [(False, logging.INFO), (True, logging.DEBUG)])
    def test_levels(self, debug: bool, level: int) -> None:
        with patch("owm_report.cli.logging.basicConfig") as mock_basic:
            configure_logging(debug)
        kwargs = mock_basic.call_args.kwargs
        assert kwargs["level"] == level
        assert kwargs["force"] is True
