"""OpenWeather One Call API constants and request URL construction.

API docs: https://openweathermap.org/api/one-call-api
"""

from __future__ import annotations

from collections.abc import Iterable
from urllib.parse import urlencode

from owm_report.schemas import Coordinate

ONE_CALL_API = "https://api.openweathermap.org/data/2.5/onecall"


def build_request_url(
    coordinate: Coordinate,
    api_key: str,
    units: str = "",
    language: str = "",
    exclude: Iterable[str] = (),
) -> str:
    """
    Build a One Call request URL.

    Args:
        coordinate: Location to forecast.
        api_key: OpenWeather API key (``appid``).
        units: ``standard``, ``metric`` or ``imperial``; omitted when empty.
        language: Response language code (``lang``); omitted when empty.
        exclude: Data blocks to leave out, joined with commas; omitted when empty.

    Returns:
        ``ONE_CALL_API`` followed by the encoded query string.
    """
    params = {
        "lat": f"{coordinate.latitude:.3f}",
        "lon": f"{coordinate.longitude:.3f}",
        "appid": api_key,
    }
    optional = {
        "units": str(units),
        "lang": language,
        "exclude": ",".join(str(e) for e in exclude),
    }
    params.update({key: value for key, value in optional.items() if value})

    return f"{ONE_CALL_API}?{urlencode(sorted(params.items()))}"
