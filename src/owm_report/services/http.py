"""
Shared HTTP client.

Provides a pre-configured ``requests.Session`` for talking to OpenWeather.
The report is a one-shot run, so the adapter does not retry: the first
failure surfaces to the caller. A default timeout can be injected; with
``None`` the transport default applies.

Usage::

    from owm_report.services.http import session

    resp = session.get("https://api.openweathermap.org/data/2.5/onecall?...")
    resp.raise_for_status()
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from owm_report import __version__

#: No retries; status codes are left to raise_for_status().
DEFAULT_RETRY = Retry(total=0, raise_on_status=False)

USER_AGENT = f"owm-report/{__version__}"


def create_session(
    retry: Retry | None = None,
    timeout: float | None = None,
) -> requests.Session:
    """
    Build a ``requests.Session`` with the adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``DEFAULT_RETRY``).
        timeout: Default timeout applied to every request, or ``None``.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = USER_AGENT

    if timeout is None:
        return s

    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


#: Module-level session — import and use directly.
session: requests.Session = create_session()
