"""Exceptions raised by owm_report.

Every error is terminal for a CLI run; the entry point logs it and exits
non-zero.
"""

from __future__ import annotations


class ForecastError(Exception):
    """Base class for all owm_report errors."""


class ConfigurationError(ForecastError):
    """Missing API key or an unsupported option value."""


class FetchError(ForecastError):
    """The forecast could not be retrieved."""


class TransportError(FetchError):
    """Network failure or an HTTP error status from the API."""


class DecodeError(ForecastError):
    """Malformed JSON body, missing ``daily`` field or a bad timestamp."""
