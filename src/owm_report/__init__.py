"""OWM Report - night temperature and day length summary from OpenWeather.

Architecture::

    datasources/   OpenWeather One Call API (request URL, fetch, decode)
    analysis/      Scans over the daily records (min temp difference, max day length)
    renderers/     Pure data -> text (forecast block, report lines)
    services/      Shared utilities (HTTP session)

Data flow: config -> datasources -> analysis -> renderers -> stdout
"""

__version__ = "0.1.0"

from owm_report.config import Settings
from owm_report.schemas import Coordinate, ExcludeField, UnitSystem

__all__ = ["Coordinate", "ExcludeField", "Settings", "UnitSystem", "__version__"]
