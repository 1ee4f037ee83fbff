"""Renderers: pure data -> text.

Public API:
  - report: format_forecast, format_duration, format_date, render_report
"""

from owm_report.renderers.report import (
    format_date,
    format_duration,
    format_forecast,
    format_timestamp,
    render_max_duration_line,
    render_min_difference_line,
    render_report,
)

__all__ = [
    "format_date",
    "format_duration",
    "format_forecast",
    "format_timestamp",
    "render_max_duration_line",
    "render_min_difference_line",
    "render_report",
]
