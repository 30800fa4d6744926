"""User-facing rendering and the terminal application."""

from .report import ReportPresenter, format_failure, format_report

__all__ = [
    "ReportPresenter",
    "format_failure",
    "format_report",
]
