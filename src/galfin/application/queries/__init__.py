"""Application queries (read side)."""

from galfin.application.queries.analytics import (
    CategoryAccuracyQuery,
    CategoryPacingQuery,
    ReportingWindow,
    resolve_reporting_window,
)

__all__ = [
    "CategoryAccuracyQuery",
    "CategoryPacingQuery",
    "ReportingWindow",
    "resolve_reporting_window",
]
