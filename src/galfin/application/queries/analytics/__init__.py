"""Analytics queries for budget accuracy reporting."""

from galfin.application.queries.analytics.category_accuracy_query import (
    CategoryAccuracyQuery,
)
from galfin.application.queries.analytics.category_pacing_query import (
    CategoryPacingQuery,
)
from galfin.application.queries.analytics.reporting_window import (
    ReportingWindow,
    resolve_reporting_window,
)

__all__ = [
    "CategoryAccuracyQuery",
    "CategoryPacingQuery",
    "ReportingWindow",
    "resolve_reporting_window",
]
