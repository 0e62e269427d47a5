"""Data transfer objects returned by application queries."""

from galfin.application.dtos.analytics import (
    AccuracySummary,
    CategoryAccuracyResult,
    CategoryPacingResult,
    sort_for_display,
)

__all__ = [
    "AccuracySummary",
    "CategoryAccuracyResult",
    "CategoryPacingResult",
    "sort_for_display",
]
