"""Analytics DTOs - data transfer objects for accuracy and pacing views."""

from galfin.application.dtos.analytics.accuracy_dto import (
    AccuracySummary,
    CategoryAccuracyResult,
    sort_for_display,
)
from galfin.application.dtos.analytics.pacing_dto import CategoryPacingResult

__all__ = [
    "AccuracySummary",
    "CategoryAccuracyResult",
    "CategoryPacingResult",
    "sort_for_display",
]
