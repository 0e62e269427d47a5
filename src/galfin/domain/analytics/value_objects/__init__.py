"""Value objects for budget accuracy analytics."""

from galfin.domain.analytics.value_objects.accuracy_zone import AccuracyZone
from galfin.domain.analytics.value_objects.category_accuracy import (
    CategoryAccuracy,
)
from galfin.domain.analytics.value_objects.pacing_checkpoint import (
    PacingCheckpoint,
)

__all__ = [
    "AccuracyZone",
    "CategoryAccuracy",
    "PacingCheckpoint",
]
