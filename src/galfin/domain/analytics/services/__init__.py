"""Domain services for budget accuracy analytics."""

from galfin.domain.analytics.services.category_accuracy_service import (
    CategoryAccuracyService,
    compute_accuracy,
    unused_suggestion,
)
from galfin.domain.analytics.services.category_pacing_service import (
    BASE_CHECKPOINTS,
    CategoryPacingService,
)
from galfin.domain.analytics.services.zone_classification import (
    ACCURACY_BANDS,
    BUST_THRESHOLD,
    MAX_TARGET_POSITION,
    ZoneBand,
    classify_zone,
    hit_angle_for,
)

__all__ = [
    "ACCURACY_BANDS",
    "BASE_CHECKPOINTS",
    "BUST_THRESHOLD",
    "MAX_TARGET_POSITION",
    "CategoryAccuracyService",
    "CategoryPacingService",
    "ZoneBand",
    "classify_zone",
    "compute_accuracy",
    "hit_angle_for",
    "unused_suggestion",
]
