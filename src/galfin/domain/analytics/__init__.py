"""Budget accuracy analytics domain."""

from galfin.domain.analytics.date_range import (
    DateRange,
    DateRangeType,
    MonthBucket,
    days_in_month,
    month_buckets,
    months_between,
    resolve_date_range,
)
from galfin.domain.analytics.services import (
    CategoryAccuracyService,
    CategoryPacingService,
    classify_zone,
    compute_accuracy,
    hit_angle_for,
    unused_suggestion,
)
from galfin.domain.analytics.value_objects import (
    AccuracyZone,
    CategoryAccuracy,
    PacingCheckpoint,
)

__all__ = [
    "AccuracyZone",
    "CategoryAccuracy",
    "CategoryAccuracyService",
    "CategoryPacingService",
    "DateRange",
    "DateRangeType",
    "MonthBucket",
    "PacingCheckpoint",
    "classify_zone",
    "compute_accuracy",
    "days_in_month",
    "hit_angle_for",
    "month_buckets",
    "months_between",
    "resolve_date_range",
    "unused_suggestion",
]
