"""Category pacing DTO."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from galfin.domain.analytics.value_objects import PacingCheckpoint


@dataclass
class CategoryPacingResult:
    """Pace tracker rows for one category."""

    category: str
    monthly_limit: Decimal
    currency: str
    period_label: str
    latest_month_label: str
    checkpoints: list[PacingCheckpoint] = field(default_factory=list)
    has_historical_sample: bool = False
