"""Per-category accuracy record produced by the scoring engine."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict

from galfin.domain.analytics.value_objects.accuracy_zone import AccuracyZone


class CategoryAccuracy(BaseModel):
    """How closely one category's spending tracked its budget in a window.

    Records are derived on every query and never mutated. Percentages are
    on a 0-100 scale; ``accuracy_percentage`` and ``variance_percentage``
    are None when the category has spending against a zero budget.
    """

    category: str
    budget_average: Decimal
    actual_average: Decimal
    total_budgeted: Decimal
    total_spent: Decimal
    months_in_range: int
    accuracy_percentage: Decimal | None
    variance: Decimal
    variance_percentage: Decimal | None
    is_over_budget: bool
    is_unused: bool
    accuracy_zone: AccuracyZone
    target_position: float  # 0 = centre, 1 = outer ring edge, >1 = bust
    hit_angle: float  # radians, [0, 2*pi)
    transaction_count: int
    day_exceeded: int | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def deviation_from_target(self) -> Decimal | None:
        """Absolute distance of the accuracy percentage from 100%."""
        if self.accuracy_percentage is None:
            return None
        return abs(self.accuracy_percentage - Decimal("100"))
