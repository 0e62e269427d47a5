"""Category accuracy DTOs for target charts and grids."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from galfin.domain.analytics.value_objects import CategoryAccuracy


@dataclass
class AccuracySummary:
    """Headline figures shown above the target grid."""

    used_count: int
    on_target_count: int
    over_budget_count: int
    unused_count: int
    average_deviation: Decimal  # Mean |accuracy - 100| over scored categories

    @classmethod
    def from_items(cls, items: Iterable[CategoryAccuracy]) -> AccuracySummary:
        items = list(items)
        used = [item for item in items if not item.is_unused]
        deviations = [
            item.deviation_from_target
            for item in used
            if item.deviation_from_target is not None
        ]
        average_deviation = (
            sum(deviations, Decimal("0")) / len(deviations)
            if deviations
            else Decimal("0")
        )
        return cls(
            used_count=len(used),
            on_target_count=sum(1 for i in used if i.accuracy_zone.is_on_target()),
            over_budget_count=sum(1 for i in used if i.is_over_budget),
            unused_count=len(items) - len(used),
            average_deviation=average_deviation,
        )


@dataclass
class CategoryAccuracyResult:
    """Result of the category accuracy query for one reporting window."""

    period_label: str
    start_date: date
    end_date: date
    currency: str
    items: list[CategoryAccuracy] = field(default_factory=list)
    summary: AccuracySummary = field(
        default_factory=lambda: AccuracySummary(0, 0, 0, 0, Decimal("0"))
    )

    @property
    def months_in_range(self) -> int:
        return self.items[0].months_in_range if self.items else 0

    def sorted_for_display(self) -> list[CategoryAccuracy]:
        return sort_for_display(self.items)


def sort_for_display(items: Iterable[CategoryAccuracy]) -> list[CategoryAccuracy]:
    """Closest to 100% first; zero-budget busts next; unused categories last."""

    def sort_key(item: CategoryAccuracy) -> tuple[int, Decimal]:
        if item.is_unused:
            return (2, Decimal("0"))
        deviation = item.deviation_from_target
        if deviation is None:
            return (1, Decimal("0"))
        return (0, deviation)

    return sorted(items, key=sort_key)
