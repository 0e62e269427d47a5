"""Category pace tracking.

Compares cumulative spend at fixed days of the latest month in a window
with the average spend at the same day across the window's earlier months.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from galfin.domain.analytics.date_range import (
    MonthBucket,
    days_in_month,
    month_buckets,
)
from galfin.domain.analytics.value_objects import PacingCheckpoint
from galfin.domain.budgeting.value_objects import Transaction

ZERO = Decimal("0")
HUNDRED = Decimal("100")


@dataclass(frozen=True)
class CheckpointSpec:
    id: str
    label: str
    day: int
    description: str


BASE_CHECKPOINTS: tuple[CheckpointSpec, ...] = (
    CheckpointSpec(
        "week1",
        "End of Week 1",
        7,
        "First-week pace check after seven days.",
    ),
    CheckpointSpec(
        "mid",
        "Mid-month",
        15,
        "Halfway checkpoint for quick course correction.",
    ),
    CheckpointSpec(
        "week4",
        "End of Week 4",
        28,
        "Late-month snapshot before the month closes.",
    ),
)


class CategoryPacingService:
    """Service for month-to-date pacing of a single category."""

    @staticmethod
    def calculate(
        transactions: Iterable[Transaction],
        category: str,
        monthly_limit: Decimal,
        start_date: date,
        end_date: date,
        today: date,
        include_current: bool = True,
    ) -> list[PacingCheckpoint]:
        buckets = month_buckets(start_date, end_date)
        if not buckets:
            return []

        expenses = [
            t
            for t in transactions
            if t.is_expense()
            and t.category == category
            and t.falls_within(start_date, end_date)
        ]

        latest = buckets[-1]
        historical = buckets[:-1]
        checkpoints = list(BASE_CHECKPOINTS)
        if include_current:
            checkpoints.append(CategoryPacingService._current_checkpoint(latest, today))

        rows: list[PacingCheckpoint] = []
        for checkpoint in checkpoints:
            current_amount = _spent_through(expenses, latest, checkpoint.day)
            current_percentage = _percentage_of(current_amount, monthly_limit)

            average_amount: Decimal | None = None
            average_percentage: Decimal | None = None
            variance_amount: Decimal | None = None
            variance_percentage: Decimal | None = None

            if historical:
                totals = [
                    _spent_through(
                        expenses,
                        bucket,
                        min(checkpoint.day, days_in_month(bucket.year, bucket.month)),
                    )
                    for bucket in historical
                ]
                average_amount = sum(totals, ZERO) / len(totals)
                average_percentage = _percentage_of(average_amount, monthly_limit)
                variance_amount = current_amount - average_amount
                if current_percentage is not None and average_percentage is not None:
                    variance_percentage = current_percentage - average_percentage

            rows.append(
                PacingCheckpoint(
                    id=checkpoint.id,
                    label=checkpoint.label,
                    day=checkpoint.day,
                    description=checkpoint.description,
                    current_amount=current_amount,
                    current_percentage=current_percentage,
                    average_amount=average_amount,
                    average_percentage=average_percentage,
                    variance_amount=variance_amount,
                    variance_percentage=variance_percentage,
                )
            )
        return rows

    @staticmethod
    def _current_checkpoint(latest: MonthBucket, today: date) -> CheckpointSpec:
        last_day = days_in_month(latest.year, latest.month)
        if latest.contains(today):
            return CheckpointSpec(
                "current",
                "Current pace",
                min(today.day, last_day),
                "Where you stand as of today.",
            )
        return CheckpointSpec(
            "current",
            "Current pace",
            last_day,
            "Final position for the most recent month in range.",
        )


def _spent_through(
    expenses: Iterable[Transaction],
    month: MonthBucket,
    day: int,
) -> Decimal:
    return sum(
        (t.amount for t in expenses if month.contains(t.date) and t.date.day <= day),
        ZERO,
    )


def _percentage_of(amount: Decimal, limit: Decimal) -> Decimal | None:
    if limit <= 0:
        return None
    return amount / limit * HUNDRED
