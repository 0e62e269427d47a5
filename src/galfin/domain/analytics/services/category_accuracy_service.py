"""Category accuracy scoring.

Compares each active category's spending over a date window with its
budget, averaged per calendar month, and places the result on the
accuracy target.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable, Mapping
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from galfin.domain.analytics.date_range import MonthBucket, month_buckets
from galfin.domain.analytics.services.zone_classification import (
    MAX_TARGET_POSITION,
    UNUSED_TARGET_POSITION,
    classify_zone,
    hit_angle_for,
)
from galfin.domain.analytics.value_objects import AccuracyZone, CategoryAccuracy
from galfin.domain.budgeting.value_objects import (
    BudgetCategoryConfig,
    BudgetConfiguration,
    Transaction,
)
from galfin.domain.shared.time import coerce_to_date

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
HUNDRED = Decimal("100")

BudgetConfigInput = (
    BudgetConfiguration | Mapping[str, BudgetCategoryConfig | Mapping[str, Any]]
)
TransactionInput = Transaction | Mapping[str, Any]


class CategoryAccuracyService:
    """Service for calculating category spending accuracy."""

    @staticmethod
    def calculate(
        transactions: Iterable[TransactionInput],
        budget_config: BudgetConfigInput | None,
        start_date: date | datetime | str,
        end_date: date | datetime | str,
    ) -> list[CategoryAccuracy]:
        """Return one record per active category, in configuration order.

        Never raises for degenerate input: a missing configuration, an
        unparseable or reversed window yields an empty list. Unusable
        transaction rows and budget entries are ignored.
        """
        config = CategoryAccuracyService._coerce_config(budget_config)
        if config is None:
            return []

        try:
            start = coerce_to_date(start_date)
            end = coerce_to_date(end_date)
        except (TypeError, ValueError):
            logger.debug("Unparseable accuracy window %r..%r", start_date, end_date)
            return []
        if end < start:
            logger.debug("Empty accuracy window %s..%s", start, end)
            return []

        buckets = month_buckets(start, end)
        expenses = CategoryAccuracyService._expenses_by_category(
            transactions,
            start,
            end,
        )

        return [
            CategoryAccuracyService.calculate_category(
                category=name,
                expenses=expenses.get(name, []),
                config=config,
                buckets=buckets,
            )
            for name, _ in config.active_categories()
        ]

    @staticmethod
    def calculate_category(
        category: str,
        expenses: list[Transaction],
        config: BudgetConfiguration,
        buckets: list[MonthBucket],
    ) -> CategoryAccuracy:
        """Score a single category from its in-window expense transactions."""
        months = len(buckets)
        total_spent = sum((t.amount for t in expenses), ZERO)
        total_budgeted = sum(
            (config.limit_for(category, b.year, b.month) for b in buckets),
            ZERO,
        )

        budget_average = total_budgeted / months
        actual_average = total_spent / months
        variance = actual_average - budget_average
        variance_percentage = (
            variance / budget_average * HUNDRED if budget_average > 0 else None
        )

        is_unused = total_spent == 0
        accuracy_percentage: Decimal | None
        if is_unused:
            accuracy_percentage = ZERO
            zone, position = AccuracyZone.UNUSED, UNUSED_TARGET_POSITION
        elif budget_average == 0:
            # Any spend against a zero budget is a bust.
            accuracy_percentage = None
            zone, position = AccuracyZone.BUST, MAX_TARGET_POSITION
        else:
            accuracy_percentage = actual_average / budget_average * HUNDRED
            zone, position = classify_zone(accuracy_percentage)

        latest = buckets[-1]
        day_exceeded = CategoryAccuracyService.find_day_exceeded(
            expenses,
            latest,
            config.limit_for(category, latest.year, latest.month),
        )

        return CategoryAccuracy(
            category=category,
            budget_average=budget_average,
            actual_average=actual_average,
            total_budgeted=total_budgeted,
            total_spent=total_spent,
            months_in_range=months,
            accuracy_percentage=accuracy_percentage,
            variance=variance,
            variance_percentage=variance_percentage,
            is_over_budget=actual_average > budget_average,
            is_unused=is_unused,
            accuracy_zone=zone,
            target_position=position,
            hit_angle=hit_angle_for(category),
            transaction_count=len(expenses),
            day_exceeded=day_exceeded,
        )

    @staticmethod
    def find_day_exceeded(
        expenses: Iterable[Transaction],
        month: MonthBucket,
        limit: Decimal,
    ) -> int | None:
        """First day of ``month`` on which cumulative spend passed ``limit``."""
        daily: dict[int, Decimal] = defaultdict(Decimal)
        for transaction in expenses:
            if month.contains(transaction.date):
                daily[transaction.date.day] += transaction.amount

        cumulative = ZERO
        for day in sorted(daily):
            cumulative += daily[day]
            if cumulative > limit:
                return day
        return None

    @staticmethod
    def _coerce_config(
        budget_config: BudgetConfigInput | None,
    ) -> BudgetConfiguration | None:
        """Accept a configuration, a full document or a flat ``{name: config}``.

        Category entries that fail validation are dropped so one broken
        entry does not hide the others.
        """
        if budget_config is None:
            return None
        if isinstance(budget_config, BudgetConfiguration):
            return budget_config
        if not isinstance(budget_config, Mapping):
            logger.debug(
                "Ignoring budget configuration of type %s",
                type(budget_config).__name__,
            )
            return None

        if "categories" not in budget_config:
            return BudgetConfiguration(categories=_valid_categories(budget_config))

        entries = budget_config.get("categories")
        categories = _valid_categories(entries if isinstance(entries, Mapping) else {})
        try:
            return BudgetConfiguration.model_validate(
                {**budget_config, "categories": categories}
            )
        except PydanticValidationError as e:
            logger.debug(
                "Budget settings other than categories ignored: %s",
                e.errors()[0].get("msg", "invalid"),
            )
            return BudgetConfiguration(categories=categories)

    @staticmethod
    def _expenses_by_category(
        transactions: Iterable[TransactionInput],
        start: date,
        end: date,
    ) -> dict[str, list[Transaction]]:
        expenses: dict[str, list[Transaction]] = defaultdict(list)
        skipped = 0
        for index, item in enumerate(transactions):
            transaction = _as_transaction(item, index)
            if transaction is None:
                skipped += 1
                continue
            if transaction.is_expense() and transaction.falls_within(start, end):
                expenses[transaction.category].append(transaction)

        if skipped:
            logger.debug("Ignored %d unusable transaction rows", skipped)
        return expenses


def _valid_categories(
    entries: Mapping[str, BudgetCategoryConfig | Mapping[str, Any]],
) -> dict[str, BudgetCategoryConfig]:
    categories: dict[str, BudgetCategoryConfig] = {}
    for name, config in entries.items():
        if isinstance(config, BudgetCategoryConfig):
            categories[str(name)] = config
            continue
        try:
            categories[str(name)] = BudgetCategoryConfig.model_validate(config)
        except PydanticValidationError as e:
            logger.debug(
                "Ignoring budget entry %r: %s",
                name,
                e.errors()[0].get("msg", "invalid"),
            )
    return categories


def _as_transaction(
item: TransactionInput, index: int) -> Transaction | None:
    if isinstance(item, Transaction):
        return item
    if not isinstance(item, Mapping):
        return None
    data = dict(item)
    data.setdefault("id", f"row-{index}")
    try:
        return Transaction.model_validate(data)
    except PydanticValidationError:
        return None


def compute_accuracy(
    transactions: Iterable[TransactionInput],
    budget_config: BudgetConfigInput | None,
    start_date: date | datetime | str,
    end_date: date | datetime | str,
) -> list[CategoryAccuracy]:
    """Score every active budget category over ``[start_date, end_date]``."""
    return CategoryAccuracyService.calculate(
        transactions,
        budget_config,
        start_date,
        end_date,
    )


def unused_suggestion(months_in_range: int) -> str:
    """Suggestion shown for a category nobody spent from."""
    month_text = "month" if months_in_range == 1 else f"{months_in_range} months"
    return (
        f"This budget wasn't used throughout {month_text}. "
        "Consider reallocating to other categories?"
    )
