"""Score every active budget category over a reporting window."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date
from typing import TYPE_CHECKING

from galfin.application.dtos.analytics import AccuracySummary, CategoryAccuracyResult
from galfin.application.ports import BudgetConfigurationSource, TransactionSource
from galfin.application.queries.analytics.reporting_window import (
    resolve_reporting_window,
)
from galfin.domain.analytics.date_range import DateRangeType
from galfin.domain.analytics.services import CategoryAccuracyService
from galfin.domain.shared.time import today_utc
from galfin_config import get_settings

if TYPE_CHECKING:
    from galfin.application.factories import SourceFactory

logger = logging.getLogger(__name__)


class CategoryAccuracyQuery:
    """Query producing the category accuracy view."""

    def __init__(
        self,
        transaction_source: TransactionSource,
        budget_source: BudgetConfigurationSource,
        default_range: DateRangeType = DateRangeType.MTD,
        default_currency: str = "EUR",
        clock: Callable[[], date] = today_utc,
    ):
        self._transactions = transaction_source
        self._budgets = budget_source
        self._default_range = default_range
        self._default_currency = default_currency
        self._clock = clock

    @classmethod
    def from_factory(cls, factory: SourceFactory) -> CategoryAccuracyQuery:
        settings = get_settings()
        return cls(
            transaction_source=factory.transaction_source(),
            budget_source=factory.budget_configuration_source(),
            default_range=settings.default_date_range,
            default_currency=settings.default_currency,
        )

    async def execute(
        self,
        start_date: date | None = None,
        end_date: date | None = None,
        date_range: DateRangeType | str | None = None,
    ) -> CategoryAccuracyResult:
        window = resolve_reporting_window(
            today=self._clock(),
            default_range=self._default_range,
            start_date=start_date,
            end_date=end_date,
            date_range=date_range,
        )

        budget = await self._budgets.get_budget_configuration()
        if budget is None:
            logger.info("No budget configuration; accuracy view is empty")
            return CategoryAccuracyResult(
                period_label=window.label,
                start_date=window.start_date,
                end_date=window.end_date,
                currency=self._default_currency,
            )

        transactions = await self._transactions.list_transactions()
        items = CategoryAccuracyService.calculate(
            transactions,
            budget,
            window.start_date,
            window.end_date,
        )
        logger.info(
            "Scored %d categories over %s (%d transactions)",
            len(items),
            window.label,
            len(transactions),
        )

        return CategoryAccuracyResult(
            period_label=window.label,
            start_date=window.start_date,
            end_date=window.end_date,
            currency=budget.currency,
            items=items,
            summary=AccuracySummary.from_items(items),
        )
