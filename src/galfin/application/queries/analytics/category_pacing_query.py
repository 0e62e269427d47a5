"""Pace tracker for a single budget category."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date
from typing import TYPE_CHECKING

from galfin.application.dtos.analytics import CategoryPacingResult
from galfin.application.ports import BudgetConfigurationSource, TransactionSource
from galfin.application.queries.analytics.reporting_window import (
    resolve_reporting_window,
)
from galfin.domain.analytics.date_range import DateRangeType, month_buckets
from galfin.domain.analytics.services import CategoryPacingService
from galfin.domain.shared.exceptions import EntityNotFoundError, ErrorCode
from galfin.domain.shared.time import today_utc
from galfin_config import get_settings

if TYPE_CHECKING:
    from galfin.application.factories import SourceFactory

logger = logging.getLogger(__name__)


class CategoryPacingQuery:
    """Query producing checkpoint pacing rows for one category."""

    def __init__(
        self,
        transaction_source: TransactionSource,
        budget_source: BudgetConfigurationSource,
        default_range: DateRangeType = DateRangeType.MTD,
        clock: Callable[[], date] = today_utc,
    ):
        self._transactions = transaction_source
        self._budgets = budget_source
        self._default_range = default_range
        self._clock = clock

    @classmethod
    def from_factory(cls, factory: SourceFactory) -> CategoryPacingQuery:
        return cls(
            transaction_source=factory.transaction_source(),
            budget_source=factory.budget_configuration_source(),
            default_range=get_settings().default_date_range,
        )

    async def execute(
        self,
        category: str,
        start_date: date | None = None,
        end_date: date | None = None,
        date_range: DateRangeType | str | None = None,
    ) -> CategoryPacingResult:
        today = self._clock()
        window = resolve_reporting_window(
            today=today,
            default_range=self._default_range,
            start_date=start_date,
            end_date=end_date,
            date_range=date_range,
        )

        budget = await self._budgets.get_budget_configuration()
        if budget is None:
            msg = "No budget configuration available"
            raise EntityNotFoundError(msg, ErrorCode.BUDGET_NOT_FOUND)

        config = budget.categories.get(category)
        if config is None or not config.is_active:
            msg = f"Category not found in active budget: {category}"
            raise EntityNotFoundError(
                msg,
                ErrorCode.CATEGORY_NOT_FOUND,
                details={"category": category},
            )

        buckets = month_buckets(window.start_date, window.end_date)
        latest = buckets[-1]
        monthly_limit = budget.limit_for(category, latest.year, latest.month)

        transactions = await self._transactions.list_transactions()
        checkpoints = CategoryPacingService.calculate(
            transactions,
            category,
            monthly_limit,
            window.start_date,
            window.end_date,
            today,
        )
        logger.debug("Computed %d pacing checkpoints for %s", len(checkpoints), category)

        return CategoryPacingResult(
            category=category,
            monthly_limit=monthly_limit,
            currency=budget.currency,
            period_label=window.label,
            latest_month_label=latest.label,
            checkpoints=checkpoints,
            has_historical_sample=len(buckets) > 1,
        )
