"""Unit tests for CategoryPacingQuery."""

from datetime import date
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from galfin.application.queries.analytics import CategoryPacingQuery
from galfin.domain.budgeting.value_objects import BudgetConfiguration
from galfin.domain.shared.exceptions import EntityNotFoundError, ErrorCode


class TestCategoryPacingQuery:
    @pytest.mark.asyncio
    async def test_returns_checkpoints_for_category(
        self, transaction_source, budget_source, fixed_clock
    ):
        query = CategoryPacingQuery(
            transaction_source, budget_source, clock=fixed_clock
        )

        result = await query.execute("Groceries")

        assert result.category == "Groceries"
        assert result.monthly_limit == Decimal("500")
        assert result.currency == "USD"
        assert result.latest_month_label == "January 2024"
        assert result.has_historical_sample is False
        assert [c.id for c in result.checkpoints] == [
            "week1",
            "mid",
            "week4",
            "current",
        ]
        assert result.checkpoints[0].current_amount == Decimal("500")
        assert result.checkpoints[-1].day == 20

    @pytest.mark.asyncio
    async def test_uses_override_for_latest_month(
        self, transaction_source, fixed_clock
    ):
        budget_source = AsyncMock()
        budget_source.get_budget_configuration.return_value = (
            BudgetConfiguration.model_validate(
                {
                    "categories": {"Groceries": {"monthlyLimit": 500}},
                    "monthlyOverrides": {"2024-01": {"Groceries": 250}},
                }
            )
        )
        query = CategoryPacingQuery(
            transaction_source, budget_source, clock=fixed_clock
        )

        result = await query.execute("Groceries")

        assert result.monthly_limit == Decimal("250")
        assert result.checkpoints[0].current_percentage == Decimal("200")

    @pytest.mark.asyncio
    async def test_multi_month_window_has_history(
        self, transaction_source, budget_source, fixed_clock
    ):
        query = CategoryPacingQuery(
            transaction_source, budget_source, clock=fixed_clock
        )

        result = await query.execute(
            "Groceries",
            start_date=date(2023, 12, 1),
            end_date=date(2024, 1, 31),
        )

        assert result.has_historical_sample is True
        assert result.checkpoints[0].average_amount == Decimal("0")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("category", ["Pets", "Travel"])
    async def test_unknown_or_inactive_category(
        self, transaction_source, budget_source, fixed_clock, category
    ):
        query = CategoryPacingQuery(
            transaction_source, budget_source, clock=fixed_clock
        )

        with pytest.raises(EntityNotFoundError) as exc_info:
            await query.execute(category)

        assert exc_info.value.code == ErrorCode.CATEGORY_NOT_FOUND
        assert exc_info.value.details == {"category": category}

    @pytest.mark.asyncio
    async def test_missing_budget(self, transaction_source, fixed_clock):
        budget_source = AsyncMock()
        budget_source.get_budget_configuration.return_value = None
        query = CategoryPacingQuery(
            transaction_source, budget_source, clock=fixed_clock
        )

        with pytest.raises(EntityNotFoundError) as exc_info:
            await query.execute("Groceries")

        assert exc_info.value.code == ErrorCode.BUDGET_NOT_FOUND
