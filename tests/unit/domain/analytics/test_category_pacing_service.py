"""Tests for category pace tracking."""

from datetime import date
from decimal import Decimal

from galfin.domain.analytics.services import CategoryPacingService
from tests.shared.factories import TestTransactionFactory

LIMIT = Decimal("400")


def quarter_transactions():
    return [
        TestTransactionFactory.expense(100, "2024-01-05"),
        TestTransactionFactory.expense(100, "2024-01-20"),
        TestTransactionFactory.expense(50, "2024-02-03"),
        TestTransactionFactory.expense(150, "2024-02-14"),
        TestTransactionFactory.expense(80, "2024-03-02"),
        TestTransactionFactory.expense(40, "2024-03-10"),
        TestTransactionFactory.expense(60, "2024-03-18"),
        TestTransactionFactory.expense(999, "2024-03-05", category="Rent"),
        TestTransactionFactory.income(999, "2024-03-05", category="Groceries"),
    ]


def calculate(transactions, start, end, today, limit=LIMIT):
    rows = CategoryPacingService.calculate(
        transactions,
        "Groceries",
        limit,
        start,
        end,
        today,
    )
    return {row.id: row for row in rows}


class TestCategoryPacingService:
    def test_checkpoints_compare_latest_month_with_history(self):
        rows = calculate(
            quarter_transactions(),
            date(2024, 1, 1),
            date(2024, 3, 31),
            today=date(2024, 3, 20),
        )

        assert list(rows) == ["week1", "mid", "week4", "current"]

        week1 = rows["week1"]
        assert week1.day == 7
        assert week1.current_amount == Decimal("80")
        assert week1.current_percentage == Decimal("20")
        assert week1.average_amount == Decimal("75")
        assert week1.average_percentage == Decimal("18.75")
        assert week1.variance_amount == Decimal("5")
        assert week1.variance_percentage == Decimal("1.25")

        mid = rows["mid"]
        assert mid.current_amount == Decimal("120")
        assert mid.average_amount == Decimal("150")
        assert mid.variance_amount == Decimal("-30")

        week4 = rows["week4"]
        assert week4.current_amount == Decimal("180")
        assert week4.average_amount == Decimal("200")

    def test_current_checkpoint_uses_today_in_current_month(self):
        rows = calculate(
            quarter_transactions(),
            date(2024, 1, 1),
            date(2024, 3, 31),
            today=date(2024, 3, 20),
        )

        current = rows["current"]
        assert current.day == 20
        assert current.label == "Current pace"
        assert current.description == "Where you stand as of today."
        assert current.current_amount == Decimal("180")
        assert current.average_amount == Decimal("200")

    def test_current_checkpoint_uses_month_end_for_past_months(self):
        rows = calculate(
            quarter_transactions(),
            date(2024, 1, 1),
            date(2024, 2, 29),
            today=date(2024, 6, 1),
        )

        current = rows["current"]
        assert current.day == 29
        assert current.current_amount == Decimal("200")
        assert current.description.startswith("Final position")

    def test_single_month_has_no_history(self):
        rows = calculate(
            quarter_transactions(),
            date(2024, 3, 1),
            date(2024, 3, 31),
            today=date(2024, 3, 20),
        )

        for row in rows.values():
            assert row.average_amount is None
            assert row.average_percentage is None
            assert row.variance_amount is None
            assert row.variance_percentage is None

    def test_zero_limit_has_no_percentages(self):
        rows = calculate(
            quarter_transactions(),
            date(2024, 1, 1),
            date(2024, 3, 31),
            today=date(2024, 3, 20),
            limit=Decimal("0"),
        )

        week1 = rows["week1"]
        assert week1.current_percentage is None
        assert week1.average_percentage is None
        assert week1.variance_percentage is None
        assert week1.variance_amount == Decimal("5")

    def test_checkpoint_day_is_clamped_for_short_months(self):
        transactions = [
            TestTransactionFactory.expense(100, "2023-02-28"),
            TestTransactionFactory.expense(10, "2023-03-30"),
        ]

        rows = calculate(
            transactions,
            date(2023, 2, 1),
            date(2023, 3, 31),
            today=date(2023, 3, 31),
        )

        assert rows["current"].day == 31
        assert rows["current"].average_amount == Decimal("100")

    def test_reversed_window_is_empty(self):
        rows = CategoryPacingService.calculate(
            quarter_transactions(),
            "Groceries",
            LIMIT,
            date(2024, 3, 1),
            date(2024, 2, 1),
            date(2024, 3, 1),
        )
        assert rows == []
