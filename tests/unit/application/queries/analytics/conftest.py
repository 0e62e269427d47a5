"""Shared fixtures for analytics query tests."""

from datetime import date
from unittest.mock import AsyncMock

import pytest

from tests.shared.factories import TestBudgetFactory, TestTransactionFactory


@pytest.fixture
def january_transactions():
    return [
        TestTransactionFactory.expense(500, "2024-01-04", "Groceries"),
        TestTransactionFactory.expense(1300, "2024-01-01", "Rent"),
        TestTransactionFactory.expense(30, "2024-01-20", "Dining"),
        TestTransactionFactory.income(4000, "2024-01-25"),
    ]


@pytest.fixture
def transaction_source(january_transactions):
    source = AsyncMock()
    source.list_transactions.return_value = january_transactions
    return source


@pytest.fixture
def budget_source():
    source = AsyncMock()
    source.get_budget_configuration.return_value = TestBudgetFactory.household()
    return source


@pytest.fixture
def fixed_clock():
    return lambda: date(2024, 1, 20)
