"""Read-side contract of the transaction store."""

from __future__ import annotations

from typing import Protocol

from galfin.domain.budgeting.value_objects import Transaction


class TransactionSource(Protocol):
    """Supplies the household's transactions (income and expense)."""

    async def list_transactions(self) -> list[Transaction]:
        """Return all transactions; analytics filters by date and type."""
        ...
