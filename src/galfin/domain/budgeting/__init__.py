"""Budgeting domain: transactions and budget configuration."""

from galfin.domain.budgeting.value_objects import (
    BudgetCategoryConfig,
    BudgetConfiguration,
    BudgetPriority,
    Transaction,
    TransactionType,
)

__all__ = [
    "BudgetCategoryConfig",
    "BudgetConfiguration",
    "BudgetPriority",
    "Transaction",
    "TransactionType",
]
