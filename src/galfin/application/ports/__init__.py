"""Ports the application layer depends on."""

from galfin.application.ports.budget_source import BudgetConfigurationSource
from galfin.application.ports.transaction_source import TransactionSource

__all__ = [
    "BudgetConfigurationSource",
    "TransactionSource",
]
