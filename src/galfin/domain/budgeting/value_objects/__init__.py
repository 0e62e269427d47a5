"""Value objects for the budgeting domain."""

from galfin.domain.budgeting.value_objects.budget_configuration import (
    DEFAULT_CURRENCY,
    BudgetCategoryConfig,
    BudgetConfiguration,
    BudgetPriority,
)
from galfin.domain.budgeting.value_objects.transaction import (
    Transaction,
    TransactionType,
)

__all__ = [
    "DEFAULT_CURRENCY",
    "BudgetCategoryConfig",
    "BudgetConfiguration",
    "BudgetPriority",
    "Transaction",
    "TransactionType",
]
