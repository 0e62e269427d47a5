"""Read-side contract of the budget configuration store."""

from __future__ import annotations

from typing import Protocol

from galfin.domain.budgeting.value_objects import BudgetConfiguration


class BudgetConfigurationSource(Protocol):
    """Supplies the current budget configuration."""

    async def get_budget_configuration(self) -> BudgetConfiguration | None:
        """Return the configuration, or None when no budget is set up."""
        ...
