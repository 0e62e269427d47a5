"""Factory contract for wiring queries to data sources."""

from __future__ import annotations

from typing import Protocol

from galfin.application.ports import BudgetConfigurationSource, TransactionSource


class SourceFactory(Protocol):
    """Creates the data sources queries read from."""

    def transaction_source(self) -> TransactionSource: ...

    def budget_configuration_source(self) -> BudgetConfigurationSource: ...
