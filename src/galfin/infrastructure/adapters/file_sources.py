"""JSON and CSV adapters for transactions and budget configuration.

Files follow the web client's export shape: transactions are objects with
``id``, ``date``, ``amount``, ``category`` and ``type``; the budget is an
object with ``currency``, ``categories`` and optional ``monthlyOverrides``.
"""

from __future__ import annotations

import csv
import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from galfin.domain.budgeting.value_objects import BudgetConfiguration, Transaction
from galfin.domain.shared.exceptions import (
    DataSourceError,
    ErrorCode,
    ValidationError,
)

logger = logging.getLogger(__name__)


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        msg = f"Data file not found: {path}"
        raise DataSourceError(msg, details={"path": str(path)}) from e
    except OSError as e:
        msg = f"Could not read data file: {path}"
        raise DataSourceError(msg, details={"path": str(path)}) from e


def _load_json(path: Path) -> Any:
    try:
        return json.loads(_read_text(path))
    except json.JSONDecodeError as e:
        msg = f"Malformed JSON in {path}: {e.msg} (line {e.lineno})"
        raise DataSourceError(
            msg,
            ErrorCode.DATA_SOURCE_MALFORMED,
            details={"path": str(path)},
        ) from e


def parse_transactions(rows: Iterable[Any], origin: str) -> list[Transaction]:
    """Validate raw rows, skipping (and logging) the ones that fail."""
    transactions: list[Transaction] = []
    for index, row in enumerate(rows):
        if not isinstance(row, Mapping):
            logger.warning("Skipping non-object row %d in %s", index, origin)
            continue
        try:
            transactions.append(Transaction.model_validate(dict(row)))
        except PydanticValidationError as e:
            logger.warning(
                "Skipping invalid transaction row %d in %s: %s",
                index,
                origin,
                e.errors()[0].get("msg", "invalid"),
            )
    return transactions


class JsonTransactionSource:
    """Transactions stored as a JSON array."""

    def __init__(self, path: Path | str):
        self._path = Path(path)

    async def list_transactions(self) -> list[Transaction]:
        payload = _load_json(self._path)
        if isinstance(payload, Mapping):
            payload = payload.get("transactions", [])
        if not isinstance(payload, list):
            msg = f"Expected a list of transactions in {self._path}"
            raise DataSourceError(msg, ErrorCode.DATA_SOURCE_MALFORMED)

        transactions = parse_transactions(payload, str(self._path))
        logger.debug("Loaded %d transactions from %s", len(transactions), self._path)
        return transactions


class CsvTransactionSource:
    """Transactions stored as CSV with a header row."""

    def __init__(self, path: Path | str):
        self._path = Path(path)

    async def list_transactions(self) -> list[Transaction]:
        reader = csv.DictReader(_read_text(self._path).splitlines())
        transactions = parse_transactions(reader, str(self._path))
        logger.debug("Loaded %d transactions from %s", len(transactions), self._path)
        return transactions


class JsonBudgetConfigurationSource:
    """Budget configuration stored as a JSON object."""

    def __init__(self, path: Path | str, default_currency: str = "EUR"):
        self._path = Path(path)
        self._default_currency = default_currency

    async def get_budget_configuration(self) -> BudgetConfiguration | None:
        if not self._path.exists():
            logger.info("No budget configuration at %s", self._path)
            return None

        payload = _load_json(self._path)
        if not isinstance(payload, Mapping):
            msg = f"Expected a budget object in {self._path}"
            raise DataSourceError(msg, ErrorCode.DATA_SOURCE_MALFORMED)

        data = dict(payload)
        data.setdefault("currency", self._default_currency)
        try:
            return BudgetConfiguration.model_validate(data)
        except PydanticValidationError as e:
            msg = f"Invalid budget configuration in {self._path}"
            raise ValidationError(
                msg,
                ErrorCode.INVALID_BUDGET_CONFIGURATION,
                details={"errors": e.errors(include_url=False)},
            ) from e


class FileSourceFactory:
    """Builds file-backed sources; ``.csv`` transaction files use the CSV reader."""

    def __init__(
        self,
        transactions_path: Path | str,
        budget_path: Path | str,
        default_currency: str = "EUR",
    ):
        self._transactions_path = Path(transactions_path)
        self._budget_path = Path(budget_path)
        self._default_currency = default_currency

    def transaction_source(self) -> JsonTransactionSource | CsvTransactionSource:
        if self._transactions_path.suffix.lower() == ".csv":
            return CsvTransactionSource(self._transactions_path)
        return JsonTransactionSource(self._transactions_path)

    def budget_configuration_source(self) -> JsonBudgetConfigurationSource:
        return JsonBudgetConfigurationSource(
            self._budget_path,
            default_currency=self._default_currency,
        )
