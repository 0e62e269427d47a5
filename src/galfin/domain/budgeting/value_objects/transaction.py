"""Transaction value object as supplied by the transaction store."""

from __future__ import annotations

import datetime as dt
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from galfin.domain.shared.time import coerce_to_date


class TransactionType(str, Enum):
    """Direction of a household transaction."""

    INCOME = "income"
    EXPENSE = "expense"


class Transaction(BaseModel):
    """Immutable record of a single income or expense."""

    id: str
    date: dt.date
    amount: Decimal
    category: str
    type: TransactionType
    description: str = ""

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
    )

    @field_validator("id", mode="before")
    @classmethod
    def validate_id(cls, v: Any) -> str:
        if v is None or str(v).strip() == "":
            msg = "Transaction id cannot be empty"
            raise ValueError(msg)
        return str(v)

    @field_validator("date", mode="before")
    @classmethod
    def validate_date(cls, v: Any) -> dt.date:
        try:
            return coerce_to_date(v)
        except (TypeError, ValueError) as e:
            msg = f"Unparseable transaction date: {v!r}"
            raise ValueError(msg) from e

    @field_validator("amount", mode="before")
    @classmethod
    def validate_amount(cls, v: Any) -> Decimal:
        try:
            amount = v if isinstance(v, Decimal) else Decimal(str(v))
        except (InvalidOperation, ValueError) as e:
            msg = f"Transaction amount must be numeric: {v!r}"
            raise ValueError(msg) from e

        if not amount.is_finite():
            msg = "Transaction amount must be finite"
            raise ValueError(msg)
        if amount < 0:
            msg = "Transaction amount cannot be negative"
            raise ValueError(msg)
        return amount

    @field_validator("type", mode="before")
    @classmethod
    def normalize_type(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    def is_expense(self) -> bool:
        return self.type == TransactionType.EXPENSE

    def falls_within(self, start: dt.date, end: dt.date) -> bool:
        return start <= self.date <= end
