"""Shared domain primitives."""

from galfin.domain.shared.exceptions import (
    DataSourceError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)
from galfin.domain.shared.time import coerce_to_date, today_utc, utc_now

__all__ = [
    "DataSourceError",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "ValidationError",
    "coerce_to_date",
    "today_utc",
    "utc_now",
]
