"""File-backed data sources."""

from galfin.infrastructure.adapters.file_sources import (
    CsvTransactionSource,
    FileSourceFactory,
    JsonBudgetConfigurationSource,
    JsonTransactionSource,
)

__all__ = [
    "CsvTransactionSource",
    "FileSourceFactory",
    "JsonBudgetConfigurationSource",
    "JsonTransactionSource",
]
