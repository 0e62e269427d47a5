"""Budget configuration value objects.

The configuration is owned by the budget settings collaborator and is
read-only to analytics. Field aliases accept the camelCase keys the web
client stores (``monthlyLimit``, ``isActive``, ...).
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

DEFAULT_CURRENCY = "EUR"


def _to_decimal(value: Any, field_name: str) -> Decimal:
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError) as e:
        msg = f"{field_name} must be numeric: {value!r}"
        raise ValueError(msg) from e
    if not amount.is_finite():
        msg = f"{field_name} must be finite"
        raise ValueError(msg)
    return amount


class BudgetPriority(str, Enum):
    """How important it is to stay within a category's limit."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class BudgetCategoryConfig(BaseModel):
    """Settings for a single budget category."""

    monthly_limit: Decimal = Field(
        default=Decimal("0"),
        validation_alias=AliasChoices("monthly_limit", "monthlyLimit"),
    )
    alert_threshold: Decimal = Field(
        default=Decimal("80"),
        validation_alias=AliasChoices("alert_threshold", "alertThreshold"),
    )
    is_active: bool = Field(
        default=True,
        validation_alias=AliasChoices("is_active", "isActive"),
    )
    color: str | None = None
    description: str = ""
    priority: BudgetPriority = BudgetPriority.MEDIUM

    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_validator("monthly_limit", mode="before")
    @classmethod
    def validate_monthly_limit(cls, v: Any) -> Decimal:
        limit = _to_decimal(v, "Monthly limit")
        if limit < 0:
            msg = "Monthly limit cannot be negative"
            raise ValueError(msg)
        return limit

    @field_validator("alert_threshold", mode="before")
    @classmethod
    def validate_alert_threshold(cls, v: Any) -> Decimal:
        threshold = _to_decimal(v, "Alert threshold")
        if threshold < 0:
            msg = "Alert threshold cannot be negative"
            raise ValueError(msg)
        return threshold


class BudgetConfiguration(BaseModel):
    """Per-category budget settings plus optional month-specific limits."""

    categories: dict[str, BudgetCategoryConfig] = Field(default_factory=dict)
    currency: str = DEFAULT_CURRENCY
    monthly_overrides: dict[str, dict[str, Decimal]] = Field(
        default_factory=dict,
        validation_alias=AliasChoices(
            "monthly_overrides",
            "monthlyOverrides",
            "monthlyBudgets",
        ),
    )

    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_validator("currency", mode="before")
    @classmethod
    def validate_currency(cls, v: Any) -> str:
        code = str(v or "").strip().upper()
        if len(code) != 3 or not code.isalpha():
            msg = f"Currency code must be 3 letters: {v!r}"
            raise ValueError(msg)
        return code

    @field_validator("monthly_overrides", mode="before")
    @classmethod
    def validate_monthly_overrides(cls, v: Any) -> dict[str, dict[str, Decimal]]:
        if v is None:
            return {}
        if not isinstance(v, Mapping):
            msg = "Monthly overrides must be a mapping of YYYY-MM to limits"
            raise ValueError(msg)

        overrides: dict[str, dict[str, Decimal]] = {}
        for month_key, limits in v.items():
            year, month = _parse_month_key(str(month_key))
            normalized_key = f"{year:04d}-{month:02d}"
            if not isinstance(limits, Mapping):
                msg = f"Overrides for {month_key} must be a mapping"
                raise ValueError(msg)
            month_limits: dict[str, Decimal] = {}
            for category, amount in limits.items():
                limit = _to_decimal(amount, f"Override for {category}")
                if limit < 0:
                    msg = f"Override for {category} in {month_key} is negative"
                    raise ValueError(msg)
                month_limits[str(category)] = limit
            overrides[normalized_key] = month_limits
        return overrides

    @classmethod
    def from_mapping(
        cls,
        categories: Mapping[str, BudgetCategoryConfig | Mapping[str, Any]],
        currency: str = DEFAULT_CURRENCY,
    ) -> BudgetConfiguration:
        """Build a configuration from a plain ``{name: config}`` mapping."""
        return cls(
            categories={
                name: (
                    config
                    if isinstance(config, BudgetCategoryConfig)
                    else BudgetCategoryConfig.model_validate(config)
                )
                for name, config in categories.items()
            },
            currency=currency,
        )

    def active_categories(self) -> Iterator[tuple[str, BudgetCategoryConfig]]:
        """Yield active categories in configuration order."""
        for name, config in self.categories.items():
            if config.is_active:
                yield name, config

    def limit_for(self, category: str, year: int, month: int) -> Decimal:
        """Return the limit for ``category`` in a calendar month."""
        month_limits = self.monthly_overrides.get(f"{year:04d}-{month:02d}", {})
        if category in month_limits:
            return month_limits[category]
        config = self.categories.get(category)
        if config is None:
            return Decimal("0")
        return config.monthly_limit


def _parse_month_key(month_key: str) -> tuple[int, int]:
    try:
        year_str, month_str = month_key.split("-")
        year, month = int(year_str), int(month_str)
    except ValueError as e:
        msg = f"Invalid month key {month_key!r}. Use YYYY-MM"
        raise ValueError(msg) from e
    if not 1 <= month <= 12:
        msg = f"Invalid month key {month_key!r}. Use YYYY-MM"
        raise ValueError(msg)
    return year, month
