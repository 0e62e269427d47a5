"""Checkpoint row of the category pace tracker."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict


class PacingCheckpoint(BaseModel):
    """Cumulative spend at a day of the latest month vs. earlier months."""

    id: str
    label: str
    day: int
    description: str
    current_amount: Decimal
    current_percentage: Decimal | None
    average_amount: Decimal | None = None
    average_percentage: Decimal | None = None
    variance_amount: Decimal | None = None
    variance_percentage: Decimal | None = None

    model_config = ConfigDict(frozen=True)
