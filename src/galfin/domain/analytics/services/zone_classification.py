"""Zone bands, target placement and marker angles for accuracy records."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal

from galfin.domain.analytics.value_objects import AccuracyZone

BUST_THRESHOLD = Decimal("105")
MAX_TARGET_POSITION = 1.3
UNUSED_TARGET_POSITION = 0.0


@dataclass(frozen=True)
class ZoneBand:
    """A half-open percentage band ``(lower, upper]`` on the target.

    ``anchor`` is the band edge nearest to 100%; it maps to ``inner``. The
    position reaches ``outer`` ``span`` points away from the anchor, which is
    the band's last whole percentage, and stays there up to ``lower``.
    """

    zone: AccuracyZone
    lower: Decimal
    upper: Decimal
    anchor: Decimal
    span: Decimal
    inner: float
    outer: float

    def contains(self, percentage: Decimal) -> bool:
        return self.lower < percentage <= self.upper

    def position(self, percentage: Decimal) -> float:
        fraction = min(float(abs(percentage - self.anchor) / self.span), 1.0)
        return self.inner + fraction * (self.outer - self.inner)


# Integer percentages land exactly on 96-100, 101-105, 81-95, 61-80,
# 41-60, 21-40 and 1-20; the outermost whole percentage of each band sits
# on the next ring boundary.
ACCURACY_BANDS: tuple[ZoneBand, ...] = (
    ZoneBand(
        AccuracyZone.BULLSEYE,
        lower=Decimal("95"),
        upper=Decimal("100"),
        anchor=Decimal("100"),
        span=Decimal("4"),
        inner=0.0,
        outer=0.17,
    ),
    ZoneBand(
        AccuracyZone.RING1,
        lower=Decimal("100"),
        upper=BUST_THRESHOLD,
        anchor=Decimal("100"),
        span=Decimal("5"),
        inner=0.17,
        outer=0.33,
    ),
    ZoneBand(
        AccuracyZone.RING1,
        lower=Decimal("80"),
        upper=Decimal("95"),
        anchor=Decimal("95"),
        span=Decimal("14"),
        inner=0.17,
        outer=0.33,
    ),
    ZoneBand(
        AccuracyZone.RING2,
        lower=Decimal("60"),
        upper=Decimal("80"),
        anchor=Decimal("80"),
        span=Decimal("19"),
        inner=0.33,
        outer=0.5,
    ),
    ZoneBand(
        AccuracyZone.RING3,
        lower=Decimal("40"),
        upper=Decimal("60"),
        anchor=Decimal("60"),
        span=Decimal("19"),
        inner=0.5,
        outer=0.67,
    ),
    ZoneBand(
        AccuracyZone.RING4,
        lower=Decimal("20"),
        upper=Decimal("40"),
        anchor=Decimal("40"),
        span=Decimal("19"),
        inner=0.67,
        outer=0.83,
    ),
    ZoneBand(
        AccuracyZone.RING5,
        lower=Decimal("0"),
        upper=Decimal("20"),
        anchor=Decimal("20"),
        span=Decimal("19"),
        inner=0.83,
        outer=1.0,
    ),
)


def classify_zone(percentage: Decimal) -> tuple[AccuracyZone, float]:
    """Return the zone and target position for a spend percentage.

    Anything above 105% is a bust no matter how far over; the bust
    position grows with the overspend and is capped at 1.3.
    """
    if percentage > BUST_THRESHOLD:
        overshoot = float((percentage - BUST_THRESHOLD) / Decimal("100"))
        return AccuracyZone.BUST, 1.0 + min(overshoot, MAX_TARGET_POSITION - 1.0)

    for band in ACCURACY_BANDS:
        if band.contains(percentage):
            return band.zone, band.position(percentage)

    # Non-positive percentages only arise from inconsistent input.
    return AccuracyZone.RING5, 1.0


def hit_angle_for(category: str) -> float:
    """Stable marker angle in radians derived from the category name.

    Uses the 32-bit ``h * 31 + c`` string hash over UTF-16 code units,
    reduced to whole degrees, so the web client places markers identically.
    """
    encoded = category.encode("utf-16-le")
    value = 0
    for offset in range(0, len(encoded), 2):
        code_unit = int.from_bytes(encoded[offset : offset + 2], "little")
        value = (value * 31 + code_unit) & 0xFFFFFFFF
    if value >= 0x80000000:
        value -= 0x100000000
    return math.radians(abs(value) % 360)
