"""Accuracy zones of the budget target and their display metadata."""

from enum import Enum


class AccuracyZone(str, Enum):
    """Discrete classification of how closely spend matched budget.

    The bands are asymmetric: underspending walks out through five rings,
    overspending gets a single narrow ring (101-105%) before busting.
    """

    BULLSEYE = "bullseye"  # 96-100%
    RING1 = "ring1"  # 81-95% or 101-105%
    RING2 = "ring2"  # 61-80%
    RING3 = "ring3"  # 41-60%
    RING4 = "ring4"  # 21-40%
    RING5 = "ring5"  # 1-20%
    BUST = "bust"  # >105%
    UNUSED = "unused"  # no spending in the window

    @property
    def label(self) -> str:
        return _ZONE_STYLES[self][0]

    @property
    def color(self) -> str:
        return _ZONE_STYLES[self][1]

    @property
    def description(self) -> str:
        return _ZONE_STYLES[self][2]

    @property
    def performance_label(self) -> str:
        return _PERFORMANCE_LABELS[self]

    def is_on_target(self) -> bool:
        return self is AccuracyZone.BULLSEYE


_ZONE_STYLES: dict[AccuracyZone, tuple[str, str, str]] = {
    AccuracyZone.BULLSEYE: ("Perfect", "#10b981", "96-100% of budget"),
    AccuracyZone.RING1: ("Excellent", "#84cc16", "81-95% or 101-105% of budget"),
    AccuracyZone.RING2: ("Good", "#eab308", "61-80% of budget"),
    AccuracyZone.RING3: ("Fair", "#f97316", "41-60% of budget"),
    AccuracyZone.RING4: ("Poor", "#ef4444", "21-40% of budget"),
    AccuracyZone.RING5: ("Minimal", "#b91c1c", "1-20% of budget"),
    AccuracyZone.BUST: ("Over Budget", "#dc2626", "More than 105% of budget"),
    AccuracyZone.UNUSED: ("Unused", "#9ca3af", "No spending in this period"),
}

_PERFORMANCE_LABELS: dict[AccuracyZone, str] = {
    AccuracyZone.BULLSEYE: "Perfect tracking",
    AccuracyZone.RING1: "Excellent budgeting",
    AccuracyZone.RING2: "Good control",
    AccuracyZone.RING3: "Needs attention",
    AccuracyZone.RING4: "Poor accuracy",
    AccuracyZone.RING5: "Significantly under",
    AccuracyZone.BUST: "Over budget",
    AccuracyZone.UNUSED: "No activity",
}
