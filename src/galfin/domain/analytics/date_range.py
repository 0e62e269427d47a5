"""Calendar-month arithmetic and preset reporting windows.

The analytics engine averages over calendar months touched by a window,
so a window from the 15th of one month to the 10th of the next counts as
two months. Nothing here reads the clock; callers pass ``today``.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date
from enum import Enum

QUARTER_NAMES = ("Q1", "Q2", "Q3", "Q4")


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def months_between(start: date, end: date) -> int:
    """Count calendar months touched by ``[start, end]`` (0 if reversed)."""
    if end < start:
        return 0
    return (end.year - start.year) * 12 + (end.month - start.month) + 1


@dataclass(frozen=True)
class MonthBucket:
    """A single calendar month."""

    year: int
    month: int

    @property
    def key(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"

    @property
    def start(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def end(self) -> date:
        return date(self.year, self.month, days_in_month(self.year, self.month))

    @property
    def label(self) -> str:
        return self.start.strftime("%B %Y")

    def contains(self, day: date) -> bool:
        return day.year == self.year and day.month == self.month

    def next(self) -> MonthBucket:
        if self.month == 12:
            return MonthBucket(self.year + 1, 1)
        return MonthBucket(self.year, self.month + 1)


def month_buckets(start: date, end: date) -> list[MonthBucket]:
    """Return every calendar month touched by ``[start, end]`` in order."""
    buckets: list[MonthBucket] = []
    if end < start:
        return buckets

    cursor = MonthBucket(start.year, start.month)
    last = MonthBucket(end.year, end.month)
    while (cursor.year, cursor.month) <= (last.year, last.month):
        buckets.append(cursor)
        cursor = cursor.next()
    return buckets


class DateRangeType(str, Enum):
    """Preset reporting windows offered by the analytics views."""

    MTD = "mtd"
    YTD = "ytd"
    QTD = "qtd"
    LAST_QUARTER = "last_quarter"
    LAST_YEAR = "last_year"


@dataclass(frozen=True)
class DateRange:
    """An inclusive reporting window with display labels."""

    start_date: date
    end_date: date
    label: str
    abbreviation: str


def resolve_date_range(range_type: DateRangeType | str, today: date) -> DateRange:
    """Resolve a preset window relative to ``today``.

    ``last_year`` covers the twelve most recent completed months.
    """
    range_type = DateRangeType(range_type)
    quarter = (today.month - 1) // 3

    if range_type is DateRangeType.MTD:
        return DateRange(
            start_date=date(today.year, today.month, 1),
            end_date=today,
            label=today.strftime("%B %Y"),
            abbreviation="MTD",
        )

    if range_type is DateRangeType.YTD:
        return DateRange(
            start_date=date(today.year, 1, 1),
            end_date=today,
            label=f"{today.year} (YTD)",
            abbreviation="YTD",
        )

    if range_type is DateRangeType.QTD:
        return DateRange(
            start_date=date(today.year, quarter * 3 + 1, 1),
            end_date=today,
            label=f"{QUARTER_NAMES[quarter]} {today.year} (QTD)",
            abbreviation="QTD",
        )

    if range_type is DateRangeType.LAST_QUARTER:
        last_quarter = 3 if quarter == 0 else quarter - 1
        year = today.year - 1 if quarter == 0 else today.year
        end_month = last_quarter * 3 + 3
        return DateRange(
            start_date=date(year, last_quarter * 3 + 1, 1),
            end_date=date(year, end_month, days_in_month(year, end_month)),
            label=f"{QUARTER_NAMES[last_quarter]} {year}",
            abbreviation=QUARTER_NAMES[last_quarter],
        )

    last_month = (
        MonthBucket(today.year - 1, 12)
        if today.month == 1
        else MonthBucket(today.year, today.month - 1)
    )
    first_month = MonthBucket(last_month.year - 1, last_month.month).next()
    return DateRange(
        start_date=first_month.start,
        end_date=last_month.end,
        label="Last 12 Months",
        abbreviation="12M",
    )
