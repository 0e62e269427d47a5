"""Tests for calendar-month arithmetic and preset windows."""

from datetime import date

import pytest

from galfin.domain.analytics.date_range import (
    DateRangeType,
    MonthBucket,
    days_in_month,
    month_buckets,
    months_between,
    resolve_date_range,
)


class TestMonthsBetween:
    @pytest.mark.parametrize(
        ("start", "end", "expected"),
        [
            (date(2024, 1, 15), date(2024, 2, 10), 2),
            (date(2024, 3, 1), date(2024, 3, 31), 1),
            (date(2024, 3, 10), date(2024, 3, 10), 1),
            (date(2023, 12, 31), date(2024, 1, 1), 2),
            (date(2024, 1, 1), date(2024, 12, 31), 12),
            (date(2024, 2, 1), date(2024, 1, 31), 0),
        ],
    )
    def test_counts_touched_months(self, start, end, expected):
        assert months_between(start, end) == expected

    def test_matches_bucket_count(self):
        start, end = date(2022, 11, 3), date(2024, 2, 14)
        assert months_between(start, end) == len(month_buckets(start, end))


class TestMonthBuckets:
    def test_buckets_cross_year(self):
        buckets = month_buckets(date(2023, 11, 20), date(2024, 1, 5))
        assert [b.key for b in buckets] == ["2023-11", "2023-12", "2024-01"]

    def test_reversed_window_has_no_buckets(self):
        assert month_buckets(date(2024, 2, 1), date(2024, 1, 1)) == []

    def test_bucket_bounds(self):
        bucket = MonthBucket(2024, 2)
        assert bucket.start == date(2024, 2, 1)
        assert bucket.end == date(2024, 2, 29)
        assert bucket.label == "February 2024"
        assert bucket.contains(date(2024, 2, 29))
        assert not bucket.contains(date(2023, 2, 1))

    def test_days_in_month(self):
        assert days_in_month(2023, 2) == 28
        assert days_in_month(2024, 2) == 29
        assert days_in_month(2024, 12) == 31


class TestResolveDateRange:
    TODAY = date(2026, 10, 19)

    def test_month_to_date(self):
        result = resolve_date_range(DateRangeType.MTD, self.TODAY)
        assert result.start_date == date(2026, 10, 1)
        assert result.end_date == self.TODAY
        assert result.label == "October 2026"
        assert result.abbreviation == "MTD"

    def test_year_to_date(self):
        result = resolve_date_range("ytd", self.TODAY)
        assert result.start_date == date(2026, 1, 1)
        assert result.end_date == self.TODAY
        assert result.label == "2026 (YTD)"

    def test_quarter_to_date(self):
        result = resolve_date_range(DateRangeType.QTD, self.TODAY)
        assert result.start_date == date(2026, 10, 1)
        assert result.label == "Q4 2026 (QTD)"

    def test_last_quarter(self):
        result = resolve_date_range(DateRangeType.LAST_QUARTER, self.TODAY)
        assert result.start_date == date(2026, 7, 1)
        assert result.end_date == date(2026, 9, 30)
        assert result.label == "Q3 2026"
        assert result.abbreviation == "Q3"

    def test_last_quarter_in_january_is_previous_year(self):
        result = resolve_date_range(DateRangeType.LAST_QUARTER, date(2026, 2, 10))
        assert result.start_date == date(2025, 10, 1)
        assert result.end_date == date(2025, 12, 31)
        assert result.label == "Q4 2025"

    def test_last_year_is_twelve_completed_months(self):
        result = resolve_date_range(DateRangeType.LAST_YEAR, self.TODAY)
        assert result.start_date == date(2025, 10, 1)
        assert result.end_date == date(2026, 9, 30)
        assert months_between(result.start_date, result.end_date) == 12
        assert result.abbreviation == "12M"

    def test_last_year_from_january(self):
        result = resolve_date_range(DateRangeType.LAST_YEAR, date(2026, 1, 5))
        assert result.start_date == date(2025, 1, 1)
        assert result.end_date == date(2025, 12, 31)

    def test_unknown_range_is_rejected(self):
        with pytest.raises(ValueError):
            resolve_date_range("decade", self.TODAY)
