"""Tests for reporting window resolution."""

from datetime import date

import pytest

from galfin.application.queries.analytics import resolve_reporting_window
from galfin.domain.analytics.date_range import DateRangeType
from galfin.domain.shared.exceptions import ErrorCode, ValidationError

TODAY = date(2024, 5, 17)


class TestResolveReportingWindow:
    def test_explicit_dates_win_over_preset(self):
        window = resolve_reporting_window(
            today=TODAY,
            default_range=DateRangeType.MTD,
            start_date=date(2024, 1, 15),
            end_date=date(2024, 2, 10),
            date_range=DateRangeType.YTD,
        )
        assert window.start_date == date(2024, 1, 15)
        assert window.end_date == date(2024, 2, 10)
        assert window.label == "Jan 15, 2024 - Feb 10, 2024"

    def test_falls_back_to_default_range(self):
        window = resolve_reporting_window(
            today=TODAY,
            default_range=DateRangeType.QTD,
        )
        assert window.start_date == date(2024, 4, 1)
        assert window.end_date == TODAY
        assert window.label == "Q2 2024 (QTD)"

    def test_reversed_dates_are_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            resolve_reporting_window(
                today=TODAY,
                default_range=DateRangeType.MTD,
                start_date=date(2024, 2, 1),
                end_date=date(2024, 1, 1),
            )
        assert exc_info.value.code == ErrorCode.INVALID_DATE_RANGE

    def test_unknown_preset_is_rejected(self):
        with pytest.raises(ValidationError):
            resolve_reporting_window(
                today=TODAY,
                default_range=DateRangeType.MTD,
                date_range="decade",
            )
