"""Resolve the reporting window from explicit dates or a preset."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from galfin.domain.analytics.date_range import DateRangeType, resolve_date_range
from galfin.domain.shared.exceptions import ErrorCode, ValidationError


@dataclass(frozen=True)
class ReportingWindow:
    start_date: date
    end_date: date
    label: str


def format_window_label(start: date, end: date) -> str:
    """Return e.g. ``Jan 15, 2024 - Feb 10, 2024``."""
    return f"{start:%b} {start.day}, {start.year} - {end:%b} {end.day}, {end.year}"


def resolve_reporting_window(
    *,
    today: date,
    default_range: DateRangeType,
    start_date: date | None = None,
    end_date: date | None = None,
    date_range: DateRangeType | str | None = None,
) -> ReportingWindow:
    """Explicit dates win over a preset; the preset falls back to the default."""
    if (start_date is None) != (end_date is None):
        msg = "Both start and end date are required for a custom range"
        raise ValidationError(msg, ErrorCode.INVALID_DATE_RANGE)

    if start_date is not None and end_date is not None:
        if end_date < start_date:
            msg = "End date must not be before start date"
            raise ValidationError(
                msg,
                ErrorCode.INVALID_DATE_RANGE,
                details={"start": start_date.isoformat(), "end": end_date.isoformat()},
            )
        return ReportingWindow(
            start_date,
            end_date,
            format_window_label(start_date, end_date),
        )

    try:
        range_type = DateRangeType(date_range or default_range)
    except ValueError as e:
        msg = f"Unknown date range: {date_range}"
        raise ValidationError(msg, ErrorCode.INVALID_DATE_RANGE) from e

    resolved = resolve_date_range(range_type, today)
    return ReportingWindow(resolved.start_date, resolved.end_date, resolved.label)
