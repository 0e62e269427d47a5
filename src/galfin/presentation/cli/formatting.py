"""Rich rendering helpers for analytics results."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from rich.table import Table

from galfin.application.dtos.analytics import (
    CategoryAccuracyResult,
    CategoryPacingResult,
)
from galfin.domain.analytics.services import unused_suggestion
from galfin.domain.analytics.value_objects import CategoryAccuracy


def format_amount(value: Decimal | None, currency: str) -> str:
    if value is None:
        return "-"
    return f"{value:,.2f} {currency}"


def format_percentage(value: Decimal | None) -> str:
    if value is None:
        return "n/a"
    return f"{value:.1f}%"


def accuracy_table(
    result: CategoryAccuracyResult,
    items: list[CategoryAccuracy],
) -> Table:
    table = Table(title=f"Category accuracy - {result.period_label}")
    table.add_column("Category", style="bold")
    table.add_column("Zone")
    table.add_column("Budget/mo", justify="right")
    table.add_column("Actual/mo", justify="right")
    table.add_column("Accuracy", justify="right")
    table.add_column("Variance", justify="right")
    table.add_column("Txns", justify="right")
    table.add_column("Exceeded", justify="right")

    for item in items:
        zone = item.accuracy_zone
        table.add_row(
            item.category,
            f"[{zone.color}]{zone.label}[/]",
            format_amount(item.budget_average, result.currency),
            format_amount(item.actual_average, result.currency),
            format_percentage(item.accuracy_percentage),
            format_amount(item.variance, result.currency),
            str(item.transaction_count),
            f"day {item.day_exceeded}" if item.day_exceeded else "-",
        )
    return table


def summary_lines(result: CategoryAccuracyResult) -> list[str]:
    summary = result.summary
    lines = [
        f"Average deviation from target: {summary.average_deviation:.1f}%",
        f"Categories on target: {summary.on_target_count} / {summary.used_count}",
        f"Categories exceeded: {summary.over_budget_count}",
    ]
    if summary.unused_count:
        lines.append(
            f"{summary.unused_count} unused: "
            + unused_suggestion(result.months_in_range)
        )
    return lines


def pacing_table(result: CategoryPacingResult) -> Table:
    table = Table(
        title=f"{result.category} pace - {result.latest_month_label}",
        caption=(
            "Historical averages use each month in the range except the latest."
            if result.has_historical_sample
            else None
        ),
    )
    table.add_column("Checkpoint", style="bold")
    table.add_column("Day", justify="right")
    table.add_column("Spent", justify="right")
    table.add_column("% of limit", justify="right")
    table.add_column("Typical", justify="right")
    table.add_column("Difference", justify="right")

    for row in result.checkpoints:
        table.add_row(
            row.label,
            str(row.day),
            format_amount(row.current_amount, result.currency),
            format_percentage(row.current_percentage),
            format_amount(row.average_amount, result.currency),
            format_amount(row.variance_amount, result.currency),
        )
    return table


def accuracy_payload(
    result: CategoryAccuracyResult,
    items: list[CategoryAccuracy],
) -> dict[str, Any]:
    summary = result.summary
    return {
        "period": result.period_label,
        "start_date": result.start_date.isoformat(),
        "end_date": result.end_date.isoformat(),
        "currency": result.currency,
        "summary": {
            "used_count": summary.used_count,
            "on_target_count": summary.on_target_count,
            "over_budget_count": summary.over_budget_count,
            "unused_count": summary.unused_count,
            "average_deviation": str(summary.average_deviation),
        },
        "categories": [item.model_dump(mode="json") for item in items],
    }
