"""Galfin CLI application using Typer.

Reports category budget accuracy and pacing from exported transaction and
budget files.
"""

import asyncio
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from galfin.application.queries.analytics import (
    CategoryAccuracyQuery,
    CategoryPacingQuery,
)
from galfin.domain.analytics.date_range import DateRangeType
from galfin.domain.shared.exceptions import DomainException
from galfin.infrastructure.adapters import FileSourceFactory
from galfin.presentation.cli.formatting import (
    accuracy_payload,
    accuracy_table,
    pacing_table,
    summary_lines,
)
from galfin.presentation.logging_config import configure_logging
from galfin_config import get_settings

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="galfin",
    help="Galfin - household budget accuracy reports",
    no_args_is_help=True,
)
console = Console()

DATE_FORMATS = ["%Y-%m-%d"]

TransactionsOption = typer.Option(
    None,
    "--transactions",
    "-t",
    help="Transactions file (.json or .csv). Defaults to GALFIN_TRANSACTIONS_FILE.",
)
BudgetOption = typer.Option(
    None,
    "--budget",
    "-b",
    help="Budget configuration JSON. Defaults to GALFIN_BUDGET_FILE.",
)
StartOption = typer.Option(None, "--start", formats=DATE_FORMATS, help="First day.")
EndOption = typer.Option(None, "--end", formats=DATE_FORMATS, help="Last day.")
RangeOption = typer.Option(
    None,
    "--range",
    "-r",
    case_sensitive=False,
    help="Preset window (ignored when --start/--end are given).",
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
) -> None:
    configure_logging(verbose)


def _factory(
    transactions: Optional[Path],
    budget: Optional[Path],
) -> FileSourceFactory:
    settings = get_settings()
    return FileSourceFactory(
        transactions_path=transactions or settings.transactions_file,
        budget_path=budget or settings.budget_file,
        default_currency=settings.default_currency,
    )


def _run(coro):
    try:
        return asyncio.run(coro)
    except DomainException as e:
        logger.debug("Command failed: %r", e)
        console.print(f"[red]Error:[/red] {e.message}")
        raise typer.Exit(code=1) from e


@app.command("accuracy")
def accuracy(
    transactions: Optional[Path] = TransactionsOption,
    budget: Optional[Path] = BudgetOption,
    start: Optional[datetime] = StartOption,
    end: Optional[datetime] = EndOption,
    date_range: Optional[DateRangeType] = RangeOption,
    as_json: bool = typer.Option(False, "--json", help="Emit JSON instead of a table."),
    sort: bool = typer.Option(
        False,
        "--sort",
        help="Order closest-to-target first, unused last.",
    ),
) -> None:
    """Score how closely each active category tracked its budget."""
    query = CategoryAccuracyQuery.from_factory(_factory(transactions, budget))
    result = _run(
        query.execute(
            start_date=start.date() if start else None,
            end_date=end.date() if end else None,
            date_range=date_range,
        )
    )
    items = result.sorted_for_display() if sort else result.items

    if as_json:
        typer.echo(json.dumps(accuracy_payload(result, items), indent=2))
        return

    if not items:
        console.print("No category data available for the selected period.")
        return

    console.print(accuracy_table(result, items))
    for line in summary_lines(result):
        console.print(line)


@app.command("pacing")
def pacing(
    category: str = typer.Argument(..., help="Budget category to track."),
    transactions: Optional[Path] = TransactionsOption,
    budget: Optional[Path] = BudgetOption,
    start: Optional[datetime] = StartOption,
    end: Optional[datetime] = EndOption,
    date_range: Optional[DateRangeType] = RangeOption,
) -> None:
    """Compare this month's spending pace with earlier months."""
    query = CategoryPacingQuery.from_factory(_factory(transactions, budget))
    result = _run(
        query.execute(
            category,
            start_date=start.date() if start else None,
            end_date=end.date() if end else None,
            date_range=date_range,
        )
    )
    console.print(pacing_table(result))


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
