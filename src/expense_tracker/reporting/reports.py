"""Month filter, expense table and summary total."""

from __future__ import annotations

from datetime import datetime, timezone

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from expense_tracker.config import CURRENCY_SYMBOL, DATE_DISPLAY_FORMAT
from expense_tracker.ledger import total_amount
from expense_tracker.models.expense import Expense

console = Console()

EMPTY_MESSAGE = "No expenses found"


def filter_expenses(expenses: list[Expense], month: str | None = None) -> list[Expense]:
    """Keep expenses dated in ``month`` (full name, any case) of the current year.

    With no month (None) every expense is returned, in order. Any given
    month, including an empty string, goes through the name match.
    """
    if month is None:
        return list(expenses)
    wanted = month.lower()
    year = datetime.now(timezone.utc).year
    return [
        e for e in expenses
        if e.date.strftime("%B").lower() == wanted and e.date.year == year
    ]


def format_amount(amount: float) -> str:
    return f"{CURRENCY_SYMBOL}{amount:.2f}"


def view_report(expenses: list[Expense], month: str | None = None) -> None:
    """Print the (optionally month-filtered) expenses as a table."""
    selected = filter_expenses(expenses, month)
    if not selected:
        console.print(f"[yellow]{EMPTY_MESSAGE}[/yellow]")
        return

    table = Table(title="Expenses")
    table.add_column("ID", style="dim", width=5)
    table.add_column("Date", width=15)
    table.add_column("Description", width=20)
    table.add_column("Amount", justify="right", width=10)

    for e in selected:
        table.add_row(
            str(e.id),
            e.date.strftime(DATE_DISPLAY_FORMAT),
            escape(e.description),
            format_amount(e.amount),
        )

    console.print(table)
    console.print(f"  ({len(selected)} expenses)")


def summary_report(expenses: list[Expense], month: str | None = None) -> None:
    """Print the total amount over the (optionally month-filtered) expenses."""
    selected = filter_expenses(expenses, month)
    if not selected:
        console.print(f"[yellow]{EMPTY_MESSAGE}[/yellow]")
        return
    console.print(f"Total expenses: {total_amount(selected)}", highlight=False)
