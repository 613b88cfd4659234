"""Click CLI: all user-facing commands."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn

import click
from rich.console import Console

from expense_tracker import config
from expense_tracker.errors import ExpenseNotFoundError, StorageError
from expense_tracker.ledger import add_expense, delete_expense, update_amount
from expense_tracker.log import setup_logging
from expense_tracker.models.expense import Expense
from expense_tracker.reporting.reports import summary_report, view_report
from expense_tracker.storage.local_json import LocalJsonStorage

console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger(__name__)


@dataclass
class Session:
    """The storage and the expenses loaded from it for one invocation."""

    storage: LocalJsonStorage
    expenses: list[Expense]


def _finite(ctx: click.Context, param: click.Parameter, value: float) -> float:
    if not math.isfinite(value):
        raise click.BadParameter("amount must be a finite number")
    return value


def _fail(message: str) -> NoReturn:
    err_console.print(f"[red]{message}[/red]", highlight=False)
    raise SystemExit(1)


def _not_found() -> NoReturn:
    console.print("[yellow]ID not found[/yellow]", highlight=False)
    raise SystemExit(1)


def _persist(session: Session) -> None:
    """Save the whole ledger; exit non-zero without reporting success on failure."""
    try:
        session.storage.save_all(session.expenses)
    except StorageError as exc:
        logger.debug("Save failed", exc_info=True)
        _fail(f"There is an error in saving the file: {exc}")


@click.group(invoke_without_command=True)
@click.option("-f", "--file", "ledger_file", type=click.Path(dir_okay=False, path_type=Path),
              help=f"Ledger JSON file (default: ${config.LEDGER_ENV_VAR} or ./{config.LEDGER_FILENAME})")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr")
@click.pass_context
def cli(ctx: click.Context, ledger_file: Path | None, verbose: bool) -> None:
    """Expense Tracker: record, list and total personal expenses."""
    setup_logging(verbose)
    storage = LocalJsonStorage(ledger_file)
    try:
        expenses = storage.load_all()
    except StorageError as exc:
        _fail(f"Failed to load the file: {exc}")
    ctx.obj = Session(storage=storage, expenses=expenses)

    if ctx.invoked_subcommand is None:
        console.print("Please input a valid argument")


@cli.command()
@click.argument("description")
@click.argument("amount", type=float, callback=_finite)
@click.pass_obj
def add(session: Session, description: str, amount: float) -> None:
    """Add an expense."""
    expense = add_expense(session.expenses, description, amount)
    _persist(session)
    console.print(f"Expense added successfully (ID {expense.id})", highlight=False)


@cli.command()
@click.argument("expense_id", type=int)
@click.argument("amount", type=float, callback=_finite)
@click.pass_obj
def update(session: Session, expense_id: int, amount: float) -> None:
    """Change the amount of an existing expense."""
    try:
        update_amount(session.expenses, expense_id, amount)
    except ExpenseNotFoundError:
        _not_found()
    _persist(session)
    console.print(f"Expense {expense_id} updated successfully", highlight=False)


@cli.command()
@click.argument("expense_id", type=int)
@click.pass_obj
def delete(session: Session, expense_id: int) -> None:
    """Remove an expense."""
    try:
        delete_expense(session.expenses, expense_id)
    except ExpenseNotFoundError:
        _not_found()
    _persist(session)
    console.print(f"Expense {expense_id} deleted successfully", highlight=False)


@cli.command()
@click.argument("month", required=False)
@click.pass_obj
def view(session: Session, month: str | None) -> None:
    """List expenses, optionally only those of MONTH in the current year."""
    view_report(session.expenses, month)


@cli.command()
@click.argument("month", required=False)
@click.pass_obj
def summary(session: Session, month: str | None) -> None:
    """Total expenses, optionally only those of MONTH in the current year."""
    summary_report(session.expenses, month)
