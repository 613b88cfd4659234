"""In-memory ledger operations.

The caller owns the expense list for one invocation and passes it in; these
functions mutate it in place and never touch storage.
"""

from __future__ import annotations

import datetime as _dt
import logging

from expense_tracker.errors import ExpenseNotFoundError
from expense_tracker.models.expense import Expense, next_id, utc_now

logger = logging.getLogger(__name__)


def find_expense(expenses: list[Expense], expense_id: int) -> Expense | None:
    for e in expenses:
        if e.id == expense_id:
            return e
    return None


def add_expense(expenses: list[Expense], description: str, amount: float,
                now: _dt.datetime | None = None) -> Expense:
    """Append a new expense with the next free id and the current UTC time."""
    expense = Expense(
        description=description,
        amount=amount,
        id=next_id(expenses),
        date=now or utc_now(),
    )
    expenses.append(expense)
    logger.info("Added expense %d (%s, %s)", expense.id, expense.description, expense.amount)
    return expense


def update_amount(expenses: list[Expense], expense_id: int, amount: float) -> Expense:
    expense = find_expense(expenses, expense_id)
    if expense is None:
        raise ExpenseNotFoundError(expense_id)
    expense.amount = amount
    logger.info("Updated expense %d amount to %s", expense_id, expense.amount)
    return expense


def delete_expense(expenses: list[Expense], expense_id: int) -> Expense:
    for i, e in enumerate(expenses):
        if e.id == expense_id:
            logger.info("Deleted expense %d", expense_id)
            return expenses.pop(i)
    raise ExpenseNotFoundError(expense_id)


def total_amount(expenses: list[Expense]) -> float:
    return sum((e.amount for e in expenses), 0.0)
