"""Pydantic Expense model: the single record kept in the ledger."""

import datetime as _dt
from typing import Iterable

from pydantic import BaseModel, Field, field_validator


def utc_now() -> _dt.datetime:
    return _dt.datetime.now(_dt.timezone.utc)


class Expense(BaseModel):
    """A single tracked expense.

    Field order matches the on-disk layout: description, amount, id, date.
    """

    description: str
    amount: float = Field(allow_inf_nan=False)
    id: int = Field(ge=0)
    date: _dt.datetime

    model_config = {"validate_assignment": True}

    @field_validator("date")
    @classmethod
    def _as_utc(cls, value: _dt.datetime) -> _dt.datetime:
        # Naive timestamps are taken to be UTC already
        if value.tzinfo is None:
            return value.replace(tzinfo=_dt.timezone.utc)
        return value.astimezone(_dt.timezone.utc)


def next_id(expenses: Iterable[Expense]) -> int:
    """Return max(existing ids) + 1, or 1 for an empty collection."""
    return max((e.id for e in expenses), default=0) + 1
