"""Exceptions raised by the ledger and its storage."""


class ExpenseTrackerError(Exception):
    """Base class for all expense tracker errors."""


class StorageError(ExpenseTrackerError):
    """Raised when the ledger file cannot be read or written."""


class LedgerCorruptError(StorageError):
    """Raised when the ledger file exists but does not hold a valid expense list."""


class ExpenseNotFoundError(ExpenseTrackerError, LookupError):
    """Raised when no expense carries the requested id."""

    def __init__(self, expense_id: int) -> None:
        super().__init__(f"ID not found: {expense_id}")
        self.expense_id = expense_id
