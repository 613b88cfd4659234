"""Abstract storage adapter: the ledger is always read and written whole."""

from abc import ABC, abstractmethod

from expense_tracker.models.expense import Expense


class StorageAdapter(ABC):
    @abstractmethod
    def load_all(self) -> list[Expense]:
        """Load every expense record. A missing ledger is an empty one."""

    @abstractmethod
    def save_all(self, expenses: list[Expense]) -> None:
        """Replace all records with ``expenses``."""
