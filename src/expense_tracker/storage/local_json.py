"""Local JSON file storage, replaced atomically on every save."""

from __future__ import annotations

import json
import logging
import os
import stat
import tempfile
from pathlib import Path

from pydantic import ValidationError

from expense_tracker import config
from expense_tracker.errors import LedgerCorruptError, StorageError
from expense_tracker.models.expense import Expense
from expense_tracker.storage.adapter import StorageAdapter

logger = logging.getLogger(__name__)


def _read_json(path: Path) -> list[dict] | None:
    """Return the decoded ledger, or None when the file does not exist."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        return None
    except json.JSONDecodeError as exc:
        raise LedgerCorruptError(f"Corrupted JSON in {path}: {exc}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise StorageError(f"Unable to read {path}: {exc}") from exc

    if not isinstance(data, list):
        raise LedgerCorruptError(f"Expected a list of expenses in {path}")
    return data


def _file_mode(path: Path) -> int:
    """Mode for the rewritten ledger: the current one's, else the umask default."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def _write_json(path: Path, records: list[dict]) -> None:
    """Write to a sibling temp file, then move it over ``path``."""
    tmp_name = None
    replaced = False
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(records, f, indent=config.LEDGER_INDENT)
            f.write("\n")
        # mkstemp creates 0600 files
        os.chmod(tmp_name, _file_mode(path))
        os.replace(tmp_name, path)
        replaced = True
    except OSError as exc:
        raise StorageError(f"Unable to write {path}: {exc}") from exc
    finally:
        if tmp_name and not replaced and os.path.exists(tmp_name):
            os.unlink(tmp_name)


class LocalJsonStorage(StorageAdapter):
    def __init__(self, path: Path | None = None):
        self.path = Path(path) if path else config.LEDGER_PATH

    def load_all(self) -> list[Expense]:
        records = _read_json(self.path)
        if records is None:
            logger.debug("No ledger at %s, starting empty", self.path)
            return []
        try:
            expenses = [Expense.model_validate(r) for r in records]
        except ValidationError as exc:
            raise LedgerCorruptError(f"Invalid expense record in {self.path}: {exc}") from exc
        seen: set[int] = set()
        for e in expenses:
            if e.id in seen:
                raise LedgerCorruptError(f"Duplicate expense id {e.id} in {self.path}")
            seen.add(e.id)
        logger.debug("Loaded %d expenses from %s", len(expenses), self.path)
        return expenses

    def save_all(self, expenses: list[Expense]) -> None:
        records = [json.loads(e.model_dump_json()) for e in expenses]
        _write_json(self.path, records)
        logger.debug("Saved %d expenses to %s", len(records), self.path)
