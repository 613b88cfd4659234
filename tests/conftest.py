import datetime as _dt

import pytest
from click.testing import CliRunner

from expense_tracker.cli import cli
from expense_tracker.models.expense import Expense


@pytest.fixture
def ledger_path(tmp_path):
    return tmp_path / "expenses.json"


@pytest.fixture
def run(ledger_path):
    """Invoke the CLI against the temporary ledger."""
    runner = CliRunner()

    def _run(*args):
        return runner.invoke(cli, ["--file", str(ledger_path), *args])

    return _run


@pytest.fixture
def this_year():
    return _dt.datetime.now(_dt.timezone.utc).year


@pytest.fixture
def make_expense():
    def _make(id, description="Coffee", amount=4.5, date=None):
        return Expense(
            id=id,
            description=description,
            amount=amount,
            date=date or _dt.datetime(2024, 3, 5, 9, 30, tzinfo=_dt.timezone.utc),
        )

    return _make
