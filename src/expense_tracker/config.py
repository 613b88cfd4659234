"""Configuration: ledger location and display defaults."""

import os
from pathlib import Path

# Ledger file, relative to the working directory unless overridden
LEDGER_FILENAME = "expenses.json"
LEDGER_ENV_VAR = "EXPENSE_TRACKER_FILE"
LEDGER_PATH = Path(os.environ.get(LEDGER_ENV_VAR, Path.cwd() / LEDGER_FILENAME))

# JSON indentation for the pretty-printed ledger
LEDGER_INDENT = 2

# Display
CURRENCY_SYMBOL = "$"
DATE_DISPLAY_FORMAT = "%B, %d"  # e.g. "March, 05"
