"""Configuration management for MoneyMentor.

This module centralizes all configuration values including paths,
storage keys, budget constants, and environment variable overrides.
"""

from __future__ import annotations

import os
from pathlib import Path

# Base project root - assumes this file is in moneymentor/
_PROJECT_ROOT = Path(__file__).parent.parent.resolve()

# Data directory
DATA_DIR = Path(os.getenv("MONEYMENTOR_DATA_DIR", _PROJECT_ROOT / "data"))

# Key-value store document
STORE_PATH = Path(
    os.getenv("MONEYMENTOR_STORE_PATH", DATA_DIR / "moneymentor.json")
).resolve()

# Storage keys
TRANSACTIONS_KEY = "transactions"
BUDGET_KEY = "budget"

# Budget constants
DEFAULT_SAVINGS_GOAL = 5000.0
BUDGET_PERIOD_DAYS = 30
WARNING_THRESHOLD = 80.0
DANGER_THRESHOLD = 90.0

CURRENCY_SYMBOL = "₹"


def ensure_data_directories() -> None:
    """Create the data directory (and the store's parent) if missing."""
    for directory in [DATA_DIR, STORE_PATH.parent]:
        directory.mkdir(parents=True, exist_ok=True)