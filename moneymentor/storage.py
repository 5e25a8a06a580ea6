"""Key-value persistence for transactions and the budget summary.

Two independent JSON documents are stored under fixed keys: the
transaction list and the budget summary. ``JsonFileStore`` keeps every
key in a single JSON file on disk and rewrites it whole on each save,
so the last full write wins.
"""

from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import BUDGET_KEY, STORE_PATH, TRANSACTIONS_KEY
from .models import BudgetSummary, Transaction

logger = logging.getLogger(__name__)


class KeyValueStore:
    """Minimal load/save interface the session relies on."""

    def load(self, key: str) -> Optional[Any]:
        raise NotImplementedError

    def save(self, key: str, blob: Any) -> None:
        raise NotImplementedError


class MemoryStore(KeyValueStore):
    """Dict-backed store; values are deep-copied in and out."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._data: Dict[str, Any] = copy.deepcopy(initial) if initial else {}

    def load(self, key: str) -> Optional[Any]:
        if key not in self._data:
            return None
        return copy.deepcopy(self._data[key])

    def save(self, key: str, blob: Any) -> None:
        self._data[key] = copy.deepcopy(blob)


class JsonFileStore(KeyValueStore):
    """Handles the on-disk JSON document holding every key."""

    def __init__(self, path: Optional[Path] = None):
        """Initialize the file store.

        Args:
            path: Optional custom file path. Defaults to STORE_PATH from config.
        """
        self.path = Path(path) if path is not None else STORE_PATH

    def _read_all(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open('r', encoding='utf-8') as handle:
                data = json.load(handle)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Could not read store %s, treating it as empty: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Store %s does not hold a JSON object, treating it as empty", self.path)
            return {}
        return data

    def load(self, key: str) -> Optional[Any]:
        return self._read_all().get(key)

    def save(self, key: str, blob: Any) -> None:
        """Write ``blob`` under ``key``, rewriting the whole document.

        Raises:
            OSError: If the file cannot be written
        """
        data = self._read_all()
        data[key] = blob
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open('w', encoding='utf-8') as handle:
                json.dump(data, handle, indent=2, sort_keys=True)
        except OSError as e:
            raise OSError(f"Failed to save {key!r} to {self.path}: {e}") from e


def load_transactions(store: KeyValueStore, key: str = TRANSACTIONS_KEY) -> List[Transaction]:
    """Load the stored transaction list, newest first.

    A missing or non-list blob yields an empty list. Records that do not
    have the transaction shape, or repeat an earlier id, are skipped.
    """
    blob = store.load(key)
    if blob is None:
        return []
    if not isinstance(blob, list):
        logger.warning("Ignoring stored %r: expected a list, got %s", key, type(blob).__name__)
        return []

    transactions: List[Transaction] = []
    seen_ids = set()
    for index, record in enumerate(blob):
        try:
            tx = Transaction.from_dict(record)
        except ValueError as e:
            logger.warning("Skipping stored transaction #%d: %s", index, e)
            continue
        if tx.id in seen_ids:
            logger.warning("Skipping stored transaction #%d: duplicate id %s", index, tx.id)
            continue
        seen_ids.add(tx.id)
        transactions.append(tx)
    return transactions


def save_transactions(
    store: KeyValueStore,
    transactions: List[Transaction],
    key: str = TRANSACTIONS_KEY,
) -> None:
    store.save(key, [tx.to_dict() for tx in transactions])


def load_summary(store: KeyValueStore, key: str = BUDGET_KEY) -> BudgetSummary:
    """Load the stored budget summary, or a zeroed one with the default goal."""
    blob = store.load(key)
    if blob is None:
        return BudgetSummary()
    try:
        return BudgetSummary.from_dict(blob)
    except ValueError as e:
        logger.warning("Ignoring stored %r: %s", key, e)
        return BudgetSummary()


def save_summary(store: KeyValueStore, summary: BudgetSummary, key: str = BUDGET_KEY) -> None:
    store.save(key, summary.to_dict())
