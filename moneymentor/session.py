"""Session state and the update functions that mutate it.

State is an immutable ``BudgetState`` snapshot. Every mutation goes
through a reducer that returns a fully recomputed state; callers persist
the result explicitly with ``persist`` (list first, then summary).
"""

from __future__ import annotations

import math
import time
from dataclasses import dataclass, field, replace
from typing import Any, Collection, Mapping, Optional, Tuple

from .budget_engine import classify_status, derive_summary, recompute
from .models import BudgetStatus, BudgetSummary, Transaction
from .storage import (
    KeyValueStore,
    load_summary,
    load_transactions,
    save_summary,
    save_transactions,
)


@dataclass(frozen=True)
class BudgetState:
    """Transactions (newest first) and the summary derived from them."""

    transactions: Tuple[Transaction, ...] = ()
    summary: BudgetSummary = field(default_factory=BudgetSummary)

    @property
    def status(self) -> BudgetStatus:
        return classify_status(self.summary)


def new_transaction_id(existing_ids: Collection[str], now_ms: Optional[int] = None) -> str:
    """Millisecond timestamp id, bumped forward until it is unused."""
    candidate = int(time.time() * 1000) if now_ms is None else int(now_ms)
    while str(candidate) in existing_ids:
        candidate += 1
    return str(candidate)


def apply_transaction(state: BudgetState, transaction: Transaction) -> BudgetState:
    """Prepend ``transaction`` and recompute the summary.

    The savings goal of ``state`` is carried over unchanged.

    Raises:
        ValueError: If a transaction with the same id is already present
    """
    if any(tx.id == transaction.id for tx in state.transactions):
        raise ValueError(f"Duplicate transaction id: {transaction.id}")
    transactions = (transaction,) + state.transactions
    return BudgetState(transactions=transactions, summary=recompute(state.summary, transactions))


def add_transaction(
    state: BudgetState,
    draft: Mapping[str, Any],
    now_ms: Optional[int] = None,
) -> Tuple[BudgetState, Transaction]:
    """Create a transaction from ``draft`` (no id) and apply it.

    Any ``id`` in the draft is replaced by a freshly assigned one.

    Returns:
        The new state and the created transaction

    Raises:
        ValueError: If the draft does not have the transaction shape
    """
    existing = {tx.id for tx in state.transactions}
    record = dict(draft)
    record['id'] = new_transaction_id(existing, now_ms)
    transaction = Transaction.from_dict(record)
    return apply_transaction(state, transaction), transaction


def set_savings_goal(state: BudgetState, goal: float) -> BudgetState:
    """Replace the savings goal; derived fields are left as they are."""
    goal = float(goal)
    if not math.isfinite(goal) or goal < 0:
        raise ValueError(f"Savings goal must be a non-negative number, got {goal}")
    return replace(state, summary=state.summary.with_goal(goal))


def persist(store: KeyValueStore, state: BudgetState) -> None:
    """Save the transaction list, then the summary."""
    save_transactions(store, list(state.transactions))
    save_summary(store, state.summary)


def load_state(store: KeyValueStore) -> BudgetState:
    """Load transactions and re-derive the summary using the stored goal."""
    transactions = tuple(load_transactions(store))
    stored = load_summary(store)
    return BudgetState(
        transactions=transactions,
        summary=derive_summary(transactions, stored.savings_goal),
    )


class BudgetSession:
    """Owns a store and the current state; persists after every change."""

    def __init__(self, store: KeyValueStore, state: Optional[BudgetState] = None):
        self.store = store
        self.state = state if state is not None else load_state(store)

    @property
    def transactions(self) -> Tuple[Transaction, ...]:
        return self.state.transactions

    @property
    def summary(self) -> BudgetSummary:
        return self.state.summary

    @property
    def status(self) -> BudgetStatus:
        return self.state.status

    def add_transaction(self, draft: Mapping[str, Any]) -> Transaction:
        self.state, transaction = add_transaction(self.state, draft)
        persist(self.store, self.state)
        return transaction

    def set_savings_goal(self, goal: float) -> None:
        self.state = set_savings_goal(self.state, goal)
        persist(self.store, self.state)
