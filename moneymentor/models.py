"""Value types shared by the engine, storage and UI.

Field names are snake_case in Python and camelCase in the persisted JSON
documents; ``to_dict``/``from_dict`` translate between the two.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from numbers import Real
from typing import Any, Dict, Mapping, Optional

from .config import DEFAULT_SAVINGS_GOAL

INCOME = 'income'
EXPENSE = 'expense'
TRANSACTION_TYPES = (INCOME, EXPENSE)

CASH = 'cash'
UPI = 'upi'
PAYMENT_METHODS = (CASH, UPI)

STATUS_GOOD = 'good'
STATUS_WARNING = 'warning'
STATUS_DANGER = 'danger'


def _as_amount(value: Any, name: str) -> float:
    # bool is a Real subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValueError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value!r}")
    return float(value)


def _as_text(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{name} must be a string, got {value!r}")
    return value


@dataclass(frozen=True)
class Transaction:
    """A single recorded income or expense event."""

    id: str
    date: str
    type: str
    category: str
    amount: float
    payment_method: str
    notes: Optional[str] = None

    @property
    def is_income(self) -> bool:
        return self.type == INCOME

    @property
    def is_expense(self) -> bool:
        return self.type == EXPENSE

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            'id': self.id,
            'date': self.date,
            'type': self.type,
            'category': self.category,
            'amount': self.amount,
            'paymentMethod': self.payment_method,
        }
        if self.notes is not None:
            payload['notes'] = self.notes
        return payload

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Transaction':
        """Build a transaction from its JSON shape.

        Only the shape is checked: required keys present, ``type`` and
        ``paymentMethod`` drawn from their fixed sets, ``amount`` a
        non-negative number.

        Raises:
            ValueError: If the mapping does not have the transaction shape
        """
        if not isinstance(data, Mapping):
            raise ValueError(f"Transaction must be an object, got {type(data).__name__}")
        missing = [key for key in ('id', 'date', 'type', 'category', 'amount', 'paymentMethod') if key not in data]
        if missing:
            raise ValueError(f"Transaction is missing fields: {', '.join(missing)}")

        tx_type = _as_text(data['type'], 'type')
        if tx_type not in TRANSACTION_TYPES:
            raise ValueError(f"Unknown transaction type: {tx_type!r}")
        method = _as_text(data['paymentMethod'], 'paymentMethod')
        if method not in PAYMENT_METHODS:
            raise ValueError(f"Unknown payment method: {method!r}")
        amount = _as_amount(data['amount'], 'amount')
        if amount < 0:
            raise ValueError(f"amount must be non-negative, got {amount}")

        notes = data.get('notes')
        if notes is not None:
            notes = _as_text(notes, 'notes')

        return cls(
            id=str(data['id']),
            date=_as_text(data['date'], 'date'),
            type=tx_type,
            category=_as_text(data['category'], 'category'),
            amount=amount,
            payment_method=method,
            notes=notes,
        )


@dataclass(frozen=True)
class BudgetSummary:
    """Aggregate snapshot derived from the transaction list.

    Everything except ``savings_goal`` is recomputed from transactions;
    the goal is user-set and carried through recomputation.
    """

    total_income: float = 0.0
    total_expenses: float = 0.0
    remaining_budget: float = 0.0
    daily_budget: float = 0.0
    savings_goal: float = DEFAULT_SAVINGS_GOAL
    current_savings: float = 0.0

    def with_goal(self, savings_goal: float) -> 'BudgetSummary':
        return replace(self, savings_goal=float(savings_goal))

    def to_dict(self) -> Dict[str, float]:
        return {
            'totalIncome': self.total_income,
            'totalExpenses': self.total_expenses,
            'remainingBudget': self.remaining_budget,
            'dailyBudget': self.daily_budget,
            'savingsGoal': self.savings_goal,
            'currentSavings': self.current_savings,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'BudgetSummary':
        """Read a stored summary; missing numeric fields fall back to defaults.

        Raises:
            ValueError: If ``data`` is not a mapping or a present field is not a
                finite number, or the savings goal is negative
        """
        if not isinstance(data, Mapping):
            raise ValueError(f"Budget summary must be an object, got {type(data).__name__}")
        defaults = cls()
        values = {}
        for attr, key in _SUMMARY_KEYS.items():
            if key in data:
                values[attr] = _as_amount(data[key], key)
            else:
                values[attr] = getattr(defaults, attr)
        if values['savings_goal'] < 0:
            raise ValueError(f"savingsGoal must be non-negative, got {values['savings_goal']}")
        return cls(**values)


_SUMMARY_KEYS = {
    'total_income': 'totalIncome',
    'total_expenses': 'totalExpenses',
    'remaining_budget': 'remainingBudget',
    'daily_budget': 'dailyBudget',
    'savings_goal': 'savingsGoal',
    'current_savings': 'currentSavings',
}


@dataclass(frozen=True)
class BudgetStatus:
    level: str
    message: str
    spent_percentage: float = field(default=0.0)

    @property
    def alert(self) -> bool:
        """True when the status should be surfaced to the user."""
        return self.level != STATUS_GOOD
