"""Budget derivation from a transaction list.

Everything here is a pure function of its arguments: the same
transactions (and goal) always produce the same summary and status.
No rounding is applied; display rounding happens in the UI.
"""

from __future__ import annotations

from typing import Iterable

from .config import (
    BUDGET_PERIOD_DAYS,
    DANGER_THRESHOLD,
    DEFAULT_SAVINGS_GOAL,
    WARNING_THRESHOLD,
)
from .models import (
    BudgetStatus,
    BudgetSummary,
    STATUS_DANGER,
    STATUS_GOOD,
    STATUS_WARNING,
    Transaction,
)

STATUS_MESSAGES = {
    STATUS_DANGER: "Budget Exceeded!",
    STATUS_WARNING: "Budget Alert!",
    STATUS_GOOD: "On Track",
}


def derive_summary(
    transactions: Iterable[Transaction],
    savings_goal: float = DEFAULT_SAVINGS_GOAL,
) -> BudgetSummary:
    """Compute the budget summary for ``transactions``.

    Args:
        transactions: Transactions in any order
        savings_goal: Goal carried over from the previous summary

    Returns:
        A new summary. ``daily_budget`` is zero and ``current_savings`` is
        floored at zero whenever the remaining budget is not positive.
    """
    total_income = 0.0
    total_expenses = 0.0
    for tx in transactions:
        if tx.is_income:
            total_income += tx.amount
        elif tx.is_expense:
            total_expenses += tx.amount

    remaining = total_income - total_expenses
    daily = remaining / BUDGET_PERIOD_DAYS if remaining > 0 else 0.0

    return BudgetSummary(
        total_income=total_income,
        total_expenses=total_expenses,
        remaining_budget=remaining,
        daily_budget=daily,
        savings_goal=float(savings_goal),
        current_savings=max(0.0, remaining),
    )


def recompute(previous: BudgetSummary, transactions: Iterable[Transaction]) -> BudgetSummary:
    """Re-derive ``previous`` from ``transactions``, keeping its savings goal."""
    return derive_summary(transactions, previous.savings_goal)


def spent_percentage(summary: BudgetSummary) -> float:
    """Share of income spent, in percent; 0 when there is no income."""
    if summary.total_income <= 0:
        return 0.0
    return summary.total_expenses * 100 / summary.total_income


def classify_status(summary: BudgetSummary) -> BudgetStatus:
    """Classify spending into good / warning / danger."""
    spent = spent_percentage(summary)
    if spent >= DANGER_THRESHOLD:
        level = STATUS_DANGER
    elif spent >= WARNING_THRESHOLD:
        level = STATUS_WARNING
    else:
        level = STATUS_GOOD
    return BudgetStatus(level=level, message=STATUS_MESSAGES[level], spent_percentage=spent)
