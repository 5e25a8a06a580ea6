"""Tabular views over the transaction list.

These helpers feed the overview, transactions and savings tabs. They
never change the summary; budget figures come from ``budget_engine``.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional, Sequence

import pandas as pd

from .models import EXPENSE, INCOME, PAYMENT_METHODS, TRANSACTION_TYPES, BudgetSummary, Transaction

COLUMNS = ['id', 'date', 'type', 'category', 'amount', 'paymentMethod', 'notes']


def transactions_to_frame(transactions: Iterable[Transaction]) -> pd.DataFrame:
    """Build a DataFrame (one row per transaction, list order kept)."""
    rows = [
        {
            'id': tx.id,
            'date': tx.date,
            'type': tx.type,
            'category': tx.category,
            'amount': tx.amount,
            'paymentMethod': tx.payment_method,
            'notes': tx.notes or '',
        }
        for tx in transactions
    ]
    df = pd.DataFrame(rows, columns=COLUMNS)
    df['date'] = pd.to_datetime(df['date'], errors='coerce')
    df['amount'] = pd.to_numeric(df['amount'], errors='coerce').fillna(0.0)
    return df


def category_breakdown(transactions: Iterable[Transaction], tx_type: str = EXPENSE) -> pd.Series:
    """Total amount per category for one transaction type, largest first."""
    df = transactions_to_frame(transactions)
    df = df[df['type'] == tx_type]
    if df.empty:
        return pd.Series(dtype=float, name='amount')
    totals = df.groupby('category')['amount'].sum()
    return totals.sort_values(ascending=False)


def payment_method_breakdown(transactions: Iterable[Transaction]) -> pd.DataFrame:
    """Totals by payment method (rows) and transaction type (columns).

    Every payment method and type appears, with zeros where nothing was
    recorded.
    """
    df = transactions_to_frame(transactions)
    if df.empty:
        table = pd.DataFrame()
    else:
        table = df.pivot_table(
            index='paymentMethod',
            columns='type',
            values='amount',
            aggfunc='sum',
            fill_value=0.0,
        )
    table = table.reindex(index=list(PAYMENT_METHODS), columns=list(TRANSACTION_TYPES), fill_value=0.0)
    table.index.name = 'paymentMethod'
    table.columns.name = None
    return table.astype(float)


def filter_transactions(df: pd.DataFrame, filters: Optional[Dict[str, Any]] = None) -> pd.DataFrame:
    """Apply transaction-list filters to a frame from ``transactions_to_frame``.

    Supported keys: ``types``, ``payment_methods``, ``categories`` (lists),
    ``search`` (case-insensitive match on category or notes),
    ``start_date`` and ``end_date`` (inclusive).
    """
    filtered = df.copy()
    if not filters:
        return filtered

    if filters.get('types'):
        filtered = filtered[filtered['type'].isin(filters['types'])]

    if filters.get('payment_methods'):
        filtered = filtered[filtered['paymentMethod'].isin(filters['payment_methods'])]

    if filters.get('categories'):
        filtered = filtered[filtered['category'].isin(filters['categories'])]

    search = (filters.get('search') or '').strip()
    if search:
        mask = (
            filtered['category'].str.contains(search, case=False, regex=False, na=False)
            | filtered['notes'].str.contains(search, case=False, regex=False, na=False)
        )
        filtered = filtered[mask]

    start_date = pd.to_datetime(filters['start_date']) if filters.get('start_date') else None
    end_date = pd.to_datetime(filters['end_date']) if filters.get('end_date') else None
    if start_date is not None:
        filtered = filtered[filtered['date'] >= start_date]
    if end_date is not None:
        filtered = filtered[filtered['date'] <= end_date]

    return filtered


def recent_transactions(transactions: Sequence[Transaction], limit: int = 5) -> list:
    # list is already newest first
    return list(transactions[:limit])


def savings_progress(summary: BudgetSummary) -> Dict[str, float]:
    """Progress of current savings toward the goal.

    ``percent`` is capped at 100; a zero goal counts as reached.
    """
    goal = summary.savings_goal
    saved = summary.current_savings
    if goal <= 0:
        percent = 100.0
    else:
        percent = min(saved / goal * 100, 100.0)
    return {
        'goal': goal,
        'saved': saved,
        'percent': percent,
        'remaining': max(0.0, goal - saved),
        'reached': saved >= goal,
    }


def income_expense_totals(summary: BudgetSummary) -> pd.Series:
    """Income vs expense totals as a labelled series for charts."""
    return pd.Series(
        {INCOME.title(): summary.total_income, EXPENSE.title(): summary.total_expenses},
        name='amount',
    )
