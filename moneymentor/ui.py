"""Streamlit UI components for MoneyMentor.

Rendering lives in ``MoneyMentorUI``; the small pure helpers above it
(card values, alert text, form drafts) keep the display rules testable
without a running Streamlit server.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional, Sequence, Tuple

import streamlit as st
from streamlit.errors import StreamlitAPIException

from . import analytics
from . import visualization as viz
from .content import FINANCIAL_TIPS, WEEKLY_CHALLENGES, categories_for
from .formatting import format_currency, format_percentage, round_half_up
from .models import (
    EXPENSE,
    INCOME,
    PAYMENT_METHODS,
    STATUS_DANGER,
    TRANSACTION_TYPES,
    BudgetStatus,
    BudgetSummary,
    Transaction,
)

CUSTOM_CATEGORY = 'Custom…'


def summary_cards(summary: BudgetSummary) -> List[Tuple[str, str]]:
    """Label/value pairs for the four summary cards.

    The daily budget is rounded to whole rupees for display only.
    """
    return [
        ("💰 Total Income", format_currency(summary.total_income)),
        ("💸 Total Expenses", format_currency(summary.total_expenses)),
        ("🎯 Remaining", format_currency(summary.remaining_budget)),
        ("🏆 Daily Budget", format_currency(round_half_up(summary.daily_budget), decimals=0)),
    ]


def alert_text(summary: BudgetSummary, status: BudgetStatus) -> Optional[str]:
    """Alert banner text, or None when the budget is on track."""
    if not status.alert:
        return None
    return (
        f"**{status.message}** You've spent {format_currency(summary.total_expenses)} "
        f"out of {format_currency(summary.total_income)}"
    )


def build_draft(
    tx_type: str,
    amount: Any,
    category: str,
    payment_method: str,
    tx_date: date,
    notes: str = '',
) -> Tuple[Optional[Dict[str, Any]], List[str]]:
    """Turn form input into a transaction draft (no id).

    Returns:
        ``(draft, [])`` on success, ``(None, errors)`` otherwise
    """
    errors: List[str] = []
    if tx_type not in TRANSACTION_TYPES:
        errors.append("Choose income or expense.")
    if payment_method not in PAYMENT_METHODS:
        errors.append("Choose cash or UPI.")
    category = (category or '').strip()
    if not category:
        errors.append("Category is required.")
    try:
        amount = float(amount)
    except (TypeError, ValueError):
        errors.append("Amount must be a number.")
    else:
        if amount < 0:
            errors.append("Amount cannot be negative.")
    if errors:
        return None, errors

    draft: Dict[str, Any] = {
        'date': tx_date.isoformat(),
        'type': tx_type,
        'category': category,
        'amount': amount,
        'paymentMethod': payment_method,
    }
    notes = (notes or '').strip()
    if notes:
        draft['notes'] = notes
    return draft, []


class MoneyMentorUI:
    """UI components for the student finance tracker."""
    _PAGE_CONFIGURED = False

    def __init__(self, *, configure_page: bool = False):
        if configure_page:
            self.setup_page_config()

    def setup_page_config(self) -> None:
        """Configure Streamlit page settings."""
        if MoneyMentorUI._PAGE_CONFIGURED:
            return
        try:
            st.set_page_config(
                page_title="MoneyMentor",
                page_icon="💰",
                layout="wide",
                initial_sidebar_state="collapsed",
                menu_items={
                    'About': "MoneyMentor - Smart Personal Finance for Students",
                },
            )
        except StreamlitAPIException:
            # set_page_config may only run once per script run
            pass
        finally:
            MoneyMentorUI._PAGE_CONFIGURED = True

    def render_header(self) -> None:
        st.markdown(
            "<h1 style='text-align: center; margin-bottom: 0;'>MoneyMentor</h1>"
            "<p style='text-align: center; color: gray;'>Smart Personal Finance for Students</p>",
            unsafe_allow_html=True,
        )

    def render_status_alert(self, summary: BudgetSummary, status: BudgetStatus) -> None:
        """Show the warning/danger banner; nothing when on track."""
        text = alert_text(summary, status)
        if text is None:
            return
        if status.level == STATUS_DANGER:
            st.error(text, icon="⚠️")
        else:
            st.warning(text, icon="⚠️")

    def render_summary_cards(self, summary: BudgetSummary) -> None:
        """Render the four key metrics."""
        cols = st.columns(4)
        for col, (label, value) in zip(cols, summary_cards(summary)):
            with col:
                st.metric(label=label, value=value)

    def render_add_transaction_form(self) -> Optional[Dict[str, Any]]:
        """Render the add income/expense form.

        Returns:
            A transaction draft when the form was submitted with valid
            input, otherwise None
        """
        with st.expander("➕ Add Income / Expense", expanded=False):
            tx_type = st.radio(
                "Type",
                options=list(TRANSACTION_TYPES),
                format_func=str.title,
                horizontal=True,
                key="new_tx_type",
            )
            with st.form("add_transaction", clear_on_submit=True):
                col1, col2 = st.columns(2)
                with col1:
                    amount = st.number_input("Amount (₹)", min_value=0.0, step=10.0, format="%.2f")
                    category_choice = st.selectbox(
                        "Category",
                        options=categories_for(tx_type) + [CUSTOM_CATEGORY],
                    )
                    custom_category = st.text_input("Custom category", placeholder="Only for Custom…")
                with col2:
                    payment_method = st.radio(
                        "Payment method",
                        options=list(PAYMENT_METHODS),
                        format_func=str.upper,
                        horizontal=True,
                    )
                    tx_date = st.date_input("Date", value=date.today())
                    notes = st.text_input("Notes (optional)")

                submitted = st.form_submit_button("Add Transaction", type="primary")

            if not submitted:
                return None

            category = custom_category if category_choice == CUSTOM_CATEGORY else category_choice
            draft, errors = build_draft(tx_type, amount, category, payment_method, tx_date, notes)
            for error in errors:
                st.warning(error)
            return draft

    def render_overview(self, summary: BudgetSummary, transactions: Sequence[Transaction]) -> None:
        """Overview tab: charts and the most recent transactions."""
        if not transactions:
            st.info("No transactions yet. Add your first income or expense to get started.")
            return

        col1, col2 = st.columns(2)
        with col1:
            fig = viz.create_category_pie_chart(analytics.category_breakdown(transactions, EXPENSE))
            st.plotly_chart(fig, width="stretch")
        with col2:
            fig = viz.create_income_expense_bar_chart(analytics.income_expense_totals(summary))
            st.plotly_chart(fig, width="stretch")

        st.plotly_chart(
            viz.create_payment_method_chart(analytics.payment_method_breakdown(transactions)),
            width="stretch",
        )

        st.markdown("**Recent transactions**")
        for tx in analytics.recent_transactions(transactions):
            sign = '+' if tx.type == INCOME else '-'
            st.markdown(
                f"- {tx.date} · **{tx.category}** · {sign}{format_currency(tx.amount)} "
                f"({tx.payment_method.upper()})"
            )

    def render_transactions(self, transactions: Sequence[Transaction]) -> None:
        """Transactions tab: filterable table."""
        if not transactions:
            st.info("No transactions recorded yet.")
            return

        df = analytics.transactions_to_frame(transactions)
        col1, col2, col3 = st.columns([1, 1, 2])
        with col1:
            types = st.multiselect("Type", options=list(TRANSACTION_TYPES), format_func=str.title)
        with col2:
            methods = st.multiselect("Payment method", options=list(PAYMENT_METHODS), format_func=str.upper)
        with col3:
            search = st.text_input("Search category or notes")

        filtered = analytics.filter_transactions(
            df, {'types': types, 'payment_methods': methods, 'search': search}
        )
        if filtered.empty:
            st.warning("No transactions match the selected filters.")
            return

        display = filtered.drop(columns=['id']).copy()
        display['date'] = display['date'].dt.strftime('%Y-%m-%d')
        display['amount'] = display['amount'].map(format_currency)
        st.dataframe(display, width="stretch", hide_index=True)
        st.caption(f"Showing {len(filtered)} of {len(df)} transactions")

    def render_savings(self, summary: BudgetSummary) -> Optional[float]:
        """Savings tab: progress toward the goal and a goal editor.

        Returns:
            The new goal when the user saved a changed value, otherwise None
        """
        progress = analytics.savings_progress(summary)
        col1, col2 = st.columns([2, 1])
        with col1:
            st.plotly_chart(viz.create_savings_gauge(progress), width="stretch")
        with col2:
            st.metric("Current Savings", format_currency(progress['saved']))
            st.metric("Savings Goal", format_currency(progress['goal']))
            st.metric("Still Needed", format_currency(progress['remaining']))
            st.progress(progress['percent'] / 100, text=format_percentage(progress['percent']))
            if progress['reached']:
                st.success("🎉 Goal reached! Time to set a bigger one.")

        with st.form("savings_goal"):
            new_goal = st.number_input(
                "Update savings goal (₹)",
                min_value=0.0,
                value=float(summary.savings_goal),
                step=500.0,
            )
            submitted = st.form_submit_button("Save Goal")
        if submitted and float(new_goal) != summary.savings_goal:
            return float(new_goal)
        return None

    def render_tips(self) -> None:
        st.subheader("💡 Money Tips")
        for tip in FINANCIAL_TIPS:
            with st.container(border=True):
                st.markdown(f"**{tip['title']}**")
                st.caption(tip['body'])

    def render_challenges(self) -> None:
        st.subheader("🏆 Weekly Challenges")
        st.caption("Complete these challenges to improve your financial habits")
        for challenge in WEEKLY_CHALLENGES:
            with st.container(border=True):
                col1, col2 = st.columns([4, 1])
                with col1:
                    st.markdown(f"**{challenge['title']}**")
                    st.caption(challenge['description'])
                with col2:
                    st.markdown(f"`{challenge['days']} days`")
