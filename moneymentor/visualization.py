"""Plotly figures for the MoneyMentor tabs.

Each function takes the output of a helper in :mod:`analytics` (or a
summary) and returns a ``plotly.graph_objects.Figure`` that Streamlit
renders via ``st.plotly_chart``. Empty inputs produce an empty figure
titled "No data to display" rather than raising.
"""

from __future__ import annotations

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from .config import CURRENCY_SYMBOL


def _empty_figure(title: str = "No data to display") -> go.Figure:
    fig = go.Figure()
    fig.update_layout(title=title)
    return fig


def create_category_pie_chart(series: pd.Series, title: str | None = None) -> go.Figure:
    """Generate a donut chart of spending by category.

    Parameters
    ----------
    series : pandas.Series
        Series indexed by category with summed amounts.
    title : str, optional
        Title for the chart.

    Returns
    -------
    plotly.graph_objects.Figure
        Pie chart.
    """
    if series.empty:
        return _empty_figure()
    df = series.reset_index()
    df.columns = ["Category", "Amount"]
    fig = px.pie(
        df,
        names="Category",
        values="Amount",
        hole=0.4,
        color_discrete_sequence=px.colors.qualitative.Set3,
    )
    fig.update_traces(textposition='inside', textinfo='percent+label')
    fig.update_layout(title=title or "Spending by category")
    return fig


def create_income_expense_bar_chart(totals: pd.Series, title: str | None = None) -> go.Figure:
    """Bar chart comparing total income with total expenses."""
    if totals.empty or not totals.any():
        return _empty_figure()
    df = totals.reset_index()
    df.columns = ["Flow", "Amount"]
    fig = px.bar(
        df,
        x="Flow",
        y="Amount",
        color="Flow",
        color_discrete_map={"Income": "#16a34a", "Expense": "#dc2626"},
    )
    fig.update_layout(
        title=title or "Income vs expenses",
        xaxis_title="",
        yaxis_title=f"Amount ({CURRENCY_SYMBOL})",
        showlegend=False,
    )
    return fig


def create_payment_method_chart(table: pd.DataFrame, title: str | None = None) -> go.Figure:
    """Grouped bars of income/expense totals per payment method.

    Parameters
    ----------
    table : pandas.DataFrame
        Output of ``analytics.payment_method_breakdown``.
    """
    if table.empty or not table.to_numpy().any():
        return _empty_figure()
    long_df = (
        table.reset_index()
        .melt(id_vars="paymentMethod", var_name="Type", value_name="Amount")
    )
    long_df["paymentMethod"] = long_df["paymentMethod"].str.upper()
    fig = px.bar(long_df, x="paymentMethod", y="Amount", color="Type", barmode="group")
    fig.update_layout(
        title=title or "By payment method",
        xaxis_title="Payment method",
        yaxis_title=f"Amount ({CURRENCY_SYMBOL})",
    )
    return fig


def create_savings_gauge(progress: dict, title: str | None = None) -> go.Figure:
    """Gauge of current savings against the savings goal.

    Parameters
    ----------
    progress : dict
        Output of ``analytics.savings_progress``.
    """
    goal = progress['goal']
    fig = go.Figure(go.Indicator(
        mode="gauge+number",
        value=progress['saved'],
        number={'prefix': CURRENCY_SYMBOL},
        gauge={
            'axis': {'range': [0, max(goal, progress['saved'], 1)]},
            'bar': {'color': "#16a34a" if progress['reached'] else "#2563eb"},
            'threshold': {'line': {'color': "#9333ea", 'width': 4}, 'value': goal},
        },
    ))
    fig.update_layout(title=title or "Savings goal")
    return fig
