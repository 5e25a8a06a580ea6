"""MoneyMentor - main Streamlit page.

The page owns one ``BudgetSession`` per browser session (kept in
``st.session_state``). Each user action goes through the session, which
recomputes the summary and persists it, then the page reruns.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

import streamlit as st

from . import config
from .session import BudgetSession
from .storage import JsonFileStore, KeyValueStore
from .ui import MoneyMentorUI

logger = logging.getLogger(__name__)

SESSION_KEY = 'budget_session'
FLASH_KEY = 'flash_messages'
TAB_LABELS = ["📊 Overview", "📋 Transactions", "🐷 Savings", "💡 Tips", "🏆 Challenges"]


def _default_store() -> KeyValueStore:
    config.ensure_data_directories()
    return JsonFileStore(config.STORE_PATH)


def _get_session(store_factory: Callable[[], KeyValueStore] = _default_store) -> BudgetSession:
    """Return the session for this browser tab, loading it on first use."""
    if SESSION_KEY not in st.session_state:
        session = BudgetSession(store_factory())
        logger.info("Loaded %d transactions", len(session.transactions))
        st.session_state[SESSION_KEY] = session
    return st.session_state[SESSION_KEY]


def _flash(level: str, message: str) -> None:
    """Queue a message for the next run; shown by ``_show_flashes``."""
    st.session_state.setdefault(FLASH_KEY, []).append((level, message))


def _show_flashes() -> None:
    for level, message in st.session_state.pop(FLASH_KEY, []):
        getattr(st, level)(message)


def _handle_new_transaction(session: BudgetSession, draft: Optional[Dict[str, Any]]) -> bool:
    """Add ``draft`` to the session; returns True when the page should rerun."""
    if draft is None:
        return False
    try:
        transaction = session.add_transaction(draft)
    except ValueError as e:
        st.warning(f"Could not add transaction: {e}")
        return False
    except OSError as e:
        # the in-memory state already holds the transaction
        logger.error("Saving transactions failed: %s", e)
        _flash('error', f"Transaction added but could not be saved: {e}")
        return True
    logger.info("Added %s %s (%s)", transaction.type, transaction.id, transaction.category)
    _flash('success', f"Added {transaction.type} in {transaction.category}")
    return True


def _handle_goal_change(session: BudgetSession, goal: Optional[float]) -> bool:
    """Apply a new savings goal; returns True when the page should rerun."""
    if goal is None:
        return False
    try:
        session.set_savings_goal(goal)
    except ValueError as e:
        st.warning(str(e))
        return False
    except OSError as e:
        logger.error("Saving savings goal failed: %s", e)
        _flash('error', f"Goal updated but could not be saved: {e}")
        return True
    return True


def main() -> None:
    """Render the MoneyMentor page."""
    logging.basicConfig(level=logging.INFO)
    ui = MoneyMentorUI(configure_page=True)
    session = _get_session()

    ui.render_header()
    _show_flashes()
    ui.render_status_alert(session.summary, session.status)
    ui.render_summary_cards(session.summary)

    if _handle_new_transaction(session, ui.render_add_transaction_form()):
        st.rerun()

    overview, transactions, savings, tips, challenges = st.tabs(TAB_LABELS)
    with overview:
        ui.render_overview(session.summary, session.transactions)
    with transactions:
        ui.render_transactions(session.transactions)
    with savings:
        if _handle_goal_change(session, ui.render_savings(session.summary)):
            st.rerun()
    with tips:
        ui.render_tips()
    with challenges:
        ui.render_challenges()
