import contextlib
import types
from datetime import date

from streamlit.errors import StreamlitAPIException

from moneymentor import ui
from moneymentor.budget_engine import classify_status
from moneymentor.content import WEEKLY_CHALLENGES, categories_for
from moneymentor.models import BudgetSummary, Transaction
from moneymentor.ui import MoneyMentorUI, alert_text, build_draft, summary_cards


def test_summary_cards_round_daily_budget_for_display():
    summary = BudgetSummary(
        total_income=1000, remaining_budget=1000, daily_budget=1000 / 30, current_savings=1000
    )
    cards = dict(summary_cards(summary))
    assert cards['💰 Total Income'] == '₹1,000'
    assert cards['💸 Total Expenses'] == '₹0'
    assert cards['🎯 Remaining'] == '₹1,000'
    assert cards['🏆 Daily Budget'] == '₹33'
    # the summary itself is not rounded
    assert summary.daily_budget != 33


def test_summary_cards_show_negative_remaining():
    summary = BudgetSummary(total_income=100, total_expenses=150, remaining_budget=-50)
    assert dict(summary_cards(summary))['🎯 Remaining'] == '-₹50'


def test_alert_text_hidden_when_on_track():
    summary = BudgetSummary(total_income=1000, total_expenses=100)
    assert alert_text(summary, classify_status(summary)) is None


def test_alert_text_for_warning_and_danger():
    warning = BudgetSummary(total_income=1000, total_expenses=850)
    text = alert_text(warning, classify_status(warning))
    assert text.startswith('**Budget Alert!**')
    assert "You've spent ₹850 out of ₹1,000" in text

    danger = BudgetSummary(total_income=1000, total_expenses=950)
    assert 'Budget Exceeded!' in alert_text(danger, classify_status(danger))


def test_build_draft_success():
    draft, errors = build_draft('expense', 45, ' Food ', 'upi', date(2024, 7, 1), '  chai ')
    assert errors == []
    assert draft == {
        'date': '2024-07-01',
        'type': 'expense',
        'category': 'Food',
        'amount': 45.0,
        'paymentMethod': 'upi',
        'notes': 'chai',
    }
    assert 'id' not in draft


def test_build_draft_drops_blank_notes():
    draft, _ = build_draft('income', 10, 'Gift', 'cash', date(2024, 7, 1), '   ')
    assert 'notes' not in draft


def test_build_draft_collects_errors():
    draft, errors = build_draft('loan', -1, '  ', 'card', date(2024, 7, 1))
    assert draft is None
    assert len(errors) == 4


def test_category_suggestions_and_challenges():
    assert 'Food' in categories_for('expense')
    assert 'Scholarship' in categories_for('income')
    assert categories_for('transfer') == []
    assert [c['days'] for c in WEEKLY_CHALLENGES] == [7, 3, 5]


def test_daily_budget_half_rounds_up():
    summary = BudgetSummary(total_income=975, remaining_budget=975, daily_budget=975 / 30)
    assert dict(summary_cards(summary))['🏆 Daily Budget'] == '₹33'


def test_page_config_applied_once(monkeypatch):
    calls = []

    def set_page_config(**kwargs):
        calls.append(kwargs)
        raise StreamlitAPIException("set_page_config() can only be called once")

    monkeypatch.setattr(ui.st, 'set_page_config', set_page_config)
    monkeypatch.setattr(MoneyMentorUI, '_PAGE_CONFIGURED', False)
    MoneyMentorUI(configure_page=True)
    MoneyMentorUI(configure_page=True)
    assert len(calls) == 1
    assert calls[0]['page_title'] == "MoneyMentor"


def test_transactions_table_stretches(monkeypatch):
    tables = []
    fake_st = types.SimpleNamespace(
        columns=lambda widths: [contextlib.nullcontext() for _ in widths],
        multiselect=lambda *args, **kwargs: [],
        text_input=lambda *args, **kwargs: '',
        dataframe=lambda data, **kwargs: tables.append((data, kwargs)),
        caption=lambda text: None,
    )
    monkeypatch.setattr(ui, 'st', fake_st)
    tx = Transaction('1', '2024-07-01', 'expense', 'Food', 120.0, 'upi')
    MoneyMentorUI().render_transactions([tx])

    data, kwargs = tables[0]
    assert kwargs == {'width': 'stretch', 'hide_index': True}
    assert list(data['amount']) == ['₹120']
