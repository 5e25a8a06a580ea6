import pytest

from moneymentor.models import BudgetSummary, Transaction
from moneymentor.session import (
    BudgetSession,
    BudgetState,
    add_transaction,
    apply_transaction,
    load_state,
    new_transaction_id,
    persist,
    set_savings_goal,
)
from moneymentor.storage import MemoryStore, load_summary, load_transactions


def _draft(tx_type='income', amount=1000, category='Pocket Money'):
    return {
        'date': '2024-07-01',
        'type': tx_type,
        'category': category,
        'amount': amount,
        'paymentMethod': 'upi',
    }


class RecordingStore(MemoryStore):
    def __init__(self, initial=None):
        super().__init__(initial)
        self.saved_keys = []

    def save(self, key, blob):
        self.saved_keys.append(key)
        super().save(key, blob)


def test_new_transaction_id_uses_timestamp():
    assert new_transaction_id(set(), now_ms=1719800000000) == '1719800000000'


def test_new_transaction_id_skips_taken_ids():
    taken = {'1000', '1001'}
    assert new_transaction_id(taken, now_ms=1000) == '1002'


def test_add_transaction_prepends_and_recomputes():
    state = BudgetState()
    state, first = add_transaction(state, _draft('income', 1000), now_ms=1)
    state, second = add_transaction(state, _draft('expense', 950, 'Food'), now_ms=2)

    assert [tx.id for tx in state.transactions] == [second.id, first.id]
    assert state.summary.total_income == 1000
    assert state.summary.total_expenses == 950
    assert state.status.level == 'danger'


def test_add_transaction_assigns_unique_ids_in_same_millisecond():
    state = BudgetState()
    state, first = add_transaction(state, _draft(), now_ms=5)
    state, second = add_transaction(state, _draft(), now_ms=5)
    assert first.id != second.id


def test_add_transaction_ignores_draft_id():
    state, tx = add_transaction(BudgetState(), dict(_draft(), id='mine'), now_ms=42)
    assert tx.id == '42'


def test_add_transaction_rejects_bad_draft():
    with pytest.raises(ValueError):
        add_transaction(BudgetState(), _draft(tx_type='loan'))


def test_apply_transaction_rejects_duplicate_id():
    tx = Transaction('1', '2024-07-01', 'income', 'Gift', 50.0, 'cash')
    state = apply_transaction(BudgetState(), tx)
    with pytest.raises(ValueError):
        apply_transaction(state, tx)


def test_apply_transaction_keeps_savings_goal():
    state = BudgetState(summary=BudgetSummary(savings_goal=20000))
    tx = Transaction('1', '2024-07-01', 'income', 'Scholarship', 3000.0, 'upi')
    new_state = apply_transaction(state, tx)
    assert new_state.summary.savings_goal == 20000
    assert new_state.summary.current_savings == 3000
    # the previous snapshot is untouched
    assert state.transactions == ()


def test_set_savings_goal_only_changes_goal():
    state, _ = add_transaction(BudgetState(), _draft('income', 600), now_ms=1)
    updated = set_savings_goal(state, 9000)
    assert updated.summary.savings_goal == 9000
    assert updated.summary.total_income == 600
    assert updated.transactions == state.transactions


def test_set_savings_goal_rejects_negative():
    with pytest.raises(ValueError):
        set_savings_goal(BudgetState(), -1)


def test_persist_saves_list_then_summary():
    store = RecordingStore()
    state, _ = add_transaction(BudgetState(), _draft(), now_ms=1)
    persist(store, state)
    assert store.saved_keys == ['transactions', 'budget']


def test_load_state_from_empty_store():
    state = load_state(MemoryStore())
    assert state.transactions == ()
    assert state.summary == BudgetSummary()


def test_load_state_rederives_summary_and_keeps_stored_goal():
    stored_tx = Transaction('1', '2024-07-01', 'income', 'Gift', 400.0, 'cash').to_dict()
    store = MemoryStore({
        'transactions': [stored_tx],
        # stale totals are ignored; only the goal is carried over
        'budget': {'totalIncome': 99999, 'savingsGoal': 2500},
    })
    state = load_state(store)
    assert state.summary.total_income == 400
    assert state.summary.savings_goal == 2500


def test_budget_session_persists_every_change():
    store = RecordingStore()
    session = BudgetSession(store)
    tx = session.add_transaction(_draft('income', 300))
    session.set_savings_goal(1500)

    assert store.saved_keys == ['transactions', 'budget', 'transactions', 'budget']
    assert [t.id for t in load_transactions(store)] == [tx.id]
    assert load_summary(store).savings_goal == 1500
    assert load_summary(store).total_income == 300


def test_budget_session_reload_matches_state():
    store = MemoryStore()
    session = BudgetSession(store)
    session.add_transaction(_draft('income', 1000))
    session.add_transaction(_draft('expense', 250, 'Books & Supplies'))
    session.set_savings_goal(4000)

    reloaded = BudgetSession(store)
    assert reloaded.transactions == session.transactions
    assert reloaded.summary == session.summary


def test_load_state_replaces_negative_stored_goal():
    stored_tx = Transaction('1', '2024-07-01', 'income', 'Gift', 400.0, 'cash').to_dict()
    state = load_state(MemoryStore({'transactions': [stored_tx], 'budget': {'savingsGoal': -100}}))
    assert state.summary.savings_goal == 5000
    assert state.summary.total_income == 400


@pytest.mark.parametrize('goal', [float('nan'), float('inf'), float('-inf')])
def test_set_savings_goal_rejects_non_finite(goal):
    with pytest.raises(ValueError):
        set_savings_goal(BudgetState(), goal)


def test_add_transaction_rejects_non_finite_amount():
    with pytest.raises(ValueError):
        add_transaction(BudgetState(), _draft(amount=float('nan')))
