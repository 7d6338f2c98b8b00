from __future__ import annotations

from backend.core.aggregation import compute_balance
from tests.helpers.factories import make_txn


def test_income_and_expense_magnitudes():
    txns = [
        make_txn(1, amount=5000, type="income", category="Trabalho"),
        make_txn(2, amount=-450.5, type="expense", category="Alimentação"),
    ]

    balance = compute_balance(txns)

    assert balance.income == 5000
    assert balance.expenses == 450.5
    assert balance.total == 4549.5
    assert balance.savings == 4549.5


def test_empty_input_is_all_zero():
    balance = compute_balance([])
    assert balance.model_dump() == {"income": 0.0, "expenses": 0.0, "total": 0.0, "savings": 0.0}


def test_unsigned_expense_input_still_counts_as_expense():
    # amount sign is normalised from the type tag at construction
    balance = compute_balance([make_txn(1, amount=120, type="expense")])
    assert balance.expenses == 120
    assert balance.total == -120


def test_total_is_income_minus_expenses_and_never_negative_parts():
    txns = [
        make_txn(1, amount=10.1, type="income"),
        make_txn(2, amount=-3.3, type="expense"),
        make_txn(3, amount=7.25, type="income"),
        make_txn(4, amount=-99.99, type="expense"),
    ]

    balance = compute_balance(txns)

    assert balance.income >= 0
    assert balance.expenses >= 0
    assert balance.total == balance.income - balance.expenses
    assert balance.savings == balance.total


def test_natureza_does_not_change_balance_classification():
    # balance uses the strict type tag; Receita on an expense stays an expense
    txns = [make_txn(1, amount=-50, type="expense", natureza="Receita")]
    balance = compute_balance(txns)
    assert balance.income == 0
    assert balance.expenses == 50


def test_input_is_not_mutated():
    txns = [make_txn(1, amount=10, type="income"), make_txn(2, amount=-4, type="expense")]
    before = [t.model_dump() for t in txns]
    compute_balance(txns)
    assert [t.model_dump() for t in txns] == before
