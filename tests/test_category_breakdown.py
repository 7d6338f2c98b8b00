from __future__ import annotations

from backend.core.aggregation import NO_CATEGORY, compute_category_breakdown, filter_by_period
from backend.models.transaction import Transaction
from tests.helpers.factories import make_txn


def _names(items):
    return [(i.name, i.value) for i in items]


def _non_increasing(items):
    values = [i.value for i in items]
    return all(a >= b for a, b in zip(values, values[1:]))


def test_month_and_year_filter_keeps_only_matching_transaction():
    txns = [
        make_txn(1, date="2024-03-10", amount=-80, category="Alimentação"),
        make_txn(2, date="2024-04-10", amount=-120, category="Alimentação"),
    ]

    result = compute_category_breakdown(txns, month=3, year=2024)

    assert _names(result.expenses) == [("Alimentação", 80)]
    assert result.totalExpenses == 80
    assert result.income == []


def test_year_only_filter():
    txns = [
        make_txn(1, date="2023-12-31", amount=-10, category="A"),
        make_txn(2, date="2024-01-01", amount=-20, category="A"),
        make_txn(3, date="2024-09-01", amount=-30, category="B"),
    ]
    result = compute_category_breakdown(txns, year="2024")
    assert _names(result.expenses) == [("B", 30), ("A", 20)]


def test_month_without_year_keeps_everything():
    txns = [
        make_txn(1, date="2023-03-01", amount=-10, category="A"),
        make_txn(2, date="2024-07-01", amount=-20, category="A"),
    ]
    for year in (None, "all", "todos"):
        result = compute_category_breakdown(txns, month=3, year=year)
        assert result.totalExpenses == 30


def test_receita_natureza_counts_as_income_even_when_typed_expense():
    txns = [
        make_txn(1, amount=-200, type="expense", category="Reembolso", natureza="Receita"),
        make_txn(2, amount=1000, type="income", category="Trabalho"),
        make_txn(3, amount=-50, type="expense", category="Transporte", natureza="Despesa"),
    ]

    result = compute_category_breakdown(txns)

    assert _names(result.income) == [("Trabalho", 1000), ("Reembolso", 200)]
    assert _names(result.expenses) == [("Transporte", 50)]
    assert result.totalIncome == 1200
    assert result.totalExpenses == 50
    assert result.balance == 1150


def test_operational_transactions_land_in_expenses_here():
    # only the monthly series excludes Operacional; the category view does not
    txns = [make_txn(1, amount=-300, type="expense", category="Transferência", natureza="Operacional")]
    assert _names(compute_category_breakdown(txns).expenses) == [("Transferência", 300)]


def test_sorted_descending_with_ties_in_first_seen_order():
    txns = [
        make_txn(1, amount=-10, category="Lazer"),
        make_txn(2, amount=-40, category="Saúde"),
        make_txn(3, amount=-10, category="Utilidades"),
        make_txn(4, amount=-25, category="Lazer"),
        make_txn(5, amount=-35, category="Transporte"),
    ]

    result = compute_category_breakdown(txns)

    assert _names(result.expenses) == [("Saúde", 40), ("Lazer", 35), ("Transporte", 35), ("Utilidades", 10)]
    assert _non_increasing(result.expenses)


def test_missing_category_uses_fallback_label():
    txns = [make_txn(1, amount=-15, category=""), make_txn(2, amount=-5, category="   ")]
    assert _names(compute_category_breakdown(txns).expenses) == [(NO_CATEGORY, 20)]


def test_empty_input():
    result = compute_category_breakdown([], month=1, year=2024)
    assert result.income == [] and result.expenses == []
    assert result.totalIncome == result.totalExpenses == result.balance == 0


def test_filter_skips_undated_records_only_when_filtering():
    broken = Transaction.model_construct(id=7, date=None, amount=-9.0, type="expense", category="X")
    good = make_txn(1, date="2024-05-05", amount=-1)

    assert filter_by_period([broken, good], year=2024) == [good]
    assert filter_by_period([broken, good]) == [broken, good]
