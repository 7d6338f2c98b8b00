"""
Fundify — Aggregation Engine
Pure folds over a transaction snapshot: balance summary, monthly running-balance
series, category breakdown and payroll (proventos/descontos) breakdown.

Nothing here mutates its input or touches shared state. Each function makes one
pass over the transactions it is given.
"""
from __future__ import annotations

import datetime as dt
from typing import Dict, Iterable, List, Optional, Tuple, Union

from loguru import logger

from backend.config import settings
from backend.models.summary import Balance, CategoryBreakdown, CategoryItem, MonthlyEntry, SalaryBreakdown
from backend.models.transaction import Transaction


MONTH_LABELS = ("Jan", "Fev", "Mar", "Abr", "Mai", "Jun", "Jul", "Ago", "Set", "Out", "Nov", "Dez")
NO_CATEGORY = "Sem categoria"
PAYROLL_CATEGORY = settings.PAYROLL_CATEGORY
WILDCARDS = frozenset({"", "all", "todos", "*"})

PeriodValue = Union[int, str, None]


# ── Classification predicates ───────────────────────────
# Each computation uses its own income test; they are deliberately not unified.

def is_operational(txn: Transaction) -> bool:
    """Internal transfers, excluded from the monthly series."""
    return txn.natureza == "Operacional"


def is_income(txn: Transaction) -> bool:
    """Strict test on the type tag (balance, monthly series)."""
    return txn.type == "income"


def is_expense(txn: Transaction) -> bool:
    return txn.type == "expense"


def is_income_or_receita(txn: Transaction) -> bool:
    """Loose test used by the category breakdown: type OR natureza."""
    return txn.type == "income" or txn.natureza == "Receita"


# ── Period helpers ──────────────────────────────────────

def concrete_period(value: PeriodValue) -> Optional[int]:
    """Return the integer behind a month/year filter, or None for a wildcard."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    s = str(value).strip().lower()
    if s in WILDCARDS:
        return None
    try:
        return int(s)
    except ValueError:
        logger.debug("Ignoring non-numeric period filter value={!r}", value)
        return None


def resolve_year(year: PeriodValue = None, today: Optional[dt.date] = None) -> int:
    """Concrete year, falling back to the current calendar year."""
    concrete = concrete_period(year)
    if concrete is not None:
        return concrete
    return (today or dt.date.today()).year


def _year_month(txn: Transaction) -> Optional[Tuple[int, int]]:
    d = txn.date
    if isinstance(d, dt.date):
        return d.year, d.month
    try:
        parsed = dt.date.fromisoformat(str(d)[:10])
    except (TypeError, ValueError):
        logger.debug("Skipping transaction id={} with unusable date={!r}", getattr(txn, "id", None), d)
        return None
    return parsed.year, parsed.month


def filter_by_period(
    transactions: Iterable[Transaction],
    month: PeriodValue = None,
    year: PeriodValue = None,
) -> List[Transaction]:
    """
    month + year -> both must match; year only -> same year; anything else
    (including a month without a year) -> everything.
    """
    m = concrete_period(month)
    y = concrete_period(year)
    if y is None:
        return list(transactions)

    out: List[Transaction] = []
    for txn in transactions:
        ym = _year_month(txn)
        if ym is None or ym[0] != y:
            continue
        if m is not None and ym[1] != m:
            continue
        out.append(txn)
    return out


def _ranked(totals: Dict[str, float]) -> List[CategoryItem]:
    # sorted() is stable with reverse=True, so ties keep first-seen order
    ranked = sorted(totals.items(), key=lambda kv: kv[1], reverse=True)
    return [CategoryItem(name=name, value=value) for name, value in ranked]


def _net(txn: Transaction) -> float:
    if is_income(txn):
        return abs(txn.amount)
    if is_expense(txn):
        return -abs(txn.amount)
    return 0.0


# ── Public API ──────────────────────────────────────────

def compute_balance(transactions: Iterable[Transaction]) -> Balance:
    income = 0.0
    expenses = 0.0
    for txn in transactions:
        if is_income(txn):
            income += abs(txn.amount)
        elif is_expense(txn):
            expenses += abs(txn.amount)
    total = income - expenses
    return Balance(income=income, expenses=expenses, total=total, savings=total)


def compute_monthly_series(
    transactions: Iterable[Transaction],
    year: PeriodValue = None,
    today: Optional[dt.date] = None,
) -> List[MonthlyEntry]:
    """
    Twelve entries (Jan..Dec) for the target year.

    Operacional transactions are dropped. Everything dated before the target
    year collapses into January's initialBalance; from there each month's
    finalBalance becomes the next month's initialBalance.
    """
    target = resolve_year(year, today)

    opening = 0.0
    income = [0.0] * 12
    expenses = [0.0] * 12

    for txn in transactions:
        if is_operational(txn):
            continue
        ym = _year_month(txn)
        if ym is None:
            continue
        txn_year, txn_month = ym
        if txn_year < target:
            opening += _net(txn)
        elif txn_year == target:
            if is_income(txn):
                income[txn_month - 1] += abs(txn.amount)
            elif is_expense(txn):
                expenses[txn_month - 1] += abs(txn.amount)

    series: List[MonthlyEntry] = []
    running = opening
    for idx, label in enumerate(MONTH_LABELS):
        operational = income[idx] - expenses[idx]
        final = running + operational
        series.append(
            MonthlyEntry(
                month=label,
                initialBalance=running,
                income=income[idx],
                expenses=expenses[idx],
                operationalBalance=operational,
                finalBalance=final,
            )
        )
        running = final
    return series


def compute_category_breakdown(
    transactions: Iterable[Transaction],
    month: PeriodValue = None,
    year: PeriodValue = None,
) -> CategoryBreakdown:
    income_totals: Dict[str, float] = {}
    expense_totals: Dict[str, float] = {}

    for txn in filter_by_period(transactions, month=month, year=year):
        key = (txn.category or "").strip() or NO_CATEGORY
        bucket = income_totals if is_income_or_receita(txn) else expense_totals
        bucket[key] = bucket.get(key, 0.0) + abs(txn.amount)

    total_income = sum(income_totals.values(), 0.0)
    total_expenses = sum(expense_totals.values(), 0.0)
    return CategoryBreakdown(
        income=_ranked(income_totals),
        expenses=_ranked(expense_totals),
        totalIncome=total_income,
        totalExpenses=total_expenses,
        balance=total_income - total_expenses,
    )


def compute_salary_breakdown(
    transactions: Iterable[Transaction],
    month: PeriodValue = None,
    year: PeriodValue = None,
    payroll_category: Optional[str] = None,
) -> SalaryBreakdown:
    """
    Payroll view of the category breakdown, keyed by conta (or description).

    proventos sum the signed amount, so a reversal can pull an entry negative;
    descontos sum the absolute amount.
    """
    label = payroll_category or PAYROLL_CATEGORY
    payroll = [txn for txn in transactions if txn.category == label]

    proventos: Dict[str, float] = {}
    descontos: Dict[str, float] = {}
    for txn in filter_by_period(payroll, month=month, year=year):
        key = txn.conta or txn.description
        if txn.natureza == "Receita":
            proventos[key] = proventos.get(key, 0.0) + txn.amount
        elif txn.natureza == "Despesa":
            descontos[key] = descontos.get(key, 0.0) + abs(txn.amount)

    total_proventos = sum(proventos.values(), 0.0)
    total_descontos = sum(descontos.values(), 0.0)
    return SalaryBreakdown(
        proventos=_ranked(proventos),
        descontos=_ranked(descontos),
        totalProventos=total_proventos,
        totalDescontos=total_descontos,
        liquido=total_proventos - total_descontos,
    )
