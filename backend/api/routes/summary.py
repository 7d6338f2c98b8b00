"""
Fundify — Summary API
Thin wrappers exposing the aggregation engine over the current store snapshot.
"""
from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException

from backend.core.aggregation import (
    WILDCARDS,
    compute_balance,
    compute_category_breakdown,
    compute_monthly_series,
    compute_salary_breakdown,
)
from backend.models.summary import Balance, CategoryBreakdown, MonthlyEntry, SalaryBreakdown
from backend.services.transaction_store import TransactionStore, get_transaction_store

router = APIRouter(prefix="/api/summary", tags=["summary"])


def check_period(value: Optional[str], name: str, low: int, high: int) -> Optional[str]:
    """Wildcards pass through; concrete values must be integers in [low, high]."""
    if value is None or value.strip().lower() in WILDCARDS:
        return value
    try:
        n = int(value)
    except ValueError:
        raise HTTPException(status_code=422, detail=f"{name} must be an integer or 'all'")
    if not low <= n <= high:
        raise HTTPException(status_code=422, detail=f"{name} must be between {low} and {high}")
    return value


@router.get("/balance")
async def get_balance(store: TransactionStore = Depends(get_transaction_store)) -> Balance:
    return compute_balance(store.snapshot())


@router.get("/monthly")
async def get_monthly(
    year: Optional[str] = None,
    store: TransactionStore = Depends(get_transaction_store),
) -> List[MonthlyEntry]:
    year = check_period(year, "year", 1, 9999)
    return compute_monthly_series(store.snapshot(), year=year)


@router.get("/categories")
async def get_categories(
    month: Optional[str] = None,
    year: Optional[str] = None,
    store: TransactionStore = Depends(get_transaction_store),
) -> CategoryBreakdown:
    month = check_period(month, "month", 1, 12)
    year = check_period(year, "year", 1, 9999)
    return compute_category_breakdown(store.snapshot(), month=month, year=year)


@router.get("/salary")
async def get_salary(
    month: Optional[str] = None,
    year: Optional[str] = None,
    store: TransactionStore = Depends(get_transaction_store),
) -> SalaryBreakdown:
    month = check_period(month, "month", 1, 12)
    year = check_period(year, "year", 1, 9999)
    return compute_salary_breakdown(store.snapshot(), month=month, year=year)
