"""
Fundify — Dashboard API
Everything the landing page needs in one call.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends

from backend.api.routes.summary import check_period
from backend.core.aggregation import compute_balance, compute_category_breakdown, compute_monthly_series
from backend.services.transaction_store import TransactionStore, get_transaction_store, newest_first

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])

RECENT_LIMIT = 10


@router.get("")
async def get_dashboard(
    year: Optional[str] = None,
    store: TransactionStore = Depends(get_transaction_store),
) -> Dict[str, Any]:
    year = check_period(year, "year", 1, 9999)
    snapshot = store.snapshot()

    return {
        "balance": compute_balance(snapshot).model_dump(),
        "transactions": [t.model_dump(mode="json") for t in newest_first(snapshot)[:RECENT_LIMIT]],
        "charts": {
            "monthly": [m.model_dump() for m in compute_monthly_series(snapshot, year=year)],
            "categories": compute_category_breakdown(snapshot, year=year).model_dump(),
        },
    }
