"""
Fundify — Transaction API
Create, list, bulk import (JSON or CSV) and bulk clear.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile
from fastapi.responses import PlainTextResponse
from loguru import logger
from pydantic import BaseModel

from backend.models.transaction import Transaction, TransactionCreate
from backend.pipelines.csv_parser import TEMPLATE_CSV, CSVImportError, parse_transactions_csv
from backend.services.transaction_store import (
    TransactionNotFoundError,
    TransactionStore,
    get_transaction_store,
    newest_first,
)

router = APIRouter(prefix="/api/transactions", tags=["transactions"])


class ImportRequest(BaseModel):
    transactions: List[TransactionCreate] = []


class ImportResult(BaseModel):
    transactions: List[Transaction]
    count: int


@router.get("")
async def list_transactions(
    limit: Optional[int] = Query(default=None, ge=1),
    store: TransactionStore = Depends(get_transaction_store),
) -> List[Transaction]:
    items = newest_first(store.snapshot())
    return items[:limit] if limit else items


@router.get("/template", response_class=PlainTextResponse)
async def download_template() -> PlainTextResponse:
    return PlainTextResponse(
        TEMPLATE_CSV,
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=template_transacoes.csv"},
    )


@router.get("/{txn_id}")
async def get_transaction(txn_id: str, store: TransactionStore = Depends(get_transaction_store)) -> Transaction:
    try:
        return store.get(txn_id)
    except TransactionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("", status_code=201)
async def create_transaction(
    payload: TransactionCreate,
    store: TransactionStore = Depends(get_transaction_store),
) -> Transaction:
    return store.add(payload)


@router.post("/import", status_code=201)
async def import_transactions(
    req: ImportRequest,
    store: TransactionStore = Depends(get_transaction_store),
) -> ImportResult:
    if not req.transactions:
        raise HTTPException(status_code=400, detail="No transactions to import")
    created = store.add_many(req.transactions)
    return ImportResult(transactions=created, count=len(created))


@router.post("/import-csv", status_code=201)
async def import_transactions_csv(
    file: UploadFile = File(...),
    store: TransactionStore = Depends(get_transaction_store),
) -> ImportResult:
    if not file.filename:
        raise HTTPException(status_code=400, detail="Missing filename")

    try:
        payloads = parse_transactions_csv(await file.read())
    except CSVImportError as e:
        logger.warning("CSV import rejected file={} err={}", file.filename, str(e))
        raise HTTPException(status_code=400, detail=str(e))

    created = store.add_many(payloads)
    return ImportResult(transactions=created, count=len(created))


@router.delete("")
async def clear_transactions(store: TransactionStore = Depends(get_transaction_store)) -> Dict[str, Any]:
    return {"removed": store.clear()}
