"""
Fundify — in-memory transaction store.
Single writer under a lock; readers get an immutable snapshot.
"""
from __future__ import annotations

import threading
from typing import Iterable, List, Tuple, Union

from fastapi import Request
from loguru import logger

from backend.models.transaction import Transaction, TransactionCreate


class TransactionNotFoundError(KeyError):
    def __init__(self, txn_id: Union[int, str]) -> None:
        super().__init__(txn_id)
        self.txn_id = txn_id

    def __str__(self) -> str:
        return f"Transaction {self.txn_id} not found"


class TransactionStore:
    def __init__(self) -> None:
        self._items: Tuple[Transaction, ...] = ()
        self._next_id = 1
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._items)

    def _build(self, payload: TransactionCreate) -> Transaction:
        txn = Transaction(id=self._next_id, **payload.model_dump())
        self._next_id += 1
        return txn

    def add(self, payload: TransactionCreate) -> Transaction:
        with self._lock:
            txn = self._build(payload)
            self._items = self._items + (txn,)
        logger.info("Transaction created id={} type={} amount={}", txn.id, txn.type, txn.amount)
        return txn

    def add_many(self, payloads: Iterable[TransactionCreate]) -> List[Transaction]:
        payloads = list(payloads)
        with self._lock:
            created = [self._build(p) for p in payloads]
            self._items = self._items + tuple(created)
        logger.info("Imported transactions count={} total={}", len(created), len(self._items))
        return created

    def get(self, txn_id: Union[int, str]) -> Transaction:
        for txn in self._items:
            if str(txn.id) == str(txn_id):
                return txn
        raise TransactionNotFoundError(txn_id)

    def snapshot(self) -> Tuple[Transaction, ...]:
        # tuples are replaced, never mutated, so the reference is a stable snapshot
        return self._items

    def clear(self) -> int:
        with self._lock:
            removed = len(self._items)
            self._items = ()
            self._next_id = 1
        logger.info("Transaction store cleared removed={}", removed)
        return removed


def newest_first(transactions: Iterable[Transaction]) -> List[Transaction]:
    """Most recent date first; same-day entries by id, latest first."""
    def _key(txn: Transaction):
        tid = txn.id if isinstance(txn.id, int) else 0
        return (txn.date, tid)

    return sorted(transactions, key=_key, reverse=True)


def get_transaction_store(request: Request) -> TransactionStore:
    return request.app.state.transaction_store
