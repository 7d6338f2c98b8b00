"""Shared fixtures.

Every test gets its own ``TransactionStore`` injected through FastAPI's
dependency overrides, so API tests never see the app-level store or the demo
seed data (startup events do not run because the client is not used as a
context manager).
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from backend.main import app
from backend.services.transaction_store import TransactionStore, get_transaction_store


@pytest.fixture()
def store() -> TransactionStore:
    return TransactionStore()


@pytest.fixture()
def client(store: TransactionStore) -> Iterator[TestClient]:
    app.dependency_overrides[get_transaction_store] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_transaction_store, None)
