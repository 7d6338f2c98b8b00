from __future__ import annotations

from typing import List

from loguru import logger

from backend.config import settings
from backend.models.transaction import TransactionCreate
from backend.services.transaction_store import TransactionStore


SAMPLE_TRANSACTIONS: List[dict] = [
    {"date": "2024-01-15", "description": "Salário", "amount": 5000.00, "type": "income", "category": "Trabalho"},
    {"date": "2024-01-14", "description": "Supermercado", "amount": -450.50, "type": "expense", "category": "Alimentação"},
    {"date": "2024-01-13", "description": "Freelance", "amount": 1200.00, "type": "income", "category": "Trabalho"},
    {"date": "2024-01-12", "description": "Conta de Luz", "amount": -280.00, "type": "expense", "category": "Utilidades"},
    {"date": "2024-01-11", "description": "Restaurante", "amount": -120.00, "type": "expense", "category": "Alimentação"},
    {"date": "2024-01-10", "description": "Investimento", "amount": 2000.00, "type": "income", "category": "Investimentos"},
    {"date": "2024-01-09", "description": "Uber", "amount": -35.00, "type": "expense", "category": "Transporte"},
]


def ensure_sample_data(store: TransactionStore) -> int:
    """
    Seeds the demo transactions into an empty store.
    Returns how many were added (0 when disabled or already populated).
    """
    if not settings.SEED_SAMPLE_DATA:
        return 0
    if len(store):
        return 0

    created = store.add_many(TransactionCreate(**row) for row in SAMPLE_TRANSACTIONS)
    logger.info("Seeded sample transactions count={}", len(created))
    return len(created)
