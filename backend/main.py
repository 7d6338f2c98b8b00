from __future__ import annotations

from typing import Any, Dict

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from backend.api.router import api_router
from backend.config import settings
from backend.services.transaction_store import TransactionStore, get_transaction_store
from backend.utils.logging_setup import configure_logging
from backend.utils.sample_data import ensure_sample_data


configure_logging()

app = FastAPI(
    title="Fundify Backend",
    version="1.0.0",
    description="Fundify — personal finance dashboard API",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.state.transaction_store = TransactionStore()

app.include_router(api_router)


@app.on_event("startup")
async def _startup() -> None:
    seeded = ensure_sample_data(app.state.transaction_store)
    logger.info("Fundify backend ready env={} seeded={}", settings.APP_ENV, seeded)


@app.get("/api/health")
async def health(store: TransactionStore = Depends(get_transaction_store)) -> Dict[str, Any]:
    return {
        "status": "ok",
        "message": "Fundify API is running",
        "env": settings.APP_ENV,
        "transactions": len(store),
    }
