from fastapi import APIRouter

from backend.api.routes import dashboard, summary, transactions

api_router = APIRouter()

api_router.include_router(transactions.router)
api_router.include_router(summary.router)
api_router.include_router(dashboard.router)
