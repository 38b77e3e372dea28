"""
Ledger Service: FastAPI Application.

This is the entry point for the application.
All routers are registered here.
"""

from fastapi import FastAPI

from ledger_service.config import get_settings
from ledger_service.logging_config import setup_logging
from ledger_service.api.health import router as health_router
from ledger_service.api.accounts import router as accounts_router
from ledger_service.api.transactions import router as transactions_router
from ledger_service.api.ledger import router as ledger_router

settings = get_settings()

setup_logging(settings.LOG_LEVEL)

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Double-entry ledger for transfers, deposits, and withdrawals",
)

# Register routers
app.include_router(health_router)
app.include_router(accounts_router)
app.include_router(transactions_router)
app.include_router(ledger_router)
