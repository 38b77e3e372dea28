"""
Money movement API endpoints.

The handlers do not commit or roll back anything themselves:
the transaction engine opens and closes its own unit of work.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ledger_service.api.errors import to_http_exception
from ledger_service.config import get_settings
from ledger_service.errors import LedgerError
from ledger_service.models.base import SessionLocal, get_db
from ledger_service.services.transaction_engine import TransactionEngine
from ledger_service.services.transaction_store import TransactionStore
from ledger_service.schemas.transaction import (
    DepositRequest,
    WithdrawalRequest,
    TransferRequest,
    TransactionResponse,
)

router = APIRouter(tags=["Transactions"])


def get_transaction_engine() -> TransactionEngine:
    """Build the engine from settings. Overridden in tests."""
    try:
        return TransactionEngine(SessionLocal, get_settings().SYSTEM_ACCOUNT_ID)
    except LedgerError as e:
        raise to_http_exception(e)


@router.post("/transfers", response_model=TransactionResponse, status_code=201)
def transfer(
    request: TransferRequest,
    engine: TransactionEngine = Depends(get_transaction_engine),
):
    """Transfer money between two accounts."""
    try:
        return engine.transfer(request)
    except LedgerError as e:
        raise to_http_exception(e)


@router.post("/deposits", response_model=TransactionResponse, status_code=201)
def deposit(
    request: DepositRequest,
    engine: TransactionEngine = Depends(get_transaction_engine),
):
    """Deposit money into an account."""
    try:
        return engine.deposit(request)
    except LedgerError as e:
        raise to_http_exception(e)


@router.post("/withdrawals", response_model=TransactionResponse, status_code=201)
def withdraw(
    request: WithdrawalRequest,
    engine: TransactionEngine = Depends(get_transaction_engine),
):
    """Withdraw money from an account."""
    try:
        return engine.withdraw(request)
    except LedgerError as e:
        raise to_http_exception(e)


@router.get("/transactions/{transaction_id}", response_model=TransactionResponse)
def get_transaction(
    transaction_id: int,
    db: Session = Depends(get_db),
):
    """Get transaction details."""
    try:
        return TransactionStore(db).get(transaction_id)
    except LedgerError as e:
        raise to_http_exception(e)
