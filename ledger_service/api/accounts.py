"""
Account API endpoints.

Creation, listing, balance, and raw ledger reads. None of these
move money, so they use a plain request-scoped session.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ledger_service.api.errors import to_http_exception
from ledger_service.errors import LedgerError
from ledger_service.models.base import get_db
from ledger_service.services.account_store import AccountStore
from ledger_service.services.balance_calculator import BalanceCalculator
from ledger_service.services.ledger_store import LedgerStore
from ledger_service.schemas.account import (
    AccountCreate,
    AccountResponse,
    AccountBalanceResponse,
)
from ledger_service.schemas.ledger import LedgerEntryResponse

router = APIRouter(prefix="/accounts", tags=["Accounts"])


@router.post("", response_model=AccountResponse, status_code=201)
def create_account(
    request: AccountCreate,
    db: Session = Depends(get_db),
):
    """Open a new account in active status."""
    store = AccountStore(db)
    account = store.create(
        user_id=request.user_id,
        account_type=request.account_type,
        currency=request.currency,
    )
    db.commit()
    return account


@router.get("", response_model=list[AccountResponse])
def list_accounts(
    user_id: int | None = None,
    db: Session = Depends(get_db),
):
    """List accounts, optionally only those owned by one user."""
    return AccountStore(db).list_accounts(user_id=user_id)


@router.get("/{account_id}", response_model=AccountBalanceResponse)
def get_account(
    account_id: int,
    db: Session = Depends(get_db),
):
    """Get account details with the balance calculated from the ledger."""
    try:
        account = AccountStore(db).get(account_id)
    except LedgerError as e:
        raise to_http_exception(e)

    balance = BalanceCalculator(LedgerStore(db)).balance(account.id)
    return AccountBalanceResponse(
        id=account.id,
        user_id=account.user_id,
        account_type=account.account_type,
        currency=account.currency,
        status=account.status,
        created_at=account.created_at,
        balance=balance,
    )


@router.get(
    "/{account_id}/ledger",
    response_model=list[LedgerEntryResponse],
)
def get_account_ledger(
    account_id: int,
    db: Session = Depends(get_db),
):
    """Get all ledger entries for an account, oldest first."""
    try:
        AccountStore(db).get(account_id)
    except LedgerError as e:
        raise to_http_exception(e)
    return LedgerStore(db).get_entries_by_account(account_id)
