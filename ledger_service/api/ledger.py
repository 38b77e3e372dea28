"""
Ledger API endpoints.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ledger_service.models.base import get_db
from ledger_service.services.ledger_store import LedgerStore
from ledger_service.schemas.ledger import IntegrityReport

router = APIRouter(prefix="/ledger", tags=["Ledger"])


@router.get("/integrity", response_model=IntegrityReport)
def check_integrity(db: Session = Depends(get_db)):
    """
    Verify that total debits equal total credits, overall and
    per transaction.
    """
    return LedgerStore(db).check_integrity()
