"""
Pydantic schemas for ledger reads.

Entries are only ever written by the transaction engine, so
there are no request schemas here.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel

from ledger_service.models.enums import EntryType


class LedgerEntryResponse(BaseModel):
    id: int
    account_id: int
    transaction_id: int
    entry_type: EntryType
    amount: Decimal
    created_at: datetime

    model_config = {"from_attributes": True}


class IntegrityReport(BaseModel):
    """Result of a whole-ledger double-entry check."""
    total_debits: Decimal
    total_credits: Decimal
    is_balanced: bool
    unbalanced_transactions: list[int]
