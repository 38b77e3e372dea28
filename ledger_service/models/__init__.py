"""
Database models package.

All models must be imported here so that Alembic can discover
them through Base.metadata when generating migrations.
"""

from ledger_service.models.base import Base
from ledger_service.models.enums import (
    AccountType,
    AccountStatus,
    TransactionType,
    TransactionStatus,
    EntryType,
)
from ledger_service.models.account import Account
from ledger_service.models.transaction import Transaction
from ledger_service.models.ledger_entry import LedgerEntry

__all__ = [
    "Base",
    "AccountType",
    "AccountStatus",
    "TransactionType",
    "TransactionStatus",
    "EntryType",
    "Account",
    "Transaction",
    "LedgerEntry",
]
