"""Stores and balance calculation.

The transaction engine lives in
ledger_service.services.transaction_engine and is imported
from there directly.
"""

from ledger_service.services.account_store import AccountStore
from ledger_service.services.ledger_store import LedgerStore
from ledger_service.services.transaction_store import TransactionStore
from ledger_service.services.balance_calculator import BalanceCalculator

__all__ = ["AccountStore", "LedgerStore", "TransactionStore", "BalanceCalculator"]
