"""
Transaction store: transaction records.

A record is created PENDING and moved to COMPLETED exactly once.
Both steps happen inside the same unit of work as the ledger
entries, so no other session ever sees a PENDING row.
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy.orm import Session

from ledger_service.errors import ErrorKind, LedgerError
from ledger_service.models.transaction import Transaction
from ledger_service.models.enums import TransactionType, TransactionStatus


class TransactionStore:

    def __init__(self, db: Session):
        self.db = db

    def create(
        self,
        tx_type: TransactionType,
        source_account_id: int,
        destination_account_id: int,
        amount: Decimal,
        currency: str,
        description: str | None = None,
    ) -> Transaction:
        txn = Transaction(
            tx_type=tx_type,
            source_account_id=source_account_id,
            destination_account_id=destination_account_id,
            amount=amount,
            currency=currency,
            status=TransactionStatus.PENDING,
            description=description,
        )
        self.db.add(txn)
        self.db.flush()
        return txn

    def finalize(self, transaction_id: int) -> Transaction:
        """Move a PENDING transaction to COMPLETED."""
        txn = self.get(transaction_id)
        if txn.status != TransactionStatus.PENDING:
            raise LedgerError(
                ErrorKind.INVALID_STATE,
                f"Transaction {transaction_id} is already "
                f"{txn.status.value}",
            )

        txn.status = TransactionStatus.COMPLETED
        txn.completed_at = datetime.utcnow()
        self.db.flush()
        return txn

    def get(self, transaction_id: int) -> Transaction:
        txn = self.db.get(Transaction, transaction_id)
        if not txn:
            raise LedgerError(
                ErrorKind.NOT_FOUND, f"Transaction {transaction_id} not found"
            )
        return txn
