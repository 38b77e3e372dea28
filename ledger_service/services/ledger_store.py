"""
Ledger store: the append-only record of debits and credits.

This store enforces the per-entry rules:
1. Amounts are strictly positive (the entry type carries the sign)
2. Entries are never updated or deleted

Pairing entries into balanced postings is the transaction
engine's job. check_integrity() verifies the result across the
whole ledger.
"""

from decimal import Decimal

from sqlalchemy import select, func, case
from sqlalchemy.orm import Session

from ledger_service.errors import ErrorKind, LedgerError
from ledger_service.models.ledger_entry import LedgerEntry
from ledger_service.models.enums import EntryType


class LedgerStore:
    """
    The store takes a session as a constructor argument, so the
    caller controls the transaction boundary.
    """

    def __init__(self, db: Session):
        self.db = db

    def append(
        self,
        account_id: int,
        transaction_id: int,
        entry_type: EntryType,
        amount: Decimal,
    ) -> LedgerEntry:
        if amount <= 0:
            raise LedgerError(
                ErrorKind.INVALID_REQUEST,
                f"Ledger entry amount must be positive, got {amount}",
            )

        entry = LedgerEntry(
            account_id=account_id,
            transaction_id=transaction_id,
            entry_type=entry_type,
            amount=amount,
        )
        self.db.add(entry)
        self.db.flush()
        return entry

    def sum_entries(self, account_id: int) -> Decimal:
        """
        Signed sum of an account's entries: credits minus debits.

        Zero for an account with no entries.
        """
        signed_amount = case(
            (LedgerEntry.entry_type == EntryType.CREDIT, LedgerEntry.amount),
            else_=-LedgerEntry.amount,
        )
        total = self.db.execute(
            select(func.coalesce(func.sum(signed_amount), 0)).where(
                LedgerEntry.account_id == account_id
            )
        ).scalar()
        return Decimal(str(total))

    def get_entries_by_account(self, account_id: int) -> list[LedgerEntry]:
        """Return all entries for an account, oldest first."""
        entries = self.db.execute(
            select(LedgerEntry)
            .where(LedgerEntry.account_id == account_id)
            .order_by(LedgerEntry.created_at.asc(), LedgerEntry.id.asc())
        ).scalars().all()
        return list(entries)

    def get_entries_by_transaction(
        self, transaction_id: int
    ) -> list[LedgerEntry]:
        """Return all entries for a transaction."""
        entries = self.db.execute(
            select(LedgerEntry)
            .where(LedgerEntry.transaction_id == transaction_id)
            .order_by(LedgerEntry.id.asc())
        ).scalars().all()
        return list(entries)

    def check_integrity(self) -> dict:
        """
        Verify double-entry balance across the whole ledger.

        Returns the overall debit and credit totals plus the ids
        of any transaction whose own entries do not balance.
        """
        debit_amount = case(
            (LedgerEntry.entry_type == EntryType.DEBIT, LedgerEntry.amount),
            else_=0,
        )
        credit_amount = case(
            (LedgerEntry.entry_type == EntryType.CREDIT, LedgerEntry.amount),
            else_=0,
        )

        rows = self.db.execute(
            select(
                LedgerEntry.transaction_id,
                func.sum(debit_amount),
                func.sum(credit_amount),
            ).group_by(LedgerEntry.transaction_id)
        ).all()

        total_debits = Decimal("0")
        total_credits = Decimal("0")
        unbalanced = []
        for transaction_id, debits, credits in rows:
            debits = Decimal(str(debits))
            credits = Decimal(str(credits))
            total_debits += debits
            total_credits += credits
            if debits != credits:
                unbalanced.append(transaction_id)

        return {
            "total_debits": total_debits,
            "total_credits": total_credits,
            "is_balanced": total_debits == total_credits and not unbalanced,
            "unbalanced_transactions": unbalanced,
        }
