"""
Atomic unit of work.

A UnitOfWork owns one database session for the duration of a
`with` block. All stores handed out by it share that session,
so every read and write inside the block belongs to the same
database transaction.

Exit rules:
- the block finishes normally: commit
- the block raises: rollback, then the exception propagates
- always: the session is closed, releasing row locks
"""

from sqlalchemy.orm import Session, sessionmaker

from ledger_service.models.base import SessionLocal
from ledger_service.services.account_store import AccountStore
from ledger_service.services.ledger_store import LedgerStore
from ledger_service.services.transaction_store import TransactionStore


class UnitOfWork:

    def __init__(self, session_factory: sessionmaker = SessionLocal):
        self.session_factory = session_factory
        self.session: Session | None = None

    def __enter__(self) -> "UnitOfWork":
        self.session = self.session_factory()
        self.accounts = AccountStore(self.session)
        self.ledger = LedgerStore(self.session)
        self.transactions = TransactionStore(self.session)
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        try:
            if exc_type is None:
                self.session.commit()
            else:
                self.session.rollback()
        finally:
            # Closing also rolls back anything a failed commit left open
            self.session.close()
            self.session = None
        return False
