"""
Account store: account records and row locks.

Account lifecycle is deliberately thin here: accounts are
created active and the transaction engine only ever reads them
(under lock), it never updates them.
"""

from sqlalchemy import select
from sqlalchemy.orm import Session

from ledger_service.errors import ErrorKind, LedgerError
from ledger_service.models.account import Account
from ledger_service.models.enums import AccountStatus, AccountType


class AccountStore:

    def __init__(self, db: Session):
        self.db = db

    def create(
        self,
        user_id: int,
        account_type: AccountType,
        currency: str,
        status: AccountStatus = AccountStatus.ACTIVE,
    ) -> Account:
        """Create an account. The caller controls the commit."""
        account = Account(
            user_id=user_id,
            account_type=account_type,
            currency=currency.upper(),
            status=status,
        )
        self.db.add(account)
        self.db.flush()
        return account

    def get(self, account_id: int) -> Account:
        account = self.db.get(Account, account_id)
        if not account:
            raise LedgerError(
                ErrorKind.NOT_FOUND, f"Account {account_id} not found"
            )
        return account

    def list_accounts(self, user_id: int | None = None) -> list[Account]:
        """Return accounts ordered by id, optionally for one user."""
        query = select(Account).order_by(Account.id)
        if user_id is not None:
            query = query.where(Account.user_id == user_id)
        return list(self.db.execute(query).scalars().all())

    def lock_and_read(self, account_ids) -> dict[int, Account]:
        """
        Lock the given accounts and return the ones that exist.

        Rows are locked one at a time in ascending id order. Two
        operations naming the same pair in opposite roles (A->B
        and B->A) therefore always queue on the same first row
        and cannot deadlock.

        Missing ids are simply absent from the result; deciding
        what a missing account means is up to the caller.
        """
        locked = {}
        for account_id in sorted(set(account_ids)):
            account = self._lock_row(account_id)
            if account is not None:
                locked[account_id] = account
        return locked

    def _lock_row(self, account_id: int) -> Account | None:
        # populate_existing refreshes an identity-mapped instance
        # with the row as seen under the lock
        return self.db.execute(
            select(Account)
            .where(Account.id == account_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        ).scalar_one_or_none()
