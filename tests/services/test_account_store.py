"""
Tests for the AccountStore.
"""

import pytest

from ledger_service.errors import ErrorKind, LedgerError
from ledger_service.models.enums import AccountStatus, AccountType
from ledger_service.services.account_store import AccountStore


class TestCreateAccount:

    def test_account_starts_active(self, db_session):
        store = AccountStore(db_session)
        account = store.create(
            user_id=7, account_type=AccountType.SAVINGS, currency="usd",
        )
        db_session.commit()

        assert account.id is not None
        assert account.status == AccountStatus.ACTIVE
        assert account.is_active is True
        assert account.currency == "USD"

    def test_get_missing_account_raises_not_found(self, db_session):
        with pytest.raises(LedgerError) as exc_info:
            AccountStore(db_session).get(123)

        assert exc_info.value.kind == ErrorKind.NOT_FOUND


class TestListAccounts:

    def test_list_all_accounts(self, make_account, db_session):
        first = make_account(user_id=1)
        second = make_account(user_id=2)

        accounts = AccountStore(db_session).list_accounts()

        assert [a.id for a in accounts] == [first.id, second.id]

    def test_list_accounts_for_user(self, make_account, db_session):
        make_account(user_id=1)
        mine = make_account(user_id=2)

        accounts = AccountStore(db_session).list_accounts(user_id=2)

        assert [a.id for a in accounts] == [mine.id]


class TestLockAndRead:

    def test_returns_existing_accounts_by_id(self, make_account, db_session):
        acct_a = make_account()
        acct_b = make_account()

        locked = AccountStore(db_session).lock_and_read({acct_b.id, acct_a.id})

        assert set(locked) == {acct_a.id, acct_b.id}
        assert locked[acct_a.id].currency == "USD"

    def test_missing_ids_are_absent(self, make_account, db_session):
        acct = make_account()

        locked = AccountStore(db_session).lock_and_read([acct.id, 999])

        assert list(locked) == [acct.id]

    def test_rows_locked_in_ascending_order(
        self, make_account, db_session, monkeypatch
    ):
        ids = [make_account().id for _ in range(3)]
        seen = []
        original = AccountStore._lock_row

        def recording(self, account_id):
            seen.append(account_id)
            return original(self, account_id)

        monkeypatch.setattr(AccountStore, "_lock_row", recording)

        AccountStore(db_session).lock_and_read(list(reversed(ids)) + [ids[0]])

        assert seen == sorted(ids)
