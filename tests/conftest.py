"""
Shared test fixtures.

Sets up an isolated SQLite database so tests never touch the
real database. Tables are created before each test and dropped
after it, so no test data persists.

The transaction engine opens its own sessions from
TestSessionLocal, separate from the db_session fixture. Setup
helpers therefore always commit before the engine runs.
"""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, select, func
from sqlalchemy.orm import sessionmaker

from ledger_service.main import app
from ledger_service.api.transactions import get_transaction_engine
from ledger_service.models import Base, LedgerEntry, Transaction
from ledger_service.models.base import get_db
from ledger_service.models.enums import AccountStatus, AccountType
from ledger_service.schemas.transaction import DepositRequest
from ledger_service.services.account_store import AccountStore
from ledger_service.services.balance_calculator import BalanceCalculator
from ledger_service.services.ledger_store import LedgerStore
from ledger_service.services.transaction_engine import TransactionEngine


TEST_DATABASE_URL = "sqlite:///./test.db"

engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
)

TestSessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
    expire_on_commit=False,
)


@pytest.fixture(autouse=True)
def setup_database():
    """Create all tables before each test, drop them after."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    """Provide a database session for direct store testing."""
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def session_factory():
    """The factory the transaction engine opens its sessions from."""
    return TestSessionLocal


@pytest.fixture
def make_account(db_session):
    """Factory: create and commit an account."""
    def _make(
        currency="USD",
        status=AccountStatus.ACTIVE,
        account_type=AccountType.CHECKING,
        user_id=1,
    ):
        account = AccountStore(db_session).create(
            user_id=user_id,
            account_type=account_type,
            currency=currency,
            status=status,
        )
        db_session.commit()
        return account
    return _make


@pytest.fixture
def system_account(make_account):
    return make_account(account_type=AccountType.SYSTEM, user_id=0)


@pytest.fixture
def ledger_engine(session_factory, system_account):
    return TransactionEngine(session_factory, system_account.id)


@pytest.fixture
def fund(ledger_engine):
    """Factory: give an account a starting balance via a deposit."""
    def _fund(account, amount, currency="USD"):
        return ledger_engine.deposit(DepositRequest(
            account_id=account.id,
            amount=Decimal(amount),
            currency=currency,
        ))
    return _fund


@pytest.fixture
def balance_of(db_session):
    def _balance(account):
        return BalanceCalculator(LedgerStore(db_session)).balance(account.id)
    return _balance


@pytest.fixture
def row_counts(db_session):
    """Return (transactions, ledger entries) currently stored."""
    def _counts():
        transactions = db_session.scalar(
            select(func.count()).select_from(Transaction)
        )
        entries = db_session.scalar(
            select(func.count()).select_from(LedgerEntry)
        )
        return transactions, entries
    return _counts


@pytest.fixture
def client(db_session, ledger_engine):
    """
    Provide a test client wired to the test database.

    Both the request-scoped session and the transaction engine
    are overridden so the app never reaches the real database.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_transaction_engine] = lambda: ledger_engine
    yield TestClient(app)
    app.dependency_overrides.clear()
