"""
Database engine, session management, and base model.

Every model inherits from Base. Read-only request handlers get
a session from get_db(); money movements open their own
session through a UnitOfWork.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase

from ledger_service.config import get_settings

settings = get_settings()

# --- Engine ---
# pool_pre_ping=True tests connections before using them, which
# handles a database restart or a stale pooled connection.
engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
)

# --- Session Factory ---
# autocommit=False: commits happen only where we say so.
# autoflush=False: SQL is sent on explicit flush or commit.
# expire_on_commit=False: records returned from a committed
# unit of work stay readable after its session is closed.
SessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    pass


# --- Dependency for FastAPI ---
def get_db():
    """
    Provide a database session for a single request.

    The try/finally guarantees the session is closed even if
    the endpoint raises, so pooled connections never leak.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
