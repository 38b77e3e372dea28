"""
Shared enumerations for database models.

Python enums mapped to database enums mean an invalid status
or entry type is rejected by the database, not just in Python.
The lowercase values are what gets stored.
"""

import enum


def enum_values(enum_cls: type[enum.Enum]) -> list[str]:
    """Persist enum values rather than member names."""
    return [member.value for member in enum_cls]


class AccountType(str, enum.Enum):
    CHECKING = "checking"
    SAVINGS = "savings"
    SYSTEM = "system"


class AccountStatus(str, enum.Enum):
    ACTIVE = "active"
    FROZEN = "frozen"
    CLOSED = "closed"


class TransactionType(str, enum.Enum):
    TRANSFER = "transfer"
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"


class TransactionStatus(str, enum.Enum):
    """
    A transaction only ever moves from PENDING to COMPLETED.

    Failed attempts are rolled back and never stored, so there
    is no FAILED status.
    """
    PENDING = "pending"
    COMPLETED = "completed"


class EntryType(str, enum.Enum):
    """Direction of a ledger entry."""
    DEBIT = "debit"
    CREDIT = "credit"
