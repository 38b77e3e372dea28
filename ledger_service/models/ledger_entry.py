"""
Ledger entry model.

Each entry is one half of a double-entry posting. A debit on
one account is always paired with a credit of the same amount
on another. Entries are immutable: once posted, they are never
modified or deleted.
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import (
    DateTime, Numeric, ForeignKey, CheckConstraint,
    Enum as SAEnum,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ledger_service.models.base import Base
from ledger_service.models.enums import EntryType, enum_values


class LedgerEntry(Base):
    """
    An immutable debit or credit entry in the ledger.

    The amount is always positive; the entry type carries the
    sign. Pairing of entries is enforced by the transaction
    engine, not by the model.
    """

    __tablename__ = "ledger_entries"
    __table_args__ = (
        CheckConstraint("amount > 0", name="ck_ledger_entries_amount_positive"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    account_id: Mapped[int] = mapped_column(
        ForeignKey("accounts.id"), nullable=False, index=True
    )
    transaction_id: Mapped[int] = mapped_column(
        ForeignKey("transactions.id"), nullable=False, index=True
    )
    entry_type: Mapped[EntryType] = mapped_column(
        SAEnum(
            EntryType,
            name="entry_type_enum",
            values_callable=enum_values,
            create_constraint=True,
        ),
        nullable=False,
    )
    amount: Mapped[Decimal] = mapped_column(
        Numeric(19, 4), nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow
    )

    transaction: Mapped["Transaction"] = relationship(
        back_populates="entries"
    )

    def __repr__(self) -> str:
        return f"<LedgerEntry {self.entry_type.value} {self.amount}>"
