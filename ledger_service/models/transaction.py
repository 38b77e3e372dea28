"""
Transaction model.

Represents a business operation (transfer, deposit, withdrawal)
that generates exactly two ledger entries underneath. A row is
only ever visible to other sessions once it is COMPLETED: the
PENDING state lives inside a single unit of work.
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import (
    String, DateTime, Numeric, ForeignKey,
    Enum as SAEnum,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ledger_service.models.base import Base
from ledger_service.models.enums import (
    TransactionType,
    TransactionStatus,
    enum_values,
)


class Transaction(Base):
    __tablename__ = "transactions"

    id: Mapped[int] = mapped_column(primary_key=True)
    tx_type: Mapped[TransactionType] = mapped_column(
        SAEnum(
            TransactionType,
            name="transaction_type_enum",
            values_callable=enum_values,
            create_constraint=True,
        ),
        nullable=False,
    )
    source_account_id: Mapped[int] = mapped_column(
        ForeignKey("accounts.id"), nullable=False, index=True
    )
    destination_account_id: Mapped[int] = mapped_column(
        ForeignKey("accounts.id"), nullable=False, index=True
    )
    amount: Mapped[Decimal] = mapped_column(
        Numeric(19, 4), nullable=False
    )
    currency: Mapped[str] = mapped_column(
        String(3), nullable=False
    )
    status: Mapped[TransactionStatus] = mapped_column(
        SAEnum(
            TransactionStatus,
            name="transaction_status_enum",
            values_callable=enum_values,
            create_constraint=True,
        ),
        nullable=False,
        default=TransactionStatus.PENDING,
    )
    description: Mapped[str | None] = mapped_column(
        String(255), nullable=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=datetime.utcnow
    )
    completed_at: Mapped[datetime | None] = mapped_column(
        DateTime, nullable=True
    )

    entries: Mapped[list["LedgerEntry"]] = relationship(
        back_populates="transaction"
    )

    def __repr__(self) -> str:
        return (
            f"<Transaction {self.tx_type.value} "
            f"{self.amount} {self.currency} ({self.status.value})>"
        )
