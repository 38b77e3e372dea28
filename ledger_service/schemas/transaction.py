"""
Pydantic schemas for transaction operations.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from ledger_service.models.enums import TransactionType, TransactionStatus


class _MoneyMovement(BaseModel):
    amount: Decimal = Field(gt=0, decimal_places=4)
    currency: str = Field(min_length=3, max_length=3)
    description: str | None = Field(default=None, max_length=255)

    @field_validator("currency")
    @classmethod
    def normalize_currency(cls, v: str) -> str:
        return v.upper()


class TransferRequest(_MoneyMovement):
    source_account_id: int
    destination_account_id: int


class DepositRequest(_MoneyMovement):
    account_id: int


class WithdrawalRequest(_MoneyMovement):
    account_id: int


class TransactionResponse(BaseModel):
    id: int
    tx_type: TransactionType
    status: TransactionStatus
    source_account_id: int
    destination_account_id: int
    amount: Decimal
    currency: str
    description: str | None
    created_at: datetime
    completed_at: datetime | None

    model_config = {"from_attributes": True}
