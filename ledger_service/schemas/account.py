"""
Pydantic schemas for account operations.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from ledger_service.models.enums import AccountType, AccountStatus


class AccountCreate(BaseModel):
    """Request to open a new account. Accounts start active."""
    user_id: int
    account_type: AccountType
    currency: str = Field(min_length=3, max_length=3)


class AccountResponse(BaseModel):
    id: int
    user_id: int
    account_type: AccountType
    currency: str
    status: AccountStatus
    created_at: datetime

    model_config = {"from_attributes": True}


class AccountBalanceResponse(AccountResponse):
    """Account details with the balance derived from the ledger."""
    balance: Decimal
