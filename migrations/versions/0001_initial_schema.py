"""initial schema: accounts, transactions, ledger entries

Revision ID: 0001
Revises:
Create Date: 2026-10-19 00:00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

account_type_enum = sa.Enum(
    "checking", "savings", "system",
    name="account_type_enum", create_constraint=True,
)
account_status_enum = sa.Enum(
    "active", "frozen", "closed",
    name="account_status_enum", create_constraint=True,
)
transaction_type_enum = sa.Enum(
    "transfer", "deposit", "withdrawal",
    name="transaction_type_enum", create_constraint=True,
)
transaction_status_enum = sa.Enum(
    "pending", "completed",
    name="transaction_status_enum", create_constraint=True,
)
entry_type_enum = sa.Enum(
    "debit", "credit",
    name="entry_type_enum", create_constraint=True,
)


def upgrade() -> None:
    op.create_table(
        "accounts",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("account_type", account_type_enum, nullable=False),
        sa.Column("currency", sa.String(length=3), nullable=False),
        sa.Column("status", account_status_enum, nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_accounts_user_id", "accounts", ["user_id"])

    op.create_table(
        "transactions",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("tx_type", transaction_type_enum, nullable=False),
        sa.Column(
            "source_account_id", sa.Integer(),
            sa.ForeignKey("accounts.id"), nullable=False,
        ),
        sa.Column(
            "destination_account_id", sa.Integer(),
            sa.ForeignKey("accounts.id"), nullable=False,
        ),
        sa.Column("amount", sa.Numeric(19, 4), nullable=False),
        sa.Column("currency", sa.String(length=3), nullable=False),
        sa.Column("status", transaction_status_enum, nullable=False),
        sa.Column("description", sa.String(length=255), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("completed_at", sa.DateTime(), nullable=True),
    )
    op.create_index(
        "ix_transactions_source_account_id",
        "transactions", ["source_account_id"],
    )
    op.create_index(
        "ix_transactions_destination_account_id",
        "transactions", ["destination_account_id"],
    )

    op.create_table(
        "ledger_entries",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "account_id", sa.Integer(),
            sa.ForeignKey("accounts.id"), nullable=False,
        ),
        sa.Column(
            "transaction_id", sa.Integer(),
            sa.ForeignKey("transactions.id"), nullable=False,
        ),
        sa.Column("entry_type", entry_type_enum, nullable=False),
        sa.Column("amount", sa.Numeric(19, 4), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.CheckConstraint(
            "amount > 0", name="ck_ledger_entries_amount_positive"
        ),
    )
    op.create_index(
        "ix_ledger_entries_account_id", "ledger_entries", ["account_id"]
    )
    op.create_index(
        "ix_ledger_entries_transaction_id",
        "ledger_entries", ["transaction_id"],
    )


def downgrade() -> None:
    op.drop_table("ledger_entries")
    op.drop_table("transactions")
    op.drop_table("accounts")
    for enum_type in (
        entry_type_enum,
        transaction_status_enum,
        transaction_type_enum,
        account_status_enum,
        account_type_enum,
    ):
        enum_type.drop(op.get_bind(), checkfirst=True)
