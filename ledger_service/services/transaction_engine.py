"""
Transaction engine: transfers, deposits, and withdrawals.

Every operation is one posting: a debit on one account and a
credit of the same amount on another. Each posting runs inside
a single UnitOfWork:

1. Lock both accounts (ascending id order)
2. Validate existence, status, and currency under the lock
3. Check the debited account's balance where required
4. Create the transaction record (PENDING)
5. Append the debit entry and the credit entry
6. Mark the transaction COMPLETED
7. Commit

Any failure rolls back the whole unit of work: no transaction
record, no entries. Accounts are read, never updated.

Deposits and withdrawals use the system account as the other
side of the posting. Deposits do not check the system account's
balance: it is an unconstrained settlement account and is
expected to go negative as money enters the ledger.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from ledger_service.errors import ErrorKind, LedgerError
from ledger_service.models.account import Account
from ledger_service.models.transaction import Transaction
from ledger_service.models.enums import EntryType, TransactionType
from ledger_service.schemas.transaction import (
    DepositRequest,
    TransferRequest,
    WithdrawalRequest,
)
from ledger_service.services.balance_calculator import BalanceCalculator
from ledger_service.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Posting:
    """One double-entry movement, independent of its business type."""
    tx_type: TransactionType
    debit_account_id: int
    credit_account_id: int
    amount: Decimal
    currency: str
    description: str | None
    check_debit_balance: bool


class TransactionEngine:
    """
    Runs money movements atomically against the shared store.

    The engine holds no per-call state: one instance can serve
    concurrent callers, each call getting its own session from
    session_factory.
    """

    def __init__(self, session_factory: sessionmaker, system_account_id: int | None):
        if system_account_id is None:
            raise LedgerError(
                ErrorKind.CONFIGURATION_ERROR,
                "System account is not configured",
            )
        self.session_factory = session_factory
        self.system_account_id = system_account_id

    def transfer(self, request: TransferRequest) -> Transaction:
        """
        Move money between two ordinary accounts.

        Accounting:
            DEBIT  source
            CREDIT destination
        """
        if request.source_account_id == request.destination_account_id:
            raise LedgerError(
                ErrorKind.INVALID_REQUEST, "Cannot transfer to the same account"
            )
        if self.system_account_id in (
            request.source_account_id, request.destination_account_id
        ):
            raise LedgerError(
                ErrorKind.INVALID_REQUEST,
                "The system account cannot take part in a transfer",
            )

        return self._post(Posting(
            tx_type=TransactionType.TRANSFER,
            debit_account_id=request.source_account_id,
            credit_account_id=request.destination_account_id,
            amount=request.amount,
            currency=request.currency,
            description=request.description,
            check_debit_balance=True,
        ))

    def deposit(self, request: DepositRequest) -> Transaction:
        """
        Bring money into an account from outside the ledger.

        Accounting:
            DEBIT  system account (no balance check)
            CREDIT target account
        """
        self._reject_system_target(request.account_id)
        return self._post(Posting(
            tx_type=TransactionType.DEPOSIT,
            debit_account_id=self.system_account_id,
            credit_account_id=request.account_id,
            amount=request.amount,
            currency=request.currency,
            description=request.description,
            check_debit_balance=False,
        ))

    def withdraw(self, request: WithdrawalRequest) -> Transaction:
        """
        Take money out of an account to outside the ledger.

        Accounting:
            DEBIT  target account (balance must cover amount)
            CREDIT system account
        """
        self._reject_system_target(request.account_id)
        return self._post(Posting(
            tx_type=TransactionType.WITHDRAWAL,
            debit_account_id=request.account_id,
            credit_account_id=self.system_account_id,
            amount=request.amount,
            currency=request.currency,
            description=request.description,
            check_debit_balance=True,
        ))

    def _reject_system_target(self, account_id: int) -> None:
        if account_id == self.system_account_id:
            raise LedgerError(
                ErrorKind.INVALID_REQUEST,
                "Deposits and withdrawals cannot target the system account",
            )

    def _post(self, posting: Posting) -> Transaction:
        account_ids = [posting.debit_account_id, posting.credit_account_id]
        logger.debug(
            "Posting %s of %s %s",
            posting.tx_type.value, posting.amount, posting.currency,
            extra={"account_ids": account_ids},
        )

        try:
            with UnitOfWork(self.session_factory) as uow:
                accounts = uow.accounts.lock_and_read(account_ids)
                debit_account = self._require(accounts, posting.debit_account_id)
                credit_account = self._require(accounts, posting.credit_account_id)

                for account in (debit_account, credit_account):
                    self._check_status(account)
                for account in (debit_account, credit_account):
                    self._check_currency(account, posting.currency)

                if posting.check_debit_balance:
                    balance = BalanceCalculator(uow.ledger).balance(
                        debit_account.id
                    )
                    if balance < posting.amount:
                        raise LedgerError(
                            ErrorKind.INSUFFICIENT_FUNDS,
                            f"Insufficient funds: available={balance}, "
                            f"requested={posting.amount}",
                        )

                txn = uow.transactions.create(
                    tx_type=posting.tx_type,
                    source_account_id=debit_account.id,
                    destination_account_id=credit_account.id,
                    amount=posting.amount,
                    currency=posting.currency,
                    description=posting.description,
                )
                uow.ledger.append(
                    debit_account.id, txn.id, EntryType.DEBIT, posting.amount
                )
                uow.ledger.append(
                    credit_account.id, txn.id, EntryType.CREDIT, posting.amount
                )
                txn = uow.transactions.finalize(txn.id)

        except LedgerError as e:
            logger.warning(
                "%s rejected: %s", posting.tx_type.value, e.message,
                extra={"account_ids": account_ids, "error_kind": e.kind.value},
            )
            raise
        except SQLAlchemyError as e:
            logger.exception(
                "%s failed in the store", posting.tx_type.value,
                extra={
                    "account_ids": account_ids,
                    "error_kind": ErrorKind.INTERNAL_ERROR.value,
                },
            )
            raise LedgerError(
                ErrorKind.INTERNAL_ERROR, "Internal server error"
            ) from e

        logger.info(
            "%s of %s %s completed",
            posting.tx_type.value, posting.amount, posting.currency,
            extra={"transaction_id": txn.id, "account_ids": account_ids},
        )
        return txn

    # --- Validation under lock ---

    def _is_system(self, account_id: int) -> bool:
        return account_id == self.system_account_id

    def _require(self, accounts: dict[int, Account], account_id: int) -> Account:
        account = accounts.get(account_id)
        if account is None:
            if self._is_system(account_id):
                raise LedgerError(
                    ErrorKind.CONFIGURATION_ERROR,
                    f"System account {account_id} does not exist",
                )
            raise LedgerError(
                ErrorKind.NOT_FOUND, f"Account {account_id} not found"
            )
        return account

    def _check_status(self, account: Account) -> None:
        if account.is_active:
            return
        if self._is_system(account.id):
            raise LedgerError(
                ErrorKind.CONFIGURATION_ERROR,
                f"System account {account.id} is not active "
                f"(status: {account.status.value})",
            )
        raise LedgerError(
            ErrorKind.INVALID_STATE,
            f"Account {account.id} is not active "
            f"(status: {account.status.value})",
        )

    def _check_currency(self, account: Account, currency: str) -> None:
        if account.currency != currency:
            raise LedgerError(
                ErrorKind.CURRENCY_MISMATCH,
                f"Account {account.id} currency is {account.currency}, "
                f"transaction currency is {currency}",
            )
