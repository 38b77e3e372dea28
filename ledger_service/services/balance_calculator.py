"""
Balance calculator.

Balance is never stored. It is always derived from the ledger:

    balance = sum(credit amounts) - sum(debit amounts)

This holds for every account, the system account included.
"""

from decimal import Decimal

from ledger_service.services.ledger_store import LedgerStore


class BalanceCalculator:
    """
    Computes balances through a LedgerStore.

    The result is only as fresh as the store's session. Before
    debiting an account, compute its balance through the store
    of the same unit of work that holds the account's row lock;
    a balance read from any other session can be stale by the
    time the debit is written.
    """

    def __init__(self, ledger: LedgerStore):
        self.ledger = ledger

    def balance(self, account_id: int) -> Decimal:
        return self.ledger.sum_entries(account_id)
