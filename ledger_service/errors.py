"""
Error taxonomy for ledger operations.

Callers match on LedgerError.kind, never on message text or
on an HTTP status code. The API layer owns the mapping from
kind to status code.
"""

import enum


class ErrorKind(str, enum.Enum):
    NOT_FOUND = "not_found"
    INVALID_STATE = "invalid_state"
    CURRENCY_MISMATCH = "currency_mismatch"
    INSUFFICIENT_FUNDS = "insufficient_funds"
    INVALID_REQUEST = "invalid_request"
    CONFIGURATION_ERROR = "configuration_error"
    INTERNAL_ERROR = "internal_error"


class LedgerError(Exception):
    """A failed ledger operation. Nothing was persisted."""

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __repr__(self) -> str:
        return f"LedgerError({self.kind.value}: {self.message})"
