"""
Mapping from ledger error kinds to HTTP responses.

Status codes are a presentation concern, so they live here and
nowhere else.
"""

from fastapi import HTTPException

from ledger_service.errors import ErrorKind, LedgerError

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INVALID_STATE: 422,
    ErrorKind.CURRENCY_MISMATCH: 400,
    ErrorKind.INSUFFICIENT_FUNDS: 422,
    ErrorKind.INVALID_REQUEST: 400,
    ErrorKind.CONFIGURATION_ERROR: 500,
    ErrorKind.INTERNAL_ERROR: 500,
}


def to_http_exception(error: LedgerError) -> HTTPException:
    return HTTPException(
        status_code=STATUS_BY_KIND.get(error.kind, 500),
        detail={"kind": error.kind.value, "message": error.message},
    )
