"""
Structured logging configuration.

Every record is emitted as one JSON object per line so log
shippers can index transaction ids and account ids directly.
"""

import json
import logging
from datetime import datetime, timezone

LOGGER_NAME = "ledger_service"


class JSONFormatter(logging.Formatter):
    """Format a log record as a single JSON line."""

    def format(self, record):
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "transaction_id": getattr(record, "transaction_id", None),
            "account_ids": getattr(record, "account_ids", None),
            "error_kind": getattr(record, "error_kind", None),
        }

        # Drop unset context fields
        log_entry = {k: v for k, v in log_entry.items() if v is not None}

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str)


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Configure the package logger.

    Module loggers are children of LOGGER_NAME, so calling this
    once at startup covers the whole package. Safe to call
    repeatedly: existing handlers are replaced, not stacked.
    """
    logger = logging.getLogger(LOGGER_NAME)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter())
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper()))
    logger.propagate = False

    return logger
