# src/constraint_validator/core/logging/filters.py
"""
Logging filters.

- RequestIdFilter: guarantees every LogRecord has a `request_id` attribute, taken from
  `extra`, from the current context (see set_request_id / RequestIDMiddleware) or "-".

The request id lives in a `contextvars.ContextVar` so it follows asyncio tasks
across awaits, which `threading.local()` would not.
"""

import logging
from logging import LogRecord
import contextvars

_request_id_ctx: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "request_id", default=None
)


def set_request_id(request_id: str | None):
    """
    Set the request id in the current context.

    Returns:
        token: pass it to reset_request_id(token) to restore the previous value
    """
    return _request_id_ctx.set(request_id)


def reset_request_id(token):
    _request_id_ctx.reset(token)


def get_request_id() -> str | None:
    return _request_id_ctx.get()


class RequestIdFilter(logging.Filter):
    """Stamp `record.request_id`; never drops a record."""

    def filter(self, record: LogRecord) -> bool:
        # explicit extra={"request_id": ...} wins over the context value
        record.request_id = (
            getattr(record, "request_id", None) or get_request_id() or "-"
        )
        return True
