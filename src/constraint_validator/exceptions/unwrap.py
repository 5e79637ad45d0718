"""
Root-cause unwrapping.

Database calls usually surface through layers that wrap the driver's exception:
SQLAlchemy stores it on `DBAPIError.orig`, application code chains it with
`raise ... from exc`. Validators only look at the innermost error.
"""

from sqlalchemy.exc import StatementError


def _inner(error: BaseException) -> BaseException | None:
    # SQLAlchemy keeps the DBAPI exception on .orig (and usually on __cause__ as well)
    if isinstance(error, StatementError) and isinstance(error.orig, BaseException):
        return error.orig
    return error.__cause__


def root_cause(error: BaseException) -> BaseException:
    """
    Return the most specific underlying cause of `error`.

    Walks `.orig` (SQLAlchemy wrappers) and `__cause__` links until there is no
    further inner error. Cycles stop at the last unseen error.
    """
    seen = {id(error)}
    current = error
    while True:
        inner = _inner(current)
        if inner is None or id(inner) in seen:
            return current
        seen.add(id(inner))
        current = inner


__all__ = ["root_cause"]
