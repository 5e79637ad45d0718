"""
Test doubles for driver errors.

Real driver exceptions (psycopg, pyodbc, ...) are awkward to build by hand and may
not even be installed. These stand-ins expose only what the validators read:
native-type identity, the error code and the message.

    validator = PostgreSqlConstraintValidator(native_types=(FakePostgresError,))
    validator.classify(FakePostgresError("23505", "duplicate key value"))
"""


class FakeDatabaseError(Exception):
    """Common base for fake driver errors."""

    def __init__(self, message: str = "", *, cause: BaseException | None = None):
        super().__init__(message)
        self.message = message
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return self.message


class _FakeDiag:
    def __init__(self, message_primary: str | None, constraint_name: str | None):
        self.message_primary = message_primary
        self.constraint_name = constraint_name


class FakePostgresError(FakeDatabaseError):
    """Shaped like a psycopg error: `sqlstate` plus a `diag` object."""

    def __init__(self, sqlstate: str, message: str = "", *, constraint_name: str | None = None,
                 cause: BaseException | None = None):
        super().__init__(message, cause=cause)
        self.sqlstate = sqlstate
        self.diag = _FakeDiag(message or None, constraint_name)


class FakeSqlServerError(FakeDatabaseError):
    """Shaped like a SQL Server error carrying its error `number`."""

    def __init__(self, number: int, message: str = "", *, cause: BaseException | None = None):
        super().__init__(message, cause=cause)
        self.number = number


class WrapperError(Exception):
    """Generic wrapper, the way data-access layers re-raise driver errors."""


def wrap(error: BaseException, message: str = "database operation failed", depth: int = 1) -> BaseException:
    """Nest `error` inside `depth` WrapperError layers linked through __cause__."""
    current = error
    for _ in range(depth):
        outer = WrapperError(message)
        outer.__cause__ = current
        current = outer
    return current


__all__ = ["FakeDatabaseError", "FakePostgresError", "FakeSqlServerError", "WrapperError", "wrap"]
