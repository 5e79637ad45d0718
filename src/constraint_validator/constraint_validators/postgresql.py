"""PostgreSQL constraint validator (SQLSTATE class 23, integrity constraint violation)."""

from enum import Enum

from ..exceptions.base import ViolationKind
from .base import EngineConstraintValidator


# https://www.postgresql.org/docs/current/errcodes-appendix.html
class PostgresErrorCodes(str, Enum):
    UNIQUE_VIOLATION = "23505"
    FOREIGN_KEY_VIOLATION = "23503"
    CHECK_VIOLATION = "23514"
    NOT_NULL_VIOLATION = "23502"


class PostgreSqlConstraintValidator(EngineConstraintValidator):
    """
    Recognizes errors raised by psycopg (3), psycopg2 and asyncpg.

    Code: `sqlstate` (psycopg 3, asyncpg) or `pgcode` (psycopg2), a five-character string.
    """

    engine = "postgresql"

    CODE_TABLE = {
        PostgresErrorCodes.UNIQUE_VIOLATION.value: ViolationKind.PRIMARY_KEY,
        PostgresErrorCodes.FOREIGN_KEY_VIOLATION.value: ViolationKind.FOREIGN_KEY,
        PostgresErrorCodes.CHECK_VIOLATION.value: ViolationKind.CHECK_CONSTRAINT,
        PostgresErrorCodes.NOT_NULL_VIOLATION.value: ViolationKind.NOT_NULL,
    }

    NATIVE_TYPE_CANDIDATES = (
        ("psycopg", "Error"),
        ("psycopg2", "Error"),
        ("asyncpg", "PostgresError"),
    )

    def extract_code(self, native: BaseException) -> str | None:
        return getattr(native, "sqlstate", None) or getattr(native, "pgcode", None)

    def extract_message(self, native: BaseException) -> str:
        diag = getattr(native, "diag", None)
        primary = getattr(diag, "message_primary", None) if diag is not None else None
        return primary or str(native)

    def extract_constraint(self, native: BaseException) -> str | None:
        diag = getattr(native, "diag", None)
        if diag is not None and getattr(diag, "constraint_name", None):
            return diag.constraint_name
        # asyncpg exposes the diagnostics directly on the exception
        return getattr(native, "constraint_name", None)
