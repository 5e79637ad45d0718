"""SQLite constraint validator (extended result codes, SQLITE_CONSTRAINT_*)."""

import re

from ..exceptions.base import ViolationKind
from .base import EngineConstraintValidator

# "UNIQUE constraint failed: users.email", "CHECK constraint failed: ck_price_positive"
_FAILED_TARGET = re.compile(r"constraint failed: (?P<target>.+)$", flags=re.IGNORECASE)


class SqliteConstraintValidator(EngineConstraintValidator):
    """
    Recognizes `sqlite3` errors.

    Code: `sqlite_errorcode` (extended result code, Python 3.11+).
    """

    engine = "sqlite"

    # https://www.sqlite.org/rescode.html#extrc
    CODE_TABLE = {
        1555: ViolationKind.PRIMARY_KEY,       # SQLITE_CONSTRAINT_PRIMARYKEY
        2067: ViolationKind.PRIMARY_KEY,       # SQLITE_CONSTRAINT_UNIQUE
        787: ViolationKind.FOREIGN_KEY,        # SQLITE_CONSTRAINT_FOREIGNKEY
        275: ViolationKind.CHECK_CONSTRAINT,   # SQLITE_CONSTRAINT_CHECK
        1299: ViolationKind.NOT_NULL,          # SQLITE_CONSTRAINT_NOTNULL
    }

    NATIVE_TYPE_CANDIDATES = (("sqlite3", "Error"),)

    def extract_code(self, native: BaseException) -> int | None:
        return getattr(native, "sqlite_errorcode", None)

    def extract_constraint(self, native: BaseException) -> str | None:
        match = _FAILED_TARGET.search(str(native))
        return match.group("target").strip() if match else None
