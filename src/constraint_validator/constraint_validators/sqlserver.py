"""SQL Server constraint validator (error numbers from sys.messages)."""

import re

from ..exceptions.base import ViolationKind
from .base import EngineConstraintValidator

# pyodbc puts the native error number in the message: "... (2627) (SQLExecDirectW)"
_PYODBC_NUMBER = re.compile(r"\((?P<number>\d+)\)\s*\(SQL\w+\)")

# "Violation of PRIMARY KEY constraint 'PK_users'" / "... conflicted with the FOREIGN KEY constraint \"FK_x\""
_CONSTRAINT_NAME = re.compile(r"constraint ['\"](?P<name>[^'\"]+)['\"]", flags=re.IGNORECASE)


class SqlServerConstraintValidator(EngineConstraintValidator):
    """
    Recognizes errors raised by pyodbc and pymssql.

    Code: integer error number. Looked up on a `number` attribute first, then the
    first positional argument (pymssql), then the pyodbc message marker.
    """

    engine = "sqlserver"

    CODE_TABLE = {
        2627: ViolationKind.PRIMARY_KEY,   # Violation of PRIMARY KEY / UNIQUE KEY constraint
        2601: ViolationKind.PRIMARY_KEY,   # Cannot insert duplicate key row (unique index)
        547: ViolationKind.FOREIGN_KEY,    # statement conflicted with the FOREIGN KEY constraint
        515: ViolationKind.NOT_NULL,       # Cannot insert the value NULL into column
    }

    NATIVE_TYPE_CANDIDATES = (
        ("pyodbc", "Error"),
        ("pymssql", "Error"),
    )

    def extract_code(self, native: BaseException) -> int | None:
        number = getattr(native, "number", None)
        if isinstance(number, int):
            return number

        if native.args and isinstance(native.args[0], int):
            return native.args[0]

        match = _PYODBC_NUMBER.search(str(native))
        if match:
            return int(match.group("number"))
        return None

    def extract_message(self, native: BaseException) -> str:
        # pymssql: args == (number, b"message")
        if len(native.args) >= 2 and isinstance(native.args[0], int):
            raw = native.args[1]
            if isinstance(raw, bytes):
                return raw.decode("utf-8", errors="replace")
            return str(raw)
        # pyodbc: args == (sqlstate, message)
        if len(native.args) >= 2 and isinstance(native.args[0], str) and isinstance(native.args[1], str):
            return native.args[1]
        return str(native)

    def extract_constraint(self, native: BaseException) -> str | None:
        match = _CONSTRAINT_NAME.search(self.extract_message(native))
        return match.group("name") if match else None
