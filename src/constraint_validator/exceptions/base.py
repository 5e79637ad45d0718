"""
Portable constraint-violation exceptions.

These are the errors application code catches after a vendor-specific database
error has been translated. They carry no engine-specific data beyond the
optional constraint name and engine label used for diagnostics.
"""

from enum import Enum


class ViolationKind(str, Enum):
    """Closed set of constraint-violation classifications."""

    PRIMARY_KEY = "primary_key"
    FOREIGN_KEY = "foreign_key"
    CHECK_CONSTRAINT = "check_constraint"
    NOT_NULL = "not_null"


class InvalidInputError(ValueError):
    """Raised when `None` is handed to a validator or registry instead of an error."""

    def __init__(self, message: str = "error must not be None"):
        super().__init__(message)


# canonical constraint-violation exceptions

class ConstraintViolationError(Exception):
    """
    Base exception for translated database constraint violations.

    - message: the message taken from the native database error
    - cause: the native error instance that triggered the translation (also `__cause__`)
    - constraint: optional DB constraint name (for logs only, never in payloads)
    - engine: label of the validator that produced the translation (e.g. 'postgresql')
    - error_code: canonical short code used by clients
    """

    kind: ViolationKind | None = None
    error_code: str = "constraint_violation"

    # Map canonical error_code -> default HTTP status.
    ERROR_CODE_TO_STATUS = {
        "duplicate": 409,
        "foreign_key": 409,
        "check_violation": 422,
        "missing_field": 422,
    }

    def __init__(self, message: str, *, cause: BaseException | None = None,
                 constraint: str | None = None, engine: str | None = None):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.constraint = constraint
        self.engine = engine
        if cause is not None:
            # Assigning __cause__ also sets __suppress_context__, so a traceback shows
            # the native error rather than whatever wrapper it travelled in.
            self.__cause__ = cause

    def __str__(self) -> str:
        base = self.message
        parts = []
        if self.constraint:
            parts.append(f"constraint: {self.constraint}")
        if self.engine:
            parts.append(f"engine: {self.engine}")
        if parts:
            return f"{base} ({'; '.join(parts)})"
        return base

    def to_payload(self) -> dict:
        """
        Return a JSON-serializable dict suitable for HTTP responses.

        Shape:
            {"detail": "Record already exists", "code": "duplicate", "kind": "primary_key"}

        The raw DB message and constraint name are deliberately left out.
        """
        payload = {"detail": self.public_message(), "code": self.error_code}
        if self.kind is not None:
            payload["kind"] = self.kind.value
        return payload

    def public_message(self) -> str:
        return "Database constraint violated"

    def http_status(self) -> int:
        return self.ERROR_CODE_TO_STATUS.get(self.error_code, 400)


class PrimaryKeyViolationError(ConstraintViolationError):
    """Primary key or unique constraint violated (duplicate value)."""

    kind = ViolationKind.PRIMARY_KEY
    error_code = "duplicate"

    def public_message(self) -> str:
        return "Record already exists"


class ForeignKeyViolationError(ConstraintViolationError):
    """Foreign key constraint violated."""

    kind = ViolationKind.FOREIGN_KEY
    error_code = "foreign_key"

    def public_message(self) -> str:
        return "Referenced record not found or still referenced"


class CheckConstraintViolationError(ConstraintViolationError):
    """CHECK constraint violated."""

    kind = ViolationKind.CHECK_CONSTRAINT
    error_code = "check_violation"

    def public_message(self) -> str:
        return "Business rule violated (check constraint)"


class NotNullViolationError(ConstraintViolationError):
    """NOT NULL violation (missing required value)."""

    kind = ViolationKind.NOT_NULL
    error_code = "missing_field"

    def public_message(self) -> str:
        return "Missing required value"


EXCEPTION_FOR_KIND: dict[ViolationKind, type[ConstraintViolationError]] = {
    ViolationKind.PRIMARY_KEY: PrimaryKeyViolationError,
    ViolationKind.FOREIGN_KEY: ForeignKeyViolationError,
    ViolationKind.CHECK_CONSTRAINT: CheckConstraintViolationError,
    ViolationKind.NOT_NULL: NotNullViolationError,
}


class ConfigurationError(Exception):
    """Raised when settings name a validator that does not exist."""


__all__ = [
    "ViolationKind",
    "InvalidInputError",
    "ConstraintViolationError",
    "PrimaryKeyViolationError",
    "ForeignKeyViolationError",
    "CheckConstraintViolationError",
    "NotNullViolationError",
    "EXCEPTION_FOR_KIND",
    "ConfigurationError",
]
