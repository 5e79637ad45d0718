"""
Per-engine constraint validators and the registry that dispatches over them.

Usage:
    from constraint_validator.constraint_validators import ValidatorRegistry, PostgreSqlConstraintValidator
"""

from .base import ConstraintValidator, EngineConstraintValidator, load_native_types
from .postgresql import PostgreSqlConstraintValidator, PostgresErrorCodes
from .registry import ValidatorRegistry
from .sqlite import SqliteConstraintValidator
from .sqlserver import SqlServerConstraintValidator

# Names accepted by the CONSTRAINT_VALIDATORS setting.
BUILTIN_VALIDATORS: dict[str, type[EngineConstraintValidator]] = {
    PostgreSqlConstraintValidator.engine: PostgreSqlConstraintValidator,
    SqlServerConstraintValidator.engine: SqlServerConstraintValidator,
    SqliteConstraintValidator.engine: SqliteConstraintValidator,
}

__all__ = [
    "ConstraintValidator",
    "EngineConstraintValidator",
    "load_native_types",
    "PostgreSqlConstraintValidator",
    "PostgresErrorCodes",
    "SqlServerConstraintValidator",
    "SqliteConstraintValidator",
    "ValidatorRegistry",
    "BUILTIN_VALIDATORS",
]
