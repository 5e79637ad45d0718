"""
Translate vendor-specific database constraint errors into portable exceptions.

    from constraint_validator import ValidatorRegistry, PostgreSqlConstraintValidator, resolve

    registry = ValidatorRegistry()
    registry.register(PostgreSqlConstraintValidator())

    try:
        session.flush()
    except Exception as exc:
        raise resolve(exc, registry)
"""

__version__ = "0.1.0"

from constraint_validator.exceptions.base import (
    ViolationKind,
    InvalidInputError,
    ConfigurationError,
    ConstraintViolationError,
    PrimaryKeyViolationError,
    ForeignKeyViolationError,
    CheckConstraintViolationError,
    NotNullViolationError,
)
from constraint_validator.exceptions.outcomes import Translated, Unrecognized, Outcome
from constraint_validator.exceptions.unwrap import root_cause
from constraint_validator.constraint_validators import (
    ConstraintValidator,
    EngineConstraintValidator,
    PostgreSqlConstraintValidator,
    SqlServerConstraintValidator,
    SqliteConstraintValidator,
    ValidatorRegistry,
    BUILTIN_VALIDATORS,
)
from constraint_validator.exceptions.mapper import resolve, translate_errors, async_translate_errors
from constraint_validator.core.dependencies import build_registry, get_registry

__all__ = [
    "__version__",
    # Kinds and errors
    "ViolationKind",
    "InvalidInputError",
    "ConfigurationError",
    "ConstraintViolationError",
    "PrimaryKeyViolationError",
    "ForeignKeyViolationError",
    "CheckConstraintViolationError",
    "NotNullViolationError",
    # Outcomes
    "Translated",
    "Unrecognized",
    "Outcome",
    "root_cause",
    # Validators and registry
    "ConstraintValidator",
    "EngineConstraintValidator",
    "PostgreSqlConstraintValidator",
    "SqlServerConstraintValidator",
    "SqliteConstraintValidator",
    "ValidatorRegistry",
    "BUILTIN_VALIDATORS",
    # Call-site helpers
    "resolve",
    "translate_errors",
    "async_translate_errors",
    "build_registry",
    "get_registry",
]
