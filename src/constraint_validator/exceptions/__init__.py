
# constraint_validator/
# │
# ├── exceptions/
# │   ├── __init__.py
# │   ├── base.py        # ViolationKind + portable errors (PrimaryKeyViolationError, ...)
# │   ├── outcomes.py    # Translated / Unrecognized classification results
# │   ├── unwrap.py      # root_cause(): peel SQLAlchemy / chained wrappers off a driver error
# │   └── mapper.py      # resolve() and the translate_errors context managers

from .base import (
    ViolationKind,
    InvalidInputError,
    ConfigurationError,
    ConstraintViolationError,
    PrimaryKeyViolationError,
    ForeignKeyViolationError,
    CheckConstraintViolationError,
    NotNullViolationError,
)
from .outcomes import Translated, Unrecognized, Outcome
from .unwrap import root_cause

__all__ = [
    "ViolationKind",
    "InvalidInputError",
    "ConfigurationError",
    "ConstraintViolationError",
    "PrimaryKeyViolationError",
    "ForeignKeyViolationError",
    "CheckConstraintViolationError",
    "NotNullViolationError",
    "Translated",
    "Unrecognized",
    "Outcome",
    "root_cause",
]
