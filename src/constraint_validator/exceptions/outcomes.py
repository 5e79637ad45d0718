"""
Classification outcomes.

A validator answers every `classify(error)` call with exactly one of:

  - Translated: the error came from the validator's engine and its code maps to a ViolationKind.
  - Unrecognized: anything else. Not a failure, just "no translation applied".
"""

from dataclasses import dataclass
from typing import Union

from .base import EXCEPTION_FOR_KIND, ConstraintViolationError, ViolationKind


@dataclass(frozen=True)
class Translated:
    kind: ViolationKind
    message: str
    # The native database error instance itself, never a copy.
    cause: BaseException
    constraint: str | None = None
    engine: str | None = None

    def to_exception(self) -> ConstraintViolationError:
        """Build the portable exception for this outcome."""
        exc_cls = EXCEPTION_FOR_KIND[self.kind]
        return exc_cls(self.message, cause=self.cause, constraint=self.constraint, engine=self.engine)


@dataclass(frozen=True)
class Unrecognized:
    # The error exactly as it was handed to the validator.
    error: BaseException


Outcome = Union[Translated, Unrecognized]

__all__ = ["Translated", "Unrecognized", "Outcome"]
