"""
Validator registry and first-match dispatch.

The registry is an ordered list of validators. `dispatch(error)` asks each one in
registration order and returns the first translation; when nobody recognizes the
error (or the registry is empty) the very same error object comes back.

Thread safety:
    One lock guards register / unregister / clear and the snapshot taken by dispatch.
    Classification then runs over the snapshot, so a dispatch never sees a list
    that is half-way through a mutation, and slow validators never block writers.
"""

import logging
import threading

from ..exceptions.base import InvalidInputError
from ..exceptions.outcomes import Translated
from .base import ConstraintValidator

logger = logging.getLogger(__name__)


class ValidatorRegistry:
    """
    Ordered, mutable, thread-safe collection of constraint validators.

    There is no automatic scoping: code that mutates a shared registry (tests in
    particular) is responsible for restoring it, usually with `clear()`.
    """

    def __init__(self, validators: list[ConstraintValidator] | None = None):
        self._lock = threading.Lock()
        self._validators: list[ConstraintValidator] = list(validators or [])

    # =================================================================================================================
    # Management
    # =================================================================================================================

    def register(self, validator: ConstraintValidator) -> None:
        """Append `validator`. The same instance may be registered more than once."""
        if validator is None:
            raise InvalidInputError("validator must not be None")
        with self._lock:
            self._validators.append(validator)
            position = len(self._validators) - 1
        logger.debug(
            "registry.register",
            extra={"validator": type(validator).__name__, "position": position},
        )

    def unregister(self, validator: ConstraintValidator) -> None:
        """Remove the first occurrence of `validator` by identity. Absent -> no-op."""
        with self._lock:
            for index, current in enumerate(self._validators):
                if current is validator:
                    del self._validators[index]
                    removed = True
                    break
            else:
                removed = False
        logger.debug(
            "registry.unregister",
            extra={"validator": type(validator).__name__, "removed": removed},
        )

    def clear(self) -> None:
        with self._lock:
            self._validators.clear()
        logger.debug("registry.clear")

    @property
    def validators(self) -> tuple[ConstraintValidator, ...]:
        """Snapshot of the registered validators in dispatch order."""
        with self._lock:
            return tuple(self._validators)

    def __len__(self) -> int:
        with self._lock:
            return len(self._validators)

    def __contains__(self, validator: object) -> bool:
        with self._lock:
            return any(current is validator for current in self._validators)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.validators)!r})"

    # =================================================================================================================
    # Dispatch
    # =================================================================================================================

    def dispatch(self, error: BaseException) -> BaseException:
        """
        Translate `error` with the first validator that recognizes it.

        Returns:
            A ConstraintViolationError subclass when a validator translated the error,
            otherwise `error` itself (same object).

        Raises:
            InvalidInputError: if `error` is None.
        """
        if error is None:
            raise InvalidInputError()

        for validator in self.validators:
            outcome = validator.classify(error)
            if isinstance(outcome, Translated):
                logger.debug(
                    "registry.translated",
                    extra={
                        "validator": type(validator).__name__,
                        "kind": outcome.kind.value,
                        "constraint": outcome.constraint,
                    },
                )
                return outcome.to_exception()

        return error

    # `resolve` reads better at call sites that just want "the error to raise"
    resolve = dispatch


__all__ = ["ValidatorRegistry"]
