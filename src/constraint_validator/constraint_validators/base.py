"""
Validator contract and the shared per-engine classifier skeleton.

Every engine validator does the same four things:

    1. reject `None` input (programming error, not a database condition)
    2. unwrap the error to its root cause
    3. check that the root cause is one of the engine's native exception types
    4. look the extracted code up in a fixed code -> ViolationKind table

Only steps 3 and 4 differ per engine, so subclasses provide the native types,
the code table and the code/message/constraint extraction hooks.

Classifiers are pure: no logging, no state changes, same answer for the same error.
"""

import importlib
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Hashable, Iterable, Mapping

from ..exceptions.base import ConstraintViolationError, InvalidInputError, ViolationKind
from ..exceptions.outcomes import Outcome, Translated, Unrecognized
from ..exceptions.unwrap import root_cause


class ConstraintValidator(ABC):
    """
    Uniform capability consulted by the registry.

    Implementations must return Unrecognized (never raise) for any non-None error
    they do not understand, and raise InvalidInputError for None.
    """

    @abstractmethod
    def classify(self, error: BaseException) -> Outcome:
        ...


def load_native_types(candidates: Iterable[tuple[str, str]]) -> tuple[type[BaseException], ...]:
    """
    Import the driver exception classes that are available in this environment.

    `candidates` is a list of (module, attribute) pairs, e.g. ("psycopg", "Error").
    Drivers that are not installed are skipped, so a validator for an engine whose
    driver is missing simply recognizes nothing.
    """
    found = []
    for module_name, attr in candidates:
        try:
            module = importlib.import_module(module_name)
        except ImportError:
            continue
        exc_type = getattr(module, attr, None)
        if isinstance(exc_type, type) and issubclass(exc_type, BaseException):
            found.append(exc_type)
    return tuple(found)


class EngineConstraintValidator(ConstraintValidator):
    """
    Classifier skeleton for one database engine.

    Subclasses set:
      - engine: short label stamped on translated errors ('postgresql', ...)
      - CODE_TABLE: default code -> ViolationKind mapping
      - NATIVE_TYPE_CANDIDATES: (module, attribute) pairs of driver exception classes
    and implement `extract_code()`.

    Both the table and the native types can be overridden per instance, which is
    how applications add codes and how tests plug in fake driver errors.
    """

    engine: ClassVar[str] = "unknown"
    CODE_TABLE: ClassVar[Mapping[Hashable, ViolationKind]] = {}
    NATIVE_TYPE_CANDIDATES: ClassVar[tuple[tuple[str, str], ...]] = ()

    def __init__(
        self,
        *,
        code_table: Mapping[Hashable, ViolationKind] | None = None,
        native_types: Iterable[type[BaseException]] | None = None,
    ) -> None:
        # copies keep the validator immutable even if the caller mutates its mapping later
        self._code_table = dict(code_table if code_table is not None else self.CODE_TABLE)
        if native_types is None:
            self._native_types = load_native_types(self.NATIVE_TYPE_CANDIDATES)
        else:
            self._native_types = tuple(native_types)

    @property
    def code_table(self) -> Mapping[Hashable, ViolationKind]:
        return dict(self._code_table)

    @property
    def native_types(self) -> tuple[type[BaseException], ...]:
        return self._native_types

    def __repr__(self) -> str:
        names = ", ".join(t.__qualname__ for t in self._native_types) or "-"
        return f"{type(self).__name__}(engine={self.engine!r}, native_types=({names}))"

    # ---------------------------------------------------------------
    # Engine hooks
    # ---------------------------------------------------------------

    def is_native(self, error: BaseException) -> bool:
        return bool(self._native_types) and isinstance(error, self._native_types)

    @abstractmethod
    def extract_code(self, native: BaseException) -> Any:
        """Return the engine-specific error code, or None when the error carries none."""

    def extract_message(self, native: BaseException) -> str:
        return str(native)

    def extract_constraint(self, native: BaseException) -> str | None:
        return None

    # ---------------------------------------------------------------
    # Classification
    # ---------------------------------------------------------------

    def classify(self, error: BaseException) -> Outcome:
        if error is None:
            raise InvalidInputError()

        # A translated error chains the native error as __cause__; resolving it again
        # must be a pass-through, not a second translation.
        if isinstance(error, ConstraintViolationError):
            return Unrecognized(error)

        native = root_cause(error)
        if not self.is_native(native):
            return Unrecognized(error)

        code = self.extract_code(native)
        try:
            kind = self._code_table.get(code) if code is not None else None
        except TypeError:
            # unhashable code: cannot be in the table
            kind = None
        if kind is None:
            return Unrecognized(error)

        return Translated(
            kind=kind,
            message=self.extract_message(native),
            cause=native,
            constraint=self.extract_constraint(native),
            engine=self.engine,
        )


__all__ = ["ConstraintValidator", "EngineConstraintValidator", "load_native_types"]
