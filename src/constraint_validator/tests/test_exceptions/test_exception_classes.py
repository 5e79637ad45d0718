import pytest

from constraint_validator.exceptions.base import (
    EXCEPTION_FOR_KIND,
    CheckConstraintViolationError,
    ConstraintViolationError,
    ForeignKeyViolationError,
    InvalidInputError,
    NotNullViolationError,
    PrimaryKeyViolationError,
    ViolationKind,
)
from constraint_validator.exceptions.outcomes import Translated
from constraint_validator.testing import FakePostgresError


class TestViolationKind:

    def test_kinds_are_a_closed_set(self):
        assert {kind.value for kind in ViolationKind} == {
            "primary_key",
            "foreign_key",
            "check_constraint",
            "not_null",
        }

    def test_every_kind_has_an_exception(self):
        assert set(EXCEPTION_FOR_KIND) == set(ViolationKind)

    @pytest.mark.parametrize("kind, exc_cls", list(EXCEPTION_FOR_KIND.items()))
    def test_exception_class_reports_its_kind(self, kind, exc_cls):
        assert exc_cls.kind is kind
        assert issubclass(exc_cls, ConstraintViolationError)


class TestConstraintViolationError:

    def test_cause_is_chained(self):
        native = FakePostgresError("23505", "duplicate key value")

        exc = PrimaryKeyViolationError("duplicate key value", cause=native)

        assert exc.cause is native
        assert exc.__cause__ is native
        assert exc.__suppress_context__ is True

    def test_without_cause(self):
        exc = NotNullViolationError("missing")
        assert exc.cause is None
        assert exc.__cause__ is None

    def test_str_includes_constraint_and_engine(self):
        exc = PrimaryKeyViolationError("duplicate key value", constraint="uq_users_email", engine="postgresql")
        assert str(exc) == "duplicate key value (constraint: uq_users_email; engine: postgresql)"

    def test_str_is_the_message_when_nothing_else_is_known(self):
        assert str(ForeignKeyViolationError("fk failed")) == "fk failed"

    @pytest.mark.parametrize(
        "exc_cls, status, code",
        [
            (PrimaryKeyViolationError, 409, "duplicate"),
            (ForeignKeyViolationError, 409, "foreign_key"),
            (CheckConstraintViolationError, 422, "check_violation"),
            (NotNullViolationError, 422, "missing_field"),
        ],
    )
    def test_http_status_and_code(self, exc_cls, status, code):
        exc = exc_cls("raw db message")
        assert exc.http_status() == status
        assert exc.error_code == code

    def test_base_class_falls_back_to_400(self):
        exc = ConstraintViolationError("something")
        assert exc.http_status() == 400
        assert exc.to_payload() == {"detail": "Database constraint violated", "code": "constraint_violation"}

    def test_payload_hides_raw_message_and_constraint(self):
        exc = PrimaryKeyViolationError(
            'duplicate key value violates unique constraint "uq_users_email"',
            constraint="uq_users_email",
        )

        payload = exc.to_payload()

        assert payload == {"detail": "Record already exists", "code": "duplicate", "kind": "primary_key"}
        assert "uq_users_email" not in str(payload)


class TestTranslated:

    def test_to_exception_builds_the_kind_specific_error(self):
        native = FakePostgresError("23514", "check failed")
        outcome = Translated(
            kind=ViolationKind.CHECK_CONSTRAINT,
            message="check failed",
            cause=native,
            constraint="ck_price",
            engine="postgresql",
        )

        exc = outcome.to_exception()

        assert type(exc) is CheckConstraintViolationError
        assert exc.message == "check failed"
        assert exc.cause is native
        assert exc.constraint == "ck_price"
        assert exc.engine == "postgresql"

    def test_outcomes_are_immutable(self):
        outcome = Translated(kind=ViolationKind.NOT_NULL, message="m", cause=ValueError("x"))
        with pytest.raises(AttributeError):
            outcome.kind = ViolationKind.PRIMARY_KEY


class TestInvalidInputError:

    def test_default_message(self):
        assert str(InvalidInputError()) == "error must not be None"

    def test_is_a_value_error(self):
        assert issubclass(InvalidInputError, ValueError)
