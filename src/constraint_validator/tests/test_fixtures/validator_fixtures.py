"""Fixtures for validator and registry tests."""

import pytest
from faker import Faker

from constraint_validator.constraint_validators import (
    PostgreSqlConstraintValidator,
    SqlServerConstraintValidator,
    SqliteConstraintValidator,
    ValidatorRegistry,
)
from constraint_validator.testing import FakePostgresError, FakeSqlServerError

fake = Faker()

# NOTE: validators are built with the fake driver error types so tests never depend
# on psycopg / pyodbc being installed.


@pytest.fixture
def registry():
    """
    Fresh, empty registry for each test.

    Cleared on teardown as well: the registry has no automatic scoping, so a test
    that hands it to shared code must not leak validators into the next test.
    """
    reg = ValidatorRegistry()
    yield reg
    reg.clear()


@pytest.fixture
def postgres_validator() -> PostgreSqlConstraintValidator:
    return PostgreSqlConstraintValidator(native_types=(FakePostgresError,))


@pytest.fixture
def sqlserver_validator() -> SqlServerConstraintValidator:
    return SqlServerConstraintValidator(native_types=(FakeSqlServerError,))


@pytest.fixture
def sqlite_validator() -> SqliteConstraintValidator:
    # sqlite3 ships with Python, so the real native types are always available
    return SqliteConstraintValidator()


@pytest.fixture
def populated_registry(registry, sqlserver_validator, postgres_validator):
    """Registry with the SQL Server validator first and the PostgreSQL validator second."""
    registry.register(sqlserver_validator)
    registry.register(postgres_validator)
    return registry


@pytest.fixture
def constraint_name() -> str:
    return f"uq_{fake.word()}_{fake.word()}"


@pytest.fixture
def db_message() -> str:
    return fake.sentence()
