"""
Core pytest configuration for the entire test suite.

Only the session-wide setup lives here (logging). Domain fixtures (validators,
registries, fake driver errors) are in tests/test_fixtures/validator_fixtures.py
and imported at the bottom so every test module can use them without imports.
"""

from __future__ import annotations

import logging

# -------------------------------
# Early logging tuning
# -------------------------------
# Silence noisy third-party loggers before anything imports them.
NOISY_LOGGERS = (
    "faker",
    "faker.factory",
    "sqlalchemy",
    "sqlalchemy.engine",
    "asyncio",
    "httpx",
)
for _name in NOISY_LOGGERS:
    logging.getLogger(_name).setLevel(logging.WARNING)

import pytest

from constraint_validator.config.settings import Settings
from constraint_validator.core.logging.builder import setup_logging

TEST_LOGGING = Settings(_env_file=None, ENV="testing", LOG_FORMAT="text", LOG_TO_STDOUT=True, LOG_LEVEL="DEBUG")


# The `autouse=True` part means that this fixture is applied to the whole session
# without tests asking for it.
@pytest.fixture(scope="session", autouse=True)
def configure_logging():
    """
    Install the package logging configuration once for the test session.

    Text format keeps pytest's captured output readable; nothing is written to files.
    """
    setup_logging(TEST_LOGGING)
    yield


@pytest.fixture
def restore_logging():
    """
    Reinstall the session logging configuration after a test that replaced it.

    Request it before `capsys` so the teardown runs once capture has ended and the
    rebuilt handlers bind to the real stderr.
    """
    yield
    setup_logging(TEST_LOGGING)


# Validator fixtures
from .test_fixtures.validator_fixtures import (  # noqa: E402,F401
    registry,
    postgres_validator,
    sqlserver_validator,
    sqlite_validator,
    populated_registry,
    constraint_name,
    db_message,
)
