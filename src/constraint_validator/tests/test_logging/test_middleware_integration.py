# src/constraint_validator/tests/test_logging/test_middleware_integration.py
import json
import logging

import pytest
from fastapi import FastAPI
from starlette.testclient import TestClient

from constraint_validator.api.error_handlers import register_exception_handlers
from constraint_validator.core.logging.builder import setup_logging
from constraint_validator.core.logging.middleware import RequestIDMiddleware
from constraint_validator.exceptions.mapper import translate_errors
from constraint_validator.testing import FakePostgresError


class S:
    LOG_FORMAT = "json"
    LOG_LEVEL = "INFO"
    LOG_TO_STDOUT = True
    LOG_DIR = None
    LOG_MAX_BYTES = 1000
    LOG_BACKUP_COUNT = 1
    ENV = "production"


@pytest.fixture
def json_logging(restore_logging):
    # Handlers must be built during the test call (after capsys is active),
    # so tests invoke the returned callable at the start of their body.
    return lambda: setup_logging(S())


@pytest.fixture
def app(populated_registry):
    app = FastAPI()
    app.add_middleware(RequestIDMiddleware)
    register_exception_handlers(app)

    @app.get("/hello")
    def hello():
        logging.getLogger("constraint_validator").info("handling hello")
        return {"ok": True}

    @app.post("/users")
    def create_user():
        with translate_errors(populated_registry, model_name="User"):
            raise FakePostgresError("23505", "duplicate key value", constraint_name="uq_users_email")

    return app


def _json_lines(text: str) -> list[dict]:
    records = []
    for line in text.strip().splitlines():
        try:
            records.append(json.loads(line))
        except ValueError:
            continue
    return records


def test_request_id_in_response_and_logs(json_logging, app, capsys):
    json_logging()
    client = TestClient(app)
    resp = client.get("/hello")
    assert resp.status_code == 200

    rid = resp.headers.get("X-Request-ID")
    assert rid is not None

    # Handlers were created inside the test, so they write to the captured stderr
    records = _json_lines(capsys.readouterr().err)
    assert any(rec.get("request_id") == rid and rec["message"] == "handling hello" for rec in records)


def test_valid_incoming_request_id_is_echoed(app):
    client = TestClient(app)
    resp = client.get("/hello", headers={"X-Request-ID": "client-abc.123"})
    assert resp.headers["X-Request-ID"] == "client-abc.123"


def test_invalid_incoming_request_id_is_replaced(app):
    client = TestClient(app)
    resp = client.get("/hello", headers={"X-Request-ID": "bad id with spaces"})
    assert resp.headers["X-Request-ID"] != "bad id with spaces"
    assert len(resp.headers["X-Request-ID"]) == 36  # uuid4


def test_translated_violation_is_logged_with_request_id(json_logging, app, capsys):
    json_logging()
    client = TestClient(app)
    resp = client.post("/users", headers={"X-Request-ID": "req-42"})

    assert resp.status_code == 409
    assert resp.headers["X-Request-ID"] == "req-42"

    records = _json_lines(capsys.readouterr().err)
    violation = [rec for rec in records if rec["message"] == "mapper.constraint_violation"]
    assert violation
    assert violation[0]["request_id"] == "req-42"
    assert violation[0]["model"] == "User"
    assert violation[0]["constraint"] == "uq_users_email"
