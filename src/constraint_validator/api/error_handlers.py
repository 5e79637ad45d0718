# constraint_validator/api/error_handlers.py
"""
FastAPI exception handlers that render translated constraint violations as HTTP responses.

How to use:
    - Wrap database work in translate_errors()/async_translate_errors() (or call resolve()).
    - Register these handlers in the app factory:

        app = FastAPI()
        app.add_middleware(RequestIDMiddleware)
        register_exception_handlers(app)

    - Payloads come from exc.to_payload() and status codes from exc.http_status(),
      so the mapping lives on the exception classes, not here.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from constraint_validator.exceptions.base import ConstraintViolationError, InvalidInputError

logger = logging.getLogger(__name__)


async def constraint_violation_handler(request: Request, exc: ConstraintViolationError) -> JSONResponse:
    """
    409 for primary/foreign key violations, 422 for check/not-null violations.
    The constraint name is logged but never returned to the client.
    """
    logger.info(
        "ConstraintViolationError for %s %s: kind=%s",
        request.method,
        request.url.path,
        exc.kind.value if exc.kind else None,
        extra={"constraint": exc.constraint, "engine": exc.engine},
    )
    return JSONResponse(status_code=exc.http_status(), content=exc.to_payload())


async def invalid_input_handler(request: Request, exc: InvalidInputError) -> JSONResponse:
    # None handed to the translator is a programming error on our side
    logger.error("InvalidInputError for %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ConstraintViolationError, constraint_violation_handler)
    app.add_exception_handler(InvalidInputError, invalid_input_handler)
