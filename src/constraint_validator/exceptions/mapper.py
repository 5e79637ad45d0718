"""
Error translation at the call site.

`resolve(error)` hands an error to a registry (the default one unless given) and
returns whatever should be raised instead. The context managers wrap blocks of
database work so callers do not have to catch and resolve by hand:

    with translate_errors(registry, model_name="User"):
        session.add(user)
        session.flush()

    async with async_translate_errors(session, registry, model_name="User"):
        session.add(user)
        await session.flush()

A recognized violation is re-raised as a ConstraintViolationError subclass; any
other exception propagates exactly as it was raised.
"""

import logging
from contextlib import asynccontextmanager, contextmanager

from sqlalchemy.ext.asyncio import AsyncSession

from ..constraint_validators.registry import ValidatorRegistry
from .base import ConstraintViolationError

logger = logging.getLogger(__name__)


def resolve(error: BaseException, registry: ValidatorRegistry | None = None) -> BaseException:
    """Return the translated error for `error`, or `error` itself when nothing matched."""
    if registry is None:
        # imported lazily: the default registry reads settings on first use
        from ..core.dependencies import get_registry

        registry = get_registry()
    return registry.dispatch(error)


def _log_translation(resolved: ConstraintViolationError, model_name: str | None) -> None:
    # INFO: constraint violations are expected client-level scenarios, not server faults.
    logger.info(
        "mapper.constraint_violation",
        extra={
            "model": model_name or "Record",
            "kind": resolved.kind.value if resolved.kind else None,
            "engine": resolved.engine,
            "constraint": resolved.constraint,
        },
    )


@contextmanager
def translate_errors(registry: ValidatorRegistry | None = None, *, model_name: str | None = None):
    """
    Re-raise exceptions from the block as portable constraint violations when recognized.
    """
    try:
        yield
    except Exception as exc:
        resolved = resolve(exc, registry)
        if resolved is exc:
            raise
        _log_translation(resolved, model_name)
        # no `from exc`: __cause__ already points at the native database error
        raise resolved


@asynccontextmanager
async def async_translate_errors(
    session: AsyncSession | None = None,
    registry: ValidatorRegistry | None = None,
    *,
    model_name: str | None = None,
):
    """
    Async variant that rolls the session back before translating.

    Usage:
        async with async_translate_errors(self.db, model_name=self.model.__name__):
            ... DB ops that may raise IntegrityError ...
    """
    try:
        yield
    except Exception as exc:
        if session is not None:
            try:
                await session.rollback()
            except Exception:
                # Unusual: keep the original error as the one that propagates.
                logger.exception("Failed to rollback session after database error", extra={"model": model_name})
        resolved = resolve(exc, registry)
        if resolved is exc:
            raise
        _log_translation(resolved, model_name)
        raise resolved


__all__ = ["resolve", "translate_errors", "async_translate_errors"]
