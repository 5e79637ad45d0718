"""
Registry wiring.

`build_registry(settings)` creates a fresh registry from the CONSTRAINT_VALIDATORS
setting; `get_registry()` returns the process-wide default built on first use.

Prefer passing an explicit registry to code that needs one (it keeps tests isolated);
the default exists for applications that only ever need one.
"""

import logging
from functools import lru_cache

from ..config.settings import Settings, get_settings
from ..constraint_validators import BUILTIN_VALIDATORS, ValidatorRegistry
from ..exceptions.base import ConfigurationError

logger = logging.getLogger(__name__)


def build_registry(settings: Settings | None = None) -> ValidatorRegistry:
    """
    Return a new registry holding one validator per configured name, in order.

    Raises:
        ConfigurationError: if a name does not match a built-in validator.
    """
    settings = settings or get_settings()
    registry = ValidatorRegistry()

    for name in settings.VALIDATOR_NAMES:
        validator_cls = BUILTIN_VALIDATORS.get(name)
        if validator_cls is None:
            raise ConfigurationError(
                f"Unknown constraint validator '{name}' "
                f"(expected one of: {', '.join(sorted(BUILTIN_VALIDATORS))})"
            )
        validator = validator_cls()
        if not validator.native_types:
            # Driver not installed: the validator stays registered but recognizes nothing.
            logger.warning("registry.driver_missing", extra={"engine": name})
        registry.register(validator)

    logger.info("registry.configured", extra={"validators": settings.VALIDATOR_NAMES})
    return registry


# The default registry is created once and shared by every caller in the process.
@lru_cache()
def get_registry() -> ValidatorRegistry:
    return build_registry(get_settings())
