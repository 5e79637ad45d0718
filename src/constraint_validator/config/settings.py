from pydantic_settings import BaseSettings
from pydantic import ConfigDict, field_validator
from pathlib import Path
from typing import Literal
from functools import lru_cache
from ..validators.config_validators import to_uppercase, to_lowercase, split_names


class Settings(BaseSettings):
    """
    Settings loaded from the environment (and an optional .env file).
    """

    # Environment
    ENV: Literal["development", "testing", "staging", "production"] = "development"

    # Validators registered into the default registry, in dispatch order.
    # Comma-separated names, e.g. "postgresql,sqlserver".
    CONSTRAINT_VALIDATORS: str = "postgresql,sqlserver,sqlite"

    # Logging
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    LOG_FORMAT: Literal["json", "text"] = "json"
    LOG_TO_STDOUT: bool = True
    LOG_DIR: Path = Path("/var/log/constraint-validator")
    LOG_MAX_BYTES: int = 10_000_000  # 10 MB
    LOG_BACKUP_COUNT: int = 5

    # --- Derived settings ---
    @property
    def VALIDATOR_NAMES(self) -> list[str]:
        """
        The CONSTRAINT_VALIDATORS setting as an ordered list of names.

        Order matters: the registry tries validators in this order, so put the more
        specific validator first when two of them could match the same error.
        """
        return split_names(self.CONSTRAINT_VALIDATORS)

    # --- Validators ---
    @field_validator("LOG_LEVEL", mode="before")
    def normalize_log_level(cls, v: str | None) -> str | None:
        return to_uppercase(v)

    @field_validator("LOG_FORMAT", "ENV", "CONSTRAINT_VALIDATORS", mode="before")
    def normalize_lowercase(cls, v: str | None) -> str | None:
        return to_lowercase(v)

    # --- ConfigDict settings ---
    model_config = ConfigDict(
        # .env at the package root (src/constraint_validator/.env in a checkout)
        env_file=str(Path(__file__).parent.parent / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )


# get_settings() takes no arguments and always returns the same settings from the environment,
# so caching it with @lru_cache() is fine.
@lru_cache()
def get_settings() -> Settings:
    return Settings()
