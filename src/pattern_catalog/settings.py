"""Environment-based configuration for the pattern catalog."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Pattern catalog configuration.

    All settings can be overridden via environment variables with
    PATTERN_CATALOG_ prefix. For example:
        PATTERN_CATALOG_LOG_LEVEL=DEBUG
        PATTERN_CATALOG_COLOR=false
    """

    # Logging
    log_level: str = "WARNING"

    # Console output
    color: bool = True
    width: int | None = None

    model_config = {"env_prefix": "PATTERN_CATALOG_"}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, read from the environment once."""
    return Settings()
