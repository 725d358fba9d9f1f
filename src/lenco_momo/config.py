"""Configuration for the Lenco SDK."""
from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.lenco.co/access/v2"


class LencoSettings(BaseSettings):
    """Transport settings with environment variable support.

    The API credential is not read from here; callers pass it explicitly.
    """

    model_config = SettingsConfigDict(
        env_prefix="LENCO_",
        env_file=".env",
        extra="ignore",
    )

    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0  # seconds, per HTTP request
    user_agent: str = "lenco-momo-python/0.1.0"


@lru_cache(maxsize=1)
def get_settings() -> LencoSettings:
    """Return the process-wide settings instance."""
    return LencoSettings()
