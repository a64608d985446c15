"""
Unified client settings.

Aggregates all configuration modules into a single Settings class.

Dependencies: All config modules
System role: Central configuration aggregator for the client
"""

from functools import lru_cache

from pydantic import Field

from circonus_client.configs.api import APISettings
from circonus_client.configs.base import BaseSettings


class Settings(BaseSettings):
    """Unified client settings aggregating all config modules."""

    api: APISettings = Field(default_factory=APISettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get client settings singleton.

    Returns Settings instance, cached after the first call.
    Environment variables loaded once.

    Returns:
        Settings: Client settings instance

    Usage:
        from circonus_client.configs import get_settings
        settings = get_settings()
    """
    return Settings()
