"""
Shared client settings.

Debug and log-level switches common to every config module. ``debug`` makes
the APIClient and resource bindings log request and response bodies.

Dependencies: pydantic_settings
System role: Foundation for all configuration classes
"""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Base configuration class with the client's logging switches."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    debug: bool = Field(
        default=False,
        description="Log outgoing JSON bodies and raw API responses (truncated) at DEBUG",
    )
    log_level: str = Field(
        default="INFO",
        description="Level for the circonus_client logger when debug is off",
    )

    @field_validator("log_level")
    @classmethod
    def known_level(cls, value: str) -> str:
        """Accept any case, reject names logging does not know."""
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level

    @property
    def effective_log_level(self) -> str:
        """DEBUG when body logging is on, otherwise log_level."""
        return "DEBUG" if self.debug else self.log_level
