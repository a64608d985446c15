"""
Circonus API connection settings.

Token, application name, endpoint and retry policy for the shared HTTP client.

Dependencies: pydantic, pydantic_settings
System role: API client configuration
"""

from pydantic import Field, field_validator
from pydantic_settings import SettingsConfigDict

from circonus_client.configs.base import BaseSettings
from circonus_client.configs.constants import DEFAULT_API_URL, DEFAULT_APP_NAME


class APISettings(BaseSettings):
    """Circonus API connection configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CIRCONUS_API_",
        case_sensitive=False,
        extra="ignore",
    )

    token: str = Field(default="", description="API token (X-Circonus-Auth-Token)")
    app_name: str = Field(
        default=DEFAULT_APP_NAME,
        description="Application name registered with the token (X-Circonus-App-Name)",
    )
    account_id: str | None = Field(
        default=None,
        description="Optional account ID (X-Circonus-Account-ID)",
    )
    url: str = Field(default=DEFAULT_API_URL, description="API base URL")

    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")
    max_retries: int = Field(
        default=4,
        ge=0,
        description="Retries after the first attempt on 429/5xx and transport errors",
    )
    min_retry_delay: float = Field(default=1.0, ge=0, description="Initial backoff in seconds")
    max_retry_delay: float = Field(default=15.0, ge=0, description="Backoff ceiling in seconds")

    ca_file: str | None = Field(
        default=None,
        description="Path to a CA bundle for private API endpoints",
    )

    @field_validator("url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        """Normalise base URL so request paths can be appended directly."""
        return value.rstrip("/")
