"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from circonus_client.configs.api import APISettings
from circonus_client.configs.settings import Settings, get_settings

__all__ = ["APISettings", "Settings", "get_settings"]
