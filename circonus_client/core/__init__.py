"""
Core domain logic for the Circonus client.

Exports: exception hierarchy, CID helpers
"""

from circonus_client.core.cid import match_cid, normalize_cid
from circonus_client.core.exceptions import (
    APIError,
    APIResponseError,
    APITransportError,
    CirconusClientException,
    ConfigurationError,
    InvalidCIDError,
    InvalidConfigError,
    ResourceError,
    ResourceParseError,
    ResourceRequestError,
    ValidationError,
)

__all__ = [
    "match_cid",
    "normalize_cid",
    "APIError",
    "APIResponseError",
    "APITransportError",
    "CirconusClientException",
    "ConfigurationError",
    "InvalidCIDError",
    "InvalidConfigError",
    "ResourceError",
    "ResourceParseError",
    "ResourceRequestError",
    "ValidationError",
]
