"""
HTTP boundary modules.

Exports: APIClient
"""

from .api_client import APIClient

__all__ = ["APIClient"]
