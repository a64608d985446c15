"""
Logging helpers for API traffic.

Request and response bodies arrive as bytes and can be large; these helpers
render them as bounded text and attach request context to log records.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any


def safe_log_value(value: Any, max_length: int = 500) -> str:
    """
    Render a body or context value as truncated text.

    Args:
        value: Raw body bytes, str, or any context value
        max_length: Maximum length before truncating

    Returns:
        str: Printable representation
    """
    if value is None:
        return "None"
    if isinstance(value, (bytes, bytearray)):
        text = bytes(value).decode("utf-8", errors="replace")
    else:
        text = str(value)

    if len(text) > max_length:
        return text[:max_length] + f"... (truncated, {len(text)} total)"
    return text


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context,
) -> None:
    """
    Log a message with request context (cid, method, path, status_code, ...).

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        message: Log message
        **context: Context attached to the record as string attributes
    """
    safe_context = {key: safe_log_value(val) for key, val in context.items()}
    logger.log(level, message, extra=safe_context)
