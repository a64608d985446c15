"""
Logger configuration.

Attaches a stdout handler to the ``circonus_client`` package logger so
scripts get request/retry logs without touching the application's root
logging setup.

Dependencies: logging (stdlib)
System role: Centralized logging configuration
"""

import logging
import sys
from typing import TextIO

PACKAGE_LOGGER = "circonus_client"


def configure_logging(level: str | int = logging.INFO, stream: TextIO | None = None) -> None:
    """
    Configure the package logger.

    Calling again replaces the handler installed by a previous call.

    Args:
        level: Level name ("DEBUG") or logging constant
        stream: Output stream (stdout if None)
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in package_logger.handlers[:]:
        if getattr(handler, "_circonus_client", False):
            package_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler._circonus_client = True
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    package_logger.setLevel(level.upper() if isinstance(level, str) else level)
    package_logger.addHandler(handler)

    # httpx logs every request at INFO; the client logs its own
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the package namespace (usually called with __name__)."""
    return logging.getLogger(name)
