"""
Client entry point.

Wires settings, logging, the shared HTTP client and resource bindings.

Dependencies: circonus_client.configs, circonus_client.boundary
System role: Factory for a ready-to-use API facade
"""

from functools import lru_cache

from circonus_client.boundary.http.api_client import APIClient
from circonus_client.boundary.resources.outlier_report import OutlierReportClient
from circonus_client.configs import Settings, get_settings
from circonus_client.observability.logger import configure_logging, get_logger

logger = get_logger(__name__)


class CirconusAPI:
    """Facade exposing resource bindings over one shared APIClient."""

    def __init__(
        self,
        settings: Settings | None = None,
        http_client: APIClient | None = None,
    ) -> None:
        """
        Initialize API facade.

        Args:
            settings: Client settings (loaded from environment if None)
            http_client: Pre-built APIClient (built from settings if None)

        Raises:
            ConfigurationError: If no API token is configured
        """
        self.settings = settings or get_settings()
        self.http = http_client or APIClient(self.settings.api, debug=self.settings.debug)
        self.outlier_reports = OutlierReportClient(self.http)
        logger.debug(f"{__name__}:__init__ - API client ready for {self.http.base_url}")

    def close(self) -> None:
        """Close the shared HTTP client."""
        self.http.close()

    def __enter__(self) -> "CirconusAPI":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


@lru_cache
def get_api() -> CirconusAPI:
    """
    Get API facade singleton.

    Configures logging from settings on first use.

    Returns:
        CirconusAPI: Shared facade instance

    Usage:
        from circonus_client import get_api
        report = get_api().outlier_reports.fetch("1234")
    """
    settings = get_settings()
    configure_logging(settings.effective_log_level)
    return CirconusAPI(settings)
