"""
Shared HTTP client for the Circonus REST API.

Adds authentication headers, resolves request paths against the configured
base URL, and retries throttled (429), server-side (5xx) and transport
failures with exponential backoff. Resource bindings only ever see raw
response bytes or a typed APIError.

Dependencies: httpx, tenacity
System role: Single transport used by every resource binding
"""

import logging
import ssl

import httpx
from tenacity import (
    Retrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
    wait_random,
)

from circonus_client.configs.api import APISettings
from circonus_client.core.exceptions import (
    APIResponseError,
    APITransportError,
    ConfigurationError,
)
from circonus_client.observability.log_utils import safe_log_value

logger = logging.getLogger(__name__)


def _is_retryable(exc: BaseException) -> bool:
    """Retry transport failures, throttling and server errors."""
    if isinstance(exc, httpx.TransportError):
        return True
    if isinstance(exc, APIResponseError):
        return exc.status_code == 429 or exc.status_code >= 500
    return False


class APIClient:
    """HTTP client for the Circonus API (auth headers, retries, status handling)."""

    def __init__(
        self,
        settings: APISettings,
        debug: bool = False,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize API client.

        Args:
            settings: API connection settings (token, URL, retry policy)
            debug: Log request and response bodies at DEBUG level
            transport: Optional httpx transport (tests use httpx.MockTransport)

        Raises:
            ConfigurationError: If no API token is configured
        """
        if not settings.token:
            raise ConfigurationError(
                "API token is required",
                details={"setting": "CIRCONUS_API_TOKEN"},
            )

        self._settings = settings
        self.debug = debug

        headers = {
            "X-Circonus-Auth-Token": settings.token,
            "X-Circonus-App-Name": settings.app_name,
            "Accept": "application/json",
        }
        if settings.account_id:
            headers["X-Circonus-Account-ID"] = settings.account_id

        verify: ssl.SSLContext | bool = True
        if settings.ca_file:
            verify = ssl.create_default_context(cafile=settings.ca_file)

        self._client = httpx.Client(
            base_url=settings.url,
            headers=headers,
            timeout=settings.timeout,
            verify=verify,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        """Configured API base URL."""
        return self._settings.url

    def get(self, path: str) -> bytes:
        """GET ``path`` and return the response body."""
        return self._request("GET", path)

    def post(self, path: str, body: bytes) -> bytes:
        """POST JSON ``body`` to ``path`` and return the response body."""
        return self._request("POST", path, body)

    def put(self, path: str, body: bytes) -> bytes:
        """PUT JSON ``body`` to ``path`` and return the response body."""
        return self._request("PUT", path, body)

    def delete(self, path: str) -> bytes:
        """DELETE ``path`` and return the response body."""
        return self._request("DELETE", path)

    def _send(self, method: str, path: str, body: bytes | None) -> bytes:
        """Issue a single request; raise APIResponseError on non-2xx."""
        headers = {"Content-Type": "application/json"} if body is not None else None

        response = self._client.request(method, path, content=body, headers=headers)

        if self.debug:
            logger.debug(
                f"{__name__}:_send - {method} {path} -> {response.status_code}: "
                f"{safe_log_value(response.content)}"
            )

        if not response.is_success:
            raise APIResponseError(
                response.status_code,
                body=response.text,
                method=method,
                path=path,
            )
        return response.content

    def _request(self, method: str, path: str, body: bytes | None = None) -> bytes:
        """
        Send request with retry on throttling, server errors and transport failures.

        Args:
            method: HTTP method
            path: Path relative to the base URL, optionally with a query string
            body: Pre-serialised JSON body

        Returns:
            bytes: Raw response body

        Raises:
            APIResponseError: Non-2xx response (after retries for 429/5xx)
            APITransportError: Connection failure after retries
        """
        if self.debug and body is not None:
            logger.debug(f"{__name__}:_request - {method} {path} body: {safe_log_value(body)}")

        attempts = self._settings.max_retries + 1
        retrying = Retrying(
            retry=retry_if_exception(_is_retryable),
            stop=stop_after_attempt(attempts),
            wait=wait_exponential(
                multiplier=self._settings.min_retry_delay,
                max=self._settings.max_retry_delay,
            )
            + wait_random(0, self._settings.min_retry_delay),
            before_sleep=lambda retry_state: logger.warning(
                f"{__name__}:_request - {method} {path} retry "
                f"{retry_state.attempt_number}/{attempts - 1} after "
                f"{type(retry_state.outcome.exception()).__name__}"
            ),
            reraise=True,
        )

        try:
            for attempt in retrying:
                with attempt:
                    content = self._send(method, path, body)
        except httpx.TransportError as e:
            logger.error(f"{__name__}:_request - {method} {path} failed: {e}")
            raise APITransportError(
                f"{method} {path} failed: {e}",
                method=method,
                path=path,
            ) from e
        except APIResponseError as e:
            logger.error(f"{__name__}:_request - {method} {path} -> {e.status_code}")
            raise

        return content

    def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        self._client.close()

    def __enter__(self) -> "APIClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
