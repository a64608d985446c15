"""
Shared test fixtures and configuration for entire test suite.

Provides: API settings, mock transports, mocked APIClient, sample records
Dependencies: pytest, httpx
System role: Test infrastructure and fixture management
"""

import json
from typing import Callable
from unittest.mock import MagicMock

import httpx
import pytest

from circonus_client.boundary.http.api_client import APIClient
from circonus_client.configs.api import APISettings


@pytest.fixture
def api_settings() -> APISettings:
    """Provide API settings with zero backoff so retry tests stay fast."""
    return APISettings(
        token="test-token",
        app_name="test-app",
        url="https://api.example.com/v2",
        max_retries=2,
        min_retry_delay=0,
        max_retry_delay=0,
    )


@pytest.fixture
def make_api_client(api_settings: APISettings) -> Callable[..., APIClient]:
    """
    Build APIClient instances backed by httpx.MockTransport.

    Returns:
        Callable: factory taking a request handler and optional settings
    """
    clients: list[APIClient] = []

    def _factory(
        handler: Callable[[httpx.Request], httpx.Response],
        settings: APISettings | None = None,
    ) -> APIClient:
        client = APIClient(settings or api_settings, transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield _factory

    for client in clients:
        client.close()


@pytest.fixture
def mock_api() -> MagicMock:
    """
    Create mock APIClient for resource binding tests.

    Returns:
        MagicMock: APIClient mock with debug disabled
    """
    api = MagicMock(spec=APIClient)
    api.debug = False
    return api


@pytest.fixture
def report_data() -> dict:
    """Provide an outlier report as the API returns it."""
    return {
        "_cid": "/outlier_report/1234",
        "_created": 1483639916,
        "_created_by": "/user/1234",
        "_last_modified": 1483639916,
        "_last_modified_by": "/user/1234",
        "config": '{"threshold": 2.5}',
        "metric_cluster": "/metric_cluster/1234",
        "tags": ["env:prod", "team:sre"],
        "title": "CPU outliers",
    }


@pytest.fixture
def report_json(report_data: dict) -> bytes:
    """Provide the sample outlier report as raw response bytes."""
    return json.dumps(report_data).encode("utf-8")
