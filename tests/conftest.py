"""
Pytest configuration and fixtures for OrgHub tests.

Provides a request executor whose HTTP verbs are mocked and test fixtures.
"""

from typing import Callable
from unittest.mock import AsyncMock

import httpx
import pytest

from orghub.client import OrgHub
from orghub.config import OrgHubConfig
from orghub.utils.http import APIResponse, RequestExecutor


@pytest.fixture
def config():
    """Create a test OrgHubConfig."""
    return OrgHubConfig(
        api_url="https://api.test.local",
        token="test-token-12345678901234567890",
        user_agent="orghub-tests",
        debug=True,
    )


@pytest.fixture
def http_client():
    """Create a mock httpx client; nothing should reach it in manager tests."""
    return AsyncMock(spec=httpx.AsyncClient)


@pytest.fixture
def executor(config, http_client):
    """
    Create a RequestExecutor with get/put/delete replaced by AsyncMocks.

    check() keeps its real implementation so it runs on top of the mocked get().
    """
    executor = RequestExecutor(config=config, client=http_client, owns_client=False)
    executor.get = AsyncMock(return_value=APIResponse(200, []))
    executor.put = AsyncMock(return_value=APIResponse(204))
    executor.delete = AsyncMock(return_value=APIResponse(204))
    return executor


@pytest.fixture
def hub(config, executor):
    """Create a test OrgHub instance."""
    return OrgHub(config=config, executor=executor)


@pytest.fixture
def make_executor(config) -> Callable[..., RequestExecutor]:
    """
    Factory for executors backed by httpx.MockTransport.

    Usage:
        executor = make_executor(handler)
        executor = make_executor(handler, config=other_config)
    """

    def factory(handler, config=config) -> RequestExecutor:
        return RequestExecutor.create(config, transport=httpx.MockTransport(handler))

    return factory


@pytest.fixture
def sample_members():
    """Create sample member records."""
    return [
        {
            "login": "alice",
            "id": 1001,
            "type": "User",
            "site_admin": False,
            "url": "https://api.test.local/users/alice",
        },
        {
            "login": "bob",
            "id": 1002,
            "type": "User",
            "site_admin": True,
            "url": "https://api.test.local/users/bob",
        },
        {
            "login": "carol",
            "id": 1003,
            "type": "User",
            "site_admin": False,
            "url": "https://api.test.local/users/carol",
        },
    ]
