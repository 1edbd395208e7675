"""
Tests for orghub.client module.
"""

from unittest.mock import AsyncMock, patch

import pytest

from orghub.client import OrgHub
from orghub.orgs.members import MembershipManager
from orghub.utils.http import RequestExecutor


class TestOrgHub:
    """Tests for OrgHub client class."""

    @pytest.mark.asyncio
    async def test_create_with_kwargs(self):
        """Test creating an OrgHub instance with kwargs."""
        hub = await OrgHub.create(
            token="ghp_test",
            api_url="https://github.example.com/api/v3",
            timeout_seconds=5,
        )

        try:
            assert hub.config.token == "ghp_test"
            assert hub.config.api_url == "https://github.example.com/api/v3"
            assert hub.config.timeout_seconds == 5.0
            assert isinstance(hub.executor, RequestExecutor)
            assert hub.executor.config is hub.config
        finally:
            await hub.close()

    @pytest.mark.asyncio
    async def test_create_configures_logging_once(self):
        """Test logging is configured only when the application has not done so."""
        with patch("orghub.client.structlog.is_configured", return_value=False), \
                patch("orghub.client.configure_logging") as mock_configure:
            hub = await OrgHub.create(token="ghp_test", debug=True)
            await hub.close()

        mock_configure.assert_called_once_with(debug=True)

        with patch("orghub.client.structlog.is_configured", return_value=True), \
                patch("orghub.client.configure_logging") as mock_configure:
            hub = await OrgHub.create(token="ghp_test")
            await hub.close()

        mock_configure.assert_not_called()

    def test_initialization(self, hub, executor):
        """Test OrgHub instance initialization."""
        assert hub.config is not None
        assert hub.executor is executor
        assert isinstance(hub.members, MembershipManager)
        assert hub.members.executor is executor

    @pytest.mark.asyncio
    async def test_close(self, hub):
        """Test closing the client closes the executor."""
        hub.executor.close = AsyncMock()

        await hub.close()

        hub.executor.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_context_manager(self, hub):
        """Test OrgHub as context manager."""
        hub.close = AsyncMock()

        async with hub as h:
            assert h is hub

        hub.close.assert_awaited_once()
