"""
Main OrgHub client.

This is the primary interface users interact with.
"""

from typing import Optional

import structlog

from .config import OrgHubConfig, load_config
from .logging import configure_logging
from .orgs import MembershipManager
from .utils.http import RequestExecutor


class OrgHub:
    """
    Main OrgHub client for organization membership endpoints.

    Example:
        ```python
        from orghub import OrgHub

        # Initialize from environment variables
        hub = await OrgHub.create()

        # Or with explicit config
        hub = await OrgHub.create(token="ghp_xxx")

        members = await hub.members.list("acme-corp")
        ```
    """

    def __init__(self, config: OrgHubConfig, executor: RequestExecutor) -> None:
        """
        Initialize OrgHub client.

        Args:
            config: OrgHub configuration
            executor: HTTP request executor

        Note:
            Use OrgHub.create() instead of direct instantiation.
        """
        self.config = config
        self.executor = executor

        self.members = MembershipManager(self)

    @classmethod
    async def create(
        cls,
        token: Optional[str] = None,
        api_url: Optional[str] = None,
        **kwargs,
    ) -> "OrgHub":
        """
        Create and initialize an OrgHub client.

        Args:
            token: API token (optional, loads from env)
            api_url: API base URL (optional, loads from env)
            **kwargs: Additional configuration options

        Returns:
            Initialized OrgHub client

        Raises:
            pydantic.ValidationError: If configuration is invalid
        """
        config_kwargs = kwargs.copy()
        if token:
            config_kwargs["token"] = token
        if api_url:
            config_kwargs["api_url"] = api_url

        config = load_config(**config_kwargs)

        if not structlog.is_configured():
            configure_logging(debug=config.debug)

        executor = RequestExecutor.create(config)

        return cls(config=config, executor=executor)

    async def close(self) -> None:
        """Close the client and release the HTTP connection pool."""
        await self.executor.close()

    async def __aenter__(self) -> "OrgHub":
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
