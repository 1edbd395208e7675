"""
OrgHub - async client for organization membership endpoints.

Example:
    ```python
    from orghub import OrgHub

    async with await OrgHub.create(token="ghp_xxx") as hub:
        # List members (public members only with {"public": True})
        members = await hub.members.list("acme-corp")

        # Check membership
        is_member = await hub.members.member("acme-corp", "alice")

        # Publicize / conceal the authenticated user's membership
        await hub.members.publicize("acme-corp", "alice")
        await hub.members.conceal("acme-corp", "alice")

        # Remove a member from every team of the organization
        await hub.members.remove("acme-corp", "mallory")
    ```
"""

from .client import OrgHub
from .config import OrgHubConfig, load_config
from .exceptions import (
    AuthenticationError,
    BadRequestError,
    ForbiddenError,
    NotFoundError,
    OrgHubAPIError,
    OrgHubError,
    ServerError,
    TransportError,
    UnprocessableEntityError,
    ValidationError,
)
from .orgs import MembershipManager, MembershipQuery
from .utils.http import APIResponse, CheckOutcome, MembershipCheck, RequestExecutor

__version__ = "0.1.0"

__all__ = [
    # Main client
    "OrgHub",
    "OrgHubConfig",
    "load_config",
    # Memberships
    "MembershipManager",
    "MembershipQuery",
    "MembershipCheck",
    "CheckOutcome",
    # HTTP
    "RequestExecutor",
    "APIResponse",
    # Errors
    "OrgHubError",
    "ValidationError",
    "TransportError",
    "OrgHubAPIError",
    "BadRequestError",
    "AuthenticationError",
    "ForbiddenError",
    "NotFoundError",
    "UnprocessableEntityError",
    "ServerError",
]
