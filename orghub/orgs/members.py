"""
Membership management for OrgHub.

Handles the organization membership endpoints (/orgs/{org}/members and
/orgs/{org}/public_members).
"""

import inspect
from typing import TYPE_CHECKING, Any, AsyncIterator, Awaitable, Callable, Mapping, Optional, Union
from urllib.parse import quote

from ..logging import get_module_logger
from ..utils.http import APIResponse
from ..utils.params import assert_presence_of, normalize_params
from .models import MembershipQuery

if TYPE_CHECKING:
    from ..client import OrgHub

logger = get_module_logger()

MemberCallback = Callable[[Any], Union[None, Awaitable[None]]]


def _segment(value: str) -> str:
    """Escape an identifier for use as a single path segment."""
    return quote(value, safe="")


class MembershipManager:
    """
    Manager for organization membership operations.

    A member is a user that belongs to at least one team in the organization.
    If the authenticated user is also a member of the organization, both
    concealed and public members are listed; otherwise only public members.

    Example:
        ```python
        hub = await OrgHub.create()

        # List all members
        members = await hub.members.list("acme-corp")

        # List public members only
        public = await hub.members.list("acme-corp", {"public": True})

        # Check membership
        if await hub.members.member("acme-corp", "alice"):
            await hub.members.publicize("acme-corp", "alice")
        ```
    """

    def __init__(self, hub: "OrgHub") -> None:
        """
        Initialize MembershipManager.

        Args:
            hub: OrgHub client instance
        """
        self.hub = hub
        self.executor = hub.executor

    async def list(
        self,
        org_name: str,
        params: Optional[Mapping[Any, Any]] = None,
    ) -> APIResponse:
        """
        List members of an organization.

        Args:
            org_name: Organization login
            params: Options; `public` selects public members only, the rest
                is forwarded as query parameters

        Returns:
            APIResponse; iterating it yields member records

        Raises:
            ValidationError: If org_name is missing or empty

        Example:
            ```python
            response = await hub.members.list("acme-corp", {"per_page": 100})
            logins = [m["login"] for m in response]
            ```
        """
        assert_presence_of(org_name)
        query = MembershipQuery.from_params(params)

        return await self.executor.get(
            query.members_path(_segment(org_name)),
            query.extra_query,
        )

    all = list

    async def each(
        self,
        org_name: str,
        callback: MemberCallback,
        params: Optional[Mapping[Any, Any]] = None,
    ) -> APIResponse:
        """
        List members and call `callback` once per member, in response order.

        The callback may be a coroutine function; it is awaited. Its return
        value is ignored.

        Args:
            org_name: Organization login
            callback: Called with each member record
            params: Same options as list()

        Returns:
            The un-iterated APIResponse

        Example:
            ```python
            await hub.members.each("acme-corp", lambda m: print(m["login"]))
            ```
        """
        response = await self.list(org_name, params)
        for record in response:
            result = callback(record)
            if inspect.isawaitable(result):
                await result
        return response

    def iter_members(
        self,
        org_name: str,
        params: Optional[Mapping[Any, Any]] = None,
    ) -> AsyncIterator[Any]:
        """
        Stream members lazily.

        Arguments are validated immediately; the request is sent when
        iteration starts.

        Example:
            ```python
            async for member in hub.members.iter_members("acme-corp"):
                print(member["login"])
            ```
        """
        assert_presence_of(org_name)
        query = MembershipQuery.from_params(params)
        path = query.members_path(_segment(org_name))

        async def stream() -> AsyncIterator[Any]:
            response = await self.executor.get(path, query.extra_query)
            for record in response:
                yield record

        return stream()

    async def member(
        self,
        org_name: str,
        member_name: str,
        params: Optional[Mapping[Any, Any]] = None,
    ) -> bool:
        """
        Check if a user is, publicly or privately, a member of an organization.

        Pass {"public": True} to check public membership only.

        Args:
            org_name: Organization login
            member_name: User login
            params: Options; `public` selects the public membership endpoint

        Returns:
            True if the API answered 204 No Content, False if it answered
            404 Not Found or any other success status

        Raises:
            ValidationError: If an identifier is missing or empty
            OrgHubAPIError: For any API error other than 404
        """
        assert_presence_of(org_name, member_name)
        query = MembershipQuery.from_params(params)

        path = f"{query.members_path(_segment(org_name))}/{_segment(member_name)}"
        check = await self.executor.check(path, query.extra_query)
        check.raise_for_error()

        logger.debug(
            "membership_checked",
            org=org_name,
            member=member_name,
            public_only=query.public_only,
            outcome=check.outcome.value,
            status_code=check.status_code,
        )
        return check.is_member

    is_member = member

    async def delete(
        self,
        org_name: str,
        member_name: str,
        params: Optional[Mapping[Any, Any]] = None,
    ) -> APIResponse:
        """
        Remove a member.

        Removing a user from the members list removes them from all teams
        and they lose access to the organization's repositories.

        Args:
            org_name: Organization login
            member_name: User login
            params: Forwarded as query parameters

        Returns:
            Raw APIResponse

        Example:
            ```python
            await hub.members.delete("acme-corp", "alice")
            ```
        """
        assert_presence_of(org_name, member_name)
        options = normalize_params(params)

        response = await self.executor.delete(
            f"/orgs/{_segment(org_name)}/members/{_segment(member_name)}",
            options,
        )
        logger.info("member_removed", org=org_name, member=member_name)
        return response

    remove = delete

    async def publicize(
        self,
        org_name: str,
        member_name: str,
        params: Optional[Mapping[Any, Any]] = None,
    ) -> APIResponse:
        """
        Publicize a user's membership.

        Args:
            org_name: Organization login
            member_name: User login (usually the authenticated user)
            params: Sent as the JSON request body

        Returns:
            Raw APIResponse
        """
        assert_presence_of(org_name, member_name)
        options = normalize_params(params)

        response = await self.executor.put(
            f"/orgs/{_segment(org_name)}/public_members/{_segment(member_name)}",
            options,
        )
        logger.info("membership_publicized", org=org_name, member=member_name)
        return response

    make_public = publicize
    publicize_membership = publicize

    async def conceal(
        self,
        org_name: str,
        member_name: str,
        params: Optional[Mapping[Any, Any]] = None,
    ) -> APIResponse:
        """
        Conceal a user's membership.

        Args:
            org_name: Organization login
            member_name: User login (usually the authenticated user)
            params: Forwarded as query parameters

        Returns:
            Raw APIResponse
        """
        assert_presence_of(org_name, member_name)
        options = normalize_params(params)

        response = await self.executor.delete(
            f"/orgs/{_segment(org_name)}/public_members/{_segment(member_name)}",
            options,
        )
        logger.info("membership_concealed", org=org_name, member=member_name)
        return response

    conceal_membership = conceal
