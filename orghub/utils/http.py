"""
HTTP request executor for OrgHub.

Provides a thin wrapper around httpx.AsyncClient that attaches API headers,
decodes responses and raises typed errors for non-success statuses.

Example:
    ```python
    from orghub.config import OrgHubConfig
    from orghub.utils.http import RequestExecutor

    executor = RequestExecutor.create(OrgHubConfig(token="ghp_xxx"))
    response = await executor.get("/orgs/acme-corp/members", {"per_page": 50})
    for member in response:
        print(member["login"])
    await executor.close()
    ```
"""

from enum import Enum
from typing import Any, Dict, Iterator, Mapping, Optional

import httpx
from pydantic import BaseModel, ConfigDict

from ..config import OrgHubConfig
from ..exceptions import (
    NotFoundError,
    OrgHubAPIError,
    TransportError,
    error_for_status,
)
from ..logging import get_module_logger
from .params import render_query_value

logger = get_module_logger()

ACCEPT_HEADER = "application/vnd.github+json"


class APIResponse:
    """
    Decoded API response.

    Iterating a response yields the elements of a list body, so a listing
    response can be used directly as the sequence of records it carries.

    Attributes:
        status_code: HTTP status
        headers: Response headers (lower-cased names)
        body: Decoded JSON, text, or None for an empty body
        reason_phrase: HTTP reason phrase
    """

    def __init__(
        self,
        status_code: int,
        body: Any = None,
        headers: Optional[Mapping[str, str]] = None,
        reason_phrase: str = "",
    ) -> None:
        self.status_code = status_code
        self.body = body
        self.headers = {k.lower(): v for k, v in (headers or {}).items()}
        self.reason_phrase = reason_phrase

    @classmethod
    def from_httpx(cls, response: httpx.Response) -> "APIResponse":
        """
        Build an APIResponse from a raw httpx response.

        Args:
            response: Completed httpx response

        Returns:
            APIResponse with the body decoded
        """
        body: Any = None
        if response.content:
            content_type = response.headers.get("content-type", "")
            if "json" in content_type:
                try:
                    body = response.json()
                except ValueError:
                    body = response.text
            else:
                body = response.text

        return cls(
            status_code=response.status_code,
            body=body,
            headers=dict(response.headers),
            reason_phrase=response.reason_phrase,
        )

    @property
    def success(self) -> bool:
        """True for 2xx statuses."""
        return 200 <= self.status_code < 300

    def _items(self) -> list:
        if isinstance(self.body, list):
            return self.body
        return []

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items())

    def __len__(self) -> int:
        return len(self._items())

    def __getitem__(self, index):
        return self._items()[index]

    def __repr__(self) -> str:
        return f"APIResponse(status_code={self.status_code}, body={self.body!r})"


class CheckOutcome(str, Enum):
    """Outcome of a probing GET."""

    FOUND = "found"
    NOT_FOUND = "not_found"
    ERROR = "error"


class MembershipCheck(BaseModel):
    """
    Result of probing a membership endpoint.

    Keeps "not found" apart from other failures so callers decide what to
    recover from.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    outcome: CheckOutcome
    status_code: Optional[int] = None
    error: Optional[OrgHubAPIError] = None

    @property
    def is_member(self) -> bool:
        """Membership is confirmed only by 204 No Content."""
        return self.outcome == CheckOutcome.FOUND and self.status_code == 204

    def raise_for_error(self) -> None:
        """Re-raise the captured error unless the outcome is found/not found."""
        if self.outcome == CheckOutcome.ERROR and self.error is not None:
            raise self.error


class RequestExecutor:
    """
    Performs API requests on behalf of the resource managers.

    This class provides:
    1. Configured httpx client (base URL, timeout, auth and API headers)
    2. get/put/delete helpers returning APIResponse
    3. Translation of error statuses into OrgHubAPIError subclasses

    Note:
        Use RequestExecutor.create() to build one from configuration.
    """

    def __init__(
        self,
        config: OrgHubConfig,
        client: httpx.AsyncClient,
        owns_client: bool = True,
    ) -> None:
        """
        Initialize the executor.

        Args:
            config: OrgHub configuration
            client: httpx client to send requests with
            owns_client: Close the client in close()
        """
        self.config = config
        self._client = client
        self._owns_client = owns_client

    @staticmethod
    def build_headers(config: OrgHubConfig) -> Dict[str, str]:
        """Default headers for every request."""
        headers = {
            "Accept": ACCEPT_HEADER,
            "User-Agent": config.user_agent,
            "X-GitHub-Api-Version": config.api_version,
        }
        if config.token:
            headers["Authorization"] = f"Bearer {config.token}"
        return headers

    @classmethod
    def create(
        cls,
        config: OrgHubConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "RequestExecutor":
        """
        Create an executor with its own httpx client.

        Args:
            config: OrgHub configuration
            transport: Optional httpx transport (tests pass httpx.MockTransport)

        Returns:
            RequestExecutor owning its client
        """
        client = httpx.AsyncClient(
            base_url=config.api_url,
            headers=cls.build_headers(config),
            timeout=httpx.Timeout(config.timeout_seconds),
            transport=transport,
        )
        return cls(config=config, client=client, owns_client=True)

    async def request(
        self,
        method: str,
        path: str,
        query: Optional[Mapping[str, Any]] = None,
        body: Optional[Mapping[str, Any]] = None,
    ) -> APIResponse:
        """
        Send one request and decode the response.

        Args:
            method: HTTP verb
            path: Path relative to the API base URL
            query: Query parameters (None values are dropped)
            body: JSON body (omitted when empty)

        Returns:
            APIResponse for any status below 400

        Raises:
            OrgHubAPIError: Subclass matching the error status
            TransportError: If no response was received
        """
        params = {
            key: render_query_value(value)
            for key, value in (query or {}).items()
            if value is not None
        }

        logger.debug("orghub_request", method=method, path=path, params=params)

        try:
            raw = await self._client.request(
                method,
                path,
                params=params or None,
                json=dict(body) if body else None,
            )
        except httpx.HTTPError as e:
            logger.warning("orghub_transport_error", method=method, path=path, error=str(e))
            raise TransportError(f"{method} {path} failed: {e}") from e

        response = APIResponse.from_httpx(raw)
        logger.debug(
            "orghub_response",
            method=method,
            path=path,
            status_code=response.status_code,
        )

        if response.status_code >= 400:
            raise error_for_status(response)
        return response

    async def get(self, path: str, query: Optional[Mapping[str, Any]] = None) -> APIResponse:
        """GET a path with optional query parameters."""
        return await self.request("GET", path, query=query)

    async def put(self, path: str, body: Optional[Mapping[str, Any]] = None) -> APIResponse:
        """PUT a path with an optional JSON body."""
        return await self.request("PUT", path, body=body)

    async def delete(self, path: str, query: Optional[Mapping[str, Any]] = None) -> APIResponse:
        """DELETE a path with optional query parameters."""
        return await self.request("DELETE", path, query=query)

    async def check(
        self,
        path: str,
        query: Optional[Mapping[str, Any]] = None,
    ) -> MembershipCheck:
        """
        GET a path and classify the result instead of raising API errors.

        Transport failures are still raised.

        Args:
            path: Path relative to the API base URL
            query: Query parameters

        Returns:
            MembershipCheck with outcome found, not_found or error
        """
        try:
            response = await self.get(path, query)
        except NotFoundError as e:
            return MembershipCheck(
                outcome=CheckOutcome.NOT_FOUND, status_code=e.status_code, error=e
            )
        except OrgHubAPIError as e:
            return MembershipCheck(
                outcome=CheckOutcome.ERROR, status_code=e.status_code, error=e
            )
        return MembershipCheck(outcome=CheckOutcome.FOUND, status_code=response.status_code)

    async def close(self) -> None:
        """Close the underlying httpx client if this executor created it."""
        if self._owns_client:
            await self._client.aclose()
