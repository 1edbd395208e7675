"""
OrgHub exceptions.

Local validation failures and errors translated from API responses.
"""

from typing import TYPE_CHECKING, Any, Dict, Optional, Type

if TYPE_CHECKING:
    from .utils.http import APIResponse


class OrgHubError(Exception):
    """Base class for all OrgHub errors."""


class ValidationError(OrgHubError, ValueError):
    """A required argument is missing or empty. Raised before any request is sent."""


class TransportError(OrgHubError):
    """The request never produced an HTTP response (DNS, connect, timeout...)."""


class OrgHubAPIError(OrgHubError):
    """
    The API answered with a non-success status.

    Attributes:
        status_code: HTTP status of the response
        message: Error message reported by the API (or the reason phrase)
        body: Decoded response body
        documentation_url: Link to the API docs, when the API provides one
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Any = None,
        documentation_url: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body
        self.documentation_url = documentation_url

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"{self.status_code}: {self.message}"


class BadRequestError(OrgHubAPIError):
    """400 Bad Request."""


class AuthenticationError(OrgHubAPIError):
    """401 Unauthorized - missing or invalid token."""


class ForbiddenError(OrgHubAPIError):
    """403 Forbidden - token lacks the required scope or access."""


class NotFoundError(OrgHubAPIError):
    """404 Not Found."""


class UnprocessableEntityError(OrgHubAPIError):
    """422 Unprocessable Entity."""


class ServerError(OrgHubAPIError):
    """5xx - the API failed to handle the request."""


STATUS_ERRORS: Dict[int, Type[OrgHubAPIError]] = {
    400: BadRequestError,
    401: AuthenticationError,
    403: ForbiddenError,
    404: NotFoundError,
    422: UnprocessableEntityError,
}


def error_for_status(response: "APIResponse") -> OrgHubAPIError:
    """
    Build the exception matching a failed response.

    Args:
        response: Response with a status code >= 400

    Returns:
        OrgHubAPIError subclass instance (not raised)
    """
    status = response.status_code
    if status in STATUS_ERRORS:
        error_class = STATUS_ERRORS[status]
    elif status >= 500:
        error_class = ServerError
    else:
        error_class = OrgHubAPIError

    message = response.reason_phrase or "Request failed"
    documentation_url = None
    if isinstance(response.body, dict):
        message = response.body.get("message") or message
        documentation_url = response.body.get("documentation_url")
    elif isinstance(response.body, str) and response.body.strip():
        message = response.body.strip()

    return error_class(
        message,
        status_code=status,
        body=response.body,
        documentation_url=documentation_url,
    )
