"""
OrgHub organization models.

Pydantic models describing membership requests.
"""

from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, Field

from ..utils.params import normalize_params

PUBLIC_KEY = "public"
FALSE_STRINGS = {"", "0", "false", "no", "off"}


def _flag(value: Any) -> bool:
    """Truthiness of an option value; strings like "false" or "0" are false."""
    if isinstance(value, str):
        return value.strip().lower() not in FALSE_STRINGS
    return bool(value)


class MembershipQuery(BaseModel):
    """
    Options of a membership request, split into the reserved `public` flag
    and the parameters forwarded to the API.

    Example:
        ```python
        query = MembershipQuery.from_params({"public": True, "per_page": 100})
        query.public_only  # True
        query.extra_query  # {"per_page": 100}
        ```
    """

    public_only: bool = False
    extra_query: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_params(cls, params: Optional[Mapping[Any, Any]] = None) -> "MembershipQuery":
        """
        Parse a caller options mapping.

        Keys are normalized to strings first, so enum and string keys are
        interchangeable. `public` is consumed and never forwarded.

        Args:
            params: Caller options, may be None

        Returns:
            MembershipQuery
        """
        options = normalize_params(params)
        public = options.pop(PUBLIC_KEY, False)
        return cls(public_only=_flag(public), extra_query=options)

    def members_path(self, org: str) -> str:
        """Collection path for the selected membership variant."""
        collection = "public_members" if self.public_only else "members"
        return f"/orgs/{org}/{collection}"
