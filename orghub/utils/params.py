"""
Argument validation and option normalization.
"""

from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Union

from ..exceptions import ValidationError


def assert_presence_of(*values: Any) -> None:
    """
    Ensure every required identifier is a non-empty string.

    Args:
        *values: Identifiers in positional order

    Raises:
        ValidationError: Naming the position of the first missing value

    Example:
        ```python
        assert_presence_of(org_name, member_name)
        ```
    """
    for position, value in enumerate(values, start=1):
        if not isinstance(value, str) or not value.strip():
            raise ValidationError(
                f"Required argument #{position} is missing or empty (got {value!r})"
            )


def normalize_key(key: Any) -> str:
    """Canonical string form of an option key."""
    if isinstance(key, Enum):
        return str(key.value)
    return str(key)


def normalize_params(params: Optional[Mapping[Any, Any]]) -> Dict[str, Any]:
    """
    Copy an options mapping with every key in canonical string form.

    The caller's mapping is never modified.

    Args:
        params: Options mapping, may be None

    Returns:
        New dict keyed by strings
    """
    if not params:
        return {}
    return {normalize_key(key): value for key, value in params.items()}


def render_query_value(value: Any) -> Union[str, List[str]]:
    """
    Render a query parameter value the way the API expects it.

    Lists and tuples stay lists so httpx sends one key per element.
    """
    if isinstance(value, (list, tuple)):
        return [render_query_value(item) for item in value]
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)
