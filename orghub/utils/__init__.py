"""
OrgHub utilities.

HTTP request execution and parameter handling shared by resource managers.
"""

from .http import APIResponse, RequestExecutor
from .params import assert_presence_of, normalize_params

__all__ = [
    "APIResponse",
    "RequestExecutor",
    "assert_presence_of",
    "normalize_params",
]
