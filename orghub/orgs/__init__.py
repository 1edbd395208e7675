"""
OrgHub organizations module.

Handles organization membership endpoints.
"""

from .members import MembershipManager
from .models import MembershipQuery

__all__ = [
    "MembershipManager",
    "MembershipQuery",
]
