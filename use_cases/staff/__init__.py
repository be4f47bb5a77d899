"""Hospital staff records."""

from .models import Role, Staff, UnavailablePeriod

__all__ = [
    "Role",
    "Staff",
    "UnavailablePeriod",
]
