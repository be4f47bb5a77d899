"""
Presentation Layer Base Classes.

The presentation layer turns domain objects into display-ready values.
Drawing them is left to the host UI.

Key principles:
- View models are stateless, immutable values
- No business logic in view models
- Lookups over closed enumerations are total, with no fallback colour
"""

from datetime import date, datetime
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Type, TypeVar

from .domain import format_long_date

E = TypeVar("E", bound=Enum)
V = TypeVar("V")


class BadgeColor(Enum):
    """Standard badge colors."""
    PRIMARY = "primary"
    SECONDARY = "secondary"
    SUCCESS = "success"
    WARNING = "warning"
    DANGER = "danger"
    INFO = "info"


def exhaustive_mapping(enum_cls: Type[E], mapping: Mapping[E, V]) -> Mapping[E, V]:
    """
    Freeze a lookup table keyed by every member of an enumeration.

    Raises:
        ValueError: if a member is missing or a key is not a member

    Call at import time so a new enum member without an entry fails
    the moment the module loads.
    """
    members = set(enum_cls)
    keys = set(mapping)
    missing = members - keys
    unknown = keys - members
    if missing or unknown:
        problems = []
        if missing:
            problems.append("missing " + ", ".join(sorted(m.name for m in missing)))
        if unknown:
            problems.append("unknown " + ", ".join(sorted(repr(k) for k in unknown)))
        raise ValueError(f"{enum_cls.__name__} mapping is not exhaustive: {'; '.join(problems)}")
    return MappingProxyType(dict(mapping))


class TextFormatter:
    """
    Utility class for formatting text in view models.

    Provides consistent formatting for common data types.
    """

    @staticmethod
    def date(day: date) -> str:
        """Format a day as 'April 5, 2025'."""
        return format_long_date(day)

    @staticmethod
    def time_of_day(moment: datetime) -> str:
        """Format a time as '9:00 AM'."""
        hour = moment.hour % 12 or 12
        return f"{hour}:{moment:%M} {'AM' if moment.hour < 12 else 'PM'}"
