"""
Domain Layer Base Classes.

The domain layer contains pure business logic with no external dependencies.
This makes business rules:
- Easy to test (no mocking needed)
- Reusable across different hosts
- Clear and self-documenting

Example Usage:
    class AppointmentSelectionEngine(DomainService):
        def execute(self, appointments, selected_date, mode) -> SelectionResult:
            # Pure business logic here
            ...
"""

from abc import ABC, abstractmethod
from datetime import date, datetime, tzinfo
from typing import Any, Dict, List, Optional

_now = datetime.now


class DomainError(Exception):
    """Base class for errors raised by the domain layer."""


class PreconditionViolation(DomainError, ValueError):
    """
    Raised when input data breaks a model's construction rules.

    Raised at the construction/deserialization boundary, never from
    inside a domain service.
    """

    def __init__(self, entity: str, message: str):
        self.entity = entity
        self.message = message
        super().__init__(f"Invalid {entity}: {message}")


class DomainService(ABC):
    """
    Abstract base class for domain services.

    Domain services contain business logic that doesn't belong to a single entity.

    Key principles:
    - No I/O operations (database, network, file)
    - All dependencies passed as parameters
    - Return domain objects, not DTOs
    """

    @abstractmethod
    def execute(self, *args, **kwargs) -> Any:
        """
        Execute the domain service operation.

        Implementation should contain pure business logic only.
        """
        pass


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================

def to_calendar_time(moment: datetime, zone: Optional[tzinfo] = None) -> datetime:
    """
    Express a timestamp as an aware datetime in the given calendar zone.

    Naive timestamps are wall-clock time in that zone. With no zone the
    device's local zone is used.
    """
    if zone is None:
        return moment.astimezone()
    if moment.tzinfo is None:
        return moment.replace(tzinfo=zone)
    return moment.astimezone(zone)


def calendar_day(value: date, zone: Optional[tzinfo] = None) -> date:
    """
    Drop any time-of-day from a date or datetime.

    Aware datetimes are first converted into `zone` (device local when None);
    naive ones are already wall-clock time there.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = to_calendar_time(value, zone)
        return value.date()
    return value


def today(zone: Optional[tzinfo] = None) -> date:
    """The current calendar day in `zone`, or on the device clock when None."""
    return _now(zone).date()


def format_long_date(day: date) -> str:
    """Format a day as 'April 5, 2025'."""
    return f"{day:%B} {day.day}, {day:%Y}"


def describe_errors(errors: List[Dict[str, Any]]) -> str:
    """Flatten pydantic-style error dicts into 'field: message; ...'."""
    parts = []
    for error in errors:
        location = ".".join(str(part) for part in error.get("loc", ())) or "document"
        parts.append(f"{location}: {error.get('msg', 'invalid')}")
    return "; ".join(parts)
