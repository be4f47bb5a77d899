"""
Data Layer Base Classes.

The data layer provides the Repository pattern for data access.
Loading appointments (from a device store, a network fetch, fixtures) is the
host's concern; the domain layer only ever sees immutable snapshots.

Key principles:
- Repositories hand out data only
- No business logic in repositories
- Return domain objects, not raw dicts
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, Tuple, TypeVar

# Type variable for entity types
T = TypeVar("T")


class ReadOnlyRepository(ABC, Generic[T]):
    """
    Abstract base class for read-only repositories.

    Type parameter T represents the entity type this repository serves.

    Example:
        class AppointmentRepository(ReadOnlyRepository[Appointment]):
            def get_by_id(self, id: str) -> Optional[Appointment]:
                ...
    """

    @abstractmethod
    def get_by_id(self, id: str) -> Optional[T]:
        """
        Get an entity by its ID.

        Args:
            id: The entity's unique identifier

        Returns:
            The first entity with that ID if found, None otherwise
        """
        pass

    @abstractmethod
    def get_all(self) -> List[T]:
        """Get all entities."""
        pass

    def snapshot(self) -> Tuple[T, ...]:
        """
        Return an immutable snapshot of all entities.

        Default implementation freezes get_all().
        """
        return tuple(self.get_all())
