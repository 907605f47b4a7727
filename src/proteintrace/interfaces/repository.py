"""Abstract base class for repositories following the Repository Pattern."""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """
    Generic repository interface.

    Reads are abstract; writes are refused unless an implementation
    supports them.
    """

    @abstractmethod
    def get(self, id: str) -> Optional[T]:
        """Retrieve an entity by ID."""
        pass

    @abstractmethod
    def list(self) -> List[str]:
        """List the IDs of all entities."""
        pass

    def create(self, entity: T) -> T:
        """Create a new entity."""
        raise NotImplementedError("Creation not supported")

    def update(self, entity: T) -> T:
        """Update an existing entity."""
        raise NotImplementedError("Updates not supported")

    def delete(self, id: str) -> None:
        """Delete an entity by ID."""
        raise NotImplementedError("Deletion not supported")
