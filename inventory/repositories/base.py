"""Base repository interface."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar, List

from inventory.models.domain import Entity

T = TypeVar('T', bound=Entity)


class Repository(ABC, Generic[T]):
    """
    Base repository interface.

    Abstracts data access over entities keyed by an integer id.
    Lookups of missing ids raise ``NotFoundError`` instead of returning None.
    """

    @abstractmethod
    def add(self, item: T) -> T:
        """Add a new entity. Raises DuplicateKeyError if the id exists."""
        pass

    @abstractmethod
    def get_by_id(self, id: int) -> T:
        """Get entity by ID. Raises NotFoundError if absent."""
        pass

    @abstractmethod
    def remove(self, id: int) -> T:
        """Remove entity by ID and return it. Raises NotFoundError if absent."""
        pass

    @abstractmethod
    def list_all(self) -> List[T]:
        """List all entities as an independent snapshot."""
        pass
