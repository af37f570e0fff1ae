"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that domain-specific
repository interfaces extend.  Service-layer code depends on this
abstraction, never on Django ORM directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` is the persistent entity managed by the
    repository.  Implementations hold no business rules: failures are
    either ``None`` (not found) or the storage layer's own exceptions.
    """

    @abstractmethod
    def find_by_id(self, id: int) -> Optional[T]:
        """Retrieve an entity by primary key, or ``None``."""

    @abstractmethod
    def create(self, entity: T) -> T:
        """Insert a new entity; the store assigns its primary key."""

    @abstractmethod
    def update(self, entity: T) -> T:
        """Write an entity that already carries a primary key."""

    @abstractmethod
    def delete(self, entity: T) -> T:
        """Remove an entity identified by its primary key."""
