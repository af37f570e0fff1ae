"""Customer repository interface.

Extends ``IRepository[Customer]`` with the look-ups used by the listing
endpoints and by the unique-email rule.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.customers.models import Customer


class ICustomerRepository(IRepository["Customer"]):
    """Repository contract for the Customer aggregate."""

    @abstractmethod
    def find_all_ordered_by_name(self) -> List[Customer]:
        """All customers sorted by name."""

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[Customer]:
        """First customer with exactly this email address."""

    @abstractmethod
    def find_all_by_name(self, name: str) -> List[Customer]:
        """Customers whose name equals ``name`` exactly."""
