"""Abstract base class for People API clients."""

from abc import ABC, abstractmethod
from typing import List, Mapping, Optional

from trippin.models import Person


class BasePeopleClient(ABC):
    """Abstract base class for people API clients."""

    @abstractmethod
    async def search(self, filter: Optional[str] = None) -> List[Person]:
        """Search people with an optional OData filter expression."""

    @abstractmethod
    async def get_by_user_name(self, user_name: str) -> Person:
        """Get a single person by user name."""

    @abstractmethod
    async def update_user_field(
        self, user_name: str, fields: Mapping[str, str]
    ) -> bool:
        """Update one or more fields of a person."""
