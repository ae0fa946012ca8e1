"""
Directory store interface (repository pattern).

Services depend only on this interface, so the in-memory store can be swapped
for a database-backed one without touching business logic.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable, Optional, TypeVar

Record = TypeVar("Record")
Predicate = Callable[[Any], bool]


class Collection(str, Enum):
    USERS = "users"
    EVENTS = "events"
    CATEGORIES = "categories"
    BOOKINGS = "bookings"
    NOTIFICATIONS = "notifications"


class DirectoryStore(ABC):
    """
    Interface for record storage.

    Records are immutable; `update_by_id` stores a patched copy and returns it.
    All mutations are visible to subsequent reads.
    """

    @abstractmethod
    def next_id(self, collection: Collection) -> str:
        """Return a fresh id for a record in `collection`."""
        ...

    @abstractmethod
    def insert(self, collection: Collection, record: Record) -> Record:
        """Store `record` under its `id`. Raises ValueError if the id is taken."""
        ...

    @abstractmethod
    def find_by_id(self, collection: Collection, record_id: str) -> Optional[Any]:
        """Return the record with `record_id`, or None if not found."""
        ...

    @abstractmethod
    def find_all(self, collection: Collection, predicate: Optional[Predicate] = None) -> list:
        """Return records matching `predicate` (all if None), in insertion order."""
        ...

    @abstractmethod
    def update_by_id(self, collection: Collection, record_id: str, patch: dict) -> Optional[Any]:
        """Apply `patch` to the record and return the new version, or None if not found."""
        ...

    @abstractmethod
    def remove_by_id(self, collection: Collection, record_id: str) -> bool:
        """Remove the record. Returns False if it did not exist."""
        ...
