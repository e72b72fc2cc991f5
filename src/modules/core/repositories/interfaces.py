"""Generic async repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on Django ORM directly.

Every operation is a coroutine (or an async generator for streams), so a
store call is always a suspension point for the caller.  Absence is
signalled with ``None``, never with an exception.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, AsyncIterator, Dict, Generic, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the stored document managed by the
    repository (e.g. ``Account``, ``Product``).
    """

    @abstractmethod
    async def find_by_id(self, id: str) -> Optional[T]:
        """Retrieve a document by its identifier, ``None`` if absent."""

    @abstractmethod
    def find_all(self, filters: Optional[Dict[str, Any]] = None) -> AsyncIterator[T]:
        """Stream documents, optionally restricted by exact-match filters."""

    @abstractmethod
    async def find_first_by(self, **lookup: Any) -> Optional[T]:
        """Return one document matching ``lookup`` (store order), ``None`` if none."""

    @abstractmethod
    async def save(self, entity: T) -> T:
        """Persist (insert or update) a document."""

    @abstractmethod
    async def delete_by_id(self, id: str) -> None:
        """Remove a document by identifier; a missing one is not an error."""
