"""Django ORM implementation of the generic async repository.

Satisfies ``IRepository`` through Django's async QuerySet API
(``afirst``, ``asave``, ``adelete``, ``async for``).
Error handling follows the Null Object pattern: look-ups return ``None``
for unknown or malformed identifiers.  ``DatabaseError`` is re-raised as
``StoreFailure`` so the API layer can report it without knowing the ORM.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, AsyncIterator, Dict, Iterator, Optional, TypeVar

import structlog
from django.core.exceptions import ValidationError
from django.db import DatabaseError, models

from modules.core.exceptions import StoreFailure
from modules.core.repositories.interfaces import IRepository

logger = structlog.get_logger(__name__)

M = TypeVar("M", bound=models.Model)


@contextmanager
def store_errors(operation: str, **context: Any) -> Iterator[None]:
    """Translate ``DatabaseError`` raised inside the block into ``StoreFailure``."""
    try:
        yield
    except DatabaseError as exc:
        logger.error("store.failure", operation=operation, error=str(exc), **context)
        raise StoreFailure(f"Store operation '{operation}' failed.") from exc


class DjangoRepository(IRepository[M]):
    """Async repository backed by a single Django model.

    Subclasses set ``model`` and add their own look-ups.
    """

    model: type[M]

    @property
    def label(self) -> str:
        return self.model._meta.model_name

    async def find_by_id(self, id: str) -> Optional[M]:
        """Retrieve a document by primary key.

        Returns ``None`` for non-existent or invalid IDs (e.g. malformed UUID).
        """
        try:
            with store_errors(f"{self.label}.find_by_id", id=id):
                return await self.model.objects.filter(id=id).afirst()
        except (ValueError, ValidationError):
            return None

    async def find_all(
        self, filters: Optional[Dict[str, Any]] = None
    ) -> AsyncIterator[M]:
        """Stream documents lazily; ``filters`` are exact Django look-ups.

        Examples of valid filters::

            {"style": "IPA"}
            {"name": "Space Dust"}
        """
        queryset = self.model.objects.all()
        if filters:
            queryset = queryset.filter(**filters)
        with store_errors(f"{self.label}.find_all", filters=filters):
            async for entity in queryset:
                yield entity

    async def find_first_by(self, **lookup: Any) -> Optional[M]:
        with store_errors(f"{self.label}.find_first_by", **lookup):
            return await self.model.objects.filter(**lookup).afirst()

    async def save(self, entity: M) -> M:
        """Persist (create or update) a document."""
        is_new = entity._state.adding
        with store_errors(f"{self.label}.save", id=str(entity.pk)):
            await entity.asave()
        logger.info(
            f"{self.label}.saved",
            **{f"{self.label}_id": str(entity.pk)},
            is_new=is_new,
        )
        return entity

    async def delete_by_id(self, id: str) -> None:
        """Hard-delete a document by ID; unknown or malformed IDs are a no-op."""
        try:
            with store_errors(f"{self.label}.delete_by_id", id=id):
                deleted, _ = await self.model.objects.filter(id=id).adelete()
        except (ValueError, ValidationError):
            return
        logger.info(f"{self.label}.deleted", **{f"{self.label}_id": id}, deleted=deleted)
