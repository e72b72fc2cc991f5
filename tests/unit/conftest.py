"""In-memory async repositories for service-level unit tests.

They honour the repository contract (``None`` for absence, exact-match
filters, store-assigned timestamps) without touching the database.
"""

from __future__ import annotations

from typing import Any, AsyncIterator, Dict, Optional

import pytest
from django.utils import timezone

from modules.accounts.repositories.interfaces import IAccountRepository
from modules.products.repositories.interfaces import IProductRepository


class _InMemoryRepository:
    def __init__(self) -> None:
        self.documents: Dict[str, Any] = {}
        self.saved: list[Any] = []

    async def find_by_id(self, id: str) -> Optional[Any]:
        return self.documents.get(str(id))

    async def find_all(self, filters: Optional[Dict[str, Any]] = None) -> AsyncIterator[Any]:
        for document in list(self.documents.values()):
            if all(getattr(document, key) == value for key, value in (filters or {}).items()):
                yield document

    async def find_first_by(self, **lookup: Any) -> Optional[Any]:
        async for document in self.find_all(lookup):
            return document
        return None

    async def save(self, entity: Any) -> Any:
        now = timezone.now()
        if entity.created_at is None:
            entity.created_at = now
        entity.updated_at = now
        self.documents[str(entity.id)] = entity
        self.saved.append(entity)
        return entity

    async def delete_by_id(self, id: str) -> None:
        self.documents.pop(str(id), None)


class InMemoryProductRepository(_InMemoryRepository, IProductRepository):
    def find_by_style(self, style: str) -> AsyncIterator[Any]:
        return self.find_all({"style": style})

    async def find_first_by_name(self, name: str) -> Optional[Any]:
        return await self.find_first_by(name=name)


class InMemoryAccountRepository(_InMemoryRepository, IAccountRepository):
    async def find_first_by_name(self, name: str) -> Optional[Any]:
        return await self.find_first_by(name=name)


@pytest.fixture()
def product_repo():
    return InMemoryProductRepository()


@pytest.fixture()
def account_repo():
    return InMemoryAccountRepository()
