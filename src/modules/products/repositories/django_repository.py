"""Django ORM implementation of the Product repository."""

from __future__ import annotations

from typing import AsyncIterator, Optional

from modules.core.repositories.django_repository import DjangoRepository
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository


class ProductDjangoRepository(DjangoRepository[Product], IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    model = Product

    def find_by_style(self, style: str) -> AsyncIterator[Product]:
        return self.find_all({"style": style})

    async def find_first_by_name(self, name: str) -> Optional[Product]:
        return await self.find_first_by(name=name)
