"""Product repository interface.

Extends ``IRepository[Product]`` with the look-ups the catalog needs:
exact-match style filtering and first-match lookup by name.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, AsyncIterator, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product document."""

    @abstractmethod
    def find_by_style(self, style: str) -> AsyncIterator[Product]:
        """Stream products whose style equals ``style`` exactly."""

    @abstractmethod
    async def find_first_by_name(self, name: str) -> Optional[Product]:
        """Return one product named ``name``.

        Names are not unique: with duplicates the first one in store order
        is returned, never an error.
        """
