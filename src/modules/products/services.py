"""Product service layer (Use Cases).

Mediates between ``ProductDTO`` and the injected ``IProductRepository``.
Every operation is a coroutine (or an async generator for streams) and
does nothing until awaited / iterated.

Absence is an empty result: operations on a missing product return
``None`` and never create anything.  Store failures propagate as
``StoreFailure``.

``replace`` and ``merge`` read, change in memory, then write the whole
document without any locking: two concurrent updates of the same product
are last-writer-wins.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, AsyncIterator, Optional

import structlog

from modules.core.merge import merge_fields, replace_fields
from modules.products.mappers import dto_to_product, product_to_dto

if TYPE_CHECKING:
    from modules.products.dtos import ProductDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)

TEXT_FIELDS = ("name", "style", "upc")
VALUE_FIELDS = ("quantity_on_hand", "price")
MUTABLE_FIELDS = TEXT_FIELDS + VALUE_FIELDS


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    async def list_all(self, style: Optional[str] = None) -> AsyncIterator[ProductDTO]:
        """Stream every product, or only those whose style equals ``style``."""
        if style is not None:
            async for dto in self.find_by_style(style):
                yield dto
            return

        async for product in self._repo.find_all():
            yield product_to_dto(product)

    async def find_by_style(self, style: str) -> AsyncIterator[ProductDTO]:
        """Stream products with an exact (case-sensitive) style match."""
        async for product in self._repo.find_by_style(style):
            yield product_to_dto(product)

    async def get_by_id(self, id: str) -> Optional[ProductDTO]:
        product = await self._repo.find_by_id(id)
        if product is None:
            return None
        return product_to_dto(product)

    async def find_first_by_name(self, name: str) -> Optional[ProductDTO]:
        """Return one product with this exact name; duplicates collapse to one."""
        product = await self._repo.find_first_by_name(name)
        if product is None:
            return None
        return product_to_dto(product)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    async def create(self, dto: ProductDTO) -> ProductDTO:
        """Persist a new product; the store assigns id and timestamps."""
        product = dto_to_product(dto.model_copy(update={"id": None}))
        product = await self._repo.save(product)
        logger.info("product.created", product_id=str(product.id), style=product.style)
        return product_to_dto(product)

    async def replace(self, id: str, dto: ProductDTO) -> Optional[ProductDTO]:
        """Overwrite every mutable field, blanks and nulls included."""
        product = await self._repo.find_by_id(id)
        if product is None:
            logger.info("product.replace_missing", product_id=id)
            return None

        replace_fields(product, dto, MUTABLE_FIELDS)
        product = await self._repo.save(product)
        logger.info("product.replaced", product_id=id)
        return product_to_dto(product)

    async def merge(self, id: str, dto: ProductDTO) -> Optional[ProductDTO]:
        """Overwrite only the fields ``dto`` actually supplies."""
        product = await self._repo.find_by_id(id)
        if product is None:
            logger.info("product.merge_missing", product_id=id)
            return None

        merge_fields(product, dto, text_fields=TEXT_FIELDS, value_fields=VALUE_FIELDS)
        product = await self._repo.save(product)
        logger.info("product.merged", product_id=id)
        return product_to_dto(product)

    async def delete_by_id(self, id: str) -> None:
        """Delete unconditionally; existence is checked by the caller if needed."""
        await self._repo.delete_by_id(id)
        logger.info("product.delete_requested", product_id=id)
