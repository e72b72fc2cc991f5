"""Pure field-by-field mapping between ``Product`` and ``ProductDTO``."""

from __future__ import annotations

from modules.products.dtos import ProductDTO
from modules.products.models import Product


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=str(product.id),
        name=product.name,
        style=product.style,
        upc=product.upc,
        quantity_on_hand=product.quantity_on_hand,
        price=product.price,
        created_at=product.created_at,
        updated_at=product.updated_at,
    )


def dto_to_product(dto: ProductDTO) -> Product:
    """Build an unsaved ``Product``.

    ``id`` is copied only when present; otherwise the store default assigns
    one.  Timestamps are always left to the store.
    """
    product = Product(
        name=dto.name,
        style=dto.style,
        upc=dto.upc,
        quantity_on_hand=dto.quantity_on_hand,
        price=dto.price,
    )
    if dto.id:
        product.id = dto.id
    return product
