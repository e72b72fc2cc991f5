"""Product representation exchanged at the transport boundary.

Framework-agnostic data transfer object using Pydantic v2.  Every field is
optional and carries no business constraints: decoding a request body only
checks JSON types.  Field rules are applied separately by
``ProductValidator`` (see ``serializers.py``).
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel


class ProductDTO(BaseModel):
    """Product as seen by API clients."""

    id: str | None = None
    name: str | None = None
    style: str | None = None
    upc: str | None = None
    quantity_on_hand: int | None = None
    price: Decimal | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
