"""Product document stored by the catalog.

Business rules implemented:
- Identifier, ``created_at`` and ``updated_at`` are assigned by the store
  (inherited from ``BaseModel``).
- ``quantity_on_hand`` is never negative (``PositiveIntegerField``).
- ``price`` is never negative (check constraint).

Business fields are nullable: a full replace writes whatever the caller
sent, blanks and nulls included.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class Product(BaseModel):
    """Product catalog document."""

    name = models.CharField(max_length=255, null=True, blank=True)  # noqa: DJ001
    style = models.CharField(max_length=255, null=True, blank=True)  # noqa: DJ001
    upc = models.CharField(max_length=25, null=True, blank=True)  # noqa: DJ001
    quantity_on_hand = models.PositiveIntegerField(null=True, blank=True)
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
    )

    class Meta:
        db_table = "products"
        indexes = [
            models.Index(fields=["style"], name="products_style_idx"),
            models.Index(fields=["name"], name="products_name_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gte=0) | models.Q(price__isnull=True),
                name="products_price_non_negative",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.style})"
