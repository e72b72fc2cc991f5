"""Product field rules.

``ProductValidator`` is a plain DRF ``Serializer`` used only for its
validation machinery; it never touches the ORM.  It is applied to every
create / replace / merge body before the service is called, and its cleaned
values (surrounding whitespace trimmed from text) are what the service
receives.
"""

from __future__ import annotations

from decimal import Decimal

from rest_framework import serializers

# Largest value a PositiveIntegerField column holds on every supported backend.
MAX_QUANTITY = 2_147_483_647


class ProductValidator(serializers.Serializer):
    name = serializers.CharField(min_length=3, max_length=255)
    style = serializers.CharField(
        min_length=1, max_length=255, required=False, allow_null=True
    )
    upc = serializers.CharField(
        max_length=25, required=False, allow_null=True, allow_blank=True
    )
    quantity_on_hand = serializers.IntegerField(
        min_value=0, max_value=MAX_QUANTITY, required=False, allow_null=True
    )
    price = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        min_value=Decimal("0"),
        required=False,
        allow_null=True,
    )
