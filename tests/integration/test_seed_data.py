"""Integration tests for the ``seed_data`` management command."""

from io import StringIO

import pytest
from django.core.management import call_command

from modules.accounts.models import Account
from modules.core.management.commands.seed_data import ACCOUNTS, CATALOG
from modules.products.models import Product

pytestmark = pytest.mark.integration


def test_seed_creates_catalog_and_accounts():
    out = StringIO()
    call_command("seed_data", stdout=out)

    assert Product.objects.count() == len(CATALOG)
    assert Account.objects.count() == len(ACCOUNTS)
    assert f"products={len(CATALOG)}" in out.getvalue()

    space_dust = Product.objects.get(name="Space Dust")
    assert space_dust.style == "IPA"
    assert space_dust.upc == "123123"
    assert space_dust.quantity_on_hand == 12


def test_seed_is_idempotent():
    call_command("seed_data", stdout=StringIO())
    out = StringIO()
    call_command("seed_data", stdout=out)

    assert Product.objects.count() == len(CATALOG)
    assert Account.objects.count() == len(ACCOUNTS)
    assert "products=0, accounts=0" in out.getvalue()


def test_seeded_products_visible_through_api(api_client, read_json):
    call_command("seed_data", stdout=StringIO())

    response = api_client.get("/api/v1/products/", {"style": "IPA"})

    assert {item["name"] for item in read_json(response)} == {"Space Dust", "Sunshine City"}
