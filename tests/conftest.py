"""Fixtures shared by every test package.

Database access is on by default; pure unit modules switch it off by
overriding ``_use_db`` with a no-op fixture.
"""

import json
from decimal import Decimal

import pytest
from rest_framework.test import APIClient


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient that sends a known X-Request-ID on every request."""
    cid = "catalog-correlation-id"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def read_json():
    """Decode a response body, streamed or not."""

    def _read(response):
        if response.streaming:
            return json.loads(b"".join(response))
        return response.json()

    return _read


@pytest.fixture()
def sample_product():
    """The Space Dust IPA, persisted."""
    from modules.products.models import Product

    return Product.objects.create(
        name="Space Dust",
        style="IPA",
        upc="123123",
        quantity_on_hand=12,
        price=Decimal("10.00"),
    )


@pytest.fixture()
def sample_account():
    from modules.accounts.models import Account

    return Account.objects.create(name="Ana Souza")
