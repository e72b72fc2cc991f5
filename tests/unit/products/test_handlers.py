"""Unit tests for ProductHandler with a mocked ProductService.

Covers:
- list: streamed JSON array, with and without ``?style=``.
- get_by_id: 200 body / ProductNotFound.
- create: 201 + Location, validation gate runs before the service.
- replace_by_id / merge_by_id: 204 / ProductNotFound / ValidationFailed.
- delete_by_id: existence check first.
"""

from __future__ import annotations

import json
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest
from django.test import RequestFactory

from modules.core.exceptions import StoreFailure, ValidationFailed
from modules.products.dtos import ProductDTO
from modules.products.exceptions import ProductNotFound
from modules.products.handlers import ProductHandler
from modules.products.services import ProductService

pytestmark = [pytest.mark.unit, pytest.mark.asyncio]

PRODUCT_ID = "01890a5d-ac96-774b-bcce-b302099a8057"


@pytest.fixture(autouse=True)
def _use_db():
    """Handler tests mock the service; no database needed."""


@pytest.fixture()
def service():
    mock = MagicMock(spec=ProductService)
    for name in ("get_by_id", "create", "replace", "merge", "delete_by_id"):
        setattr(mock, name, AsyncMock())
    return mock


@pytest.fixture()
def handler(service):
    return ProductHandler(service)


@pytest.fixture()
def rf():
    return RequestFactory()


def _dto(**overrides) -> ProductDTO:
    defaults = {
        "id": PRODUCT_ID,
        "name": "Space Dust",
        "style": "IPA",
        "upc": "123123",
        "quantity_on_hand": 12,
        "price": Decimal("10.00"),
    }
    defaults.update(overrides)
    return ProductDTO(**defaults)


async def _stream(*dtos):
    for dto in dtos:
        yield dto


async def _read_stream(response) -> object:
    return json.loads(b"".join([chunk async for chunk in response.streaming_content]))


def _json(rf, method: str, path: str, body) -> object:
    return getattr(rf, method)(path, data=json.dumps(body), content_type="application/json")


# ===========================================================================
# list
# ===========================================================================


class TestList:
    async def test_returns_json_array(self, handler, service, rf):
        service.list_all.return_value = _stream(_dto(), _dto(id="other", name="Crank"))

        response = await handler.list(rf.get("/api/v1/products/"))

        assert response.status_code == 200
        assert response.streaming
        body = await _read_stream(response)
        assert [item["name"] for item in body] == ["Space Dust", "Crank"]
        assert body[0]["price"] == "10.00"
        service.list_all.assert_called_once_with()

    async def test_passes_style_filter(self, handler, service, rf):
        service.list_all.return_value = _stream()

        response = await handler.list(rf.get("/api/v1/products/", {"style": "IPA"}))

        assert await _read_stream(response) == []
        service.list_all.assert_called_once_with("IPA")

    async def test_stream_is_consumed_lazily(self, handler, service, rf):
        pulled = []

        async def _tracked():
            pulled.append("first")
            yield _dto()

        service.list_all.return_value = _tracked()

        response = await handler.list(rf.get("/api/v1/products/"))

        assert pulled == []
        assert len(await _read_stream(response)) == 1
        assert pulled == ["first"]

    async def test_store_failure_surfaces_while_streaming(self, handler, service, rf):
        async def _failing():
            yield _dto()
            raise StoreFailure("down")

        service.list_all.return_value = _failing()
        response = await handler.list(rf.get("/api/v1/products/"))

        with pytest.raises(StoreFailure):
            await _read_stream(response)


# ===========================================================================
# get_by_id
# ===========================================================================


class TestGetById:
    async def test_found(self, handler, service, rf):
        service.get_by_id.return_value = _dto()

        response = await handler.get_by_id(rf.get("/"), PRODUCT_ID)

        assert response.status_code == 200
        assert json.loads(response.content)["id"] == PRODUCT_ID

    async def test_missing_raises_not_found(self, handler, service, rf):
        service.get_by_id.return_value = None

        with pytest.raises(ProductNotFound):
            await handler.get_by_id(rf.get("/"), "does-not-exist")


# ===========================================================================
# create
# ===========================================================================


class TestCreate:
    async def test_returns_201_with_location(self, handler, service, rf):
        service.create.return_value = _dto()
        request = _json(rf, "post", "/api/v1/products/", {"name": "Space Dust", "style": "IPA"})

        response = await handler.create(request)

        assert response.status_code == 201
        assert response["Location"] == f"/api/v1/products/{PRODUCT_ID}/"
        assert response.content == b""
        sent = service.create.await_args.args[0]
        assert sent.name == "Space Dust"

    async def test_service_receives_cleaned_values(self, handler, service, rf):
        service.create.return_value = _dto()
        body = {"name": "  Space Dust  ", "style": " IPA", "price": "10.5"}

        await handler.create(_json(rf, "post", "/api/v1/products/", body))

        sent = service.create.await_args.args[0]
        assert sent.name == "Space Dust"
        assert sent.style == "IPA"
        assert sent.price == Decimal("10.50")
        assert sent.upc is None

    async def test_invalid_body_never_reaches_service(self, handler, service, rf):
        request = _json(rf, "post", "/api/v1/products/", {"name": "", "price": "-1"})

        with pytest.raises(ValidationFailed) as exc_info:
            await handler.create(request)

        assert {error.attr for error in exc_info.value.errors} == {"name", "price"}
        service.create.assert_not_awaited()

    async def test_wrong_json_type_is_a_validation_error(self, handler, service, rf):
        request = _json(rf, "post", "/api/v1/products/", {"name": "Space Dust", "quantity_on_hand": "many"})

        with pytest.raises(ValidationFailed) as exc_info:
            await handler.create(request)

        assert exc_info.value.errors[0].attr == "quantity_on_hand"
        service.create.assert_not_awaited()

    async def test_malformed_json_is_a_validation_error(self, handler, service, rf):
        request = rf.post("/api/v1/products/", data="{not json", content_type="application/json")

        with pytest.raises(ValidationFailed):
            await handler.create(request)

        service.create.assert_not_awaited()


# ===========================================================================
# replace_by_id / merge_by_id
# ===========================================================================


class TestReplaceById:
    async def test_returns_204(self, handler, service, rf):
        service.replace.return_value = _dto()
        request = _json(rf, "put", "/", {"name": "Galaxy Cat"})

        response = await handler.replace_by_id(request, PRODUCT_ID)

        assert response.status_code == 204
        assert service.replace.await_args.args[0] == PRODUCT_ID

    async def test_missing_raises_not_found(self, handler, service, rf):
        service.replace.return_value = None

        with pytest.raises(ProductNotFound):
            await handler.replace_by_id(_json(rf, "put", "/", {"name": "Galaxy Cat"}), "does-not-exist")

    async def test_invalid_body_raises_before_lookup(self, handler, service, rf):
        with pytest.raises(ValidationFailed):
            await handler.replace_by_id(_json(rf, "put", "/", {"name": "ab"}), PRODUCT_ID)

        service.replace.assert_not_awaited()


class TestMergeById:
    async def test_returns_204(self, handler, service, rf):
        service.merge.return_value = _dto(name="New Name")

        response = await handler.merge_by_id(_json(rf, "patch", "/", {"name": "New Name"}), PRODUCT_ID)

        assert response.status_code == 204
        sent = service.merge.await_args.args[1]
        assert sent.name == "New Name"
        assert sent.style is None

    async def test_missing_raises_not_found(self, handler, service, rf):
        service.merge.return_value = None

        with pytest.raises(ProductNotFound):
            await handler.merge_by_id(_json(rf, "patch", "/", {"name": "New Name"}), "does-not-exist")


# ===========================================================================
# delete_by_id
# ===========================================================================


class TestDeleteById:
    async def test_existing_returns_204(self, handler, service, rf):
        service.get_by_id.return_value = _dto()

        response = await handler.delete_by_id(rf.delete("/"), PRODUCT_ID)

        assert response.status_code == 204
        service.delete_by_id.assert_awaited_once_with(PRODUCT_ID)

    async def test_missing_raises_and_skips_delete(self, handler, service, rf):
        service.get_by_id.return_value = None

        with pytest.raises(ProductNotFound):
            await handler.delete_by_id(rf.delete("/"), "does-not-exist")

        service.delete_by_id.assert_not_awaited()
