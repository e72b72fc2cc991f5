"""Product request handler.

Bridges HTTP requests to ``ProductService``:
decode → validate → invoke service → respond.  An empty service result
becomes ``ProductNotFound``; invalid input becomes ``ValidationFailed``
before the service is ever called.
"""

from __future__ import annotations

from django.http import HttpRequest, HttpResponse, JsonResponse, StreamingHttpResponse

from modules.core.handlers import ResourceHandler
from modules.products.dtos import ProductDTO
from modules.products.exceptions import ProductNotFound
from modules.products.serializers import ProductValidator
from modules.products.services import ProductService


class ProductHandler(ResourceHandler[ProductDTO]):
    dto_class = ProductDTO
    validator_class = ProductValidator
    detail_url_name = "product-detail"

    def __init__(self, service: ProductService) -> None:
        self._service = service

    async def list(self, request: HttpRequest) -> StreamingHttpResponse:
        """GET /api/v1/products/ (optional ``?style=``)"""
        style = request.GET.get("style")
        if style is not None:
            stream = self._service.list_all(style)
        else:
            stream = self._service.list_all()
        return self.ok_many(stream)

    async def get_by_id(self, request: HttpRequest, pk: str) -> JsonResponse:
        """GET /api/v1/products/{pk}/"""
        dto = await self._service.get_by_id(pk)
        if dto is None:
            raise ProductNotFound(f"Product {pk} not found.")
        return self.ok(dto)

    async def create(self, request: HttpRequest) -> HttpResponse:
        """POST /api/v1/products/"""
        dto = self.read_valid_body(request)
        saved = await self._service.create(dto)
        return self.created(saved)

    async def replace_by_id(self, request: HttpRequest, pk: str) -> HttpResponse:
        """PUT /api/v1/products/{pk}/"""
        dto = self.read_valid_body(request)
        if await self._service.replace(pk, dto) is None:
            raise ProductNotFound(f"Product {pk} not found.")
        return self.no_content()

    async def merge_by_id(self, request: HttpRequest, pk: str) -> HttpResponse:
        """PATCH /api/v1/products/{pk}/"""
        dto = self.read_valid_body(request)
        if await self._service.merge(pk, dto) is None:
            raise ProductNotFound(f"Product {pk} not found.")
        return self.no_content()

    async def delete_by_id(self, request: HttpRequest, pk: str) -> HttpResponse:
        """DELETE /api/v1/products/{pk}/"""
        if await self._service.get_by_id(pk) is None:
            raise ProductNotFound(f"Product {pk} not found.")
        await self._service.delete_by_id(pk)
        return self.no_content()
