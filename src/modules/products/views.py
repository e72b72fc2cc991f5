"""Product HTTP views.

Thin async class-based views: each HTTP method delegates to the shared
``ProductHandler``.  Handler, service and repository are stateless, so one
instance of each serves every request.
"""

from __future__ import annotations

from django.http import HttpRequest, HttpResponse
from django.views import View

from modules.products.handlers import ProductHandler
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService

product_handler = ProductHandler(
    service=ProductService(repository=ProductDjangoRepository())
)


class ProductCollectionView(View):
    """/api/v1/products/"""

    resource_handler = product_handler

    async def get(self, request: HttpRequest) -> HttpResponse:
        return await self.resource_handler.list(request)

    async def post(self, request: HttpRequest) -> HttpResponse:
        return await self.resource_handler.create(request)


class ProductDetailView(View):
    """/api/v1/products/{pk}/"""

    resource_handler = product_handler

    async def get(self, request: HttpRequest, pk: str) -> HttpResponse:
        return await self.resource_handler.get_by_id(request, pk)

    async def put(self, request: HttpRequest, pk: str) -> HttpResponse:
        return await self.resource_handler.replace_by_id(request, pk)

    async def patch(self, request: HttpRequest, pk: str) -> HttpResponse:
        return await self.resource_handler.merge_by_id(request, pk)

    async def delete(self, request: HttpRequest, pk: str) -> HttpResponse:
        return await self.resource_handler.delete_by_id(request, pk)
