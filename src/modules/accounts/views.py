"""Account HTTP views, delegating every method to ``AccountHandler``."""

from __future__ import annotations

from django.http import HttpRequest, HttpResponse
from django.views import View

from modules.accounts.handlers import AccountHandler
from modules.accounts.repositories.django_repository import AccountDjangoRepository
from modules.accounts.services import AccountService

account_handler = AccountHandler(
    service=AccountService(repository=AccountDjangoRepository())
)


class AccountCollectionView(View):
    resource_handler = account_handler

    async def get(self, request: HttpRequest) -> HttpResponse:
        return await self.resource_handler.list(request)

    async def post(self, request: HttpRequest) -> HttpResponse:
        return await self.resource_handler.create(request)


class AccountDetailView(View):
    resource_handler = account_handler

    async def get(self, request: HttpRequest, pk: str) -> HttpResponse:
        return await self.resource_handler.get_by_id(request, pk)

    async def put(self, request: HttpRequest, pk: str) -> HttpResponse:
        return await self.resource_handler.replace_by_id(request, pk)

    async def patch(self, request: HttpRequest, pk: str) -> HttpResponse:
        return await self.resource_handler.merge_by_id(request, pk)

    async def delete(self, request: HttpRequest, pk: str) -> HttpResponse:
        return await self.resource_handler.delete_by_id(request, pk)
