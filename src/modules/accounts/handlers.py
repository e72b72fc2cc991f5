"""Account request handler: decode → validate → invoke service → respond."""

from __future__ import annotations

from django.http import HttpRequest, HttpResponse, JsonResponse, StreamingHttpResponse

from modules.accounts.dtos import AccountDTO
from modules.accounts.exceptions import AccountNotFound
from modules.accounts.serializers import AccountValidator
from modules.accounts.services import AccountService
from modules.core.handlers import ResourceHandler


class AccountHandler(ResourceHandler[AccountDTO]):
    dto_class = AccountDTO
    validator_class = AccountValidator
    detail_url_name = "account-detail"

    def __init__(self, service: AccountService) -> None:
        self._service = service

    async def list(self, request: HttpRequest) -> StreamingHttpResponse:
        """GET /api/v1/accounts/"""
        return self.ok_many(self._service.list_all())

    async def get_by_id(self, request: HttpRequest, pk: str) -> JsonResponse:
        """GET /api/v1/accounts/{pk}/"""
        dto = await self._service.get_by_id(pk)
        if dto is None:
            raise AccountNotFound(f"Account {pk} not found.")
        return self.ok(dto)

    async def create(self, request: HttpRequest) -> HttpResponse:
        """POST /api/v1/accounts/"""
        dto = self.read_valid_body(request)
        saved = await self._service.create(dto)
        return self.created(saved)

    async def replace_by_id(self, request: HttpRequest, pk: str) -> HttpResponse:
        """PUT /api/v1/accounts/{pk}/"""
        dto = self.read_valid_body(request)
        if await self._service.replace(pk, dto) is None:
            raise AccountNotFound(f"Account {pk} not found.")
        return self.no_content()

    async def merge_by_id(self, request: HttpRequest, pk: str) -> HttpResponse:
        """PATCH /api/v1/accounts/{pk}/"""
        dto = self.read_valid_body(request)
        if await self._service.merge(pk, dto) is None:
            raise AccountNotFound(f"Account {pk} not found.")
        return self.no_content()

    async def delete_by_id(self, request: HttpRequest, pk: str) -> HttpResponse:
        """DELETE /api/v1/accounts/{pk}/"""
        if await self._service.get_by_id(pk) is None:
            raise AccountNotFound(f"Account {pk} not found.")
        await self._service.delete_by_id(pk)
        return self.no_content()
