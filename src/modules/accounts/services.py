"""Account service layer (Use Cases).

Same contract as ``ProductService`` with a single mutable field: async
operations, ``None`` for absence, last-writer-wins read-modify-write
updates, store failures propagated as ``StoreFailure``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, AsyncIterator, Optional

import structlog

from modules.accounts.mappers import account_to_dto, dto_to_account
from modules.core.merge import merge_fields, replace_fields

if TYPE_CHECKING:
    from modules.accounts.dtos import AccountDTO
    from modules.accounts.repositories.interfaces import IAccountRepository

logger = structlog.get_logger(__name__)

TEXT_FIELDS = ("name",)


class AccountService:
    """Application service for Account use-cases.

    Receives an ``IAccountRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IAccountRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    async def list_all(self) -> AsyncIterator[AccountDTO]:
        async for account in self._repo.find_all():
            yield account_to_dto(account)

    async def get_by_id(self, id: str) -> Optional[AccountDTO]:
        account = await self._repo.find_by_id(id)
        if account is None:
            return None
        return account_to_dto(account)

    async def find_first_by_name(self, name: str) -> Optional[AccountDTO]:
        account = await self._repo.find_first_by_name(name)
        if account is None:
            return None
        return account_to_dto(account)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    async def create(self, dto: AccountDTO) -> AccountDTO:
        account = dto_to_account(dto.model_copy(update={"id": None}))
        account = await self._repo.save(account)
        logger.info("account.created", account_id=str(account.id))
        return account_to_dto(account)

    async def replace(self, id: str, dto: AccountDTO) -> Optional[AccountDTO]:
        account = await self._repo.find_by_id(id)
        if account is None:
            logger.info("account.replace_missing", account_id=id)
            return None

        replace_fields(account, dto, TEXT_FIELDS)
        account = await self._repo.save(account)
        logger.info("account.replaced", account_id=id)
        return account_to_dto(account)

    async def merge(self, id: str, dto: AccountDTO) -> Optional[AccountDTO]:
        account = await self._repo.find_by_id(id)
        if account is None:
            logger.info("account.merge_missing", account_id=id)
            return None

        merge_fields(account, dto, text_fields=TEXT_FIELDS)
        account = await self._repo.save(account)
        logger.info("account.merged", account_id=id)
        return account_to_dto(account)

    async def delete_by_id(self, id: str) -> None:
        await self._repo.delete_by_id(id)
        logger.info("account.delete_requested", account_id=id)
