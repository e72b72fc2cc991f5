"""Pure field-by-field mapping between ``Account`` and ``AccountDTO``."""

from __future__ import annotations

from modules.accounts.dtos import AccountDTO
from modules.accounts.models import Account


def account_to_dto(account: Account) -> AccountDTO:
    return AccountDTO(
        id=str(account.id),
        name=account.name,
        created_at=account.created_at,
        updated_at=account.updated_at,
    )


def dto_to_account(dto: AccountDTO) -> Account:
    account = Account(name=dto.name)
    if dto.id:
        account.id = dto.id
    return account
