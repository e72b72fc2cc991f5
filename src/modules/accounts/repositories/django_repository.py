"""Django ORM implementation of the Account repository."""

from __future__ import annotations

from typing import Optional

from modules.accounts.models import Account
from modules.accounts.repositories.interfaces import IAccountRepository
from modules.core.repositories.django_repository import DjangoRepository


class AccountDjangoRepository(DjangoRepository[Account], IAccountRepository):
    """Concrete Account repository backed by Django ORM."""

    model = Account

    async def find_first_by_name(self, name: str) -> Optional[Account]:
        return await self.find_first_by(name=name)
