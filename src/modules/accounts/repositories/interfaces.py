"""Account repository interface."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.accounts.models import Account


class IAccountRepository(IRepository["Account"]):
    """Repository contract for the Account document."""

    @abstractmethod
    async def find_first_by_name(self, name: str) -> Optional[Account]:
        """Return one account named ``name`` (store order), ``None`` if none."""
