"""Account domain exceptions."""

from __future__ import annotations

from modules.core.exceptions import NotFound


class AccountNotFound(NotFound):
    """The requested account does not exist."""
