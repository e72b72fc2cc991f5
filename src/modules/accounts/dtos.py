"""Account representation exchanged at the transport boundary.

Pydantic v2, every field optional, no business constraints.  Field rules
live in ``AccountValidator`` (see ``serializers.py``).
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class AccountDTO(BaseModel):
    """Account as seen by API clients."""

    id: str | None = None
    name: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
