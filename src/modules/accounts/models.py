"""Account (party) document.

Identifier and timestamps are assigned by the store (``BaseModel``).
``name`` is nullable: a full replace writes whatever the caller sent.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class Account(BaseModel):
    """Account document holding the party's display name."""

    name = models.CharField(max_length=255, null=True, blank=True)  # noqa: DJ001

    class Meta:
        db_table = "accounts"
        indexes = [
            models.Index(fields=["name"], name="accounts_name_idx"),
        ]

    def __str__(self) -> str:
        return self.name or str(self.id)
