"""Validation gate for inbound representations.

Field rules live in DRF serializers (one per resource, see each module's
``serializers.py``).  The DTO is dumped to its JSON shape and run through
the serializer; violations come back as a flat list of ``FieldError``.
An empty list means the representation passed.

``ensure_valid`` hands back the DTO rebuilt from the serializer's
``validated_data``, so the bounds that were checked are the bounds of what
gets stored (DRF trims text before checking its length).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

import structlog
from pydantic import BaseModel

from modules.core.exceptions import FieldError, ValidationFailed

if TYPE_CHECKING:
    from rest_framework.serializers import Serializer

logger = structlog.get_logger(__name__)

DTO = TypeVar("DTO", bound=BaseModel)


def _field_errors(serializer_errors: dict) -> list[FieldError]:
    errors: list[FieldError] = []
    for field, details in serializer_errors.items():
        attr = None if field == "non_field_errors" else field
        for detail in details:
            errors.append(
                FieldError(
                    code=getattr(detail, "code", "invalid"),
                    detail=str(detail),
                    attr=attr,
                )
            )
    return errors


def validate(validator_class: type[Serializer], dto: BaseModel) -> list[FieldError]:
    """Run ``validator_class`` against ``dto`` and return every violation."""
    serializer = validator_class(data=dto.model_dump(mode="json"))
    if serializer.is_valid():
        return []
    return _field_errors(serializer.errors)


def ensure_valid(validator_class: type[Serializer], dto: DTO) -> DTO:
    """Return ``dto`` with its cleaned field values, or raise ``ValidationFailed``."""
    serializer = validator_class(data=dto.model_dump(mode="json"))
    if not serializer.is_valid():
        errors = _field_errors(serializer.errors)
        logger.info(
            "request.validation_failed",
            validator=validator_class.__name__,
            fields=sorted({e.attr or "body" for e in errors}),
        )
        raise ValidationFailed(errors)
    return dto.model_copy(update=serializer.validated_data)
