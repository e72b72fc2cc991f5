"""Shared request-handler plumbing.

``ResourceHandler`` owns the parts every resource handler repeats:

- decoding the request body into the resource DTO (Pydantic);
- the validation gate (DRF serializer, see ``modules.core.validation``);
- shaping success responses (200 JSON, streamed 200 JSON array,
  201 + Location, 204).

Failures are raised, not returned: ``ValidationFailed`` for bad input and
the resource's ``NotFound`` subclass for absence.
``DomainExceptionMiddleware`` turns them into HTTP responses.
"""

from __future__ import annotations

from typing import AsyncIterator, Generic, TypeVar

from django.http import HttpRequest, HttpResponse, JsonResponse, StreamingHttpResponse
from django.urls import reverse
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from rest_framework import serializers, status

from modules.core.exceptions import FieldError, ValidationFailed
from modules.core.validation import ensure_valid

DTO = TypeVar("DTO", bound=BaseModel)


class ResourceHandler(Generic[DTO]):
    """Base class for the per-resource async handlers."""

    dto_class: type[DTO]
    validator_class: type[serializers.Serializer]
    detail_url_name: str

    # ------------------------------------------------------------------
    # Decoding / validation
    # ------------------------------------------------------------------

    def decode(self, request: HttpRequest) -> DTO:
        """Parse the JSON body into ``dto_class``; type errors count as input errors."""
        try:
            return self.dto_class.model_validate_json(request.body or b"")
        except PydanticValidationError as exc:
            raise ValidationFailed(
                [
                    FieldError(
                        code=err["type"],
                        detail=err["msg"],
                        attr=".".join(str(part) for part in err["loc"]) or None,
                    )
                    for err in exc.errors()
                ]
            ) from exc

    def read_valid_body(self, request: HttpRequest) -> DTO:
        """Decode then validate, returning the cleaned DTO.

        Nothing downstream runs if either step fails.
        """
        return ensure_valid(self.validator_class, self.decode(request))

    # ------------------------------------------------------------------
    # Responses
    # ------------------------------------------------------------------

    @staticmethod
    def ok(dto: DTO) -> JsonResponse:
        return JsonResponse(dto.model_dump(mode="json"), status=status.HTTP_200_OK)

    @staticmethod
    def ok_many(dtos: AsyncIterator[DTO]) -> StreamingHttpResponse:
        """Stream ``dtos`` back as one JSON array, element by element.

        The stream is not touched until the server iterates the body, so a
        store failure while listing aborts the body instead of becoming an
        error response.
        """
        return StreamingHttpResponse(
            _json_array(dtos),
            content_type="application/json",
            status=status.HTTP_200_OK,
        )

    def created(self, dto: DTO) -> HttpResponse:
        response = HttpResponse(status=status.HTTP_201_CREATED)
        response["Location"] = reverse(self.detail_url_name, kwargs={"pk": dto.id})
        return response

    @staticmethod
    def no_content() -> HttpResponse:
        return HttpResponse(status=status.HTTP_204_NO_CONTENT)


async def _json_array(dtos: AsyncIterator[BaseModel]) -> AsyncIterator[bytes]:
    separator = b"["
    async for dto in dtos:
        yield separator + dto.model_dump_json().encode()
        separator = b","
    yield b"[]" if separator == b"[" else b"]"
