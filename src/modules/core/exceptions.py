"""Domain exceptions shared by every resource module.

Raised by handlers and repositories; ``DomainExceptionMiddleware`` catches
them and renders the standardized error body.

- ``NotFound``: no document exists for the requested identifier.
- ``ValidationFailed``: the request body broke one or more field rules.
- ``StoreFailure``: the store itself failed (connectivity, constraint...).
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldError:
    """A single violated rule, optionally tied to a field (``attr``)."""

    code: str
    detail: str
    attr: str | None = None

    def as_dict(self) -> dict[str, str | None]:
        return {"code": self.code, "detail": self.detail, "attr": self.attr}


class DomainError(Exception):
    """Base class for errors the API layer knows how to render."""

    status_code = 500
    code = "error"


class NotFound(DomainError):
    """The requested resource does not exist."""

    status_code = 404
    code = "not_found"


class ValidationFailed(DomainError):
    """The decoded representation failed field-level validation."""

    status_code = 400
    code = "invalid"

    def __init__(self, errors: list[FieldError]) -> None:
        self.errors = list(errors)
        super().__init__("; ".join(f"{e.attr or 'body'}: {e.detail}" for e in self.errors))


class StoreFailure(DomainError):
    """The underlying store raised; not retried."""

    status_code = 500
    code = "store_failure"
