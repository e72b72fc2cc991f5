"""Product domain exceptions.

Raised by the handler when the service reports an empty result.
``DomainExceptionMiddleware`` translates them into HTTP responses.
"""

from __future__ import annotations

from modules.core.exceptions import NotFound


class ProductNotFound(NotFound):
    """The requested product does not exist."""
