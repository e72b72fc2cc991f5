import uuid
from contextvars import ContextVar
from typing import Callable

import structlog
from asgiref.sync import iscoroutinefunction, markcoroutinefunction
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.utils.deprecation import MiddlewareMixin

from modules.core.exceptions import DomainError, StoreFailure, ValidationFailed

correlation_id_var: ContextVar[str] = ContextVar("correlation_id", default="")

logger = structlog.get_logger()


class CorrelationIdMiddleware:
    """Middleware that extracts or generates a correlation ID for each request.

    Reads X-Request-ID header from the incoming request. If absent,
    generates a new UUID4. The ID is stored in a ContextVar so structlog
    processors can inject it into every log line, and is returned to the
    client via the X-Request-ID response header.

    Runs natively in both sync and async stacks so async views are not
    forced through a thread hop.
    """

    sync_capable = True
    async_capable = True

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response
        self.async_mode = iscoroutinefunction(get_response)
        if self.async_mode:
            markcoroutinefunction(self)

    def __call__(self, request: HttpRequest) -> HttpResponse:
        if self.async_mode:
            return self.__acall__(request)
        cid = self._start(request)
        response = self.get_response(request)
        return self._finish(request, response, cid)

    async def __acall__(self, request: HttpRequest) -> HttpResponse:
        cid = self._start(request)
        response = await self.get_response(request)
        return self._finish(request, response, cid)

    def _start(self, request: HttpRequest) -> str:
        cid = request.META.get("HTTP_X_REQUEST_ID") or str(uuid.uuid4())
        correlation_id_var.set(cid)

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(correlation_id=cid)

        logger.info(
            "request_started",
            method=request.method,
            path=request.get_full_path(),
        )
        return cid

    def _finish(self, request: HttpRequest, response: HttpResponse, cid: str) -> HttpResponse:
        logger.info(
            "request_finished",
            method=request.method,
            path=request.get_full_path(),
            status_code=response.status_code,
        )

        response["X-Request-ID"] = cid
        return response


class DomainExceptionMiddleware(MiddlewareMixin):
    """Render ``DomainError`` subclasses as the standardized error body.

    ``{"type": "client_error" | "server_error", "errors": [{code, detail, attr}]}``

    Anything that is not a ``DomainError`` is left to Django.
    """

    def process_exception(self, request: HttpRequest, exception: Exception) -> HttpResponse | None:
        if not isinstance(exception, DomainError):
            return None

        if isinstance(exception, ValidationFailed):
            errors = [error.as_dict() for error in exception.errors]
        elif isinstance(exception, StoreFailure):
            errors = [
                {
                    "code": exception.code,
                    "detail": "The request could not be completed due to a storage error.",
                    "attr": None,
                }
            ]
        else:
            errors = [{"code": exception.code, "detail": str(exception), "attr": None}]

        error_type = "server_error" if exception.status_code >= 500 else "client_error"
        log = logger.bind(
            method=request.method,
            path=request.get_full_path(),
            status_code=exception.status_code,
            error_code=exception.code,
        )
        if error_type == "server_error":
            log.error("request_failed", error=str(exception))
        else:
            log.info("request_rejected")

        return JsonResponse(
            {"type": error_type, "errors": errors},
            status=exception.status_code,
        )
