"""Operational endpoints."""

from __future__ import annotations

import time

import structlog
from asgiref.sync import sync_to_async
from django.db import DatabaseError, connections
from django.http import HttpRequest, JsonResponse
from django.utils import timezone
from rest_framework import status

logger = structlog.get_logger(__name__)


def _ping_store() -> dict:
    """Round-trip ``SELECT 1`` on the default connection."""
    started = time.monotonic()
    connection = connections["default"]
    connection.ensure_connection()
    with connection.cursor() as cursor:
        cursor.execute("SELECT 1")
        cursor.fetchone()
    return {
        "status": "up",
        "vendor": connection.vendor,
        "response_time_ms": round((time.monotonic() - started) * 1000, 2),
    }


async def health_check(request: HttpRequest) -> JsonResponse:
    """GET /health: 200 while the document store answers, 503 otherwise."""
    try:
        store = await sync_to_async(_ping_store)()
    except DatabaseError as exc:
        logger.error("health.store_down", error=str(exc))
        store = {"status": "down"}

    healthy = store["status"] == "up"
    logger.info("health.checked", healthy=healthy)
    return JsonResponse(
        {
            "status": "healthy" if healthy else "unhealthy",
            "timestamp": timezone.now().isoformat(),
            "services": {"database": store},
        },
        status=status.HTTP_200_OK if healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
    )
