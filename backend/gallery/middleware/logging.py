"""
Request logging middleware
Flow: request -> bind request context -> route/services (logs carry the context) -> response header

The request id is taken from an incoming X-Request-ID (set by a proxy or
the frontend) or generated, bound into structlog's context variables for
the duration of the request, and echoed back in the response.
"""

import time
import uuid
from typing import Callable

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from gallery.config.settings import get_settings
from gallery.core.logging import REQUEST_ID_HEADER, get_logger

logger = get_logger(__name__)

MAX_REQUEST_ID_LENGTH = 64


def resolve_request_id(request: Request) -> str:
    incoming = (request.headers.get(REQUEST_ID_HEADER) or "").strip()
    if incoming and len(incoming) <= MAX_REQUEST_ID_LENGTH:
        return incoming
    return uuid.uuid4().hex


class LoggingMiddleware(BaseHTTPMiddleware):
    """Log every request and tag all log lines written while serving it."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = resolve_request_id(request)
        context = {
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
        }
        user_id = request.headers.get(get_settings().USER_HEADER)
        if user_id:
            context["user_id"] = user_id

        with structlog.contextvars.bound_contextvars(**context):
            start_time = time.perf_counter()
            logger.info(
                "Request started",
                client_host=request.client.host if request.client else None,
            )

            try:
                response = await call_next(request)
            except Exception:
                logger.exception(
                    "Request failed",
                    duration_ms=round((time.perf_counter() - start_time) * 1000, 1),
                )
                raise

            log = logger.warning if response.status_code >= 500 else logger.info
            log(
                "Request completed",
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - start_time) * 1000, 1),
            )

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
