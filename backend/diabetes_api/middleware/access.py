"""
Diabetes Diagnosis API — Access Middleware
============================================

What:  Tags each request with a correlation ID and writes the access log.
How:   On arrival logs `[METHOD] /path?query`. On completion logs the
       status and elapsed time: failures at WARNING/ERROR, successes only
       at DEBUG.

Request IDs:
    A client-supplied X-Request-ID is reused when it is short printable
    text; anything else is replaced by 8 random hex chars. The ID lives in
    `request_id_var` for the duration of the request (error bodies include
    it) and is echoed in the X-Request-ID response header.

Example (LOG_LEVEL=INFO):
    2026-01-15T12:00:00 [INFO] diabetes_api.access: [POST] /api/diagnosis/process (a1b2c3d4)
    2026-01-15T12:00:01 [WARNING] diabetes_api.access: [POST] /admin/login -> 401 in 8.2ms (a1b2c3d5)

Request bodies are never logged (they contain admin secrets).
"""

import logging
import time
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("diabetes_api.access")

REQUEST_ID_HEADER = "X-Request-ID"
MAX_REQUEST_ID_LENGTH = 64

request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def resolve_request_id(supplied: str) -> str:
    """Return `supplied` if it is usable as a log tag, else a fresh ID."""
    supplied = supplied.strip()
    if supplied and len(supplied) <= MAX_REQUEST_ID_LENGTH and supplied.isprintable():
        return supplied
    return uuid.uuid4().hex[:8]


def _status_level(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.DEBUG


class AccessLogMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = resolve_request_id(request.headers.get(REQUEST_ID_HEADER, ""))
        target = request.url.path
        if request.url.query:
            target = f"{target}?{request.url.query}"

        # Each request runs in its own task, so the value never leaks across
        # requests; it stays visible to the outermost 500 handler
        request_id_var.set(rid)
        logger.info("[%s] %s (%s)", request.method, target, rid)

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.log(
            _status_level(response.status_code),
            "[%s] %s -> %d in %.1fms (%s)",
            request.method,
            target,
            response.status_code,
            elapsed_ms,
            rid,
        )

        response.headers[REQUEST_ID_HEADER] = rid
        return response
