"""
Blog API - Request Logging Middleware
======================================

What:  One access-log line per request: method, path, status, duration,
       request ID and client IP.
Why:   Uvicorn's own access log has no request ID and no duration, so a
       failing request cannot be matched to its service-side log lines.
How:   Measures wall time around call_next() and picks the level from the
       status class (5xx ERROR, 4xx WARNING, else INFO).
When:  Inside RequestIDMiddleware, so the ID is already set when we log.

Last-resort error handling:
    Application exceptions are turned into envelopes by the handlers in
    blog.main. Anything they do not cover is re-raised by call_next() and
    caught here, logged with its traceback and answered with a
    "05X99 - Falha interna no servidor" envelope. The 500 stays inside the
    request-ID scope: it still gets X-Request-ID and an access-log line.

The liveness probe (GET /) is not logged.

Log Format:
    GET /v1/categories/7 404 3.2ms [a1b2c3d4] from 127.0.0.1
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from blog.exceptions import INTERNAL_ERROR_MESSAGE
from blog.middleware.request_id import request_id_var
from blog.schemas.category import ResultEnvelope

logger = logging.getLogger("blog.access")

UNLOGGED_PATHS = {"/"}

UNHANDLED_ERROR_CODE = "05X99"


def unhandled_error_response() -> JSONResponse:
    """The envelope every uncaught exception is answered with."""
    return JSONResponse(
        status_code=500,
        content=ResultEnvelope.failure(
            [f"{UNHANDLED_ERROR_CODE} - {INTERNAL_ERROR_MESSAGE}"]
        ).model_dump(mode="json"),
    )


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Access log plus the catch-all for exceptions no handler claimed.

    Duration covers everything below this middleware: CORS, binding,
    validation, the service call and serialization.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # perf_counter: monotonic, unaffected by wall-clock adjustments
        start_time = time.perf_counter()
        client_ip = request.client.host if request.client else "unknown"
        method = request.method
        path = request.url.path

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "[%s] Unhandled error on %s %s: %s",
                request_id_var.get(""),
                method,
                path,
                str(e),
                exc_info=True,
            )
            response = unhandled_error_response()

        # Health checks are polled constantly and would drown everything else
        if path in UNLOGGED_PATHS:
            return response

        duration_ms = (time.perf_counter() - start_time) * 1000
        rid = request_id_var.get("")

        # 5xx → ERROR (our fault), 4xx → WARNING (client's), rest → INFO
        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] from %s",
            method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )
        return response
