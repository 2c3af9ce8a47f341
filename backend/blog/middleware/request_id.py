"""
Blog API - Request ID Middleware
=================================

What:  Assigns an ID to each request and echoes it in the X-Request-ID
       response header.
Why:   Every log line of one request (service errors, access log) carries
       the same ID, and a client can quote it when reporting a failure.
How:   Reuses a client-supplied X-Request-ID, otherwise generates a short
       UUID prefix. The ID is kept in a ContextVar so loggers and exception
       handlers can read it without access to the Request object.
When:  Outermost middleware: runs before access logging and CORS, and sets
       the header on every response, including the 05X99 fallback.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one event loop each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

REQUEST_ID_HEADER = "X-Request-ID"


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Client-supplied IDs win, so a frontend can trace a call end to end."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # 8 hex chars are plenty for correlation and stay readable in logs
        rid = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:8]

        # ContextVar for loggers, request.state for route handlers
        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)

        response.headers[REQUEST_ID_HEADER] = rid
        return response
