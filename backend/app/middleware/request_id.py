"""
Restaurant Ordering API: Request ID Middleware
=================================================

What:  Tags every request with a short correlation id and echoes it back in
       the X-Request-ID response header.
Why:   Access log lines, auth gate rejections and database error logs from
       one request share the id, so a client report can be matched to the
       server's logs.
How:   A caller-supplied X-Request-ID is reused (trimmed to 64 chars);
       otherwise the first 8 hex chars of a uuid4 are used. The id is kept in
       a ContextVar for loggers and on request.state for handlers.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on the one event loop each see their own id
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

MAX_REQUEST_ID_LENGTH = 64


def new_request_id() -> str:
    return uuid.uuid4().hex[:8]


class RequestIDMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        supplied = request.headers.get("X-Request-ID", "").strip()
        rid = supplied[:MAX_REQUEST_ID_LENGTH] or new_request_id()

        token = request_id_var.set(rid)
        request.state.request_id = rid
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers["X-Request-ID"] = rid
        return response
