"""
Restaurant Ordering API: Access Log Middleware
=================================================

What:  One log line per request: method, path, status, duration, request id,
       client address and, for gated routes, the authenticated customer id.
Why:   The service has no metrics layer; the access log is how slow queries
       and error bursts get noticed.
How:   Level follows the status class (5xx ERROR, 4xx WARNING, else INFO).
       Liveness probes (/health, /ping) are skipped.

Never logged: request bodies (passwords on /login and /api/users) and the
Authorization header.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.middleware.request_id import request_id_var

logger = logging.getLogger("restaurant_api.access")

UNLOGGED_PATHS = frozenset({"/health", "/ping"})


def _level_for(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in UNLOGGED_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - started) * 1000

        client_ip = request.client.host if request.client else "unknown"
        # Set by the auth gate on gated routes only
        principal = getattr(request.state, "principal", None)
        customer = principal.id if principal is not None else "-"
        rid = request_id_var.get("")

        logger.log(
            _level_for(response.status_code),
            "%s %s %d %.1fms [%s] from %s customer=%s",
            request.method,
            path,
            response.status_code,
            duration_ms,
            rid,
            client_ip,
            customer,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": path,
                "status": response.status_code,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )
        return response
