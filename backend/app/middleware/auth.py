"""
Restaurant Ordering API: Auth Gate
=====================================

What:  FastAPI dependency that admits a request only when it carries a valid
       `Authorization: Bearer <token>` header.
Why:   Every route except POST /login, POST /api/users and the health probes
       is private. Routers attach the gate once with
       `dependencies=[Depends(require_principal)]`; handlers that need the
       caller's identity take `principal: Principal = Depends(require_principal)`.

Decision sequence:
    1. no Authorization header                  → MissingCredentialsError
    2. split on the first space; scheme is not
       exactly "Bearer", or the token is empty or
       starts with whitespace                   → MalformedCredentialsError
    3. signature / expiry / claim shape fails   → InvalidTokenError
    4. otherwise request.state.principal is set and the Principal returned

All three failures reach the client as the same 401 "Unauthorized". Which
one happened is logged at WARNING with the request id.

Why a dependency rather than middleware:
    Router-level dependencies run before the handler's own dependencies, so a
    rejected request never opens a database session.
"""

import logging

from fastapi import Request

from app.exceptions import AuthError, MalformedCredentialsError, MissingCredentialsError
from app.middleware.request_id import request_id_var
from app.schemas.common import Principal

logger = logging.getLogger(__name__)


def _principal_from_header(request: Request) -> Principal:
    header = request.headers.get("Authorization")
    if not header:
        raise MissingCredentialsError()

    scheme, _, token = header.partition(" ")
    if scheme != "Bearer" or not token or token[0].isspace():
        raise MalformedCredentialsError(context={"scheme": scheme})

    return request.app.state.auth_service.decode_token(token)


async def require_principal(request: Request) -> Principal:
    try:
        principal = _principal_from_header(request)
    except AuthError as exc:
        logger.warning(
            "[%s] Rejected %s %s: %s %s",
            request_id_var.get(""),
            request.method,
            request.url.path,
            exc.reason,
            exc.context or "",
        )
        raise

    request.state.principal = principal
    return principal
