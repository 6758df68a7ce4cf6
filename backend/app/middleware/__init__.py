# Middleware package init
"""
Restaurant Ordering API: Middleware Package
==============================================

What:  Cross-cutting concerns applied to every request, plus the auth gate.

Middleware Chain (outermost first):
    Request → [Request ID] → [Access Log] → [GZip] → [CORS] → Route Handler

    Request ID runs outermost so the access log line, and anything logged
    inside the handler, carry the same correlation id.

The auth gate (auth.py) is not middleware: it is a FastAPI dependency
attached per router, because some routes (/login, POST /api/users, /ping,
/health) must stay public.
"""
