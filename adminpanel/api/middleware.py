"""Custom middleware for the admin API."""

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from adminpanel.database.base import request_scope


class SessionScopeMiddleware(BaseHTTPMiddleware):
    """Give every request its own database sessions and close them afterwards.

    Model managers share a request-scoped session registry, so objects loaded
    while rendering or saving a form never leak into another request.
    """

    async def dispatch(self, request: Request, call_next):
        with request_scope():
            return await call_next(request)
