"""
FastAPI dependencies for admin routes.
"""

from fastapi import HTTPException, Request

from adminpanel.admin.base import AbstractAdmin
from adminpanel.admin.pool import AdminPool
from adminpanel.errors import AdminNotFoundError


def get_admin_pool(request: Request) -> AdminPool:
    """Dependency returning the pool the application was created with."""
    return request.app.state.admin_pool


def get_request_admin(code: str, request: Request) -> AbstractAdmin:
    """
    Dependency resolving ``code`` to a per-request copy of the admin.

    Raises:
        HTTPException: 404 if no admin is registered under ``code``
    """
    pool = get_admin_pool(request)
    try:
        admin = pool.get(code)
    except AdminNotFoundError:
        raise HTTPException(status_code=404, detail=f"Admin '{code}' not found")
    return admin.clone()
