"""
FastAPI main application.

This module builds the FastAPI application serving the admins of a pool.
"""

from typing import Optional

from fastapi import FastAPI

from adminpanel import __version__
from adminpanel.admin.pool import AdminPool
from adminpanel.api.middleware import SessionScopeMiddleware
from adminpanel.api.routers import admin
from adminpanel.logging_utils import get_logger

logger = get_logger(__name__)


def create_app(pool: Optional[AdminPool] = None) -> FastAPI:
    """Create the admin API for ``pool`` (an empty pool if omitted)."""
    app = FastAPI(
        title="Admin Panel API",
        description="Edit forms for registered models, protected by optimistic locking",
        version=__version__,
    )
    app.state.admin_pool = pool if pool is not None else AdminPool()

    app.add_middleware(SessionScopeMiddleware)
    app.include_router(admin.router, prefix="/api/v1", tags=["Admin"])

    logger.info("Admin API created with admins: %s", ", ".join(app.state.admin_pool.codes()) or "none")
    return app
