"""
Database base configuration and session management.

Provides SQLAlchemy base, engine, and session management for admin models.
Model managers share a scoped session whose scope is the current HTTP
request (see ``request_scope``) and otherwise the current thread.
"""

from __future__ import annotations

import threading
import uuid
import weakref
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Iterator, Optional

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, scoped_session, sessionmaker

from adminpanel.config import get_config

# SQLAlchemy declarative base for models
Base = declarative_base()

# Global engine and session factories (initialized on first use)
_engine = None
_SessionLocal = None
_ScopedSession = None

_request_scope: ContextVar[Optional[str]] = ContextVar("adminpanel_request_scope", default=None)
_registries: "weakref.WeakSet[scoped_session]" = weakref.WeakSet()


def get_engine():
    """
    Get or create the database engine.

    Returns:
        SQLAlchemy engine instance
    """
    global _engine

    if _engine is None:
        db_cfg = get_config().database
        connect_args = {"check_same_thread": False} if db_cfg.url.startswith("sqlite") else {}
        _engine = create_engine(db_cfg.url, echo=db_cfg.echo, connect_args=connect_args)

    return _engine


def get_session_local():
    """
    Get or create the session factory.

    Returns:
        Session factory class
    """
    global _SessionLocal

    if _SessionLocal is None:
        _SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=get_engine(),
        )

    return _SessionLocal


def _current_scope() -> Any:
    scope = _request_scope.get()
    return scope if scope is not None else threading.get_ident()


def request_scoped_session(session_factory: Any) -> scoped_session:
    """
    Wrap ``session_factory`` in a registry keyed by the current request.

    Sessions handed out inside ``request_scope()`` are closed when it exits.
    The registry is tracked only while something else holds it.
    """
    registry = scoped_session(session_factory, scopefunc=_current_scope)
    _registries.add(registry)
    return registry


def get_scoped_session() -> scoped_session:
    """Request-scoped session registry over the configured database."""
    global _ScopedSession

    if _ScopedSession is None:
        _ScopedSession = request_scoped_session(get_session_local())

    return _ScopedSession


@contextmanager
def request_scope() -> Iterator[str]:
    """
    Give the enclosed code its own sessions, closing them on exit.

    Yields:
        The scope identifier
    """
    scope_id = uuid.uuid4().hex
    token = _request_scope.set(scope_id)
    try:
        yield scope_id
    finally:
        for registry in list(_registries):
            registry.remove()
        _request_scope.reset(token)


def init_db() -> None:
    """
    Initialize the database (create all tables).

    This should be called after all models are imported.
    """
    Base.metadata.create_all(bind=get_engine())
