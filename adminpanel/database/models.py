"""
Declarative helpers for admin-managed models.
"""

from __future__ import annotations

from sqlalchemy import Column, Integer
from sqlalchemy.orm import declared_attr


class VersionedMixin:
    """Adds an integer ``version`` column used for optimistic locking.

    SQLAlchemy increments the column on every flush and adds
    ``WHERE version = :loaded_version`` to UPDATE statements, raising
    ``StaleDataError`` when no row matches.
    """

    # Version for concurrent editing safety
    version = Column(Integer, nullable=False, default=1)

    @declared_attr
    def __mapper_args__(cls):
        return {"version_id_col": cls.version}
