"""
SQLAlchemy model manager with optimistic lock support.
"""

from __future__ import annotations

from typing import Any, Optional, Type, Union

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, scoped_session
from sqlalchemy.orm.exc import StaleDataError

from adminpanel.errors import ModelManagerError
from adminpanel.logging_utils import get_logger
from adminpanel.model.interfaces import LockInterface, ModelManagerInterface
from adminpanel.utils.optimistic_lock import ConflictError, check_version

logger = get_logger(__name__)


class ModelManager(ModelManagerInterface, LockInterface):
    """
    Model manager backed by a SQLAlchemy session.

    A model is versioned when its mapper declares ``version_id_col`` (see
    ``VersionedMixin``). Unversioned models are still managed; they simply
    never report a lock version.
    """

    def __init__(self, session: Union[Session, scoped_session]) -> None:
        self.session = session

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def create(self, obj: Any) -> None:
        self.session.add(obj)
        self._commit(obj, "create")

    def update(self, obj: Any) -> None:
        self._commit(obj, "update")

    def delete(self, obj: Any) -> None:
        self.session.delete(obj)
        self._commit(obj, "delete")

    def find(self, model_class: Type[Any], object_id: Any) -> Optional[Any]:
        if object_id is None:
            return None
        try:
            identity = self._coerce_identifier(model_class, object_id)
        except ValueError:
            return None
        try:
            return self.session.get(model_class, identity)
        except SQLAlchemyError as e:
            raise ModelManagerError(f"Failed to load {model_class.__name__} {object_id}: {e}") from e

    def _coerce_identifier(self, model_class: Type[Any], object_id: Any) -> Any:
        """Convert an identifier taken from a URL to the primary key's type."""
        primary_key = inspect(model_class).primary_key
        if len(primary_key) != 1 or not isinstance(object_id, str):
            return object_id
        try:
            python_type = primary_key[0].type.python_type
        except NotImplementedError:
            return object_id
        if python_type is str:
            return object_id
        return python_type(object_id)

    def get_identifier(self, obj: Any) -> Optional[str]:
        state = inspect(obj, raiseerr=False)
        if state is None or not state.identity:
            return None
        return "~".join(str(part) for part in state.identity)

    def _commit(self, obj: Any, action: str) -> None:
        entity_type = type(obj).__name__
        # The instance is expired once the transaction ends
        loaded_version = self.get_lock_version(obj)
        try:
            self.session.commit()
        except StaleDataError as e:
            self.session.rollback()
            entity_id = self.get_identifier(obj)
            logger.warning(
                "[MODEL][LOCK] Concurrent modification on %s %s during %s",
                entity_type,
                entity_id,
                action,
            )
            raise ConflictError(entity_type, entity_id, loaded_version, None) from e
        except SQLAlchemyError as e:
            self.session.rollback()
            raise ModelManagerError(f"Failed to {action} {entity_type}: {e}") from e

        logger.info("[MODEL] %s %s (ID: %s)", action.capitalize(), entity_type, self.get_identifier(obj))

    # ------------------------------------------------------------------
    # Locking
    # ------------------------------------------------------------------

    def get_lock_version(self, obj: Any) -> Optional[Any]:
        version_attr = self._version_attribute(obj)
        if version_attr is None:
            return None
        return getattr(obj, version_attr, None)

    def lock(self, obj: Any, expected_version: Any) -> None:
        version_attr = self._version_attribute(obj)
        if version_attr is None:
            return

        current = getattr(obj, version_attr, None)
        if not check_version(current, expected_version):
            entity_id = self.get_identifier(obj)
            logger.info(
                "[MODEL][LOCK] Stale version for %s %s: submitted %r, stored %r",
                type(obj).__name__,
                entity_id,
                expected_version,
                current,
            )
            raise ConflictError(type(obj).__name__, entity_id, expected_version, current)

    def _version_attribute(self, obj: Any) -> Optional[str]:
        mapper = inspect(type(obj), raiseerr=False)
        if mapper is None or mapper.version_id_col is None:
            return None
        return mapper.get_property_by_column(mapper.version_id_col).key
