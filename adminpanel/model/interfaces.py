"""
Capabilities a model manager may offer to admins and their extensions.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional, Type


class ModelManagerInterface(ABC):
    """Persistence operations every admin relies on."""

    @abstractmethod
    def create(self, obj: Any) -> None:
        ...

    @abstractmethod
    def update(self, obj: Any) -> None:
        ...

    @abstractmethod
    def delete(self, obj: Any) -> None:
        ...

    @abstractmethod
    def find(self, model_class: Type[Any], object_id: Any) -> Optional[Any]:
        ...

    @abstractmethod
    def get_identifier(self, obj: Any) -> Optional[str]:
        ...


class LockInterface(ABC):
    """Version-based optimistic locking."""

    @abstractmethod
    def get_lock_version(self, obj: Any) -> Optional[Any]:
        """Return the current version token of ``obj``, or None if it is not versioned."""
        ...

    @abstractmethod
    def lock(self, obj: Any, expected_version: Any) -> None:
        """
        Check that ``obj`` is still at ``expected_version``.

        Raises:
            ConflictError: If the stored version differs
        """
        ...


def supports_locking(manager: Any) -> bool:
    """True if ``manager`` implements version-based locking."""
    return isinstance(manager, LockInterface)
