"""
Registry of the admins served by the HTTP layer.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from adminpanel.admin.base import AbstractAdmin
from adminpanel.admin.lock_extension import LockExtension
from adminpanel.config import get_config
from adminpanel.errors import AdminNotFoundError
from adminpanel.logging_utils import get_logger

logger = get_logger(__name__)


class AdminPool:
    def __init__(self, lock_protection: Optional[bool] = None) -> None:
        if lock_protection is None:
            lock_protection = get_config().lock.protection
        self.lock_protection = lock_protection
        self._admins: Dict[str, AbstractAdmin] = {}

    def register(self, admin: AbstractAdmin) -> AbstractAdmin:
        if self.lock_protection and not admin.has_extension(LockExtension):
            admin.add_extension(LockExtension())
            logger.debug("[ADMIN][LOCK] Lock protection enabled for %s", admin.get_code())
        self._admins[admin.get_code()] = admin
        return admin

    def get(self, code: str) -> AbstractAdmin:
        try:
            return self._admins[code]
        except KeyError:
            raise AdminNotFoundError(f"Admin {code!r} is not registered") from None

    def has(self, code: str) -> bool:
        return code in self._admins

    def codes(self) -> List[str]:
        return sorted(self._admins)
