from .base import AbstractAdmin
from .extension import AbstractAdminExtension
from .lock_extension import LockExtension
from .pool import AdminPool
from .request import AdminRequest, parse_nested_form

__all__ = [
    "AbstractAdmin",
    "AbstractAdminExtension",
    "AdminPool",
    "AdminRequest",
    "LockExtension",
    "parse_nested_form",
]
