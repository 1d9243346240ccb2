from .interfaces import LockInterface, ModelManagerInterface, supports_locking
from .manager import ModelManager

__all__ = [
    "LockInterface",
    "ModelManager",
    "ModelManagerInterface",
    "supports_locking",
]
