"""Optimistic locking utilities for concurrent editing safety."""

from typing import Any, Optional


class ConflictError(Exception):
    """Raised when version conflict detected."""

    def __init__(self, entity_type: str, entity_id: Optional[str], expected: Any, actual: Any):
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.expected = expected
        self.actual = actual
        super().__init__(f"Version conflict on {entity_type} {entity_id}: expected {expected}, found {actual}")


def coerce_version(value: Any, current: Any) -> Any:
    """Convert a submitted version token to the type of the stored one.

    Form posts deliver every value as text, while version columns are usually
    integers. Raises ValueError when the token cannot be converted.
    """
    if isinstance(current, int) and not isinstance(value, int):
        return int(str(value).strip())
    return value


def check_version(current: Any, expected_version: Any) -> bool:
    """Check if the stored version matches the submitted one."""
    try:
        return coerce_version(expected_version, current) == current
    except (TypeError, ValueError):
        return False
