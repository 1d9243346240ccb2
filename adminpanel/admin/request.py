"""
Request payload seen by admins and their extensions.

Edit forms namespace their inputs under the admin's uniqid, so a post such as
``s1a2b3c4d5[title]=Hello&s1a2b3c4d5[_lock_version]=3`` is exposed as
``{"s1a2b3c4d5": {"title": "Hello", "_lock_version": "3"}}``.
"""

from __future__ import annotations

import re
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

from fastapi import Request

_KEY_PART = re.compile(r"\[([^\]]*)\]")

FormItems = Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]


def _split_key(key: str) -> list:
    """Split ``a[b][c]`` into ``["a", "b", "c"]``."""
    bracket = key.find("[")
    if bracket <= 0 or not key.endswith("]"):
        return [key]
    return [key[:bracket]] + _KEY_PART.findall(key[bracket:])


def parse_nested_form(items: FormItems) -> Dict[str, Any]:
    """Turn bracketed form keys into nested dictionaries.

    An empty segment (``tags[]``) appends to a list.
    """
    pairs = items.items() if isinstance(items, Mapping) else items
    result: Dict[str, Any] = {}

    for key, value in pairs:
        parts = _split_key(key)
        node: Any = result
        for i, part in enumerate(parts):
            last = i == len(parts) - 1
            next_is_list = not last and parts[i + 1] == ""
            if isinstance(node, list):
                if last:
                    node.append(value)
                else:
                    child: Any = [] if next_is_list else {}
                    node.append(child)
                    node = child
                continue
            if last:
                node[part] = value
            else:
                default: Any = [] if next_is_list else {}
                existing = node.get(part)
                if not isinstance(existing, (dict, list)):
                    existing = default
                    node[part] = existing
                node = existing

    return result


class AdminRequest:
    """The parsed body of the request an admin is serving."""

    def __init__(self, payload: Optional[Mapping[str, Any]] = None, method: str = "POST") -> None:
        self.payload: Dict[str, Any] = dict(payload or {})
        self.method = method.upper()

    def get(self, key: str, default: Any = None) -> Any:
        return self.payload.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self.payload[key] = value

    def has(self, key: str) -> bool:
        return key in self.payload

    @classmethod
    def from_form(cls, items: FormItems, method: str = "POST") -> "AdminRequest":
        return cls(parse_nested_form(items), method=method)

    @classmethod
    async def from_starlette(cls, request: Request) -> "AdminRequest":
        """Build from a Starlette/FastAPI request; body values win over query values."""
        items = list(request.query_params.multi_items())
        if request.method in ("POST", "PUT", "PATCH"):
            form = await request.form()
            items.extend(form.multi_items())
        return cls.from_form(items, method=request.method)

    def __repr__(self) -> str:
        return f"AdminRequest(method={self.method!r}, keys={sorted(self.payload)!r})"
