"""
Request-scoped form bound to the object being edited.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from adminpanel.form.events import EventDispatcher, FormEvent, FormEvents
from adminpanel.logging_utils import get_logger

logger = get_logger(__name__)

# Field types
HIDDEN = "hidden"
TEXT = "text"
TEXTAREA = "textarea"
INTEGER = "integer"
CHECKBOX = "checkbox"

FIELD_TYPES = (HIDDEN, TEXT, TEXTAREA, INTEGER, CHECKBOX)


@dataclass
class FormField:
    name: str
    type: str = TEXT
    options: Dict[str, Any] = field(default_factory=dict)

    @property
    def mapped(self) -> bool:
        """Whether the field reads from and writes to the bound object."""
        return bool(self.options.get("mapped", True))

    @property
    def required(self) -> bool:
        return bool(self.options.get("required", False))

    def convert(self, raw: Any) -> Any:
        """Convert a submitted value to the field's Python type."""
        if self.type == INTEGER:
            if raw in (None, ""):
                return None
            return int(raw)
        if self.type == CHECKBOX:
            return str(raw).lower() in ("1", "true", "on", "yes")
        return raw


class Form:
    """
    A named set of fields bound to one object.

    Fields are added by the builder or by PRE_SET_DATA listeners. Only mapped
    fields are read from or written to the bound object; submitted values of
    unmapped fields are kept separately and exposed by ``get_submitted``.
    """

    def __init__(
        self,
        name: str,
        dispatcher: Optional[EventDispatcher] = None,
        parent: Optional["Form"] = None,
    ) -> None:
        self.name = name
        self.dispatcher = dispatcher or EventDispatcher()
        self.parent = parent
        self._fields: Dict[str, FormField] = {}
        self._data: Any = None
        self._submitted: Dict[str, Any] = {}
        self._is_submitted = False
        self.errors: List[str] = []

    def add(self, name: str, type: str = TEXT, options: Optional[Dict[str, Any]] = None) -> "Form":
        if type not in FIELD_TYPES:
            raise ValueError(f"Unknown field type {type!r} for field {name!r}")
        self._fields[name] = FormField(name=name, type=type, options=dict(options or {}))
        return self

    def get(self, name: str) -> FormField:
        return self._fields[name]

    def has(self, name: str) -> bool:
        return name in self._fields

    def all(self) -> List[FormField]:
        return list(self._fields.values())

    def get_parent(self) -> Optional["Form"]:
        return self.parent

    def is_root(self) -> bool:
        return self.parent is None

    def get_data(self) -> Any:
        return self._data

    def set_data(self, data: Any) -> "Form":
        event = self.dispatcher.dispatch(FormEvent(self, data), FormEvents.PRE_SET_DATA)
        self._data = event.get_data()
        self.dispatcher.dispatch(FormEvent(self, self._data), FormEvents.POST_SET_DATA)
        return self

    def is_submitted(self) -> bool:
        return self._is_submitted

    def get_submitted(self, name: str, default: Any = None) -> Any:
        """Raw submitted value of a field, mapped or not."""
        return self._submitted.get(name, default)

    def submit(self, payload: Optional[Mapping[str, Any]]) -> "Form":
        """Apply a submitted payload to the bound object."""
        event = self.dispatcher.dispatch(FormEvent(self, dict(payload or {})), FormEvents.PRE_SUBMIT)
        submitted = event.get_data() or {}
        self._submitted = dict(submitted)
        self.errors = []

        for form_field in self._fields.values():
            if form_field.name not in submitted:
                if form_field.required:
                    self.errors.append(f"{form_field.name}: this value is required")
                continue
            if not form_field.mapped or self._data is None:
                continue
            try:
                value = form_field.convert(submitted[form_field.name])
            except (TypeError, ValueError):
                self.errors.append(f"{form_field.name}: invalid {form_field.type} value")
                continue
            setattr(self._data, form_field.name, value)

        self.dispatcher.dispatch(FormEvent(self, self._data), FormEvents.SUBMIT)
        self._is_submitted = True
        self.dispatcher.dispatch(FormEvent(self, self._data), FormEvents.POST_SUBMIT)

        if self.errors:
            logger.debug("[FORM] %s submitted with errors: %s", self.name, self.errors)
        return self

    def is_valid(self) -> bool:
        return self._is_submitted and not self.errors

    def to_dict(self) -> Dict[str, Any]:
        """Serializable view of the form and its current values."""
        fields = []
        for form_field in self._fields.values():
            if "data" in form_field.options:
                value = form_field.options["data"]
            elif form_field.mapped and self._data is not None:
                value = getattr(self._data, form_field.name, None)
            else:
                value = None
            fields.append(
                {
                    "name": form_field.name,
                    "type": form_field.type,
                    "mapped": form_field.mapped,
                    "required": form_field.required,
                    "value": value,
                }
            )
        return {"name": self.name, "fields": fields}
