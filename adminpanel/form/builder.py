"""
Collects field definitions and event listeners, then builds a Form.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from adminpanel.form.events import EventDispatcher, Listener
from adminpanel.form.form import TEXT, Form


class FormBuilder:
    def __init__(self, name: str, dispatcher: Optional[EventDispatcher] = None) -> None:
        self.name = name
        self.dispatcher = dispatcher or EventDispatcher()
        self._fields: List[Tuple[str, str, Dict[str, Any]]] = []

    def add(self, name: str, type: str = TEXT, options: Optional[Dict[str, Any]] = None) -> "FormBuilder":
        self._fields.append((name, type, dict(options or {})))
        return self

    def add_event_listener(self, event_name: str, listener: Listener, priority: int = 0) -> "FormBuilder":
        self.dispatcher.add_listener(event_name, listener, priority)
        return self

    def get_event_dispatcher(self) -> EventDispatcher:
        return self.dispatcher

    def get_form(self, data: Any = None, parent: Optional[Form] = None) -> Form:
        """Build the form and bind ``data`` to it (dispatching PRE_SET_DATA)."""
        form = Form(self.name, dispatcher=self.dispatcher, parent=parent)
        for name, field_type, options in self._fields:
            form.add(name, field_type, options)
        form.set_data(data)
        return form
