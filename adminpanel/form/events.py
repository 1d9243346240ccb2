"""
Form lifecycle events and a minimal event dispatcher.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Tuple

if TYPE_CHECKING:
    from adminpanel.form.form import Form


class FormEvents:
    """Names of the events a form dispatches."""

    # Before data is bound; listeners may replace the data or add fields
    PRE_SET_DATA = "form.pre_set_data"
    POST_SET_DATA = "form.post_set_data"
    # Before the submitted payload is applied
    PRE_SUBMIT = "form.pre_submit"
    SUBMIT = "form.submit"
    POST_SUBMIT = "form.post_submit"


@dataclass
class FormEvent:
    form: "Form"
    data: Any

    def get_form(self) -> "Form":
        return self.form

    def get_data(self) -> Any:
        return self.data

    def set_data(self, data: Any) -> None:
        self.data = data


Listener = Callable[[FormEvent], None]


class EventDispatcher:
    """Dispatches form events to listeners ordered by priority."""

    def __init__(self) -> None:
        self._listeners: Dict[str, List[Tuple[int, int, Listener]]] = {}
        self._counter = 0

    def add_listener(self, event_name: str, listener: Listener, priority: int = 0) -> None:
        self._counter += 1
        self._listeners.setdefault(event_name, []).append((priority, self._counter, listener))

    def has_listeners(self, event_name: str) -> bool:
        return bool(self._listeners.get(event_name))

    def get_listeners(self, event_name: str) -> List[Listener]:
        """Listeners for ``event_name``, highest priority first, then registration order."""
        entries = sorted(self._listeners.get(event_name, []), key=lambda e: (-e[0], e[1]))
        return [listener for _, _, listener in entries]

    def dispatch(self, event: FormEvent, event_name: str) -> FormEvent:
        for listener in self.get_listeners(event_name):
            listener(event)
        return event
