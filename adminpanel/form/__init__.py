from .builder import FormBuilder
from .events import EventDispatcher, FormEvent, FormEvents
from .form import CHECKBOX, HIDDEN, INTEGER, TEXT, TEXTAREA, Form, FormField
from .mapper import FormMapper

__all__ = [
    "CHECKBOX",
    "EventDispatcher",
    "Form",
    "FormBuilder",
    "FormEvent",
    "FormEvents",
    "FormField",
    "FormMapper",
    "HIDDEN",
    "INTEGER",
    "TEXT",
    "TEXTAREA",
]
