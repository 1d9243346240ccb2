"""
Admin-facing facade over a FormBuilder.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

from adminpanel.form.builder import FormBuilder
from adminpanel.form.form import TEXT

if TYPE_CHECKING:
    from adminpanel.admin.base import AbstractAdmin


class FormMapper:
    """Lets an admin and its extensions describe the edit form."""

    def __init__(self, form_builder: FormBuilder, admin: "AbstractAdmin") -> None:
        self.form_builder = form_builder
        self.admin = admin

    def add(self, name: str, type: str = TEXT, options: Optional[Dict[str, Any]] = None) -> "FormMapper":
        self.form_builder.add(name, type, options)
        return self

    def get_form_builder(self) -> FormBuilder:
        return self.form_builder

    def get_admin(self) -> "AbstractAdmin":
        return self.admin
