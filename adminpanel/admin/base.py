"""
Admin: how one model class is edited and saved.
"""

from __future__ import annotations

import copy
import uuid
from typing import Any, List, Optional, Type

from adminpanel.admin.extension import AbstractAdminExtension
from adminpanel.admin.request import AdminRequest
from adminpanel.form.builder import FormBuilder
from adminpanel.form.form import Form
from adminpanel.form.mapper import FormMapper
from adminpanel.logging_utils import get_logger
from adminpanel.model.interfaces import ModelManagerInterface

logger = get_logger(__name__)


class AbstractAdmin:
    """
    Base admin for a single model class.

    Subclasses describe the edit form in ``configure_form_fields``. Attached
    extensions contribute fields and run around every create, update and
    delete.
    """

    def __init__(
        self,
        code: str,
        model_class: Type[Any],
        model_manager: ModelManagerInterface,
        uniqid: Optional[str] = None,
    ) -> None:
        self.code = code
        self.model_class = model_class
        self.model_manager = model_manager
        self._uniqid = uniqid
        self._request: Optional[AdminRequest] = None
        self._extensions: List[AbstractAdminExtension] = []

    def get_code(self) -> str:
        return self.code

    def clone(self) -> "AbstractAdmin":
        """Copy with its own request and uniqid, sharing manager and extensions."""
        admin = copy.copy(self)
        admin._request = None
        admin._uniqid = None
        admin._extensions = list(self._extensions)
        return admin

    def get_uniqid(self) -> str:
        """Token namespacing this admin's inputs in a submitted payload."""
        if self._uniqid is None:
            self._uniqid = "s" + uuid.uuid4().hex[:10]
        return self._uniqid

    def set_uniqid(self, uniqid: str) -> None:
        self._uniqid = uniqid

    def get_model_manager(self) -> ModelManagerInterface:
        return self.model_manager

    # ------------------------------------------------------------------
    # Request
    # ------------------------------------------------------------------

    def set_request(self, request: Optional[AdminRequest]) -> None:
        self._request = request

    def has_request(self) -> bool:
        return self._request is not None

    def get_request(self) -> AdminRequest:
        if self._request is None:
            raise LookupError(f"No request has been set on admin {self.code!r}")
        return self._request

    # ------------------------------------------------------------------
    # Extensions
    # ------------------------------------------------------------------

    def add_extension(self, extension: AbstractAdminExtension) -> None:
        self._extensions.append(extension)

    def get_extensions(self) -> List[AbstractAdminExtension]:
        return list(self._extensions)

    def has_extension(self, extension_class: Type[AbstractAdminExtension]) -> bool:
        return any(isinstance(ext, extension_class) for ext in self._extensions)

    # ------------------------------------------------------------------
    # Forms
    # ------------------------------------------------------------------

    def configure_form_fields(self, form_mapper: FormMapper) -> None:
        """Describe the edit form. Override in subclasses."""

    def get_form_builder(self) -> FormBuilder:
        form_builder = FormBuilder(self.get_uniqid())
        form_mapper = FormMapper(form_builder, self)

        self.configure_form_fields(form_mapper)
        for extension in self._extensions:
            extension.configure_form_fields(form_mapper)

        return form_builder

    def get_form(self, obj: Any) -> Form:
        return self.get_form_builder().get_form(obj)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def get_object(self, object_id: Any) -> Optional[Any]:
        return self.model_manager.find(self.model_class, object_id)

    def id(self, obj: Any) -> Optional[str]:
        return self.model_manager.get_identifier(obj)

    def create(self, obj: Any) -> Any:
        for extension in self._extensions:
            extension.pre_persist(self, obj)

        self.model_manager.create(obj)

        for extension in self._extensions:
            extension.post_persist(self, obj)

        logger.info("[ADMIN][%s] Created %s", self.code, self.id(obj))
        return obj

    def update(self, obj: Any) -> Any:
        for extension in self._extensions:
            extension.pre_update(self, obj)

        self.model_manager.update(obj)

        for extension in self._extensions:
            extension.post_update(self, obj)

        logger.info("[ADMIN][%s] Updated %s", self.code, self.id(obj))
        return obj

    def delete(self, obj: Any) -> None:
        object_id = self.id(obj)
        for extension in self._extensions:
            extension.pre_remove(self, obj)

        self.model_manager.delete(obj)

        for extension in self._extensions:
            extension.post_remove(self, obj)

        logger.info("[ADMIN][%s] Deleted %s", self.code, object_id)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, model={self.model_class.__name__})"
