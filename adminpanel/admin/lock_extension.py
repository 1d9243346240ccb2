"""
Optimistic lock protection for admin edit forms.

The edit form carries the version the object had when it was rendered. On
save, that version is handed to the model manager, which refuses the update
if someone else saved the object in the meantime.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Optional

from adminpanel.admin.extension import AbstractAdminExtension
from adminpanel.config import get_config
from adminpanel.form.events import FormEvent, FormEvents
from adminpanel.form.form import HIDDEN
from adminpanel.logging_utils import get_logger
from adminpanel.model.interfaces import supports_locking

if TYPE_CHECKING:
    from adminpanel.admin.base import AbstractAdmin
    from adminpanel.form.mapper import FormMapper

logger = get_logger(__name__)


def _is_placeholder(data: Any) -> bool:
    """No object bound yet: None or an empty list/dict stand-in."""
    return data is None or (isinstance(data, (list, dict)) and not data)


class LockExtension(AbstractAdminExtension):
    def __init__(self, field_name: Optional[str] = None) -> None:
        self.field_name = field_name or get_config().lock.field_name

    def configure_form_fields(self, form_mapper: "FormMapper") -> None:
        admin = form_mapper.get_admin()
        field_name = self.field_name

        def add_lock_version(event: FormEvent) -> None:
            data = event.get_data()
            form = event.get_form()

            if _is_placeholder(data) or form.get_parent() is not None:
                return

            model_manager = admin.get_model_manager()
            if not supports_locking(model_manager):
                return

            lock_version = model_manager.get_lock_version(data)
            if lock_version is None:
                return

            form.add(field_name, HIDDEN, {"mapped": False, "data": lock_version})

        form_mapper.get_form_builder().add_event_listener(FormEvents.PRE_SET_DATA, add_lock_version)

    def pre_update(self, admin: "AbstractAdmin", obj: Any) -> None:
        if not admin.has_request():
            return

        data = admin.get_request().get(admin.get_uniqid())
        if not isinstance(data, Mapping) or self.field_name not in data:
            logger.debug("[ADMIN][LOCK] No %s submitted for %s", self.field_name, admin.get_code())
            return

        model_manager = admin.get_model_manager()
        if not supports_locking(model_manager):
            return

        model_manager.lock(obj, data[self.field_name])
