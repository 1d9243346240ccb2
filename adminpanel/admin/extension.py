"""Base class for admin extensions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from adminpanel.admin.base import AbstractAdmin
    from adminpanel.form.mapper import FormMapper


class AbstractAdminExtension:
    """
    Hooks into the lifecycle of every admin it is attached to.

    All hooks are no-ops; subclasses override the ones they need.
    """

    def configure_form_fields(self, form_mapper: "FormMapper") -> None:
        pass

    def pre_persist(self, admin: "AbstractAdmin", obj: Any) -> None:
        pass

    def post_persist(self, admin: "AbstractAdmin", obj: Any) -> None:
        pass

    def pre_update(self, admin: "AbstractAdmin", obj: Any) -> None:
        pass

    def post_update(self, admin: "AbstractAdmin", obj: Any) -> None:
        pass

    def pre_remove(self, admin: "AbstractAdmin", obj: Any) -> None:
        pass

    def post_remove(self, admin: "AbstractAdmin", obj: Any) -> None:
        pass
