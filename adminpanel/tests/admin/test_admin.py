from __future__ import annotations

from unittest.mock import create_autospec

import pytest

from adminpanel.admin.base import AbstractAdmin
from adminpanel.admin.extension import AbstractAdminExtension
from adminpanel.admin.lock_extension import LockExtension
from adminpanel.admin.request import AdminRequest
from adminpanel.form.form import HIDDEN
from adminpanel.model.manager import ModelManager
from adminpanel.utils.optimistic_lock import ConflictError


class RecordingExtension(AbstractAdminExtension):
    def __init__(self, calls):
        self.calls = calls

    def pre_persist(self, admin, obj):
        self.calls.append("pre_persist")

    def post_persist(self, admin, obj):
        self.calls.append("post_persist")

    def pre_update(self, admin, obj):
        self.calls.append("pre_update")

    def post_update(self, admin, obj):
        self.calls.append("post_update")

    def pre_remove(self, admin, obj):
        self.calls.append("pre_remove")

    def post_remove(self, admin, obj):
        self.calls.append("post_remove")


def test_uniqid_is_generated_once_per_admin(article_model):
    admin = AbstractAdmin("article", article_model, create_autospec(ModelManager, instance=True))

    uniqid = admin.get_uniqid()

    assert uniqid.startswith("s")
    assert len(uniqid) == 11
    assert admin.get_uniqid() == uniqid


def test_request_accessors(article_model):
    admin = AbstractAdmin("article", article_model, create_autospec(ModelManager, instance=True))

    assert not admin.has_request()
    with pytest.raises(LookupError):
        admin.get_request()

    request = AdminRequest({"x": 1})
    admin.set_request(request)
    assert admin.has_request()
    assert admin.get_request() is request


def test_clone_has_its_own_request_and_uniqid(article_model):
    admin = AbstractAdmin("article", article_model, create_autospec(ModelManager, instance=True), uniqid="s0")
    admin.add_extension(LockExtension())
    admin.set_request(AdminRequest())

    copy = admin.clone()

    assert not copy.has_request()
    assert copy.get_uniqid() != "s0"
    assert copy.get_model_manager() is admin.get_model_manager()
    assert copy.has_extension(LockExtension)
    copy.add_extension(AbstractAdminExtension())
    assert len(admin.get_extensions()) == 1


@pytest.mark.db
def test_lifecycle_hooks_run_around_manager_calls(db, model_manager, article_admin_class, article_model):
    calls = []
    admin = article_admin_class("article", article_model, model_manager)
    admin.add_extension(RecordingExtension(calls))

    article = article_model(title="Draft")
    admin.create(article)
    article.title = "Final"
    admin.update(article)
    admin.delete(article)

    assert calls == ["pre_persist", "post_persist", "pre_update", "post_update", "pre_remove", "post_remove"]
    assert db.query(article_model).count() == 0


@pytest.mark.db
def test_edit_form_contains_admin_fields_and_lock_version(model_manager, article_admin_class, article_model, seeded):
    admin = article_admin_class("article", article_model, model_manager, uniqid="s42")
    admin.add_extension(LockExtension())

    form = admin.get_form(admin.get_object(seeded["article_id"]))

    assert form.name == "s42"
    assert [f.name for f in form.all()] == ["title", "body", "_lock_version"]
    assert form.get("_lock_version").type == HIDDEN
    assert form.get("_lock_version").options == {"mapped": False, "data": 1}


@pytest.mark.db
def test_edit_form_of_unversioned_model_has_no_lock_version(model_manager, tag_admin_class, tag_model, seeded):
    admin = tag_admin_class("tag", tag_model, model_manager)
    admin.add_extension(LockExtension())

    form = admin.get_form(admin.get_object(seeded["tag_id"]))

    assert not form.has("_lock_version")


@pytest.mark.db
def test_update_with_stale_submitted_version_is_refused(
    db, model_manager, session_factory, article_admin_class, article_model, seeded
):
    admin = article_admin_class("article", article_model, model_manager, uniqid="s42")
    admin.add_extension(LockExtension())
    article = admin.get_object(seeded["article_id"])
    rendered_version = admin.get_form(article).get("_lock_version").options["data"]

    # Another administrator saves first
    with session_factory() as other:
        other_article = other.get(article_model, seeded["article_id"])
        other_article.title = "Saved elsewhere"
        other.commit()

    db.expire_all()
    article = admin.get_object(seeded["article_id"])
    admin.set_request(AdminRequest({"s42": {"title": "Mine", "_lock_version": str(rendered_version)}}))
    form = admin.get_form(article)
    form.submit(admin.get_request().get("s42"))

    with pytest.raises(ConflictError):
        admin.update(article)

    db.rollback()
    with session_factory() as check:
        assert check.get(article_model, seeded["article_id"]).title == "Saved elsewhere"


@pytest.mark.db
def test_update_with_current_submitted_version_succeeds(
    db, model_manager, session_factory, article_admin_class, article_model, seeded
):
    admin = article_admin_class("article", article_model, model_manager, uniqid="s42")
    admin.add_extension(LockExtension())
    article = admin.get_object(seeded["article_id"])
    admin.set_request(AdminRequest({"s42": {"title": "Mine", "_lock_version": "1"}}))
    admin.get_form(article).submit(admin.get_request().get("s42"))

    admin.update(article)

    with session_factory() as check:
        stored = check.get(article_model, seeded["article_id"])
        assert stored.title == "Mine"
        assert stored.version == 2
