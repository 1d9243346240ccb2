from __future__ import annotations

import pytest

from adminpanel import config


@pytest.fixture(autouse=True)
def fresh_config():
    config.reset_config()
    yield
    config.reset_config()


def test_defaults(monkeypatch):
    monkeypatch.delenv("ADMINPANEL_LOCK_PROTECTION", raising=False)
    monkeypatch.delenv("ADMINPANEL_LOCK_FIELD_NAME", raising=False)
    monkeypatch.delenv("ADMINPANEL_DATABASE_URL", raising=False)

    cfg = config.get_config()

    assert cfg.lock.protection is True
    assert cfg.lock.field_name == "_lock_version"
    assert cfg.database.url == "sqlite:///./adminpanel.db"
    assert config.get_config() is cfg


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("ADMINPANEL_LOCK_PROTECTION", "false")
    monkeypatch.setenv("ADMINPANEL_LOCK_FIELD_NAME", "_version_token")
    monkeypatch.setenv("ADMINPANEL_DATABASE_ECHO", "true")

    cfg = config.get_config()

    assert cfg.lock.protection is False
    assert cfg.lock.field_name == "_version_token"
    assert cfg.database.echo is True


def test_lock_extension_reads_field_name_from_config(monkeypatch):
    from adminpanel.admin.lock_extension import LockExtension

    monkeypatch.setenv("ADMINPANEL_LOCK_FIELD_NAME", "_version_token")

    assert LockExtension().field_name == "_version_token"
