"""
Pytest configuration and fixtures for all tests.

Provides a throwaway SQLite database with one versioned and one unversioned
model, plus the admins used by the admin and API tests.
"""

from __future__ import annotations

from typing import Iterator

import pytest
from sqlalchemy import Column, Integer, String, Text, create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from adminpanel.admin.base import AbstractAdmin
from adminpanel.database.models import VersionedMixin
from adminpanel.form.form import TEXT, TEXTAREA
from adminpanel.form.mapper import FormMapper
from adminpanel.model.manager import ModelManager

ModelBase = declarative_base()


class Article(VersionedMixin, ModelBase):
    __tablename__ = "articles"

    id = Column(Integer, primary_key=True)
    title = Column(String(200), nullable=False)
    body = Column(Text, nullable=True)


class Tag(ModelBase):
    __tablename__ = "tags"

    id = Column(Integer, primary_key=True)
    name = Column(String(50), nullable=False)


class ArticleAdmin(AbstractAdmin):
    def configure_form_fields(self, form_mapper: FormMapper) -> None:
        form_mapper.add("title", TEXT, {"required": True})
        form_mapper.add("body", TEXTAREA)


class TagAdmin(AbstractAdmin):
    def configure_form_fields(self, form_mapper: FormMapper) -> None:
        form_mapper.add("name", TEXT, {"required": True})


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "db: marks tests that use the SQLite test database"
    )
    config.addinivalue_line(
        "markers", "api: marks tests that go through the FastAPI app"
    )


@pytest.fixture
def engine(tmp_path) -> Iterator[Engine]:
    """File-backed SQLite engine so separate sessions use separate connections."""
    eng = create_engine(
        f"sqlite:///{tmp_path / 'adminpanel-test.db'}",
        connect_args={"check_same_thread": False},
    )
    ModelBase.metadata.create_all(eng)
    yield eng
    ModelBase.metadata.drop_all(eng)
    eng.dispose()


@pytest.fixture
def session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False)


@pytest.fixture
def db(session_factory: sessionmaker) -> Iterator[Session]:
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def model_manager(db: Session) -> ModelManager:
    return ModelManager(db)


@pytest.fixture
def article_model():
    return Article


@pytest.fixture
def tag_model():
    return Tag


@pytest.fixture
def article_admin_class():
    return ArticleAdmin


@pytest.fixture
def tag_admin_class():
    return TagAdmin


@pytest.fixture
def seeded(session_factory: sessionmaker) -> dict:
    """One article (version 1) and one tag, committed through their own session."""
    with session_factory() as session:
        article = Article(title="Original title", body="Original body")
        tag = Tag(name="python")
        session.add_all([article, tag])
        session.commit()
        return {"article_id": article.id, "tag_id": tag.id}
