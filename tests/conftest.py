"""
Shared test fixtures and configuration.
"""

import logging
from pathlib import Path

import pytest
from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    create_engine,
)

_MODEL_SOURCE = """\
<?php

namespace {namespace};

use Illuminate\\Database\\Eloquent\\Model;

class {name} extends Model
{{
{body}}}
"""

_REPOSITORY_SOURCE = """\
<?php

namespace App\\Restify;

class {name} extends Repository
{{
}}
"""


def write_model(root: Path, name: str, subdir: str = "Models", body: str = "") -> Path:
    """Create a minimal Eloquent model file under app/<subdir>."""
    directory = root / "app" / subdir if subdir else root / "app"
    directory.mkdir(parents=True, exist_ok=True)
    namespace = "\\".join(p for p in ("App", subdir.replace("/", "\\")) if p)
    path = directory / f"{name}.php"
    path.write_text(_MODEL_SOURCE.format(namespace=namespace, name=name, body=body))
    return path


def write_repository(root: Path, relative: str) -> Path:
    """Create a repository class file at a path relative to the project root."""
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(_REPOSITORY_SOURCE.format(name=path.stem))
    return path


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    """Keep the developer's environment out of config resolution."""
    for var in (
        "RESTIFY_BOOST_DATABASE_URL",
        "RESTIFY_BOOST_LOG_LEVEL",
        "RESTIFY_BOOST_LOG_FILE",
        "RESTIFY_BOOST_LOG_FILE_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """setup_logging() replaces root handlers; put them back after each test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def laravel_project(tmp_path: Path) -> Path:
    """Return the root of an empty Laravel-shaped project."""
    root = tmp_path / "project"
    (root / "app" / "Models").mkdir(parents=True)
    (root / "artisan").write_text("#!/usr/bin/env php\n")
    return root


@pytest.fixture
def blog_database(tmp_path: Path) -> str:
    """Create a SQLite blog schema and return its SQLAlchemy URL.

    users ← posts ← comments, with comments also pointing at users.
    """
    db_path = tmp_path / "blog.sqlite"
    url = f"sqlite:///{db_path}"

    metadata = MetaData()
    Table(
        "users",
        metadata,
        Column("id", Integer, primary_key=True),
        Column("name", String(255), nullable=False),
        Column("email", String(255), nullable=False),
        Column("email_verified_at", DateTime, nullable=True),
        Column("password", String(255), nullable=False),
        Column("remember_token", String(100), nullable=True),
        Column("created_at", DateTime, nullable=True),
        Column("updated_at", DateTime, nullable=True),
    )
    Table(
        "posts",
        metadata,
        Column("id", Integer, primary_key=True),
        Column("user_id", Integer, ForeignKey("users.id"), nullable=False),
        Column("title", String(255), nullable=False),
        Column("body", Text, nullable=True),
        Column("created_at", DateTime, nullable=True),
        Column("updated_at", DateTime, nullable=True),
    )
    Table(
        "comments",
        metadata,
        Column("id", Integer, primary_key=True),
        Column("post_id", Integer, ForeignKey("posts.id"), nullable=False),
        Column("user_id", Integer, ForeignKey("users.id"), nullable=True),
        Column("body", Text, nullable=False),
    )
    Table("empty_things", metadata, Column("id", Integer, primary_key=True))

    engine = create_engine(url)
    metadata.create_all(engine)
    engine.dispose()
    return url
