"""
Project context — "which Laravel project are we working on, and how is it laid out."

Every use case starts by building a ``ProjectContext``: the project root,
the validated scaffold configuration, and the filesystem adapter bound
to the configured exclusions.  Entry points (CLI, tests) build it once
per invocation; nothing is cached across invocations.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from restify_boost.adapters.base import FileSystem, SchemaProvider, SchemaUnavailableError
from restify_boost.adapters.filesystem import LocalFileSystem
from restify_boost.core.config.loader import (
    find_config_file,
    find_project_root,
    load_config,
    resolve_database_url,
)
from restify_boost.core.models.config import ScaffoldConfig

logger = logging.getLogger(__name__)


@dataclass
class ProjectContext:
    """Resolved project root + configuration + filesystem."""

    root: Path
    config: ScaffoldConfig
    fs: FileSystem
    config_path: Path | None = None

    @property
    def app_dir(self) -> Path:
        return self.root / self.config.app_path

    @property
    def repositories_dir(self) -> Path:
        return self.root / self.config.repositories_path


def load_context(
    config_path: Path | None = None,
    start_dir: Path | None = None,
    fs: FileSystem | None = None,
) -> ProjectContext:
    """Build the context for the project containing *start_dir*.

    Raises:
        ConfigError: If a config file exists but is invalid.
    """
    if config_path is None:
        config_path = find_config_file(start_dir)
    root = find_project_root(start_dir, config_path)
    config = load_config(config_path)
    logger.debug("Project root: %s", root)
    return ProjectContext(
        root=root,
        config=config,
        fs=fs or LocalFileSystem(config.exclude_dirs),
        config_path=config_path,
    )


def open_schema_provider(ctx: ProjectContext, database_url: str | None = None) -> SchemaProvider:
    """SQLAlchemy provider for the project's configured database.

    Raises:
        SchemaUnavailableError: No database is configured anywhere.
    """
    from restify_boost.adapters.database import SqlAlchemySchemaProvider

    url = resolve_database_url(ctx.root, ctx.config, database_url)
    if url is None:
        raise SchemaUnavailableError(
            "No database configured. Pass --database-url, set "
            "RESTIFY_BOOST_DATABASE_URL, or add DB_* keys to "
            f"{ctx.config.env_file}."
        )
    return SqlAlchemySchemaProvider(url)
