"""
Adapter base — the contracts between the scaffolder core and the outside world.

The core engines never read a database or walk a directory themselves.
They talk to a ``SchemaProvider`` and a ``FileSystem``, both of which are
synchronous and side-effect free from the core's perspective.

To add a new source of schema metadata:
    1. Subclass SchemaProvider
    2. Implement name, list_tables, list_columns
    3. Raise SchemaUnavailableError on any connection/reflection failure
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from restify_boost.core.models.schema import ColumnInfo


class SchemaUnavailableError(Exception):
    """Raised when the database schema cannot be read."""


class SchemaProvider(ABC):
    """Read-only database table/column metadata."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Identifier shown in logs (e.g. 'sqlalchemy', 'memory')."""

    @abstractmethod
    def list_tables(self) -> list[str]:
        """All table names, in a stable order."""

    @abstractmethod
    def list_columns(self, table: str) -> list[ColumnInfo]:
        """Columns of *table* in native order.

        Returns an empty list when the table does not exist.
        """

    def has_column(self, table: str, column: str) -> bool:
        return any(c.name == column for c in self.list_columns(table))

    def close(self) -> None:
        """Release any held connections."""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"


class FileSystem(ABC):
    """The file operations the scaffolder needs."""

    @abstractmethod
    def list_files(self, directory: Path, pattern: str, recursive: bool = True) -> list[Path]:
        """Files under *directory* matching the glob *pattern*, sorted.

        A missing directory yields an empty list.
        """

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Whether *path* exists."""

    @abstractmethod
    def is_dir(self, path: Path) -> bool:
        """Whether *path* is an existing directory."""

    @abstractmethod
    def read_text(self, path: Path) -> str:
        """Read *path* as UTF-8 text."""

    @abstractmethod
    def write_text(self, path: Path, content: str) -> None:
        """Write *content* to *path*, creating parent directories."""
