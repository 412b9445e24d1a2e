"""Adapters — bindings to the filesystem and the database schema.

Public re-exports for convenient access.
"""

from restify_boost.adapters.base import FileSystem, SchemaProvider, SchemaUnavailableError
from restify_boost.adapters.filesystem import LocalFileSystem

__all__ = [
    "FileSystem",
    "LocalFileSystem",
    "SchemaProvider",
    "SchemaUnavailableError",
]
