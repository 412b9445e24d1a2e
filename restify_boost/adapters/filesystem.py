"""
Filesystem adapter — local disk access for the scaffolder.
"""

from __future__ import annotations

import logging
from pathlib import Path

from restify_boost.adapters.base import FileSystem

logger = logging.getLogger(__name__)


class LocalFileSystem(FileSystem):
    """File operations against the real filesystem.

    Args:
        exclude_dirs: Directory names never descended into while listing.
    """

    def __init__(self, exclude_dirs: list[str] | None = None):
        self._exclude = frozenset(exclude_dirs or ())

    def list_files(self, directory: Path, pattern: str, recursive: bool = True) -> list[Path]:
        if not directory.is_dir():
            logger.debug("Directory not found, nothing to list: %s", directory)
            return []

        candidates = directory.rglob(pattern) if recursive else directory.glob(pattern)
        files: list[Path] = []
        for path in candidates:
            rel_parts = path.relative_to(directory).parts[:-1]
            if any(part in self._exclude or part.startswith(".") for part in rel_parts):
                continue
            if path.is_file():
                files.append(path)
        return sorted(files)

    def exists(self, path: Path) -> bool:
        return path.exists()

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8", errors="ignore")

    def write_text(self, path: Path, content: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        logger.info("Written %d bytes to %s", len(content), path)
