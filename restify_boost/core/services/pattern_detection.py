"""
Pattern detection — decide where a new repository class belongs.

Looks at the repository classes a project already has, classifies each
one by the shape of its path, and lets the most common layout decide
the destination of the next one.  Ties break towards the more specific
layout: grouped-by-model > domain-driven > module-based > flat.

Pure logic — reads the filesystem, never writes.
"""

from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path

from restify_boost.adapters.base import FileSystem
from restify_boost.core.models.config import ScaffoldConfig
from restify_boost.core.models.pattern import (
    DOMAINS_DIR,
    OrganizationPattern,
    PatternDetection,
    RepositoryLocation,
)
from restify_boost.core.services.naming import is_plural_of, model_name_from_class

logger = logging.getLogger(__name__)


def classify_segments(
    segments: tuple[str, ...] | list[str],
    known_models: set[str] | frozenset[str],
) -> tuple[OrganizationPattern, str | None]:
    """Classify a repository path by its directory segments.

    Args:
        segments: Directory names between the classification root and the
            class file (``("Users",)`` for ``root/Users/UserRepository.php``).
        known_models: Model names known in the project.

    Returns:
        (pattern, module) — module is the joined segments for the
        module-based layout, otherwise None.
    """
    segments = tuple(segments)

    if not segments:
        return OrganizationPattern.FLAT, None

    if segments[0] == DOMAINS_DIR and len(segments) >= 2:
        return OrganizationPattern.DOMAIN_DRIVEN, None

    if len(segments) == 1 and any(is_plural_of(segments[0], m) for m in known_models):
        return OrganizationPattern.GROUPED_BY_MODEL, None

    return OrganizationPattern.MODULE_BASED, "/".join(segments)


def pick_pattern(counts: Counter[OrganizationPattern]) -> OrganizationPattern:
    """Most matches wins; equal counts fall back to precedence."""
    if not counts:
        return OrganizationPattern.FLAT
    return max(counts, key=lambda p: (counts[p], p.precedence))


def _most_common(values: list, key=str):
    """Most frequent value; ties go to the smallest by *key*."""
    tally = Counter(values)
    return sorted(tally, key=lambda v: (-tally[v], key(v)))[0]


class PathPatternDetector:
    """Detect a project's repository layout.

    Args:
        project_root: Absolute path of the Laravel project.
        config: Scaffold configuration.
        fs: Filesystem adapter.
    """

    def __init__(self, project_root: Path, config: ScaffoldConfig, fs: FileSystem):
        self.project_root = project_root
        self.config = config
        self.fs = fs

    @property
    def primary_dir(self) -> Path:
        return self.project_root / self.config.repositories_path

    @property
    def app_dir(self) -> Path:
        return self.project_root / self.config.app_path

    @property
    def _class_glob(self) -> str:
        return f"*{self.config.class_suffix}{self.config.extension}"

    def detect(self, new_class_name: str, module: str | None = None) -> PatternDetection:
        """Decide the pattern and target directory for *new_class_name*.

        Args:
            new_class_name: Class base name (``CommentRepository``) or model
                name (``Comment``).
            module: Explicit module for the module-based layout.

        Returns:
            PatternDetection. Never fails: a project without repositories
            (or without the scanned directories) yields the flat layout in
            the primary directory.
        """
        model_name = model_name_from_class(new_class_name, self.config.class_suffix)
        locations, fallback = self.scan()

        if not locations:
            logger.info("No existing repositories found, using flat layout")
            return PatternDetection(
                pattern=OrganizationPattern.FLAT,
                target_directory=self.primary_dir,
                fallback_scan=fallback,
            )

        counts: Counter[OrganizationPattern] = Counter(loc.pattern for loc in locations)
        pattern = pick_pattern(counts)
        winners = [loc for loc in locations if loc.pattern == pattern]

        base = _most_common([loc.base_dir for loc in winners])
        if pattern == OrganizationPattern.MODULE_BASED and not module:
            module = _most_common([loc.module for loc in winners if loc.module])

        target = pattern.target_directory(base, model_name, module)

        logger.info(
            "Detected %s layout from %d repositories → %s",
            pattern.label,
            len(locations),
            target,
        )
        return PatternDetection(
            pattern=pattern,
            target_directory=target,
            locations=locations,
            counts={p.value: n for p, n in sorted(counts.items(), key=lambda kv: -kv[0].precedence)},
            fallback_scan=fallback,
        )

    def scan(self) -> tuple[list[RepositoryLocation], bool]:
        """Find and classify existing repositories.

        Returns:
            (locations, fallback) — fallback is True when the primary
            directory held nothing and the whole app tree was scanned.
        """
        files = self._list_classes(self.primary_dir)
        fallback = False
        if not files:
            logger.debug("Primary directory empty, scanning %s", self.app_dir)
            files = self._list_classes(self.app_dir)
            fallback = True

        model_names = {
            model_name_from_class(f.stem, self.config.class_suffix) for f in files
        }
        known_models = frozenset(model_names | self._model_file_names())

        locations: list[RepositoryLocation] = []
        for path in files:
            root = self._classification_root(path) if fallback else self.primary_dir
            segments = path.parent.relative_to(root).parts
            pattern, module = classify_segments(segments, known_models)
            locations.append(
                RepositoryLocation(
                    path=path,
                    model_name=model_name_from_class(path.stem, self.config.class_suffix),
                    pattern=pattern,
                    base_dir=root,
                    module=module,
                )
            )
            logger.debug("Classified %s as %s", path, pattern.label)

        return locations, fallback

    def _list_classes(self, directory: Path) -> list[Path]:
        """Repository class files under *directory*.

        Restify's own abstract base (``Repository.php``) matches the glob
        but is not a generated class.
        """
        return [
            p for p in self.fs.list_files(directory, self._class_glob)
            if p.stem != self.config.class_suffix
        ]

    def _classification_root(self, path: Path) -> Path:
        """Nearest container directory above *path*, else the app directory.

        Paths under ``app/Domains/<Name>/`` always classify from the app
        directory so they read as domain-driven.
        """
        rel = path.parent.relative_to(self.app_dir).parts
        if len(rel) >= 2 and rel[0] == DOMAINS_DIR:
            return self.app_dir
        for parent in path.parents:
            if parent == self.app_dir or self.app_dir not in parent.parents:
                break
            if parent.name in self.config.container_dirs:
                return parent
        return self.app_dir

    def _model_file_names(self) -> set[str]:
        models_dir = self.app_dir / "Models"
        return {
            p.stem for p in self.fs.list_files(models_dir, f"*{self.config.extension}")
        }
