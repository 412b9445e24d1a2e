"""
Class resolver — map PHP class names to files in the host project.

Resolution is an explicit, ordered search: each candidate namespace is
turned into a PSR-4 file path under the application directory and the
first one that exists wins.  Nothing is loaded or executed.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path

from restify_boost.adapters.base import FileSystem
from restify_boost.core.models.config import ScaffoldConfig
from restify_boost.core.services.naming import pluralize, singularize

logger = logging.getLogger(__name__)

# Directories under app/ that never contain Eloquent models
_NON_MODEL_DIRS = frozenset({"Http", "Console", "Exceptions", "Providers"})

_MODEL_BASE_RE = re.compile(
    r"\bextends\s+\\?(?:[\w\\]*\\)?(?:Model|Authenticatable|Pivot|\w+Model)\b"
)


@dataclass(frozen=True)
class Candidate:
    """One candidate location for a class."""

    class_name: str     # fully qualified, e.g. App\Models\User
    path: Path          # absolute file path


@dataclass
class ModelResolution:
    """Outcome of resolving a model name."""

    name: str
    class_name: str
    path: Path | None = None
    found: bool = False
    candidates: list[str] = field(default_factory=list)


class ClassResolver:
    """Resolve class names against the project's PSR-4 layout.

    Args:
        project_root: Absolute path of the Laravel project.
        config: Scaffold configuration (app path, root namespace, model namespaces).
        fs: Filesystem adapter.
    """

    def __init__(self, project_root: Path, config: ScaffoldConfig, fs: FileSystem):
        self.project_root = project_root
        self.config = config
        self.fs = fs

    @property
    def app_dir(self) -> Path:
        return self.project_root / self.config.app_path

    # ── Namespace ↔ path ────────────────────────────────────────

    def namespace_for_directory(self, directory: Path) -> str:
        """``<root>/app/Restify/Posts`` → ``App\\Restify\\Posts``.

        Directories outside the application path keep the root namespace.
        """
        try:
            rel = directory.relative_to(self.app_dir)
        except ValueError:
            return self.config.root_namespace
        return "\\".join([self.config.root_namespace, *rel.parts])

    def path_for_class(self, class_name: str) -> Path:
        """``App\\Models\\User`` → ``<root>/app/Models/User.php``."""
        parts = class_name.strip("\\").split("\\")
        if parts and parts[0] == self.config.root_namespace:
            parts = parts[1:]
        return self.app_dir.joinpath(*parts[:-1], parts[-1] + self.config.extension)

    # ── Lookup ───────────────────────────────────────────────────

    def model_candidates(self, model_name: str) -> list[Candidate]:
        """Candidate model classes, in configured namespace order."""
        found: list[Candidate] = []
        for sub in self.config.model_namespaces:
            namespace = "\\".join(p for p in (self.config.root_namespace, sub) if p)
            class_name = f"{namespace}\\{model_name}"
            found.append(Candidate(class_name=class_name, path=self.path_for_class(class_name)))
        return found

    def resolve(self, model_name: str) -> str | None:
        """First candidate that exists on disk, or None."""
        for candidate in self.model_candidates(model_name):
            if self.fs.exists(candidate.path):
                logger.debug("Resolved %s → %s", model_name, candidate.class_name)
                return candidate.class_name
        return None

    def resolve_model(self, model_name: str) -> ModelResolution:
        """Resolve a model name, falling back to a search of the app tree.

        When several files match, one under a ``Models`` directory is
        preferred.  When nothing matches, the first candidate's class name is
        returned with ``found=False``.
        """
        options = self.model_candidates(model_name)
        result = ModelResolution(
            name=model_name,
            class_name=options[0].class_name if options else model_name,
            candidates=[p.class_name for p in options],
        )

        for candidate in options:
            if self.fs.exists(candidate.path):
                result.class_name = candidate.class_name
                result.path = candidate.path
                result.found = True
                return result

        matches = self._search_models(model_name)
        if matches:
            matches.sort(key=lambda p: (0 if "Models" in p.parts else 1, str(p)))
            chosen = matches[0]
            result.path = chosen
            result.class_name = self.class_for_path(chosen)
            result.found = True
            if len(matches) > 1:
                logger.info(
                    "Several models match '%s', using %s", model_name, result.class_name
                )
            return result

        logger.warning("No model class found for '%s'", model_name)
        return result

    def class_for_path(self, path: Path) -> str:
        """``<root>/app/Models/User.php`` → ``App\\Models\\User``."""
        return "\\".join([self.namespace_for_directory(path.parent), path.stem])

    def _search_models(self, model_name: str) -> list[Path]:
        wanted = {
            model_name.lower(),
            pluralize(model_name).lower(),
            singularize(model_name).lower(),
        }
        found: list[Path] = []
        for path in self.fs.list_files(self.app_dir, f"*{self.config.extension}"):
            rel_dirs = path.relative_to(self.app_dir).parts[:-1]
            if rel_dirs and rel_dirs[0] in _NON_MODEL_DIRS:
                continue
            if path.stem.lower() not in wanted:
                continue
            if _MODEL_BASE_RE.search(self.fs.read_text(path)):
                found.append(path)
        return found
