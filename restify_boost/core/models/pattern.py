"""
Organization pattern models — how a project lays out its repositories.

A project organizes its generated repository classes in one of four
conventions.  Each existing repository file is classified into one of
them, and the winning convention decides where a new class is placed.
"""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel, Field

from restify_boost.core.services.naming import pluralize

# Directory name that marks the domain-driven convention
DOMAINS_DIR = "Domains"


class OrganizationPattern(StrEnum):
    """The four supported repository layouts."""

    GROUPED_BY_MODEL = "grouped_by_model"   # root/<PluralModel>/<Name>.php
    DOMAIN_DRIVEN = "domain_driven"         # root/Domains/<Model>/<Name>.php
    MODULE_BASED = "module_based"           # root/<Module>/<Name>.php
    FLAT = "flat"                           # root/<Name>.php

    @property
    def precedence(self) -> int:
        """Tie-break rank — higher wins when match counts are equal."""
        return _PRECEDENCE[self]

    @property
    def label(self) -> str:
        return self.value.replace("_", "-")

    def target_directory(
        self,
        base: Path,
        model_name: str,
        module: str | None = None,
    ) -> Path:
        """Apply this pattern's template to a model name.

        Args:
            base: The classification root the pattern is anchored on.
            model_name: StudlyCase model name (e.g. ``Comment``).
            module: Module path for the module-based pattern. When absent,
                module-based degrades to the base directory.
        """
        if self is OrganizationPattern.GROUPED_BY_MODEL:
            return base / pluralize(model_name)
        if self is OrganizationPattern.DOMAIN_DRIVEN:
            return base / DOMAINS_DIR / model_name
        if self is OrganizationPattern.MODULE_BASED and module:
            return base.joinpath(*module.split("/"))
        return base


_PRECEDENCE: dict[OrganizationPattern, int] = {
    OrganizationPattern.GROUPED_BY_MODEL: 4,
    OrganizationPattern.DOMAIN_DRIVEN: 3,
    OrganizationPattern.MODULE_BASED: 2,
    OrganizationPattern.FLAT: 1,
}


class RepositoryLocation(BaseModel):
    """An existing repository class discovered in the host project.

    Attributes:
        path:       Absolute path of the class file.
        model_name: Model inferred from the file name (``UserRepository`` → ``User``).
        pattern:    Layout the file's path matches.
        base_dir:   Classification root the pattern is anchored on.
        module:     Module path, only for module-based locations.
    """

    path: Path
    model_name: str
    pattern: OrganizationPattern
    base_dir: Path
    module: str | None = None

    model_config = {"frozen": True}


class PatternDetection(BaseModel):
    """Outcome of scanning a project for its repository layout."""

    pattern: OrganizationPattern = OrganizationPattern.FLAT
    target_directory: Path
    locations: list[RepositoryLocation] = Field(default_factory=list)
    counts: dict[str, int] = Field(default_factory=dict)
    fallback_scan: bool = False   # primary directory was empty

    @property
    def total_found(self) -> int:
        return len(self.locations)

    def to_dict(self) -> dict:
        return {
            "pattern": self.pattern.value,
            "target_directory": str(self.target_directory),
            "counts": self.counts,
            "fallback_scan": self.fallback_scan,
            "locations": [
                {
                    "path": str(loc.path),
                    "model": loc.model_name,
                    "pattern": loc.pattern.value,
                    "module": loc.module,
                }
                for loc in self.locations
            ],
        }
