"""
Detect use case — report a project's repository layout.

Ties together config loading and the pattern detector, and shows where
a repository for a given name would be created.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from restify_boost.core.config.loader import ConfigError
from restify_boost.core.context import load_context
from restify_boost.core.models.pattern import PatternDetection
from restify_boost.core.services.class_resolver import ClassResolver
from restify_boost.core.services.naming import repository_class_name
from restify_boost.core.services.pattern_detection import PathPatternDetector

logger = logging.getLogger(__name__)

# Name used when the caller only wants the layout, not a concrete target
_PLACEHOLDER_NAME = "Example"


@dataclass
class DetectResult:
    """Result of the detect use case."""

    detection: PatternDetection | None = None
    project_root: Path | None = None
    class_name: str = ""
    namespace: str = ""
    error: str | None = None

    def to_dict(self) -> dict:
        result: dict = {}
        if self.error:
            result["error"] = self.error
            return result

        result["project_root"] = str(self.project_root)
        result["class_name"] = self.class_name
        result["namespace"] = self.namespace

        if self.detection:
            result["detection"] = self.detection.to_dict()

        return result


def run_detect(
    name: str | None = None,
    config_path: Path | None = None,
    start_dir: Path | None = None,
    module: str | None = None,
) -> DetectResult:
    """Detect the repository layout and the target for *name*.

    Args:
        name: Class or model name to place (default: a placeholder).
        config_path: Optional explicit path to restify-boost.yml.
        start_dir: Directory to locate the project from (default: cwd).
        module: Explicit module for the module-based layout.

    Returns:
        DetectResult with the detection findings.
    """
    result = DetectResult()

    try:
        ctx = load_context(config_path, start_dir)
    except ConfigError as e:
        result.error = str(e)
        return result
    result.project_root = ctx.root

    class_name = repository_class_name(name or _PLACEHOLDER_NAME, ctx.config.class_suffix)
    detection = PathPatternDetector(ctx.root, ctx.config, ctx.fs).detect(class_name, module)

    result.detection = detection
    result.class_name = class_name
    result.namespace = ClassResolver(ctx.root, ctx.config, ctx.fs).namespace_for_directory(
        detection.target_directory
    )
    return result
