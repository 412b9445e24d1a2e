"""
Config check use case — validate restify-boost.yml and the project layout.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from restify_boost.core.config.loader import ConfigError, resolve_database_url
from restify_boost.core.context import load_context
from restify_boost.core.models.config import ScaffoldConfig


@dataclass
class ConfigCheckResult:
    """Result of configuration validation."""

    valid: bool = False
    config: ScaffoldConfig | None = None
    config_path: Path | None = None
    project_root: Path | None = None
    database_configured: bool = False
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "project_root": str(self.project_root) if self.project_root else None,
            "database_configured": self.database_configured,
            "errors": self.errors,
            "warnings": self.warnings,
            "config": self.config.model_dump() if self.config else None,
        }


def check_config(
    config_path: Path | None = None,
    start_dir: Path | None = None,
) -> ConfigCheckResult:
    """Validate scaffold configuration and report issues.

    Args:
        config_path: Optional explicit path to restify-boost.yml.
        start_dir: Directory to locate the project from (default: cwd).

    Returns:
        ConfigCheckResult with validation status and any issues.
    """
    result = ConfigCheckResult()

    try:
        ctx = load_context(config_path, start_dir)
    except ConfigError as e:
        result.errors.append(str(e))
        return result

    config = ctx.config
    result.config = config
    result.config_path = ctx.config_path
    result.project_root = ctx.root

    if ctx.config_path is None:
        result.warnings.append("No restify-boost.yml found, using Laravel defaults.")

    # Semantic checks
    if not config.class_suffix:
        result.errors.append("class_suffix must not be empty.")

    if not config.extension.startswith("."):
        result.errors.append(f"extension must start with a dot, got '{config.extension}'.")

    if not config.model_namespaces:
        result.errors.append("model_namespaces must list at least one namespace.")

    if Path(config.app_path) not in Path(config.repositories_path).parents:
        result.warnings.append(
            f"repositories_path '{config.repositories_path}' is outside "
            f"app_path '{config.app_path}'; namespaces will fall back to "
            f"'{config.root_namespace}'."
        )

    # Check paths exist (relative to project root)
    if not ctx.app_dir.is_dir():
        result.errors.append(f"Application directory does not exist: {config.app_path}")
    elif not ctx.repositories_dir.is_dir():
        result.warnings.append(
            f"Repositories directory does not exist yet: {config.repositories_path}"
        )

    result.database_configured = resolve_database_url(ctx.root, config) is not None
    if not result.database_configured:
        result.warnings.append(
            "No database configured; only --no-fields generation is possible."
        )

    result.valid = len(result.errors) == 0
    return result
