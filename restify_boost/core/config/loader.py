"""
Configuration loader — reads restify-boost.yml into the config model.

This is the primary entry point for loading scaffold configuration.
It reads YAML, validates against the Pydantic schema, and returns a
typed ``ScaffoldConfig``.  A project without a config file gets the
stock Laravel defaults.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from sqlalchemy.engine import URL

from restify_boost.core.models.config import ScaffoldConfig

logger = logging.getLogger(__name__)

# Default config filename
CONFIG_FILE = "restify-boost.yml"

# Marker file of a Laravel application root
ARTISAN_FILE = "artisan"

DATABASE_URL_ENV = "RESTIFY_BOOST_DATABASE_URL"


class ConfigError(Exception):
    """Raised when scaffold configuration is invalid or unreadable."""


def _walk_up(start_dir: Path | None, filename: str) -> Path | None:
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / filename
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for restify-boost.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to restify-boost.yml, or None if not found.
    """
    return _walk_up(start_dir, CONFIG_FILE)


def find_project_root(
    start_dir: Path | None = None,
    config_path: Path | None = None,
) -> Path:
    """Locate the Laravel project root.

    Precedence: directory of the config file > nearest directory with an
    ``artisan`` file > the start directory itself.
    """
    if config_path is None:
        config_path = find_config_file(start_dir)
    if config_path is not None:
        return config_path.parent.resolve()

    artisan = _walk_up(start_dir, ARTISAN_FILE)
    if artisan is not None:
        return artisan.parent

    return (start_dir or Path.cwd()).resolve()


def load_config(path: Path | None = None) -> ScaffoldConfig:
    """Load and validate scaffold configuration.

    Args:
        path: Explicit path to restify-boost.yml.  None means "no config
            file", which yields the defaults.

    Returns:
        Validated ScaffoldConfig.

    Raises:
        ConfigError: If the file is missing, unreadable, or invalid.
    """
    if path is None:
        logger.debug("No %s, using defaults", CONFIG_FILE)
        return ScaffoldConfig()

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading scaffold config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return ScaffoldConfig()

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    # The YAML may wrap everything under a "scaffold" key or be flat
    if "scaffold" in data and isinstance(data["scaffold"], dict):
        data = {**data["scaffold"], **{k: v for k, v in data.items() if k != "scaffold"}}

    try:
        config = ScaffoldConfig.model_validate(data)
    except Exception as e:
        raise ConfigError(f"Invalid scaffold configuration: {e}") from e

    logger.info("Loaded scaffold config from %s", path)
    return config


def parse_env_file(path: Path) -> dict[str, str]:
    """Parse a .env file into a key/value dict.

    Handles:
    - KEY=value
    - KEY="value"
    - KEY='value'
    - export KEY=value
    - Comments (#)
    - Empty lines
    """
    result: dict[str, str] = {}
    if not path.is_file():
        return result

    try:
        content = path.read_text(encoding="utf-8")
    except OSError:
        return result

    for line in content.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        # Strip optional 'export'
        if line.startswith("export "):
            line = line[7:].strip()

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip()
        value = value.strip()

        # Remove surrounding quotes
        if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
            value = value[1:-1]

        result[key] = value

    return result


def resolve_database_url(
    project_root: Path,
    config: ScaffoldConfig,
    override: str | None = None,
) -> str | URL | None:
    """Pick the database to reflect.

    Precedence: explicit override (CLI flag) > RESTIFY_BOOST_DATABASE_URL
    env var > ``database_url`` in config > Laravel's ``.env`` DB_* keys.

    Returns:
        A SQLAlchemy URL (string or URL object), or None if nothing is
        configured.
    """
    if override:
        return override

    from_env = os.environ.get(DATABASE_URL_ENV)
    if from_env:
        return from_env

    if config.database_url:
        return config.database_url

    from restify_boost.adapters.database import database_url_from_laravel_env

    env = parse_env_file(project_root / config.env_file)
    url = database_url_from_laravel_env(env, project_root)
    if url is not None:
        logger.debug("Using database from %s", config.env_file)
    return url
