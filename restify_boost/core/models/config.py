"""
Scaffold configuration model — loaded from restify-boost.yml.

Every key has a default matching a stock Laravel application, so an
empty (or missing) config file is valid.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ScaffoldConfig(BaseModel):
    """Where the host project keeps things, and how to reach its database."""

    version: int = 1

    # ── Source layout ────────────────────────────────────────────
    app_path: str = "app"
    root_namespace: str = "App"
    repositories_path: str = "app/Restify"
    class_suffix: str = "Repository"
    extension: str = ".php"
    exclude_dirs: list[str] = Field(
        default_factory=lambda: ["vendor", "tests", "node_modules", "storage"]
    )
    # Directory names that conventionally hold repositories; used as the
    # classification root when the primary directory is empty.
    container_dirs: list[str] = Field(default_factory=lambda: ["Restify", "Repositories"])

    # ── Model resolution ─────────────────────────────────────────
    # Sub-namespaces of root_namespace tried in order ("" = the root itself)
    model_namespaces: list[str] = Field(default_factory=lambda: ["Models", ""])

    # ── Database ─────────────────────────────────────────────────
    database_url: str | None = None
    env_file: str = ".env"
