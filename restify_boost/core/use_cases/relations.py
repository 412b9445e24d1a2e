"""
Relations use case — show what would be inferred for a table.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from restify_boost.adapters.base import SchemaProvider, SchemaUnavailableError
from restify_boost.core.config.loader import ConfigError
from restify_boost.core.context import load_context, open_schema_provider
from restify_boost.core.services.class_resolver import ClassResolver
from restify_boost.core.services.relationships import InferenceResult, RelationshipInferencer

logger = logging.getLogger(__name__)


@dataclass
class RelationsResult:
    """Result of the relations use case."""

    inference: InferenceResult | None = None
    project_root: Path | None = None
    error: str | None = None

    def to_dict(self) -> dict:
        if self.error:
            return {"error": self.error}
        result: dict = {"project_root": str(self.project_root)}
        if self.inference:
            result["inference"] = self.inference.to_dict()
        return result


def run_relations(
    table: str,
    config_path: Path | None = None,
    start_dir: Path | None = None,
    database_url: str | None = None,
    schema: SchemaProvider | None = None,
) -> RelationsResult:
    """Infer fields and relationships for *table* without generating anything."""
    result = RelationsResult()

    try:
        ctx = load_context(config_path, start_dir)
    except ConfigError as e:
        result.error = str(e)
        return result
    result.project_root = ctx.root

    owned = None
    try:
        if schema is None:
            schema = owned = open_schema_provider(ctx, database_url)
        resolver = ClassResolver(ctx.root, ctx.config, ctx.fs)
        result.inference = RelationshipInferencer(schema, resolver).infer(table)
    except SchemaUnavailableError as e:
        result.error = str(e)
    finally:
        if owned is not None:
            owned.close()

    return result
