"""
Generate use case — scaffold one Restify repository class.

Ties together config loading, model resolution, pattern detection,
relationship inference, rendering, and the guarded write.

The plan and the rendered file are computed in full before anything is
written.  When the destination already exists the write is gated behind
``force`` or an affirmative answer from the ``confirm`` callback.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from restify_boost.adapters.base import SchemaProvider, SchemaUnavailableError
from restify_boost.core.config.loader import ConfigError
from restify_boost.core.context import ProjectContext, load_context, open_schema_provider
from restify_boost.core.models.pattern import PatternDetection
from restify_boost.core.models.plan import GenerationPlan
from restify_boost.core.models.template import GeneratedFile
from restify_boost.core.services.class_resolver import ClassResolver, ModelResolution
from restify_boost.core.services.generators.repository import generate_repository as render
from restify_boost.core.services.naming import (
    model_name_from_class,
    repository_class_name,
    table_name_for_model,
)
from restify_boost.core.services.pattern_detection import PathPatternDetector
from restify_boost.core.services.relationships import RelationshipInferencer

logger = logging.getLogger(__name__)

ConfirmFn = Callable[[Path], bool]

_TABLE_PROPERTY_RE = re.compile(r"""protected\s+\$table\s*=\s*['"]([^'"]+)['"]""")


@dataclass
class GenerateResult:
    """Result of the generate use case."""

    plan: GenerationPlan | None = None
    file: GeneratedFile | None = None
    detection: PatternDetection | None = None
    project_root: Path | None = None
    model_found: bool = False
    written: bool = False
    aborted: bool = False
    dry_run: bool = False
    warnings: list[str] = field(default_factory=list)
    error: str | None = None

    def to_dict(self) -> dict:
        result: dict = {}
        if self.error:
            result["error"] = self.error
            return result

        result["project_root"] = str(self.project_root)
        result["written"] = self.written
        result["aborted"] = self.aborted
        result["dry_run"] = self.dry_run
        result["model_found"] = self.model_found
        result["warnings"] = self.warnings

        if self.plan:
            result["plan"] = self.plan.to_dict()
        if self.file:
            result["file"] = self.file.model_dump()

        return result


def build_plan(
    ctx: ProjectContext,
    name: str,
    *,
    schema: SchemaProvider | None = None,
    include_fields: bool = True,
    table: str | None = None,
    module: str | None = None,
) -> tuple[GenerationPlan, PatternDetection, ModelResolution]:
    """Compute the full generation plan for *name*.

    Args:
        ctx: Project context.
        name: New class base name (``CommentRepository``) or model name.
        schema: Schema provider; required when *include_fields* is True.
        include_fields: False skips relationship inference entirely.
        table: Explicit table; defaults to the model's ``$table`` or the
            snake-case plural of the model name.
        module: Explicit module for the module-based layout.

    Raises:
        SchemaUnavailableError: Fields were requested but the schema
            cannot be read.
    """
    suffix = ctx.config.class_suffix
    model_name = model_name_from_class(name, suffix)
    class_name = repository_class_name(name, suffix)

    resolver = ClassResolver(ctx.root, ctx.config, ctx.fs)
    model = resolver.resolve_model(model_name)

    if table is None:
        table = _table_from_model(ctx, model) or table_name_for_model(model_name)

    detection = PathPatternDetector(ctx.root, ctx.config, ctx.fs).detect(class_name, module)
    target_path = detection.target_directory / f"{class_name}{ctx.config.extension}"

    plan = GenerationPlan(
        target_path=target_path,
        pattern=detection.pattern,
        overwrite=ctx.fs.exists(target_path),
        class_name=class_name,
        namespace=resolver.namespace_for_directory(detection.target_directory),
        model_name=model_name,
        model_class=model.class_name,
        table=table,
        include_fields=include_fields,
    )

    if include_fields:
        if schema is None:
            raise SchemaUnavailableError("No schema provider available for field inference")
        inferred = RelationshipInferencer(schema, resolver).infer(table)
        plan.fields = inferred.fields
        plan.relationships = inferred.relationships

    return plan, detection, model


def _table_from_model(ctx: ProjectContext, model: ModelResolution) -> str | None:
    """Read an explicit ``protected $table = '...'`` from the model file."""
    if not model.found or model.path is None:
        return None
    match = _TABLE_PROPERTY_RE.search(ctx.fs.read_text(model.path))
    return match.group(1) if match else None


def generate_repository(
    name: str,
    *,
    config_path: Path | None = None,
    start_dir: Path | None = None,
    database_url: str | None = None,
    force: bool = False,
    include_fields: bool = True,
    table: str | None = None,
    module: str | None = None,
    dry_run: bool = False,
    confirm: ConfirmFn | None = None,
    schema: SchemaProvider | None = None,
) -> GenerateResult:
    """Scaffold a repository class for *name*.

    Args:
        name: Class base name or model name.
        config_path: Optional explicit path to restify-boost.yml.
        start_dir: Directory to locate the project from (default: cwd).
        database_url: Override for the database to reflect.
        force: Overwrite an existing file without asking.
        include_fields: False emits only the identity field.
        table: Explicit table name.
        module: Explicit module for the module-based layout.
        dry_run: Render but don't write.
        confirm: Called with the destination when it already exists and
            *force* is off; a falsy answer (or no callback) aborts.
        schema: Pre-built schema provider (skips database URL resolution).

    Returns:
        GenerateResult describing the plan and what happened.
    """
    result = GenerateResult(dry_run=dry_run)

    if not name or not name.strip():
        result.error = "A class name is required."
        return result

    try:
        ctx = load_context(config_path, start_dir)
    except ConfigError as e:
        result.error = str(e)
        return result
    result.project_root = ctx.root

    owned_schema = None
    try:
        if include_fields and schema is None:
            schema = owned_schema = open_schema_provider(ctx, database_url)
        plan, detection, model = build_plan(
            ctx,
            name,
            schema=schema,
            include_fields=include_fields,
            table=table,
            module=module,
        )
    except SchemaUnavailableError as e:
        result.error = str(e)
        return result
    finally:
        if owned_schema is not None:
            owned_schema.close()

    result.plan = plan
    result.detection = detection
    result.model_found = model.found
    if not model.found:
        result.warnings.append(
            f"Model '{model.name}' not found; assuming {model.class_name}"
        )

    generated = render(ctx.root, plan)
    result.file = generated

    if dry_run:
        return result

    if plan.destination_exists and not force:
        if confirm is None or not confirm(plan.target_path):
            logger.info("Overwrite of %s declined", plan.target_path)
            result.aborted = True
            return result

    try:
        ctx.fs.write_text(plan.target_path, generated.content)
    except OSError as e:
        result.error = f"Cannot write {generated.path}: {e}"
        return result
    result.written = True
    logger.info("Generated %s", generated.path)
    return result
