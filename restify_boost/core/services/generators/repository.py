"""
Repository generator — render a GenerationPlan as a Restify repository class.

Field code depends only on a column's name and nullability; column
types never change the emitted code.
"""

from __future__ import annotations

from pathlib import Path

from restify_boost.core.models.plan import GenerationPlan
from restify_boost.core.models.relationship import RelationshipKind
from restify_boost.core.models.schema import ColumnDescriptor
from restify_boost.core.models.template import GeneratedFile

_REQUEST_IMPORT = "Binaryk\\LaravelRestify\\Http\\Requests\\RestifyRequest"
_REPOSITORY_IMPORT = "Binaryk\\LaravelRestify\\Repository"
_RELATION_IMPORTS = {
    RelationshipKind.BELONGS_TO: "Binaryk\\LaravelRestify\\Fields\\BelongsTo",
    RelationshipKind.HAS_MANY: "Binaryk\\LaravelRestify\\Fields\\HasMany",
}

_READONLY_COLUMNS = frozenset({"created_at", "updated_at", "deleted_at", "email_verified_at"})
_NEVER_REQUIRED = frozenset({"created_at", "updated_at", "deleted_at", "remember_token"})

_INDENT = " " * 12

_TEMPLATE = """\
<?php

declare(strict_types=1);

namespace {namespace};

{imports}

class {class_name} extends Repository
{{
    public static $model = {model_base}::class;

    public function fields(RestifyRequest $request): array
    {{
        return [
{fields}
        ];
    }}{include}
}}
"""

_INCLUDE_TEMPLATE = """

    public static function include(): array
    {{
        return [
{relationships}
        ];
    }}"""


def render_field(column: ColumnDescriptor) -> str:
    """One ``field('<name>')`` line with its modifiers."""
    code = f"field('{column.name}')"
    readonly = column.name in _READONLY_COLUMNS

    if column.nullable:
        code += "->nullable()"
    if readonly:
        code += "->readonly()"
    if not column.nullable and not readonly and column.name not in _NEVER_REQUIRED:
        code += "->required()"

    return f"{_INDENT}{code},"


def render_imports(plan: GenerationPlan) -> list[str]:
    """Sorted, de-duplicated ``use`` targets."""
    imports = {_REQUEST_IMPORT, _REPOSITORY_IMPORT, plan.model_class.strip("\\")}
    for rel in plan.relationships:
        imports.add(_RELATION_IMPORTS[rel.kind])
    return sorted(imports)


def render_repository(plan: GenerationPlan) -> str:
    """Full PHP source for the planned repository."""
    fields = [f"{_INDENT}id(),"] + [render_field(c) for c in plan.fields]

    include = ""
    if plan.relationships:
        lines = [
            f"{_INDENT}{rel.kind.value}::make('{rel.name}'),"
            for rel in plan.relationships
        ]
        include = _INCLUDE_TEMPLATE.format(relationships="\n".join(lines))

    return _TEMPLATE.format(
        namespace=plan.namespace,
        imports="\n".join(f"use {imp};" for imp in render_imports(plan)),
        class_name=plan.class_name,
        model_base=plan.model_class.rsplit("\\", 1)[-1],
        fields="\n".join(fields),
        include=include,
    )


def generate_repository(project_root: Path, plan: GenerationPlan) -> GeneratedFile:
    """Render *plan* into a GeneratedFile.

    Args:
        project_root: Project root; the file path is made relative to it.
        plan: The computed generation plan.

    Returns:
        GeneratedFile for the repository class.
    """
    try:
        rel_path = plan.target_path.relative_to(project_root)
    except ValueError:
        rel_path = plan.target_path

    parts = []
    if plan.fields:
        parts.append(f"{len(plan.fields)} field(s)")
    if plan.relationships:
        parts.append(f"{len(plan.relationships)} relationship(s)")
    detail = f" with {', '.join(parts)}" if parts else ""

    return GeneratedFile(
        path=rel_path.as_posix(),
        content=render_repository(plan),
        overwrite=plan.overwrite,
        reason=f"Generated {plan.class_name} for {plan.model_name} ({plan.pattern.label} layout){detail}",
    )
