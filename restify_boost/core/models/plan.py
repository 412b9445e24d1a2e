"""
Generation plan — everything needed to render one repository class.

The plan is computed in full before any file is touched, so a failure
during inference never leaves a half-written file behind.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from restify_boost.core.models.pattern import OrganizationPattern
from restify_boost.core.models.relationship import RelationshipDeclaration, RelationshipKind
from restify_boost.core.models.schema import ColumnDescriptor


class GenerationPlan(BaseModel):
    """The sole artifact handed to the repository renderer."""

    # ── Destination ──────────────────────────────────────────────
    target_path: Path
    pattern: OrganizationPattern = OrganizationPattern.FLAT
    overwrite: bool = False          # destination already exists

    # ── Class identity ───────────────────────────────────────────
    class_name: str
    namespace: str
    model_name: str
    model_class: str
    table: str

    # ── Contents ─────────────────────────────────────────────────
    include_fields: bool = True
    fields: list[ColumnDescriptor] = Field(default_factory=list)
    relationships: list[RelationshipDeclaration] = Field(default_factory=list)

    @property
    def destination_exists(self) -> bool:
        return self.overwrite

    @property
    def belongs_to(self) -> list[RelationshipDeclaration]:
        return [r for r in self.relationships if r.kind == RelationshipKind.BELONGS_TO]

    @property
    def has_many(self) -> list[RelationshipDeclaration]:
        return [r for r in self.relationships if r.kind == RelationshipKind.HAS_MANY]

    def to_dict(self) -> dict:
        return {
            "target_path": str(self.target_path),
            "pattern": self.pattern.value,
            "overwrite": self.overwrite,
            "class_name": self.class_name,
            "namespace": self.namespace,
            "model": self.model_name,
            "model_class": self.model_class,
            "table": self.table,
            "include_fields": self.include_fields,
            "fields": [
                {"name": f.name, "nullable": f.nullable} for f in self.fields
            ],
            "relationships": [r.to_dict() for r in self.relationships],
        }
