"""
Relationship models — proposed BelongsTo / HasMany declarations.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class RelationshipKind(StrEnum):
    BELONGS_TO = "BelongsTo"
    HAS_MANY = "HasMany"


class RelationshipDeclaration(BaseModel):
    """A relation to render into the generated repository.

    ``related_class`` stays None when no matching class exists in the
    project; the renderer then relies on Restify's own resolution.
    """

    kind: RelationshipKind
    name: str                        # relation name, e.g. "user" / "comments"
    model_name: str                  # candidate related model, e.g. "User"
    column: str = ""                 # foreign key column that produced it
    related_class: str | None = None

    @property
    def is_resolved(self) -> bool:
        return self.related_class is not None

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "name": self.name,
            "model": self.model_name,
            "column": self.column,
            "related_class": self.related_class,
        }
