"""
Relationship inference — turn a table's schema into fields and relations.

Foreign keys follow Laravel's naming convention (``<token>_id``) and
become ``BelongsTo`` declarations instead of plain fields.  Other tables
pointing back at this one (``<this_table_singular>_id``) become
``HasMany`` declarations.

The primary key ``id`` is never emitted; the renderer always writes its
own ``id()`` field.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol

from restify_boost.adapters.base import SchemaProvider
from restify_boost.core.models.relationship import RelationshipDeclaration, RelationshipKind
from restify_boost.core.models.schema import ColumnDescriptor
from restify_boost.core.services.naming import camel, pluralize, singularize, studly

logger = logging.getLogger(__name__)

PRIMARY_KEY = "id"


class RelatedClassResolver(Protocol):
    def resolve(self, model_name: str) -> str | None: ...


@dataclass
class InferenceResult:
    """Fields and relationships inferred for one table."""

    table: str
    fields: list[ColumnDescriptor] = field(default_factory=list)
    relationships: list[RelationshipDeclaration] = field(default_factory=list)
    table_found: bool = True

    @property
    def foreign_keys(self) -> list[str]:
        return [
            r.column for r in self.relationships
            if r.kind == RelationshipKind.BELONGS_TO
        ]

    def to_dict(self) -> dict:
        return {
            "table": self.table,
            "table_found": self.table_found,
            "fields": [
                {"name": f.name, "nullable": f.nullable} for f in self.fields
            ],
            "relationships": [r.to_dict() for r in self.relationships],
        }


def belongs_to_for(column: ColumnDescriptor) -> RelationshipDeclaration:
    """``user_id`` → BelongsTo ``user`` → ``User``."""
    token = column.token
    if token is None:
        raise ValueError(f"{column.name} is not a foreign key column")
    return RelationshipDeclaration(
        kind=RelationshipKind.BELONGS_TO,
        name=camel(token),
        model_name=studly(singularize(token)),
        column=column.name,
    )


def has_many_for(other_table: str, foreign_key: str) -> RelationshipDeclaration:
    """``comments`` (with ``post_id``) → HasMany ``comments`` → ``Comment``."""
    return RelationshipDeclaration(
        kind=RelationshipKind.HAS_MANY,
        name=camel(pluralize(singularize(other_table))),
        model_name=studly(singularize(other_table)),
        column=foreign_key,
    )


class RelationshipInferencer:
    """Derive plain fields and relationships from a schema provider.

    Args:
        schema: Where tables and columns come from.
        resolver: Optional class resolver; when given, each relationship's
            ``related_class`` is filled in with the first matching class.
    """

    def __init__(self, schema: SchemaProvider, resolver: RelatedClassResolver | None = None):
        self.schema = schema
        self.resolver = resolver

    def infer(self, table: str) -> InferenceResult:
        """Infer fields and relationships for *table*.

        Raises:
            SchemaUnavailableError: The schema cannot be read.
        """
        result = InferenceResult(table=table)

        columns = [ColumnDescriptor.from_column(c) for c in self.schema.list_columns(table)]
        if not columns:
            result.table_found = table in self.schema.list_tables()
            logger.warning(
                "Table '%s' %s — emitting identity field only",
                table,
                "has no columns" if result.table_found else "not found",
            )
            return result

        belongs_to: list[RelationshipDeclaration] = []
        for column in columns:
            if column.name == PRIMARY_KEY:
                continue
            if column.is_foreign_key:
                belongs_to.append(belongs_to_for(column))
            else:
                result.fields.append(column)

        has_many = self._detect_has_many(table)

        result.relationships = belongs_to + has_many
        if self.resolver is not None:
            for rel in result.relationships:
                rel.related_class = self.resolver.resolve(rel.model_name)

        logger.info(
            "Inferred %d field(s), %d belongs-to, %d has-many for '%s'",
            len(result.fields),
            len(belongs_to),
            len(has_many),
            table,
        )
        return result

    def _detect_has_many(self, table: str) -> list[RelationshipDeclaration]:
        foreign_key = f"{singularize(table)}_id"
        found: list[RelationshipDeclaration] = []
        for other in self.schema.list_tables():
            if other == table:
                continue
            if self.schema.has_column(other, foreign_key):
                found.append(has_many_for(other, foreign_key))
        return found
