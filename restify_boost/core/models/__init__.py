"""
Domain models — Pydantic types for the scaffolder.

All models are re-exported here for convenient access:

    from restify_boost.core.models import GenerationPlan, OrganizationPattern
"""

from restify_boost.core.models.config import ScaffoldConfig
from restify_boost.core.models.pattern import (
    OrganizationPattern,
    PatternDetection,
    RepositoryLocation,
)
from restify_boost.core.models.plan import GenerationPlan
from restify_boost.core.models.relationship import RelationshipDeclaration, RelationshipKind
from restify_boost.core.models.schema import ColumnDescriptor, ColumnInfo, ColumnRole
from restify_boost.core.models.template import GeneratedFile

__all__ = [
    # schema.py
    "ColumnDescriptor",
    "ColumnInfo",
    "ColumnRole",
    # template.py
    "GeneratedFile",
    # plan.py
    "GenerationPlan",
    # pattern.py
    "OrganizationPattern",
    "PatternDetection",
    # relationship.py
    "RelationshipDeclaration",
    "RelationshipKind",
    "RepositoryLocation",
    # config.py
    "ScaffoldConfig",
]
