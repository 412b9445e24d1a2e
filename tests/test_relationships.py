"""
Tests for relationship inference — fields, BelongsTo, HasMany.
"""

from pathlib import Path

import pytest

from restify_boost.adapters.base import SchemaUnavailableError
from restify_boost.adapters.database import InMemorySchemaProvider, SqlAlchemySchemaProvider
from restify_boost.adapters.filesystem import LocalFileSystem
from restify_boost.core.models.config import ScaffoldConfig
from restify_boost.core.models.relationship import RelationshipKind
from restify_boost.core.models.schema import ColumnDescriptor, ColumnInfo
from restify_boost.core.services.class_resolver import ClassResolver
from restify_boost.core.services.relationships import (
    RelationshipInferencer,
    belongs_to_for,
    has_many_for,
)
from tests.conftest import write_model


def _blog_schema() -> InMemorySchemaProvider:
    return InMemorySchemaProvider({
        "users": ["id", "name", ("email_verified_at", True)],
        "posts": ["id", "user_id", "title", ("body", True)],
        "comments": ["id", "post_id", ("user_id", True), "body"],
    })


# ── Declaration builders ─────────────────────────────────────────────


class TestDeclarations:
    def test_belongs_to(self):
        rel = belongs_to_for(ColumnDescriptor.from_column(ColumnInfo(name="user_id")))
        assert rel.kind == RelationshipKind.BELONGS_TO
        assert rel.name == "user"
        assert rel.model_name == "User"
        assert rel.column == "user_id"

    def test_belongs_to_compound_token(self):
        rel = belongs_to_for(ColumnDescriptor.from_column(ColumnInfo(name="author_user_id")))
        assert rel.name == "authorUser"
        assert rel.model_name == "AuthorUser"

    def test_has_many(self):
        rel = has_many_for("comments", "post_id")
        assert rel.kind == RelationshipKind.HAS_MANY
        assert rel.name == "comments"
        assert rel.model_name == "Comment"
        assert rel.column == "post_id"

    def test_has_many_compound_table(self):
        rel = has_many_for("blog_posts", "user_id")
        assert rel.name == "blogPosts"
        assert rel.model_name == "BlogPost"


# ── Inference ────────────────────────────────────────────────────────


class TestInfer:
    def test_foreign_key_becomes_belongs_to(self):
        result = RelationshipInferencer(_blog_schema()).infer("posts")

        assert [f.name for f in result.fields] == ["title", "body"]
        belongs = [r for r in result.relationships if r.kind == RelationshipKind.BELONGS_TO]
        assert [r.name for r in belongs] == ["user"]
        assert result.foreign_keys == ["user_id"]

    def test_id_never_emitted(self):
        result = RelationshipInferencer(_blog_schema()).infer("users")
        assert "id" not in [f.name for f in result.fields]
        assert all(r.column != "id" for r in result.relationships)

    def test_foreign_key_not_a_field(self):
        result = RelationshipInferencer(_blog_schema()).infer("comments")
        names = [f.name for f in result.fields]
        assert "post_id" not in names
        assert "user_id" not in names
        assert names == ["body"]

    def test_has_many_from_other_tables(self):
        result = RelationshipInferencer(_blog_schema()).infer("posts")
        has_many = [r for r in result.relationships if r.kind == RelationshipKind.HAS_MANY]
        assert [(r.name, r.model_name, r.column) for r in has_many] == [
            ("comments", "Comment", "post_id"),
        ]

    def test_belongs_to_listed_before_has_many(self):
        result = RelationshipInferencer(_blog_schema()).infer("posts")
        kinds = [r.kind for r in result.relationships]
        assert kinds == [RelationshipKind.BELONGS_TO, RelationshipKind.HAS_MANY]

    def test_users_has_many_posts_and_comments(self):
        result = RelationshipInferencer(_blog_schema()).infer("users")
        assert [r.name for r in result.relationships] == ["posts", "comments"]
        assert all(r.kind == RelationshipKind.HAS_MANY for r in result.relationships)

    def test_nullability_preserved(self):
        result = RelationshipInferencer(_blog_schema()).infer("posts")
        nullable = {f.name: f.nullable for f in result.fields}
        assert nullable == {"title": False, "body": True}

    def test_missing_table(self):
        result = RelationshipInferencer(_blog_schema()).infer("invoices")
        assert not result.table_found
        assert result.fields == []
        assert result.relationships == []

    def test_table_without_columns(self):
        schema = InMemorySchemaProvider({"things": []})
        result = RelationshipInferencer(schema).infer("things")
        assert result.table_found
        assert result.fields == []

    def test_unresolved_without_resolver(self):
        result = RelationshipInferencer(_blog_schema()).infer("posts")
        assert all(r.related_class is None for r in result.relationships)

    def test_to_dict(self):
        data = RelationshipInferencer(_blog_schema()).infer("posts").to_dict()
        assert data["table"] == "posts"
        assert data["fields"][0] == {"name": "title", "nullable": False}
        assert data["relationships"][0]["kind"] == "BelongsTo"


class TestInferWithResolver:
    def _resolver(self, root: Path) -> ClassResolver:
        config = ScaffoldConfig()
        return ClassResolver(root, config, LocalFileSystem(config.exclude_dirs))

    def test_related_class_resolved(self, laravel_project: Path):
        write_model(laravel_project, "User")
        result = RelationshipInferencer(_blog_schema(), self._resolver(laravel_project)).infer("posts")

        by_name = {r.name: r for r in result.relationships}
        assert by_name["user"].related_class == "App\\Models\\User"
        assert by_name["user"].is_resolved
        assert by_name["comments"].related_class is None

    def test_related_class_in_app_root(self, laravel_project: Path):
        write_model(laravel_project, "Comment", subdir="")
        result = RelationshipInferencer(_blog_schema(), self._resolver(laravel_project)).infer("posts")

        by_name = {r.name: r for r in result.relationships}
        assert by_name["comments"].related_class == "App\\Comment"


# ── Against a real database ──────────────────────────────────────────


class TestInferFromDatabase:
    def test_posts(self, blog_database: str):
        with SqlAlchemySchemaProvider(blog_database) as schema:
            result = RelationshipInferencer(schema).infer("posts")

        assert [f.name for f in result.fields] == ["title", "body", "created_at", "updated_at"]
        assert [(r.kind.value, r.name) for r in result.relationships] == [
            ("BelongsTo", "user"),
            ("HasMany", "comments"),
        ]

    def test_users(self, blog_database: str):
        with SqlAlchemySchemaProvider(blog_database) as schema:
            result = RelationshipInferencer(schema).infer("users")

        # tables reflect in name order: comments, empty_things, posts, users
        assert [r.name for r in result.relationships] == ["comments", "posts"]

    def test_unreachable_database(self, tmp_path: Path):
        schema = SqlAlchemySchemaProvider(f"sqlite:///{tmp_path / 'missing.sqlite'}")
        with pytest.raises(SchemaUnavailableError):
            RelationshipInferencer(schema).infer("posts")


class TestIrregularTableNames:
    def test_ie_table_has_many(self):
        schema = InMemorySchemaProvider({
            "movies": ["id", "title"],
            "reviews": ["id", "movie_id", "body"],
        })
        result = RelationshipInferencer(schema).infer("movies")

        assert [(r.kind, r.name, r.column) for r in result.relationships] == [
            (RelationshipKind.HAS_MANY, "reviews", "movie_id"),
        ]

    def test_ie_table_as_related_model(self):
        schema = InMemorySchemaProvider({
            "movies": ["id", "title"],
            "reviews": ["id", "movie_id", "body"],
        })
        result = RelationshipInferencer(schema).infer("reviews")

        assert result.relationships[0].model_name == "Movie"

    def test_has_many_model_from_es_table(self):
        rel = has_many_for("buses", "route_id")
        assert rel.name == "buses"
        assert rel.model_name == "Bus"


def test_belongs_to_rejects_plain_column():
    with pytest.raises(ValueError, match="title"):
        belongs_to_for(ColumnDescriptor(name="title"))
