"""
Tests for the repository generator — PHP rendering of a generation plan.
"""

from pathlib import Path

from restify_boost.core.models.pattern import OrganizationPattern
from restify_boost.core.models.plan import GenerationPlan
from restify_boost.core.models.relationship import RelationshipDeclaration, RelationshipKind
from restify_boost.core.models.schema import ColumnDescriptor
from restify_boost.core.services.generators.repository import (
    generate_repository,
    render_field,
    render_imports,
    render_repository,
)


def _plan(root: Path, **overrides) -> GenerationPlan:
    values = {
        "target_path": root / "app" / "Restify" / "Posts" / "PostRepository.php",
        "pattern": OrganizationPattern.GROUPED_BY_MODEL,
        "class_name": "PostRepository",
        "namespace": "App\\Restify\\Posts",
        "model_name": "Post",
        "model_class": "App\\Models\\Post",
        "table": "posts",
    }
    values.update(overrides)
    return GenerationPlan(**values)


def _relations() -> list[RelationshipDeclaration]:
    return [
        RelationshipDeclaration(
            kind=RelationshipKind.BELONGS_TO,
            name="user",
            model_name="User",
            column="user_id",
            related_class="App\\Models\\User",
        ),
        RelationshipDeclaration(
            kind=RelationshipKind.HAS_MANY,
            name="comments",
            model_name="Comment",
            column="post_id",
        ),
    ]


class TestRenderField:
    def test_required(self):
        assert render_field(ColumnDescriptor(name="title")).strip() == "field('title')->required(),"

    def test_nullable(self):
        line = render_field(ColumnDescriptor(name="body", nullable=True)).strip()
        assert line == "field('body')->nullable(),"

    def test_timestamps_readonly(self):
        line = render_field(ColumnDescriptor(name="created_at", nullable=True)).strip()
        assert line == "field('created_at')->nullable()->readonly(),"
        line = render_field(ColumnDescriptor(name="updated_at")).strip()
        assert line == "field('updated_at')->readonly(),"

    def test_remember_token_never_required(self):
        assert render_field(ColumnDescriptor(name="remember_token")).strip() == "field('remember_token'),"


class TestRenderImports:
    def test_without_relationships(self, tmp_path: Path):
        assert render_imports(_plan(tmp_path)) == [
            "App\\Models\\Post",
            "Binaryk\\LaravelRestify\\Http\\Requests\\RestifyRequest",
            "Binaryk\\LaravelRestify\\Repository",
        ]

    def test_relationship_fields_imported(self, tmp_path: Path):
        imports = render_imports(_plan(tmp_path, relationships=_relations()))
        assert "Binaryk\\LaravelRestify\\Fields\\BelongsTo" in imports
        assert "Binaryk\\LaravelRestify\\Fields\\HasMany" in imports
        assert imports == sorted(imports)


class TestRenderRepository:
    def test_identity_only(self, tmp_path: Path):
        source = render_repository(_plan(tmp_path, include_fields=False))

        assert source.startswith("<?php")
        assert "namespace App\\Restify\\Posts;" in source
        assert "use App\\Models\\Post;" in source
        assert "class PostRepository extends Repository" in source
        assert "public static $model = Post::class;" in source
        assert "id()," in source
        assert "field(" not in source
        assert "include()" not in source

    def test_fields_follow_id(self, tmp_path: Path):
        plan = _plan(tmp_path, fields=[
            ColumnDescriptor(name="title"),
            ColumnDescriptor(name="body", nullable=True),
        ])
        source = render_repository(plan)

        assert source.index("id(),") < source.index("field('title')") < source.index("field('body')")

    def test_include_section(self, tmp_path: Path):
        source = render_repository(_plan(tmp_path, relationships=_relations()))

        assert "public static function include(): array" in source
        assert "BelongsTo::make('user')," in source
        assert "HasMany::make('comments')," in source
        assert source.index("BelongsTo::make") < source.index("HasMany::make")

    def test_braces_balanced(self, tmp_path: Path):
        source = render_repository(_plan(tmp_path, relationships=_relations()))
        assert source.count("{") == source.count("}")


class TestGenerateRepository:
    def test_relative_path(self, tmp_path: Path):
        generated = generate_repository(tmp_path, _plan(tmp_path))
        assert generated.path == "app/Restify/Posts/PostRepository.php"
        assert not generated.overwrite

    def test_overwrite_flag_carried(self, tmp_path: Path):
        generated = generate_repository(tmp_path, _plan(tmp_path, overwrite=True))
        assert generated.overwrite

    def test_reason(self, tmp_path: Path):
        plan = _plan(tmp_path, fields=[ColumnDescriptor(name="title")], relationships=_relations())
        generated = generate_repository(tmp_path, plan)
        assert "grouped-by-model" in generated.reason
        assert "1 field(s)" in generated.reason
        assert "2 relationship(s)" in generated.reason
