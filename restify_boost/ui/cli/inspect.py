"""
CLI commands for inspecting a project before generating anything.

Thin wrappers over ``restify_boost.core.use_cases.detect`` and
``restify_boost.core.use_cases.relations``.
"""

from __future__ import annotations

import json
import sys

import click


@click.group()
def inspect() -> None:
    """Inspect — repository layout and schema relationships."""


@inspect.command("pattern")
@click.argument("name", required=False)
@click.option("--module", default=None, help="Module directory for module-based layouts.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def pattern(ctx: click.Context, name: str | None, module: str | None, as_json: bool) -> None:
    """Show the detected repository layout (and where NAME would go)."""
    from restify_boost.core.use_cases.detect import run_detect

    result = run_detect(name, config_path=ctx.obj.get("config_path"), module=module)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        if result.error:
            sys.exit(1)
        return

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    detection = result.detection
    assert detection is not None

    click.secho(f"\n🔍 Layout: {detection.pattern.label}", fg="cyan", bold=True)
    scope = "app tree (primary directory empty)" if detection.fallback_scan else "primary directory"
    click.echo(f"   Repositories found: {detection.total_found} in {scope}")
    for label, count in detection.counts.items():
        click.echo(f"     • {label.replace('_', '-')}: {count}")

    if ctx.obj.get("verbose"):
        for loc in detection.locations:
            click.echo(f"       {loc.path}  [{loc.pattern.label}]")

    click.echo()
    click.echo(f"   {result.class_name} → {detection.target_directory}")
    click.echo(f"   Namespace: {result.namespace}")
    click.echo()


@inspect.command("relations")
@click.argument("table")
@click.option("--database-url", default=None, help="SQLAlchemy URL of the database to reflect.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def relations(ctx: click.Context, table: str, database_url: str | None, as_json: bool) -> None:
    """Show fields and relationships inferred for TABLE."""
    from restify_boost.core.use_cases.relations import run_relations

    result = run_relations(
        table,
        config_path=ctx.obj.get("config_path"),
        database_url=database_url,
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        if result.error:
            sys.exit(1)
        return

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    inference = result.inference
    assert inference is not None

    click.secho(f"\n🗄️  {table}", fg="cyan", bold=True)
    if not inference.table_found:
        click.secho("   Table not found — only id() would be generated.", fg="yellow")
        click.echo()
        return

    click.secho(f"   Fields ({len(inference.fields)}):", fg="white", bold=True)
    for column in inference.fields:
        nullable = " (nullable)" if column.nullable else ""
        click.echo(f"     • {column.name}{nullable}")

    if inference.relationships:
        click.echo()
        click.secho(f"   Relationships ({len(inference.relationships)}):", fg="white", bold=True)
        for rel in inference.relationships:
            target = rel.related_class or "(unresolved)"
            click.echo(f"     • {rel.kind.value} {rel.name} [{rel.column}] → {target}")

    click.echo()
