"""
CLI commands for scaffolding.

Thin wrappers over ``restify_boost.core.use_cases.generate``.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click


@click.group()
def make() -> None:
    """Scaffold — generate Restify classes."""


@make.command("repository")
@click.argument("name")
@click.option("--force", is_flag=True, help="Overwrite an existing file without asking.")
@click.option("--no-fields", is_flag=True, help="Skip schema inference; emit only id().")
@click.option("--table", default=None, help="Table to read (default: derived from the model).")
@click.option("--module", default=None, help="Module directory for module-based layouts.")
@click.option("--database-url", default=None, help="SQLAlchemy URL of the database to reflect.")
@click.option("--dry-run", is_flag=True, help="Print the generated class, don't write it.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def repository(
    ctx: click.Context,
    name: str,
    force: bool,
    no_fields: bool,
    table: str | None,
    module: str | None,
    database_url: str | None,
    dry_run: bool,
    as_json: bool,
) -> None:
    """Generate a repository class for NAME (e.g. Post or PostRepository).

    Examples:

        restify-boost make repository Post

        restify-boost make repository Comment --no-fields

        restify-boost make repository Invoice --module Billing --dry-run
    """
    from restify_boost.core.use_cases.generate import generate_repository

    def _confirm(path: Path) -> bool:
        if as_json:
            return False  # no prompt in machine mode; --force is required
        return click.confirm(f"⚠️  {path} already exists. Overwrite?", default=False)

    result = generate_repository(
        name,
        config_path=ctx.obj.get("config_path"),
        database_url=database_url,
        force=force,
        include_fields=not no_fields,
        table=table,
        module=module,
        dry_run=dry_run,
        confirm=_confirm,
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        if result.error:
            sys.exit(1)
        return

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    plan = result.plan
    generated = result.file
    assert plan is not None and generated is not None

    for warning in result.warnings:
        click.secho(f"⚠️  {warning}", fg="yellow")

    if dry_run:
        click.secho(f"📝 [dry-run] {generated.path}", fg="cyan", bold=True)
        click.echo()
        click.echo(generated.content)
        return

    if result.aborted:
        click.secho("⊘ Aborted — nothing written.", fg="yellow")
        return

    quiet = ctx.obj.get("quiet", False)
    click.secho(f"✅ {plan.class_name} created", fg="green", bold=True)
    if quiet:
        return

    click.echo(f"   File:      {generated.path}")
    click.echo(f"   Namespace: {plan.namespace}")
    click.echo(f"   Model:     {plan.model_class}")
    click.echo(f"   Layout:    {plan.pattern.label}")

    if plan.include_fields:
        click.echo()
        click.secho(f"   Fields ({len(plan.fields) + 1}):", fg="white", bold=True)
        click.echo("     • id")
        for column in plan.fields:
            nullable = " (nullable)" if column.nullable else ""
            click.echo(f"     • {column.name}{nullable}")

    if plan.relationships:
        click.echo()
        click.secho(f"   Relationships ({len(plan.relationships)}):", fg="white", bold=True)
        for rel in plan.relationships:
            target = rel.related_class or "(auto)"
            click.echo(f"     • {rel.kind.value} {rel.name} → {target}")

    click.echo()
    click.secho("   Next steps:", fg="cyan")
    click.echo("     1. Review the generated repository")
    click.echo("     2. Register it in your RestifyServiceProvider or routes")
    click.echo("     3. Add validation rules, authorization and custom logic")
    click.echo()
