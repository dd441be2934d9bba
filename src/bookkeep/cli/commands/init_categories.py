"""Initialize default categories."""

import click
from bookkeep.domain.category import DEFAULT_CATEGORIES, CategoryService


@click.command("init-categories")
@click.pass_context
def init_categories(ctx):
    """Create the default income and expense categories."""
    db = ctx.obj["db"]
    service = CategoryService(db)

    if service.list_categories():
        click.echo("Categories already exist.")
        return

    click.echo("Creating default categories...")

    created = 0
    errors = 0
    for name, category_type, color in DEFAULT_CATEGORIES:
        try:
            service.create_category(name=name, category_type=category_type, color=color)
            created += 1
        except ValueError as e:
            click.echo(f"Warning: Could not create category '{name}': {e}", err=True)
            errors += 1

    if errors == 0:
        click.echo(f"Successfully created {created} categories.")
    else:
        click.echo(f"Created {created} categories with {errors} errors.")


def register_commands(cli):
    """Register init-categories command with main CLI."""
    cli.add_command(init_categories)
