"""Category commands."""

import click
from bookkeep.domain.category import CategoryService


@click.group()
def category_group():
    """Manage categories."""
    pass


@category_group.command("list")
@click.option(
    "--type",
    "category_type",
    type=click.Choice(["income", "expense"]),
    help="Only show categories of this type",
)
@click.pass_context
def list_categories(ctx, category_type: str | None):
    """List categories."""
    db = ctx.obj["db"]
    service = CategoryService(db)

    categories = service.list_categories(category_type=category_type)
    if not categories:
        click.echo("No categories found.")
        return

    click.echo("\nCategories:")
    click.echo("-" * 80)
    for cat in categories:
        status = "" if cat.is_active else " (inactive)"
        click.echo(f"{cat.id:<30} | {cat.name:<25} | {cat.type:<8} | {cat.color}{status}")


@category_group.command("create")
@click.argument("name")
@click.option(
    "--type",
    "category_type",
    type=click.Choice(["income", "expense"]),
    required=True,
    help="Category type",
)
@click.option("--color", default="#cccccc", show_default=True, help="Display color")
@click.option("--id", "category_id", help="Category ID (derived from name if omitted)")
@click.pass_context
def create_category(ctx, name: str, category_type: str, color: str, category_id: str | None):
    """Create a category.

    Examples:
        bookkeep category create "Consultoría" --type income
        bookkeep category create "Viajes" --type expense --color "#00BCD4"
    """
    db = ctx.obj["db"]
    service = CategoryService(db)

    try:
        new_id = service.create_category(
            name=name, category_type=category_type, color=color, category_id=category_id
        )
        click.echo(f"Created category '{name}' (ID: {new_id})")
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(category_group, name="category")
