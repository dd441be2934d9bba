"""Budget commands."""

import click
from bookkeep.cli.formatting import format_amount, format_date
from bookkeep.domain.entities import ZERO


@click.group()
def budget_group():
    """Inspect budgets."""
    pass


@budget_group.command("list")
@click.pass_context
def list_budgets(ctx):
    """List budgets with their planned totals."""
    db = ctx.obj["db"]

    budgets = db.list_budgets()
    if not budgets:
        click.echo("No budgets found.")
        return

    click.echo("\nBudgets:")
    click.echo("-" * 80)
    for budget in budgets:
        planned = sum((line.planned_amount for line in budget.categories), ZERO)
        click.echo(
            f"{budget.id:<12} | {budget.name:<25} | "
            f"{format_date(budget.start_date)} to {format_date(budget.end_date)} | "
            f"{format_amount(planned):>14}"
        )


def register_commands(cli):
    """Register budget commands with main CLI."""
    cli.add_command(budget_group, name="budget")
