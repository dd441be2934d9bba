"""Account commands."""

import click
from bookkeep.cli.formatting import format_amount


@click.group()
def account_group():
    """Inspect accounts."""
    pass


@account_group.command("list")
@click.option("--all", "show_all", is_flag=True, help="Include inactive accounts")
@click.pass_context
def list_accounts(ctx, show_all: bool):
    """List accounts with their balances."""
    db = ctx.obj["db"]

    accounts = [acc for acc in db.list_accounts() if show_all or acc.is_active]
    if not accounts:
        click.echo("No accounts found.")
        return

    click.echo("\nAccounts:")
    click.echo("-" * 80)
    for acc in accounts:
        status = "" if acc.is_active else " (inactive)"
        click.echo(
            f"{acc.id:<12} | {acc.name:<25} | {acc.type:<10} | "
            f"{format_amount(acc.balance):>15} {acc.currency}{status}"
        )


def register_commands(cli):
    """Register account commands with main CLI."""
    cli.add_command(account_group, name="account")
