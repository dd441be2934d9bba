"""Main CLI entry point."""

import click
from bookkeep.cli.logging_config import LOG_LEVELS, configure_logging
from bookkeep.database.factories import create_sqlite_database

# Import and register all commands at module level
from bookkeep.cli.commands import (
    account,
    budget,
    category,
    dashboard,
    import_cmd,
    init_categories,
    report,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides BOOKKEEP_DB_PATH environment variable)",
    envvar="BOOKKEEP_DB_PATH",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging level (overrides BOOKKEEP_LOG_LEVEL environment variable)",
    envvar="BOOKKEEP_LOG_LEVEL",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str):
    """Bookkeep - Small-business accounting reports.

    Import the records of your business and get income statements,
    balance sheets, cash flow, IVA and budget reports from them.
    """
    ctx.ensure_object(dict)
    configure_logging(log_level)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
account.register_commands(cli)
budget.register_commands(cli)
category.register_commands(cli)
dashboard.register_commands(cli)
import_cmd.register_commands(cli)
init_categories.register_commands(cli)
report.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
