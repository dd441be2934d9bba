"""JSON record import command."""

import click
from bookkeep.domain.record_import import RecordImportService


@click.command("import")
@click.argument("json_file", type=click.Path(exists=True))
@click.pass_context
def import_records(ctx, json_file: str):
    """Import records from a JSON export file.

    The file is a JSON object with optional lists named transactions,
    accounts, categories, clients, suppliers, invoices, bills and budgets.
    Records whose id is already stored are skipped.
    """
    db = ctx.obj["db"]
    service = RecordImportService(db)

    try:
        result = service.import_file(json_file)
        click.echo(f"\nImport complete:")
        click.echo(f"  Imported: {result['imported']} records")
        for collection, count in result["by_collection"].items():
            if count:
                click.echo(f"    {collection}: {count}")
        click.echo(f"  Skipped: {result['skipped']} duplicates")
        if result["errors"]:
            click.echo(f"  Errors: {len(result['errors'])}")
            for error in result["errors"]:
                click.echo(f"    {error}", err=True)
    except (ValueError, FileNotFoundError) as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)


def register_commands(cli):
    """Register import command with main CLI."""
    cli.add_command(import_records)
