"""Dashboard command."""

import click
from bookkeep.cli.formatting import (
    TABLE_WIDTH,
    echo_row,
    echo_title,
    format_amount,
    format_date,
    format_percent,
)
from bookkeep.domain.entities import DashboardPeriod, TransactionType
from bookkeep.domain.report import ReportService
from bookkeep.utils.date_parser import parse_date


@click.command("dashboard")
@click.option(
    "--period",
    type=click.Choice([period.value for period in DashboardPeriod]),
    default=DashboardPeriod.MONTH.value,
    show_default=True,
    help="Look-back window for the totals and breakdowns",
)
@click.option("--as-of", help="Reference date (defaults to today)")
@click.pass_context
def dashboard(ctx, period: str, as_of: str | None):
    """Show an overview of the business."""
    service = ReportService(ctx.obj["db"])

    today = None
    if as_of:
        try:
            today = parse_date(as_of)
        except ValueError as e:
            click.echo(f"Error: Invalid date: {e}", err=True)
            ctx.exit(1)

    board = service.dashboard(period=period, today=today)
    comparison = board.comparison
    current = comparison.current_range

    echo_title(f"Dashboard: {current.start} to {current.end}")
    click.echo(
        f"{'Income':<20} {format_amount(comparison.current.total_income):>20} "
        f"{format_percent(comparison.income_change):>12}"
    )
    click.echo(
        f"{'Expenses':<20} {format_amount(comparison.current.total_expenses):>20} "
        f"{format_percent(comparison.expenses_change):>12}"
    )
    click.echo(
        f"{'Net income':<20} {format_amount(comparison.current.net_income):>20} "
        f"{format_percent(comparison.net_income_change):>12}"
    )
    click.echo("-" * TABLE_WIDTH)
    echo_row("Total balance", board.total_balance)
    echo_row(f"Pending invoices ({board.pending_invoices.count})", board.pending_invoices.total)
    echo_row(f"Pending bills ({board.pending_bills.count})", board.pending_bills.total)

    for title, rows in (("Income", board.breakdown.income), ("Expenses", board.breakdown.expenses)):
        rows = [row for row in rows if row.amount]
        if rows:
            echo_title(f"{title} by Category")
            for row in rows:
                echo_row(row.name, row.amount)

    echo_title("Last Months")
    for point in board.monthly_series:
        click.echo(
            f"{point.label:<6} {format_amount(point.income):>20} "
            f"{format_amount(point.expenses):>20}"
        )

    echo_title("Recent Transactions")
    if not board.recent_transactions:
        click.echo("No transactions found.")
    for txn in board.recent_transactions:
        sign = "+" if txn.type == TransactionType.INCOME else "-"
        description = txn.description[:40]
        click.echo(
            f"{format_date(txn.date):<12} {description:<40} "
            f"{sign}{format_amount(txn.amount):>18}"
        )


def register_commands(cli):
    """Register dashboard command with main CLI."""
    cli.add_command(dashboard)
