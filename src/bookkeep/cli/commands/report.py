"""Report commands."""

from datetime import date

import click
from bookkeep.cli.date_filters import (
    date_range_options,
    period_flags_from,
    resolve_cli_date_range,
    resolve_report_range,
)
from bookkeep.cli.error_handling import handle_domain_error
from bookkeep.cli.formatting import (
    TABLE_WIDTH,
    echo_row,
    echo_title,
    format_amount,
    format_percent,
    format_range,
)
from bookkeep.domain.entities import (
    BillStatus,
    CategoryAmount,
    DateRange,
    InvoiceStatus,
    TaxCategory,
)
from bookkeep.domain.report import ReportService
from bookkeep.utils.date_parser import get_date_range, parse_date


def _parse_as_of(ctx, as_of: str | None) -> date | None:
    if not as_of:
        return None
    try:
        return parse_date(as_of)
    except ValueError as e:
        click.echo(f"Error: Invalid date: {e}", err=True)
        ctx.exit(1)


def _echo_category_table(title: str, rows: tuple[CategoryAmount, ...]) -> None:
    echo_title(title)
    if not rows:
        click.echo("No categories.")
        return
    for row in rows:
        label = f"{row.name} ({row.count})"
        echo_row(label, row.amount)


@click.group()
def report_group():
    """Financial reports."""
    pass


@report_group.command("period")
@date_range_options
@click.pass_context
def period_report(ctx, **kwargs):
    """Show income, expenses and net income for a period.

    Defaults to the current month.
    """
    service = ReportService(ctx.obj["db"])
    date_range = resolve_report_range(ctx, kwargs, default_range=get_date_range("this-month"))

    totals = service.period_totals(date_range)
    echo_title(f"Income Statement ({format_range(date_range.start, date_range.end)})")
    echo_row("Income", totals.total_income)
    echo_row("Expenses", totals.total_expenses)
    click.echo("-" * TABLE_WIDTH)
    echo_row("Net income", totals.net_income)


@report_group.command("compare")
@click.option("--start-date", help="Start date (YYYY-MM-DD or relative like 'last month')")
@click.option("--end-date", help="End date (defaults to today when only a start date is given)")
@click.option("--this-month", is_flag=True, help="Compare the current month")
@click.option("--this-year", is_flag=True, help="Compare the current year")
@click.option("--this-week", is_flag=True, help="Compare the current week")
@click.option("--last-month", is_flag=True, help="Compare the previous month")
@click.option("--last-year", is_flag=True, help="Compare the previous year")
@click.option("--last-week", is_flag=True, help="Compare the previous week")
@click.pass_context
def compare_report(ctx, start_date: str | None, end_date: str | None, **kwargs):
    """Compare a period with the preceding period of the same length."""
    service = ReportService(ctx.obj["db"])
    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        period_flags=period_flags_from(kwargs),
        default_range=get_date_range("this-month"),
    )
    if start is None:
        click.echo("Error: A start date is required to compare periods.", err=True)
        ctx.exit(1)
    end = end or date.today()
    if start > end:
        click.echo("Error: Start date must be on or before end date.", err=True)
        ctx.exit(1)

    comparison = service.compare_periods(DateRange(start=start, end=end))
    current, previous = comparison.current_range, comparison.previous_range

    echo_title("Period Comparison")
    click.echo(f"{'':<20} {'Current':>18} {'Previous':>18} {'Change':>12}")
    click.echo(f"{'':<20} {str(current.start):>18} {str(previous.start):>18}")
    click.echo(f"{'':<20} {str(current.end):>18} {str(previous.end):>18}")
    click.echo("-" * TABLE_WIDTH)
    rows = (
        ("Income", comparison.current.total_income, comparison.previous.total_income,
         comparison.income_change),
        ("Expenses", comparison.current.total_expenses, comparison.previous.total_expenses,
         comparison.expenses_change),
        ("Net income", comparison.current.net_income, comparison.previous.net_income,
         comparison.net_income_change),
    )
    for label, now, before, change in rows:
        click.echo(
            f"{label:<20} {format_amount(now):>18} {format_amount(before):>18} "
            f"{format_percent(change):>12}"
        )


@report_group.command("categories")
@date_range_options
@click.option(
    "--type",
    "category_type",
    type=click.Choice(["income", "expense"]),
    help="Only show one side of the breakdown",
)
@click.pass_context
def categories_report(ctx, category_type: str | None, **kwargs):
    """Show totals per category.

    Every active category is listed, including those without transactions.
    """
    service = ReportService(ctx.obj["db"])
    date_range = resolve_report_range(ctx, kwargs)

    breakdown = service.category_breakdown(date_range)
    if category_type != "expense":
        _echo_category_table("Income by Category", breakdown.income)
    if category_type != "income":
        _echo_category_table("Expenses by Category", breakdown.expenses)


@report_group.command("income-expense")
@date_range_options
@click.option(
    "--category",
    "category_ids",
    multiple=True,
    help="Category id to include (repeatable; defaults to all categories)",
)
@click.pass_context
def income_expense_report(ctx, category_ids: tuple[str, ...], **kwargs):
    """Show income and expenses per category id, with the overall balance."""
    service = ReportService(ctx.obj["db"])
    date_range = resolve_report_range(ctx, kwargs)

    report = service.income_expense_report(date_range, category_ids=category_ids)
    names = service.category_names()

    echo_title("Income and Expenses by Category")
    if not report.by_category:
        click.echo("No transactions found.")
    else:
        click.echo(f"{'Category':<36} {'Income':>20} {'Expenses':>20}")
        click.echo("-" * TABLE_WIDTH)
        for category_id, flows in report.by_category.items():
            label = service.category_label(category_id, names)
            click.echo(
                f"{label:<36} {format_amount(flows.income):>20} "
                f"{format_amount(flows.expenses):>20}"
            )
    click.echo("-" * TABLE_WIDTH)
    echo_row("Total income", report.total_income)
    echo_row("Total expenses", report.total_expenses)
    echo_row("Balance", report.balance)


@report_group.command("trend")
@click.option("--months", type=click.IntRange(min=1), default=6, show_default=True,
              help="Number of months to show")
@click.option("--as-of", help="Reference date (defaults to today)")
@click.pass_context
def trend_report(ctx, months: int, as_of: str | None):
    """Show monthly income and expenses, oldest month first."""
    service = ReportService(ctx.obj["db"])
    today = _parse_as_of(ctx, as_of)

    series = service.monthly_series(today=today, months=months)
    echo_title("Monthly Trend")
    click.echo(f"{'Month':<12} {'Income':>20} {'Expenses':>20} {'Net':>20}")
    click.echo("-" * TABLE_WIDTH)
    for point in series:
        label = f"{point.label} {point.year}"
        click.echo(
            f"{label:<12} {format_amount(point.income):>20} "
            f"{format_amount(point.expenses):>20} "
            f"{format_amount(point.income - point.expenses):>20}"
        )


@report_group.command("balance")
@click.option("--include-inactive", is_flag=True, help="Include inactive accounts")
@click.pass_context
def balance_report(ctx, include_inactive: bool):
    """Show assets, liabilities and equity from account balances."""
    service = ReportService(ctx.obj["db"])
    sheet = service.balance_sheet(include_inactive=include_inactive)

    echo_title("Assets")
    for acc in sheet.assets:
        echo_row(f"{acc.name} ({acc.type})", acc.balance, indent=2)
    echo_row("Total assets", sheet.total_assets)

    echo_title("Liabilities")
    for acc in sheet.liabilities:
        echo_row(f"{acc.name} ({acc.type})", abs(acc.balance), indent=2)
    echo_row("Total liabilities", sheet.total_liabilities)

    click.echo("-" * TABLE_WIDTH)
    echo_row("Equity", sheet.equity)


@report_group.command("position")
@click.option("--as-of", help="Include invoices and bills dated up to this date (defaults to today)")
@click.pass_context
def position_report(ctx, as_of: str | None):
    """Show the financial position including receivables and payables."""
    service = ReportService(ctx.obj["db"])
    statement = service.position_statement(as_of=_parse_as_of(ctx, as_of))

    echo_title(f"Financial Position as of {statement.as_of}")
    click.echo("Assets")
    echo_row("Cash", statement.cash, indent=2)
    echo_row("Bank", statement.bank, indent=2)
    echo_row("Investments", statement.investments, indent=2)
    echo_row("Accounts receivable", statement.receivables, indent=2)
    echo_row("Total assets", statement.total_assets)
    click.echo("Liabilities")
    echo_row("Accounts payable", statement.payables, indent=2)
    echo_row("Credit cards", statement.credit_cards, indent=2)
    echo_row("Total liabilities", statement.total_liabilities)
    click.echo("-" * TABLE_WIDTH)
    echo_row("Equity", statement.equity)


@report_group.command("cashflow")
@date_range_options
@click.pass_context
def cashflow_report(ctx, **kwargs):
    """Show the cash flow statement for a period.

    Defaults to the current month. The starting balance is derived from the
    current account balances minus the net cash flow of the period.
    """
    service = ReportService(ctx.obj["db"])
    date_range = resolve_report_range(ctx, kwargs, default_range=get_date_range("this-month"))

    statement = service.cash_flow(date_range)
    names = service.category_names()

    echo_title(f"Cash Flow ({format_range(date_range.start, date_range.end)})")
    echo_row("Starting balance", statement.starting_balance)

    for title, group in (("Inflows", statement.inflows), ("Outflows", statement.outflows)):
        click.echo(title)
        for category_id, amount in sorted(
            group.by_category.items(), key=lambda item: (-item[1], str(item[0]))
        ):
            echo_row(service.category_label(category_id, names), amount, indent=2)
        echo_row(f"Total {title.lower()}", group.total)

    click.echo("-" * TABLE_WIDTH)
    echo_row("Net cash flow", statement.net_cash_flow)
    echo_row("Ending balance", statement.ending_balance)


@report_group.command("monthly-flow")
@date_range_options
@click.option("--payment-method", help="Only transactions whose payment method contains this text")
@click.pass_context
def monthly_flow_report(ctx, payment_method: str | None, **kwargs):
    """Show inflows and outflows grouped by month."""
    service = ReportService(ctx.obj["db"])
    date_range = resolve_report_range(ctx, kwargs)

    flow = service.monthly_cash_flow(date_range=date_range, payment_method=payment_method)
    if not flow.rows:
        click.echo("No transactions found.")
        return

    echo_title("Monthly Cash Flow")
    click.echo(f"{'Month':<12} {'Inflows':>20} {'Outflows':>20} {'Net':>20}")
    click.echo("-" * TABLE_WIDTH)
    for row in flow.rows:
        click.echo(
            f"{row.month:<12} {format_amount(row.inflows):>20} "
            f"{format_amount(row.outflows):>20} {format_amount(row.net_flow):>20}"
        )
    click.echo("-" * TABLE_WIDTH)
    click.echo(
        f"{'Total':<12} {format_amount(flow.total_inflows):>20} "
        f"{format_amount(flow.total_outflows):>20} {format_amount(flow.total_net_flow):>20}"
    )


@report_group.command("tax")
@date_range_options
@click.option(
    "--tax-category",
    type=click.Choice([category.value for category in TaxCategory]),
    help="Only transactions with this tax category",
)
@click.pass_context
def tax_report(ctx, tax_category: str | None, **kwargs):
    """Summarize IVA by tax category and by rate."""
    service = ReportService(ctx.obj["db"])
    date_range = resolve_report_range(ctx, kwargs)

    summary = service.tax_summary(date_range=date_range, tax_category=tax_category)
    if not summary.by_category:
        click.echo("No transactions with IVA found.")
        return

    for title, buckets in (("By Tax Category", summary.by_category), ("By Rate", summary.by_rate)):
        echo_title(title)
        click.echo(f"{'':<20} {'Count':>8} {'Amount':>24} {'IVA':>24}")
        for key, bucket in buckets.items():
            click.echo(
                f"{key:<20} {bucket.count:>8} {format_amount(bucket.amount):>24} "
                f"{format_amount(bucket.tax):>24}"
            )

    click.echo("-" * TABLE_WIDTH)
    echo_row("Total IVA", summary.total_iva)


@report_group.command("budget")
@click.option("--details", is_flag=True, help="Show the variance of every budget category")
@click.pass_context
def budget_report(ctx, details: bool):
    """Show planned vs. actual spending for every budget."""
    service = ReportService(ctx.obj["db"])
    variances = service.budget_variances()
    if not variances:
        click.echo("No budgets found.")
        return

    names = service.category_names() if details else {}

    echo_title("Budget Variance")
    click.echo(f"{'Budget':<25} {'Planned':>16} {'Actual':>16} {'Variance':>20}")
    click.echo("-" * TABLE_WIDTH)
    for variance in variances:
        click.echo(
            f"{variance.name:<25} {format_amount(variance.planned):>16} "
            f"{format_amount(variance.actual):>16} "
            f"{format_percent(variance.variance_percent):>20}"
        )
        if details:
            for line in variance.lines:
                label = "  " + service.category_label(line.category_id, names)
                click.echo(
                    f"{label:<25} {format_amount(line.planned):>16} "
                    f"{format_amount(line.actual):>16} "
                    f"{format_percent(line.variance_percent):>20}"
                )


@report_group.command("documents")
@date_range_options
@click.option("--client", "client_id", help="Only invoices for this client ID")
@click.option("--supplier", "supplier_id", help="Only bills from this supplier ID")
@click.option(
    "--invoice-status",
    type=click.Choice([status.value for status in InvoiceStatus]),
    help="Only invoices with this status",
)
@click.option(
    "--bill-status",
    type=click.Choice([status.value for status in BillStatus]),
    help="Only bills with this status",
)
@click.pass_context
def documents_report(
    ctx,
    client_id: str | None,
    supplier_id: str | None,
    invoice_status: str | None,
    bill_status: str | None,
    **kwargs,
):
    """Summarize invoices (receivables) and bills (payables)."""
    service = ReportService(ctx.obj["db"])
    date_range = resolve_report_range(ctx, kwargs)

    try:
        invoices = service.invoice_summary(
            client_id=client_id, status=invoice_status, date_range=date_range
        )
        bills = service.bill_summary(
            supplier_id=supplier_id, status=bill_status, date_range=date_range
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    for title, summary in (("Invoices", invoices), ("Bills", bills)):
        echo_title(f"{title} ({summary.count})")
        echo_row("Total", summary.total)
        echo_row("Outstanding", summary.outstanding)
        echo_row("Paid", summary.paid)


def register_commands(cli):
    """Register report commands with main CLI."""
    cli.add_command(report_group, name="report")
