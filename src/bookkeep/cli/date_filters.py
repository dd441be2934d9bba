"""CLI helpers for date range resolution."""

from datetime import date
from typing import Optional

import click

from bookkeep.domain.entities import DateRange
from bookkeep.utils.date_parser import PERIODS, get_date_range, parse_date


def date_range_options(command):
    """Add --start-date/--end-date and the period flags to a command.

    The flags arrive in the command as ``this_month``, ``last_year`` and so on;
    pass them to ``period_flags_from`` to build the dict expected by
    ``resolve_cli_date_range``.
    """
    for period in reversed(PERIODS):
        label = period.replace("-", " ")
        command = click.option(
            f"--{period}", is_flag=True, help=f"Limit to {label}"
        )(command)
    command = click.option(
        "--end-date", help="End date (YYYY-MM-DD or relative like 'today', 'this month')"
    )(command)
    command = click.option(
        "--start-date", help="Start date (YYYY-MM-DD or relative like 'last month', 'this year')"
    )(command)
    return command


def period_flags_from(kwargs: dict) -> dict[str, bool]:
    """Pop the period flags out of a command's keyword arguments."""
    return {period: kwargs.pop(period.replace("-", "_"), False) for period in PERIODS}


def resolve_cli_date_range(
    ctx,
    *,
    start_date: str | None,
    end_date: str | None,
    period_flags: dict[str, bool],
    default_range: tuple[date, date] | None = None,
) -> tuple[date | None, date | None]:
    """Resolve CLI date range from period flags or explicit dates."""
    period_count = sum(1 for is_set in period_flags.values() if is_set)

    if period_count > 1:
        click.echo(
            "Error: Only one period option (--this-month, --this-year, --this-week, --last-month, --last-year, --last-week) can be specified at a time.",
            err=True,
        )
        ctx.exit(1)

    if period_count > 0 and (start_date or end_date):
        click.echo(
            "Error: Period options (--this-month, --this-year, etc.) cannot be combined with --start-date or --end-date.",
            err=True,
        )
        ctx.exit(1)

    start = None
    end = None

    if period_count == 1:
        for period, is_set in period_flags.items():
            if is_set:
                start, end = get_date_range(period)
                break
    else:
        if start_date:
            try:
                start = parse_date(start_date)
            except ValueError as e:
                click.echo(f"Error: Invalid start date: {e}", err=True)
                ctx.exit(1)

        if end_date:
            try:
                end = parse_date(end_date)
            except ValueError as e:
                click.echo(f"Error: Invalid end date: {e}", err=True)
                ctx.exit(1)

        if start is None and end is None and default_range is not None:
            start, end = default_range

    if start is not None and end is not None and start > end:
        click.echo("Error: Start date must be on or before end date.", err=True)
        ctx.exit(1)

    return start, end


def resolve_report_range(
    ctx,
    kwargs: dict,
    default_range: tuple[date, date] | None = None,
) -> Optional[DateRange]:
    """Resolve the date options of a report command into a DateRange.

    An open end is filled with ``date.min`` or ``date.max``. Returns None when
    no range was given and there is no default.
    """
    start, end = resolve_cli_date_range(
        ctx,
        start_date=kwargs.pop("start_date", None),
        end_date=kwargs.pop("end_date", None),
        period_flags=period_flags_from(kwargs),
        default_range=default_range,
    )
    if start is None and end is None:
        return None
    return DateRange(start=start or date.min, end=end or date.max)
