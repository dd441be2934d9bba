"""Text formatting helpers shared by report commands."""

from datetime import date
from decimal import Decimal
from typing import Optional

import click

TABLE_WIDTH = 80


def format_amount(amount: Decimal) -> str:
    """Format money as ``$1,234.56`` (negative as ``-$1,234.56``)."""
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def format_percent(value: float) -> str:
    """Format a percentage with an explicit sign."""
    return f"{value:+.1f}%"


def format_date(value: Optional[date]) -> str:
    if value is None:
        return "-"
    return value.isoformat()


def format_range(start: date, end: date) -> str:
    """Render a date range, hiding open ends."""
    if start == date.min and end == date.max:
        return "all dates"
    if start == date.min:
        return f"up to {end}"
    if end == date.max:
        return f"from {start}"
    return f"{start} to {end}"


def echo_title(title: str) -> None:
    """Print a section title with a separator line."""
    click.echo(f"\n{title}")
    click.echo("-" * TABLE_WIDTH)


def echo_row(label: str, amount: Decimal, indent: int = 0) -> None:
    """Print a label/amount row aligned to the table width."""
    label = " " * indent + label
    click.echo(f"{label:<50} {format_amount(amount):>29}")
