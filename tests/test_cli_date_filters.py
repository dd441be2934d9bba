"""Tests for CLI date filter helpers."""

from datetime import date

import click
import pytest

from bookkeep.cli.date_filters import (
    period_flags_from,
    resolve_cli_date_range,
    resolve_report_range,
)
from bookkeep.domain.entities import DateRange
from bookkeep.utils.date_parser import get_date_range


def _ctx() -> click.Context:
    return click.Context(click.Command("test"))


def _exit_code(**kwargs) -> int:
    with pytest.raises(click.exceptions.Exit) as excinfo:
        resolve_cli_date_range(_ctx(), **kwargs)
    return excinfo.value.exit_code


def test_rejects_more_than_one_period(capsys):
    code = _exit_code(
        start_date=None,
        end_date=None,
        period_flags={"this-month": True, "last-year": True},
    )

    assert code == 1
    assert "Only one period option" in capsys.readouterr().err


def test_rejects_period_combined_with_dates(capsys):
    code = _exit_code(
        start_date=None,
        end_date="2025-01-31",
        period_flags={"last-month": True},
    )

    assert code == 1
    assert "cannot be combined" in capsys.readouterr().err


def test_rejects_unparsable_end_date(capsys):
    code = _exit_code(start_date=None, end_date="someday", period_flags={})

    assert code == 1
    assert "Invalid end date" in capsys.readouterr().err


def test_rejects_reversed_range(capsys):
    code = _exit_code(start_date="2025-02-01", end_date="2025-01-01", period_flags={})

    assert code == 1
    assert "on or before" in capsys.readouterr().err


def test_period_flag_resolves_to_period_range():
    start, end = resolve_cli_date_range(
        _ctx(), start_date=None, end_date=None, period_flags={"last-year": True}
    )

    assert (start, end) == get_date_range("last-year")


def test_explicit_dates_win_over_default():
    start, end = resolve_cli_date_range(
        _ctx(),
        start_date="2025-01-01",
        end_date="2025-01-31",
        period_flags={},
        default_range=(date(2020, 1, 1), date(2020, 12, 31)),
    )

    assert (start, end) == (date(2025, 1, 1), date(2025, 1, 31))


def test_period_flags_from_pops_flag_kwargs():
    kwargs = {"this_month": True, "last_week": False, "payment_method": "card"}

    flags = period_flags_from(kwargs)

    assert flags["this-month"] is True
    assert flags["last-week"] is False
    assert flags["this-year"] is False
    assert kwargs == {"payment_method": "card"}


def test_resolve_report_range_fills_open_end():
    kwargs = {"start_date": "2025-01-01", "end_date": None}

    date_range = resolve_report_range(_ctx(), kwargs)

    assert date_range == DateRange(start=date(2025, 1, 1), end=date.max)


def test_resolve_report_range_without_dates_or_default():
    assert resolve_report_range(_ctx(), {"start_date": None, "end_date": None}) is None
