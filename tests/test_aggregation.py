"""Tests for period totals, period comparison and monthly series."""

import math
from datetime import date
from decimal import Decimal

import pytest

from bookkeep.domain.aggregation import (
    build_monthly_series,
    compare_periods,
    filter_transactions,
    group_cash_flow_by_month,
    percent_change,
    previous_range,
    recent_transactions,
    summarize_period,
)
from bookkeep.domain.entities import DateRange, PeriodTotals

JANUARY = DateRange(start=date(2025, 1, 1), end=date(2025, 1, 31))


def test_summarize_period_income_and_expense(make_transaction):
    transactions = [
        make_transaction(2500, "income", date(2025, 1, 15)),
        make_transaction(3500, "expense", date(2025, 1, 20)),
    ]

    totals = summarize_period(transactions, JANUARY)

    assert totals.total_income == Decimal("2500")
    assert totals.total_expenses == Decimal("3500")
    assert totals.net_income == Decimal("-1000")


def test_summarize_period_empty_input():
    assert summarize_period([], JANUARY) == PeriodTotals()


def test_summarize_period_range_is_inclusive(make_transaction):
    transactions = [
        make_transaction(10, "income", date(2025, 1, 1)),
        make_transaction(20, "income", date(2025, 1, 31)),
        make_transaction(40, "income", date(2024, 12, 31)),
        make_transaction(80, "income", date(2025, 2, 1)),
    ]

    assert summarize_period(transactions, JANUARY).total_income == Decimal("30")


def test_undated_transactions_are_out_of_range(make_transaction):
    transactions = [
        make_transaction(100, "income", None),
        make_transaction(50, "income", date(2025, 1, 2)),
    ]

    assert summarize_period(transactions, JANUARY).total_income == Decimal("50")


def test_net_income_is_income_minus_expenses(make_transaction):
    transactions = [
        make_transaction(amount, txn_type, date(2025, 1, day))
        for day, (amount, txn_type) in enumerate(
            [("1200.50", "income"), ("99.99", "expense"), ("0.01", "expense"), ("300", "income")],
            start=1,
        )
    ]

    totals = summarize_period(transactions, JANUARY)

    assert totals.total_income == Decimal("1500.50")
    assert totals.total_expenses == Decimal("100.00")
    assert totals.net_income == totals.total_income - totals.total_expenses


def test_summarize_period_is_repeatable(make_transaction):
    transactions = (
        make_transaction(10, "income", date(2025, 1, 5)),
        make_transaction(7, "expense", date(2025, 1, 6)),
    )

    assert summarize_period(transactions, JANUARY) == summarize_period(transactions, JANUARY)


def test_previous_range_has_same_length():
    prev = previous_range(JANUARY)

    assert prev.end == date(2024, 12, 31)
    assert prev.start == date(2024, 12, 1)
    assert prev.duration == JANUARY.duration


def test_percent_change():
    assert percent_change(Decimal("150"), Decimal("100")) == pytest.approx(50.0)
    assert percent_change(Decimal("50"), Decimal("100")) == pytest.approx(-50.0)
    assert percent_change(Decimal("-50"), Decimal("-100")) == pytest.approx(-50.0)


def test_percent_change_zero_baseline_is_zero():
    change = percent_change(Decimal("1000"), Decimal("0"))

    assert change == 0.0
    assert math.isfinite(change)


def test_compare_periods_zero_previous_income(make_transaction):
    transactions = [make_transaction(1000, "income", date(2025, 1, 10))]

    comparison = compare_periods(transactions, JANUARY)

    assert comparison.current.total_income == Decimal("1000")
    assert comparison.previous.total_income == Decimal("0")
    assert comparison.income_change == 0.0
    assert comparison.expenses_change == 0.0
    assert comparison.net_income_change == 0.0


def test_compare_periods_changes(make_transaction):
    transactions = [
        make_transaction(200, "income", date(2024, 12, 10)),
        make_transaction(100, "expense", date(2024, 12, 11)),
        make_transaction(300, "income", date(2025, 1, 10)),
        make_transaction(50, "expense", date(2025, 1, 11)),
    ]

    comparison = compare_periods(transactions, JANUARY)

    assert comparison.previous_range == previous_range(JANUARY)
    assert comparison.income_change == pytest.approx(50.0)
    assert comparison.expenses_change == pytest.approx(-50.0)
    assert comparison.net_income_change == pytest.approx(150.0)


def test_filter_transactions_by_category_and_payment_method(make_transaction):
    transactions = [
        make_transaction(1, category_id="a", payment_method="credit card"),
        make_transaction(2, category_id="b", payment_method="card"),
        make_transaction(3, category_id="a", payment_method="cash"),
    ]

    by_category = filter_transactions(transactions, category_ids=["a"])
    by_method = filter_transactions(transactions, payment_method="card")

    assert [txn.amount for txn in by_category] == [Decimal("1"), Decimal("3")]
    assert [txn.amount for txn in by_method] == [Decimal("1"), Decimal("2")]
    assert filter_transactions(transactions, category_ids=[]) == transactions


def test_monthly_series_always_has_six_entries():
    series = build_monthly_series([], today=date(2025, 3, 14))

    assert len(series) == 6
    assert all(point.income == 0 and point.expenses == 0 for point in series)


def test_monthly_series_labels_cross_year_boundary():
    series = build_monthly_series([], today=date(2025, 3, 14))

    assert [point.label for point in series] == ["Oct", "Nov", "Dic", "Ene", "Feb", "Mar"]
    assert (series[0].year, series[0].month) == (2024, 10)
    assert (series[-1].year, series[-1].month) == (2025, 3)


def test_monthly_series_buckets_by_calendar_month(make_transaction):
    transactions = [
        make_transaction(100, "income", date(2025, 2, 1)),
        make_transaction(40, "expense", date(2025, 2, 28)),
        make_transaction(60, "income", date(2025, 3, 31)),
        make_transaction(999, "income", date(2024, 9, 30)),
    ]

    series = build_monthly_series(transactions, today=date(2025, 3, 14))
    by_month = {(point.year, point.month): point for point in series}

    assert by_month[(2025, 2)].income == Decimal("100")
    assert by_month[(2025, 2)].expenses == Decimal("40")
    assert by_month[(2025, 3)].income == Decimal("60")
    assert sum(point.income for point in series) == Decimal("160")


def test_monthly_series_custom_length():
    assert len(build_monthly_series([], today=date(2025, 12, 1), months=12)) == 12


def test_group_cash_flow_by_month(make_transaction):
    transactions = [
        make_transaction(500, "income", date(2025, 2, 3)),
        make_transaction(200, "expense", date(2025, 1, 9)),
        make_transaction(100, "income", date(2025, 1, 20)),
        make_transaction(75, "expense", None),
    ]

    report = group_cash_flow_by_month(transactions)

    assert [row.month for row in report.rows] == ["2025-01", "2025-02"]
    assert report.rows[0].net_flow == Decimal("-100")
    assert report.rows[1].inflows == Decimal("500")
    assert report.total_inflows == Decimal("600")
    assert report.total_outflows == Decimal("200")
    assert report.total_net_flow == Decimal("400")


def test_recent_transactions_newest_first(make_transaction):
    transactions = [
        make_transaction(1, txn_date=date(2025, 1, 1), id="old"),
        make_transaction(2, txn_date=None, id="undated"),
        make_transaction(3, txn_date=date(2025, 3, 1), id="new"),
        make_transaction(4, txn_date=date(2025, 2, 1), id="mid"),
    ]

    assert [txn.id for txn in recent_transactions(transactions)] == [
        "new",
        "mid",
        "old",
        "undated",
    ]
    assert [txn.id for txn in recent_transactions(transactions, limit=2)] == ["new", "mid"]
