"""Tests for category breakdowns."""

from datetime import date
from decimal import Decimal

from bookkeep.domain.aggregation import summarize_period
from bookkeep.domain.breakdown import (
    build_category_breakdown,
    build_income_expense_breakdown,
    summarize_by_category,
)
from bookkeep.domain.entities import DateRange, TransactionType


def _amounts(rows):
    return {row.category_id: row.amount for row in rows}


def test_breakdown_sums_per_category(make_transaction, sample_categories):
    transactions = [
        make_transaction(100, "income", category_id="cat-sales"),
        make_transaction(50, "income", category_id="cat-sales"),
        make_transaction(30, "income", category_id="cat-services"),
        make_transaction(70, "expense", category_id="cat-rent"),
    ]

    income = build_category_breakdown(transactions, sample_categories, TransactionType.INCOME)

    assert _amounts(income) == {"cat-sales": Decimal("150"), "cat-services": Decimal("30")}
    assert [row.count for row in income] == [2, 1]
    assert income[0].name == "Ventas"
    assert income[0].color == "#4CAF50"


def test_breakdown_lists_active_categories_without_transactions(sample_categories):
    breakdown = build_income_expense_breakdown([], sample_categories)

    assert [row.category_id for row in breakdown.income] == ["cat-sales", "cat-services"]
    assert [row.category_id for row in breakdown.expenses] == ["cat-salaries", "cat-rent"]
    assert all(row.amount == 0 and row.count == 0 for row in breakdown.expenses)


def test_inactive_category_only_listed_with_transactions(make_transaction, sample_categories):
    transactions = [make_transaction(20, "expense", category_id="cat-old")]

    expenses = build_category_breakdown(transactions, sample_categories, TransactionType.EXPENSE)

    assert _amounts(expenses)["cat-old"] == Decimal("20")


def test_unresolved_category_excluded_but_still_in_totals(make_transaction, sample_categories):
    transactions = [
        make_transaction(100, "income", category_id="cat-sales"),
        make_transaction(40, "income", category_id="cat-missing"),
        make_transaction(10, "income", category_id=None),
    ]

    income = build_category_breakdown(transactions, sample_categories, TransactionType.INCOME)
    totals = summarize_period(
        transactions, DateRange(start=date(2025, 1, 1), end=date(2025, 1, 31))
    )

    assert sum(row.amount for row in income) == Decimal("100")
    assert "cat-missing" not in _amounts(income)
    assert totals.total_income == Decimal("150")


def test_category_of_other_type_is_not_matched(make_transaction, sample_categories):
    # An expense filed under an income category
    transactions = [make_transaction(60, "expense", category_id="cat-sales")]

    breakdown = build_income_expense_breakdown(transactions, sample_categories)

    assert all(row.amount == 0 for row in breakdown.income)
    assert all(row.amount == 0 for row in breakdown.expenses)


def test_summarize_by_category_keys_on_raw_id(make_transaction):
    transactions = [
        make_transaction(100, "income", category_id="cat-sales"),
        make_transaction(25, "expense", category_id="cat-sales"),
        make_transaction(40, "expense", category_id="unknown"),
        make_transaction(5, "expense", category_id=None),
    ]

    report = summarize_by_category(transactions)

    assert report.total_income == Decimal("100")
    assert report.total_expenses == Decimal("70")
    assert report.balance == Decimal("30")
    assert report.by_category["cat-sales"].income == Decimal("100")
    assert report.by_category["cat-sales"].expenses == Decimal("25")
    assert report.by_category["unknown"].expenses == Decimal("40")
    assert report.by_category[None].expenses == Decimal("5")


def test_summarize_by_category_filters_ids(make_transaction):
    transactions = [
        make_transaction(100, "income", category_id="a"),
        make_transaction(50, "income", category_id="b"),
    ]

    report = summarize_by_category(transactions, category_ids=["b"])

    assert report.total_income == Decimal("50")
    assert list(report.by_category) == ["b"]
