"""Tests for the dashboard overview."""

from datetime import date
from decimal import Decimal

import pytest

from bookkeep.domain.dashboard import build_dashboard, dashboard_range
from bookkeep.domain.entities import (
    Bill,
    BillStatus,
    DashboardPeriod,
    DateRange,
    Invoice,
    InvoiceStatus,
)
from bookkeep.domain.snapshot import RecordSnapshot

TODAY = date(2025, 3, 15)


@pytest.mark.parametrize(
    "period,start",
    [
        ("week", date(2025, 3, 8)),
        ("month", date(2025, 2, 15)),
        (DashboardPeriod.QUARTER, date(2024, 12, 15)),
        ("year", date(2024, 3, 15)),
    ],
)
def test_dashboard_range(period, start):
    assert dashboard_range(period, TODAY) == DateRange(start=start, end=TODAY)


def test_dashboard_range_rejects_unknown_period():
    with pytest.raises(ValueError):
        dashboard_range("decade", TODAY)


def test_build_dashboard(make_transaction, sample_accounts, sample_categories):
    transactions = (
        make_transaction(1000, "income", date(2025, 3, 1), category_id="cat-sales"),
        make_transaction(400, "expense", date(2025, 3, 2), category_id="cat-rent"),
        make_transaction(500, "income", date(2025, 1, 20), category_id="cat-sales"),
        make_transaction(800, "income", date(2025, 2, 1), category_id="cat-services"),
    )
    invoices = (
        Invoice(
            id="i1", number="1", date=date(2025, 3, 1), due_date=None, client_id="c",
            status=InvoiceStatus.SENT, total=Decimal("250"),
        ),
        Invoice(
            id="i2", number="2", date=date(2025, 3, 1), due_date=None, client_id="c",
            status=InvoiceStatus.PAID, total=Decimal("999"),
        ),
    )
    bills = (
        Bill(
            id="b1", number="1", date=date(2025, 3, 1), due_date=None, supplier_id="s",
            status=BillStatus.OVERDUE, total=Decimal("75"),
        ),
    )
    snapshot = RecordSnapshot(
        transactions=transactions,
        accounts=tuple(sample_accounts),
        categories=tuple(sample_categories),
        invoices=invoices,
        bills=bills,
    )

    board = build_dashboard(snapshot, period="month", today=TODAY)

    assert board.period == DashboardPeriod.MONTH
    assert board.comparison.current.total_income == Decimal("1000")
    assert board.comparison.current.total_expenses == Decimal("400")
    # 15000 + 500 - 2500, signed
    assert board.total_balance == Decimal("13000")
    assert board.pending_invoices.count == 1
    assert board.pending_invoices.total == Decimal("250")
    assert board.pending_bills.total == Decimal("75")
    assert {row.category_id: row.amount for row in board.breakdown.income} == {
        "cat-sales": Decimal("1000"),
        "cat-services": Decimal("0"),
    }
    assert len(board.monthly_series) == 6
    assert board.monthly_series[-1].label == "Mar"
    assert [txn.date for txn in board.recent_transactions][0] == date(2025, 3, 2)
    assert len(board.recent_transactions) == 4


def test_dashboard_of_empty_snapshot():
    board = build_dashboard(RecordSnapshot(), today=TODAY)

    assert board.total_balance == Decimal("0")
    assert board.pending_invoices.count == 0
    assert board.recent_transactions == ()
    assert board.breakdown.income == ()
