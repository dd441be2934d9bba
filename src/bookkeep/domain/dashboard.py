"""Overview figures combining several reports."""

from datetime import date, timedelta
from typing import Optional, Union

from dateutil.relativedelta import relativedelta

from bookkeep.domain.aggregation import (
    build_monthly_series,
    compare_periods,
    filter_transactions,
    recent_transactions,
)
from bookkeep.domain.breakdown import build_income_expense_breakdown
from bookkeep.domain.documents import (
    OUTSTANDING_BILL_STATUSES,
    OUTSTANDING_INVOICE_STATUSES,
    summarize_bills,
    summarize_invoices,
)
from bookkeep.domain.entities import ZERO, Dashboard, DashboardPeriod, DateRange
from bookkeep.domain.snapshot import RecordSnapshot


def dashboard_range(
    period: Union[DashboardPeriod, str], today: Optional[date] = None
) -> DateRange:
    """Return the look-back window ending ``today`` for a dashboard period."""
    if today is None:
        today = date.today()
    period = DashboardPeriod(period)

    if period == DashboardPeriod.WEEK:
        start = today - timedelta(days=7)
    elif period == DashboardPeriod.MONTH:
        start = today - relativedelta(months=1)
    elif period == DashboardPeriod.QUARTER:
        start = today - relativedelta(months=3)
    else:
        start = today - relativedelta(years=1)
    return DateRange(start=start, end=today)


def build_dashboard(
    snapshot: RecordSnapshot,
    period: Union[DashboardPeriod, str] = DashboardPeriod.MONTH,
    today: Optional[date] = None,
) -> Dashboard:
    """Build the dashboard for a snapshot.

    Args:
        snapshot: Records to summarize
        period: Look-back window for the period comparison and breakdowns
        today: Reference date (defaults to ``date.today()``)

    Returns:
        Dashboard
    """
    if today is None:
        today = date.today()
    period = DashboardPeriod(period)
    date_range = dashboard_range(period, today)
    in_range = filter_transactions(snapshot.transactions, date_range=date_range)

    pending_invoices = [
        inv for inv in snapshot.invoices if inv.status in OUTSTANDING_INVOICE_STATUSES
    ]
    pending_bills = [
        bill for bill in snapshot.bills if bill.status in OUTSTANDING_BILL_STATUSES
    ]

    return Dashboard(
        period=period,
        comparison=compare_periods(snapshot.transactions, date_range),
        total_balance=sum((acc.balance for acc in snapshot.accounts), ZERO),
        pending_invoices=summarize_invoices(pending_invoices),
        pending_bills=summarize_bills(pending_bills),
        breakdown=build_income_expense_breakdown(in_range, snapshot.categories),
        monthly_series=build_monthly_series(snapshot.transactions, today=today),
        recent_transactions=recent_transactions(snapshot.transactions),
    )
