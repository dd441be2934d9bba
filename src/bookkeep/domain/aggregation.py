"""Period totals, period comparison and month-bucketed series."""

import calendar
import logging
from collections import defaultdict
from datetime import date, timedelta
from decimal import Decimal
from typing import Iterable, Optional, Sequence

from dateutil.relativedelta import relativedelta

from bookkeep.domain.entities import (
    ZERO,
    DateRange,
    MonthlyCashFlowReport,
    MonthlyFlow,
    MonthlyPoint,
    PeriodComparison,
    PeriodTotals,
    Transaction,
    TransactionType,
)

logger = logging.getLogger(__name__)

MONTH_LABELS = (
    "Ene",
    "Feb",
    "Mar",
    "Abr",
    "May",
    "Jun",
    "Jul",
    "Ago",
    "Sep",
    "Oct",
    "Nov",
    "Dic",
)

DEFAULT_SERIES_MONTHS = 6


def filter_transactions(
    transactions: Iterable[Transaction],
    date_range: Optional[DateRange] = None,
    category_ids: Optional[Iterable[str]] = None,
    payment_method: Optional[str] = None,
) -> list[Transaction]:
    """Filter transactions by date range, category ids and payment method.

    Args:
        transactions: Transactions to filter
        date_range: Optional inclusive date range; undated transactions never match
        category_ids: Optional category ids; empty or None means no restriction
        payment_method: Optional substring matched against the payment method

    Returns:
        Matching transactions in input order
    """
    wanted = set(category_ids) if category_ids else None
    result = []
    for txn in transactions:
        if date_range is not None and not date_range.contains(txn.date):
            continue
        if wanted is not None and txn.category_id not in wanted:
            continue
        if payment_method and payment_method not in (txn.payment_method or ""):
            continue
        result.append(txn)
    return result


def sum_by_type(
    transactions: Iterable[Transaction], txn_type: TransactionType
) -> Decimal:
    """Sum amounts of transactions of one type."""
    return sum((txn.amount for txn in transactions if txn.type == txn_type), ZERO)


def summarize_period(
    transactions: Sequence[Transaction], date_range: DateRange
) -> PeriodTotals:
    """Compute income, expenses and net income inside a date range."""
    in_range = filter_transactions(transactions, date_range=date_range)
    income = sum_by_type(in_range, TransactionType.INCOME)
    expenses = sum_by_type(in_range, TransactionType.EXPENSE)
    return PeriodTotals(
        total_income=income,
        total_expenses=expenses,
        net_income=income - expenses,
    )


def previous_range(date_range: DateRange) -> DateRange:
    """Return the range of identical duration ending the day before ``date_range``."""
    prev_end = date_range.start - timedelta(days=1)
    prev_start = prev_end - date_range.duration
    return DateRange(start=prev_start, end=prev_end)


def percent_change(current: Decimal, previous: Decimal) -> float:
    """Percentage change from ``previous`` to ``current``.

    A zero baseline yields 0.0 so callers never see inf or nan.
    """
    if not previous:
        return 0.0
    return float((current - previous) / previous * 100)


def compare_periods(
    transactions: Sequence[Transaction], date_range: DateRange
) -> PeriodComparison:
    """Compare a range with the preceding range of the same duration."""
    prev = previous_range(date_range)
    current_totals = summarize_period(transactions, date_range)
    previous_totals = summarize_period(transactions, prev)
    return PeriodComparison(
        current_range=date_range,
        previous_range=prev,
        current=current_totals,
        previous=previous_totals,
        income_change=percent_change(
            current_totals.total_income, previous_totals.total_income
        ),
        expenses_change=percent_change(
            current_totals.total_expenses, previous_totals.total_expenses
        ),
        net_income_change=percent_change(
            current_totals.net_income, previous_totals.net_income
        ),
    )


def month_range(year: int, month: int) -> DateRange:
    """Return the first through last calendar day of a month."""
    last_day = calendar.monthrange(year, month)[1]
    return DateRange(start=date(year, month, 1), end=date(year, month, last_day))


def build_monthly_series(
    transactions: Sequence[Transaction],
    today: Optional[date] = None,
    months: int = DEFAULT_SERIES_MONTHS,
) -> tuple[MonthlyPoint, ...]:
    """Build income/expense totals for the last ``months`` calendar months.

    The current month is included and the result is ordered oldest first.
    Months without transactions yield zero totals, so the result always has
    exactly ``months`` entries.

    Args:
        transactions: Transactions to bucket
        today: Reference date (defaults to ``date.today()``)
        months: Number of months to include

    Returns:
        Tuple of MonthlyPoint, oldest first
    """
    if today is None:
        today = date.today()
    current_month_index = today.month - 1
    first_of_month = today.replace(day=1)

    points = []
    for i in reversed(range(months)):
        month_start = first_of_month - relativedelta(months=i)
        bucket = month_range(month_start.year, month_start.month)
        totals = summarize_period(transactions, bucket)
        points.append(
            MonthlyPoint(
                label=MONTH_LABELS[(current_month_index - i + 12) % 12],
                year=month_start.year,
                month=month_start.month,
                income=totals.total_income,
                expenses=totals.total_expenses,
            )
        )
    return tuple(points)


def group_cash_flow_by_month(
    transactions: Iterable[Transaction],
) -> MonthlyCashFlowReport:
    """Group transactions into ``YYYY-MM`` buckets of inflows and outflows.

    Only months that have at least one dated transaction are reported.
    """
    buckets: dict[str, dict[str, Decimal]] = defaultdict(
        lambda: {"inflows": ZERO, "outflows": ZERO}
    )

    for txn in transactions:
        if txn.date is None:
            logger.debug("Skipping undated transaction %s in monthly flow", txn.id)
            continue
        month_key = txn.date.strftime("%Y-%m")
        if txn.type == TransactionType.INCOME:
            buckets[month_key]["inflows"] += txn.amount
        else:
            buckets[month_key]["outflows"] += txn.amount

    rows = tuple(
        MonthlyFlow(
            month=key,
            inflows=data["inflows"],
            outflows=data["outflows"],
            net_flow=data["inflows"] - data["outflows"],
        )
        for key, data in sorted(buckets.items())
    )
    total_inflows = sum((row.inflows for row in rows), ZERO)
    total_outflows = sum((row.outflows for row in rows), ZERO)
    return MonthlyCashFlowReport(
        rows=rows,
        total_inflows=total_inflows,
        total_outflows=total_outflows,
        total_net_flow=total_inflows - total_outflows,
    )


def recent_transactions(
    transactions: Iterable[Transaction], limit: int = 5
) -> tuple[Transaction, ...]:
    """Return the newest transactions first; undated ones sort last."""
    ordered = sorted(
        transactions,
        key=lambda txn: (txn.date is not None, txn.date or date.min),
        reverse=True,
    )
    return tuple(ordered[:limit])
