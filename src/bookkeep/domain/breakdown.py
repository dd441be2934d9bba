"""Category breakdowns of income and expenses."""

import logging
from collections import defaultdict
from decimal import Decimal
from typing import Any, Iterable, Optional, Sequence

from bookkeep.domain.aggregation import filter_transactions
from bookkeep.domain.entities import (
    ZERO,
    Category,
    CategoryAmount,
    CategoryBreakdown,
    CategoryFlows,
    IncomeExpenseReport,
    Transaction,
    TransactionType,
)

logger = logging.getLogger(__name__)


def build_category_breakdown(
    transactions: Sequence[Transaction],
    categories: Sequence[Category],
    category_type: TransactionType,
) -> tuple[CategoryAmount, ...]:
    """Sum transaction amounts per category for one transaction type.

    Every active category of the requested type is listed, with a zero
    amount when nothing matched, so charts can render empty slices. An
    inactive category only appears when it has matching transactions.

    A transaction is counted only when its category id resolves to a known
    category whose type equals the transaction's type. Anything else is left
    out of the breakdown; it still counts toward period totals.

    Args:
        transactions: Already filtered transactions
        categories: All known categories
        category_type: Income or expense

    Returns:
        Tuple of CategoryAmount in category order
    """
    category_index = {cat.id: cat for cat in categories}
    totals: dict[str, dict[str, Any]] = defaultdict(
        lambda: {"amount": ZERO, "count": 0}
    )

    for txn in transactions:
        if txn.type != category_type:
            continue
        category = category_index.get(txn.category_id)
        if category is None or category.type != txn.type.value:
            logger.debug(
                "Transaction %s excluded from breakdown: category %r unresolved",
                txn.id,
                txn.category_id,
            )
            continue
        totals[category.id]["amount"] += txn.amount
        totals[category.id]["count"] += 1

    results = []
    for category in categories:
        if category.type != category_type.value:
            continue
        if not category.is_active and category.id not in totals:
            continue
        data = totals.get(category.id, {"amount": ZERO, "count": 0})
        results.append(
            CategoryAmount(
                category_id=category.id,
                name=category.name,
                color=category.color,
                amount=data["amount"],
                count=data["count"],
            )
        )
    return tuple(results)


def build_income_expense_breakdown(
    transactions: Sequence[Transaction], categories: Sequence[Category]
) -> CategoryBreakdown:
    """Build breakdowns for both income and expense categories."""
    return CategoryBreakdown(
        income=build_category_breakdown(
            transactions, categories, TransactionType.INCOME
        ),
        expenses=build_category_breakdown(
            transactions, categories, TransactionType.EXPENSE
        ),
    )


def summarize_by_category(
    transactions: Iterable[Transaction],
    category_ids: Optional[Iterable[str]] = None,
) -> IncomeExpenseReport:
    """Total income and expenses keyed by the raw category id.

    Unlike :func:`build_category_breakdown` no lookup is done, so unknown
    category ids show up under their own key.
    """
    selected = filter_transactions(transactions, category_ids=category_ids)
    flows: dict[Optional[str], dict[str, Decimal]] = defaultdict(
        lambda: {"income": ZERO, "expenses": ZERO}
    )
    total_income = ZERO
    total_expenses = ZERO

    for txn in selected:
        if txn.type == TransactionType.INCOME:
            total_income += txn.amount
            flows[txn.category_id]["income"] += txn.amount
        else:
            total_expenses += txn.amount
            flows[txn.category_id]["expenses"] += txn.amount

    return IncomeExpenseReport(
        total_income=total_income,
        total_expenses=total_expenses,
        balance=total_income - total_expenses,
        by_category={
            key: CategoryFlows(income=value["income"], expenses=value["expenses"])
            for key, value in flows.items()
        },
    )
