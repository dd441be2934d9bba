"""IVA (value-added tax) summary."""

from decimal import Decimal
from typing import Iterable, Optional, Union

from bookkeep.domain.entities import (
    ZERO,
    DateRange,
    TaxBucket,
    TaxCategory,
    TaxSummary,
    Transaction,
)

DEFAULT_TAX_CATEGORY = TaxCategory.STANDARD


def format_rate_key(rate: Optional[Decimal]) -> str:
    """Render an IVA rate as a ``"{rate}%"`` key, e.g. ``"19%"`` or ``"5.5%"``."""
    value = (rate if rate is not None else ZERO).normalize()
    if value == value.to_integral_value():
        return f"{int(value)}%"
    return f"{value:f}%"


def has_iva(txn: Transaction) -> bool:
    """Return True if the transaction carries a positive IVA amount."""
    return txn.iva_amount is not None and txn.iva_amount > 0


def summarize_iva(
    transactions: Iterable[Transaction],
    date_range: Optional[DateRange] = None,
    tax_category: Optional[Union[TaxCategory, str]] = None,
) -> TaxSummary:
    """Summarize IVA over transactions that carry it.

    Args:
        transactions: Transactions to summarize
        date_range: Optional inclusive date range
        tax_category: Optional filter on the transaction's explicit tax category

    Returns:
        TaxSummary with totals by tax category and by rate
    """
    wanted = TaxCategory(tax_category) if tax_category else None
    total_iva = ZERO
    by_category: dict[str, TaxBucket] = {}
    by_rate: dict[str, TaxBucket] = {}

    for txn in transactions:
        if not has_iva(txn):
            continue
        if date_range is not None and not date_range.contains(txn.date):
            continue
        if wanted is not None and txn.tax_category != wanted:
            continue

        category_key = (txn.tax_category or DEFAULT_TAX_CATEGORY).value
        rate_key = format_rate_key(txn.iva_rate)
        total_iva += txn.iva_amount

        for buckets, key in ((by_category, category_key), (by_rate, rate_key)):
            bucket = buckets.get(key, TaxBucket())
            buckets[key] = TaxBucket(
                count=bucket.count + 1,
                amount=bucket.amount + txn.amount,
                tax=bucket.tax + txn.iva_amount,
            )

    return TaxSummary(total_iva=total_iva, by_category=by_category, by_rate=by_rate)
