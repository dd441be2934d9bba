"""Invoice and bill totals, filters and summaries."""

from decimal import Decimal
from typing import Iterable, Optional, Sequence, Union

from bookkeep.domain.entities import (
    ZERO,
    Bill,
    BillStatus,
    DateRange,
    DocumentItem,
    DocumentSummary,
    DocumentTotals,
    Invoice,
    InvoiceStatus,
)

OUTSTANDING_INVOICE_STATUSES = frozenset({InvoiceStatus.SENT, InvoiceStatus.OVERDUE})
OUTSTANDING_BILL_STATUSES = frozenset({BillStatus.PENDING, BillStatus.OVERDUE})


def item_total(quantity: Decimal, unit_price: Decimal) -> Decimal:
    """Line total before tax."""
    return quantity * unit_price


def compute_document_totals(
    items: Iterable[DocumentItem], discount: Decimal = ZERO
) -> DocumentTotals:
    """Derive subtotal, tax and total from line items.

    ``subtotal`` sums the item totals, ``tax`` sums the item taxes and
    ``total = subtotal + tax - discount``.
    """
    items = list(items)
    subtotal = sum((item.total for item in items), ZERO)
    tax = sum((item.tax for item in items), ZERO)
    return DocumentTotals(subtotal=subtotal, tax=tax, total=subtotal + tax - discount)


def filter_invoices(
    invoices: Iterable[Invoice],
    client_id: Optional[str] = None,
    status: Optional[Union[InvoiceStatus, str]] = None,
    date_range: Optional[DateRange] = None,
) -> list[Invoice]:
    """Filter invoices by client, status and issue date."""
    wanted_status = InvoiceStatus(status) if status else None
    return [
        inv
        for inv in invoices
        if (client_id is None or inv.client_id == client_id)
        and (wanted_status is None or inv.status == wanted_status)
        and (date_range is None or date_range.contains(inv.date))
    ]


def filter_bills(
    bills: Iterable[Bill],
    supplier_id: Optional[str] = None,
    status: Optional[Union[BillStatus, str]] = None,
    date_range: Optional[DateRange] = None,
) -> list[Bill]:
    """Filter bills by supplier, status and issue date."""
    wanted_status = BillStatus(status) if status else None
    return [
        bill
        for bill in bills
        if (supplier_id is None or bill.supplier_id == supplier_id)
        and (wanted_status is None or bill.status == wanted_status)
        and (date_range is None or date_range.contains(bill.date))
    ]


def _summarize(documents: Sequence[Union[Invoice, Bill]], outstanding, paid) -> DocumentSummary:
    return DocumentSummary(
        count=len(documents),
        total=sum((doc.total for doc in documents), ZERO),
        outstanding=sum(
            (doc.total for doc in documents if doc.status in outstanding), ZERO
        ),
        paid=sum((doc.total for doc in documents if doc.status == paid), ZERO),
    )


def summarize_invoices(invoices: Sequence[Invoice]) -> DocumentSummary:
    """Totals over invoices; sent and overdue invoices are outstanding."""
    return _summarize(invoices, OUTSTANDING_INVOICE_STATUSES, InvoiceStatus.PAID)


def summarize_bills(bills: Sequence[Bill]) -> DocumentSummary:
    """Totals over bills; pending and overdue bills are outstanding."""
    return _summarize(bills, OUTSTANDING_BILL_STATUSES, BillStatus.PAID)
