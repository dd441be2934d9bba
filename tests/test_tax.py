"""Tests for the IVA summary."""

from dataclasses import FrozenInstanceError
from datetime import date
from decimal import Decimal

import pytest

from bookkeep.domain.entities import DateRange, TaxCategory
from bookkeep.domain.tax import format_rate_key, summarize_iva


def test_single_standard_transaction(make_transaction):
    txn = make_transaction(
        2500,
        "income",
        iva_amount=Decimal("475"),
        iva_rate=Decimal("19"),
        tax_category=TaxCategory.STANDARD,
    )

    summary = summarize_iva([txn])

    assert summary.total_iva == Decimal("475")
    standard = summary.by_category["standard"]
    assert (standard.count, standard.amount, standard.tax) == (1, txn.amount, Decimal("475"))
    assert summary.by_rate["19%"].count == 1
    assert summary.by_rate["19%"].tax == Decimal("475")


def test_buckets_are_frozen(make_transaction):
    txn = make_transaction(100, "expense", iva_amount=Decimal("19"), iva_rate=Decimal("19"))
    other = make_transaction(200, "expense", iva_amount=Decimal("38"), iva_rate=Decimal("19"))

    summary = summarize_iva([txn, other])
    bucket = summary.by_rate["19%"]

    assert (bucket.count, bucket.amount, bucket.tax) == (2, Decimal("300"), Decimal("57"))
    with pytest.raises(FrozenInstanceError):
        bucket.count = 0


def test_transactions_without_iva_are_ignored(make_transaction):
    transactions = [
        make_transaction(100),
        make_transaction(100, iva_amount=Decimal("0"), iva_rate=Decimal("19")),
    ]

    summary = summarize_iva(transactions)

    assert summary.total_iva == Decimal("0")
    assert summary.by_category == {}
    assert summary.by_rate == {}


def test_missing_category_and_rate_use_defaults(make_transaction):
    txn = make_transaction(1000, "expense", iva_amount=Decimal("50"))

    summary = summarize_iva([txn])

    assert list(summary.by_category) == ["standard"]
    assert list(summary.by_rate) == ["0%"]


def test_filters_by_date_range_and_tax_category(make_transaction):
    transactions = [
        make_transaction(
            100, txn_date=date(2025, 1, 5), iva_amount=Decimal("19"),
            iva_rate=Decimal("19"), tax_category=TaxCategory.STANDARD,
        ),
        make_transaction(
            100, txn_date=date(2025, 1, 6), iva_amount=Decimal("5"),
            iva_rate=Decimal("5"), tax_category=TaxCategory.REDUCED,
        ),
        make_transaction(
            100, txn_date=date(2025, 2, 6), iva_amount=Decimal("19"),
            iva_rate=Decimal("19"), tax_category=TaxCategory.STANDARD,
        ),
        make_transaction(100, txn_date=date(2025, 1, 7), iva_amount=Decimal("19")),
    ]
    january = DateRange(start=date(2025, 1, 1), end=date(2025, 1, 31))

    in_january = summarize_iva(transactions, date_range=january)
    reduced = summarize_iva(transactions, tax_category="reduced")
    standard = summarize_iva(transactions, date_range=january, tax_category=TaxCategory.STANDARD)

    assert in_january.total_iva == Decimal("43")
    assert in_january.by_category["standard"].count == 2
    assert in_january.by_rate["5%"].tax == Decimal("5")
    assert reduced.total_iva == Decimal("5")
    assert standard.total_iva == Decimal("19")


@pytest.mark.parametrize(
    "rate,key",
    [
        (Decimal("19"), "19%"),
        (Decimal("19.00"), "19%"),
        (Decimal("5.5"), "5.5%"),
        (Decimal("0"), "0%"),
        (None, "0%"),
    ],
)
def test_format_rate_key(rate, key):
    assert format_rate_key(rate) == key
