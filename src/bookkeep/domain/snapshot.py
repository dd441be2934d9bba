"""Immutable snapshot of every record collection."""

from dataclasses import dataclass

from bookkeep.database.base import Database
from bookkeep.domain.entities import (
    Account,
    Bill,
    Budget,
    Category,
    Client,
    Invoice,
    Supplier,
    Transaction,
)


@dataclass(frozen=True)
class RecordSnapshot:
    """All records as read at one point in time.

    Reports are computed from a snapshot rather than from live queries, so a
    single report never mixes data from two reads.
    """

    transactions: tuple[Transaction, ...] = ()
    accounts: tuple[Account, ...] = ()
    categories: tuple[Category, ...] = ()
    clients: tuple[Client, ...] = ()
    suppliers: tuple[Supplier, ...] = ()
    invoices: tuple[Invoice, ...] = ()
    bills: tuple[Bill, ...] = ()
    budgets: tuple[Budget, ...] = ()


def load_snapshot(db: Database) -> RecordSnapshot:
    """Read every collection from a database into a snapshot.

    Args:
        db: Database instance exposing the list_* read interface

    Returns:
        RecordSnapshot holding tuples of domain entities
    """
    return RecordSnapshot(
        transactions=tuple(db.list_transactions()),
        accounts=tuple(db.list_accounts()),
        categories=tuple(db.list_categories()),
        clients=tuple(db.list_clients()),
        suppliers=tuple(db.list_suppliers()),
        invoices=tuple(db.list_invoices()),
        bills=tuple(db.list_bills()),
        budgets=tuple(db.list_budgets()),
    )
