"""Shared pytest fixtures for bookkeep tests."""

import tempfile
import os
from datetime import date
from decimal import Decimal
from pathlib import Path
import pytest

from bookkeep.database.factories import create_sqlite_database
from bookkeep.domain.category import CategoryService
from bookkeep.domain.entities import Account, Category, Transaction, TransactionType
from bookkeep.domain.record_import import RecordImportService
from bookkeep.domain.report import ReportService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def report_service(temp_db):
    """Create a ReportService with a temporary database."""
    return ReportService(temp_db)


@pytest.fixture
def import_service(temp_db):
    """Create a RecordImportService with a temporary database."""
    return RecordImportService(temp_db)


@pytest.fixture
def category_service(temp_db):
    """Create a CategoryService with a temporary database."""
    return CategoryService(temp_db)


@pytest.fixture
def make_transaction():
    """Return a factory for in-memory transactions."""
    counter = {"next": 0}

    def _make(
        amount,
        txn_type="income",
        txn_date=date(2025, 1, 15),
        category_id=None,
        **kwargs,
    ) -> Transaction:
        counter["next"] += 1
        return Transaction(
            id=kwargs.pop("id", f"t{counter['next']}"),
            date=txn_date,
            description=kwargs.pop("description", ""),
            amount=Decimal(str(amount)),
            type=TransactionType(txn_type),
            category_id=category_id,
            **kwargs,
        )

    return _make


@pytest.fixture
def sample_categories():
    """Income and expense categories, one of them inactive."""
    return [
        Category(id="cat-sales", name="Ventas", type="income", color="#4CAF50"),
        Category(id="cat-services", name="Servicios", type="income", color="#2196F3"),
        Category(id="cat-salaries", name="Salarios", type="expense", color="#F44336"),
        Category(id="cat-rent", name="Alquiler", type="expense", color="#607D8B"),
        Category(
            id="cat-old", name="Publicidad", type="expense", color="#E91E63", is_active=False
        ),
    ]


@pytest.fixture
def sample_accounts():
    """Bank, cash and credit accounts."""
    return [
        Account(id="acc-bank", name="Cuenta Corriente", type="bank", balance=Decimal("15000")),
        Account(id="acc-cash", name="Caja Menor", type="cash", balance=Decimal("500")),
        Account(id="acc-card", name="Tarjeta", type="credit", balance=Decimal("-2500")),
    ]


@pytest.fixture
def imported_db(temp_db, import_service, fixtures_dir):
    """Temporary database loaded with the sample records file."""
    import_service.import_file(str(fixtures_dir / "sample_records.json"))
    return temp_db


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"
