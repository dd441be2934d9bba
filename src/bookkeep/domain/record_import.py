"""JSON record import domain service.

Import documents use the camelCase field names of the web client's data
store. This module is the boundary where those loosely shaped records are
resolved into typed entities, with defaults for every optional field.
"""

import json
import logging
from pathlib import Path
from typing import Any, Callable, Optional

from bookkeep.database.base import Database
from bookkeep.domain.documents import compute_document_totals, item_total
from bookkeep.domain.entities import (
    ZERO,
    Account,
    Bill,
    BillStatus,
    Budget,
    BudgetCategory,
    Category,
    Client,
    DocumentItem,
    Invoice,
    InvoiceStatus,
    Supplier,
    TaxCategory,
    Transaction,
    TransactionType,
)
from bookkeep.domain.errors import (
    ConflictError,
    ImportFormatError,
    ValidationError,
    invalid_record,
    negative_amount,
)
from bookkeep.utils.amount_parser import to_decimal
from bookkeep.utils.date_parser import coerce_date, coerce_datetime

logger = logging.getLogger(__name__)


def _required(raw: dict[str, Any], key: str) -> Any:
    value = raw.get(key)
    if value is None or value == "":
        raise ValidationError(f"missing required field '{key}'")
    return value


def _text(raw: dict[str, Any], key: str) -> Optional[str]:
    value = raw.get(key)
    return None if value is None else str(value)


def _flag(raw: dict[str, Any], key: str, default: bool = True) -> bool:
    value = raw.get(key)
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ValidationError(f"'{key}' must be true or false, got {value!r}")
    return value


def _objects(raw: dict[str, Any], key: str) -> list[dict[str, Any]]:
    value = raw.get(key) or []
    if not isinstance(value, list):
        raise ValidationError(f"'{key}' must be a list")
    for index, entry in enumerate(value):
        if not isinstance(entry, dict):
            raise ValidationError(f"entry {index} of '{key}' must be an object")
    return value


def parse_category(raw: dict[str, Any]) -> Category:
    """Build a Category from an import record."""
    return Category(
        id=str(_required(raw, "id")),
        name=str(_required(raw, "name")),
        type=str(_required(raw, "type")),
        color=raw.get("color") or "#cccccc",
        parent_id=_text(raw, "parentId"),
        description=_text(raw, "description"),
        is_active=_flag(raw, "isActive"),
    )


def parse_account(raw: dict[str, Any]) -> Account:
    """Build an Account from an import record."""
    return Account(
        id=str(_required(raw, "id")),
        name=str(_required(raw, "name")),
        type=str(_required(raw, "type")),
        balance=to_decimal(raw.get("balance"), ZERO),
        currency=raw.get("currency") or "USD",
        description=_text(raw, "description"),
        is_active=_flag(raw, "isActive"),
    )


def _parse_party(raw: dict[str, Any]) -> dict[str, Any]:
    return {
        "id": str(_required(raw, "id")),
        "name": str(_required(raw, "name")),
        "contact_person": _text(raw, "contactPerson"),
        "email": _text(raw, "email"),
        "phone": _text(raw, "phone"),
        "address": _text(raw, "address"),
        "tax_id": _text(raw, "taxId"),
        "notes": _text(raw, "notes"),
        "is_active": _flag(raw, "isActive"),
    }


def parse_client(raw: dict[str, Any]) -> Client:
    """Build a Client from an import record."""
    return Client(**_parse_party(raw))


def parse_supplier(raw: dict[str, Any]) -> Supplier:
    """Build a Supplier from an import record."""
    return Supplier(**_parse_party(raw))


def parse_transaction(raw: dict[str, Any]) -> Transaction:
    """Build a Transaction from an import record.

    Raises:
        ValidationError: If a required field is missing or the amount is negative
        ValueError: If the type, tax category or an amount is invalid
    """
    txn_id = str(_required(raw, "id"))
    amount = to_decimal(_required(raw, "amount"))
    if amount < 0:
        raise ValidationError(negative_amount(txn_id))

    tax_category = raw.get("taxCategory")
    return Transaction(
        id=txn_id,
        date=coerce_date(raw.get("date")),
        description=raw.get("description") or "",
        amount=amount,
        type=TransactionType(_required(raw, "type")),
        category_id=_text(raw, "category"),
        payment_method=raw.get("paymentMethod") or "",
        reference=_text(raw, "reference"),
        notes=_text(raw, "notes"),
        iva_amount=to_decimal(raw.get("ivaAmount")),
        iva_rate=to_decimal(raw.get("ivaRate")),
        tax_category=TaxCategory(tax_category) if tax_category else None,
        created_at=coerce_datetime(raw.get("createdAt")),
    )


def parse_item(raw: dict[str, Any]) -> DocumentItem:
    """Build a DocumentItem; a missing total is quantity times unit price."""
    quantity = to_decimal(raw.get("quantity"), ZERO)
    unit_price = to_decimal(raw.get("unitPrice"), ZERO)
    return DocumentItem(
        description=raw.get("description") or "",
        quantity=quantity,
        unit_price=unit_price,
        tax=to_decimal(raw.get("tax"), ZERO),
        total=to_decimal(raw.get("total"), item_total(quantity, unit_price)),
    )


def _parse_document(raw: dict[str, Any]) -> dict[str, Any]:
    """Shared invoice/bill fields. Stored totals win over derived ones."""
    items = tuple(parse_item(item) for item in _objects(raw, "items"))
    discount = to_decimal(raw.get("discount"), ZERO)
    derived = compute_document_totals(items, discount)
    return {
        "id": str(_required(raw, "id")),
        "number": str(raw.get("number") or raw["id"]),
        "date": coerce_date(raw.get("date")),
        "due_date": coerce_date(raw.get("dueDate")),
        "items": items,
        "subtotal": to_decimal(raw.get("subtotal"), derived.subtotal),
        "tax": to_decimal(raw.get("tax"), derived.tax),
        "discount": discount,
        "total": to_decimal(raw.get("total"), derived.total),
        "notes": _text(raw, "notes"),
        "payment_date": coerce_date(raw.get("paymentDate")),
        "created_at": coerce_datetime(raw.get("createdAt")),
    }


def parse_invoice(raw: dict[str, Any]) -> Invoice:
    """Build an Invoice from an import record."""
    return Invoice(
        client_id=str(_required(raw, "clientId")),
        status=InvoiceStatus(raw.get("status") or InvoiceStatus.DRAFT.value),
        **_parse_document(raw),
    )


def parse_bill(raw: dict[str, Any]) -> Bill:
    """Build a Bill from an import record."""
    return Bill(
        supplier_id=str(_required(raw, "supplierId")),
        status=BillStatus(raw.get("status") or BillStatus.PENDING.value),
        **_parse_document(raw),
    )


def parse_budget(raw: dict[str, Any]) -> Budget:
    """Build a Budget from an import record."""
    return Budget(
        id=str(_required(raw, "id")),
        name=str(_required(raw, "name")),
        description=_text(raw, "description"),
        start_date=coerce_date(raw.get("startDate")),
        end_date=coerce_date(raw.get("endDate")),
        categories=tuple(
            BudgetCategory(
                category_id=str(_required(line, "categoryId")),
                planned_amount=to_decimal(line.get("plannedAmount"), ZERO),
                actual_amount=to_decimal(line.get("actualAmount"), ZERO),
            )
            for line in _objects(raw, "categories")
        ),
        created_at=coerce_datetime(raw.get("createdAt")),
    )


class RecordImportService:
    """Service for importing records from a JSON document."""

    def __init__(self, db: Database):
        """Initialize record import service.

        Args:
            db: Database instance
        """
        self.db = db
        # Reference data first so later collections can point at it
        self.collections: tuple[tuple[str, Callable, Callable], ...] = (
            ("categories", parse_category, db.create_category),
            ("accounts", parse_account, db.create_account),
            ("clients", parse_client, db.create_client),
            ("suppliers", parse_supplier, db.create_supplier),
            ("transactions", parse_transaction, db.create_transaction),
            ("invoices", parse_invoice, db.create_invoice),
            ("bills", parse_bill, db.create_bill),
            ("budgets", parse_budget, db.create_budget),
        )

    def import_file(self, file_path: str) -> dict[str, Any]:
        """Import records from a JSON file.

        Args:
            file_path: Path to JSON document

        Returns:
            Dict with import statistics:
            - imported: number of records imported
            - skipped: number of records skipped (ids already stored)
            - errors: list of error messages for unreadable records
            - by_collection: imported count per collection

        Raises:
            ImportFormatError: If the document cannot be read
            FileNotFoundError: If the file doesn't exist
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"Import file not found: {file_path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                document = json.load(f)
        except json.JSONDecodeError as e:
            raise ImportFormatError(f"Could not read '{file_path}': {e}")

        return self.import_document(document)

    def import_document(self, document: Any) -> dict[str, Any]:
        """Import records from an already decoded JSON document."""
        if not isinstance(document, dict):
            raise ImportFormatError("Import document must be a JSON object")

        imported = 0
        skipped = 0
        errors: list[str] = []
        by_collection: dict[str, int] = {}

        for collection, parse, store in self.collections:
            records = document.get(collection) or []
            if not isinstance(records, list):
                raise ImportFormatError(f"'{collection}' must be a list")

            count = 0
            for index, raw in enumerate(records):
                try:
                    if not isinstance(raw, dict):
                        raise ValidationError("record must be an object")
                    record = parse(raw)
                except ValueError as e:
                    errors.append(invalid_record(collection, index, str(e)))
                    continue

                try:
                    store(record)
                except ConflictError as e:
                    logger.info("Skipping %s: %s", collection, e)
                    skipped += 1
                    continue
                count += 1

            by_collection[collection] = count
            imported += count
            if records:
                logger.info("Imported %d of %d %s", count, len(records), collection)

        return {
            "imported": imported,
            "skipped": skipped,
            "errors": errors,
            "by_collection": by_collection,
        }
