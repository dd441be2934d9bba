"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so enum parsing and the default
policy for optional columns live here and never inside the reports.
"""

from typing import Optional

from bookkeep.domain import entities as domain
from bookkeep.database.models import (
    Account as ORMAccount,
    Bill as ORMBill,
    BillItem as ORMBillItem,
    Budget as ORMBudget,
    BudgetCategory as ORMBudgetCategory,
    Category as ORMCategory,
    Client as ORMClient,
    Invoice as ORMInvoice,
    InvoiceItem as ORMInvoiceItem,
    Supplier as ORMSupplier,
    Transaction as ORMTransaction,
)


def _tax_category(value: Optional[str]) -> Optional[domain.TaxCategory]:
    return domain.TaxCategory(value) if value else None


def _item_to_domain(orm_item) -> domain.DocumentItem:
    return domain.DocumentItem(
        description=orm_item.description,
        quantity=orm_item.quantity,
        unit_price=orm_item.unit_price,
        tax=orm_item.tax,
        total=orm_item.total,
    )


def account_to_domain(orm_account: ORMAccount) -> domain.Account:
    """Convert SQLAlchemy Account model to domain Account entity."""
    return domain.Account(
        id=orm_account.id,
        name=orm_account.name,
        type=orm_account.type,
        balance=orm_account.balance,
        currency=orm_account.currency,
        description=orm_account.description,
        is_active=orm_account.is_active,
    )


def category_to_domain(orm_category: ORMCategory) -> domain.Category:
    """Convert SQLAlchemy Category model to domain Category entity."""
    return domain.Category(
        id=orm_category.id,
        name=orm_category.name,
        type=orm_category.type,
        color=orm_category.color,
        parent_id=orm_category.parent_id,
        description=orm_category.description,
        is_active=orm_category.is_active,
    )


def client_to_domain(orm_client: ORMClient) -> domain.Client:
    """Convert SQLAlchemy Client model to domain Client entity."""
    return domain.Client(
        id=orm_client.id,
        name=orm_client.name,
        contact_person=orm_client.contact_person,
        email=orm_client.email,
        phone=orm_client.phone,
        address=orm_client.address,
        tax_id=orm_client.tax_id,
        notes=orm_client.notes,
        is_active=orm_client.is_active,
    )


def supplier_to_domain(orm_supplier: ORMSupplier) -> domain.Supplier:
    """Convert SQLAlchemy Supplier model to domain Supplier entity."""
    return domain.Supplier(
        id=orm_supplier.id,
        name=orm_supplier.name,
        contact_person=orm_supplier.contact_person,
        email=orm_supplier.email,
        phone=orm_supplier.phone,
        address=orm_supplier.address,
        tax_id=orm_supplier.tax_id,
        notes=orm_supplier.notes,
        is_active=orm_supplier.is_active,
    )


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        date=orm_transaction.date,
        description=orm_transaction.description,
        amount=orm_transaction.amount,
        type=domain.TransactionType(orm_transaction.type),
        category_id=orm_transaction.category_id,
        payment_method=orm_transaction.payment_method,
        reference=orm_transaction.reference,
        notes=orm_transaction.notes,
        iva_amount=orm_transaction.iva_amount,
        iva_rate=orm_transaction.iva_rate,
        tax_category=_tax_category(orm_transaction.tax_category),
        created_at=orm_transaction.created_at,
    )


def invoice_to_domain(orm_invoice: ORMInvoice) -> domain.Invoice:
    """Convert SQLAlchemy Invoice model to domain Invoice entity."""
    return domain.Invoice(
        id=orm_invoice.id,
        number=orm_invoice.number,
        date=orm_invoice.date,
        due_date=orm_invoice.due_date,
        client_id=orm_invoice.client_id,
        status=domain.InvoiceStatus(orm_invoice.status),
        items=tuple(_item_to_domain(item) for item in orm_invoice.items),
        subtotal=orm_invoice.subtotal,
        tax=orm_invoice.tax,
        discount=orm_invoice.discount,
        total=orm_invoice.total,
        notes=orm_invoice.notes,
        payment_date=orm_invoice.payment_date,
        created_at=orm_invoice.created_at,
    )


def bill_to_domain(orm_bill: ORMBill) -> domain.Bill:
    """Convert SQLAlchemy Bill model to domain Bill entity."""
    return domain.Bill(
        id=orm_bill.id,
        number=orm_bill.number,
        date=orm_bill.date,
        due_date=orm_bill.due_date,
        supplier_id=orm_bill.supplier_id,
        status=domain.BillStatus(orm_bill.status),
        items=tuple(_item_to_domain(item) for item in orm_bill.items),
        subtotal=orm_bill.subtotal,
        tax=orm_bill.tax,
        discount=orm_bill.discount,
        total=orm_bill.total,
        notes=orm_bill.notes,
        payment_date=orm_bill.payment_date,
        created_at=orm_bill.created_at,
    )


def budget_to_domain(orm_budget: ORMBudget) -> domain.Budget:
    """Convert SQLAlchemy Budget model to domain Budget entity."""
    return domain.Budget(
        id=orm_budget.id,
        name=orm_budget.name,
        description=orm_budget.description,
        start_date=orm_budget.start_date,
        end_date=orm_budget.end_date,
        categories=tuple(
            domain.BudgetCategory(
                category_id=line.category_id,
                planned_amount=line.planned_amount,
                actual_amount=line.actual_amount,
            )
            for line in orm_budget.categories
        ),
        created_at=orm_budget.created_at,
    )


def account_to_orm(account: domain.Account) -> ORMAccount:
    """Convert domain Account entity to a new SQLAlchemy Account row."""
    return ORMAccount(
        id=account.id,
        name=account.name,
        type=account.type,
        balance=account.balance,
        currency=account.currency,
        description=account.description,
        is_active=account.is_active,
    )


def category_to_orm(category: domain.Category) -> ORMCategory:
    """Convert domain Category entity to a new SQLAlchemy Category row."""
    return ORMCategory(
        id=category.id,
        name=category.name,
        type=category.type,
        color=category.color,
        parent_id=category.parent_id,
        description=category.description,
        is_active=category.is_active,
    )


def client_to_orm(client: domain.Client) -> ORMClient:
    """Convert domain Client entity to a new SQLAlchemy Client row."""
    return ORMClient(
        id=client.id,
        name=client.name,
        contact_person=client.contact_person,
        email=client.email,
        phone=client.phone,
        address=client.address,
        tax_id=client.tax_id,
        notes=client.notes,
        is_active=client.is_active,
    )


def supplier_to_orm(supplier: domain.Supplier) -> ORMSupplier:
    """Convert domain Supplier entity to a new SQLAlchemy Supplier row."""
    return ORMSupplier(
        id=supplier.id,
        name=supplier.name,
        contact_person=supplier.contact_person,
        email=supplier.email,
        phone=supplier.phone,
        address=supplier.address,
        tax_id=supplier.tax_id,
        notes=supplier.notes,
        is_active=supplier.is_active,
    )


def transaction_to_orm(transaction: domain.Transaction) -> ORMTransaction:
    """Convert domain Transaction entity to a new SQLAlchemy Transaction row."""
    row = ORMTransaction(
        id=transaction.id,
        date=transaction.date,
        description=transaction.description,
        amount=transaction.amount,
        type=transaction.type.value,
        category_id=transaction.category_id,
        payment_method=transaction.payment_method,
        reference=transaction.reference,
        notes=transaction.notes,
        iva_amount=transaction.iva_amount,
        iva_rate=transaction.iva_rate,
        tax_category=transaction.tax_category.value if transaction.tax_category else None,
    )
    if transaction.created_at is not None:
        row.created_at = transaction.created_at
    return row


def invoice_to_orm(invoice: domain.Invoice) -> ORMInvoice:
    """Convert domain Invoice entity to a new SQLAlchemy Invoice row with items."""
    row = ORMInvoice(
        id=invoice.id,
        number=invoice.number,
        date=invoice.date,
        due_date=invoice.due_date,
        client_id=invoice.client_id,
        status=invoice.status.value,
        subtotal=invoice.subtotal,
        tax=invoice.tax,
        discount=invoice.discount,
        total=invoice.total,
        notes=invoice.notes,
        payment_date=invoice.payment_date,
        items=[
            ORMInvoiceItem(
                position=position,
                description=item.description,
                quantity=item.quantity,
                unit_price=item.unit_price,
                tax=item.tax,
                total=item.total,
            )
            for position, item in enumerate(invoice.items)
        ],
    )
    if invoice.created_at is not None:
        row.created_at = invoice.created_at
    return row


def bill_to_orm(bill: domain.Bill) -> ORMBill:
    """Convert domain Bill entity to a new SQLAlchemy Bill row with items."""
    row = ORMBill(
        id=bill.id,
        number=bill.number,
        date=bill.date,
        due_date=bill.due_date,
        supplier_id=bill.supplier_id,
        status=bill.status.value,
        subtotal=bill.subtotal,
        tax=bill.tax,
        discount=bill.discount,
        total=bill.total,
        notes=bill.notes,
        payment_date=bill.payment_date,
        items=[
            ORMBillItem(
                position=position,
                description=item.description,
                quantity=item.quantity,
                unit_price=item.unit_price,
                tax=item.tax,
                total=item.total,
            )
            for position, item in enumerate(bill.items)
        ],
    )
    if bill.created_at is not None:
        row.created_at = bill.created_at
    return row


def budget_to_orm(budget: domain.Budget) -> ORMBudget:
    """Convert domain Budget entity to a new SQLAlchemy Budget row with lines."""
    row = ORMBudget(
        id=budget.id,
        name=budget.name,
        description=budget.description,
        start_date=budget.start_date,
        end_date=budget.end_date,
        categories=[
            ORMBudgetCategory(
                position=position,
                category_id=line.category_id,
                planned_amount=line.planned_amount,
                actual_amount=line.actual_amount,
            )
            for position, line in enumerate(budget.categories)
        ],
    )
    if budget.created_at is not None:
        row.created_at = budget.created_at
    return row
