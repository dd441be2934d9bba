"""SQLAlchemy models for bookkeep database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Date,
    Numeric,
    Boolean,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()

MONEY = Numeric(14, 2)
QUANTITY = Numeric(12, 3)
RATE = Numeric(5, 2)


class Account(Base):
    """Money account model."""

    __tablename__ = "accounts"

    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    type = Column(String, nullable=False)
    balance = Column(MONEY, nullable=False, default=0)
    currency = Column(String, nullable=False, default="USD")
    description = Column(String, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)


class Category(Base):
    """Income/expense category model."""

    __tablename__ = "categories"

    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    type = Column(String, nullable=False)
    color = Column(String, nullable=False, default="#cccccc")
    parent_id = Column(String, ForeignKey("categories.id"), nullable=True)
    description = Column(String, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)


class Client(Base):
    """Client model."""

    __tablename__ = "clients"

    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    contact_person = Column(String, nullable=True)
    email = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    address = Column(String, nullable=True)
    tax_id = Column(String, nullable=True)
    notes = Column(String, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)


class Supplier(Base):
    """Supplier model."""

    __tablename__ = "suppliers"

    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    contact_person = Column(String, nullable=True)
    email = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    address = Column(String, nullable=True)
    tax_id = Column(String, nullable=True)
    notes = Column(String, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)


class Transaction(Base):
    """Transaction model.

    category_id is deliberately not a foreign key: records referencing a
    missing category are kept and reported as uncategorized.
    """

    __tablename__ = "transactions"

    id = Column(String, primary_key=True)
    date = Column(Date, nullable=True)
    description = Column(String, nullable=False, default="")
    amount = Column(MONEY, nullable=False)
    type = Column(String, nullable=False)
    category_id = Column(String, nullable=True)
    payment_method = Column(String, nullable=False, default="")
    reference = Column(String, nullable=True)
    notes = Column(String, nullable=True)
    iva_amount = Column(MONEY, nullable=True)
    iva_rate = Column(RATE, nullable=True)
    tax_category = Column(String, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)


class Invoice(Base):
    """Invoice model."""

    __tablename__ = "invoices"

    id = Column(String, primary_key=True)
    number = Column(String, nullable=False)
    date = Column(Date, nullable=True)
    due_date = Column(Date, nullable=True)
    client_id = Column(String, nullable=False)
    status = Column(String, nullable=False)
    subtotal = Column(MONEY, nullable=False, default=0)
    tax = Column(MONEY, nullable=False, default=0)
    discount = Column(MONEY, nullable=False, default=0)
    total = Column(MONEY, nullable=False, default=0)
    notes = Column(String, nullable=True)
    payment_date = Column(Date, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    items = relationship(
        "InvoiceItem",
        back_populates="invoice",
        cascade="all, delete-orphan",
        order_by="InvoiceItem.position",
    )


class InvoiceItem(Base):
    """Invoice line item model."""

    __tablename__ = "invoice_items"

    id = Column(Integer, primary_key=True)
    invoice_id = Column(String, ForeignKey("invoices.id"), nullable=False)
    position = Column(Integer, nullable=False)
    description = Column(String, nullable=False, default="")
    quantity = Column(QUANTITY, nullable=False)
    unit_price = Column(MONEY, nullable=False)
    tax = Column(MONEY, nullable=False, default=0)
    total = Column(MONEY, nullable=False, default=0)

    # Relationships
    invoice = relationship("Invoice", back_populates="items")


class Bill(Base):
    """Bill model."""

    __tablename__ = "bills"

    id = Column(String, primary_key=True)
    number = Column(String, nullable=False)
    date = Column(Date, nullable=True)
    due_date = Column(Date, nullable=True)
    supplier_id = Column(String, nullable=False)
    status = Column(String, nullable=False)
    subtotal = Column(MONEY, nullable=False, default=0)
    tax = Column(MONEY, nullable=False, default=0)
    discount = Column(MONEY, nullable=False, default=0)
    total = Column(MONEY, nullable=False, default=0)
    notes = Column(String, nullable=True)
    payment_date = Column(Date, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    items = relationship(
        "BillItem",
        back_populates="bill",
        cascade="all, delete-orphan",
        order_by="BillItem.position",
    )


class BillItem(Base):
    """Bill line item model."""

    __tablename__ = "bill_items"

    id = Column(Integer, primary_key=True)
    bill_id = Column(String, ForeignKey("bills.id"), nullable=False)
    position = Column(Integer, nullable=False)
    description = Column(String, nullable=False, default="")
    quantity = Column(QUANTITY, nullable=False)
    unit_price = Column(MONEY, nullable=False)
    tax = Column(MONEY, nullable=False, default=0)
    total = Column(MONEY, nullable=False, default=0)

    # Relationships
    bill = relationship("Bill", back_populates="items")


class Budget(Base):
    """Budget model."""

    __tablename__ = "budgets"

    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    description = Column(String, nullable=True)
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    categories = relationship(
        "BudgetCategory",
        back_populates="budget",
        cascade="all, delete-orphan",
        order_by="BudgetCategory.position",
    )


class BudgetCategory(Base):
    """Planned/actual amount of one category within a budget."""

    __tablename__ = "budget_categories"

    id = Column(Integer, primary_key=True)
    budget_id = Column(String, ForeignKey("budgets.id"), nullable=False)
    position = Column(Integer, nullable=False)
    category_id = Column(String, nullable=False)
    planned_amount = Column(MONEY, nullable=False, default=0)
    actual_amount = Column(MONEY, nullable=False, default=0)

    # Relationships
    budget = relationship("Budget", back_populates="categories")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
