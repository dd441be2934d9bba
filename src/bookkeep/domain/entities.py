"""Domain model entities for bookkeep.

These are pure data classes representing business records and report
results, independent of database schema. Aggregation code only ever sees
these types, so the storage layer can change without touching the reports.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from decimal import Decimal
from enum import Enum
from typing import Optional

ZERO = Decimal("0")


class TransactionType(str, Enum):
    """Direction of a transaction."""

    INCOME = "income"
    EXPENSE = "expense"


class AccountType(str, Enum):
    """Known account types."""

    BANK = "bank"
    CASH = "cash"
    CREDIT = "credit"
    INVESTMENT = "investment"


class TaxCategory(str, Enum):
    """IVA tax category of a transaction."""

    STANDARD = "standard"
    EXEMPT = "exempt"
    REDUCED = "reduced"


class InvoiceStatus(str, Enum):
    """Invoice status values."""

    DRAFT = "draft"
    SENT = "sent"
    PAID = "paid"
    OVERDUE = "overdue"
    CANCELLED = "cancelled"


class BillStatus(str, Enum):
    """Bill status values."""

    PENDING = "pending"
    PAID = "paid"
    OVERDUE = "overdue"
    CANCELLED = "cancelled"


class DashboardPeriod(str, Enum):
    """Look-back windows offered by the dashboard."""

    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"


# Records


@dataclass(frozen=True)
class Transaction:
    """Single-entry transaction. Direction is carried by ``type``."""

    id: str
    date: Optional[date]
    description: str
    amount: Decimal
    type: TransactionType
    category_id: Optional[str]
    payment_method: str = ""
    reference: Optional[str] = None
    notes: Optional[str] = None
    iva_amount: Optional[Decimal] = None
    iva_rate: Optional[Decimal] = None
    tax_category: Optional[TaxCategory] = None
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class Account:
    """Money account. ``type`` stays a raw string so unknown values survive."""

    id: str
    name: str
    type: str
    balance: Decimal
    currency: str = "USD"
    description: Optional[str] = None
    is_active: bool = True


@dataclass(frozen=True)
class Category:
    """Income or expense category."""

    id: str
    name: str
    type: str
    color: str = "#cccccc"
    parent_id: Optional[str] = None
    description: Optional[str] = None
    is_active: bool = True


@dataclass(frozen=True)
class Client:
    """Customer billed through invoices."""

    id: str
    name: str
    contact_person: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    tax_id: Optional[str] = None
    notes: Optional[str] = None
    is_active: bool = True


@dataclass(frozen=True)
class Supplier:
    """Vendor issuing bills."""

    id: str
    name: str
    contact_person: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    tax_id: Optional[str] = None
    notes: Optional[str] = None
    is_active: bool = True


@dataclass(frozen=True)
class DocumentItem:
    """Line item shared by invoices and bills."""

    description: str
    quantity: Decimal
    unit_price: Decimal
    tax: Decimal = ZERO
    total: Decimal = ZERO


@dataclass(frozen=True)
class Invoice:
    """Invoice issued to a client."""

    id: str
    number: str
    date: Optional[date]
    due_date: Optional[date]
    client_id: str
    status: InvoiceStatus
    items: tuple[DocumentItem, ...] = ()
    subtotal: Decimal = ZERO
    tax: Decimal = ZERO
    discount: Decimal = ZERO
    total: Decimal = ZERO
    notes: Optional[str] = None
    payment_date: Optional[date] = None
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class Bill:
    """Bill received from a supplier."""

    id: str
    number: str
    date: Optional[date]
    due_date: Optional[date]
    supplier_id: str
    status: BillStatus
    items: tuple[DocumentItem, ...] = ()
    subtotal: Decimal = ZERO
    tax: Decimal = ZERO
    discount: Decimal = ZERO
    total: Decimal = ZERO
    notes: Optional[str] = None
    payment_date: Optional[date] = None
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class BudgetCategory:
    """Planned and actual amount for one category inside a budget."""

    category_id: str
    planned_amount: Decimal
    actual_amount: Decimal = ZERO


@dataclass(frozen=True)
class Budget:
    """Budget over a date window."""

    id: str
    name: str
    start_date: Optional[date]
    end_date: Optional[date]
    categories: tuple[BudgetCategory, ...] = ()
    description: Optional[str] = None
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class DateRange:
    """Inclusive calendar date range."""

    start: date
    end: date

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    def contains(self, value: Optional[date]) -> bool:
        """Return True if ``value`` falls inside the range.

        Undated records (``None``) are never in range.
        """
        if value is None:
            return False
        return self.start <= value <= self.end


# Report results


@dataclass(frozen=True)
class PeriodTotals:
    """Income, expenses and net income over one range."""

    total_income: Decimal = ZERO
    total_expenses: Decimal = ZERO
    net_income: Decimal = ZERO


@dataclass(frozen=True)
class PeriodComparison:
    """Current period totals compared with the preceding period."""

    current_range: DateRange
    previous_range: DateRange
    current: PeriodTotals
    previous: PeriodTotals
    income_change: float
    expenses_change: float
    net_income_change: float


@dataclass(frozen=True)
class CategoryAmount:
    """One slice of a category breakdown."""

    category_id: str
    name: str
    color: str
    amount: Decimal
    count: int


@dataclass(frozen=True)
class CategoryBreakdown:
    """Breakdowns for both transaction types."""

    income: tuple[CategoryAmount, ...]
    expenses: tuple[CategoryAmount, ...]


@dataclass(frozen=True)
class CategoryFlows:
    """Income and expenses booked against one category id."""

    income: Decimal = ZERO
    expenses: Decimal = ZERO


@dataclass(frozen=True)
class IncomeExpenseReport:
    """Income/expense report grouped by raw category id."""

    total_income: Decimal
    total_expenses: Decimal
    balance: Decimal
    by_category: dict[Optional[str], CategoryFlows]


@dataclass(frozen=True)
class MonthlyPoint:
    """Income and expenses for one calendar month."""

    label: str
    year: int
    month: int
    income: Decimal
    expenses: Decimal


@dataclass(frozen=True)
class MonthlyFlow:
    """Inflows and outflows for one ``YYYY-MM`` month key."""

    month: str
    inflows: Decimal
    outflows: Decimal
    net_flow: Decimal


@dataclass(frozen=True)
class MonthlyCashFlowReport:
    """Month-by-month cash flow with grand totals."""

    rows: tuple[MonthlyFlow, ...]
    total_inflows: Decimal
    total_outflows: Decimal
    total_net_flow: Decimal


@dataclass(frozen=True)
class BalanceSheet:
    """Accounts classified into assets and liabilities."""

    assets: tuple[Account, ...]
    liabilities: tuple[Account, ...]
    total_assets: Decimal
    total_liabilities: Decimal
    equity: Decimal


@dataclass(frozen=True)
class PositionStatement:
    """Balance sheet including receivables and payables."""

    as_of: date
    cash: Decimal
    bank: Decimal
    investments: Decimal
    receivables: Decimal
    total_assets: Decimal
    payables: Decimal
    credit_cards: Decimal
    total_liabilities: Decimal
    equity: Decimal


@dataclass(frozen=True)
class FlowGroup:
    """Inflows or outflows keyed by raw category id."""

    by_category: dict[Optional[str], Decimal]
    total: Decimal


@dataclass(frozen=True)
class CashFlowStatement:
    """Cash flow over a range with derived starting balance."""

    date_range: DateRange
    starting_balance: Decimal
    ending_balance: Decimal
    inflows: FlowGroup
    outflows: FlowGroup
    net_cash_flow: Decimal


@dataclass(frozen=True)
class TaxBucket:
    """Count, gross amount and tax for one IVA grouping."""

    count: int = 0
    amount: Decimal = ZERO
    tax: Decimal = ZERO


@dataclass(frozen=True)
class TaxSummary:
    """IVA totals by tax category and by rate."""

    total_iva: Decimal
    by_category: dict[str, TaxBucket] = field(default_factory=dict)
    by_rate: dict[str, TaxBucket] = field(default_factory=dict)


@dataclass(frozen=True)
class BudgetLineVariance:
    """Variance for one budget category."""

    category_id: str
    planned: Decimal
    actual: Decimal
    variance_percent: float


@dataclass(frozen=True)
class BudgetVariance:
    """Budget-level planned/actual totals and variance."""

    budget_id: str
    name: str
    planned: Decimal
    actual: Decimal
    variance: Decimal
    variance_percent: float
    lines: tuple[BudgetLineVariance, ...]


@dataclass(frozen=True)
class DocumentTotals:
    """Derived subtotal, tax and total for an invoice or bill."""

    subtotal: Decimal
    tax: Decimal
    total: Decimal


@dataclass(frozen=True)
class DocumentSummary:
    """Totals over a set of invoices or bills."""

    count: int
    total: Decimal
    outstanding: Decimal
    paid: Decimal


@dataclass(frozen=True)
class Dashboard:
    """Everything the overview screen shows."""

    period: DashboardPeriod
    comparison: PeriodComparison
    total_balance: Decimal
    pending_invoices: DocumentSummary
    pending_bills: DocumentSummary
    breakdown: CategoryBreakdown
    monthly_series: tuple[MonthlyPoint, ...]
    recent_transactions: tuple[Transaction, ...]
