"""Report domain service."""

from datetime import date
from typing import Iterable, Optional, Union

from bookkeep.database.base import Database
from bookkeep.domain.aggregation import (
    build_monthly_series,
    compare_periods,
    filter_transactions,
    group_cash_flow_by_month,
    summarize_period,
)
from bookkeep.domain.balance_sheet import build_balance_sheet, build_position_statement
from bookkeep.domain.breakdown import build_income_expense_breakdown, summarize_by_category
from bookkeep.domain.budget import summarize_budgets
from bookkeep.domain.cash_flow import build_cash_flow_statement
from bookkeep.domain.dashboard import build_dashboard
from bookkeep.domain.documents import (
    filter_bills,
    filter_invoices,
    summarize_bills,
    summarize_invoices,
)
from bookkeep.domain.entities import (
    BalanceSheet,
    BudgetVariance,
    CashFlowStatement,
    CategoryBreakdown,
    Dashboard,
    DashboardPeriod,
    DateRange,
    DocumentSummary,
    IncomeExpenseReport,
    MonthlyCashFlowReport,
    MonthlyPoint,
    PeriodComparison,
    PeriodTotals,
    PositionStatement,
    TaxCategory,
    TaxSummary,
)
from bookkeep.domain.snapshot import RecordSnapshot, load_snapshot
from bookkeep.domain.tax import summarize_iva

UNKNOWN_CATEGORY = "Unknown"
UNCATEGORIZED = "Uncategorized"


class ReportService:
    """Service for building reports from the current records.

    Every method reads a fresh snapshot, so consecutive calls reflect writes
    made in between.
    """

    def __init__(self, db: Database):
        """Initialize report service.

        Args:
            db: Database instance
        """
        self.db = db

    def snapshot(self) -> RecordSnapshot:
        """Read all records."""
        return load_snapshot(self.db)

    def category_names(self) -> dict[str, str]:
        """Map category IDs to names."""
        return {cat.id: cat.name for cat in self.db.list_categories()}

    def category_label(self, category_id: Optional[str], names: dict[str, str]) -> str:
        """Display name for a raw category id."""
        if category_id is None:
            return UNCATEGORIZED
        return names.get(category_id, UNKNOWN_CATEGORY)

    def period_totals(self, date_range: DateRange) -> PeriodTotals:
        """Income, expenses and net income inside a date range."""
        return summarize_period(self.db.list_transactions(), date_range)

    def compare_periods(self, date_range: DateRange) -> PeriodComparison:
        """Compare a range with the preceding range of equal length."""
        return compare_periods(self.db.list_transactions(), date_range)

    def category_breakdown(self, date_range: Optional[DateRange] = None) -> CategoryBreakdown:
        """Per-category totals for income and expense categories.

        Args:
            date_range: Optional inclusive date range; all transactions if None

        Returns:
            CategoryBreakdown for both transaction types
        """
        snapshot = self.snapshot()
        transactions = filter_transactions(snapshot.transactions, date_range=date_range)
        return build_income_expense_breakdown(transactions, snapshot.categories)

    def income_expense_report(
        self,
        date_range: Optional[DateRange] = None,
        category_ids: Optional[Iterable[str]] = None,
    ) -> IncomeExpenseReport:
        """Income/expense totals by raw category id."""
        transactions = filter_transactions(
            self.db.list_transactions(), date_range=date_range
        )
        return summarize_by_category(transactions, category_ids=category_ids)

    def monthly_series(
        self, today: Optional[date] = None, months: int = 6
    ) -> tuple[MonthlyPoint, ...]:
        """Income/expense totals for the last ``months`` months."""
        return build_monthly_series(self.db.list_transactions(), today=today, months=months)

    def monthly_cash_flow(
        self,
        date_range: Optional[DateRange] = None,
        payment_method: Optional[str] = None,
    ) -> MonthlyCashFlowReport:
        """Month-by-month inflows and outflows.

        Args:
            date_range: Optional inclusive date range
            payment_method: Optional substring matched against the payment method

        Returns:
            MonthlyCashFlowReport
        """
        transactions = filter_transactions(
            self.db.list_transactions(),
            date_range=date_range,
            payment_method=payment_method,
        )
        return group_cash_flow_by_month(transactions)

    def balance_sheet(self, include_inactive: bool = False) -> BalanceSheet:
        """Assets, liabilities and equity from account balances."""
        return build_balance_sheet(self.db.list_accounts(), include_inactive=include_inactive)

    def position_statement(self, as_of: Optional[date] = None) -> PositionStatement:
        """Balance sheet including open invoices and bills at ``as_of``."""
        snapshot = self.snapshot()
        return build_position_statement(
            snapshot.accounts,
            snapshot.invoices,
            snapshot.bills,
            as_of=as_of or date.today(),
        )

    def cash_flow(self, date_range: DateRange) -> CashFlowStatement:
        """Cash flow statement for a date range."""
        snapshot = self.snapshot()
        return build_cash_flow_statement(snapshot.transactions, snapshot.accounts, date_range)

    def tax_summary(
        self,
        date_range: Optional[DateRange] = None,
        tax_category: Optional[Union[TaxCategory, str]] = None,
    ) -> TaxSummary:
        """IVA summary, optionally restricted by date range and tax category."""
        return summarize_iva(
            self.db.list_transactions(), date_range=date_range, tax_category=tax_category
        )

    def budget_variances(self) -> tuple[BudgetVariance, ...]:
        """Planned vs. actual for every budget."""
        return summarize_budgets(self.db.list_budgets())

    def invoice_summary(
        self,
        client_id: Optional[str] = None,
        status: Optional[str] = None,
        date_range: Optional[DateRange] = None,
    ) -> DocumentSummary:
        """Totals over invoices matching the filters."""
        invoices = filter_invoices(
            self.db.list_invoices(), client_id=client_id, status=status, date_range=date_range
        )
        return summarize_invoices(invoices)

    def bill_summary(
        self,
        supplier_id: Optional[str] = None,
        status: Optional[str] = None,
        date_range: Optional[DateRange] = None,
    ) -> DocumentSummary:
        """Totals over bills matching the filters."""
        bills = filter_bills(
            self.db.list_bills(), supplier_id=supplier_id, status=status, date_range=date_range
        )
        return summarize_bills(bills)

    def dashboard(
        self,
        period: Union[DashboardPeriod, str] = DashboardPeriod.MONTH,
        today: Optional[date] = None,
    ) -> Dashboard:
        """Overview figures for a look-back period."""
        return build_dashboard(self.snapshot(), period=period, today=today)
