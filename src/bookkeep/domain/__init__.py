"""Domain layer for bookkeep application.

Only the pure aggregation functions are re-exported here. Services that talk
to the database (ReportService, RecordImportService) and the snapshot loader
are imported from their own modules so the database layer can import
entities without a cycle.
"""

from bookkeep.domain.aggregation import (
    build_monthly_series,
    compare_periods,
    group_cash_flow_by_month,
    percent_change,
    previous_range,
    summarize_period,
)
from bookkeep.domain.balance_sheet import build_balance_sheet, build_position_statement
from bookkeep.domain.breakdown import (
    build_category_breakdown,
    build_income_expense_breakdown,
    summarize_by_category,
)
from bookkeep.domain.budget import calculate_budget_variance, summarize_budgets
from bookkeep.domain.cash_flow import build_cash_flow_statement
from bookkeep.domain.documents import (
    compute_document_totals,
    summarize_bills,
    summarize_invoices,
)
from bookkeep.domain.tax import summarize_iva

__all__ = [
    "build_balance_sheet",
    "build_cash_flow_statement",
    "build_category_breakdown",
    "build_income_expense_breakdown",
    "build_monthly_series",
    "build_position_statement",
    "calculate_budget_variance",
    "compare_periods",
    "compute_document_totals",
    "group_cash_flow_by_month",
    "percent_change",
    "previous_range",
    "summarize_bills",
    "summarize_budgets",
    "summarize_by_category",
    "summarize_invoices",
    "summarize_iva",
    "summarize_period",
]
