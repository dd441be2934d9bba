"""Budget variance."""

from typing import Iterable

from bookkeep.domain.aggregation import percent_change
from bookkeep.domain.entities import (
    ZERO,
    Budget,
    BudgetLineVariance,
    BudgetVariance,
)


def calculate_budget_variance(budget: Budget) -> BudgetVariance:
    """Compute planned vs. actual totals for a budget.

    Actual amounts are taken as stored on each budget category; they are not
    recomputed from transactions.
    """
    lines = tuple(
        BudgetLineVariance(
            category_id=line.category_id,
            planned=line.planned_amount,
            actual=line.actual_amount,
            variance_percent=percent_change(line.actual_amount, line.planned_amount),
        )
        for line in budget.categories
    )
    planned = sum((line.planned for line in lines), ZERO)
    actual = sum((line.actual for line in lines), ZERO)
    return BudgetVariance(
        budget_id=budget.id,
        name=budget.name,
        planned=planned,
        actual=actual,
        variance=actual - planned,
        variance_percent=percent_change(actual, planned),
        lines=lines,
    )


def summarize_budgets(budgets: Iterable[Budget]) -> tuple[BudgetVariance, ...]:
    return tuple(calculate_budget_variance(budget) for budget in budgets)
