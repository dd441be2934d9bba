"""Cash flow statement."""

from collections import defaultdict
from decimal import Decimal
from typing import Optional, Sequence

from bookkeep.domain.aggregation import filter_transactions
from bookkeep.domain.entities import (
    ZERO,
    Account,
    CashFlowStatement,
    DateRange,
    FlowGroup,
    Transaction,
    TransactionType,
)


def build_cash_flow_statement(
    transactions: Sequence[Transaction],
    accounts: Sequence[Account],
    date_range: DateRange,
) -> CashFlowStatement:
    """Build a cash flow statement for a date range.

    The ending balance is the current sum of every account balance. The
    starting balance is derived as ending balance minus net cash flow, which
    assumes every balance change in the window came from these transactions.

    Args:
        transactions: All transactions
        accounts: All accounts
        date_range: Inclusive statement window

    Returns:
        CashFlowStatement with inflows and outflows grouped by category id
    """
    inflows: dict[Optional[str], Decimal] = defaultdict(lambda: ZERO)
    outflows: dict[Optional[str], Decimal] = defaultdict(lambda: ZERO)

    for txn in filter_transactions(transactions, date_range=date_range):
        if txn.type == TransactionType.INCOME:
            inflows[txn.category_id] += txn.amount
        else:
            outflows[txn.category_id] += txn.amount

    total_inflows = sum(inflows.values(), ZERO)
    total_outflows = sum(outflows.values(), ZERO)
    net_cash_flow = total_inflows - total_outflows
    ending_balance = sum((acc.balance for acc in accounts), ZERO)

    return CashFlowStatement(
        date_range=date_range,
        starting_balance=ending_balance - net_cash_flow,
        ending_balance=ending_balance,
        inflows=FlowGroup(by_category=dict(inflows), total=total_inflows),
        outflows=FlowGroup(by_category=dict(outflows), total=total_outflows),
        net_cash_flow=net_cash_flow,
    )
