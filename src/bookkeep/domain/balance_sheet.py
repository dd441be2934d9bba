"""Balance sheet classification of accounts."""

import logging
from datetime import date
from decimal import Decimal
from typing import Iterable, Sequence

from bookkeep.domain.entities import (
    ZERO,
    Account,
    AccountType,
    BalanceSheet,
    Bill,
    BillStatus,
    Invoice,
    InvoiceStatus,
    PositionStatement,
)

logger = logging.getLogger(__name__)

ASSET_TYPES = frozenset(
    {AccountType.BANK.value, AccountType.CASH.value, AccountType.INVESTMENT.value}
)
LIABILITY_TYPES = frozenset({AccountType.CREDIT.value})

SETTLED_INVOICE_STATUSES = frozenset(
    {InvoiceStatus.PAID.value, InvoiceStatus.CANCELLED.value}
)
SETTLED_BILL_STATUSES = frozenset({BillStatus.PAID.value, BillStatus.CANCELLED.value})


def _sum_balances(accounts: Iterable[Account], account_type: str) -> Decimal:
    return sum((acc.balance for acc in accounts if acc.type == account_type), ZERO)


def build_balance_sheet(
    accounts: Sequence[Account], include_inactive: bool = False
) -> BalanceSheet:
    """Classify accounts into assets and liabilities.

    Bank, cash and investment accounts are assets at their signed balance.
    Credit accounts are liabilities at the absolute value of their balance.
    Accounts of any other type are left out of both groups.

    Args:
        accounts: Accounts to classify
        include_inactive: If True, inactive accounts are included

    Returns:
        BalanceSheet with totals and equity
    """
    assets = []
    liabilities = []
    for account in accounts:
        if not include_inactive and not account.is_active:
            continue
        if account.type in ASSET_TYPES:
            assets.append(account)
        elif account.type in LIABILITY_TYPES:
            liabilities.append(account)
        else:
            logger.debug(
                "Account %s has unrecognized type %r; excluded from balance sheet",
                account.id,
                account.type,
            )

    total_assets = sum((acc.balance for acc in assets), ZERO)
    total_liabilities = sum((abs(acc.balance) for acc in liabilities), ZERO)
    return BalanceSheet(
        assets=tuple(assets),
        liabilities=tuple(liabilities),
        total_assets=total_assets,
        total_liabilities=total_liabilities,
        equity=total_assets - total_liabilities,
    )


def build_position_statement(
    accounts: Sequence[Account],
    invoices: Sequence[Invoice],
    bills: Sequence[Bill],
    as_of: date,
) -> PositionStatement:
    """Balance sheet at ``as_of`` including open invoices and bills.

    Receivables are invoices that are neither paid nor cancelled and dated on
    or before ``as_of``; payables are the same for bills. Account balances
    are taken as stored, for all accounts regardless of activity.
    """
    cash = _sum_balances(accounts, AccountType.CASH.value)
    bank = _sum_balances(accounts, AccountType.BANK.value)
    investments = _sum_balances(accounts, AccountType.INVESTMENT.value)
    receivables = sum(
        (
            inv.total
            for inv in invoices
            if inv.status.value not in SETTLED_INVOICE_STATUSES
            and inv.date is not None
            and inv.date <= as_of
        ),
        ZERO,
    )
    payables = sum(
        (
            bill.total
            for bill in bills
            if bill.status.value not in SETTLED_BILL_STATUSES
            and bill.date is not None
            and bill.date <= as_of
        ),
        ZERO,
    )
    credit_cards = sum(
        (abs(acc.balance) for acc in accounts if acc.type in LIABILITY_TYPES), ZERO
    )

    total_assets = cash + bank + investments + receivables
    total_liabilities = payables + credit_cards
    return PositionStatement(
        as_of=as_of,
        cash=cash,
        bank=bank,
        investments=investments,
        receivables=receivables,
        total_assets=total_assets,
        payables=payables,
        credit_cards=credit_cards,
        total_liabilities=total_liabilities,
        equity=total_assets - total_liabilities,
    )
