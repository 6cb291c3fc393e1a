"""
Centralized column definitions for all data frames.

This module defines the column names used by the projection reports, the
account import/export files and the net-worth history log, so that readers,
writers and reports agree on one spelling.
"""

from enum import Enum
from typing import List


class ProjectionColumns(str, Enum):
    """Column definitions for the strategy projection report."""

    STRATEGY = "strategy"
    TITLE = "title"
    TARGET_AMOUNT = "target_amount"
    YEARS_TO_TARGET = "years_to_target"
    MONTHLY_INVESTMENT = "monthly_investment"
    RETIREMENT_AGE = "retirement_age"
    PROJECTED_ANNUAL_EXPENSES = "projected_annual_expenses"
    SAFE_WITHDRAWAL_AMOUNT = "safe_withdrawal_amount"
    IS_FEASIBLE = "is_feasible"
    NOTES = "notes"


class AccountColumns(str, Enum):
    """Column definitions for account data."""

    ACCOUNT_ID = "id"
    NAME = "name"
    CATEGORY = "category"
    CURRENCY = "currency"
    BALANCE = "balance"
    LAST_UPDATED = "last_updated"

    # Derived
    IS_ASSET = "is_asset"
    IS_CURRENT = "is_current"
    RATE_TO_BASE = "rate_to_base"
    BALANCE_BASE = "balance_base"


class HistoryColumns(str, Enum):
    """Column definitions for the net-worth history log."""

    SNAPSHOT_ID = "id"
    TIMESTAMP = "timestamp"
    NET_WORTH = "net_worth_base"
    TOTAL_ASSETS = "total_assets_base"
    TOTAL_LIABILITIES = "total_liabilities_base"
    LIQUID_NET_WORTH = "liquid_net_worth_base"
    ACCOUNT_COUNT = "account_count"
    CHANGE = "change"
    CHANGE_PCT = "change_pct"


def get_projection_columns() -> List[str]:
    """Get the ordered list of projection report columns."""
    return [col.value for col in ProjectionColumns]


def get_account_columns() -> List[str]:
    """Get the columns every account import file must provide."""
    return [
        AccountColumns.NAME.value,
        AccountColumns.CATEGORY.value,
        AccountColumns.CURRENCY.value,
        AccountColumns.BALANCE.value,
    ]


def get_history_columns() -> List[str]:
    """Get the ordered list of history log columns."""
    return [col.value for col in HistoryColumns]


# Module-level column name constants
STRATEGY = ProjectionColumns.STRATEGY.value
TITLE = ProjectionColumns.TITLE.value
TARGET_AMOUNT = ProjectionColumns.TARGET_AMOUNT.value
YEARS_TO_TARGET = ProjectionColumns.YEARS_TO_TARGET.value
MONTHLY_INVESTMENT = ProjectionColumns.MONTHLY_INVESTMENT.value
RETIREMENT_AGE = ProjectionColumns.RETIREMENT_AGE.value
PROJECTED_ANNUAL_EXPENSES = ProjectionColumns.PROJECTED_ANNUAL_EXPENSES.value
SAFE_WITHDRAWAL_AMOUNT = ProjectionColumns.SAFE_WITHDRAWAL_AMOUNT.value
IS_FEASIBLE = ProjectionColumns.IS_FEASIBLE.value
NOTES = ProjectionColumns.NOTES.value

ACCOUNT_ID = AccountColumns.ACCOUNT_ID.value
ACCOUNT_NAME = AccountColumns.NAME.value
ACCOUNT_CATEGORY = AccountColumns.CATEGORY.value
ACCOUNT_CURRENCY = AccountColumns.CURRENCY.value
ACCOUNT_BALANCE = AccountColumns.BALANCE.value
ACCOUNT_LAST_UPDATED = AccountColumns.LAST_UPDATED.value
ACCOUNT_IS_ASSET = AccountColumns.IS_ASSET.value
ACCOUNT_IS_CURRENT = AccountColumns.IS_CURRENT.value
ACCOUNT_RATE_TO_BASE = AccountColumns.RATE_TO_BASE.value
ACCOUNT_BALANCE_BASE = AccountColumns.BALANCE_BASE.value

SNAPSHOT_ID = HistoryColumns.SNAPSHOT_ID.value
SNAPSHOT_TIMESTAMP = HistoryColumns.TIMESTAMP.value
SNAPSHOT_NET_WORTH = HistoryColumns.NET_WORTH.value
SNAPSHOT_TOTAL_ASSETS = HistoryColumns.TOTAL_ASSETS.value
SNAPSHOT_TOTAL_LIABILITIES = HistoryColumns.TOTAL_LIABILITIES.value
SNAPSHOT_LIQUID_NET_WORTH = HistoryColumns.LIQUID_NET_WORTH.value
SNAPSHOT_ACCOUNT_COUNT = HistoryColumns.ACCOUNT_COUNT.value
SNAPSHOT_CHANGE = HistoryColumns.CHANGE.value
SNAPSHOT_CHANGE_PCT = HistoryColumns.CHANGE_PCT.value
