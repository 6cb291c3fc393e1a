# fire_model/state/accounts.py
"""
Tracked accounts, currency conversion and net-worth aggregation.

Liabilities are stored with positive balances and subtracted during
aggregation. All base-currency figures convert each account balance with the
rate of its currency into the chosen base currency.
"""

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Sequence

import pandas as pd
from pydantic import BaseModel, Field, field_validator

from fire_model.schema.columns import (
    ACCOUNT_BALANCE,
    ACCOUNT_BALANCE_BASE,
    ACCOUNT_CATEGORY,
    ACCOUNT_CURRENCY,
    ACCOUNT_ID,
    ACCOUNT_IS_ASSET,
    ACCOUNT_IS_CURRENT,
    ACCOUNT_LAST_UPDATED,
    ACCOUNT_NAME,
    ACCOUNT_RATE_TO_BASE,
)
from fire_model.utils.status_enums import AccountCategory, Currency

logger = logging.getLogger(__name__)


# --- Category Metadata ---


@dataclass(frozen=True)
class AccountCategoryMeta:
    label: str
    subtitle: str
    is_asset: bool
    is_current: bool


ACCOUNT_CATEGORY_META: Dict[AccountCategory, AccountCategoryMeta] = {
    AccountCategory.CURRENT_ASSET: AccountCategoryMeta(
        label="Current Assets",
        subtitle="Liquid assets accessible within 12 months",
        is_asset=True,
        is_current=True,
    ),
    AccountCategory.NON_CURRENT_ASSET: AccountCategoryMeta(
        label="Non-Current Assets",
        subtitle="Long-term investments and property",
        is_asset=True,
        is_current=False,
    ),
    AccountCategory.CURRENT_LIABILITY: AccountCategoryMeta(
        label="Current Liabilities",
        subtitle="Debts due within 12 months",
        is_asset=False,
        is_current=True,
    ),
    AccountCategory.NON_CURRENT_LIABILITY: AccountCategoryMeta(
        label="Non-Current Liabilities",
        subtitle="Long-term debts and obligations",
        is_asset=False,
        is_current=False,
    ),
}


def get_category_meta(category: AccountCategory) -> AccountCategoryMeta:
    """Metadata for an account category (accepts the enum or its string value)."""
    return ACCOUNT_CATEGORY_META[AccountCategory(category)]


# --- Models ---


class Account(BaseModel):
    """A single tracked balance."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: str
    category: AccountCategory
    currency: Currency
    balance: float = Field(..., ge=0.0)
    last_updated: datetime = Field(default_factory=datetime.now)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Account name must not be empty")
        return v.strip()


class ConversionRate(BaseModel):
    """How many base-currency units one unit of ``currency`` is worth."""

    currency: Currency
    rate: float = Field(..., gt=0.0)
    label: Optional[str] = None


class NetWorthSummary(BaseModel):
    """Per-currency and base-currency balance-sheet totals."""

    base_currency: Currency = Currency.EUR
    total_assets: Dict[Currency, float] = Field(default_factory=dict)
    total_liabilities: Dict[Currency, float] = Field(default_factory=dict)
    net_worth: Dict[Currency, float] = Field(default_factory=dict)

    total_assets_base: float = 0.0
    total_liabilities_base: float = 0.0
    net_worth_base: float = 0.0
    current_assets_base: float = 0.0
    non_current_assets_base: float = 0.0
    current_liabilities_base: float = 0.0
    non_current_liabilities_base: float = 0.0
    liquid_net_worth_base: float = 0.0


# --- Conversion ---


def get_rate_to_base(
    currency: Currency,
    rates: Sequence[ConversionRate],
    base_currency: Currency = Currency.EUR,
) -> float:
    """
    Conversion rate from ``currency`` into the base currency.

    The base currency always converts at 1.0. A currency with no configured
    rate also converts at 1.0, with a warning.
    """
    currency = Currency(currency)
    if currency == Currency(base_currency):
        return 1.0
    for rate in rates:
        if rate.currency == currency:
            return rate.rate
    logger.warning(
        f"No conversion rate configured for {currency.value}; treating 1 {currency.value} "
        f"as 1 {Currency(base_currency).value}."
    )
    return 1.0


def accounts_to_frame(
    accounts: Iterable[Account],
    rates: Optional[Sequence[ConversionRate]] = None,
    base_currency: Currency = Currency.EUR,
) -> pd.DataFrame:
    """
    Tabulate accounts with their category flags and, when ``rates`` is given,
    their balance converted to the base currency.
    """
    records = [
        {
            ACCOUNT_ID: acc.id,
            ACCOUNT_NAME: acc.name,
            ACCOUNT_CATEGORY: acc.category.value,
            ACCOUNT_CURRENCY: acc.currency.value,
            ACCOUNT_BALANCE: acc.balance,
            ACCOUNT_LAST_UPDATED: acc.last_updated,
            ACCOUNT_IS_ASSET: get_category_meta(acc.category).is_asset,
            ACCOUNT_IS_CURRENT: get_category_meta(acc.category).is_current,
        }
        for acc in accounts
    ]
    columns = [
        ACCOUNT_ID, ACCOUNT_NAME, ACCOUNT_CATEGORY, ACCOUNT_CURRENCY,
        ACCOUNT_BALANCE, ACCOUNT_LAST_UPDATED, ACCOUNT_IS_ASSET, ACCOUNT_IS_CURRENT,
    ]
    df = pd.DataFrame.from_records(records, columns=columns)
    df[ACCOUNT_BALANCE] = df[ACCOUNT_BALANCE].astype(float)
    df[ACCOUNT_IS_ASSET] = df[ACCOUNT_IS_ASSET].astype(bool)
    df[ACCOUNT_IS_CURRENT] = df[ACCOUNT_IS_CURRENT].astype(bool)

    if rates is not None:
        rate_map = {
            c: get_rate_to_base(Currency(c), rates, base_currency)
            for c in df[ACCOUNT_CURRENCY].unique()
        }
        df[ACCOUNT_RATE_TO_BASE] = df[ACCOUNT_CURRENCY].map(rate_map).astype(float)
        df[ACCOUNT_BALANCE_BASE] = df[ACCOUNT_BALANCE] * df[ACCOUNT_RATE_TO_BASE]

    return df


# --- Aggregation ---


def summarize_net_worth(
    accounts: Iterable[Account],
    rates: Sequence[ConversionRate] = (),
    base_currency: Currency = Currency.EUR,
) -> NetWorthSummary:
    """
    Aggregate accounts into per-currency totals and base-currency totals.

    Liquid net worth is current assets minus current liabilities, in the
    base currency.
    """
    base_currency = Currency(base_currency)
    df = accounts_to_frame(accounts, rates, base_currency)

    if df.empty:
        logger.info("No accounts to summarize; returning an empty net-worth summary.")
        return NetWorthSummary(base_currency=base_currency)

    assets = df[df[ACCOUNT_IS_ASSET]]
    liabilities = df[~df[ACCOUNT_IS_ASSET]]

    assets_by_ccy = assets.groupby(ACCOUNT_CURRENCY)[ACCOUNT_BALANCE].sum()
    liabilities_by_ccy = liabilities.groupby(ACCOUNT_CURRENCY)[ACCOUNT_BALANCE].sum()

    total_assets: Dict[Currency, float] = {}
    total_liabilities: Dict[Currency, float] = {}
    net_worth: Dict[Currency, float] = {}
    for ccy in Currency:
        a = float(assets_by_ccy.get(ccy.value, 0.0))
        liab = float(liabilities_by_ccy.get(ccy.value, 0.0))
        total_assets[ccy] = a
        total_liabilities[ccy] = liab
        net_worth[ccy] = a - liab

    by_category = df.groupby(ACCOUNT_CATEGORY)[ACCOUNT_BALANCE_BASE].sum()

    def _category_total(category: AccountCategory) -> float:
        return float(by_category.get(category.value, 0.0))

    current_assets = _category_total(AccountCategory.CURRENT_ASSET)
    non_current_assets = _category_total(AccountCategory.NON_CURRENT_ASSET)
    current_liabilities = _category_total(AccountCategory.CURRENT_LIABILITY)
    non_current_liabilities = _category_total(AccountCategory.NON_CURRENT_LIABILITY)

    total_assets_base = current_assets + non_current_assets
    total_liabilities_base = current_liabilities + non_current_liabilities

    summary = NetWorthSummary(
        base_currency=base_currency,
        total_assets=total_assets,
        total_liabilities=total_liabilities,
        net_worth=net_worth,
        total_assets_base=total_assets_base,
        total_liabilities_base=total_liabilities_base,
        net_worth_base=total_assets_base - total_liabilities_base,
        current_assets_base=current_assets,
        non_current_assets_base=non_current_assets,
        current_liabilities_base=current_liabilities,
        non_current_liabilities_base=non_current_liabilities,
        liquid_net_worth_base=current_assets - current_liabilities,
    )
    logger.info(
        f"Summarized {len(df)} accounts: net worth {summary.net_worth_base:,.2f} "
        f"{base_currency.value}, liquid {summary.liquid_net_worth_base:,.2f} {base_currency.value}"
    )
    return summary


def liquid_net_worth(
    accounts: Iterable[Account],
    rates: Sequence[ConversionRate] = (),
    base_currency: Currency = Currency.EUR,
) -> float:
    """Current assets minus current liabilities, in the base currency."""
    return summarize_net_worth(accounts, rates, base_currency).liquid_net_worth_base


def active_currencies(summary: NetWorthSummary) -> List[Currency]:
    """Currencies holding any assets or liabilities, in enum order."""
    return [
        ccy
        for ccy in Currency
        if summary.total_assets.get(ccy, 0.0) > 0 or summary.total_liabilities.get(ccy, 0.0) > 0
    ]


__all__ = [
    "AccountCategoryMeta",
    "ACCOUNT_CATEGORY_META",
    "get_category_meta",
    "Account",
    "ConversionRate",
    "NetWorthSummary",
    "get_rate_to_base",
    "accounts_to_frame",
    "summarize_net_worth",
    "liquid_net_worth",
    "active_currencies",
]
