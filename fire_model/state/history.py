# fire_model/state/history.py
"""
Point-in-time net-worth snapshots and the change log built from them.
"""

import logging
import uuid
from datetime import datetime
from typing import Iterable, Optional

import numpy as np
import pandas as pd
from pydantic import BaseModel, ConfigDict, Field

from fire_model.schema.columns import (
    SNAPSHOT_ACCOUNT_COUNT,
    SNAPSHOT_CHANGE,
    SNAPSHOT_CHANGE_PCT,
    SNAPSHOT_ID,
    SNAPSHOT_LIQUID_NET_WORTH,
    SNAPSHOT_NET_WORTH,
    SNAPSHOT_TIMESTAMP,
    SNAPSHOT_TOTAL_ASSETS,
    SNAPSHOT_TOTAL_LIABILITIES,
    get_history_columns,
)
from .accounts import NetWorthSummary

logger = logging.getLogger(__name__)


class HistorySnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: datetime
    net_worth_base: float
    total_assets_base: float
    total_liabilities_base: float
    liquid_net_worth_base: float
    account_count: int = Field(..., ge=0)


def take_snapshot(
    summary: NetWorthSummary,
    account_count: int,
    timestamp: Optional[datetime] = None,
) -> HistorySnapshot:
    """Record the base-currency totals of ``summary`` as of ``timestamp`` (default now)."""
    snapshot = HistorySnapshot(
        timestamp=timestamp or datetime.now(),
        net_worth_base=summary.net_worth_base,
        total_assets_base=summary.total_assets_base,
        total_liabilities_base=summary.total_liabilities_base,
        liquid_net_worth_base=summary.liquid_net_worth_base,
        account_count=account_count,
    )
    logger.info(
        f"Snapshot {snapshot.id} at {snapshot.timestamp:%Y-%m-%d %H:%M}: "
        f"net worth {snapshot.net_worth_base:,.2f}"
    )
    return snapshot


def history_to_frame(snapshots: Iterable[HistorySnapshot]) -> pd.DataFrame:
    """
    Newest-first history log.

    ``change`` is the net-worth difference from the next older snapshot and
    ``change_pct`` that difference as a percentage of the older value. The
    oldest snapshot, and any snapshot following a zero net worth, report 0.
    """
    records = [
        {
            SNAPSHOT_ID: s.id,
            SNAPSHOT_TIMESTAMP: s.timestamp,
            SNAPSHOT_NET_WORTH: s.net_worth_base,
            SNAPSHOT_TOTAL_ASSETS: s.total_assets_base,
            SNAPSHOT_TOTAL_LIABILITIES: s.total_liabilities_base,
            SNAPSHOT_LIQUID_NET_WORTH: s.liquid_net_worth_base,
            SNAPSHOT_ACCOUNT_COUNT: s.account_count,
        }
        for s in snapshots
    ]
    df = pd.DataFrame.from_records(records, columns=get_history_columns()[:-2])
    if df.empty:
        return pd.DataFrame(columns=get_history_columns())

    df = df.sort_values(SNAPSHOT_TIMESTAMP, ascending=False, kind="mergesort").reset_index(drop=True)

    previous = df[SNAPSHOT_NET_WORTH].shift(-1)
    change = (df[SNAPSHOT_NET_WORTH] - previous).fillna(0.0)
    with np.errstate(divide="ignore", invalid="ignore"):
        pct = np.where(
            previous.notna() & (previous != 0),
            change / previous * 100,
            0.0,
        )

    df[SNAPSHOT_CHANGE] = change.astype(float)
    df[SNAPSHOT_CHANGE_PCT] = pct.astype(float)
    return df


__all__ = ["HistorySnapshot", "take_snapshot", "history_to_frame"]
