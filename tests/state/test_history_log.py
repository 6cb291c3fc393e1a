# tests/state/test_history_log.py

from datetime import datetime

import pytest
from pydantic import ValidationError

from fire_model.schema.columns import (
    SNAPSHOT_CHANGE,
    SNAPSHOT_CHANGE_PCT,
    SNAPSHOT_NET_WORTH,
    get_history_columns,
)
from fire_model.state.accounts import NetWorthSummary
from fire_model.state.history import HistorySnapshot, history_to_frame, take_snapshot


def _summary(net_worth):
    return NetWorthSummary(
        total_assets_base=net_worth,
        net_worth_base=net_worth,
        liquid_net_worth_base=net_worth,
    )


def test_take_snapshot_copies_totals():
    ts = datetime(2026, 1, 31)
    snap = take_snapshot(_summary(1_234.5), account_count=3, timestamp=ts)

    assert snap.timestamp == ts
    assert snap.net_worth_base == 1_234.5
    assert snap.total_liabilities_base == 0
    assert snap.account_count == 3

    with pytest.raises(ValidationError):
        snap.net_worth_base = 0


def test_take_snapshot_defaults_to_now():
    before = datetime.now()
    snap = take_snapshot(_summary(10), account_count=1)
    assert snap.timestamp >= before


def test_history_to_frame_newest_first_with_changes():
    snaps = [
        take_snapshot(_summary(150), 2, datetime(2026, 2, 1)),
        take_snapshot(_summary(100), 2, datetime(2026, 1, 1)),
        take_snapshot(_summary(120), 2, datetime(2026, 3, 1)),
    ]

    df = history_to_frame(snaps)

    assert list(df.columns) == get_history_columns()
    assert df[SNAPSHOT_NET_WORTH].tolist() == [120, 150, 100]
    assert df[SNAPSHOT_CHANGE].tolist() == pytest.approx([-30, 50, 0])
    assert df[SNAPSHOT_CHANGE_PCT].tolist() == pytest.approx([-20, 50, 0])


def test_history_to_frame_after_zero_net_worth():
    snaps = [
        take_snapshot(_summary(0), 0, datetime(2026, 1, 1)),
        take_snapshot(_summary(500), 1, datetime(2026, 2, 1)),
    ]
    df = history_to_frame(snaps)
    assert df[SNAPSHOT_CHANGE].tolist() == [500, 0]
    assert df[SNAPSHOT_CHANGE_PCT].tolist() == [0, 0]


def test_history_to_frame_empty():
    df = history_to_frame([])
    assert df.empty
    assert list(df.columns) == get_history_columns()


def test_snapshot_rejects_negative_account_count():
    with pytest.raises(ValidationError):
        HistorySnapshot(
            timestamp=datetime(2026, 1, 1),
            net_worth_base=0,
            total_assets_base=0,
            total_liabilities_base=0,
            liquid_net_worth_base=0,
            account_count=-1,
        )
