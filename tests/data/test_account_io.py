# tests/data/test_account_io.py

from datetime import datetime
from pathlib import Path

import pandas as pd
import pytest

from fire_model.data.readers import DataReadError, read_accounts, read_history
from fire_model.data.writers import (
    DataWriteError,
    write_accounts,
    write_history,
    write_projections,
)
from fire_model.projections.reporting import projections_to_frame
from fire_model.projections.strategies import calculate_all_strategies
from fire_model.state.accounts import Account, NetWorthSummary
from fire_model.state.history import history_to_frame, take_snapshot
from fire_model.utils.status_enums import AccountCategory, Currency

SAMPLE_ACCOUNTS = Path(__file__).resolve().parents[2] / "config" / "accounts.example.csv"


def test_read_sample_accounts():
    accounts = read_accounts(SAMPLE_ACCOUNTS)

    assert [a.name for a in accounts] == [
        "Checking", "Brokerage", "Pension fund", "Credit card", "Mortgage",
    ]
    assert accounts[1].currency == Currency.USD
    assert accounts[4].category == AccountCategory.NON_CURRENT_LIABILITY
    assert accounts[0].last_updated == datetime(2026, 9, 30)
    assert len({a.id for a in accounts}) == len(accounts)


def test_read_accounts_missing_file(tmp_path):
    with pytest.raises(DataReadError, match="not found"):
        read_accounts(tmp_path / "accounts.csv")


def test_read_accounts_unsupported_format(tmp_path):
    path = tmp_path / "accounts.txt"
    path.write_text("name,category,currency,balance\n")
    with pytest.raises(DataReadError, match="Unsupported file format"):
        read_accounts(path)


def test_read_accounts_missing_columns(tmp_path):
    path = tmp_path / "accounts.csv"
    path.write_text("name,balance\nChecking,10\n")
    with pytest.raises(DataReadError, match="currency"):
        read_accounts(path)


def test_read_accounts_invalid_row(tmp_path):
    path = tmp_path / "accounts.csv"
    path.write_text(
        "name,category,currency,balance\n"
        "Checking,current_asset,EUR,10\n"
        "Mystery,current_asset,XYZ,10\n"
    )
    with pytest.raises(DataReadError, match="row 2"):
        read_accounts(path)


def test_read_accounts_blank_dates_get_defaults(tmp_path):
    path = tmp_path / "accounts.csv"
    path.write_text(
        "name,category,currency,balance,last_updated\n"
        "Checking,current_asset,EUR,10,\n"
    )
    before = datetime.now()
    (account,) = read_accounts(path)
    assert account.last_updated >= before


def test_read_accounts_json(tmp_path):
    path = tmp_path / "accounts.json"
    pd.DataFrame(
        [{"name": "Wallet", "category": "current_asset", "currency": "PHP", "balance": 2500}]
    ).to_json(path, orient="records")

    (account,) = read_accounts(path)
    assert account.currency == Currency.PHP
    assert account.balance == 2500


def test_write_then_read_accounts_keeps_ids(tmp_path):
    accounts = [
        Account(name="Checking", category="current_asset", currency="EUR", balance=10.5),
        Account(name="Loan", category="non_current_liability", currency="GBP", balance=900),
    ]
    path = write_accounts(accounts, tmp_path / "out" / "accounts.csv")

    loaded = read_accounts(path)
    assert [a.id for a in loaded] == [a.id for a in accounts]
    assert [a.balance for a in loaded] == [10.5, 900]
    assert "is_asset" not in pd.read_csv(path).columns


def test_write_projections_and_history(tmp_path, base_inputs):
    frame = projections_to_frame(calculate_all_strategies(base_inputs))

    out = write_projections(frame, tmp_path, "frugal")
    assert out == tmp_path / "frugal_projections.csv"
    written = pd.read_csv(out)
    assert len(written) == len(frame)
    assert written["strategy"].tolist() == frame["strategy"].tolist()

    hist_out = write_history(pd.DataFrame({"net_worth_base": [1.0]}), tmp_path, "frugal")
    assert hist_out.name == "frugal_history.csv"


def test_write_projections_unwritable_target(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    with pytest.raises(DataWriteError):
        write_projections(pd.DataFrame({"a": [1]}), blocker, "baseline")


def test_digit_only_names_survive_round_trip(tmp_path):
    accounts = [
        Account(name="2024", category="current_asset", currency="EUR", balance=1),
        Account(name="007", category="current_liability", currency="EUR", balance=2),
    ]
    path = write_accounts(accounts, tmp_path / "accounts.csv")

    loaded = read_accounts(path)
    assert [a.name for a in loaded] == ["2024", "007"]


def test_digit_only_names_from_json(tmp_path):
    path = tmp_path / "accounts.json"
    path.write_text(
        '[{"id": 42, "name": "401", "category": "non_current_asset", '
        '"currency": "USD", "balance": 5000}]'
    )
    (account,) = read_accounts(path)
    assert account.name == "401"
    assert account.id == "42"


def test_history_round_trip(tmp_path):
    snaps = [
        take_snapshot(NetWorthSummary(net_worth_base=100.0), 1, datetime(2026, 1, 1)),
        take_snapshot(NetWorthSummary(net_worth_base=150.0), 2, datetime(2026, 2, 1)),
    ]
    path = write_history(history_to_frame(snaps), tmp_path, "baseline")

    loaded = read_history(path)
    assert sorted(s.timestamp for s in loaded) == [datetime(2026, 1, 1), datetime(2026, 2, 1)]
    assert {s.id for s in loaded} == {s.id for s in snaps}
    assert history_to_frame(loaded)["change"].tolist() == [50, 0]


def test_read_history_missing_columns(tmp_path):
    path = tmp_path / "baseline_history.csv"
    path.write_text("timestamp,net_worth_base\n2026-01-01,10\n")
    with pytest.raises(DataReadError, match="account_count"):
        read_history(path)


def test_read_history_bad_timestamp(tmp_path):
    path = tmp_path / "baseline_history.csv"
    path.write_text(
        "timestamp,net_worth_base,total_assets_base,total_liabilities_base,"
        "liquid_net_worth_base,account_count\n"
        "not a date,10,10,0,10,1\n"
    )
    with pytest.raises(DataReadError, match="row 1"):
        read_history(path)
