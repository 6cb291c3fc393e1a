# tests/projections/test_cli.py

from pathlib import Path

import pandas as pd
import pytest

from fire_model.projections.cli import main, parse_arguments
from logging_config import reset_logging

ROOT = Path(__file__).resolve().parents[2]
SAMPLE_CONFIG = ROOT / "config" / "planner.yaml"
SAMPLE_ACCOUNTS = ROOT / "config" / "accounts.example.csv"


@pytest.fixture(autouse=True)
def _clean_logging():
    reset_logging()
    yield
    reset_logging()


def _cli(tmp_path, *extra):
    return [
        "--config", str(SAMPLE_CONFIG),
        "--output-dir", str(tmp_path / "out"),
        "--log-dir", str(tmp_path / "logs"),
        *extra,
    ]


def test_parse_arguments_defaults():
    args = parse_arguments(["--config", "planner.yaml"])
    assert args.scenario == "baseline"
    assert args.accounts is None
    assert args.output_dir == "output"
    assert not args.debug


def test_parse_arguments_requires_config():
    with pytest.raises(SystemExit):
        parse_arguments([])


def test_main_writes_ranked_projections(tmp_path, capsys):
    assert main(_cli(tmp_path)) == 0

    out = capsys.readouterr().out
    assert "Scenario: baseline" in out
    assert "Regular FIRE" in out

    written = pd.read_csv(tmp_path / "out" / "baseline_projections.csv")
    assert len(written) == 7
    assert written["is_feasible"].tolist() == sorted(written["is_feasible"].tolist(), reverse=True)
    assert not (tmp_path / "out" / "baseline_history.csv").exists()

    assert (tmp_path / "logs" / "combined.log").exists()
    assert (tmp_path / "logs" / "performance_metrics.log").read_text().strip() != ""


def test_main_with_accounts_uses_liquid_net_worth(tmp_path):
    assert main(_cli(tmp_path, "--scenario", "frugal", "--accounts", str(SAMPLE_ACCOUNTS))) == 0

    history = pd.read_csv(tmp_path / "out" / "frugal_history.csv")
    assert len(history) == 1
    # 12_500 + 41_000 * 0.92 - 1_800
    assert history["liquid_net_worth_base"].iloc[0] == pytest.approx(48_420)
    assert history["account_count"].iloc[0] == 5


def test_main_debug_creates_debug_log(tmp_path):
    assert main(_cli(tmp_path, "--debug")) == 0
    assert (tmp_path / "logs" / "debug_detail.log").exists()


def test_main_missing_config_fails(tmp_path):
    argv = ["--config", str(tmp_path / "missing.yaml"), "--log-dir", str(tmp_path / "logs")]
    assert main(argv) == 1


def test_main_unknown_scenario_fails(tmp_path):
    assert main(_cli(tmp_path, "--scenario", "moonshot")) == 1
    assert not (tmp_path / "out").exists()


def test_main_bad_accounts_file_fails(tmp_path):
    bad = tmp_path / "accounts.csv"
    bad.write_text("name,balance\nChecking,1\n")
    assert main(_cli(tmp_path, "--accounts", str(bad))) == 1


def test_main_history_accumulates_across_runs(tmp_path):
    first = tmp_path / "accounts_jan.csv"
    first.write_text(
        "name,category,currency,balance\n"
        "Checking,current_asset,EUR,10000\n"
    )
    second = tmp_path / "accounts_feb.csv"
    second.write_text(
        "name,category,currency,balance\n"
        "Checking,current_asset,EUR,12500\n"
        "Card,current_liability,EUR,500\n"
    )

    assert main(_cli(tmp_path, "--accounts", str(first))) == 0
    reset_logging()
    assert main(_cli(tmp_path, "--accounts", str(second))) == 0

    history = pd.read_csv(tmp_path / "out" / "baseline_history.csv")
    assert len(history) == 2
    # Newest first
    assert history["net_worth_base"].tolist() == [12_000, 10_000]
    assert history["change"].tolist() == [2_000, 0]
    assert history["change_pct"].tolist() == pytest.approx([20, 0])
    assert history["account_count"].tolist() == [2, 1]


def test_main_invalid_scenario_merge_fails(tmp_path):
    config = tmp_path / "planner.yaml"
    config.write_text(
        SAMPLE_CONFIG.read_text(encoding="utf-8")
        + "\n  greedy:\n    savings_rate: 150\n",
        encoding="utf-8",
    )
    argv = [
        "--config", str(config),
        "--scenario", "greedy",
        "--output-dir", str(tmp_path / "out"),
        "--log-dir", str(tmp_path / "logs"),
    ]
    assert main(argv) == 1
    assert "Could not resolve scenario 'greedy'" in (tmp_path / "logs" / "warnings_errors.log").read_text()


def test_main_does_not_mask_later_value_errors(tmp_path, monkeypatch):
    def _broken(inputs):
        raise ValueError("evaluation blew up")

    monkeypatch.setattr("fire_model.projections.cli.calculate_all_strategies", _broken)
    with pytest.raises(ValueError, match="evaluation blew up"):
        main(_cli(tmp_path))
