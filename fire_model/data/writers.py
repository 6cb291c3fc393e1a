# fire_model/data/writers.py
"""
Functions for writing planner outputs (projections, history, accounts).
"""

import logging
from pathlib import Path
from typing import Iterable, Union

import pandas as pd

from fire_model.state.accounts import Account, accounts_to_frame
from fire_model.schema.columns import ACCOUNT_IS_ASSET, ACCOUNT_IS_CURRENT

logger = logging.getLogger(__name__)


# Define a custom exception for data writing errors
class DataWriteError(Exception):
    """Custom exception for errors during data writing."""

    pass


def _write_csv(df: pd.DataFrame, output_path: Path, what: str) -> Path:
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(output_path, index=False)
    except OSError as e:
        logger.exception(f"Failed to write {what} to {output_path}: {e}")
        raise DataWriteError(f"Failed to write {what} to {output_path}") from e
    logger.info(f"Wrote {len(df)} {what} rows to {output_path}")
    return output_path


def write_projections(
    projections_df: pd.DataFrame,
    output_dir: Union[str, Path],
    scenario_name: str = "baseline",
) -> Path:
    """
    Writes a projection frame to ``<output_dir>/<scenario_name>_projections.csv``.

    Returns:
        Path of the written file.
    """
    output_path = Path(output_dir) / f"{scenario_name}_projections.csv"
    return _write_csv(projections_df, output_path, "projection")


def history_path(output_dir: Union[str, Path], scenario_name: str = "baseline") -> Path:
    """Location of the history log for ``scenario_name``."""
    return Path(output_dir) / f"{scenario_name}_history.csv"


def write_history(
    history_df: pd.DataFrame,
    output_dir: Union[str, Path],
    scenario_name: str = "baseline",
) -> Path:
    """Writes a history log frame to ``<output_dir>/<scenario_name>_history.csv``."""
    return _write_csv(history_df, history_path(output_dir, scenario_name), "history")


def write_accounts(accounts: Iterable[Account], output_path: Union[str, Path]) -> Path:
    """Writes accounts in the layout ``read_accounts`` accepts."""
    df = accounts_to_frame(accounts).drop(columns=[ACCOUNT_IS_ASSET, ACCOUNT_IS_CURRENT])
    return _write_csv(df, Path(output_path), "account")


__all__ = ["DataWriteError", "history_path", "write_projections", "write_history", "write_accounts"]
