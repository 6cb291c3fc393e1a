# fire_model/data/readers.py
"""
Functions for reading input data files (tracked accounts, net-worth history).
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Sequence, Union

import pandas as pd
from pydantic import ValidationError

from fire_model.schema.columns import (
    ACCOUNT_ID,
    ACCOUNT_LAST_UPDATED,
    ACCOUNT_NAME,
    SNAPSHOT_CHANGE,
    SNAPSHOT_CHANGE_PCT,
    SNAPSHOT_ID,
    SNAPSHOT_TIMESTAMP,
    get_account_columns,
    get_history_columns,
)
from fire_model.state.accounts import Account
from fire_model.state.history import HistorySnapshot

logger = logging.getLogger(__name__)


# Define a custom exception for data reading errors
class DataReadError(Exception):
    """Custom exception for errors during data reading."""
    pass


def _read_frame(file_path: Path, text_columns: Sequence[str] = ()) -> pd.DataFrame:
    """Read a CSV, Parquet or JSON file, keeping ``text_columns`` as strings."""
    dtype = {col: str for col in text_columns}
    file_suffix = file_path.suffix.lower()
    if file_suffix == '.csv':
        return pd.read_csv(file_path, dtype=dtype)
    if file_suffix == '.json':
        return pd.read_json(file_path, orient='records', dtype=dtype)
    if file_suffix == '.parquet':
        df = pd.read_parquet(file_path)
        for col in text_columns:
            if col in df.columns:
                df[col] = df[col].map(lambda v: v if pd.isna(v) else str(v))
        return df
    logger.error(f"Unsupported file format: {file_suffix}")
    raise DataReadError(
        f"Unsupported file format '{file_suffix}'. Please provide a .csv, .parquet or .json file."
    )


def _load(file_path: Path, what: str, required: List[str], text_columns: Sequence[str]) -> pd.DataFrame:
    logger.info(f"Attempting to read {what} from: {file_path}")

    if not file_path.exists():
        logger.error(f"{what.capitalize()} file not found: {file_path}")
        raise DataReadError(f"{what.capitalize()} file not found: {file_path}")

    try:
        df = _read_frame(file_path, text_columns)
    except DataReadError:
        raise
    except Exception as e:
        logger.exception(f"Error reading {what} file {file_path}: {e}")
        raise DataReadError(f"Error reading {what} file {file_path}") from e

    missing = [c for c in required if c not in df.columns]
    if missing:
        logger.error(f"{what.capitalize()} file {file_path} is missing required columns: {missing}")
        raise DataReadError(f"Missing required columns in {file_path}: {missing}")
    return df


def _records(df: pd.DataFrame, date_column: str) -> List[Dict[str, Any]]:
    """Row dicts with NaN/NaT dropped so model defaults apply."""
    records = []
    for record in df.to_dict(orient='records'):
        record = {k: v for k, v in record.items() if not pd.isna(v)}
        if date_column in record:
            record[date_column] = pd.Timestamp(record[date_column]).to_pydatetime()
        records.append(record)
    return records


def read_accounts(file_path: Union[str, Path]) -> List[Account]:
    """
    Reads tracked accounts from a CSV, Parquet or JSON file.

    Required columns are name, category, currency and balance; id and
    last_updated are optional and generated when absent or empty.

    Args:
        file_path: Path to the accounts file.

    Returns:
        A list of validated Account records, in file order.

    Raises:
        DataReadError: If the file cannot be found, read, or validated.
    """
    file_path = Path(file_path)
    df = _load(file_path, "accounts", get_account_columns(), (ACCOUNT_ID, ACCOUNT_NAME))

    if ACCOUNT_LAST_UPDATED in df.columns:
        df[ACCOUNT_LAST_UPDATED] = pd.to_datetime(df[ACCOUNT_LAST_UPDATED], errors='coerce')
        if df[ACCOUNT_LAST_UPDATED].isnull().any():
            logger.warning(f"Column '{ACCOUNT_LAST_UPDATED}' has empty or unparseable dates; using now.")

    accounts: List[Account] = []
    for row_num, record in enumerate(_records(df, ACCOUNT_LAST_UPDATED), start=1):
        try:
            accounts.append(Account(**record))
        except ValidationError as e:
            logger.error(f"Invalid account in {file_path} at row {row_num}: {e}")
            raise DataReadError(f"Invalid account at row {row_num} of {file_path}: {e}") from e

    logger.info(f"Loaded {len(accounts)} accounts from {file_path}")
    return accounts


def read_history(file_path: Union[str, Path]) -> List[HistorySnapshot]:
    """
    Reads net-worth snapshots from a history file written by ``write_history``.

    The derived change columns are ignored; they are recomputed by
    ``history_to_frame``. Snapshots come back in file order.

    Raises:
        DataReadError: If the file cannot be found, read, or validated.
    """
    file_path = Path(file_path)
    required = [
        c for c in get_history_columns()
        if c not in (SNAPSHOT_ID, SNAPSHOT_CHANGE, SNAPSHOT_CHANGE_PCT)
    ]
    df = _load(file_path, "history", required, (SNAPSHOT_ID,))
    df = df.drop(columns=[SNAPSHOT_CHANGE, SNAPSHOT_CHANGE_PCT], errors='ignore')
    df[SNAPSHOT_TIMESTAMP] = pd.to_datetime(df[SNAPSHOT_TIMESTAMP], errors='coerce')

    snapshots: List[HistorySnapshot] = []
    for row_num, record in enumerate(_records(df, SNAPSHOT_TIMESTAMP), start=1):
        try:
            snapshots.append(HistorySnapshot(**record))
        except ValidationError as e:
            logger.error(f"Invalid snapshot in {file_path} at row {row_num}: {e}")
            raise DataReadError(f"Invalid snapshot at row {row_num} of {file_path}: {e}") from e

    logger.info(f"Loaded {len(snapshots)} history snapshots from {file_path}")
    return snapshots


__all__ = ["DataReadError", "read_accounts", "read_history"]
