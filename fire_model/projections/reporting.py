# fire_model/projections/reporting.py
"""
Tabular views of strategy projections for console output and export.
"""

import logging
import math
from typing import Mapping

import numpy as np
import pandas as pd

from fire_model.schema.columns import (
    IS_FEASIBLE,
    MONTHLY_INVESTMENT,
    NOTES,
    PROJECTED_ANNUAL_EXPENSES,
    RETIREMENT_AGE,
    SAFE_WITHDRAWAL_AMOUNT,
    STRATEGY,
    TARGET_AMOUNT,
    TITLE,
    YEARS_TO_TARGET,
    get_projection_columns,
)
from fire_model.utils.status_enums import STRATEGY_TITLES, RetirementStrategy
from .strategies import RetirementProjection

logger = logging.getLogger(__name__)

NOTES_SEPARATOR = "; "


def projections_to_frame(
    projections: Mapping[RetirementStrategy, RetirementProjection],
) -> pd.DataFrame:
    """
    One row per strategy, in the order the projections were produced.

    Args:
        projections: Mapping returned by ``calculate_all_strategies``.

    Returns:
        DataFrame indexed by strategy tag with the projection report columns.
    """
    rows = []
    for strategy, projection in projections.items():
        strategy = RetirementStrategy(strategy)
        rows.append(
            {
                STRATEGY: strategy.value,
                TITLE: STRATEGY_TITLES[strategy],
                TARGET_AMOUNT: projection.target_amount,
                YEARS_TO_TARGET: projection.years_to_target,
                MONTHLY_INVESTMENT: projection.monthly_investment,
                RETIREMENT_AGE: projection.retirement_age,
                PROJECTED_ANNUAL_EXPENSES: projection.projected_annual_expenses,
                SAFE_WITHDRAWAL_AMOUNT: projection.safe_withdrawal_amount,
                IS_FEASIBLE: projection.is_feasible,
                NOTES: NOTES_SEPARATOR.join(projection.notes),
            }
        )

    df = pd.DataFrame.from_records(rows, columns=get_projection_columns())
    df[IS_FEASIBLE] = df[IS_FEASIBLE].astype(bool)
    df = df.set_index(STRATEGY, drop=False)
    df.index.name = None
    logger.debug(f"Built projection frame with {len(df)} strategies")
    return df


def rank_strategies(frame: pd.DataFrame) -> pd.DataFrame:
    """Feasible strategies first, then fastest to target; unreachable targets last."""
    if frame.empty:
        return frame.copy()
    ranked = frame.assign(_infeasible=~frame[IS_FEASIBLE].astype(bool))
    ranked = ranked.sort_values(
        ["_infeasible", YEARS_TO_TARGET], ascending=[True, True], kind="mergesort"
    )
    return ranked.drop(columns="_infeasible")


def _format_years(years: float) -> str:
    if math.isinf(years):
        return "never"
    return f"{years:.1f}"


def format_projection_table(frame: pd.DataFrame, currency_label: str = "") -> str:
    """Render a projection frame as a fixed-width text table."""
    if frame.empty:
        return "No projections to display."

    suffix = f" ({currency_label})" if currency_label else ""
    header = (
        f"{'Strategy':<24} {'Target' + suffix:>18} {'Years':>7} "
        f"{'Ret. age':>9} {'Monthly inv.':>13} {'Feasible':>9}"
    )
    lines = [header, "-" * len(header)]
    for _, row in frame.iterrows():
        age = row[RETIREMENT_AGE]
        age_str = "-" if not np.isfinite(age) else f"{age:.1f}"
        lines.append(
            f"{row[TITLE]:<24} {row[TARGET_AMOUNT]:>18,.0f} "
            f"{_format_years(row[YEARS_TO_TARGET]):>7} {age_str:>9} "
            f"{row[MONTHLY_INVESTMENT]:>13,.0f} {'yes' if row[IS_FEASIBLE] else 'no':>9}"
        )
    return "\n".join(lines)


__all__ = [
    "NOTES_SEPARATOR",
    "projections_to_frame",
    "rank_strategies",
    "format_projection_table",
]
