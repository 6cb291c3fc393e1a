# fire_model/projections/growth.py
"""
Compound-growth kernel shared by every retirement strategy.

Rates passed to these functions are decimal fractions (0.07 for 7%), not the
percentages carried on ``RetirementInputs``. Compounding is monthly at
``annual_rate / 12``; contributions are paid at the end of each month
(ordinary annuity).
"""

import logging
import math

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12

# Bisection bounds for years_to_target
MAX_SEARCH_YEARS = 100.0
SEARCH_TOLERANCE_YEARS = 0.01


def future_value(
    present_value: float,
    monthly_contribution: float,
    annual_rate: float,
    years: float,
) -> float:
    """
    Value after ``years`` of a lump sum plus a monthly contribution stream.

    Args:
        present_value: Amount invested today.
        monthly_contribution: Amount added at the end of every month.
        annual_rate: Annual return as a decimal fraction.
        years: Horizon in years, may be fractional.

    Returns:
        Future value of the lump sum plus the future value of the annuity.
    """
    monthly_rate = annual_rate / MONTHS_PER_YEAR
    months = years * MONTHS_PER_YEAR

    growth = math.pow(1 + monthly_rate, months)
    fv_present = present_value * growth

    if monthly_rate == 0:
        # Annuity degenerates to the plain sum of contributions
        fv_contributions = monthly_contribution * months
    else:
        fv_contributions = monthly_contribution * ((growth - 1) / monthly_rate)

    return fv_present + fv_contributions


def years_to_target(
    current_savings: float,
    target_amount: float,
    monthly_contribution: float,
    annual_rate: float,
) -> float:
    """
    Smallest number of years after which ``future_value`` reaches the target.

    With no contribution the target is either already reached (0.0) or never
    reached (``math.inf``). Otherwise the horizon [0, MAX_SEARCH_YEARS] is
    bisected until the bracket is narrower than SEARCH_TOLERANCE_YEARS.

    The bisection requires ``future_value`` to be non-decreasing in years, which
    holds for non-negative rates and contributions. A target that is not reached
    within the horizon returns exactly MAX_SEARCH_YEARS.

    Returns:
        Years to target, MAX_SEARCH_YEARS when out of the search horizon, or
        ``math.inf`` when unreachable without contributions.
    """
    if monthly_contribution == 0:
        if current_savings < target_amount:
            return math.inf
        return 0.0

    low = 0.0
    high = MAX_SEARCH_YEARS
    years = 0.0
    reached = False
    iterations = 0

    while high - low > SEARCH_TOLERANCE_YEARS:
        years = (low + high) / 2
        fv = future_value(current_savings, monthly_contribution, annual_rate, years)
        iterations += 1

        if fv < target_amount:
            low = years
        else:
            high = years
            reached = True

    if not reached:
        logger.debug(
            f"Target {target_amount:,.2f} not reached within {MAX_SEARCH_YEARS:.0f} years"
        )
        return MAX_SEARCH_YEARS

    logger.debug(f"years_to_target converged to {years:.4f} after {iterations} iterations")
    return years


def adjust_for_inflation(amount: float, years: float, inflation_rate: float) -> float:
    """Grow ``amount`` by ``inflation_rate`` (decimal fraction) compounded annually."""
    return amount * math.pow(1 + inflation_rate, years)


__all__ = [
    "MONTHS_PER_YEAR",
    "MAX_SEARCH_YEARS",
    "SEARCH_TOLERANCE_YEARS",
    "future_value",
    "years_to_target",
    "adjust_for_inflation",
]
