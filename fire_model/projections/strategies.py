# fire_model/projections/strategies.py
"""
Retirement strategy evaluators.

Each evaluator turns one ``RetirementInputs`` record into one
``RetirementProjection``: it derives a strategy-specific expense basis and
target amount, then asks the growth kernel how long the uniform monthly
investment takes to get there. Evaluators are pure and independent; they
share only the kernel and the 4% safe withdrawal rate.
"""

import logging
from typing import Callable, Dict, List, Union

from pydantic import BaseModel, ConfigDict

from fire_model.config.models import RetirementInputs
from fire_model.utils.status_enums import RetirementStrategy
from .growth import (
    MAX_SEARCH_YEARS,
    MONTHS_PER_YEAR,
    adjust_for_inflation,
    future_value,
    years_to_target,
)

logger = logging.getLogger(__name__)

SAFE_WITHDRAWAL_RATE = 0.04  # 4% rule
LEAN_EXPENSE_FACTOR = 0.7
FAT_EXPENSE_FACTOR = 2.0
TRADITIONAL_FEASIBILITY_THRESHOLD = 0.8


class RetirementProjection(BaseModel):
    """Outcome of one strategy evaluation."""

    model_config = ConfigDict(frozen=True)

    strategy: RetirementStrategy
    target_amount: float
    years_to_target: float
    monthly_investment: float
    retirement_age: float
    projected_annual_expenses: float
    safe_withdrawal_amount: float
    is_feasible: bool
    notes: List[str]


# --- Shared helpers ---


def _monthly_investment(inputs: RetirementInputs) -> float:
    return (inputs.annual_income * inputs.savings_rate / 100) / MONTHS_PER_YEAR


def _solve_years(inputs: RetirementInputs, target_amount: float, monthly_investment: float) -> float:
    return years_to_target(
        inputs.current_savings,
        target_amount,
        monthly_investment,
        inputs.expected_return / 100,
    )


def _within_horizon(years: float) -> bool:
    return 0 < years < MAX_SEARCH_YEARS


def _thousands(amount: float) -> str:
    return f"{amount / 1000:,.0f}K"


def _percent_of(part: float, whole: float) -> str:
    if whole == 0:
        return "0%"
    return f"{part / whole * 100:.0f}%"


def _scaled_fire(
    inputs: RetirementInputs,
    strategy: RetirementStrategy,
    annual_expenses: float,
    notes: List[str],
) -> RetirementProjection:
    """Projection for the strategies that are a plain 25x multiple of annual expenses."""
    target_amount = annual_expenses / SAFE_WITHDRAWAL_RATE
    monthly_investment = _monthly_investment(inputs)
    years = _solve_years(inputs, target_amount, monthly_investment)

    return RetirementProjection(
        strategy=strategy,
        target_amount=target_amount,
        years_to_target=years,
        monthly_investment=monthly_investment,
        retirement_age=inputs.current_age + years,
        projected_annual_expenses=annual_expenses,
        safe_withdrawal_amount=target_amount * SAFE_WITHDRAWAL_RATE,
        is_feasible=_within_horizon(years),
        notes=notes,
    )


# --- Strategy Evaluators ---


def calculate_regular_fire(inputs: RetirementInputs) -> RetirementProjection:
    """Regular FIRE: retire fully once 25x annual expenses are invested."""
    annual_expenses = inputs.monthly_expenses * MONTHS_PER_YEAR
    target_amount = annual_expenses / SAFE_WITHDRAWAL_RATE
    notes = [
        f"Retire completely when you reach {_thousands(target_amount)}",
        f"Based on {SAFE_WITHDRAWAL_RATE * 100:.0f}% safe withdrawal rate",
        f"Assumes {inputs.expected_return:.1f}% annual investment returns",
    ]
    return _scaled_fire(inputs, RetirementStrategy.REGULAR_FIRE, annual_expenses, notes)


def calculate_coast_fire(inputs: RetirementInputs) -> RetirementProjection:
    """
    Coast FIRE: save until the portfolio can grow, with no further
    contributions, into the full FI number by retirement age.

    The reported target is the coast number, i.e. the inflation-adjusted FI
    number at retirement discounted back to today at the expected return.
    Feasible only while savings are still below the coast number.
    """
    years_until_retirement = inputs.retirement_age - inputs.current_age
    annual_expenses = inputs.monthly_expenses * MONTHS_PER_YEAR
    future_expenses = adjust_for_inflation(
        annual_expenses, years_until_retirement, inputs.inflation_rate / 100
    )
    fi_number = future_expenses / SAFE_WITHDRAWAL_RATE
    coast_number = fi_number / (1 + inputs.expected_return / 100) ** years_until_retirement

    monthly_investment = _monthly_investment(inputs)
    years = _solve_years(inputs, coast_number, monthly_investment)

    notes = [
        f"Reach Coast FIRE number: {_thousands(coast_number)}",
        f"Then stop saving and let it grow to {_thousands(fi_number)} by age {inputs.retirement_age}",
        "You can work part-time or cover only living expenses",
    ]

    return RetirementProjection(
        strategy=RetirementStrategy.COAST_FIRE,
        target_amount=coast_number,
        years_to_target=years,
        monthly_investment=monthly_investment,
        retirement_age=inputs.current_age + years,
        projected_annual_expenses=future_expenses,
        safe_withdrawal_amount=fi_number * SAFE_WITHDRAWAL_RATE,
        is_feasible=_within_horizon(years) and inputs.current_savings < coast_number,
        notes=notes,
    )


def calculate_lean_fire(inputs: RetirementInputs) -> RetirementProjection:
    """Lean FIRE: minimalist retirement on 70% of current expenses."""
    lean_expenses = inputs.monthly_expenses * LEAN_EXPENSE_FACTOR * MONTHS_PER_YEAR
    notes = [
        f"Minimalist lifestyle: {lean_expenses / MONTHS_PER_YEAR:,.0f}/month",
        f"Target: {_thousands(lean_expenses / SAFE_WITHDRAWAL_RATE)}",
        "Requires significant lifestyle adjustments and frugality",
    ]
    return _scaled_fire(inputs, RetirementStrategy.LEAN_FIRE, lean_expenses, notes)


def calculate_fat_fire(inputs: RetirementInputs) -> RetirementProjection:
    """Fat FIRE: retirement on double the current expenses."""
    fat_expenses = inputs.monthly_expenses * FAT_EXPENSE_FACTOR * MONTHS_PER_YEAR
    notes = [
        f"Luxurious lifestyle: {fat_expenses / MONTHS_PER_YEAR:,.0f}/month",
        f"Target: {_thousands(fat_expenses / SAFE_WITHDRAWAL_RATE)}",
        "Maintain or improve current lifestyle without compromise",
    ]
    return _scaled_fire(inputs, RetirementStrategy.FAT_FIRE, fat_expenses, notes)


def calculate_barista_fire(inputs: RetirementInputs) -> RetirementProjection:
    """Barista FIRE: the portfolio only has to cover what part-time work does not."""
    annual_expenses = inputs.monthly_expenses * MONTHS_PER_YEAR
    part_time_coverage = inputs.part_time_income * MONTHS_PER_YEAR
    gap_to_fill = max(0.0, annual_expenses - part_time_coverage)
    target_amount = gap_to_fill / SAFE_WITHDRAWAL_RATE

    monthly_investment = _monthly_investment(inputs)
    years = _solve_years(inputs, target_amount, monthly_investment)

    notes = [
        f"Part-time income covers {_percent_of(part_time_coverage, annual_expenses)} of expenses",
        f"Only need {_thousands(target_amount)} to cover the gap",
        "Work part-time doing something you enjoy",
    ]

    return RetirementProjection(
        strategy=RetirementStrategy.BARISTA_FIRE,
        target_amount=target_amount,
        years_to_target=years,
        monthly_investment=monthly_investment,
        retirement_age=inputs.current_age + years,
        projected_annual_expenses=annual_expenses,
        safe_withdrawal_amount=target_amount * SAFE_WITHDRAWAL_RATE + part_time_coverage,
        is_feasible=_within_horizon(years),
        notes=notes,
    )


def calculate_fine(inputs: RetirementInputs) -> RetirementProjection:
    """FINE: the full FI number, without committing to stop working."""
    annual_expenses = inputs.monthly_expenses * MONTHS_PER_YEAR
    target_amount = annual_expenses / SAFE_WITHDRAWAL_RATE
    notes = [
        f"Achieve FI number: {_thousands(target_amount)}",
        "Continue working because you want to, not because you have to",
        "Ultimate financial security and freedom of choice",
    ]
    return _scaled_fire(inputs, RetirementStrategy.FINE, annual_expenses, notes)


def calculate_traditional_retirement(inputs: RetirementInputs) -> RetirementProjection:
    """
    Traditional retirement at the chosen age, with social security.

    The horizon is fixed at retirement_age - current_age rather than solved.
    Feasible when savings projected to retirement reach 80% of the target.
    """
    years_until_retirement = inputs.retirement_age - inputs.current_age
    annual_expenses = inputs.monthly_expenses * MONTHS_PER_YEAR
    future_expenses = adjust_for_inflation(
        annual_expenses, years_until_retirement, inputs.inflation_rate / 100
    )

    social_security_income = inputs.estimated_social_security * MONTHS_PER_YEAR
    gap_to_fill = max(0.0, future_expenses - social_security_income)
    target_amount = gap_to_fill / SAFE_WITHDRAWAL_RATE

    monthly_investment = _monthly_investment(inputs)
    projected_savings = future_value(
        inputs.current_savings,
        monthly_investment,
        inputs.expected_return / 100,
        years_until_retirement,
    )

    notes = [
        f"Retire at age {inputs.retirement_age}",
        f"Social Security covers {_percent_of(social_security_income, future_expenses)} of expenses",
        f"Need {_thousands(target_amount)}, projected to have {_thousands(projected_savings)}",
    ]

    return RetirementProjection(
        strategy=RetirementStrategy.TRADITIONAL,
        target_amount=target_amount,
        years_to_target=years_until_retirement,
        monthly_investment=monthly_investment,
        retirement_age=inputs.retirement_age,
        projected_annual_expenses=future_expenses,
        safe_withdrawal_amount=target_amount * SAFE_WITHDRAWAL_RATE + social_security_income,
        is_feasible=projected_savings >= target_amount * TRADITIONAL_FEASIBILITY_THRESHOLD,
        notes=notes,
    )


# --- Dispatch ---

Evaluator = Callable[[RetirementInputs], RetirementProjection]

# Fixed evaluation order
STRATEGY_EVALUATORS: Dict[RetirementStrategy, Evaluator] = {
    RetirementStrategy.REGULAR_FIRE: calculate_regular_fire,
    RetirementStrategy.COAST_FIRE: calculate_coast_fire,
    RetirementStrategy.LEAN_FIRE: calculate_lean_fire,
    RetirementStrategy.FAT_FIRE: calculate_fat_fire,
    RetirementStrategy.BARISTA_FIRE: calculate_barista_fire,
    RetirementStrategy.FINE: calculate_fine,
    RetirementStrategy.TRADITIONAL: calculate_traditional_retirement,
}

_missing = set(RetirementStrategy) - set(STRATEGY_EVALUATORS)
if _missing:
    raise RuntimeError(f"No evaluator registered for strategies: {sorted(s.value for s in _missing)}")


def calculate_strategy(
    inputs: RetirementInputs, strategy: Union[RetirementStrategy, str]
) -> RetirementProjection:
    """Evaluate a single strategy by enum member or string tag."""
    try:
        key = RetirementStrategy(strategy)
    except ValueError as e:
        valid = [s.value for s in RetirementStrategy]
        raise ValueError(f"Unknown strategy '{strategy}'. Choose from: {valid}") from e
    return STRATEGY_EVALUATORS[key](inputs)


def calculate_all_strategies(
    inputs: RetirementInputs,
) -> Dict[RetirementStrategy, RetirementProjection]:
    """Run every strategy evaluator and key the projections by strategy."""
    projections = {
        strategy: evaluator(inputs) for strategy, evaluator in STRATEGY_EVALUATORS.items()
    }
    logger.debug(
        "Evaluated strategies: "
        + ", ".join(
            f"{s.value}={p.years_to_target:.2f}y" for s, p in projections.items()
        )
    )
    return projections


__all__ = [
    "SAFE_WITHDRAWAL_RATE",
    "LEAN_EXPENSE_FACTOR",
    "FAT_EXPENSE_FACTOR",
    "TRADITIONAL_FEASIBILITY_THRESHOLD",
    "RetirementProjection",
    "STRATEGY_EVALUATORS",
    "calculate_regular_fire",
    "calculate_coast_fire",
    "calculate_lean_fire",
    "calculate_fat_fire",
    "calculate_barista_fire",
    "calculate_fine",
    "calculate_traditional_retirement",
    "calculate_strategy",
    "calculate_all_strategies",
]
