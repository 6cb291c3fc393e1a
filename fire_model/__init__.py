from fire_model.config.models import RetirementInputs
from fire_model.projections.growth import adjust_for_inflation, future_value, years_to_target
from fire_model.projections.strategies import (
    SAFE_WITHDRAWAL_RATE,
    RetirementProjection,
    calculate_all_strategies,
    calculate_strategy,
)
from fire_model.utils.status_enums import DesiredLifestyle, RetirementStrategy

__all__ = [
    'RetirementInputs',
    'RetirementProjection',
    'RetirementStrategy',
    'DesiredLifestyle',
    'SAFE_WITHDRAWAL_RATE',
    'future_value',
    'years_to_target',
    'adjust_for_inflation',
    'calculate_all_strategies',
    'calculate_strategy',
]
