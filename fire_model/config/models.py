# fire_model/config/models.py
"""
Pydantic models for validating retirement inputs and the structure of the
planner configuration loaded from YAML files (e.g., planner.yaml).
"""

import logging
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from fire_model.state.accounts import ConversionRate
from fire_model.utils.status_enums import Currency, DesiredLifestyle

logger = logging.getLogger(__name__)

# --- Engine Input Record ---


class RetirementInputs(BaseModel):
    """
    Flat numeric inputs for one evaluation of the retirement engine.

    Percent-valued fields (savings_rate, expected_return, inflation_rate) are
    percentages, e.g. 7 for 7%. Monetary amounts are in the base currency.
    The record is frozen; build a new one with ``model_copy(update=...)``.
    """

    model_config = ConfigDict(frozen=True, use_enum_values=False)

    current_age: int = Field(..., ge=0, description="Age today, in years")
    retirement_age: int = Field(
        ..., ge=0, description="Target retirement age (not necessarily reachable)"
    )
    current_savings: float = Field(
        ..., description="Liquid net worth today, in base currency"
    )
    monthly_expenses: float = Field(..., ge=0.0, description="Spending per month")
    annual_income: float = Field(..., ge=0.0, description="Gross income per year")
    savings_rate: float = Field(
        ..., ge=0.0, le=100.0, description="Percent of annual income saved"
    )
    expected_return: float = Field(..., description="Annual investment return, percent")
    inflation_rate: float = Field(..., description="Annual inflation, percent")
    social_security_age: int = Field(67, ge=0)
    estimated_social_security: float = Field(
        0.0, ge=0.0, description="Monthly social security benefit"
    )
    part_time_income: float = Field(
        0.0, ge=0.0, description="Monthly part-time income (Barista FIRE)"
    )
    # Carried for the caller; no strategy formula reads it
    desired_lifestyle: DesiredLifestyle = DesiredLifestyle.MODERATE

    @model_validator(mode='after')
    def check_ages(self) -> 'RetirementInputs':
        """Warn on inputs that make the age-based strategies degenerate."""
        if self.retirement_age <= self.current_age:
            logger.warning(
                f"retirement_age ({self.retirement_age}) is not after current_age "
                f"({self.current_age}); age-based strategies will use a non-positive horizon."
            )
        if self.monthly_expenses == 0:
            logger.warning("monthly_expenses is 0; all expense-based targets will be 0.")
        return self


# --- Planner Configuration Models ---


class ScenarioDefinition(BaseModel):
    """Defines a single scenario, overriding any subset of the global inputs."""

    name: Optional[str] = None
    current_age: Optional[int] = None
    retirement_age: Optional[int] = None
    current_savings: Optional[float] = None
    monthly_expenses: Optional[float] = None
    annual_income: Optional[float] = None
    savings_rate: Optional[float] = None
    expected_return: Optional[float] = None
    inflation_rate: Optional[float] = None
    social_security_age: Optional[int] = None
    estimated_social_security: Optional[float] = None
    part_time_income: Optional[float] = None
    desired_lifestyle: Optional[DesiredLifestyle] = None

    model_config = ConfigDict(extra="forbid")


class PlannerConfig(BaseModel):
    """The root model for the entire planner configuration file."""

    global_parameters: RetirementInputs
    scenarios: Dict[str, ScenarioDefinition] = Field(default_factory=dict)
    base_currency: Currency = Currency.EUR
    conversion_rates: List[ConversionRate] = Field(default_factory=list)
    log_level: str = "INFO"

    @model_validator(mode='after')
    def check_baseline_scenario_exists(self) -> 'PlannerConfig':
        """Ensure a 'baseline' scenario is defined."""
        if "baseline" not in self.scenarios:
            logger.warning(
                "No 'baseline' scenario found in configuration; "
                "global_parameters will be used unchanged for it."
            )
        return self

    @model_validator(mode='after')
    def check_conversion_rates(self) -> 'PlannerConfig':
        """Reject duplicate currencies and a non-unit base-currency rate."""
        seen = set()
        for rate_cfg in self.conversion_rates:
            if rate_cfg.currency in seen:
                raise ValueError(
                    f"Duplicate conversion rate for currency {rate_cfg.currency.value}"
                )
            seen.add(rate_cfg.currency)
            if rate_cfg.currency == self.base_currency and rate_cfg.rate != 1.0:
                raise ValueError(
                    f"Base currency {self.base_currency.value} must convert at 1.0, "
                    f"got {rate_cfg.rate}"
                )
        return self


__all__ = [
    "RetirementInputs",
    "ScenarioDefinition",
    "PlannerConfig",
]
