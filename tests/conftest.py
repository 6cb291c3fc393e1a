# tests/conftest.py

import pytest

from fire_model.config.models import RetirementInputs


@pytest.fixture
def base_inputs():
    """Reference scenario: 30 years old, 50k saved, 3k/month expenses, 30% of 60k saved."""
    return RetirementInputs(
        current_age=30,
        retirement_age=65,
        current_savings=50_000,
        monthly_expenses=3_000,
        annual_income=60_000,
        savings_rate=30,
        expected_return=7,
        inflation_rate=3,
        social_security_age=67,
        estimated_social_security=1_500,
        part_time_income=1_500,
        desired_lifestyle="moderate",
    )


@pytest.fixture
def no_income_inputs(base_inputs):
    """Same person with nothing left to invest each month."""
    return base_inputs.model_copy(update={"annual_income": 0.0})
