# utils/status_enums.py

from enum import Enum


class RetirementStrategy(str, Enum):
    """Enumeration of retirement strategies evaluated by the projection engine."""

    REGULAR_FIRE = "regular_fire"
    COAST_FIRE = "coast_fire"
    LEAN_FIRE = "lean_fire"
    FAT_FIRE = "fat_fire"
    BARISTA_FIRE = "barista_fire"
    FINE = "fine"
    TRADITIONAL = "traditional"


class DesiredLifestyle(str, Enum):
    """Enumeration of retirement lifestyles."""

    LEAN = "lean"
    MODERATE = "moderate"
    FAT = "fat"


class Currency(str, Enum):
    """Enumeration of account currencies."""

    EUR = "EUR"
    USD = "USD"
    GBP = "GBP"
    PHP = "PHP"
    OTHER = "OTHER"


class AccountCategory(str, Enum):
    """Enumeration of balance-sheet categories for tracked accounts."""

    CURRENT_ASSET = "current_asset"
    NON_CURRENT_ASSET = "non_current_asset"
    CURRENT_LIABILITY = "current_liability"
    NON_CURRENT_LIABILITY = "non_current_liability"


# Display titles used by reports
STRATEGY_TITLES = {
    RetirementStrategy.REGULAR_FIRE: "Regular FIRE",
    RetirementStrategy.COAST_FIRE: "Coast FIRE",
    RetirementStrategy.LEAN_FIRE: "Lean FIRE",
    RetirementStrategy.FAT_FIRE: "Fat FIRE",
    RetirementStrategy.BARISTA_FIRE: "Barista FIRE",
    RetirementStrategy.FINE: "FINE",
    RetirementStrategy.TRADITIONAL: "Traditional Retirement",
}


# Explicit exports
__all__ = [
    "RetirementStrategy",
    "DesiredLifestyle",
    "Currency",
    "AccountCategory",
    "STRATEGY_TITLES",
]
