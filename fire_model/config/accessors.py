# fire_model/config/accessors.py
"""
Helper functions to access and process configuration data, primarily handling
the merging of global parameters and scenario-specific overrides.
"""

import logging
from copy import deepcopy
from typing import Any, Dict, List

from pydantic import ValidationError

from .models import PlannerConfig, RetirementInputs

logger = logging.getLogger(__name__)


# --- Helper for Deep Merging Dictionaries ---
def _deep_merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Recursively merges 'override' dict into 'base' dict.
    Creates new dictionaries for nested structures to avoid modifying originals.
    Simple values in override replace values in base; None values are skipped.
    """
    merged = deepcopy(base)

    for key, override_value in override.items():
        base_value = merged.get(key)

        if isinstance(base_value, dict) and isinstance(override_value, dict):
            merged[key] = _deep_merge_dicts(base_value, override_value)
        elif override_value is not None:
            merged[key] = deepcopy(override_value)

    return merged


# --- Main Accessor Functions ---


def list_scenarios(planner_config: PlannerConfig) -> List[str]:
    """Scenario names in file order, with 'baseline' always available."""
    names = list(planner_config.scenarios.keys())
    if "baseline" not in names:
        names.insert(0, "baseline")
    return names


def get_scenario_inputs(planner_config: PlannerConfig, scenario_name: str) -> RetirementInputs:
    """
    Retrieves the retirement inputs for a specific scenario, merging global
    parameters with scenario-specific overrides.

    Args:
        planner_config: The validated PlannerConfig object.
        scenario_name: The name of the scenario to resolve. 'baseline' resolves
                       to the global parameters when not defined explicitly.

    Returns:
        A new RetirementInputs record for the requested scenario.

    Raises:
        KeyError: If the specified scenario_name does not exist in the config.
        ValueError: If the merged configuration fails validation.
    """
    logger.info(f"Resolving inputs for scenario: '{scenario_name}'")

    scenario_def = planner_config.scenarios.get(scenario_name)
    if scenario_def is None:
        if scenario_name == "baseline":
            logger.info("Using global parameters for implicit 'baseline' scenario")
            return planner_config.global_parameters
        logger.error(f"Scenario '{scenario_name}' not found in the configuration.")
        raise KeyError(f"Scenario '{scenario_name}' not found.")

    global_dict = planner_config.global_parameters.model_dump()
    scenario_overrides = scenario_def.model_dump(exclude={"name"}, exclude_none=True)
    merged = _deep_merge_dicts(global_dict, scenario_overrides)

    try:
        resolved = RetirementInputs(**merged)
    except ValidationError as e:
        logger.exception(
            f"Error validating merged inputs for scenario '{scenario_name}': {e}\nMerged Dict: {merged}"
        )
        raise ValueError(
            f"Merged inputs for scenario '{scenario_name}' failed validation."
        ) from e

    logger.info(f"Successfully resolved inputs for scenario: '{scenario_name}'")
    return resolved


__all__ = ["list_scenarios", "get_scenario_inputs"]
