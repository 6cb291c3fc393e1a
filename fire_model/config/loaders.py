# fire_model/config/loaders.py
import logging
from pathlib import Path
from typing import Any, Dict, Union

import yaml
from cerberus import Validator
from pydantic import ValidationError

from .models import PlannerConfig

# Configure logger for this module
logger = logging.getLogger(__name__)


class ConfigLoadError(Exception):
    """Custom exception for errors during config loading."""

    pass


# Top-level layout of a planner YAML file; field-level checks are left to pydantic
PLANNER_SCHEMA: Dict[str, Any] = {
    "global_parameters": {"type": "dict", "required": True},
    "scenarios": {
        "type": "dict",
        "required": False,
        "nullable": True,
        "keysrules": {"type": "string"},
        "valuesrules": {"type": "dict", "nullable": True},
    },
    "base_currency": {"type": "string", "required": False},
    "conversion_rates": {
        "type": "list",
        "required": False,
        "nullable": True,
        "schema": {
            "type": "dict",
            "schema": {
                "currency": {"type": "string", "required": True},
                "rate": {"type": "number", "required": True},
                "label": {"type": "string", "required": False, "nullable": True},
            },
        },
    },
    "log_level": {
        "type": "string",
        "required": False,
        "allowed": ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        "coerce": lambda v: str(v).upper(),
    },
}


def load_yaml_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Loads configuration data from a YAML file.

    Args:
        config_path: Path pointing to the YAML configuration file.

    Returns:
        A dictionary containing the loaded configuration.

    Raises:
        ConfigLoadError: If the file cannot be found or parsed.
    """
    if not isinstance(config_path, Path):
        config_path = Path(config_path)

    logger.info(f"Attempting to load configuration from: {config_path}")

    if not config_path.is_file():
        logger.error(f"Configuration file not found at path: {config_path}")
        raise ConfigLoadError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.exception(f"Error parsing YAML configuration file {config_path}: {e}")
        raise ConfigLoadError(f"Error parsing YAML file {config_path}") from e
    except OSError as e:
        logger.exception(f"Could not read configuration file {config_path}: {e}")
        raise ConfigLoadError(f"Could not read configuration file {config_path}") from e

    if not isinstance(config_data, dict):
        logger.error(f"Configuration file {config_path} did not parse into a dictionary.")
        raise ConfigLoadError(
            f"Invalid configuration format in {config_path}: Expected a dictionary."
        )

    logger.info(f"Successfully loaded configuration from {config_path}")
    return config_data


def parse_planner_config(config_data: Dict[str, Any]) -> PlannerConfig:
    """
    Validates raw configuration data and builds a PlannerConfig.

    - Top-level layout is checked with cerberus.
    - Null sections (``scenarios:`` with no body) are treated as empty.
    - Field types and ranges are validated by the pydantic models.

    Raises:
        ConfigLoadError: On any schema or model validation error.
    """
    v = Validator(PLANNER_SCHEMA)
    if not v.validate(config_data):
        logger.error(f"Config schema validation failed: {v.errors}")
        raise ConfigLoadError(f"Config validation failed: {v.errors}")
    config_data = v.document

    scenarios = config_data.get("scenarios") or {}
    config_data["scenarios"] = {
        name: {**(overrides or {}), "name": name} for name, overrides in scenarios.items()
    }
    if config_data.get("conversion_rates") is None:
        config_data.pop("conversion_rates", None)

    try:
        planner_config = PlannerConfig(**config_data)
    except ValidationError as e:
        logger.error(f"Planner configuration failed validation: {e}")
        raise ConfigLoadError(f"Invalid planner configuration: {e}") from e

    logger.debug(f"Planner configuration loaded: {planner_config}")
    return planner_config


def load_planner_config(config_path: Union[str, Path]) -> PlannerConfig:
    """Loads a planner YAML file and validates it into a PlannerConfig."""
    return parse_planner_config(load_yaml_config(config_path))


# Expose for import
__all__ = [
    "PLANNER_SCHEMA",
    "load_yaml_config",
    "parse_planner_config",
    "load_planner_config",
    "ConfigLoadError",
]
