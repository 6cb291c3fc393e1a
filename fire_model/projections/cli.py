# fire_model/projections/cli.py
# Command-line interface entry point (argparse)
import argparse
import logging
import sys
import time
from pathlib import Path
from typing import List, Optional

import pandas as pd

from fire_model.config.accessors import get_scenario_inputs
from fire_model.config.loaders import ConfigLoadError, load_planner_config
from fire_model.data.readers import DataReadError, read_accounts, read_history
from fire_model.data.writers import DataWriteError, history_path, write_history, write_projections
from fire_model.state.accounts import summarize_net_worth
from fire_model.state.history import history_to_frame, take_snapshot
from .reporting import format_projection_table, projections_to_frame, rank_strategies
from .strategies import calculate_all_strategies

# Import logging configuration
from logging_config import setup_logging, PROJECTION_LOGGER, PERFORMANCE_LOGGER

# Get logger for this module
logger = logging.getLogger(__name__)

# Directory for log files
LOG_DIR = Path("output/logs")
OUTPUT_DIR = Path("output")


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Project retirement feasibility under several FIRE strategies."
    )

    # Required arguments
    parser.add_argument(
        "--config",
        type=str,
        required=True,
        help="Path to the planner YAML configuration file."
    )

    # Optional arguments
    parser.add_argument(
        "--scenario",
        type=str,
        default="baseline",
        help="Scenario to evaluate (default: baseline)."
    )
    parser.add_argument(
        "--accounts",
        type=str,
        default=None,
        help="Accounts file (CSV, Parquet or JSON). Its liquid net worth replaces current_savings."
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=str(OUTPUT_DIR),
        help=f"Directory to save output files (default: {OUTPUT_DIR})"
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default=str(LOG_DIR),
        help=f"Directory to store log files (default: {LOG_DIR})"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )

    return parser.parse_args(argv)


def initialize_logging(debug: bool = False, log_dir: Path = LOG_DIR) -> None:
    """Initialize the logging configuration.

    Args:
        debug: Whether to enable debug logging
        log_dir: Directory to store log files
    """
    setup_logging(log_dir=log_dir, debug=debug)

    logger.info("Starting retirement projection")
    logger.info(f"Command line arguments: {sys.argv}")
    logger.info(f"Python version: {sys.version}")
    logger.info(f"Pandas version: {pd.__version__}")

    if debug:
        logger.debug("Debug logging enabled")


def run(args: argparse.Namespace) -> int:
    """Run one scenario end to end. Returns the process exit code."""
    proj_logger = logging.getLogger(PROJECTION_LOGGER)
    perf_logger = logging.getLogger(PERFORMANCE_LOGGER)
    started = time.perf_counter()

    try:
        # 1. Load Configuration
        planner_config = load_planner_config(args.config)

        # Set log level from config unless --debug was given
        if not args.debug:
            numeric_level = getattr(logging, planner_config.log_level.upper(), logging.INFO)
            logging.getLogger().setLevel(numeric_level)
            logger.info(f"Logging level set to: {planner_config.log_level}")

        try:
            inputs = get_scenario_inputs(planner_config, args.scenario)
        except (KeyError, ValueError) as e:
            logger.error(f"Could not resolve scenario '{args.scenario}': {e}")
            return 1

        output_dir = Path(args.output_dir)

        # 2. Optional account import, appended to the scenario's history log
        history_df = None
        if args.accounts:
            accounts = read_accounts(args.accounts)
            summary = summarize_net_worth(
                accounts, planner_config.conversion_rates, planner_config.base_currency
            )
            proj_logger.info(
                f"Replacing current_savings {inputs.current_savings:,.2f} with liquid net worth "
                f"{summary.liquid_net_worth_base:,.2f} {planner_config.base_currency.value}"
            )
            inputs = inputs.model_copy(update={"current_savings": summary.liquid_net_worth_base})

            existing = history_path(output_dir, args.scenario)
            snapshots = read_history(existing) if existing.exists() else []
            snapshots.append(take_snapshot(summary, len(accounts)))
            history_df = history_to_frame(snapshots)

        # 3. Evaluate strategies
        proj_logger.info(f"Evaluating all strategies for scenario '{args.scenario}'")
        projections = calculate_all_strategies(inputs)
        frame = rank_strategies(projections_to_frame(projections))

        # 4. Report
        print(f"\nScenario: {args.scenario}")
        print(format_projection_table(frame, planner_config.base_currency.value))

        out_path = write_projections(frame, output_dir, args.scenario)
        print(f"\nProjection saved to {out_path}")
        if history_df is not None:
            write_history(history_df, output_dir, args.scenario)

    except (ConfigLoadError, DataReadError, DataWriteError) as e:
        logger.error(f"Projection failed: {e}")
        return 1

    perf_logger.info(f"Scenario '{args.scenario}' completed in {time.perf_counter() - started:.3f}s")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the retirement projection CLI."""
    args = parse_arguments(argv)
    initialize_logging(debug=args.debug, log_dir=Path(args.log_dir))
    logger.info(f"Starting projection run with arguments: {vars(args)}")
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
