# tests/projections/test_reporting.py

import math

import pandas as pd
import pytest

from fire_model.projections.reporting import (
    NOTES_SEPARATOR,
    format_projection_table,
    projections_to_frame,
    rank_strategies,
)
from fire_model.projections.strategies import calculate_all_strategies
from fire_model.schema.columns import (
    IS_FEASIBLE,
    NOTES,
    STRATEGY,
    TITLE,
    YEARS_TO_TARGET,
    get_projection_columns,
)
from fire_model.utils.status_enums import RetirementStrategy


@pytest.fixture
def projection_frame(base_inputs):
    return projections_to_frame(calculate_all_strategies(base_inputs))


def test_projections_to_frame_shape(projection_frame):
    assert list(projection_frame.columns) == get_projection_columns()
    assert list(projection_frame.index) == [s.value for s in RetirementStrategy]
    assert projection_frame[IS_FEASIBLE].dtype == bool
    assert projection_frame.loc["traditional", TITLE] == "Traditional Retirement"


def test_projections_to_frame_joins_notes(projection_frame):
    notes = projection_frame.loc["regular_fire", NOTES]
    assert notes.split(NOTES_SEPARATOR)[0] == "Retire completely when you reach 900K"
    assert len(notes.split(NOTES_SEPARATOR)) == 3


def test_rank_strategies_feasible_first_then_fastest(projection_frame):
    ranked = rank_strategies(projection_frame)

    feasible = ranked[IS_FEASIBLE].tolist()
    # Once an infeasible row appears no feasible row follows
    assert feasible == sorted(feasible, reverse=True)

    feasible_years = ranked.loc[ranked[IS_FEASIBLE], YEARS_TO_TARGET].tolist()
    assert feasible_years == sorted(feasible_years)
    assert list(ranked.columns) == list(projection_frame.columns)


def test_rank_strategies_puts_unreachable_last(no_income_inputs):
    frame = projections_to_frame(calculate_all_strategies(no_income_inputs))
    ranked = rank_strategies(frame)

    assert not ranked[IS_FEASIBLE].any()
    assert ranked.iloc[0][STRATEGY] == RetirementStrategy.TRADITIONAL.value
    assert all(math.isinf(y) for y in ranked[YEARS_TO_TARGET].iloc[1:])


def test_rank_strategies_does_not_mutate_input(projection_frame):
    before = projection_frame.copy()
    rank_strategies(projection_frame)
    pd.testing.assert_frame_equal(projection_frame, before)


def test_rank_strategies_empty_frame():
    empty = pd.DataFrame(columns=get_projection_columns())
    assert rank_strategies(empty).empty


def test_format_projection_table(projection_frame):
    table = format_projection_table(rank_strategies(projection_frame), "EUR")
    lines = table.splitlines()

    assert "Target (EUR)" in lines[0]
    assert set(lines[1]) == {"-"}
    # Header, rule and one line per strategy
    assert len(lines) == 2 + len(RetirementStrategy)
    assert any(line.startswith("Regular FIRE") and "900,000" in line for line in lines)


def test_format_projection_table_unreachable(no_income_inputs):
    frame = projections_to_frame(calculate_all_strategies(no_income_inputs))
    table = format_projection_table(frame)

    regular_line = next(line for line in table.splitlines() if line.startswith("Regular FIRE"))
    assert "never" in regular_line
    assert regular_line.rstrip().endswith("no")


def test_format_projection_table_empty():
    assert format_projection_table(pd.DataFrame()) == "No projections to display."
