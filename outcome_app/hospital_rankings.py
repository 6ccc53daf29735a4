"""Hospital rankings by 30-day mortality rate.

Entry points for ranking hospitals in one state or across all states for
heart attack, heart failure and pneumonia outcomes. Each call reads the
outcome-of-care CSV fresh.
"""
from __future__ import annotations

from pathlib import Path

import pandas as pd

from .data_loading import load_outcomes
from .errors import InvalidState
from .filters import filter_state, normalize_state, split_by_state, state_exists
from .logger import logger
from .outcome_columns import get_mortality_column
from .ranking import get_hospital_with_rank, parse_rank, sort_by_outcome


def _load_state(state: str, path: Path | None) -> pd.DataFrame:
    outcomes = load_outcomes(path)
    if not state_exists(outcomes, state):
        logger.warning(f"No hospitals found for state={state!r}")
        raise InvalidState(state)
    return filter_state(outcomes, state)


def best(state: str, outcome: str, path: Path | None = None) -> str:
    """
    Hospital with the lowest mortality rate in a state for the given outcome.

    Unlike rankhospital, hospitals with no rate are not dropped first; they
    sort last, so they only come back when no hospital in the state has a rate.

    Args:
        state: 2-letter state code (e.g. "TX")
        outcome: "heart attack", "heart failure" or "pneumonia"
        path: Optional CSV path; defaults to Config.OUTCOME_FILE

    Returns:
        Hospital name
    """
    column = get_mortality_column(outcome)
    logger.info(f"best: state={state}, outcome={outcome}")

    state_outcomes = _load_state(state, path)
    sorted_view = sort_by_outcome(state_outcomes, column)

    hospital = str(sorted_view.iloc[0]["hospital_name"])
    logger.debug(f"best({normalize_state(state)}, {outcome}) -> {hospital}")
    return hospital


def rankhospital(state: str, outcome: str, num="best", path: Path | None = None) -> str | None:
    """
    Hospital at a given mortality-rate rank within a state.

    Args:
        state: 2-letter state code (e.g. "MD")
        outcome: "heart attack", "heart failure" or "pneumonia"
        num: "best", "worst" or a positive integer rank
        path: Optional CSV path; defaults to Config.OUTCOME_FILE

    Returns:
        Hospital name, or None if fewer hospitals have a rate than the rank asks for
    """
    column = get_mortality_column(outcome)
    rank = parse_rank(num)
    logger.info(f"rankhospital: state={state}, outcome={outcome}, num={rank}")

    state_outcomes = _load_state(state, path)
    sorted_view = sort_by_outcome(state_outcomes, column, exclude_missing=True)

    hospital = get_hospital_with_rank(sorted_view, rank)
    logger.debug(f"rankhospital({normalize_state(state)}, {outcome}, {rank}) -> {hospital}")
    return hospital


def rankall(outcome: str, num="best", path: Path | None = None) -> pd.DataFrame:
    """
    Hospital at a given mortality-rate rank in every state.

    Args:
        outcome: "heart attack", "heart failure" or "pneumonia"
        num: "best", "worst" or a positive integer rank
        path: Optional CSV path; defaults to Config.OUTCOME_FILE

    Returns:
        DataFrame with columns:
        - hospital: Hospital name, or None when the state has too few rated hospitals
        - state: 2-letter state code
        Indexed by state code, one row per state in ascending state order.
    """
    column = get_mortality_column(outcome)
    rank = parse_rank(num)
    logger.info(f"rankall: outcome={outcome}, num={rank}")

    outcomes = load_outcomes(path)

    hospitals: list[str | None] = []
    states: list[str] = []
    for state, state_outcomes in split_by_state(outcomes):
        sorted_view = sort_by_outcome(state_outcomes, column, exclude_missing=True)
        hospitals.append(get_hospital_with_rank(sorted_view, rank))
        states.append(state)

    result = pd.DataFrame({"hospital": hospitals, "state": states}, index=states, dtype=object)
    logger.debug(f"rankall({outcome}, {rank}) -> {len(result)} states, {result['hospital'].isna().sum()} without a hospital")
    return result
