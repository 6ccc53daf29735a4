from __future__ import annotations

from typing import Iterator

import pandas as pd

from .outcome_columns import STATE


def normalize_state(state: str | None) -> str:
    """Strip surrounding whitespace; state codes are otherwise compared exactly."""
    if state is None:
        return ""
    return str(state).strip()


def state_exists(df: pd.DataFrame, state: str | None) -> bool:
    """True if at least one row carries this state code.

    No fixed list of valid states is assumed; a state is valid if it has data.
    """
    if STATE not in df.columns:
        raise KeyError("Expected column 'state' in outcomes dataframe")
    if state is None:
        return False
    return bool((df[STATE] == normalize_state(state)).any())


def filter_state(df: pd.DataFrame, state: str | None) -> pd.DataFrame:
    """Rows for one state, in dataset order."""
    st = normalize_state(state)
    if STATE not in df.columns:
        raise KeyError("Expected column 'state' in outcomes dataframe")
    return df[df[STATE] == st]


def split_by_state(df: pd.DataFrame) -> Iterator[tuple[str, pd.DataFrame]]:
    """Yield (state, rows) once per distinct state code, states in ascending order.

    A blank State field is its own group, matching state_exists(df, "").
    """
    if STATE not in df.columns:
        raise KeyError("Expected column 'state' in outcomes dataframe")
    for state, group in df.groupby(STATE, sort=True):
        yield str(state), group
