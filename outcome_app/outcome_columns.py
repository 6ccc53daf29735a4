"""Outcome names, their rate columns, and header detection for the raw CSV."""
from __future__ import annotations

from enum import Enum

import pandas as pd

from .csv_utils import column_at, pick_column
from .errors import InvalidOutcome

HOSPITAL_NAME = "hospital_name"
STATE = "state"


class Outcome(str, Enum):
    HEART_ATTACK = "heart attack"
    HEART_FAILURE = "heart failure"
    PNEUMONIA = "pneumonia"

    @property
    def column(self) -> str:
        return self.value.replace(" ", "_")

    @property
    def label(self) -> str:
        return self.value.title()


# 1-based positions in the published outcome-of-care-measures.csv
RAW_POSITIONS = {
    HOSPITAL_NAME: 2,
    STATE: 7,
    Outcome.HEART_ATTACK.column: 11,
    Outcome.HEART_FAILURE.column: 17,
    Outcome.PNEUMONIA.column: 23,
}

RATE_COLUMNS = [o.column for o in Outcome]


def parse_outcome(name) -> Outcome:
    if isinstance(name, Outcome):
        return name
    key = str(name).strip().lower() if name is not None else ""
    for outcome in Outcome:
        if outcome.value == key:
            return outcome
    raise InvalidOutcome(name)


def get_mortality_column(outcome) -> str:
    """Canonical rate column for an outcome name ("heart attack" -> "heart_attack")."""
    return parse_outcome(outcome).column


def _detect_from_df_or_cols(df_or_cols) -> list[str]:
    if isinstance(df_or_cols, pd.DataFrame):
        return list(df_or_cols.columns)
    return list(df_or_cols)


def _detect_rate_col(cols: list[str], outcome: Outcome) -> str | None:
    label = outcome.value
    return pick_column(
        cols,
        preferred_exact=(
            f"Hospital 30-Day Death (Mortality) Rates from {outcome.label}",
            f"Hospital.30.Day.Death..Mortality..Rates.from.{outcome.label.replace(' ', '.')}",
            outcome.column,
        ),
        regexes=[rf"^hospital.30.day.death.*mortality.*rates.from.{label.replace(' ', '.')}$"],
    )


def detect_outcome_columns(df_or_cols) -> dict[str, str]:
    """Map canonical names to raw CSV headers.

    Headers are matched by name first; the published file's fixed positions
    are only used for columns the name match could not find.
    """
    cols = _detect_from_df_or_cols(df_or_cols)

    found: dict[str, str | None] = {
        HOSPITAL_NAME: pick_column(
            cols,
            preferred_exact=("Hospital Name", "Hospital.Name", HOSPITAL_NAME),
            contains_any=("hospital name", "hospital.name"),
        ),
        STATE: pick_column(
            cols,
            preferred_exact=("State", STATE),
            regexes=[r"^state$", r"\bstate\b"],
        ),
    }
    for outcome in Outcome:
        found[outcome.column] = _detect_rate_col(cols, outcome)

    for key, col in found.items():
        if not col:
            found[key] = column_at(cols, RAW_POSITIONS[key])

    missing = [k for k, v in found.items() if not v]
    if missing:
        raise KeyError(f"Outcome of care CSV missing required columns: {missing}")

    return found
