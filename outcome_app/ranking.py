"""Sorting hospitals by mortality rate and picking a hospital by rank."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

import numpy as np
import pandas as pd

from .csv_utils import to_num
from .errors import InvalidRank
from .outcome_columns import HOSPITAL_NAME

RATE = "rate"

RankKind = Literal["best", "worst", "position"]


@dataclass(frozen=True)
class Rank:
    kind: RankKind
    n: int | None = None

    def __post_init__(self):
        if self.kind == "position":
            if self.n is None or self.n < 1:
                raise InvalidRank(self.n)
        elif self.kind in ("best", "worst"):
            if self.n is not None:
                raise InvalidRank(self.n)
        else:
            raise InvalidRank(self.kind)

    @classmethod
    def best(cls) -> "Rank":
        return cls("best")

    @classmethod
    def worst(cls) -> "Rank":
        return cls("worst")

    @classmethod
    def at(cls, n: int) -> "Rank":
        return cls("position", int(n))

    def __str__(self) -> str:
        return self.kind if self.n is None else str(self.n)


def parse_rank(value) -> Rank:
    """Turn "best", "worst" or a positive integer (int or digit string) into a Rank."""
    if isinstance(value, Rank):
        return value
    if isinstance(value, (bool, np.bool_)):
        raise InvalidRank(value)
    if isinstance(value, (int, np.integer)):
        if value < 1:
            raise InvalidRank(value)
        return Rank.at(int(value))
    if isinstance(value, (float, np.floating)):
        if not np.isfinite(value) or not float(value).is_integer() or value < 1:
            raise InvalidRank(value)
        return Rank.at(int(value))
    if isinstance(value, str):
        key = value.strip().lower()
        if key == "best":
            return Rank.best()
        if key == "worst":
            return Rank.worst()
        if key.isdecimal() and int(key) >= 1:
            return Rank.at(int(key))
    raise InvalidRank(value)


def resolve_position(rank: Rank, length: int) -> int:
    """1-based position for a rank within a view of the given length."""
    if rank.kind == "best":
        return 1
    if rank.kind == "worst":
        return length
    return int(rank.n)


def sort_by_outcome(
    df: pd.DataFrame,
    column: str,
    exclude_missing: bool = False,
) -> pd.DataFrame:
    """
    Two-column view (hospital_name, rate) sorted by rate, then hospital name.

    - Rates that do not parse as numbers ("Not Available", blanks) become NaN
      and sort after every parsed rate.
    - exclude_missing drops the NaN rows after sorting.
    """
    if column not in df.columns:
        raise KeyError(f"Expected column '{column}' in outcomes dataframe")

    view = pd.DataFrame(
        {
            HOSPITAL_NAME: df[HOSPITAL_NAME].astype(str).to_numpy(),
            RATE: to_num(df[column].astype(str).str.strip()).astype("float64").to_numpy(),
        }
    )
    if view.empty:
        return view

    view = view.sort_values(
        [RATE, HOSPITAL_NAME],
        ascending=True,
        na_position="last",
        kind="mergesort",
    )

    if exclude_missing:
        view = view[view[RATE].notna()]

    return view.reset_index(drop=True)


def get_hospital_with_rank(view: pd.DataFrame, rank) -> str | None:
    """Hospital at the requested rank, or None when the rank is past the end of the view."""
    rank = parse_rank(rank)
    position = resolve_position(rank, len(view))
    if position < 1 or position > len(view):
        return None
    return str(view[HOSPITAL_NAME].iloc[position - 1])
