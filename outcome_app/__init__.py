from __future__ import annotations

from .data_loading import HospitalRecord, load_outcomes, to_records
from .errors import InvalidOutcome, InvalidRank, InvalidState, OutcomeRankingError
from .hospital_rankings import best, rankall, rankhospital
from .outcome_columns import Outcome
from .ranking import Rank

__all__ = [
    "HospitalRecord",
    "InvalidOutcome",
    "InvalidRank",
    "InvalidState",
    "Outcome",
    "OutcomeRankingError",
    "Rank",
    "best",
    "load_outcomes",
    "rankall",
    "rankhospital",
    "to_records",
]
