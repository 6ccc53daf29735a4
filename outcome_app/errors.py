"""Errors raised by the ranking entry points."""
from __future__ import annotations


class OutcomeRankingError(ValueError):
    """Base class for invalid ranking requests."""

    message = "invalid request"

    def __init__(self, value=None, message: str | None = None):
        self.value = value
        super().__init__(message or self.message)


class InvalidOutcome(OutcomeRankingError):
    message = "invalid outcome"


class InvalidState(OutcomeRankingError):
    message = "invalid state"


class InvalidRank(OutcomeRankingError):
    message = "invalid rank"
