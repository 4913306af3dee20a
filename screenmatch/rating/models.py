# ABOUTME: Data models for rating outcomes, validation policies and the rateable capability
# ABOUTME: Rejections are returned as values so callers handle them at the call site

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol, runtime_checkable


class InvalidScoreError(ValueError):
    """Score outside the accepted 0-10 range"""

    MESSAGE = "score must be between 0 and 10."

    def __init__(self):
        super().__init__(self.MESSAGE)


class ValidationPolicy(str, Enum):
    """How an accumulator treats out-of-range scores"""
    STRICT = "strict"          # reject scores outside 0-10
    PERMISSIVE = "permissive"  # store any number as-is, NaN included


@dataclass(frozen=True)
class RatingOutcome:
    """Result of a single rate() call"""
    score: float
    error: Optional[InvalidScoreError] = None

    @property
    def accepted(self) -> bool:
        return self.error is None

    @property
    def rejected(self) -> bool:
        return self.error is not None

    def raise_for_error(self) -> None:
        """
        Raise the carried InvalidScoreError, if any.

        For callers that prefer exceptions over checking the outcome.
        """
        if self.error is not None:
            raise self.error


@runtime_checkable
class Rateable(Protocol):
    """Anything that accepts ratings and reports a mean score"""

    def rate(self, score: float) -> RatingOutcome:
        ...

    def mean(self) -> float:
        ...
