# ABOUTME: Rating accumulator that stores submitted scores and computes their mean
# ABOUTME: Supports strict (0-10 only) and permissive validation policies

import logging
import math
import numbers
from typing import Optional, Union

from screenmatch.config import Config
from screenmatch.rating.models import InvalidScoreError, RatingOutcome, ValidationPolicy

log = logging.getLogger(__name__)


class RatingAccumulator:
    """
    Stores scores for one rateable entity.

    Scores are kept as floats in submission order and never removed.
    The mean is recomputed on every call, and an entity with no scores
    has a mean of exactly 0.0.
    """

    def __init__(self, policy: Optional[Union[ValidationPolicy, str]] = None):
        if policy is None:
            policy = Config.VALIDATION_POLICY
        self.policy = ValidationPolicy(policy)
        self._scores: list[float] = []

    def rate(self, score: float) -> RatingOutcome:
        """
        Submit a score.

        Args:
            score: Rating on the 0-10 scale

        Returns:
            RatingOutcome; rejected (with InvalidScoreError) when the score is
            not a number, or when the strict policy refuses it. Nothing is
            stored on rejection.
        """
        if isinstance(score, bool) or not isinstance(score, numbers.Real):
            log.warning(f"Rejected non-numeric score {score!r}")
            return RatingOutcome(score=math.nan, error=InvalidScoreError())

        score = self._as_float(score)

        if self.policy is ValidationPolicy.STRICT and not self._in_range(score):
            log.warning(f"Rejected score {score}: outside {Config.SCORE_MIN}-{Config.SCORE_MAX}")
            return RatingOutcome(score=score, error=InvalidScoreError())

        if not math.isfinite(score):
            log.warning(f"Storing non-finite score {score} under permissive policy")

        self._scores.append(score)
        log.debug(f"Stored score {score} ({len(self._scores)} total)")
        return RatingOutcome(score=score)

    def mean(self) -> float:
        """Arithmetic mean of all stored scores, 0.0 when there are none"""
        if not self._scores:
            return 0.0
        return sum(self._scores) / len(self._scores)

    @property
    def scores(self) -> tuple[float, ...]:
        """Stored scores in submission order"""
        return tuple(self._scores)

    def __len__(self) -> int:
        return len(self._scores)

    def _in_range(self, score: float) -> bool:
        # NaN fails both comparisons, so it is rejected too
        return Config.SCORE_MIN <= score <= Config.SCORE_MAX

    @staticmethod
    def _as_float(score: numbers.Real) -> float:
        # Integers beyond float range become signed infinity
        try:
            return float(score)
        except OverflowError:
            return math.inf if score > 0 else -math.inf
