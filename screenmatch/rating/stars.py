# ABOUTME: Converts a rateable's mean score into a half-star rating
# ABOUTME: Rounds the 0-10 mean half away from zero, then halves it onto 0-5 stars

import math

from screenmatch.config import Config
from screenmatch.rating.models import Rateable


class StarConverter:
    """Maps mean scores onto a 0-5 star scale with half-star steps"""

    @staticmethod
    def convert(rateable: Rateable) -> float:
        """
        Star rating for a rateable entity

        Args:
            rateable: Anything exposing mean()

        Returns:
            Stars in {0.0, 0.5, ..., 5.0}
        """
        return StarConverter.convert_mean(rateable.mean())

    @staticmethod
    def convert_mean(mean: float) -> float:
        """
        Star rating for a bare mean score.

        NaN and infinite means (only reachable under the permissive policy)
        give 0.0 stars; other out-of-range means are clamped to the scale.
        """
        if not math.isfinite(mean):
            return 0.0

        # Built-in round() is banker's rounding (round(6.5) == 6), so round half away from zero.
        # magnitude - whole is exact, unlike magnitude + 0.5
        magnitude = abs(mean)
        whole = math.floor(magnitude)
        if magnitude - whole >= 0.5:
            whole += 1
        rounded = math.copysign(whole, mean)
        return max(0.0, min(Config.MAX_STARS, rounded / 2))
