# ABOUTME: Library configuration for rating bounds, star scale and validation policy
# ABOUTME: Values come from the environment (and .env) so embedders can switch policies

import os
from dotenv import load_dotenv

from screenmatch.rating.models import ValidationPolicy

load_dotenv()


def _read_validation_policy() -> str:
    policy = os.getenv("SCREENMATCH_VALIDATION_POLICY", "strict").lower()
    allowed = [p.value for p in ValidationPolicy]
    if policy not in allowed:
        raise ValueError(
            f"SCREENMATCH_VALIDATION_POLICY must be one of {allowed}, got {policy!r}"
        )
    return policy


class Config:
    """Library configuration"""

    # Closed score range accepted by the strict policy
    SCORE_MIN = 0.0
    SCORE_MAX = 10.0

    # Star scale: rounded mean is halved, so 10 -> 5 stars
    MAX_STARS = 5.0

    # "strict" rejects out-of-range scores, "permissive" stores anything
    VALIDATION_POLICY = _read_validation_policy()

    # Debug mode
    DEBUG = os.getenv("DEBUG", "false").lower() == "true"
