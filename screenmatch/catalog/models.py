# ABOUTME: Data models for catalog titles (movies, series, episodes)
# ABOUTME: Titles expose duration_minutes and forward ratings to a held RatingAccumulator

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

from screenmatch.rating.accumulator import RatingAccumulator
from screenmatch.rating.models import RatingOutcome


@dataclass
class Title(ABC):
    """Abstract catalog record; rateable through its ratings accumulator"""
    name: str
    release_year: int
    genre: str
    ratings: RatingAccumulator = field(
        default_factory=RatingAccumulator, kw_only=True, repr=False, compare=False
    )

    @property
    @abstractmethod
    def duration_minutes(self) -> int:
        ...

    def rate(self, score: float) -> RatingOutcome:
        return self.ratings.rate(score)

    def mean(self) -> float:
        return self.ratings.mean()

    def __str__(self) -> str:
        return f"{self.name} ({self.release_year}), {self.duration_minutes} min"


@dataclass
class Movie(Title):
    """Single feature with a fixed running time"""
    minutes: int = 0

    @property
    def duration_minutes(self) -> int:
        return self.minutes


@dataclass
class Series(Title):
    """Show whose running time is derived from its episode layout"""
    seasons: int = 1
    episodes_per_season: int = 0
    minutes_per_episode: int = 0

    def __post_init__(self):
        if self.seasons < 0 or self.episodes_per_season < 0:
            raise ValueError(
                f"Season and episode counts must be >= 0, got "
                f"{self.seasons} seasons x {self.episodes_per_season} episodes"
            )

    @property
    def duration_minutes(self) -> int:
        return self.seasons * self.episodes_per_season * self.minutes_per_episode


@dataclass
class Episode:
    """Single episode of a series; rateable, but not a title"""
    series: Series
    number: int
    name: Optional[str] = None
    ratings: RatingAccumulator = field(default_factory=RatingAccumulator, repr=False, compare=False)

    def __post_init__(self):
        if self.number < 1:
            raise ValueError(f"Episode number must be >= 1, got {self.number}")

    def rate(self, score: float) -> RatingOutcome:
        return self.ratings.rate(score)

    def mean(self) -> float:
        return self.ratings.mean()
