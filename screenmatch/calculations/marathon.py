# ABOUTME: Binge-watch duration calculator summing title running times
# ABOUTME: Keeps a running total of minutes across every included title

from typing import Iterable, Protocol, runtime_checkable

from screenmatch.debug import debug_log


@runtime_checkable
class Durational(Protocol):
    """Anything with a running time in minutes"""

    @property
    def duration_minutes(self) -> int:
        ...


class MarathonCalculator:
    """Accumulates the total minutes of a binge-watch session"""

    def __init__(self):
        self._total_minutes = 0

    def include(self, title: Durational) -> None:
        """Add a title's duration to the running total"""
        # Negative durations are summed as-is
        self._total_minutes += title.duration_minutes
        debug_log(f"Included {title.duration_minutes} min, total {self._total_minutes}", "MARATHON")

    def include_all(self, titles: Iterable[Durational]) -> None:
        for title in titles:
            self.include(title)

    def duration(self) -> int:
        """Total minutes included so far"""
        return self._total_minutes
