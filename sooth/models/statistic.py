"""
sooth/models/statistic.py
Observation count for a single event.
"""
from __future__ import annotations

from dataclasses import dataclass

from sooth.utils.validation import require_non_negative_int


@dataclass(frozen=True)
class Statistic:
    event: int
    count: int

    @classmethod
    def new(cls, event: int, count: int = 0) -> Statistic:
        require_non_negative_int("event", event)
        require_non_negative_int("count", count)
        return cls(event, count)

    def increment(self) -> Statistic:
        return Statistic(self.event, self.count + 1)
