"""
sooth/models/context.py
Per-context event statistics, kept sorted by event id.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace

from pyrsistent import PVector, pvector

from sooth.models.search import Found, Lookup, NotFound, binary_search, insert_at, replace_at
from sooth.models.statistic import Statistic
from sooth.utils.logger import get_logger
from sooth.utils.validation import require_non_negative_int

log = get_logger("model.context")


def _event_of(statistic: Statistic) -> int:
    return statistic.event


def _empty_statistic(event: int) -> Statistic:
    return Statistic(event, 0)


@dataclass(frozen=True)
class Context:
    """
    All observations recorded under one context id.

    `statistics` is strictly ascending by event with no duplicates, and
    `count` is the sum of their counts. Every update returns a new Context;
    untouched Statistic objects are shared with the previous value.
    """

    id: int
    count: int = 0
    statistics: PVector[Statistic] = field(default_factory=pvector)

    @classmethod
    def new(cls, id: int) -> Context:
        require_non_negative_int("id", id)
        return cls(id)

    def find_statistic(self, event: int) -> Lookup[Statistic]:
        """
        Look up the Statistic for `event` without modifying the context.

        Returns Found(statistic, index) when the event has been seen, or
        NotFound(Statistic(event, 0), insertion_index) when it has not.
        """
        return binary_search(self.statistics, event, _event_of, _empty_statistic)

    def insert_statistic(self, lookup: Lookup[Statistic]) -> Context:
        """Insert a NotFound placeholder at its index. Found lookups are a no-op."""
        if isinstance(lookup, Found):
            return self
        return replace(self, statistics=insert_at(self.statistics, lookup.index, lookup.value))

    def observe(self, event: int) -> tuple[Context, Statistic]:
        """Record one occurrence of `event`; return the new context and its updated statistic."""
        require_non_negative_int("event", event)
        lookup = self.find_statistic(event)
        statistic = lookup.value.increment()

        if isinstance(lookup, NotFound):
            log.debug(f"context {self.id}: new event {event} at index {lookup.index}")
            statistics = insert_at(self.statistics, lookup.index, statistic)
        else:
            statistics = replace_at(self.statistics, lookup.index, statistic)

        return Context(self.id, self.count + 1, statistics), statistic

    def size(self) -> int:
        return len(self.statistics)

    def frequency(self, event: int) -> float:
        """Share of this context's observations that were `event`; 0.0 if unseen."""
        if self.count == 0:
            return 0.0
        lookup = self.find_statistic(event)
        if isinstance(lookup, NotFound) or lookup.value.count == 0:
            return 0.0
        return lookup.value.count / self.count
