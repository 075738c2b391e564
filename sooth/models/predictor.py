"""
sooth/models/predictor.py
Persistent predictor: context ids → event statistics, plus the derived
frequency, entropy, surprise and weighted-selection queries.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Iterable, Optional

import numpy as np
from pyrsistent import PVector, pvector

from sooth.models.context import Context
from sooth.models.search import Found, Lookup, NotFound, binary_search, insert_at, replace_at
from sooth.utils.config import DEFAULT_ERROR_EVENT
from sooth.utils.logger import get_logger
from sooth.utils.validation import require_non_negative_int

log = get_logger("model.predictor")


def _id_of(context: Context) -> int:
    return context.id


def _empty_context(id: int) -> Context:
    return Context(id)


@dataclass(frozen=True)
class Predictor:
    """
    A minimal stochastic predictive model.

    Observations are `(id, event)` pairs of non-negative ints. The predictor
    never mutates: `observe` returns a new Predictor and the old one stays a
    valid snapshot. Contexts are kept strictly ascending by id.

    `error_event` is what `select` returns when no event can be chosen.
    """

    error_event: int
    contexts: PVector[Context] = field(default_factory=pvector)

    @classmethod
    def new(cls, error_event: Optional[int] = None) -> Predictor:
        if error_event is None:
            error_event = DEFAULT_ERROR_EVENT
        require_non_negative_int("error_event", error_event)
        return cls(error_event)

    # ── Lookup ────────────────────────────────────────────────────

    def find_context(self, id: int) -> Lookup[Context]:
        """
        Look up the Context for `id` without modifying the predictor.

        Returns Found(context, index), or NotFound(Context(id), insertion_index)
        for an id that has never been seen.
        """
        return binary_search(self.contexts, id, _id_of, _empty_context)

    def insert_context(self, lookup: Lookup[Context]) -> Predictor:
        """Insert a NotFound placeholder at its index. Found lookups are a no-op."""
        if isinstance(lookup, Found):
            return self
        return replace(self, contexts=insert_at(self.contexts, lookup.index, lookup.value))

    def _context(self, id: int) -> Optional[Context]:
        require_non_negative_int("id", id)
        lookup = self.find_context(id)
        if isinstance(lookup, NotFound) or lookup.value.count == 0:
            return None
        return lookup.value

    # ── Updates ───────────────────────────────────────────────────

    def observe(self, id: int, event: int) -> tuple[Predictor, int]:
        """
        Register an observation of `event` within context `id`.

        Returns the new predictor and the number of times this exact
        `(id, event)` pair has now been observed.
        """
        require_non_negative_int("id", id)
        lookup = self.find_context(id)
        context, statistic = lookup.value.observe(event)

        if isinstance(lookup, NotFound):
            log.debug(f"new context {id} at index {lookup.index}")
            contexts = insert_at(self.contexts, lookup.index, context)
        else:
            contexts = replace_at(self.contexts, lookup.index, context)

        return Predictor(self.error_event, contexts), statistic.count

    def observe_all(self, pairs: Iterable[tuple[int, int]]) -> Predictor:
        """Fold every `(id, event)` pair into the model, in order."""
        predictor = self
        for id, event in pairs:
            predictor, _ = predictor.observe(id, event)
        return predictor

    # ── Queries ───────────────────────────────────────────────────

    def count(self, id: int) -> int:
        """Total observations recorded for `id`; 0 if it was never observed."""
        context = self._context(id)
        return context.count if context else 0

    def size(self, id: int) -> int:
        """Number of distinct events observed for `id`; 0 if it was never observed."""
        context = self._context(id)
        return context.size() if context else 0

    def distribution(self, id: int) -> Optional[tuple[tuple[int, float], ...]]:
        """`(event, probability)` pairs in ascending event order, or None for an unobserved id."""
        context = self._context(id)
        if context is None:
            return None
        return tuple((s.event, s.count / context.count) for s in context.statistics)

    def frequency(self, id: int, event: int) -> float:
        """
        Fraction of the observations in `id` that were `event`.

        0.0 when the context is unknown or the event was never seen in it.
        """
        require_non_negative_int("event", event)
        context = self._context(id)
        return context.frequency(event) if context else 0.0

    def uncertainty(self, id: int) -> Optional[float]:
        """
        Shannon entropy (base 2) of the event distribution for `id`.

        None for an unobserved id. A single distinct event gives 0.0 and n
        equally observed events give exactly log2(n).
        """
        context = self._context(id)
        if context is None:
            return None

        counts = np.fromiter(
            (s.count for s in context.statistics if s.count > 0),
            dtype=np.float64,
        )
        if np.all(counts == counts[0]):
            return math.log2(len(counts))

        p = counts / context.count
        return float(-np.sum(p * np.log2(p)))

    def surprise(self, id: int, event: int) -> Optional[float]:
        """
        Information content, in bits, of observing `event` in context `id`.

        None when the context or the event has never been observed. Computed
        from the counts directly so very rare events never underflow to None.
        """
        require_non_negative_int("event", event)
        context = self._context(id)
        if context is None:
            return None
        lookup = context.find_statistic(event)
        if isinstance(lookup, NotFound) or lookup.value.count == 0:
            return None
        return math.log2(context.count) - math.log2(lookup.value.count)

    def select(self, id: int, limit: int) -> int:
        """
        Return the event reached after walking `limit` observations.

        The walk visits events in ascending order, subtracting each event's
        count from `limit` until it drops to zero or below. `limit` should be
        between 1 and `count(id)`; anything else (or an unobserved id)
        yields `error_event`. Passing a uniformly random limit gives a
        weighted random choice.
        """
        require_non_negative_int("limit", limit)
        context = self._context(id)
        if limit == 0 or context is None or limit > context.count:
            return self.error_event

        for statistic in context.statistics:
            if limit <= statistic.count:
                return statistic.event
            limit -= statistic.count
        return self.error_event
