"""
sooth/models/search.py
Binary search and persistent updates over vectors kept sorted by an
integer key. Shared by Context (keyed on event) and Predictor (keyed on id).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

from pyrsistent import PVector

T = TypeVar("T")


@dataclass(frozen=True)
class Found(Generic[T]):
    """An existing element and the index it lives at."""

    value: T
    index: int


@dataclass(frozen=True)
class NotFound(Generic[T]):
    """A placeholder that has not been inserted yet, and the index it belongs at."""

    value: T
    index: int


Lookup = Union[Found[T], NotFound[T]]


def binary_search(
    items: PVector[T],
    key: int,
    key_of: Callable[[T], int],
    placeholder: Callable[[int], T],
) -> Lookup[T]:
    """
    Locate `key` in `items`, which must be strictly ascending by `key_of`.

    An exact match returns Found immediately. Otherwise the range is narrowed
    until low > high, and `low` is the index before which the new element
    keeps the order intact.
    """
    low, high = 0, len(items) - 1
    while low <= high:
        mid = low + (high - low) // 2
        item = items[mid]
        mid_key = key_of(item)
        if mid_key == key:
            return Found(item, mid)
        if mid_key > key:
            high = mid - 1
        else:
            low = mid + 1
    return NotFound(placeholder(key), low)


def insert_at(items: PVector[T], index: int, value: T) -> PVector[T]:
    """Insert before `index`. Appending shares the existing trie; a middle insert rebuilds the tail."""
    if index == len(items):
        return items.append(value)
    return items[:index].append(value).extend(items[index:])


def replace_at(items: PVector[T], index: int, value: T) -> PVector[T]:
    """Swap one element; only the trie nodes on its path are copied."""
    return items.set(index, value)
