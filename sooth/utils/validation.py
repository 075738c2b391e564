"""
sooth/utils/validation.py
Argument checks for the public model entry points.
"""
from __future__ import annotations


def require_non_negative_int(name: str, value: object) -> int:
    """Return value unchanged if it is a non-negative int, raise otherwise."""
    # bool is an int subclass but never a valid id/event/count
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be a non-negative int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return value
