"""Numeric precondition helpers shared by the engine modules."""

from __future__ import annotations

import math


def is_non_negative(value: float) -> bool:
    """Finite and ≥ 0.  NaN / inf / non-numbers fail."""
    return _is_finite(value) and value >= 0


def is_positive(value: float) -> bool:
    """Finite and > 0."""
    return _is_finite(value) and value > 0


def is_within(value: float, low: float, high: float) -> bool:
    return _is_finite(value) and low <= value <= high


def _is_finite(value: float) -> bool:
    try:
        return math.isfinite(value)
    except TypeError:
        return False
