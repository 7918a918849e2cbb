"""Numeric helpers shared by the rasterization kernels."""

from __future__ import annotations

import math
from typing import Sequence


def distance(x0: float, y0: float, x1: float, y1: float) -> float:
    return math.hypot(x1 - x0, y1 - y0)


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero (unlike `round()`)."""
    if value >= 0:
        return int(math.floor(value + 0.5))
    return -int(math.floor(-value + 0.5))


def closest_to(target: float, candidates: Sequence[float]) -> int:
    """Index of the candidate nearest to `target`; ties go to the earliest index."""
    if not candidates:
        raise ValueError("candidates must not be empty")
    best = 0
    best_err = abs(candidates[0] - target)
    for idx in range(1, len(candidates)):
        err = abs(candidates[idx] - target)
        if err < best_err:
            best = idx
            best_err = err
    return best
