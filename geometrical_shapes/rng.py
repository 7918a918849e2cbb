from __future__ import annotations

import os
from typing import Protocol

import numpy as np


SEED_ENV_VAR = "GEOMETRICAL_SHAPES_SEED"


class RandomSource(Protocol):
    def uniform_int(self, low: int, high: int) -> int:
        """Return an int uniformly drawn from [low, high)."""
        ...


class NumpyRandomSource:
    """RandomSource backed by a numpy Generator."""

    def __init__(self, seed: int | None = None) -> None:
        self._seed = seed
        self._rng = np.random.default_rng(seed)

    @property
    def seed(self) -> int | None:
        return self._seed

    def uniform_int(self, low: int, high: int) -> int:
        if high <= low:
            raise ValueError(f"empty range [{low}, {high})")
        return int(self._rng.integers(low, high))


def seed_from_env() -> int | None:
    raw = os.getenv(SEED_ENV_VAR)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{SEED_ENV_VAR} must be an integer, got {raw!r}") from exc


_default_source: RandomSource | None = None


def default_source() -> RandomSource:
    global _default_source
    if _default_source is None:
        _default_source = NumpyRandomSource(seed_from_env())
    return _default_source


def set_default_source(source: RandomSource | None) -> None:
    """Replace the process-wide source; None resets to a lazily created one."""
    global _default_source
    _default_source = source
