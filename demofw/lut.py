"""Lookup tables for fast sine and cosine."""

from __future__ import annotations

import math

from . import fastmath


class SinTable:
    """Sine and cosine lookup over one period, indexed by truncation."""

    def __init__(self, size: int = 1024) -> None:
        if size <= 0 or size & (size - 1):
            raise ValueError(f"table size must be a positive power of two, got {size}")
        self._scale = size / (2.0 * math.pi)
        self._mask = size - 1
        angles = [i * 2.0 * math.pi / size for i in range(size)]
        self._sin = tuple(fastmath.sinf(a) for a in angles)
        self._cos = tuple(fastmath.cosf(a) for a in angles)

    @property
    def size(self) -> int:
        return self._mask + 1

    def _index(self, x: float) -> int:
        return int(x * self._scale) & self._mask

    def sin(self, x: float) -> float:
        return self._sin[self._index(x)]

    def cos(self, x: float) -> float:
        return self._cos[self._index(x)]