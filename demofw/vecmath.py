"""Vector helpers, random ranges and scalar interpolation."""

from __future__ import annotations

import math

from . import fastmath
from .fastmath import RAND_MAX, Rand
from .types import Vec3f

_DEFAULT_RAND = Rand()


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def randf(low: float, high: float, rng: Rand | None = None) -> float:
    """Return a pseudo-random float in ``[low, high]``."""
    rnd = (rng or _DEFAULT_RAND).rand() / RAND_MAX
    return low + rnd * (high - low)


def rand_int(low: int, high: int, rng: Rand | None = None) -> int:
    """Return a pseudo-random integer in ``[low, high]``."""
    value = (rng or _DEFAULT_RAND).rand()
    return low + _trunc_div(value, _trunc_div(RAND_MAX, high - low + 1) + 1)


def normalize(v: Vec3f) -> Vec3f:
    """Return ``v`` scaled to unit length."""
    n = fastmath.sqrtf(v.x * v.x + v.y * v.y + v.z * v.z)
    return Vec3f(v.x / n, v.y / n, v.z / n)


def dot(v1: Vec3f, v2: Vec3f) -> float:
    return v1.x * v2.x + v1.y * v2.y + v1.z * v2.z


def scale(v: Vec3f, s: float) -> Vec3f:
    return Vec3f(v.x * s, v.y * s, v.z * s)


def length_squared(v: Vec3f) -> float:
    return v.x * v.x + v.y * v.y + v.z * v.z


def length(v: Vec3f) -> float:
    return fastmath.sqrtf(length_squared(v))


def dist(v1: Vec3f, v2: Vec3f) -> float:
    return fastmath.sqrtf(
        (v1.x - v2.x) ** 2 + (v1.y - v2.y) ** 2 + (v1.z - v2.z) ** 2
    )


def sign(f: float) -> float:
    """Return 1.0 carrying the sign of ``f`` (including negative zero)."""
    return math.copysign(1.0, f)


def clamp(d: float, low: float, high: float) -> float:
    t = low if d < low else d
    return high if t > high else t


def lerp(src: float, dest: float, t: float) -> float:
    """Linear interpolation; ``t >= 1`` yields ``dest`` exactly."""
    if t >= 1:
        return dest
    return src + t * (dest - src)


def damp(src: float, dest: float, lam: float, dt: float) -> float:
    """Frame-rate independent damping towards ``dest``.

    ``lam`` from about 1 (slow) to 25 (fast).
    """
    return lerp(src, dest, 1.0 - fastmath.exp(-lam * dt))