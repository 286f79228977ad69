"""Fast approximations of common math functions and a small LCG generator.

The approximations trade accuracy for speed and reproduce their
documented quirks exactly, so results are stable across platforms.
"""

from __future__ import annotations

import math
import struct

RAND_MAX = 0x7FFF
_LOG2 = 0.693147180559945309417232121458176568
_EXP_SCALE = 6051102.0
_EXP_OFFSET = 1056478197.0
_LOG_OFFSET = 1064866805
_LOG_SCALE = 8.262958405176314e-8


def _f32(x: float) -> float:
    return struct.unpack("<f", struct.pack("<f", x))[0]


def _float_bits(x: float) -> int:
    return struct.unpack("<I", struct.pack("<f", x))[0]


def _float_bits_signed(x: float) -> int:
    return struct.unpack("<i", struct.pack("<f", x))[0]


def _bits_float(bits: int) -> float:
    return struct.unpack("<f", struct.pack("<I", bits & 0xFFFFFFFF))[0]


class Rand:
    """Linear congruential generator yielding values in ``0..RAND_MAX``."""

    def __init__(self, seed: int = 123456789) -> None:
        self._state = seed & 0xFFFFFFFF

    def seed(self, value: int) -> None:
        """Reset the generator state."""
        self._state = value & 0xFFFFFFFF

    def rand(self) -> int:
        """Return the next pseudo-random value."""
        self._state = (self._state * 0x343FD + 0x269EC3) & 0xFFFFFFFF
        return (self._state >> 16) & RAND_MAX


def invsqrtf(x: float) -> float:
    """Approximate ``1 / sqrt(x)`` with a bit trick and one refinement step."""
    y = _bits_float(0x5F1FFFF9 - (_float_bits(x) >> 1))
    return 0.703952253 * y * (2.38924456 - x * y * y)


def sqrtf(n: float) -> float:
    """Approximate square root."""
    return 1.0 / invsqrtf(n)


def sinf(a: float) -> float:
    """Polynomial sine, fitted over ``[0, 2*pi]``."""
    return 1.91059300966915117e-31 + a * (
        1.00086760103908896 + a * (
            -1.21276126894734565e-2 + a * (
                -1.38078780785773762e-1 + a * (
                    -2.67353392911981221e-2 + a * (
                        2.08026600266304389e-2 + a * (
                            -3.03996055049204407e-3 + a * 1.38235642404333740e-4))))))


def cosf(a: float) -> float:
    """Polynomial cosine, fitted over ``[0, 2*pi]``."""
    return 1.00238601909309722 + a * (
        -3.81919947353040024e-2 + a * (
            -3.94382342128062756e-1 + a * (
                -1.18134036025221444e-1 + a * (
                    1.07123798512170878e-1 + a * (
                        -1.86637164165180873e-2 + a * (
                            9.90140908664079833e-4 + a * -5.23022132118824778e-14))))))


def sincosf(radians: float) -> tuple[float, float]:
    """Return ``(sinf(radians), cosf(radians))``."""
    return sinf(radians), cosf(radians)


def tanf(radians: float) -> float:
    """Polynomial tangent, accurate for small angles."""
    rr = radians * radians
    a = 9.5168091e-03
    for coefficient in (2.900525e-03, 2.45650893e-02, 5.33740603e-02,
                        1.333923995e-01, 3.333314036e-01, 1.0):
        a = a * rr + coefficient
    return a * radians


def fabsf(x: float) -> float:
    return x if x > 0 else -x


def sign(x: float) -> int:
    """Return 1 for non-negative values and -1 otherwise (NaN gives -1)."""
    non_negative = x >= 0
    return 2 * int(non_negative) - 1


def exp(a: float) -> float:
    """Approximate ``e ** a`` as a ratio of two bit-constructed floats."""
    product = _f32(_EXP_SCALE * a)
    offset = _f32(_EXP_OFFSET)
    numerator = _bits_float(int(_f32(product + offset)))
    denominator = _bits_float(int(_f32(offset - product)))
    if denominator == 0.0:
        return math.copysign(math.inf, numerator) if numerator else math.nan
    return numerator / denominator


def log(a: float) -> float:
    """Approximate natural logarithm from the float's bit pattern."""
    return (_float_bits_signed(a) - _LOG_OFFSET) * _LOG_SCALE


def exp2f(x: float) -> float:
    return exp(_LOG2 * x)


def log2f(x: float) -> float:
    return log(x) / _LOG2


def powf(a: float, b: float) -> float:
    """Approximate ``a ** b``.

    The integer part of ``b`` is applied by repeated squaring; the
    fractional part contributes ``exp(frac)`` regardless of ``a``.
    """
    flipped = b < 0
    if flipped:
        b = -b
    e = int(b)
    f = exp(b - e)
    r = 1.0
    while e:
        if e & 1:
            r *= a
        a *= a
        e >>= 1
    r *= f
    if flipped:
        return 1.0 / r if r else math.inf
    return r


def floorf(x: float) -> float:
    return float(int(x)) if x >= 0.0 else float(int(x - 0.9999999999999999))


def ceilf(x: float) -> float:
    """Ceiling for non-integers; positive integers map to the next integer."""
    return float(int(x)) if x < 0 else float(int(x) + 1)


def roundf(x: float) -> float:
    return floorf(x + 0.5) if x >= 0.0 else ceilf(x - 0.5)


def remainder(x: float, y: float) -> float:
    return x - roundf(x / y) * y


def copy_sign(x: float, y: float) -> float:
    """Return the magnitude of ``x`` with the sign of ``y``."""
    return math.copysign(x, y)


def fmodf(x: float, y: float) -> float:
    """Floating remainder built on :func:`remainder`.

    The divisor is always added back to the intermediate result, which
    gives the usual answer whenever ``x / y`` rounds upwards.
    """
    y = fabsf(y)
    result = remainder(fabsf(x), y) + y
    return copy_sign(result, x)