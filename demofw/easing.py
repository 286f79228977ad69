"""Easing curves mapping progress ``p`` in ``[0, 1]`` to an eased value."""

from __future__ import annotations

import math

from .fastmath import cosf, powf, sinf, sqrtf

_PI = math.pi
_PI_2 = math.pi / 2


def linear_interpolation(p: float) -> float:
    return p


def quadratic_ease_in(p: float) -> float:
    return p * p


def quadratic_ease_out(p: float) -> float:
    return -(p * (p - 2))


def quadratic_ease_in_out(p: float) -> float:
    if p < 0.5:
        return 2 * p * p
    return (-2 * p * p) + (4 * p) - 1


def cubic_ease_in(p: float) -> float:
    return p * p * p


def cubic_ease_out(p: float) -> float:
    f = p - 1
    return f * f * f + 1


def cubic_ease_in_out(p: float) -> float:
    if p < 0.5:
        return 4 * p * p * p
    f = (2 * p) - 2
    return 0.5 * f * f * f + 1


def quartic_ease_in(p: float) -> float:
    return p * p * p * p


def quartic_ease_out(p: float) -> float:
    f = p - 1
    return f * f * f * (1 - p) + 1


def quartic_ease_in_out(p: float) -> float:
    if p < 0.5:
        return 8 * p * p * p * p
    f = p - 1
    return -8 * f * f * f * f + 1


def quintic_ease_in(p: float) -> float:
    return p * p * p * p * p


def quintic_ease_out(p: float) -> float:
    f = p - 1
    return f * f * f * f * f + 1


def quintic_ease_in_out(p: float) -> float:
    if p < 0.5:
        return 16 * p * p * p * p * p
    f = (2 * p) - 2
    return 0.5 * f * f * f * f * f + 1


def sine_ease_in(p: float) -> float:
    return sinf((p - 1) * _PI_2) + 1


def sine_ease_out(p: float) -> float:
    return sinf(p * _PI_2)


def sine_ease_in_out(p: float) -> float:
    return 0.5 * (1 - cosf(p * _PI))


def circular_ease_in(p: float) -> float:
    return 1 - sqrtf(1 - (p * p))


def circular_ease_out(p: float) -> float:
    return sqrtf((2 - p) * p)


def circular_ease_in_out(p: float) -> float:
    if p < 0.5:
        return 0.5 * (1 - sqrtf(1 - 4 * (p * p)))
    return 0.5 * (sqrtf(-((2 * p) - 3) * ((2 * p) - 1)) + 1)


def exponential_ease_in(p: float) -> float:
    return p if p == 0.0 else powf(2, 10 * (p - 1))


def exponential_ease_out(p: float) -> float:
    return p if p == 1.0 else 1 - powf(2, -10 * p)


def exponential_ease_in_out(p: float) -> float:
    if p in (0.0, 1.0):
        return p
    if p < 0.5:
        return 0.5 * powf(2, (20 * p) - 10)
    return -0.5 * powf(2, (-20 * p) + 10) + 1


def elastic_ease_in(p: float) -> float:
    return sinf(13 * _PI_2 * p) * powf(2, 10 * (p - 1))


def elastic_ease_out(p: float) -> float:
    return sinf(-13 * _PI_2 * (p + 1)) * powf(2, -10 * p) + 1


def elastic_ease_in_out(p: float) -> float:
    if p < 0.5:
        return 0.5 * sinf(13 * _PI_2 * (2 * p)) * powf(2, 10 * ((2 * p) - 1))
    return 0.5 * (sinf(-13 * _PI_2 * ((2 * p - 1) + 1)) * powf(2, -10 * (2 * p - 1)) + 2)


def back_ease_in(p: float) -> float:
    return p * p * p - p * sinf(p * _PI)


def back_ease_out(p: float) -> float:
    f = 1 - p
    return 1 - (f * f * f - f * sinf(f * _PI))


def back_ease_in_out(p: float) -> float:
    if p < 0.5:
        f = 2 * p
        return 0.5 * (f * f * f - f * sinf(f * _PI))
    f = 1 - (2 * p - 1)
    return 0.5 * (1 - (f * f * f - f * sinf(f * _PI))) + 0.5


def bounce_ease_out(p: float) -> float:
    if p < 4 / 11.0:
        return (121 * p * p) / 16.0
    if p < 8 / 11.0:
        return (363 / 40.0 * p * p) - (99 / 10.0 * p) + 17 / 5.0
    if p < 9 / 10.0:
        return (4356 / 361.0 * p * p) - (35442 / 1805.0 * p) + 16061 / 1805.0
    return (54 / 5.0 * p * p) - (513 / 25.0 * p) + 268 / 25.0


def bounce_ease_in(p: float) -> float:
    return 1 - bounce_ease_out(1 - p)


def bounce_ease_in_out(p: float) -> float:
    if p < 0.5:
        return 0.5 * bounce_ease_in(p * 2)
    return 0.5 * bounce_ease_out(p * 2 - 1) + 0.5