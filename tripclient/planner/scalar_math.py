"""Scalar math kit built from elementary arithmetic only.

The distance estimator runs on these instead of the ``math`` trig functions
so the numeric behaviour is identical on every interpreter. Accuracy is tuned
for the haversine inputs it sees (small angles, values in [0, 1]); it is not a
general-purpose replacement.
"""

from __future__ import annotations

PI = 3.141592653589793
HALF_PI = PI / 2
TWO_PI = 2 * PI

_SIN_TERMS = 10
_ATAN_TERMS = 20
# Newton from x/2 first overshoots to ~1 for tiny x, then halves until it is
# near sqrt(x); 64 steps cover inputs down to ~1e-30.
_SQRT_ITERATIONS = 64


def _is_finite(x: float) -> bool:
    return x == x and x not in (float("inf"), float("-inf"))


def radians(degrees: float) -> float:
    return degrees * PI / 180.0


def sin(x: float) -> float:
    if not _is_finite(x):
        return float("nan")

    while x > PI:
        x -= TWO_PI
    while x < -PI:
        x += TWO_PI

    result = x
    term = x
    for i in range(1, _SIN_TERMS + 1):
        term *= -x * x / ((2 * i) * (2 * i + 1))
        result += term
    return result


def cos(x: float) -> float:
    return sin(x + HALF_PI)


def _atan(t: float) -> float:
    if t > 1.0 or t < -1.0:
        sign = 1.0 if t > 0 else -1.0
        return sign * HALF_PI - _atan(1.0 / t)

    result = t
    power = t
    for i in range(1, _ATAN_TERMS + 1):
        power *= -t * t
        result += power / (2 * i + 1)
    return result


def atan2(y: float, x: float) -> float:
    if x > 0:
        return _atan(y / x)
    if x < 0 and y >= 0:
        return _atan(y / x) + PI
    if x < 0 and y < 0:
        return _atan(y / x) - PI
    # x == 0
    if y > 0:
        return HALF_PI
    if y < 0:
        return -HALF_PI
    return 0.0


def sqrt(x: float) -> float:
    """Newton-Raphson square root; non-positive input yields 0."""
    if not x > 0:
        return 0.0

    guess = x / 2
    for _ in range(_SQRT_ITERATIONS):
        guess = (guess + x / guess) / 2
    return guess


__all__ = ["PI", "atan2", "cos", "radians", "sin", "sqrt"]
