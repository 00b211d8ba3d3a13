"""
Power & root family: pow (integer exponent), sqrt and gm.

pow squares with `mul_div(a, b, SCALE)` rather than the rounding `mul`, so each
step rounds down once and the error stays one-sided.
"""

from __future__ import annotations

from .constants import SCALE, MAX, SQRT_MAX_INPUT
from .exc import DomainError, OverflowError
from .primitives import check_int256, mul_div, sqrt as isqrt
from .scaling import abs as fixed_abs

# Debug printing control
DEBUG_POWER = False

def _dbg(msg: str) -> None:
    if DEBUG_POWER:
        print(msg)


def pow(x: int, n: int) -> int:
    """x raised to a non-negative integer power; pow(x, 0) == 1.0 for every x."""
    if n < 0:
        raise DomainError(f"pow: exponent must be a non-negative integer, got {n}")
    if n == 0:
        return SCALE
    abs_x = fixed_abs(x)

    # First iteration done up front.
    abs_result = abs_x if n & 1 else SCALE
    y = n >> 1
    while y > 0:
        abs_x = mul_div(abs_x, abs_x, SCALE)
        if y & 1:
            abs_result = mul_div(abs_result, abs_x, SCALE)
        y >>= 1

    if DEBUG_POWER:
        _dbg(f"pow: n={n} -> |result|={abs_result}")
    if abs_result > MAX:
        raise OverflowError(f"pow: result {abs_result} exceeds MAX")
    return -abs_result if x < 0 and n & 1 else abs_result


def sqrt(x: int) -> int:
    """Square root rounded down."""
    if x < 0:
        raise DomainError(f"sqrt: argument must be >= 0, got {x}")
    if x >= SQRT_MAX_INPUT:
        raise OverflowError(f"sqrt: {x} * SCALE would leave the domain")
    # sqrt(x * SCALE) == sqrt(x / SCALE) * SCALE
    return isqrt(x * SCALE)


def gm(x: int, y: int) -> int:
    """Geometric mean sqrt(x * y), rounded down.

    The raw product carries one extra factor of SCALE, which the integer
    square root removes.
    """
    if x == 0 or y == 0:
        return 0
    xy = check_int256(x * y, "gm: product")
    if xy < 0:
        raise DomainError(f"gm: product of {x} and {y} is negative")
    return isqrt(xy)


__all__ = [
    "pow",
    "sqrt",
    "gm",
]
