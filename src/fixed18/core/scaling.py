"""
Scaling & rounding primitives on signed 18-decimal fixed-point numbers.

- Values are plain ints in [MIN, MAX]; 1.0 is SCALE.
- mul rounds half away from zero; div and inv truncate toward zero.
- floor/ceil/frac use the sign-following remainder (see `primitives.trunc_mod`).
- Every step that could leave the 256-bit domain is checked explicitly; the
  shift-based `avg` cannot overflow and runs unchecked.
"""

from __future__ import annotations

from .constants import (
    SCALE,
    HALF_SCALE,
    MIN,
    MAX,
    MAX_WHOLE,
    MIN_WHOLE,
    E,
    PI,
    SCALE_SQUARED,
)
from .exc import DomainError, DivisionByZeroError, OverflowError
from .primitives import check_int256, trunc_div, trunc_mod

# Debug printing control
DEBUG_SCALING = False

def _dbg(msg: str) -> None:
    if DEBUG_SCALING:
        print(msg)


# ----------------------------
# Constant accessors
# ----------------------------

def scale() -> int:
    """The fixed-point representation of 1.0."""
    return SCALE


def e() -> int:
    """Euler's number as a fixed-point number."""
    return E


def pi() -> int:
    """Pi as a fixed-point number."""
    return PI


# ----------------------------
# Integer bridges
# ----------------------------

def from_int(n: int) -> int:
    """Convert a whole number to fixed-point (n * SCALE)."""
    if n > MAX // SCALE:
        raise OverflowError(f"from_int: {n} is above the largest whole number")
    if n < -(MAX // SCALE):
        raise OverflowError(f"from_int: {n} is below the smallest whole number")
    return n * SCALE


def to_int(x: int) -> int:
    """Whole part of a fixed-point number, truncated toward zero."""
    return trunc_div(x, SCALE)


# ----------------------------
# Sign and averaging
# ----------------------------

def abs(x: int) -> int:
    """Absolute value; MIN has no positive counterpart."""
    if x == MIN:
        raise DomainError("abs: MIN cannot be negated within the domain")
    return -x if x < 0 else x


def avg(x: int, y: int) -> int:
    """Arithmetic mean rounded toward -inf, without forming x + y.

    Halving each operand drops half a unit from every odd one; when both are
    odd the two lost halves make up one whole unit, added back here.
    """
    return (x >> 1) + (y >> 1) + (x & y & 1)


# ----------------------------
# Rounding to whole units
# ----------------------------

def floor(x: int) -> int:
    """Round toward -inf to a whole number."""
    if x < MIN_WHOLE:
        raise DomainError(f"floor: {x} is below MIN_WHOLE")
    remainder = trunc_mod(x, SCALE)
    if remainder == 0:
        return x
    result = x - remainder
    if x < 0:
        result -= SCALE
    return result


def ceil(x: int) -> int:
    """Round toward +inf to a whole number."""
    if x > MAX_WHOLE:
        raise DomainError(f"ceil: {x} is above MAX_WHOLE")
    remainder = trunc_mod(x, SCALE)
    if remainder == 0:
        return x
    result = x - remainder
    if x > 0:
        result += SCALE
    return result


def frac(x: int) -> int:
    """Fractional part; carries the sign of x (frac(-1.25) == -0.25)."""
    return trunc_mod(x, SCALE)


# ----------------------------
# Multiplication and division
# ----------------------------

def mul(x: int, y: int) -> int:
    """Fixed-point product rounded half away from zero.

    The unscaled product must itself fit the domain (phantom overflow is
    reported, not worked around).
    """
    product = check_int256(x * y, "mul: unscaled product")
    if product < 0:
        rounded = check_int256(product - HALF_SCALE, "mul: rounded product")
    else:
        rounded = check_int256(product + HALF_SCALE, "mul: rounded product")
    result = trunc_div(rounded, SCALE)
    _dbg(f"mul: x={x}, y={y}, product={product} -> {result}")
    return result


def div(x: int, y: int) -> int:
    """Fixed-point quotient truncated toward zero."""
    if y == 0:
        raise DivisionByZeroError(f"div: {x} / 0")
    scaled = check_int256(x * SCALE, "div: scaled numerator")
    result = check_int256(trunc_div(scaled, y), "div: quotient")
    _dbg(f"div: x={x}, y={y}, scaled={scaled} -> {result}")
    return result


def inv(x: int) -> int:
    """Reciprocal 1/x truncated toward zero."""
    if x == 0:
        raise DivisionByZeroError("inv: zero has no inverse")
    return trunc_div(SCALE_SQUARED, x)


__all__ = [
    "scale",
    "e",
    "pi",
    "from_int",
    "to_int",
    "abs",
    "avg",
    "floor",
    "ceil",
    "frac",
    "mul",
    "div",
    "inv",
]
