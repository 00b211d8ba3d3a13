"""
Low-level integer primitives shared by every function family.

- mul_div: floor(a*b/denominator) on unsigned operands; the product may exceed
  256 bits, only the quotient must fit.
- sqrt: floor(sqrt(x)) via the Babylonian method.
- most_significant_bit: zero-based index of the highest set bit.
- trunc_div / trunc_mod: integer division rounding toward zero and the
  remainder that carries the sign of the dividend. Python's own `//` and `%`
  floor toward -inf, which is not what the fixed-point rounding rules expect.
- check_int256: explicit range check standing in for the checked arithmetic of
  a native 256-bit integer.
"""

from __future__ import annotations

from .constants import INT256_MIN, INT256_MAX, UINT256_MAX
from .exc import DomainError, DivisionByZeroError, OverflowError

# Debug printing control
DEBUG_PRIMITIVES = False

def _dbg(msg: str) -> None:
    if DEBUG_PRIMITIVES:
        print(msg)


# ----------------------------
# Range checks
# ----------------------------

def check_int256(value: int, what: str = "value") -> int:
    """Return `value` unchanged if it fits the signed 256-bit domain."""
    if value < INT256_MIN or value > INT256_MAX:
        raise OverflowError(f"{what} overflows the signed 256-bit domain: {value}")
    return value


def _require_unsigned(value: int, what: str) -> None:
    if value < 0:
        raise DomainError(f"{what} must be >= 0, got {value}")


# ----------------------------
# Sign-aware integer division
# ----------------------------

def trunc_div(a: int, b: int) -> int:
    """Divide rounding toward zero (C-style), e.g. trunc_div(-7, 2) == -3."""
    if b == 0:
        raise DivisionByZeroError("trunc_div: division by zero")
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q


def trunc_mod(a: int, b: int) -> int:
    """Remainder of `trunc_div`; its sign follows the dividend, e.g. trunc_mod(-7, 2) == -1."""
    return a - b * trunc_div(a, b)


# ----------------------------
# Unsigned primitives
# ----------------------------

def mul_div(a: int, b: int, denominator: int) -> int:
    """Return floor(a*b / denominator) for unsigned operands.

    The intermediate product is unconstrained; the quotient must fit in 256
    unsigned bits.
    """
    _require_unsigned(a, "mul_div: a")
    _require_unsigned(b, "mul_div: b")
    _require_unsigned(denominator, "mul_div: denominator")
    if denominator == 0:
        raise DivisionByZeroError("mul_div: zero denominator")
    result = (a * b) // denominator
    _dbg(f"mul_div: a={a}, b={b}, den={denominator} -> {result}")
    if result > UINT256_MAX:
        raise OverflowError(f"mul_div: result does not fit 256 bits (a={a}, b={b}, den={denominator})")
    return result


def most_significant_bit(x: int) -> int:
    """Zero-based index of the highest set bit of a positive integer."""
    if x <= 0:
        raise DomainError(f"most_significant_bit expects x > 0, got {x}")
    return x.bit_length() - 1


def sqrt(x: int) -> int:
    """Integer square root rounded down (Babylonian method).

    The seed 2^(msb/2 + 1) is never below the true root, so the iterates
    decrease monotonically and the first non-decreasing step marks the floor.
    """
    if x < 0:
        raise DomainError(f"sqrt expects x >= 0, got {x}")
    if x < 2:
        return x
    result = 1 << ((most_significant_bit(x) >> 1) + 1)
    while True:
        nxt = (result + x // result) >> 1
        if nxt >= result:
            return result
        result = nxt


__all__ = [
    "check_int256",
    "trunc_div",
    "trunc_mod",
    "mul_div",
    "most_significant_bit",
    "sqrt",
]
