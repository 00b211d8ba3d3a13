"""
Logarithmic family: log2, ln and log10.

log2 splits the result into an integer part (the most significant bit of the
whole part of x) and a fractional part found by repeated squaring: once the
mantissa y is normalised into [1, 2), squaring it either stays below 2 (next
binary digit is 0) or crosses 2 (digit is 1, and y is halved back into range).

Caveat: the fractional digits come from truncated squarings, so results can
differ from the exact logarithm in the last few decimals. Exact powers of two
(and exact powers of ten for log10) are returned without error.

The fractional loop runs until the digit weight `delta` reaches zero (59
squarings), not for a fixed 18 halvings: 18 binary digits resolve only about
4e-6, far short of an 18-decimal result.
"""

from __future__ import annotations

from .constants import SCALE, HALF_SCALE, LOG2_E, LOG2_10, SCALE_SQUARED
from .exc import DomainError
from .primitives import most_significant_bit, trunc_div

# Debug printing control
DEBUG_LOG = False

def _dbg(msg: str) -> None:
    if DEBUG_LOG:
        print(msg)


#: Raw values 10^k (k = 0..76) mapped to their exact base-10 logarithm,
#: i.e. (k - 18) whole units. Covers every power of ten in the domain.
POW10_LOGS: dict = {10 ** k: (k - 18) * SCALE for k in range(77)}


def log2(x: int) -> int:
    """Binary logarithm of a positive fixed-point number."""
    if x <= 0:
        raise DomainError(f"log2: argument must be positive, got {x}")

    # log2(x) = -log2(1/x)
    if x >= SCALE:
        sign = 1
    else:
        sign = -1
        x = SCALE_SQUARED // x

    n = most_significant_bit(x // SCALE)
    result = n * SCALE

    # y = x * 2^-n lies in [1, 2)
    y = x >> n
    _dbg(f"log2: n={n}, y={y}, sign={sign}")
    if y == SCALE:
        return result * sign

    delta = HALF_SCALE
    while delta > 0:
        y = (y * y) // SCALE
        if y >= 2 * SCALE:
            result += delta
            y >>= 1
        delta >>= 1

    _dbg(f"log2: -> {result * sign}")
    return result * sign


def ln(x: int) -> int:
    """Natural logarithm: log2(x) * ln(2), i.e. log2(x) / log2(e)."""
    return trunc_div(log2(x) * SCALE, LOG2_E)


def log10(x: int) -> int:
    """Common logarithm; exact for powers of ten."""
    if x <= 0:
        raise DomainError(f"log10: argument must be positive, got {x}")
    exact = POW10_LOGS.get(x)
    if exact is not None:
        return exact
    return trunc_div(log2(x) * SCALE, LOG2_10)


__all__ = [
    "log2",
    "ln",
    "log10",
]
