"""
Formatting helpers and Decimal bridges (non-core arithmetic).

Core arithmetic uses plain integers. Decimal here is only for I/O and display
(e.g., tests, logs, the demo script).
"""

from __future__ import annotations

from decimal import Context, Decimal, ROUND_DOWN
from typing import Union

from .constants import SCALE, MIN, MAX
from .exc import DomainError, OverflowError

# Debug printing control (formatting layer)
DEBUG_FMT = False

def _dbg(msg: str) -> None:
    if DEBUG_FMT:
        print(msg)


# ---------------------------------------------------------------------------
# Decimal precision (formatting only)
# ---------------------------------------------------------------------------

#: Significant digits used by the Decimal bridges. The widest fixed-point
#: number has 77 digits, so conversions in either direction are exact.
DEFAULT_DECIMAL_PRECISION: int = 80

# Private context; the caller's thread-local Decimal context is never touched.
_CTX = Context(prec=DEFAULT_DECIMAL_PRECISION)

_SCALE_DEC = Decimal(SCALE)


# ---------------------------------------------------------------------------
# Bridges
# ---------------------------------------------------------------------------

def to_decimal(x: int) -> Decimal:
    """Decimal value of a fixed-point number (exact), for logs/printing only."""
    if not isinstance(x, int):
        raise DomainError(f"to_decimal(): expected int, got {type(x).__name__}")
    return _CTX.divide(Decimal(x), _SCALE_DEC)


def from_decimal(d: Union[Decimal, str, int]) -> int:
    """Fixed-point number nearest to `d`, truncating digits past the 18th decimal.

    Truncation is toward zero, mirroring `div`.
    """
    if isinstance(d, float):
        raise DomainError("from_decimal(): floats are not accepted, pass a Decimal or str")
    d = Decimal(d)
    if d.is_nan() or d.is_infinite():
        raise DomainError(f"from_decimal(): invalid Decimal {d}")
    scaled = _CTX.multiply(d, _SCALE_DEC)
    value = int(scaled.to_integral_value(rounding=ROUND_DOWN, context=_CTX))
    _dbg(f"from_decimal: d={d} -> {value}")
    if value < MIN or value > MAX:
        raise OverflowError(f"from_decimal(): {d} is outside the fixed-point domain")
    return value


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------

def fmt_fixed(x: int, places: int = 18) -> str:
    """Format a fixed-point number as a plain decimal string.

    The output is stable for logs and tests, e.g.:
      1500000000000000000  -> '1.500000000000000000'
      -1                   -> '-0.000000000000000001'
    """
    return format(to_decimal(x), f".{places}f")


def fmt_sci(x: int, places: int = 18) -> str:
    """Format a fixed-point number in scientific notation, e.g. '1.000000000000000000E+0'."""
    return format(to_decimal(x), f".{places}E")


__all__ = [
    "DEFAULT_DECIMAL_PRECISION",
    "to_decimal",
    "from_decimal",
    "fmt_fixed",
    "fmt_sci",
]
