"""
Core exception types for fixed18.core.

These are dependency-free and may be imported by all core modules. Each
concrete error also derives from the matching builtin so callers may catch
either one.
"""

import builtins

__all__ = [
    "FixedPointError",
    "OverflowError",
    "DomainError",
    "DivisionByZeroError",
]


class FixedPointError(Exception):
    """Base class for every error raised by the fixed-point engine."""
    pass


class OverflowError(FixedPointError, builtins.OverflowError):
    """Raised when a result or a necessary intermediate leaves the 256-bit domain.

    This includes phantom overflow: an unscaled product that overflows even
    though the correctly scaled result would have fit.
    """
    pass


class DomainError(FixedPointError, ValueError):
    """Raised when inputs violate a function's preconditions.

    Examples: non-positive logarithm argument, negative square root argument,
    exponent outside the supported range, or `abs(MIN)`.
    """
    pass


class DivisionByZeroError(FixedPointError, ZeroDivisionError):
    """Raised on a zero denominator or a zero argument to `inv`."""
    pass
