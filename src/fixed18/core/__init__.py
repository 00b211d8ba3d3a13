"""
fixed18 Core
============

Unified exports for the signed 18-decimal fixed-point engine. Every function
takes and returns plain ints interpreted as ``value / 10**18`` and either
returns a bit-exact result or raises a typed error.
Decimal helpers are provided *only* for I/O formatting.
"""

# NOTE:
#   Function families are split by module (scaling, exponential, logarithm,
#   power). Names such as `abs`, `pow`, `floor` and `sqrt` deliberately match
#   their mathematical meaning; import them qualified if shadowing builtins is
#   a concern (e.g. `from fixed18 import core as fx; fx.abs(x)`).

# Integer-domain constants
from .constants import (
    SCALE,
    HALF_SCALE,
    MIN,
    MAX,
    MIN_WHOLE,
    MAX_WHOLE,
    E,
    PI,
    LOG2_E,
    LOG2_10,
)

# Low-level primitives
from .primitives import (
    mul_div,
    most_significant_bit,
    trunc_div,
    trunc_mod,
)

# Scaling & rounding
from .scaling import (
    scale,
    e,
    pi,
    from_int,
    to_int,
    abs,
    avg,
    floor,
    ceil,
    frac,
    mul,
    div,
    inv,
)

# Exponential family
from .exponential import exp2, exp

# Logarithmic family
from .logarithm import log2, ln, log10

# Power & root family
from .power import pow, sqrt, gm

# Value wrapper
from .number import FixedNumber

# Decimal formatting helpers (non-core arithmetic)
from .fmt import (
    DEFAULT_DECIMAL_PRECISION,
    to_decimal,
    from_decimal,
    fmt_fixed,
    fmt_sci,
)

# Core exceptions
from .exc import FixedPointError, OverflowError, DomainError, DivisionByZeroError

__all__ = [
    # constants
    "SCALE",
    "HALF_SCALE",
    "MIN",
    "MAX",
    "MIN_WHOLE",
    "MAX_WHOLE",
    "E",
    "PI",
    "LOG2_E",
    "LOG2_10",
    # primitives
    "mul_div",
    "most_significant_bit",
    "trunc_div",
    "trunc_mod",
    # scaling
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
    # exponential
    "exp2",
    "exp",
    # logarithm
    "log2",
    "ln",
    "log10",
    # power
    "pow",
    "sqrt",
    "gm",
    # value wrapper
    "FixedNumber",
    # fmt
    "DEFAULT_DECIMAL_PRECISION",
    "to_decimal",
    "from_decimal",
    "fmt_fixed",
    "fmt_sci",
    # exceptions
    "FixedPointError",
    "OverflowError",
    "DomainError",
    "DivisionByZeroError",
]
