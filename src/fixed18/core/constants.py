"""
fixed18 Core Constants (integer domain)
=======================================

Only integer constants live here. A fixed-point number is a plain ``int`` in
``[MIN, MAX]`` read as ``value / SCALE``. Decimal helpers for display live in
`fmt.py`.
"""

# NOTE: every literal below is exact; nothing is derived at runtime from floats.

# ---------------------------------------------------------------------------
# Signed 256-bit domain
# ---------------------------------------------------------------------------

#: Bounds of the signed 256-bit integer domain.
INT256_MIN: int = -(2 ** 255)
INT256_MAX: int = 2 ** 255 - 1

#: Upper bound of the unsigned 256-bit domain used by `primitives.mul_div`.
UINT256_MAX: int = 2 ** 256 - 1


# ---------------------------------------------------------------------------
# 18-decimal fixed-point scale
# ---------------------------------------------------------------------------

#: The integer representing 1.0.
SCALE: int = 10 ** 18

#: Half of SCALE, used by `mul` for round-half-away-from-zero.
HALF_SCALE: int = 5 * 10 ** 17

#: Smallest and largest fixed-point numbers.
MIN: int = INT256_MIN   # -57896044618658097711785492504343953926634992332820282019728.792003956564819968
MAX: int = INT256_MAX   # 57896044618658097711785492504343953926634992332820282019728.792003956564819967

#: Bounds truncated to the last exact multiple of SCALE.
MAX_WHOLE: int = MAX - MAX % SCALE
MIN_WHOLE: int = -MAX_WHOLE


# ---------------------------------------------------------------------------
# Literal constants (18-digit truncations)
# ---------------------------------------------------------------------------

#: Euler's number.
E: int = 2_718281828459045235

#: Pi.
PI: int = 3_141592653589793238

#: log2(e), the change-of-base factor used by `exp` and `ln`.
LOG2_E: int = 1_442695040888963407

#: log2(10), the change-of-base factor used by `log10`.
LOG2_10: int = 3_321928094887362347

#: SCALE squared; numerator of `inv` and of the reciprocal step in `log2`.
SCALE_SQUARED: int = SCALE * SCALE


# ---------------------------------------------------------------------------
# Function-specific ceilings
# ---------------------------------------------------------------------------

#: `exp2` accepts 0 <= x < EXP2_MAX_INPUT (2^128 fits the 128.128 walk).
EXP2_MAX_INPUT: int = 128 * SCALE

#: `exp` accepts x < EXP_MAX_INPUT, i.e. 128 / log2(e).
EXP_MAX_INPUT: int = 88_722839111672999628

#: `sqrt` accepts x < SQRT_MAX_INPUT so that x * SCALE stays in the domain.
SQRT_MAX_INPUT: int = MAX // SCALE + 1


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

__all__ = [
    "INT256_MIN",
    "INT256_MAX",
    "UINT256_MAX",
    "SCALE",
    "HALF_SCALE",
    "MIN",
    "MAX",
    "MAX_WHOLE",
    "MIN_WHOLE",
    "E",
    "PI",
    "LOG2_E",
    "LOG2_10",
    "SCALE_SQUARED",
    "EXP2_MAX_INPUT",
    "EXP_MAX_INPUT",
    "SQRT_MAX_INPUT",
]
