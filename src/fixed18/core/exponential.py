"""
Exponential family: exp2 and exp.

exp2 works in an unsigned 128.128 binary fixed-point format. The exponent's
fractional bits are walked from the most significant down; every set bit
2^-k multiplies the accumulator by 2^(2^-k), taken from a static table. The
integer part of the exponent is folded in with a single left shift at the end.

Alignment notes:
- Only the first 59 fractional bits have table entries. The following bits of
  the 64-bit window weigh less than 2^-59 (below one unit of the input's 18th
  decimal) and are skipped.
- Negative exponents are rejected. 2^-x = 1/2^x would be the natural extension
  but it is not part of the validated surface.
"""

from __future__ import annotations

from .constants import (
    SCALE,
    MAX,
    LOG2_E,
    EXP2_MAX_INPUT,
    EXP_MAX_INPUT,
)
from .exc import DomainError, OverflowError
from .primitives import mul_div
from .scaling import mul

# Debug printing control
DEBUG_EXP = False

def _dbg(msg: str) -> None:
    if DEBUG_EXP:
        print(msg)


#: Fractional bits of the internal binary fixed-point format.
FRACTION_BITS: int = 128

#: 1.0 in the internal format.
ONE_128: int = 1 << FRACTION_BITS

#: EXP2_FACTORS[k - 1] == round(2^(2^-k) * 2^128) for k = 1..59.
EXP2_FACTORS: tuple = (
    0x16A09E667F3BCC908B2FB1366EA957D3E,  # 2^(1/2)
    0x1306FE0A31B7152DE8D5A46305C85EDED,  # 2^(1/4)
    0x1172B83C7D517ADCDF7C8C50EB14A7920,  # 2^(1/8)
    0x10B5586CF9890F6298B92B71842A98364,
    0x1059B0D31585743AE7C548EB68CA417FE,
    0x102C9A3E778060EE6F7CACA4F7A29BDE9,
    0x10163DA9FB33356D84A66AE336DCDFA40,
    0x100B1AFA5ABCBED6129AB13EC11DC9544,
    0x10058C86DA1C09EA1FF19D294CF2F679C,
    0x1002C605E2E8CEC506D21BFC89A23A011,
    0x100162F3904051FA128BCA9C55C31E5E0,
    0x1000B175EFFDC76BA38E31671CA939726,
    0x100058BA01FB9F96D6CACD4B180917C3E,
    0x10002C5CC37DA9491D0985C348C68E7B4,
    0x1000162E525EE054754457D5995292027,
    0x10000B17255775C040618BF4A4ADE83FD,
    0x1000058B91B5BC9AE2EED81E9B7D4CFAC,
    0x100002C5C89D5EC6CA4D7C8ACC017B7CA,
    0x10000162E43F4F831060E02D839A9D16D,
    0x100000B1721BCFC99D9F890EA06911763,
    0x10000058B90CF1E6D97F9CA14DBCC1629,
    0x1000002C5C863B73F016468F6BAC5CA2C,
    0x100000162E430E5A18F6119E3C02282A6,
    0x1000000B1721835514B86E6D96EFD1BFF,
    0x100000058B90C0B48C6BE5DF846C5B2F0,
    0x10000002C5C8601CC6B9E94213C72737B,
    0x1000000162E42FFF037DF38AA2B219F07,
    0x10000000B17217FBA9C739AA5819F44FA,
    0x1000000058B90BFCDEE5ACD3C1CEDC824,
    0x100000002C5C85FE31F35A6A30DA1BE51,
    0x10000000162E42FF0999CE3541B9FFFD0,
    0x100000000B17217F80F4EF5AADDA45554,
    0x10000000058B90BFBF8479BD5A81B51AE,
    0x1000000002C5C85FDF84BD62AE30A74CD,
    0x100000000162E42FEFB2FED257559BDAA,
    0x1000000000B17217F7D5A7716BBA4A9AF,
    0x100000000058B90BFBE9DDBAC5E109CCF,
    0x10000000002C5C85FDF4B15DE6F17EB0E,
    0x1000000000162E42FEFA494F1478FDE05,
    0x10000000000B17217F7D20CF927C8E94D,
    0x1000000000058B90BFBE8F71CB4E4B33E,
    0x100000000002C5C85FDF477B662B26946,
    0x10000000000162E42FEFA3AE53369388D,
    0x100000000000B17217F7D1D351A389D41,
    0x10000000000058B90BFBE8E8B2D3D4EDF,
    0x1000000000002C5C85FDF4741BEA6E77F,
    0x100000000000162E42FEFA39FE95583C3,
    0x1000000000000B17217F7D1CFB72B45E3,
    0x100000000000058B90BFBE8E7CC35C3F2,
    0x10000000000002C5C85FDF473E242EA39,
    0x1000000000000162E42FEFA39F02B772C,
    0x10000000000000B17217F7D1CF7D83C1A,
    0x1000000000000058B90BFBE8E7BDCBE2E,
    0x100000000000002C5C85FDF473DEA871F,
    0x10000000000000162E42FEFA39EF44D92,
    0x100000000000000B17217F7D1CF79E949,
    0x10000000000000058B90BFBE8E7BCE545,
    0x1000000000000002C5C85FDF473DE6ECA,
    0x100000000000000162E42FEFA39EF366F,  # 2^(2^-59)
)


def _exp2_128(x128: int) -> int:
    """2^x for an unsigned 128.128 exponent, result in 128.128.

    The accumulator starts at 0.5 so that the product of all factors (< 2)
    stays below 2^128 during the walk.
    """
    result = 1 << (FRACTION_BITS - 1)
    for k, factor in enumerate(EXP2_FACTORS, start=1):
        if x128 & (1 << (FRACTION_BITS - k)):
            result = (result * factor) >> FRACTION_BITS
    # 0.5 * 2^(n+1) == 2^n
    result <<= (x128 >> FRACTION_BITS) + 1
    return result


def exp2(x: int) -> int:
    """Binary exponent 2^x for 0 <= x < 128."""
    if x < 0:
        raise DomainError(f"exp2: negative exponents are not supported, got {x}")
    if x >= EXP2_MAX_INPUT:
        raise DomainError(f"exp2: exponent must be below 128, got {x}")
    x128 = (x << FRACTION_BITS) // SCALE
    _dbg(f"exp2: x={x}, x128={x128:#x}")
    result = mul_div(_exp2_128(x128), SCALE, ONE_128)
    if result > MAX:
        raise OverflowError(f"exp2: result {result} exceeds MAX")
    _dbg(f"exp2: -> {result}")
    return result


def exp(x: int) -> int:
    """Natural exponent e^x, computed as 2^(x * log2(e))."""
    if x >= EXP_MAX_INPUT:
        raise DomainError(f"exp: exponent must be below {EXP_MAX_INPUT}, got {x}")
    return exp2(mul(x, LOG2_E))


__all__ = [
    "FRACTION_BITS",
    "EXP2_FACTORS",
    "exp2",
    "exp",
]
