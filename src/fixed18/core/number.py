"""
FixedNumber: immutable wrapper around a fixed-point int.

- The wrapped value is the same int every engine function takes; the class only
  adds operator sugar and never changes rounding.
- `*` and `/` are the engine's `mul` and `div` (round half away from zero,
  truncate toward zero); `+` and `-` are exact but checked against the domain.
- Arithmetic requires FixedNumber operands; ints are not silently rescaled.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Union

from .constants import SCALE, MIN, MAX
from .exc import DomainError, OverflowError
from .primitives import check_int256
from . import scaling, exponential, logarithm, power
from .fmt import to_decimal, from_decimal, fmt_fixed


@dataclass(frozen=True, order=True)
class FixedNumber:
    """Signed 18-decimal fixed-point number: value / 10^18."""
    value: int

    def __post_init__(self):
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise DomainError(f"FixedNumber value must be int, got {type(self.value).__name__}")
        if self.value < MIN or self.value > MAX:
            raise OverflowError(f"FixedNumber value outside domain: {self.value}")

    # ------------- constructors -------------

    @staticmethod
    def zero() -> "FixedNumber":
        return FixedNumber(0)

    @staticmethod
    def one() -> "FixedNumber":
        return FixedNumber(SCALE)

    @classmethod
    def from_int(cls, n: int) -> "FixedNumber":
        return cls(scaling.from_int(n))

    @classmethod
    def from_decimal(cls, d: Union[Decimal, str, int]) -> "FixedNumber":
        """Bridge from Decimal/str; digits past the 18th decimal are truncated."""
        return cls(from_decimal(d))

    # ------------- conversions -------------

    def to_decimal(self) -> Decimal:
        return to_decimal(self.value)

    def to_int(self) -> int:
        return scaling.to_int(self.value)

    def __str__(self) -> str:
        return fmt_fixed(self.value)

    # ------------- predicates -------------

    def is_zero(self) -> bool:
        return self.value == 0

    def is_negative(self) -> bool:
        return self.value < 0

    # ------------- arithmetic -------------

    @staticmethod
    def _operand(other: object) -> int:
        if not isinstance(other, FixedNumber):
            raise DomainError("FixedNumber arithmetic requires FixedNumber operands")
        return other.value

    def __add__(self, other: "FixedNumber") -> "FixedNumber":
        return FixedNumber(check_int256(self.value + self._operand(other), "add"))

    def __sub__(self, other: "FixedNumber") -> "FixedNumber":
        return FixedNumber(check_int256(self.value - self._operand(other), "sub"))

    def __mul__(self, other: "FixedNumber") -> "FixedNumber":
        return FixedNumber(scaling.mul(self.value, self._operand(other)))

    def __truediv__(self, other: "FixedNumber") -> "FixedNumber":
        return FixedNumber(scaling.div(self.value, self._operand(other)))

    def __neg__(self) -> "FixedNumber":
        return FixedNumber(check_int256(-self.value, "neg"))

    def __abs__(self) -> "FixedNumber":
        return FixedNumber(scaling.abs(self.value))

    def __pow__(self, n: int) -> "FixedNumber":
        if not isinstance(n, int) or isinstance(n, bool):
            raise DomainError("FixedNumber ** requires a non-negative int exponent")
        return FixedNumber(power.pow(self.value, n))

    # ------------- engine functions -------------

    def floor(self) -> "FixedNumber":
        return FixedNumber(scaling.floor(self.value))

    def ceil(self) -> "FixedNumber":
        return FixedNumber(scaling.ceil(self.value))

    def frac(self) -> "FixedNumber":
        return FixedNumber(scaling.frac(self.value))

    def inv(self) -> "FixedNumber":
        return FixedNumber(scaling.inv(self.value))

    def avg(self, other: "FixedNumber") -> "FixedNumber":
        return FixedNumber(scaling.avg(self.value, self._operand(other)))

    def gm(self, other: "FixedNumber") -> "FixedNumber":
        return FixedNumber(power.gm(self.value, self._operand(other)))

    def sqrt(self) -> "FixedNumber":
        return FixedNumber(power.sqrt(self.value))

    def exp(self) -> "FixedNumber":
        return FixedNumber(exponential.exp(self.value))

    def exp2(self) -> "FixedNumber":
        return FixedNumber(exponential.exp2(self.value))

    def ln(self) -> "FixedNumber":
        return FixedNumber(logarithm.ln(self.value))

    def log2(self) -> "FixedNumber":
        return FixedNumber(logarithm.log2(self.value))

    def log10(self) -> "FixedNumber":
        return FixedNumber(logarithm.log10(self.value))


__all__ = [
    "FixedNumber",
]
