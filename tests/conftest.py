from __future__ import annotations
from decimal import Decimal
from typing import List

import pytest

from fixed18.core import SCALE, MIN, MAX, from_decimal


# -----------------------------
# Test helpers (pure functions)
# -----------------------------


def _fx(x: str) -> int:
    """Fixed-point int from a decimal string, e.g. _fx('1.5') == 1_500000000000000000."""
    return from_decimal(Decimal(x))


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture()
def sample_values() -> List[int]:
    """Representative operands across the domain (signs, fractions, extremes)."""
    return [
        MIN,
        -SCALE * 10 ** 40 - 123,
        -_fx("3.75"),
        -SCALE,
        -1,
        0,
        1,
        _fx("0.5"),
        SCALE,
        _fx("2.000000000000000001"),
        _fx("123456.789"),
        SCALE * 10 ** 40 + 987,
        MAX,
    ]


@pytest.fixture()
def small_operands() -> List[int]:
    """Operands whose pairwise products stay far from the domain bounds."""
    return [
        -_fx("1000000.5"),
        -_fx("7.3"),
        -_fx("0.000001"),
        _fx("0.3"),
        _fx("1"),
        _fx("2.5"),
        _fx("12345.6789"),
        _fx("99999999.99"),
    ]
