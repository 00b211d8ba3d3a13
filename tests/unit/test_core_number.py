import pytest
from decimal import Decimal

from fixed18.core.constants import SCALE, MAX, MIN
from fixed18.core.exc import DomainError, DivisionByZeroError, OverflowError
from fixed18.core.number import FixedNumber


def _n(x: str) -> FixedNumber:
    """Helper: build a FixedNumber from a Decimal string."""
    return FixedNumber.from_decimal(Decimal(x))


# -----------------------------
# Construction & conversions
# -----------------------------

def test_construction_and_round_trip():
    print("[FixedNumber] from_decimal('123.45') -> to_decimal round-trip, str rendering")
    a = _n("123.45")
    assert a.value == 123_450000000000000000
    assert a.to_decimal() == Decimal("123.45")
    assert str(a) == "123.450000000000000000"
    assert FixedNumber.from_int(7).value == 7 * SCALE
    assert _n("-7.9").to_int() == -7
    assert FixedNumber.zero().is_zero()
    assert FixedNumber.one().value == SCALE


def test_construction_rejects_out_of_domain():
    with pytest.raises(OverflowError):
        FixedNumber(MAX + 1)
    with pytest.raises(OverflowError):
        FixedNumber(MIN - 1)
    with pytest.raises(DomainError):
        FixedNumber(1.5)  # type: ignore[arg-type]


def test_value_semantics():
    assert _n("1.5") == _n("1.50")
    assert _n("1.5") < _n("2")
    assert _n("-3") <= _n("-3")
    assert len({_n("1"), _n("1.0"), FixedNumber.one()}) == 1


# -----------------------------
# Arithmetic (delegates to the engine)
# -----------------------------

def test_add_sub_are_exact_and_checked():
    print("[add/sub] 1.2 + 3.4 -> 4.6; MAX + tiny -> OverflowError")
    assert (_n("1.2") + _n("3.4")) == _n("4.6")
    assert (_n("1.2") - _n("3.4")) == _n("-2.2")
    with pytest.raises(OverflowError):
        _ = FixedNumber(MAX) + FixedNumber(1)
    with pytest.raises(OverflowError):
        _ = FixedNumber(MIN) - FixedNumber(1)


def test_mul_div_match_engine_rounding():
    assert (_n("2") * _n("3")) == _n("6")
    assert (_n("1") / _n("3")).value == 333333333333333333
    with pytest.raises(DivisionByZeroError):
        _ = _n("1") / FixedNumber.zero()


def test_neg_abs_pow():
    assert -_n("2.5") == _n("-2.5")
    assert abs(_n("-2.5")) == _n("2.5")
    assert _n("2") ** 10 == _n("1024")
    assert _n("-2") ** 3 == _n("-8")
    with pytest.raises(OverflowError):
        _ = -FixedNumber(MIN)
    with pytest.raises(DomainError):
        _ = _n("2") ** _n("2")  # type: ignore[operator]


def test_mixed_operand_types_raise():
    print("[mixed-operands] FixedNumber + int -> expect DomainError (no silent rescaling)")
    with pytest.raises(DomainError):
        _ = _n("1") + 1  # type: ignore[operator]
    with pytest.raises(DomainError):
        _ = _n("1") * Decimal("2")  # type: ignore[operator]


# -----------------------------
# Engine functions as methods
# -----------------------------

def test_unary_engine_methods():
    assert _n("-1.25").floor() == _n("-2")
    assert _n("-1.25").ceil() == _n("-1")
    assert _n("-1.25").frac() == _n("-0.25")
    assert _n("4").inv() == _n("0.25")
    assert _n("4").sqrt() == _n("2")
    assert _n("10").exp2() == _n("1024")
    assert _n("0").exp() == FixedNumber.one()
    assert _n("8").log2() == _n("3")
    assert _n("1000").log10() == _n("3")
    assert _n("1").ln() == FixedNumber.zero()


def test_binary_engine_methods():
    assert _n("1").avg(_n("2")) == _n("1.5")
    assert _n("2").gm(_n("8")) == _n("4")
    with pytest.raises(DomainError):
        _n("-2").gm(_n("8"))
