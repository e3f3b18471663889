from decimal import Decimal
from fractions import Fraction

import pytest

from exact_units import (
    BigIntegerQuantity,
    RationalQuantity,
    UnitParseError,
    get_quantity,
)
from exact_units.units import METRE, OHM, SECOND, MetricPrefix


def test_get_quantity_chooses_integer_representation():
    quantity = get_quantity(3, OHM)
    assert isinstance(quantity, BigIntegerQuantity)
    assert isinstance(get_quantity(Fraction(6, 2), OHM), BigIntegerQuantity)
    assert isinstance(get_quantity(4.0, OHM), BigIntegerQuantity)


def test_get_quantity_keeps_fractions_exact():
    assert get_quantity(0.5, OHM) == RationalQuantity(Fraction(1, 2), OHM)
    assert get_quantity(Decimal("0.1"), OHM).value == Fraction(1, 10)
    # floats are taken at their binary value
    assert get_quantity(0.1, OHM).value == Fraction(0.1)
    assert get_quantity(0.1, OHM).value != Fraction(1, 10)


def test_get_quantity_from_string():
    assert get_quantity("3 mΩ") == BigIntegerQuantity(3, MetricPrefix.MILLI(OHM))
    assert get_quantity("-1/3 s") == RationalQuantity(Fraction(-1, 3), SECOND)
    assert get_quantity("2.5 km").value == Fraction(5, 2)
    assert get_quantity(" 4 m.s^-1 ").unit == METRE / SECOND


def test_get_quantity_rejects_bad_arguments():
    with pytest.raises(TypeError):
        get_quantity(3)  # type: ignore[call-overload]
    with pytest.raises(TypeError):
        get_quantity("3 m", METRE)  # type: ignore[call-overload]
    with pytest.raises(UnitParseError):
        get_quantity("three metres")
    with pytest.raises(UnitParseError):
        get_quantity("3 furlongs")


def test_rational_inverse_is_exact():
    third = RationalQuantity(Fraction(1, 3), SECOND)
    assert third.inverse() == BigIntegerQuantity(3, SECOND.inverse())
    assert BigIntegerQuantity(3, SECOND).inverse() == BigIntegerQuantity(
        0, SECOND.inverse()
    )


def test_rational_arithmetic_collapses_to_integers():
    third = RationalQuantity(Fraction(1, 3), METRE)
    total = third + third + third
    assert isinstance(total, BigIntegerQuantity)
    assert total == BigIntegerQuantity(1, METRE)
    assert isinstance(third * 3, BigIntegerQuantity)


def test_rational_str():
    assert str(RationalQuantity(Fraction(-1, 3), SECOND)) == "-1/3 s"
    assert repr(RationalQuantity(Fraction(1, 2), SECOND)) == (
        "RationalQuantity(Fraction(1, 2), Unit('s'))"
    )


def test_rational_projections():
    quantity = RationalQuantity(Fraction(-7, 2), METRE)
    assert quantity.long_value() == -3
    assert quantity.double_value() == -3.5
    assert quantity.long_value(MetricPrefix.CENTI(METRE)) == -350
    assert quantity.is_big()


def test_rational_and_integer_quantities_compare_equal_by_value():
    assert RationalQuantity(2, METRE) == BigIntegerQuantity(2, METRE)


def test_get_quantity_rejects_zero_denominator():
    with pytest.raises(UnitParseError):
        get_quantity("1/0 m")


def test_negative_power_is_exact_unlike_inverse():
    two_seconds = BigIntegerQuantity(2, SECOND)
    assert two_seconds.pow(-1) == RationalQuantity(Fraction(1, 2), SECOND.inverse())
    assert two_seconds.inverse() == BigIntegerQuantity(0, SECOND.inverse())
