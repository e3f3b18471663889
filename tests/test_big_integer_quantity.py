import math
from fractions import Fraction

import pytest

from exact_units import (
    BigIntegerQuantity,
    IncommensurableError,
    QuantityDivisionByZeroError,
    RationalQuantity,
    get_quantity,
)
from exact_units.units import (
    CELSIUS,
    CUBIC_METRE,
    DAY,
    GRAM,
    HOUR,
    KELVIN,
    KILOGRAM,
    KILOMETRE_PER_HOUR,
    LITRE,
    METRE,
    METRE_PER_SECOND,
    OHM,
    ONE,
    SECOND,
    MetricPrefix,
    Unit,
)

SQUARE_OHM = OHM.multiply(OHM)
MILLIOHM = MetricPrefix.MILLI(OHM)
ONE_OHM = BigIntegerQuantity(1, OHM)
TWO_OHM = BigIntegerQuantity(2, OHM)


def test_quantity_multiplication_multiplies_correctly():
    """2 Ω x 2 Ω is 4 Ω^2."""
    assert TWO_OHM.multiply(TWO_OHM) == BigIntegerQuantity(4, SQUARE_OHM)


def test_number_multiplication_multiplies_correctly():
    assert TWO_OHM.multiply(2) == BigIntegerQuantity(4, OHM)


def test_quantity_division_divides_correctly():
    """2 Ω / 2 Ω is 1 in the dimensionless unit."""
    assert TWO_OHM.divide(TWO_OHM) == BigIntegerQuantity(1, ONE)


def test_number_division_divides_correctly():
    assert TWO_OHM.divide(2) == ONE_OHM


def test_inverse_returns_unit_quantity_for_unit_quantity():
    assert ONE_OHM.inverse() == BigIntegerQuantity(1, OHM.inverse())


def test_inverse_returns_zero_quantity_for_larger_than_unit_quantity():
    assert TWO_OHM.inverse() == BigIntegerQuantity(0, OHM.inverse())


@pytest.mark.parametrize("unit", [OHM, METRE, ONE, MILLIOHM * SECOND])
def test_inverse_throws_exception_for_zero_quantity(unit: Unit):
    with pytest.raises(QuantityDivisionByZeroError) as exc_info:
        BigIntegerQuantity(0, unit).inverse()
    assert exc_info.value.code == "Q002"
    assert isinstance(exc_info.value, ArithmeticError)


@pytest.mark.parametrize("magnitude", [-3, -1, 1, 2, 10**30])
def test_product_with_inverse(magnitude: int):
    """Only magnitudes of absolute value one survive the truncated reciprocal."""
    quantity = BigIntegerQuantity(magnitude, OHM)
    product = quantity.multiply(quantity.inverse())
    assert product.unit is ONE
    assert product.value == (1 if abs(magnitude) == 1 else 0)
    assert quantity.inverse().unit == OHM.inverse()


def test_big_integer_quantity_is_big():
    assert ONE_OHM.is_big()


def test_long_value():
    day = BigIntegerQuantity(3, DAY)
    assert day.long_value(HOUR) == 72


def test_double_value():
    day = BigIntegerQuantity(3, DAY)
    assert day.double_value(HOUR) == 72.0


def test_to():
    day = get_quantity(1, DAY)
    hour = day.to(HOUR)
    assert hour.value == 24
    assert hour.unit == HOUR

    day_result = hour.to(DAY)
    assert day_result.value == day.value
    assert day_result == day


def test_to_round_trip_is_exact():
    hours = BigIntegerQuantity(72, HOUR)
    assert hours.to(DAY) == BigIntegerQuantity(3, DAY)
    assert hours.to(SECOND).to(MetricPrefix.MILLI(SECOND)).to(HOUR) == hours


def test_equality():
    assert BigIntegerQuantity(10, METRE) == BigIntegerQuantity(10, METRE)
    assert hash(BigIntegerQuantity(10, METRE)) == hash(BigIntegerQuantity(10, METRE))


def test_equality_requires_equal_units():
    thousand_milliohm = BigIntegerQuantity(1000, MILLIOHM)
    assert thousand_milliohm != ONE_OHM
    assert thousand_milliohm.is_equivalent_to(ONE_OHM)
    assert thousand_milliohm.to(OHM) == ONE_OHM


def test_addition_must_produce_correct_result_if_same_units():
    assert ONE_OHM.add(TWO_OHM) == BigIntegerQuantity(3, OHM)


@pytest.mark.parametrize("prefix", list(MetricPrefix))
def test_addition_must_convert_to_lowest_prefix(prefix: MetricPrefix):
    """1 Ω + 1 xΩ is expressed in whichever of Ω and xΩ is finer."""
    operand = BigIntegerQuantity(1, OHM.prefix(prefix))
    if prefix.exponent > 0:
        expected = BigIntegerQuantity(10**prefix.exponent + 1, OHM)
    else:
        expected = BigIntegerQuantity(10**-prefix.exponent + 1, OHM.prefix(prefix))
    assert ONE_OHM.add(operand) == expected
    assert operand.add(ONE_OHM) == expected


def test_subtraction_must_produce_correct_result():
    """1 Ω - 1001 mΩ should be -1 mΩ."""
    operand = BigIntegerQuantity(1001, MILLIOHM)
    expected = BigIntegerQuantity(-1, MILLIOHM)

    assert ONE_OHM.subtract(operand) == expected
    assert operand.subtract(ONE_OHM).multiply(-1) == expected


def test_addition_of_incompatible_dimensions_fails():
    with pytest.raises(IncommensurableError) as exc_info:
        ONE_OHM.add(BigIntegerQuantity(1, SECOND))
    assert exc_info.value.code == "Q001"
    with pytest.raises(TypeError):
        ONE_OHM - BigIntegerQuantity(1, SECOND)


def test_uneven_division_is_exact():
    quotient = ONE_OHM.divide(BigIntegerQuantity(3, SECOND))
    assert isinstance(quotient, RationalQuantity)
    assert quotient.value == Fraction(1, 3)
    assert quotient.unit == OHM / SECOND
    assert quotient.is_big()
    assert quotient.long_value() == 0
    assert quotient.double_value() == pytest.approx(1 / 3)


def test_division_by_zero_fails():
    with pytest.raises(QuantityDivisionByZeroError):
        ONE_OHM.divide(BigIntegerQuantity(0, OHM))
    with pytest.raises(ZeroDivisionError):
        ONE_OHM / 0


def test_operators():
    assert ONE_OHM + TWO_OHM == BigIntegerQuantity(3, OHM)
    assert TWO_OHM - ONE_OHM == ONE_OHM
    assert TWO_OHM * TWO_OHM == BigIntegerQuantity(4, SQUARE_OHM)
    assert 2 * TWO_OHM == BigIntegerQuantity(4, OHM)
    assert TWO_OHM / 2 == ONE_OHM
    assert -TWO_OHM == BigIntegerQuantity(-2, OHM)
    assert abs(BigIntegerQuantity(-2, OHM)) == TWO_OHM
    assert TWO_OHM**2 == BigIntegerQuantity(4, SQUARE_OHM)
    assert TWO_OHM**-1 == RationalQuantity(Fraction(1, 2), OHM.inverse())
    assert 1 / TWO_OHM == RationalQuantity(Fraction(1, 2), OHM.inverse())


def test_large_magnitudes_stay_exact():
    huge = BigIntegerQuantity(10**40, OHM)
    assert (huge * huge).value == 10**80
    assert (huge + ONE_OHM).value == 10**40 + 1


def test_construction_truncates_toward_zero():
    assert BigIntegerQuantity(Fraction(7, 2), OHM).value == 3
    assert BigIntegerQuantity(-2.9, OHM).value == -2


def test_long_value_truncates_and_wraps():
    assert BigIntegerQuantity(1500, MILLIOHM).long_value(OHM) == 1
    assert BigIntegerQuantity(-1500, MILLIOHM).long_value(OHM) == -1
    assert BigIntegerQuantity(2**63, OHM).long_value() == -(2**63)
    assert BigIntegerQuantity(2**31, OHM).int_value() == -(2**31)


def test_double_value_overflows_to_infinity():
    assert BigIntegerQuantity(10**400, OHM).double_value() == math.inf
    assert BigIntegerQuantity(-(10**400), OHM).double_value() == -math.inf


def test_numeric_projection_in_own_unit():
    assert int(BigIntegerQuantity(72, HOUR)) == 72
    assert float(BigIntegerQuantity(72, HOUR)) == 72.0


def test_compare_to():
    assert ONE_OHM.compare_to(BigIntegerQuantity(999, MILLIOHM)) == 1
    assert ONE_OHM.compare_to(BigIntegerQuantity(1000, MILLIOHM)) == 0
    assert ONE_OHM.compare_to(TWO_OHM) == -1


def test_affine_units_convert_exactly():
    freezing = BigIntegerQuantity(0, CELSIUS)
    in_kelvin = freezing.to(KELVIN)
    assert in_kelvin == RationalQuantity(Fraction(27315, 100), KELVIN)
    assert in_kelvin.to(CELSIUS) == freezing


def test_non_si_units():
    assert BigIntegerQuantity(36, KILOMETRE_PER_HOUR).to(METRE_PER_SECOND) == (
        BigIntegerQuantity(10, METRE_PER_SECOND)
    )
    assert BigIntegerQuantity(1, CUBIC_METRE).to(LITRE).value == 1000
    assert BigIntegerQuantity(1, KILOGRAM).to(MetricPrefix.MILLI(GRAM)).value == 10**6


def test_to_system_unit():
    assert BigIntegerQuantity(2, HOUR).to_system_unit() == BigIntegerQuantity(
        7200, SECOND
    )


def test_str_and_repr():
    assert str(TWO_OHM) == "2 Ω"
    assert str(TWO_OHM * TWO_OHM) == "4 Ω^2"
    assert repr(TWO_OHM) == "BigIntegerQuantity(2, Unit('Ω'))"
