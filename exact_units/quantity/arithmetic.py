"""Exact arithmetic on (magnitude, unit) pairs.

Magnitudes are ``int`` or ``Fraction`` and every function returns an exact
result. Rounding happens only in the fixed-width projections at the bottom of
this module, which callers use when they explicitly ask for a narrower value.

Adding or subtracting values in two different commensurable units produces a
result in the finer unit, the one with the smaller scale factor towards the
system unit. Converting the coarser operand into the finer unit is then a
multiplication by a factor of at least one, so 1 Ω + 1 mΩ is 1001 mΩ.
"""

import logging
import math
from fractions import Fraction
from typing import Any

from ..errors import q001_error_factory, q002_error_factory
from ..units.converter import Exact, Number, to_exact
from ..units.core import Unit

logger = logging.getLogger(__name__)


def check_commensurable(operation: str, left: Unit[Any], right: Unit[Any]) -> None:
    """Raise IncommensurableError unless both units have the same dimension."""
    if left.dimension != right.dimension:
        raise q001_error_factory(operation, left, right)


def finer_unit(left: Unit[Any], right: Unit[Any]) -> Unit[Any]:
    """Return the unit with the smaller scale factor; ties keep ``left``."""
    if left == right:
        return left
    if abs(right.to_system.factor) < abs(left.to_system.factor):
        return right
    return left


def convert(value: Number, from_unit: Unit[Any], to_unit: Unit[Any]) -> Exact:
    """Convert a magnitude between commensurable units without rounding."""
    return from_unit.get_converter_to(to_unit).convert(value)


def add(
    left_value: Exact, left_unit: Unit[Any], right_value: Exact, right_unit: Unit[Any]
) -> tuple[Exact, Unit[Any]]:
    """Add two magnitudes, expressing the sum in the finer of the two units."""
    check_commensurable("add", left_unit, right_unit)
    if left_unit == right_unit:
        return to_exact(left_value + right_value), left_unit
    unit = finer_unit(left_unit, right_unit)
    logger.debug(
        "Adding %s and %s in %s", left_unit.symbol, right_unit.symbol, unit.symbol
    )
    total = convert(left_value, left_unit, unit) + convert(right_value, right_unit, unit)
    return to_exact(total), unit


def subtract(
    left_value: Exact, left_unit: Unit[Any], right_value: Exact, right_unit: Unit[Any]
) -> tuple[Exact, Unit[Any]]:
    """Subtract two magnitudes, expressing the difference in the finer unit."""
    check_commensurable("subtract", left_unit, right_unit)
    return add(left_value, left_unit, -right_value, right_unit)


def multiply(
    left_value: Exact, left_unit: Unit[Any], right_value: Exact, right_unit: Unit[Any]
) -> tuple[Exact, Unit[Any]]:
    """Multiply two magnitudes and their units. Any dimensions may be combined."""
    return to_exact(left_value * right_value), left_unit.multiply(right_unit)


def divide(
    left_value: Exact, left_unit: Unit[Any], right_value: Exact, right_unit: Unit[Any]
) -> tuple[Exact, Unit[Any]]:
    """Divide two magnitudes exactly and divide their units.

    Raises:
        QuantityDivisionByZeroError: If the divisor is zero.
    """
    return _quotient(left_value, right_value), left_unit.divide(right_unit)


def scale(value: Exact, factor: Number) -> Exact:
    """Multiply a magnitude by a plain number."""
    return to_exact(value * to_exact(factor))


def divide_by_number(value: Exact, divisor: Number) -> Exact:
    """Divide a magnitude by a plain number exactly."""
    return _quotient(value, to_exact(divisor))


def reciprocal(value: Exact) -> Exact:
    """Return the exact reciprocal of a magnitude."""
    return _quotient(1, value, "invert")


def truncated_reciprocal(value: int) -> int:
    """Return the reciprocal of an integer truncated toward zero.

    1 and -1 are their own reciprocals; every other non-zero integer gives 0.

    Raises:
        QuantityDivisionByZeroError: If value is zero.
    """
    if value == 0:
        raise q002_error_factory("invert")
    return int(Fraction(1, value))


def power(value: Exact, unit: Unit[Any], n: int) -> tuple[Exact, Unit[Any]]:
    """Raise a magnitude and its unit to an integer power."""
    if n < 0 and value == 0:
        raise q002_error_factory("raise to a negative power")
    return to_exact(Fraction(value) ** n), unit.pow(n)


def compare(
    left_value: Exact, left_unit: Unit[Any], right_value: Exact, right_unit: Unit[Any]
) -> int:
    """Return -1, 0 or 1 comparing two magnitudes after exact conversion."""
    check_commensurable("compare", left_unit, right_unit)
    unit = finer_unit(left_unit, right_unit)
    left = convert(left_value, left_unit, unit)
    right = convert(right_value, right_unit, unit)
    return (left > right) - (left < right)


def _quotient(dividend: Exact, divisor: Exact, operation: str = "divide") -> Exact:
    if divisor == 0:
        raise q002_error_factory(operation)
    return to_exact(Fraction(dividend) / divisor)


# Fixed-width projections. These are lossy: they apply the narrowing rules of
# the destination type instead of failing.


def to_fixed_width_int(value: Exact, bits: int) -> int:
    """Truncate toward zero, then wrap around into a signed ``bits`` wide integer."""
    half = 1 << (bits - 1)
    result = (int(value) + half) % (1 << bits) - half
    if result != value:
        logger.debug("Lossy %d-bit integer projection of %s to %d", bits, value, result)
    return result


def to_float(value: Exact) -> float:
    """Round to the nearest float; magnitudes beyond the float range become infinite."""
    try:
        result = float(value)
    except OverflowError:
        result = math.inf if value > 0 else -math.inf
    if result != value:
        logger.debug("Lossy float projection of %s to %r", value, result)
    return result
