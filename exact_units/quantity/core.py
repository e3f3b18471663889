"""Immutable quantities: exact magnitudes paired with a unit.

``BigIntegerQuantity`` stores an arbitrary-precision integer. Exact divisions
that do not come out even produce a ``RationalQuantity`` instead of rounding.
Both are "big" quantities; fixed-width numbers are only produced on request by
``long_value()``, ``int_value()`` and ``double_value()``.

Equality compares magnitude and unit, not physical value: ``1000 mΩ`` and
``1 Ω`` are different quantities, but ``is_equivalent_to`` holds for them.
"""

from decimal import Decimal
from fractions import Fraction
from typing import Any, Generic, overload

from ..units.converter import Exact, Number, to_exact
from ..units.core import ONE, Unit
from ..units.types import Q
from . import arithmetic

_NUMBER_TYPES = (int, float, Fraction, Decimal)


class Quantity(Generic[Q]):
    """Base class for a magnitude expressed in a unit."""

    def __init__(self, value: Exact, unit: Unit[Q]):
        self._value = value
        self._unit = unit

    @property
    def value(self) -> Exact:
        """Magnitude in the quantity's own unit."""
        return self._value

    @property
    def unit(self) -> Unit[Q]:
        return self._unit

    def is_big(self) -> bool:
        """Return whether the magnitude has unbounded precision."""
        return False

    def add(self, other: "Quantity[Q]") -> "Quantity[Q]":
        """Add a commensurable quantity.

        The result is in the finer of the two units.

        Raises:
            IncommensurableError: If the dimensions differ.
        """
        return exact_quantity(
            *arithmetic.add(self.value, self.unit, other.value, other.unit)
        )

    def subtract(self, other: "Quantity[Q]") -> "Quantity[Q]":
        """Subtract a commensurable quantity. The result is in the finer unit."""
        return exact_quantity(
            *arithmetic.subtract(self.value, self.unit, other.value, other.unit)
        )

    @overload
    def multiply(self, other: "Quantity[Any]") -> "Quantity[Any]": ...

    @overload
    def multiply(self, other: Number) -> "Quantity[Q]": ...

    def multiply(self, other: "Quantity[Any] | Number") -> "Quantity[Any]":
        """Multiply by a quantity of any dimension, or by a plain number."""
        if isinstance(other, Quantity):
            return exact_quantity(
                *arithmetic.multiply(self.value, self.unit, other.value, other.unit)
            )
        return exact_quantity(arithmetic.scale(self.value, other), self.unit)

    @overload
    def divide(self, other: "Quantity[Any]") -> "Quantity[Any]": ...

    @overload
    def divide(self, other: Number) -> "Quantity[Q]": ...

    def divide(self, other: "Quantity[Any] | Number") -> "Quantity[Any]":
        """Divide exactly by a quantity or a plain number.

        Raises:
            QuantityDivisionByZeroError: If the divisor is zero.
        """
        if isinstance(other, Quantity):
            return exact_quantity(
                *arithmetic.divide(self.value, self.unit, other.value, other.unit)
            )
        return exact_quantity(arithmetic.divide_by_number(self.value, other), self.unit)

    def inverse(self) -> "Quantity[Any]":
        """Return the exact reciprocal in the inverse unit.

        Raises:
            QuantityDivisionByZeroError: If the magnitude is zero.
        """
        return exact_quantity(arithmetic.reciprocal(self.value), self.unit.inverse())

    def negate(self) -> "Quantity[Q]":
        return exact_quantity(-self.value, self.unit)

    def pow(self, n: int) -> "Quantity[Any]":
        """Raise magnitude and unit to an integer power.

        The result is always exact, so negative powers of a
        ``BigIntegerQuantity`` give a ``RationalQuantity`` (``(2 Ω)**-1`` is
        ``1/2 Ω^-1``). Use ``inverse()`` for the truncated integer reciprocal.

        Raises:
            QuantityDivisionByZeroError: If a zero magnitude is raised to a
                negative power.
        """
        return exact_quantity(*arithmetic.power(self.value, self.unit, n))

    def to(self, unit: Unit[Q]) -> "Quantity[Q]":
        """Return the same physical value expressed in another unit.

        Raises:
            IncommensurableError: If the dimensions differ.
        """
        return exact_quantity(arithmetic.convert(self.value, self.unit, unit), unit)

    def to_system_unit(self) -> "Quantity[Q]":
        return self.to(self.unit.system_unit)

    def long_value(self, unit: Unit[Q] | None = None) -> int:
        """Return the value in ``unit`` as a signed 64-bit integer.

        This is lossy: fractions are truncated toward zero and values outside
        the 64-bit range wrap around.
        """
        return arithmetic.to_fixed_width_int(self._value_in(unit), 64)

    def int_value(self, unit: Unit[Q] | None = None) -> int:
        """Return the value in ``unit`` as a signed 32-bit integer (lossy)."""
        return arithmetic.to_fixed_width_int(self._value_in(unit), 32)

    def double_value(self, unit: Unit[Q] | None = None) -> float:
        """Return the value in ``unit`` as the nearest float (lossy)."""
        return arithmetic.to_float(self._value_in(unit))

    def compare_to(self, other: "Quantity[Q]") -> int:
        """Return -1, 0 or 1 comparing physical values.

        Raises:
            IncommensurableError: If the dimensions differ.
        """
        return arithmetic.compare(self.value, self.unit, other.value, other.unit)

    def is_equivalent_to(self, other: "Quantity[Q]") -> bool:
        """Return whether both quantities denote the same physical value."""
        return self.compare_to(other) == 0

    def _value_in(self, unit: Unit[Q] | None) -> Exact:
        if unit is None:
            return self.value
        return arithmetic.convert(self.value, self.unit, unit)

    def __add__(self, other: "Quantity[Q]") -> "Quantity[Q]":
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "Quantity[Q]") -> "Quantity[Q]":
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: "Quantity[Any] | Number") -> "Quantity[Any]":
        if not isinstance(other, (Quantity, *_NUMBER_TYPES)):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: Number) -> "Quantity[Q]":
        if not isinstance(other, _NUMBER_TYPES):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: "Quantity[Any] | Number") -> "Quantity[Any]":
        if not isinstance(other, (Quantity, *_NUMBER_TYPES)):
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other: Number) -> "Quantity[Any]":
        if not isinstance(other, _NUMBER_TYPES):
            return NotImplemented
        return exact_quantity(
            *arithmetic.divide(to_exact(other), ONE, self.value, self.unit)
        )

    def __pow__(self, n: int) -> "Quantity[Any]":
        return self.pow(n)

    def __neg__(self) -> "Quantity[Q]":
        return self.negate()

    def __abs__(self) -> "Quantity[Q]":
        return exact_quantity(abs(self.value), self.unit)

    def __int__(self) -> int:
        return int(self.value)

    def __float__(self) -> float:
        return arithmetic.to_float(self.value)

    def __eq__(self, other: object) -> bool:
        """Check equality of magnitude and unit."""
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.value == other.value and self.unit == other.unit

    def __hash__(self) -> int:
        return hash((self.value, self.unit))

    def __str__(self) -> str:
        """Return the quantity as written by the default quantity format."""
        from ..format import default_service

        return default_service().get_quantity_format().format(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r}, {self.unit!r})"


class BigIntegerQuantity(Quantity[Q]):
    """Quantity with an arbitrary-precision integer magnitude."""

    def __init__(self, value: Number, unit: Unit[Q]):
        """Initialise a new quantity.

        Args:
            value: The magnitude. Non-integral numbers are truncated toward zero.
            unit: The unit of the magnitude.
        """
        super().__init__(int(to_exact(value)), unit)

    def is_big(self) -> bool:
        return True

    def inverse(self) -> "Quantity[Any]":
        """Return the reciprocal truncated to an integer, in the inverse unit.

        A magnitude of 1 or -1 is its own reciprocal; any larger magnitude
        yields 0.

        Raises:
            QuantityDivisionByZeroError: If the magnitude is zero.
        """
        return BigIntegerQuantity(
            arithmetic.truncated_reciprocal(int(self.value)), self.unit.inverse()
        )


class RationalQuantity(Quantity[Q]):
    """Quantity with an exact fractional magnitude."""

    def __init__(self, value: Number, unit: Unit[Q]):
        super().__init__(Fraction(to_exact(value)), unit)

    def is_big(self) -> bool:
        return True


def exact_quantity(value: Number, unit: Unit[Q]) -> Quantity[Q]:
    """Return the narrowest exact quantity holding ``value``."""
    exact = to_exact(value)
    if isinstance(exact, int):
        return BigIntegerQuantity(exact, unit)
    return RationalQuantity(exact, unit)
