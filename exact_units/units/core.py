"""Immutable unit model.

A unit knows its symbol, its dimension and the converter taking its values to
the system unit of that dimension. Derived units (products, quotients, powers)
remember the atomic units they are made of as a map of units to exponents, so
``OHM * OHM`` and ``OHM ** 2`` are the same unit, and ``OHM / OHM`` is ``ONE``.
"""

import re
from fractions import Fraction
from typing import Any, Generic, Self

from ..errors import q001_error_factory, q003_error_factory
from .converter import IDENTITY, RationalConverter, UnitConverter
from .dimension import Dimension
from .prefix import Prefix, find_prefix
from .types import Dimensionless, Q

_TERM_RE = re.compile(r"([^\s.^()]+?)(?:\^(-?\d+))?")
# A prefix applied to a compound unit, e.g. 'k(m.s^-1)^2'
_PREFIXED_TERM_RE = re.compile(r"([^\s.^()]+)\((.+)\)(?:\^(-?\d+))?")


class Unit(Generic[Q]):
    """Represents a measurement unit of a given dimension."""

    def __init__(
        self,
        symbol: str,
        dimension: Dimension,
        to_system: UnitConverter = IDENTITY,
        name: str | None = None,
        system_unit: "Unit[Q] | None" = None,
        elements: "dict[Unit[Any], int] | None" = None,
    ):
        """Initialise unit instance.

        Args:
            symbol: Symbol of the unit, e.g. 'Ω'.
            dimension: Dimension of the unit.
            to_system: Converter from values in this unit to the system unit.
            name: Optional human readable name, e.g. 'ohm'.
            system_unit: The system unit ``to_system`` targets. Defaults to the
                unit itself, which makes it a system unit.
            elements: Atomic units and exponents of a derived unit. Defaults to
                the unit itself with exponent 1.
        """
        self.symbol = symbol
        self.name = name
        self.dimension = dimension
        self.to_system = to_system
        self._system_unit = system_unit
        self._hash = hash((symbol, dimension, to_system))
        self.elements: dict[Unit[Any], int] = (
            {self: 1} if elements is None else dict(elements)
        )

    @property
    def system_unit(self) -> "Unit[Q]":
        """Return the unit ``to_system`` converts into."""
        if self._system_unit is not None:
            return self._system_unit
        if self.elements == {self: 1}:
            return self
        return _product_unit(
            {unit.system_unit: exp for unit, exp in self.elements.items()}
        )

    def is_system_unit(self) -> bool:
        return self.system_unit == self

    def is_compatible(self, other: "Unit[Any]") -> bool:
        """Return whether values in the two units can be converted into each other."""
        return self.dimension == other.dimension

    def get_converter_to(self, other: "Unit[Any]") -> UnitConverter:
        """Return the converter from values in this unit to values in ``other``.

        Raises:
            IncommensurableError: If the dimensions differ.
        """
        if not self.is_compatible(other):
            raise q001_error_factory("convert", self, other)
        if self == other:
            return IDENTITY
        return self.to_system.compose(other.to_system.inverse())

    def multiply(self, other: "Unit[Any]") -> "Unit[Any]":
        """Multiply two units."""
        return _product_unit(_combine_unit_maps(self.elements, other.elements))

    def divide(self, other: "Unit[Any]") -> "Unit[Any]":
        """Divide two units."""
        return _product_unit(
            _combine_unit_maps(self.elements, other.elements, add=False)
        )

    def inverse(self) -> "Unit[Any]":
        """Return the reciprocal unit."""
        return self.pow(-1)

    def pow(self, n: int) -> "Unit[Any]":
        """Raise the unit to an integer power. ``pow(0)`` is ``ONE``."""
        return _product_unit({unit: exp * n for unit, exp in self.elements.items()})

    def root(self, n: int) -> "Unit[Any]":
        """Return the n-th root of the unit.

        Raises:
            ValueError: If n is not positive or an exponent is not divisible by n.
        """
        if n <= 0 or any(exp % n for exp in self.elements.values()):
            raise ValueError(f"Cannot take root {n} of unit {self.symbol}")
        return _product_unit({unit: exp // n for unit, exp in self.elements.items()})

    def prefix(self, prefix: "Prefix") -> Self:
        """Return this unit scaled by a prefix, e.g. 'mΩ' from 'Ω'."""
        symbol = self.symbol if self.is_atomic() else f"({self.symbol})"
        return type(self)(
            symbol=f"{prefix.symbol}{symbol}",
            dimension=self.dimension,
            to_system=prefix.converter.compose(self.to_system),
            name=f"{prefix.name.lower()}{self.name}" if self.name else None,
            system_unit=self.system_unit,
        )

    def transform(
        self, converter: UnitConverter, symbol: str, name: str | None = None
    ) -> Self:
        """Return a new unit whose values ``converter`` maps to values in this unit.

        Example:
            MINUTE = SECOND.transform(RationalConverter(60), "min")
        """
        return type(self)(
            symbol=symbol,
            dimension=self.dimension,
            to_system=converter.compose(self.to_system),
            name=name,
            system_unit=self.system_unit,
        )

    def is_atomic(self) -> bool:
        """Return whether the unit is not a product of other units."""
        return self.elements == {self: 1}

    def __mul__(self, other: object) -> "Unit[Any]":
        if not isinstance(other, Unit):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: object) -> "Unit[Any]":
        if not isinstance(other, Unit):
            return NotImplemented
        return self.divide(other)

    def __pow__(self, power: int) -> "Unit[Any]":
        return self.pow(power)

    def __eq__(self, other: object) -> bool:
        """Check equality of symbol, dimension and converter."""
        if not isinstance(other, Unit):
            return NotImplemented
        return (
            self.symbol == other.symbol
            and self.dimension == other.dimension
            and self.to_system == other.to_system
        )

    def __hash__(self) -> int:
        return self._hash

    def __str__(self) -> str:
        """Return the unit as written by the default unit format."""
        from ..format import default_service

        return default_service().get_unit_format().format(self)

    def __repr__(self) -> str:
        """Return a detailed string representation of the unit."""
        return f"Unit({self.symbol!r})"

    @classmethod
    def from_string(cls, unit_str: str) -> "Unit[Any]":
        """Parse a string like 'kg.m^2.s^-2' into a Unit instance.

        - Multiplication: '.'
        - Powers: '^'
        - No division allowed.
        - Symbols may carry a metric or binary prefix, e.g. 'mΩ'.
        - A prefix applies to a parenthesised compound unit, e.g. 'k(m.s^-1)'.

        Args:
            unit_str: Representation of the unit, e.g. 'kg.m^2.s^-2'.

        Raises:
            UnitParseError: If a term is malformed or a symbol is unknown.
        """
        from .units import get_unit

        result: Unit[Any] = ONE
        if not unit_str.strip():
            raise q003_error_factory(unit_str, "empty unit")
        for part in _split_terms(unit_str.strip()):
            if match := _TERM_RE.fullmatch(part):
                unit = get_unit(match.group(1))
                exp_str = match.group(2)
            elif match := _PREFIXED_TERM_RE.fullmatch(part):
                prefix = find_prefix(match.group(1))
                if prefix is None:
                    raise q003_error_factory(
                        unit_str, f"unknown prefix {match.group(1)!r}"
                    )
                unit = cls.from_string(match.group(2)).prefix(prefix)
                exp_str = match.group(3)
            else:
                raise q003_error_factory(unit_str, f"invalid unit part {part!r}")
            exp = int(exp_str) if exp_str else 1
            result = result.multiply(unit.pow(exp))
        return result


def _split_terms(unit_str: str) -> list[str]:
    """Split a unit string on the '.' separators outside parentheses."""
    parts = []
    depth = 0
    start = 0
    for i, char in enumerate(unit_str):
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth < 0:
                raise q003_error_factory(unit_str, "unbalanced parentheses")
        elif char == "." and depth == 0:
            parts.append(unit_str[start:i])
            start = i + 1
    if depth != 0:
        raise q003_error_factory(unit_str, "unbalanced parentheses")
    parts.append(unit_str[start:])
    return parts


def _combine_unit_maps(
    left: "dict[Unit[Any], int]", right: "dict[Unit[Any], int]", add: bool = True
) -> "dict[Unit[Any], int]":
    """Combine two unit maps for multiplication or division."""
    result = left.copy()
    for k, v in right.items():
        result[k] = result.get(k, 0) + (v if add else -v)
    # Remove zero exponents
    return {k: v for k, v in result.items() if v != 0}


def _format_unit_map(unit_map: "dict[Unit[Any], int]") -> str:
    parts = []
    for unit in sorted(unit_map, key=lambda u: u.symbol):  # sort for consistency
        exp = unit_map[unit]
        parts.append(unit.symbol if exp == 1 else f"{unit.symbol}^{exp}")
    return ".".join(parts)


def _product_unit(unit_map: "dict[Unit[Any], int]") -> "Unit[Any]":
    """Create the unit described by a map of atomic units to exponents."""
    unit_map = {unit: exp for unit, exp in unit_map.items() if exp != 0}
    if not unit_map:
        return ONE
    if len(unit_map) == 1:
        ((unit, exp),) = unit_map.items()
        if exp == 1:
            return unit

    dimension = Dimension.NONE
    factor = Fraction(1)
    for unit, exp in unit_map.items():
        dimension = dimension * unit.dimension**exp
        # Only the scale of affine units carries over into products.
        factor *= unit.to_system.factor**exp
    return Unit(
        symbol=_format_unit_map(unit_map),
        dimension=dimension,
        to_system=IDENTITY if factor == 1 else RationalConverter.of(factor),
        elements=unit_map,
    )


ONE: Unit[Dimensionless] = Unit("one", Dimension.NONE, name="one", elements={})
