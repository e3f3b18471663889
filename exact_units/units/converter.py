"""Exact, invertible converters between numeric values of commensurable units.

Every converter is an affine transform ``y = factor * x + offset`` whose
coefficients are exact rationals. Converters never round: integer inputs stay
integers whenever the result is integral, otherwise a ``Fraction`` is returned.

Composition reads left to right, ``a.compose(b)`` applies ``a`` first and then
``b``. Adjacent steps that can be merged are merged, so composing a converter
with its inverse yields ``IDENTITY``.
"""

from collections.abc import Iterable, Sequence
from decimal import Decimal
from fractions import Fraction

Number = int | float | Fraction | Decimal
Exact = int | Fraction


def to_exact(value: Number) -> Exact:
    """Return value as an int when integral, otherwise as an exact Fraction.

    Floats and decimals are converted without rounding, so ``0.1`` becomes the
    exact binary fraction it stores.
    """
    if isinstance(value, int):
        return int(value)
    fraction = value if isinstance(value, Fraction) else Fraction(value)
    if fraction.denominator == 1:
        return fraction.numerator
    return fraction


class UnitConverter:
    """Base class for all unit converters."""

    def convert(self, value: Number) -> Exact:
        """Apply the transform to a value."""
        raise NotImplementedError

    def inverse(self) -> "UnitConverter":
        """Return the exact inverse transform."""
        raise NotImplementedError

    @property
    def steps(self) -> tuple["UnitConverter", ...]:
        """Return the elementary converters this converter applies, in order."""
        return (self,)

    def affine(self) -> tuple[Fraction, Fraction]:
        """Return ``(factor, offset)`` such that ``convert(x) == factor * x + offset``."""
        raise NotImplementedError

    @property
    def factor(self) -> Fraction:
        """Scale of the transform."""
        return self.affine()[0]

    @property
    def offset(self) -> Fraction:
        """Additive part of the transform."""
        return self.affine()[1]

    def is_identity(self) -> bool:
        return self.affine() == (1, 0)

    def is_linear(self) -> bool:
        """Return whether the converter scales without shifting the origin."""
        return self.offset == 0

    def compose(self, other: "UnitConverter") -> "UnitConverter":
        """Return a converter applying ``self`` and then ``other``."""
        return normalize([*self.steps, *other.steps])

    def pow(self, n: int) -> "UnitConverter":
        """Raise a linear converter to an integer power.

        Raises:
            ValueError: If the converter has an offset.
        """
        if not self.is_linear():
            raise ValueError(f"Cannot raise non-linear converter {self!r} to a power")
        return RationalConverter.of(self.factor**n)

    def _merge(self, other: "UnitConverter") -> "UnitConverter | None":
        """Return a single converter equivalent to ``self`` then ``other``, if any."""
        return None

    def __eq__(self, other: object) -> bool:
        """Check whether two converters perform the same transform."""
        if not isinstance(other, UnitConverter):
            return NotImplemented
        return self.affine() == other.affine()

    def __hash__(self) -> int:
        return hash(self.affine())


class IdentityConverter(UnitConverter):
    """Converter leaving values unchanged."""

    def convert(self, value: Number) -> Exact:
        return to_exact(value)

    def inverse(self) -> UnitConverter:
        return self

    def affine(self) -> tuple[Fraction, Fraction]:
        return Fraction(1), Fraction(0)

    def compose(self, other: UnitConverter) -> UnitConverter:
        return other

    def __repr__(self) -> str:
        return "IDENTITY"


IDENTITY = IdentityConverter()


class ScaleConverter(UnitConverter):
    """Base class for converters multiplying by an exact factor."""

    def convert(self, value: Number) -> Exact:
        exact = to_exact(value)
        factor = self.factor
        if isinstance(exact, int):
            product = exact * factor.numerator
            if product % factor.denominator == 0:
                return product // factor.denominator
            return Fraction(product, factor.denominator)
        return to_exact(exact * factor)

    def _merge(self, other: UnitConverter) -> UnitConverter | None:
        if isinstance(other, ScaleConverter):
            return RationalConverter.of(self.factor * other.factor)
        return None


class RationalConverter(ScaleConverter):
    """Converter multiplying by ``dividend / divisor``, kept reduced by their GCD."""

    def __init__(self, dividend: int, divisor: int = 1):
        """Initialise a rational converter.

        Raises:
            ValueError: If either term is zero, the transform is not invertible.
        """
        if dividend == 0 or divisor == 0:
            raise ValueError(
                f"Rational converter terms must be non-zero: {dividend}/{divisor}"
            )
        ratio = Fraction(dividend, divisor)
        self.dividend = ratio.numerator
        self.divisor = ratio.denominator

    @classmethod
    def of(cls, factor: Fraction | int) -> "RationalConverter":
        """Create a converter from an exact factor."""
        factor = Fraction(factor)
        return cls(factor.numerator, factor.denominator)

    def inverse(self) -> UnitConverter:
        return RationalConverter(self.divisor, self.dividend)

    def affine(self) -> tuple[Fraction, Fraction]:
        return Fraction(self.dividend, self.divisor), Fraction(0)

    def __repr__(self) -> str:
        return f"RationalConverter({self.dividend}, {self.divisor})"


class PowerOfIntConverter(ScaleConverter):
    """Converter multiplying by ``base ** exponent``, as used by prefixes."""

    def __init__(self, base: int, exponent: int):
        if base == 0:
            raise ValueError("Power converter base must be non-zero")
        self.base = base
        self.exponent = exponent

    def inverse(self) -> UnitConverter:
        return PowerOfIntConverter(self.base, -self.exponent)

    def affine(self) -> tuple[Fraction, Fraction]:
        return Fraction(self.base) ** self.exponent, Fraction(0)

    def pow(self, n: int) -> UnitConverter:
        return PowerOfIntConverter(self.base, self.exponent * n)

    def _merge(self, other: UnitConverter) -> UnitConverter | None:
        if isinstance(other, PowerOfIntConverter) and other.base == self.base:
            return PowerOfIntConverter(self.base, self.exponent + other.exponent)
        return super()._merge(other)

    def __repr__(self) -> str:
        return f"PowerOfIntConverter({self.base}, {self.exponent})"


class AddConverter(UnitConverter):
    """Converter shifting values by an exact offset."""

    def __init__(self, offset: Number):
        self._offset = Fraction(to_exact(offset))

    def convert(self, value: Number) -> Exact:
        return to_exact(to_exact(value) + self._offset)

    def inverse(self) -> UnitConverter:
        return AddConverter(-self._offset)

    def affine(self) -> tuple[Fraction, Fraction]:
        return Fraction(1), self._offset

    def _merge(self, other: UnitConverter) -> UnitConverter | None:
        if isinstance(other, AddConverter):
            return AddConverter(self._offset + other.offset)
        return None

    def __repr__(self) -> str:
        return f"AddConverter({self._offset!r})"


class ConverterChain(UnitConverter):
    """Sequence of converters that cannot be merged into a single step."""

    def __init__(self, steps: Sequence[UnitConverter]):
        self._steps = tuple(steps)

    @property
    def steps(self) -> tuple[UnitConverter, ...]:
        return self._steps

    def convert(self, value: Number) -> Exact:
        result = to_exact(value)
        for step in self._steps:
            result = step.convert(result)
        return result

    def inverse(self) -> UnitConverter:
        return normalize([step.inverse() for step in reversed(self._steps)])

    def affine(self) -> tuple[Fraction, Fraction]:
        factor, offset = Fraction(1), Fraction(0)
        for step in self._steps:
            step_factor, step_offset = step.affine()
            factor, offset = step_factor * factor, step_factor * offset + step_offset
        return factor, offset

    def __repr__(self) -> str:
        return f"ConverterChain({list(self._steps)!r})"


def normalize(steps: Iterable[UnitConverter]) -> UnitConverter:
    """Reduce a sequence of steps to the simplest equivalent converter."""
    merged: list[UnitConverter] = []
    for step in steps:
        if step.is_identity():
            continue
        if merged:
            combined = merged[-1]._merge(step)
            if combined is not None:
                merged.pop()
                if not combined.is_identity():
                    merged.append(combined)
                continue
        merged.append(step)
    if not merged:
        return IDENTITY
    if len(merged) == 1:
        return merged[0]
    return ConverterChain(merged)
