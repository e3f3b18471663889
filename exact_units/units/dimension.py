"""Physical dimensions as mappings of base dimension symbols to exponents.

Two units are commensurable (can be added, compared and converted into each
other) exactly when their dimensions are equal.
"""

from typing import Self

# Symbols of the seven SI base dimensions, in canonical display order.
BASE_DIMENSIONS = ("L", "M", "T", "I", "Θ", "N", "J")


class Dimension:
    """Represents a dimension as a mapping of base dimension symbols to exponents."""

    __slots__ = ("_exponents", "_hash")

    NONE: "Dimension"
    LENGTH: "Dimension"
    MASS: "Dimension"
    TIME: "Dimension"
    ELECTRIC_CURRENT: "Dimension"
    TEMPERATURE: "Dimension"
    AMOUNT_OF_SUBSTANCE: "Dimension"
    LUMINOUS_INTENSITY: "Dimension"

    def __init__(self, exponents: dict[str, int] | None = None):
        """Initialise dimension instance.

        Args:
            exponents: Mapping of base dimension symbols (like 'L', 'T') to their
                exponents. Zero exponents are dropped.
        """
        self._exponents = {k: v for k, v in (exponents or {}).items() if v != 0}
        self._hash = hash(frozenset(self._exponents.items()))

    @property
    def exponents(self) -> dict[str, int]:
        """Return a copy of the base dimension exponents."""
        return dict(self._exponents)

    def is_dimensionless(self) -> bool:
        """Return whether all exponents are zero."""
        return not self._exponents

    def __mul__(self, other: "Dimension") -> "Dimension":
        """Multiply two dimensions."""
        symbols = set(self._exponents) | set(other._exponents)
        return Dimension(
            {
                symbol: self._exponents.get(symbol, 0) + other._exponents.get(symbol, 0)
                for symbol in symbols
            }
        )

    def __truediv__(self, other: "Dimension") -> "Dimension":
        """Divide two dimensions."""
        return self * other.inverse()

    def __pow__(self, power: int) -> "Dimension":
        """Raise the dimension to an integer power."""
        return Dimension({symbol: exp * power for symbol, exp in self._exponents.items()})

    def inverse(self) -> "Dimension":
        """Return the dimension with all exponents negated."""
        return self ** -1

    def root(self, n: int) -> "Dimension":
        """Return the n-th root of the dimension.

        Raises:
            ValueError: If n is not positive or an exponent is not divisible by n.
        """
        if n <= 0:
            raise ValueError(f"Root order must be positive, got {n}")
        if any(exp % n for exp in self._exponents.values()):
            raise ValueError(f"Cannot take root {n} of dimension {self}")
        return Dimension({symbol: exp // n for symbol, exp in self._exponents.items()})

    def __eq__(self, other: object) -> bool:
        """Check equality of two Dimension instances."""
        if not isinstance(other, Dimension):
            return NotImplemented
        return self._exponents == other._exponents

    def __hash__(self) -> int:
        return self._hash

    def __str__(self) -> str:
        """Return a string representation of the dimension, e.g. '[L].[T]^-1'."""
        if not self._exponents:
            return "[1]"

        def order(symbol: str) -> tuple[int, str]:
            if symbol in BASE_DIMENSIONS:
                return BASE_DIMENSIONS.index(symbol), symbol
            return len(BASE_DIMENSIONS), symbol

        parts = []
        for symbol in sorted(self._exponents, key=order):
            exp = self._exponents[symbol]
            parts.append(f"[{symbol}]" if exp == 1 else f"[{symbol}]^{exp}")
        return ".".join(parts)

    def __repr__(self) -> str:
        """Return a detailed string representation of the dimension."""
        return f"Dimension({self._exponents})"

    @classmethod
    def of(cls, symbol: str) -> Self:
        """Return the base dimension identified by a single symbol."""
        return cls({symbol: 1})


Dimension.NONE = Dimension()
Dimension.LENGTH = Dimension.of("L")
Dimension.MASS = Dimension.of("M")
Dimension.TIME = Dimension.of("T")
Dimension.ELECTRIC_CURRENT = Dimension.of("I")
Dimension.TEMPERATURE = Dimension.of("Θ")
Dimension.AMOUNT_OF_SUBSTANCE = Dimension.of("N")
Dimension.LUMINOUS_INTENSITY = Dimension.of("J")
