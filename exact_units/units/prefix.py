"""Metric and binary prefixes.

A prefix is a scale factor ``base ** exponent``. Prefixes are callable, so
``MetricPrefix.MILLI(OHM)`` is the same unit as ``OHM.prefix(MetricPrefix.MILLI)``.
"""

from enum import Enum
from fractions import Fraction
from typing import TYPE_CHECKING, TypeVar

from .converter import PowerOfIntConverter

if TYPE_CHECKING:
    from .core import Unit

U = TypeVar("U", bound="Unit")


class Prefix:
    """Behaviour shared by all prefix enumerations."""

    name: str
    symbol: str
    exponent: int
    base: int

    @property
    def factor(self) -> Fraction:
        """Exact scale factor of the prefix."""
        return Fraction(self.base) ** self.exponent

    @property
    def converter(self) -> PowerOfIntConverter:
        """Converter from values in the prefixed unit to the unprefixed unit."""
        return PowerOfIntConverter(self.base, self.exponent)

    def __call__(self, unit: U) -> U:
        """Apply the prefix to a unit."""
        return unit.prefix(self)


class MetricPrefix(Prefix, Enum):
    """Decimal prefixes of the International System of Units."""

    QUECTO = ("q", -30)
    RONTO = ("r", -27)
    YOCTO = ("y", -24)
    ZEPTO = ("z", -21)
    ATTO = ("a", -18)
    FEMTO = ("f", -15)
    PICO = ("p", -12)
    NANO = ("n", -9)
    MICRO = ("µ", -6)
    MILLI = ("m", -3)
    CENTI = ("c", -2)
    DECI = ("d", -1)
    DECA = ("da", 1)
    HECTO = ("h", 2)
    KILO = ("k", 3)
    MEGA = ("M", 6)
    GIGA = ("G", 9)
    TERA = ("T", 12)
    PETA = ("P", 15)
    EXA = ("E", 18)
    ZETTA = ("Z", 21)
    YOTTA = ("Y", 24)
    RONNA = ("R", 27)
    QUETTA = ("Q", 30)

    def __init__(self, symbol: str, exponent: int) -> None:
        self.symbol = symbol
        self.exponent = exponent
        self.base = 10


class BinaryPrefix(Prefix, Enum):
    """IEC prefixes for powers of 1024."""

    KIBI = ("Ki", 1)
    MEBI = ("Mi", 2)
    GIBI = ("Gi", 3)
    TEBI = ("Ti", 4)
    PEBI = ("Pi", 5)
    EXBI = ("Ei", 6)
    ZEBI = ("Zi", 7)
    YOBI = ("Yi", 8)

    def __init__(self, symbol: str, exponent: int) -> None:
        self.symbol = symbol
        self.exponent = exponent
        self.base = 1024


def find_prefix(symbol: str) -> Prefix | None:
    """Return the prefix with the given symbol, or None if there is none."""
    for prefixes in (MetricPrefix, BinaryPrefix):
        for prefix in prefixes:
            if prefix.symbol == symbol:
                return prefix
    # ASCII 'u' and the Greek letter mu are customary spellings of micro
    if symbol in ("u", "μ"):
        return MetricPrefix.MICRO
    return None
