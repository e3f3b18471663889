"""Exact, unit-aware arithmetic on physical quantities."""

from contextlib import suppress
from importlib.metadata import PackageNotFoundError, version

from .errors import (
    IncommensurableError,
    QuantityDivisionByZeroError,
    QuantityError,
    UnitParseError,
)
from .quantity import (
    BigIntegerQuantity,
    Quantity,
    RationalQuantity,
    get_quantity,
)
from .units import BinaryPrefix, Dimension, MetricPrefix, ONE, Unit

with suppress(PackageNotFoundError):
    __version__ = version("exact-units")

__all__ = [
    "IncommensurableError",
    "QuantityDivisionByZeroError",
    "QuantityError",
    "UnitParseError",
    "BigIntegerQuantity",
    "Quantity",
    "RationalQuantity",
    "get_quantity",
    "BinaryPrefix",
    "Dimension",
    "MetricPrefix",
    "ONE",
    "Unit",
]
