"""Quantity module."""

from .core import BigIntegerQuantity, Quantity, RationalQuantity, exact_quantity
from .quantities import get_quantity

__all__ = [
    "BigIntegerQuantity",
    "Quantity",
    "RationalQuantity",
    "exact_quantity",
    "get_quantity",
]
