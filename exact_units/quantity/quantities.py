"""Factory functions for quantities."""

from typing import Any, overload

from ..units.converter import Number
from ..units.core import Unit
from ..units.types import Q
from .core import Quantity, exact_quantity


@overload
def get_quantity(value: str) -> Quantity[Any]: ...


@overload
def get_quantity(value: Number, unit: Unit[Q]) -> Quantity[Q]: ...


def get_quantity(value: Number | str, unit: Unit[Any] | None = None) -> Quantity[Any]:
    """Create an exact quantity.

    Args:
        value: The magnitude, or a string such as '3 mΩ' read by the default
            quantity format.
        unit: The unit of the magnitude. Required unless value is a string.

    Returns:
        A BigIntegerQuantity when the magnitude is integral, otherwise a
        RationalQuantity. Floats are taken at their exact binary value.
    """
    if isinstance(value, str):
        if unit is not None:
            raise TypeError("Cannot pass a unit together with a quantity string")
        from ..format import default_service

        return default_service().get_quantity_format().parse(value)
    if unit is None:
        raise TypeError("A unit is required for numeric values")
    return exact_quantity(value, unit)
