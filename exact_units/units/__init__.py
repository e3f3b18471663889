"""Units module."""

from .converter import (
    IDENTITY,
    AddConverter,
    ConverterChain,
    PowerOfIntConverter,
    RationalConverter,
    UnitConverter,
)
from .core import ONE, Unit
from .dimension import Dimension
from .prefix import BinaryPrefix, MetricPrefix, Prefix
from .units import (
    AMPERE,
    CANDELA,
    CELSIUS,
    COULOMB,
    CUBIC_METRE,
    DAY,
    FARAD,
    GRAM,
    HENRY,
    HERTZ,
    HOUR,
    JOULE,
    KELVIN,
    KILOGRAM,
    KILOMETRE_PER_HOUR,
    LITRE,
    METRE,
    METRE_PER_SECOND,
    MINUTE,
    MOLE,
    NEWTON,
    OHM,
    PASCAL,
    RADIAN,
    SECOND,
    SIEMENS,
    SQUARE_METRE,
    TESLA,
    VOLT,
    WATT,
    WEBER,
    WEEK,
    get_unit,
)

__all__ = [
    "IDENTITY",
    "AddConverter",
    "ConverterChain",
    "PowerOfIntConverter",
    "RationalConverter",
    "UnitConverter",
    "ONE",
    "Unit",
    "Dimension",
    "BinaryPrefix",
    "MetricPrefix",
    "Prefix",
    "AMPERE",
    "CANDELA",
    "CELSIUS",
    "COULOMB",
    "CUBIC_METRE",
    "DAY",
    "FARAD",
    "GRAM",
    "HENRY",
    "HERTZ",
    "HOUR",
    "JOULE",
    "KELVIN",
    "KILOGRAM",
    "KILOMETRE_PER_HOUR",
    "LITRE",
    "METRE",
    "METRE_PER_SECOND",
    "MINUTE",
    "MOLE",
    "NEWTON",
    "OHM",
    "PASCAL",
    "RADIAN",
    "SECOND",
    "SIEMENS",
    "SQUARE_METRE",
    "TESLA",
    "VOLT",
    "WATT",
    "WEBER",
    "WEEK",
    "get_unit",
]
