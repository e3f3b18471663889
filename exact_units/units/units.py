"""Standard units and symbol lookup.

This module provides:
- The SI base units and the named derived SI units.
- Common non-SI units defined exactly in terms of SI units (minute, hour,
  day, litre, degree Celsius, ...).
- get_unit(), resolving a symbol, optionally carrying a prefix, to a unit.

Example:
    from exact_units.units import OHM, MetricPrefix, get_unit

    assert get_unit("mΩ") == MetricPrefix.MILLI(OHM)
"""

from fractions import Fraction
from typing import Any

from ..errors import q003_error_factory
from .converter import AddConverter, RationalConverter
from .core import ONE, Unit
from .dimension import Dimension
from .prefix import find_prefix
from .types import (
    AmountOfSubstance,
    Angle,
    Area,
    ElectricCapacitance,
    ElectricCharge,
    ElectricConductance,
    ElectricCurrent,
    ElectricInductance,
    ElectricPotential,
    ElectricResistance,
    Energy,
    Force,
    Frequency,
    Length,
    LuminousIntensity,
    MagneticFlux,
    MagneticFluxDensity,
    Mass,
    Power,
    Pressure,
    Speed,
    Temperature,
    Time,
    Volume,
)

L = Dimension.LENGTH
M = Dimension.MASS
T = Dimension.TIME
I = Dimension.ELECTRIC_CURRENT  # noqa: E741

# Base units
METRE: Unit[Length] = Unit("m", L, name="metre")
KILOGRAM: Unit[Mass] = Unit("kg", M, name="kilogram")
SECOND: Unit[Time] = Unit("s", T, name="second")
AMPERE: Unit[ElectricCurrent] = Unit("A", I, name="ampere")
KELVIN: Unit[Temperature] = Unit("K", Dimension.TEMPERATURE, name="kelvin")
MOLE: Unit[AmountOfSubstance] = Unit("mol", Dimension.AMOUNT_OF_SUBSTANCE, name="mole")
CANDELA: Unit[LuminousIntensity] = Unit(
    "cd", Dimension.LUMINOUS_INTENSITY, name="candela"
)

# Named derived units
RADIAN: Unit[Angle] = Unit("rad", Dimension.NONE, name="radian")
HERTZ: Unit[Frequency] = Unit("Hz", T**-1, name="hertz")
NEWTON: Unit[Force] = Unit("N", M * L / T**2, name="newton")
PASCAL: Unit[Pressure] = Unit("Pa", M / L / T**2, name="pascal")
JOULE: Unit[Energy] = Unit("J", M * L**2 / T**2, name="joule")
WATT: Unit[Power] = Unit("W", M * L**2 / T**3, name="watt")
COULOMB: Unit[ElectricCharge] = Unit("C", I * T, name="coulomb")
VOLT: Unit[ElectricPotential] = Unit("V", M * L**2 / T**3 / I, name="volt")
FARAD: Unit[ElectricCapacitance] = Unit(
    "F", T**4 * I**2 / M / L**2, name="farad"
)
OHM: Unit[ElectricResistance] = Unit("Ω", M * L**2 / T**3 / I**2, name="ohm")
SIEMENS: Unit[ElectricConductance] = Unit(
    "S", T**3 * I**2 / M / L**2, name="siemens"
)
WEBER: Unit[MagneticFlux] = Unit("Wb", M * L**2 / T**2 / I, name="weber")
TESLA: Unit[MagneticFluxDensity] = Unit("T", M / T**2 / I, name="tesla")
HENRY: Unit[ElectricInductance] = Unit("H", M * L**2 / T**2 / I**2, name="henry")

SQUARE_METRE: Unit[Area] = METRE.pow(2)
CUBIC_METRE: Unit[Volume] = METRE.pow(3)
METRE_PER_SECOND: Unit[Speed] = METRE.divide(SECOND)

# Non-SI units
GRAM: Unit[Mass] = KILOGRAM.transform(RationalConverter(1, 1000), "g", "gram")
MINUTE: Unit[Time] = SECOND.transform(RationalConverter(60), "min", "minute")
HOUR: Unit[Time] = SECOND.transform(RationalConverter(3600), "h", "hour")
DAY: Unit[Time] = SECOND.transform(RationalConverter(86400), "d", "day")
WEEK: Unit[Time] = SECOND.transform(RationalConverter(604800), "week", "week")
LITRE: Unit[Volume] = CUBIC_METRE.transform(RationalConverter(1, 1000), "l", "litre")
CELSIUS: Unit[Temperature] = KELVIN.transform(
    AddConverter(Fraction(27315, 100)), "℃", "degree Celsius"
)
KILOMETRE_PER_HOUR: Unit[Speed] = METRE_PER_SECOND.transform(
    RationalConverter(1000, 3600), "km/h", "kilometre per hour"
)

_UNITS: dict[str, Unit[Any]] = {
    unit.symbol: unit
    for unit in (
        ONE,
        METRE,
        KILOGRAM,
        SECOND,
        AMPERE,
        KELVIN,
        MOLE,
        CANDELA,
        RADIAN,
        HERTZ,
        NEWTON,
        PASCAL,
        JOULE,
        WATT,
        COULOMB,
        VOLT,
        FARAD,
        OHM,
        SIEMENS,
        WEBER,
        TESLA,
        HENRY,
        GRAM,
        MINUTE,
        HOUR,
        DAY,
        WEEK,
        LITRE,
        CELSIUS,
        KILOMETRE_PER_HOUR,
    )
}
# Alternative spellings
_UNITS["°C"] = CELSIUS
_UNITS["L"] = LITRE
_UNITS["Ohm"] = OHM


def get_unit(symbol: str) -> Unit[Any]:
    """Return the unit for a symbol, resolving metric and binary prefixes.

    Exact symbols win over prefixed readings, so 'cd' is candela, not centiday.

    Raises:
        UnitParseError: If the symbol is unknown.
    """
    if symbol in _UNITS:
        return _UNITS[symbol]
    for split in (1, 2):
        prefix = find_prefix(symbol[:split])
        base = _UNITS.get(symbol[split:])
        if prefix is not None and base is not None and base is not ONE:
            return base.prefix(prefix)
    raise q003_error_factory(symbol, "unknown unit symbol")


def available_symbols() -> list[str]:
    """Return the unprefixed symbols get_unit() knows."""
    return sorted(_UNITS)
