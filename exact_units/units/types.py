"""Quantity kinds used as type parameters for static dimension checking.

Kinds carry no runtime behaviour. They let a type checker reject, for example,
``Quantity[Length].add(Quantity[Time])`` before the code runs, e.g.

    length: Quantity[Length] = BigIntegerQuantity(3, METRE)
"""

from typing import TypeVar


class QuantityKind:
    """Base class for all quantity kinds."""

    pass


Q = TypeVar("Q", bound=QuantityKind)


class Dimensionless(QuantityKind):
    """Represents pure numbers and ratios."""

    pass


class Angle(QuantityKind):
    pass


class Length(QuantityKind):
    """Represents distances."""

    pass


class Mass(QuantityKind):
    pass


class Time(QuantityKind):
    """Represents durations."""

    pass


class ElectricCurrent(QuantityKind):
    pass


class Temperature(QuantityKind):
    pass


class AmountOfSubstance(QuantityKind):
    pass


class LuminousIntensity(QuantityKind):
    pass


class Area(QuantityKind):
    pass


class Volume(QuantityKind):
    pass


class Speed(QuantityKind):
    pass


class Frequency(QuantityKind):
    pass


class Force(QuantityKind):
    pass


class Pressure(QuantityKind):
    pass


class Energy(QuantityKind):
    pass


class Power(QuantityKind):
    pass


class ElectricCharge(QuantityKind):
    pass


class ElectricPotential(QuantityKind):
    pass


class ElectricResistance(QuantityKind):
    """Represents resistance, measured in ohm."""

    pass


class ElectricConductance(QuantityKind):
    pass


class ElectricCapacitance(QuantityKind):
    pass


class ElectricInductance(QuantityKind):
    pass


class MagneticFlux(QuantityKind):
    pass


class MagneticFluxDensity(QuantityKind):
    pass
