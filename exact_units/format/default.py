"""Built-in formatters writing units as their symbol and quantities as '<value> <unit>'."""

import re
from fractions import Fraction
from typing import Any

from ..errors import q003_error_factory
from ..quantity.core import Quantity, exact_quantity
from ..units.core import Unit

_QUANTITY_RE = re.compile(r"\s*([-+]?\d+(?:[./]\d+)?)\s+(\S+)\s*")


class UnitFormat:
    """Base class for unit formatters."""

    def format(self, unit: Unit[Any]) -> str:
        raise NotImplementedError

    def parse(self, text: str) -> Unit[Any]:
        raise NotImplementedError


class QuantityFormat:
    """Base class for quantity formatters."""

    def format(self, quantity: Quantity[Any]) -> str:
        raise NotImplementedError

    def parse(self, text: str) -> Quantity[Any]:
        raise NotImplementedError


class DefaultUnitFormat(UnitFormat):
    """Writes units as their symbol, e.g. 'Ω^2' or 'kg.m^2.s^-2'."""

    def format(self, unit: Unit[Any]) -> str:
        return unit.symbol

    def parse(self, text: str) -> Unit[Any]:
        return Unit.from_string(text)


class DefaultQuantityFormat(QuantityFormat):
    """Writes quantities as '<value> <unit>', with rational values as 'n/d'."""

    def __init__(self, unit_format: UnitFormat | None = None):
        self.unit_format = unit_format or DefaultUnitFormat()

    def format(self, quantity: Quantity[Any]) -> str:
        return f"{quantity.value} {self.unit_format.format(quantity.unit)}"

    def parse(self, text: str) -> Quantity[Any]:
        """Read a quantity such as '3 mΩ', '-1/3 s' or '2.5 km'.

        Raises:
            UnitParseError: If the text is malformed or the unit is unknown.
        """
        match = _QUANTITY_RE.fullmatch(text)
        if not match:
            raise q003_error_factory(text, "expected '<number> <unit>'")
        try:
            value = Fraction(match.group(1))
        except ZeroDivisionError as exc:
            raise q003_error_factory(text, "zero denominator") from exc
        return exact_quantity(value, self.unit_format.parse(match.group(2)))
