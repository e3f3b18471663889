"""Module for creating errors representing invalid quantity operations."""

from typing import Any


class QuantityError(Exception):
    """Base class for errors raised by quantity and unit operations."""

    def __init__(self, code: str, message: str):
        """Initialise a new quantity error."""
        super().__init__(message)
        self.code = code
        self.message = message

    def __repr__(self) -> str:
        """Return a string representation of the error."""
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


class IncommensurableError(QuantityError, TypeError):
    """Operands have units of different dimensions."""


class QuantityDivisionByZeroError(QuantityError, ZeroDivisionError):
    """An exact division or reciprocal was requested with a zero divisor."""


class UnitParseError(QuantityError, ValueError):
    """A unit or quantity string could not be interpreted."""


def q001_error_factory(operation: str, left_unit: Any, right_unit: Any) -> QuantityError:
    """Factory for Q001: Operands have incompatible dimensions."""
    return IncommensurableError(
        code="Q001",
        message=(
            f"Cannot {operation} operands with incompatible units: "
            f"{left_unit} ({left_unit.dimension}) and "
            f"{right_unit} ({right_unit.dimension})"
        ),
    )


def q002_error_factory(operation: str) -> QuantityError:
    """Factory for Q002: Division by zero."""
    return QuantityDivisionByZeroError(
        code="Q002",
        message=f"Cannot {operation}: division by zero",
    )


def q003_error_factory(text: str, reason: str) -> QuantityError:
    """Factory for Q003: Unparseable unit or quantity."""
    return UnitParseError(
        code="Q003",
        message=f"Cannot parse {text!r}: {reason}",
    )


class DimensionTypeError:
    """Represents a dimension error found by static type checking."""

    def __init__(self, code: str, path: str, lineno: int, message: str):
        """Initialise a new dimension type error."""
        self.code = code
        self.path = path
        self.lineno = lineno
        self.message = message

    def __repr__(self) -> str:
        """Return a string representation of the error."""
        return (
            "DimensionTypeError"
            f"(code={self.code!r}, path={self.path!r}, lineno={self.lineno!r}, "
            f"message={self.message!r})"
        )


def q100_error_factory(path: str, lineno: int, message: str) -> DimensionTypeError:
    """Factory for Q100: Static type checking found mismatched quantity kinds."""
    return DimensionTypeError(code="Q100", path=path, lineno=lineno, message=message)
