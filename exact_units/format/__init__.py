"""Format module."""

from .default import DefaultQuantityFormat, DefaultUnitFormat, QuantityFormat, UnitFormat
from .service import FormatService, FormatType, default_service

__all__ = [
    "DefaultQuantityFormat",
    "DefaultUnitFormat",
    "QuantityFormat",
    "UnitFormat",
    "FormatService",
    "FormatType",
    "default_service",
]
