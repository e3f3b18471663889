"""Registry of unit and quantity formatters.

Formatters are looked up by format type and an optional name. Omitting the
name returns the default formatter; an unknown name returns None.

Providers are callables returning ``(FormatType, name, formatter)`` triples.
Besides the built-in provider, installed distributions can contribute
providers through the ``exact_units.formats`` entry-point group.
"""

import logging
from collections.abc import Callable, Iterable
from enum import Enum
from functools import lru_cache
from importlib.metadata import entry_points
from typing import Any, overload

from .default import DefaultQuantityFormat, DefaultUnitFormat, QuantityFormat, UnitFormat

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "exact_units.formats"
DEFAULT_FORMAT_NAME = "Default"


class FormatType(Enum):
    """Kinds of formatter a service can provide."""

    UNIT_FORMAT = "unit"
    QUANTITY_FORMAT = "quantity"


FormatProvider = Callable[[], Iterable[tuple[FormatType, str, Any]]]


def builtin_formats() -> list[tuple[FormatType, str, Any]]:
    """Provide the default unit and quantity formats."""
    unit_format = DefaultUnitFormat()
    return [
        (FormatType.UNIT_FORMAT, DEFAULT_FORMAT_NAME, unit_format),
        (FormatType.QUANTITY_FORMAT, DEFAULT_FORMAT_NAME, DefaultQuantityFormat(unit_format)),
    ]


def entry_point_providers() -> list[FormatProvider]:
    """Load the providers registered under the entry-point group.

    Providers that cannot be imported are logged and skipped.
    """
    providers: list[FormatProvider] = []
    for entry_point in entry_points(group=ENTRY_POINT_GROUP):
        try:
            providers.append(entry_point.load())
        except (ImportError, AttributeError) as exc:
            logger.warning("Skipping format provider %r: %s", entry_point.name, exc)
    return providers


class FormatService:
    """Looks up formatters by format type and name."""

    def __init__(
        self,
        providers: Iterable[FormatProvider] | None = None,
        default_name: str = DEFAULT_FORMAT_NAME,
    ):
        """Initialise a new format service.

        Args:
            providers: Providers to register, in order; later registrations of
                the same name win. A provider that raises is logged and
                skipped. Defaults to the built-in provider followed
                by the entry-point providers.
            default_name: Name of the formatter returned when no name is given.
        """
        self.default_name = default_name
        self._formats: dict[FormatType, dict[str, Any]] = {
            format_type: {} for format_type in FormatType
        }
        if providers is None:
            providers = [builtin_formats, *entry_point_providers()]
        for provider in providers:
            self._register(provider)

    def _register(self, provider: FormatProvider) -> None:
        try:
            formats = list(provider())
        except Exception as exc:
            logger.warning(
                "Skipping format provider %r: %s",
                getattr(provider, "__name__", provider),
                exc,
            )
            return
        for format_type, name, formatter in formats:
            logger.debug("Registering %s format %r", format_type.value, name)
            self._formats[format_type][name] = formatter

    @overload
    def get_unit_format(self) -> UnitFormat: ...

    @overload
    def get_unit_format(self, name: str) -> UnitFormat | None: ...

    def get_unit_format(self, name: str | None = None) -> UnitFormat | None:
        """Return the named unit format, the default one, or None if not found."""
        return self._lookup(FormatType.UNIT_FORMAT, name)

    @overload
    def get_quantity_format(self) -> QuantityFormat: ...

    @overload
    def get_quantity_format(self, name: str) -> QuantityFormat | None: ...

    def get_quantity_format(self, name: str | None = None) -> QuantityFormat | None:
        """Return the named quantity format, the default one, or None if not found."""
        return self._lookup(FormatType.QUANTITY_FORMAT, name)

    def get_available_format_names(self, format_type: FormatType) -> set[str]:
        return set(self._formats[format_type])

    def _lookup(self, format_type: FormatType, name: str | None) -> Any:
        return self._formats[format_type].get(
            self.default_name if name is None else name
        )


@lru_cache(maxsize=None)
def default_service() -> FormatService:
    """Return the process-wide format service, built on first use."""
    return FormatService()
