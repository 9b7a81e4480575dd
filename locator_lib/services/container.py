"""Process-wide binding registry.

Bindings are configured once through `locator_lib.services.builder`,
sealed into an immutable `BindingTable` and installed here. `inject`
resolves a type against the installed table; `clear_bindings` removes
it so that a new table can be installed (typically after each test).
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, FrozenSet, Mapping, Optional, Type, TypeVar

from .cell import LockedCell
from .errors import (
    AlreadyConfiguredError,
    DefaultConstructionError,
    InvalidBindingError,
    NoBindingAvailableError,
    NotConfiguredError,
    type_name,
)
from .interfaces import DefaultFactory, Factory, TypeKey

logger = logging.getLogger(__name__)

T = TypeVar("T")

NOT_CONFIGURED = (
    "Bindings have not been configured! Call configure_bindings() to set up "
    "your bindings before calling inject()"
)
ALREADY_CONFIGURED = (
    "Bindings have already been configured. Call clear_bindings() before "
    "configuring them again"
)


def check_type_key(interface: Any) -> None:
    if not isinstance(interface, type):
        raise TypeError(f"Type key must be a class, got {interface!r}")
    # Resolution runs isinstance() against the key
    if getattr(interface, "_is_protocol", False) and not getattr(interface, "_is_runtime_protocol", False):
        raise TypeError(
            f"Protocol {type_name(interface)} cannot be used as a type key; "
            "decorate it with @typing.runtime_checkable"
        )


@dataclass(frozen=True)
class BindingTable:
    """Immutable snapshot of one configuration session."""

    factories: Mapping[TypeKey, Factory] = field(default_factory=dict)
    default_factory: Optional[DefaultFactory] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "factories", MappingProxyType(dict(self.factories)))

    def bound_types(self) -> FrozenSet[TypeKey]:
        return frozenset(self.factories)


class Registry:
    """Holds at most one installed `BindingTable`.

    Installing over an existing table and reading from an empty registry
    both fail fast. The table itself is never mutated, so resolution does
    not need to lock once a table is installed.
    """

    def __init__(self) -> None:
        self._table: LockedCell[BindingTable] = LockedCell(
            ALREADY_CONFIGURED,
            NOT_CONFIGURED,
            already_set_error=AlreadyConfiguredError,
            not_set_error=NotConfiguredError,
        )

    def install(self, table: BindingTable) -> None:
        """Install `table`; raises `AlreadyConfiguredError` if one is present."""
        self._table.write(table)

    def table(self) -> BindingTable:
        return self._table.read()

    def is_configured(self) -> bool:
        return self._table.is_occupied()

    def bound_types(self) -> FrozenSet[TypeKey]:
        return self.table().bound_types()

    def inject(self, interface: Type[T]) -> T:
        """Return an instance of `interface`.

        The exact binding for `interface` wins; otherwise the default
        factory is asked. Whatever is produced must be an instance of
        `interface`.
        """
        check_type_key(interface)
        try:
            table = self.table()
        except NotConfiguredError:
            logger.debug("Bindings not configured when injecting %s", type_name(interface))
            raise

        factory = table.factories.get(interface)
        if factory is not None:
            value = factory()
        elif table.default_factory is not None:
            try:
                value = table.default_factory(interface)
            except Exception as e:
                logger.debug("Default factory failed for %s", type_name(interface), exc_info=True)
                raise DefaultConstructionError(interface, e) from e
        else:
            logger.debug("No binding for %s", type_name(interface))
            raise NoBindingAvailableError(interface, table.bound_types())

        if not isinstance(value, interface):
            logger.debug("Binding for %s produced %r", type_name(interface), value)
            raise InvalidBindingError(interface, value)
        return value

    def clear_bindings(self) -> None:
        """Remove the installed table. Clearing an empty registry only warns."""
        if self._table.reset():
            logger.info("Cleared all bindings")
        else:
            logger.warning("No bindings have been configured")


# Global registry instance
_registry = Registry()


def get_registry() -> Registry:
    """Get the process-wide registry."""
    return _registry


def inject(interface: Type[T]) -> T:
    """Resolve `interface` from the process-wide registry.

    Bindings match the exact bound type only; supertypes and subtypes of
    a bound type are not considered.
    """
    return _registry.inject(interface)


def clear_bindings() -> None:
    """Remove all bindings so `configure_bindings` can be called again.

    Not meant for production use. Call it after each test (the
    `locator_lib.testing` pytest plugin does this automatically), otherwise
    bindings leak from one test into the next.
    """
    _registry.clear_bindings()
