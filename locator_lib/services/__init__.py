"""Services package: the locked cell, binding registry and its builder."""
from .builder import BindingsBuilder, configure_bindings
from .cell import LockedCell
from .container import BindingTable, Registry, clear_bindings, get_registry, inject
from .errors import (
    AlreadyConfiguredError,
    BindingError,
    DefaultConstructionError,
    InvalidBindingError,
    LockedCellError,
    NoBindingAvailableError,
    NotConfiguredError,
    ValueAlreadySetError,
    ValueNotSetError,
)
from .interfaces import RegistryProtocol

__all__ = [
    "BindingsBuilder",
    "BindingTable",
    "LockedCell",
    "Registry",
    "RegistryProtocol",
    "configure_bindings",
    "clear_bindings",
    "get_registry",
    "inject",
    "AlreadyConfiguredError",
    "BindingError",
    "DefaultConstructionError",
    "InvalidBindingError",
    "LockedCellError",
    "NoBindingAvailableError",
    "NotConfiguredError",
    "ValueAlreadySetError",
    "ValueNotSetError",
]
