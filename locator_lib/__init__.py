"""LocatorTool: a small type-keyed service locator.

Configure once with `configure_bindings`, resolve with `inject`, and
reset with `clear_bindings` (tests only).
"""
from .services import (
    AlreadyConfiguredError,
    BindingError,
    BindingsBuilder,
    DefaultConstructionError,
    InvalidBindingError,
    NoBindingAvailableError,
    NotConfiguredError,
    Registry,
    clear_bindings,
    configure_bindings,
    get_registry,
    inject,
)

__all__ = [
    "AlreadyConfiguredError",
    "BindingError",
    "BindingsBuilder",
    "DefaultConstructionError",
    "InvalidBindingError",
    "NoBindingAvailableError",
    "NotConfiguredError",
    "Registry",
    "clear_bindings",
    "configure_bindings",
    "get_registry",
    "inject",
]
