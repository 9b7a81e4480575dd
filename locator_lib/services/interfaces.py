"""Shared type aliases and Protocols for the binding registry.

A type key is the class object itself; lookup is by exact identity, so
subclasses and base classes of a bound type are distinct keys.
"""
from typing import Any, Callable, FrozenSet, Protocol, Type, TypeVar, runtime_checkable

T = TypeVar("T")

TypeKey = Type[Any]
Factory = Callable[[], Any]
DefaultFactory = Callable[[TypeKey], Any]


@runtime_checkable
class RegistryProtocol(Protocol):
    """Resolution surface implemented by `locator_lib.services.container.Registry`."""

    def inject(self, interface: Type[T]) -> T: ...

    def clear_bindings(self) -> None: ...

    def is_configured(self) -> bool: ...

    def bound_types(self) -> FrozenSet[TypeKey]: ...
