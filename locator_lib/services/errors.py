"""Exception types raised by the locked cell and the binding registry.

All of these signal programming or configuration errors. None of them
are expected at runtime in a correctly wired application, so none are
retried.
"""
from __future__ import annotations
from typing import Any, Iterable


def type_name(interface: Any) -> str:
    """Return a readable, fully-qualified name for a type key."""
    if isinstance(interface, type):
        return f"{interface.__module__}.{interface.__qualname__}"
    return repr(interface)


class LockedCellError(RuntimeError):
    """Base class for `LockedCell` failures."""


class ValueNotSetError(LockedCellError):
    """Raised when reading an empty cell."""


class ValueAlreadySetError(LockedCellError):
    """Raised when writing to an occupied cell."""


class BindingError(RuntimeError):
    """Base class for every registry error."""


class NotConfiguredError(BindingError, ValueNotSetError):
    pass


class AlreadyConfiguredError(BindingError, ValueAlreadySetError):
    pass


class NoBindingAvailableError(BindingError, LookupError):
    """Neither an exact binding nor a default is available for a type."""

    def __init__(self, interface: type, available: Iterable[type]):
        self.interface = interface
        self.available = frozenset(available)
        names = ", ".join(sorted(type_name(t) for t in self.available)) or "none"
        super().__init__(
            f"No type binding available for {type_name(interface)}. Available: [{names}]"
        )


class DefaultConstructionError(BindingError):
    """The default factory raised while building a value.

    The original exception is chained as ``__cause__``.
    """

    def __init__(self, interface: type, cause: BaseException):
        self.interface = interface
        super().__init__(
            f"Cannot inject default value for {type_name(interface)} due to error: {cause!r}"
        )


class InvalidBindingError(BindingError, TypeError):
    """A factory produced a value that is not an instance of the requested type."""

    def __init__(self, interface: type, value: Any):
        self.interface = interface
        self.value = value
        super().__init__(
            f"Invalid type binding: '{value!r}' is not an instance of {type_name(interface)}"
        )
