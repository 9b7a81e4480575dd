"""Builder used to configure the registry's bindings.

Typical use::

    def bindings(b):
        b.bind(FileLoader, ProductionFileLoader)
        b.bind_singleton(FileSystem())
        b.with_default(lambda cls: mock.create_autospec(cls, instance=True))

    configure_bindings(bindings)

A builder is meant for a single, single-threaded configuration session.
"""
from __future__ import annotations
import logging
from typing import Any, Callable, Dict, Optional, Type, TypeVar

from .container import BindingTable, Registry, check_type_key, get_registry
from .errors import type_name
from .interfaces import DefaultFactory, Factory, TypeKey

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BindingsBuilder:
    """Accumulate bindings, then seal them into a registry with `done`.

    Binding the same type twice keeps the last binding.
    """

    def __init__(self, registry: Optional[Registry] = None) -> None:
        self.registry = registry if registry is not None else get_registry()
        self.bindings: Dict[TypeKey, Factory] = {}
        self._default_factory: Optional[DefaultFactory] = None
        logger.info("Configuring bindings")

    def bind(self, interface: Type[T], supplier: Callable[[], T]) -> "BindingsBuilder":
        """Call `supplier` each time `interface` is injected.

        Types are bound by their exact type, so injecting a supertype or
        subtype of `interface` will not use this binding.
        """
        check_type_key(interface)
        if not callable(supplier):
            raise TypeError(f"Supplier for {type_name(interface)} is not callable: {supplier!r}")
        logger.info("Binding %s", type_name(interface))
        self.bindings[interface] = supplier
        return self

    def bind_singleton(self, instance: Any, interface: Optional[TypeKey] = None) -> "BindingsBuilder":
        """Return `instance` itself each time its type is injected.

        The key defaults to ``type(instance)``; pass `interface` to bind it
        under a base class or protocol instead. `interface` is required for
        mocks and proxies, whose runtime type is a per-instance subclass
        (``type(Mock())`` is not ``Mock``).
        """
        key = type(instance) if interface is None else interface
        check_type_key(key)
        logger.info("Binding %s to singleton: %r", type_name(key), instance)
        self.bindings[key] = lambda: instance
        return self

    def with_default(self, factory: DefaultFactory) -> "BindingsBuilder":
        """Set the fallback used for types with no binding of their own.

        `factory` receives the requested type. Setting it again replaces
        the previous one.
        """
        if not callable(factory):
            raise TypeError(f"Default supplier is not callable: {factory!r}")
        logger.info("Setting default supplier")
        self._default_factory = factory
        return self

    def build(self) -> BindingTable:
        return BindingTable(self.bindings, self._default_factory)

    def done(self) -> BindingTable:
        """Seal the bindings and install them.

        Raises `AlreadyConfiguredError` if the registry already holds a
        table; call `clear_bindings` first.
        """
        table = self.build()
        self.registry.install(table)
        logger.info("Finished configuring bindings")
        return table


def configure_bindings(
    operation: Callable[[BindingsBuilder], Any],
    registry: Optional[Registry] = None,
) -> BindingTable:
    """Run `operation` against a fresh builder and install the result.

    After configuration, `inject(T)` returns an instance of T provided a
    binding for T or a default binding has been configured.
    """
    builder = BindingsBuilder(registry)
    operation(builder)
    return builder.done()
