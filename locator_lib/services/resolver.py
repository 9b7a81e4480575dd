from typing import Callable, Optional, Type, TypeVar
from fastapi import HTTPException

from .container import Registry, get_registry
from .errors import NoBindingAvailableError, NotConfiguredError

T = TypeVar("T")


def injected(interface: Type[T], registry: Optional[Registry] = None) -> Callable[[], T]:
    """Build a FastAPI dependency that resolves `interface` from the registry.

    Use as ``greeter: Greeter = Depends(injected(Greeter))``. A missing
    registry or binding is a server misconfiguration and is reported as
    an HTTP 500. Errors raised while constructing the value propagate.
    """

    def _resolve() -> T:
        target = registry if registry is not None else get_registry()
        try:
            return target.inject(interface)
        except NotConfiguredError:
            raise HTTPException(status_code=500, detail="Service registry not configured")
        except NoBindingAvailableError:
            raise HTTPException(status_code=500, detail=f"Service '{interface.__name__}' not configured")

    return _resolve


def injected_optional(interface: Type[T], registry: Optional[Registry] = None) -> Callable[[], Optional[T]]:
    """Like `injected`, but yields None when the service is not configured."""

    def _resolve() -> Optional[T]:
        target = registry if registry is not None else get_registry()
        try:
            return target.inject(interface)
        except (NotConfiguredError, NoBindingAvailableError):
            return None

    return _resolve
