"""Single-assignment storage with explicit reset."""
from threading import RLock
from typing import Generic, Optional, Type, TypeVar

from .errors import ValueAlreadySetError, ValueNotSetError

T = TypeVar("T")


class LockedCell(Generic[T]):
    """Hold zero or one value.

    Writing while a value is held fails with `already_set_error`, reading
    while empty fails with `not_set_error`. Only `reset` empties the cell.
    Write and reset run under a lock so check-then-act stays atomic when
    several threads configure at once.
    """

    def __init__(
        self,
        already_set: str,
        not_set: str,
        already_set_error: Type[ValueAlreadySetError] = ValueAlreadySetError,
        not_set_error: Type[ValueNotSetError] = ValueNotSetError,
    ) -> None:
        self._lock = RLock()
        self._occupied = False
        self._value: Optional[T] = None
        self._already_set = already_set
        self._not_set = not_set
        self._already_set_error = already_set_error
        self._not_set_error = not_set_error

    def read(self) -> T:
        with self._lock:
            if not self._occupied:
                raise self._not_set_error(self._not_set)
            return self._value  # type: ignore[return-value]

    def write(self, value: T) -> None:
        with self._lock:
            if self._occupied:
                raise self._already_set_error(self._already_set)
            self._value = value
            self._occupied = True

    def is_occupied(self) -> bool:
        with self._lock:
            return self._occupied

    def reset(self) -> bool:
        """Empty the cell. Returns True if a value was removed."""
        with self._lock:
            was_occupied = self._occupied
            self._value = None
            self._occupied = False
            return was_occupied
