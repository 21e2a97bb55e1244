"""A last-in, first-out stack that is safe to share between threads."""

from __future__ import annotations

import threading
from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")

_EMPTY_MESSAGE = "Stack is empty"


class TSStack(Generic[T]):
    """A stack whose operations each run under one lock.

    ``factory`` builds the values that :meth:`emplace` stores from its
    arguments. Without a factory, :meth:`emplace` stores its single
    argument as it is.
    """

    def __init__(self, factory: Optional[Callable[..., T]] = None) -> None:
        self._factory = factory
        self._items: list[T] = []
        self._lock = threading.Lock()

    def _build(self, args: tuple, kwargs: dict) -> T:
        if self._factory is not None:
            return self._factory(*args, **kwargs)
        if len(args) != 1 or kwargs:
            raise TypeError(
                "emplace without a factory takes exactly one positional argument"
            )
        return args[0]

    def emplace(self, *args: Any, **kwargs: Any) -> None:
        """Build a value from the arguments and push it."""
        value = self._build(args, kwargs)
        with self._lock:
            self._items.append(value)

    def push(self, value: T) -> None:
        """Put ``value`` on top of the stack."""
        with self._lock:
            self._items.append(value)

    def top(self) -> T:
        """Return the top value without removing it."""
        with self._lock:
            if not self._items:
                raise IndexError(_EMPTY_MESSAGE)
            return self._items[-1]

    def pop(self) -> None:
        """Remove the top value."""
        with self._lock:
            if not self._items:
                raise IndexError(_EMPTY_MESSAGE)
            self._items.pop()

    def size(self) -> int:
        """Return the number of values held."""
        with self._lock:
            return len(self._items)

    def empty(self) -> bool:
        """Return whether the stack holds no values."""
        with self._lock:
            return not self._items

    def __len__(self) -> int:
        return self.size()