"""A first-in, first-out queue that is safe to share between threads."""

from __future__ import annotations

import threading
from collections import deque
from typing import Any, Callable, Deque, Generic, Optional, TypeVar

T = TypeVar("T")

_EMPTY_MESSAGE = "TSQueue is empty!"


class TSQueue(Generic[T]):
    """A queue whose operations each run under one lock.

    ``factory`` builds the values that :meth:`emplace` stores from its
    arguments. Without a factory, :meth:`emplace` stores its single
    argument as it is.
    """

    def __init__(self, factory: Optional[Callable[..., T]] = None) -> None:
        self._factory = factory
        self._items: Deque[T] = deque()
        self._lock = threading.Lock()

    def _build(self, args: tuple, kwargs: dict) -> T:
        if self._factory is not None:
            return self._factory(*args, **kwargs)
        if len(args) != 1 or kwargs:
            raise TypeError(
                "emplace without a factory takes exactly one positional argument"
            )
        return args[0]

    def back(self) -> T:
        """Return the most recently added value."""
        with self._lock:
            if not self._items:
                raise IndexError(_EMPTY_MESSAGE)
            return self._items[-1]

    def emplace(self, *args: Any, **kwargs: Any) -> None:
        """Build a value from the arguments and add it at the back."""
        value = self._build(args, kwargs)
        with self._lock:
            self._items.append(value)

    def empty(self) -> bool:
        """Return whether the queue holds no values."""
        with self._lock:
            return not self._items

    def front(self) -> T:
        """Return the oldest value without removing it."""
        with self._lock:
            if not self._items:
                raise IndexError(_EMPTY_MESSAGE)
            return self._items[0]

    def pop(self) -> None:
        """Remove the oldest value."""
        with self._lock:
            if not self._items:
                raise IndexError(_EMPTY_MESSAGE)
            self._items.popleft()

    def push(self, value: T) -> None:
        """Add ``value`` at the back."""
        with self._lock:
            self._items.append(value)

    def size(self) -> int:
        """Return the number of values held."""
        with self._lock:
            return len(self._items)

    def __len__(self) -> int:
        return self.size()