"""Reactive cells — a single value that notifies listeners on every write.

A Cell is shared freely across threads. get/set/subscribe are serialized by
one lock. set() swaps the value and copies the listener list under the lock,
then releases it before calling listeners on the writer's thread, so a
listener may subscribe() to the same cell without deadlocking.

Listener exceptions propagate out of set(). Remaining listeners in that
notification are skipped. See IsolatedCell for the catch-and-log variant.
"""

from __future__ import annotations

import threading
from typing import Callable, Generic, TypeVar

T = TypeVar("T")

Listener = Callable[[T], object]


class Cell(Generic[T]):
    """A thread-safe observable value."""

    __slots__ = ("_value", "_listeners", "_lock")

    def __init__(self, initial: T) -> None:
        self._value = initial
        self._listeners: list[Listener[T]] = []
        self._lock = threading.Lock()

    def get(self) -> T:
        """Read the current value."""
        with self._lock:
            return self._value

    def set(self, value: T) -> None:
        """Write a new value, then notify every listener in registration order.

        Always notifies, even if value equals the previous one.
        """
        with self._lock:
            self._value = value
            snapshot = tuple(self._listeners)
        self._notify(snapshot, value)

    def subscribe(self, listener: Listener[T]) -> None:
        """Register listener for future writes. It is not called with the current value.

        Registering the same callable twice makes it fire twice per write.
        """
        with self._lock:
            self._listeners.append(listener)

    @property
    def listener_count(self) -> int:
        with self._lock:
            return len(self._listeners)

    def _notify(self, listeners: tuple[Listener[T], ...], value: T) -> None:
        for listener in listeners:
            listener(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.get()!r})"
