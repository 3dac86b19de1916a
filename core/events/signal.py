from __future__ import annotations

from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class Signal(Generic[T]):
    """
    Minimal synchronous signal/slot primitive.
    Subscribers run in connection order, on the emitting call stack.
    """

    def __init__(self) -> None:
        self._subscribers: list[Callable[[T], None]] = []

    def connect(self, callback: Callable[[T], None]) -> None:
        if callback not in self._subscribers:
            self._subscribers.append(callback)

    def disconnect(self, callback: Callable[[T], None]) -> None:
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    def emit(self, payload: T) -> None:
        stale_callbacks: list[Callable[[T], None]] = []
        for callback in list(self._subscribers):
            try:
                callback(payload)
            except ReferenceError:
                # weakref proxies whose target is gone
                stale_callbacks.append(callback)
        for callback in stale_callbacks:
            self.disconnect(callback)

    def __len__(self) -> int:
        return len(self._subscribers)
