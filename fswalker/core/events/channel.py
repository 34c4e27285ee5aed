# File: fswalker/core/events/channel.py

from typing import Callable, Generic, List, TypeVar

T = TypeVar("T")

Listener = Callable[[T], None]


class EventChannel(Generic[T]):
    """
    Synchronous multi-listener delivery.
    Every published event reaches each listener in registration order, on the
    publishing thread, before publish() returns. Listener errors are not caught
    here; they surface to whoever called publish().
    """

    def __init__(self, name: str = ""):
        self.name = name
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> Listener:
        """Registers a listener. Returns it so this can be used as a decorator."""
        if not callable(listener):
            raise TypeError(f"Listener for channel '{self.name}' must be callable.")
        self._listeners.append(listener)
        return listener

    def unsubscribe(self, listener: Listener) -> None:
        """Removes the first registration of the listener, if any."""
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    def clear(self) -> None:
        self._listeners.clear()

    def publish(self, event: T) -> None:
        # Snapshot so a listener (un)subscribing mid-delivery doesn't skew this round
        for listener in list(self._listeners):
            listener(event)

    def __len__(self) -> int:
        return len(self._listeners)

    def __repr__(self) -> str:
        return f"EventChannel(name={self.name!r}, listeners={len(self._listeners)})"
