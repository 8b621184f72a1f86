"""Multicast events: a list of handlers called in turn on broadcast."""

from __future__ import annotations

from typing import Any, Callable

Handler = Callable[..., Any]


class Event:
    """Holds handlers and calls each of them, in subscription order, on broadcast."""

    def __init__(self) -> None:
        self._handlers: list[Handler] = []

    def subscribe(self, handler: Handler) -> None:
        """Add a handler; subscribing the same handler twice has no further effect."""
        if not callable(handler):
            raise TypeError("event handler must be callable")
        if handler not in self._handlers:
            self._handlers.append(handler)

    def unsubscribe(self, handler: Handler) -> None:
        """Remove a handler if it is subscribed."""
        if handler in self._handlers:
            self._handlers.remove(handler)

    def is_bound(self) -> bool:
        return bool(self._handlers)

    def is_already_bound(self, handler: Handler) -> bool:
        return handler in self._handlers

    def broadcast(self, *args: Any) -> None:
        """Call every handler with ``args``; changes made during the call apply next time."""
        for handler in list(self._handlers):
            handler(*args)

    def __len__(self) -> int:
        return len(self._handlers)