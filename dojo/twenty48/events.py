"""A small event bus mapping event names to a single listener each."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass
class Message:
    data: str = ""


Listener = Callable[[Message], None]


class EventBus:
    """Keeps one listener per event name; a later ``add`` replaces an earlier one."""

    def __init__(self) -> None:
        self._listeners: dict[str, Listener] = {}

    def add(self, event: str, listener: Listener) -> None:
        self._listeners[event] = listener

    def dispatch(self, event: str, message: Message) -> None:
        """Call the listener for ``event``; raises KeyError if none is registered."""
        try:
            listener = self._listeners[event]
        except KeyError:
            raise KeyError(f"no listener for event {event!r}") from None
        listener(message)