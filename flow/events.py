"""
In-process notifications emitted by resolvers, e.g. a ship arriving at its destination.
"""

import logging
from collections import defaultdict
from typing import Any, Callable

ARRIVED = "arrived"


class Notifier:
    def __init__(self):
        self._listeners: dict[str, list[Callable[..., Any]]] = defaultdict(list)

    def subscribe(self, event: str, callback: Callable[..., Any]) -> None:
        self._listeners[event].append(callback)

    def unsubscribe(self, event: str, callback: Callable[..., Any]) -> None:
        if callback in self._listeners.get(event, []):
            self._listeners[event].remove(callback)

    def emit(self, event: str, *args: Any) -> int:
        """Call every listener for `event`; returns how many were called."""
        listeners = list(self._listeners.get(event, []))
        logging.info(f"Event {event}: {', '.join(str(a) for a in args)}")
        for callback in listeners:
            callback(*args)
        return len(listeners)
