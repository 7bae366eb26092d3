"""Host event bus with explicit listener handles and per-frame flush."""
from __future__ import annotations

from dataclasses import dataclass, field
from itertools import count
from typing import Any, Callable

Handler = Callable[[str, dict[str, Any]], None]

RESIZE = "resize"
POINTER_MOVE = "pointermove"


@dataclass(frozen=True)
class Listener:
    """Returned by subscribe; the only way to unsubscribe."""

    event: str
    handler: Handler = field(compare=False)
    token: int


class EventBus:

    def __init__(self) -> None:
        self._listeners: dict[str, list[Listener]] = {}
        self._queue: list[tuple[str, dict[str, Any]]] = []
        self._tokens = count(1)

    def subscribe(self, event: str, handler: Handler) -> Listener:
        listener = Listener(event, handler, next(self._tokens))
        self._listeners.setdefault(event, []).append(listener)
        return listener

    def unsubscribe(self, listener: Listener) -> bool:
        listeners = self._listeners.get(listener.event)
        if not listeners or listener not in listeners:
            return False
        listeners.remove(listener)
        if not listeners:
            del self._listeners[listener.event]
        return True

    def listener_count(self, event: str | None = None) -> int:
        if event is not None:
            return len(self._listeners.get(event, ()))
        return sum(len(listeners) for listeners in self._listeners.values())

    def publish(self, event: str, **data: Any) -> None:
        self._queue.append((event, data))

    def flush(self) -> None:
        snapshot = self._queue
        self._queue = []
        for event, data in snapshot:
            # Copy so a handler may unsubscribe itself mid-dispatch.
            for listener in list(self._listeners.get(event, ())):
                listener.handler(event, data)

    def clear(self) -> None:
        self._queue.clear()
