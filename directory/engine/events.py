from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

SELECTION_CHANGED = "selection_changed"
RESULTS_CHANGED = "results_changed"


class ChangeSource(str, Enum):
    user = "user"
    url = "url"
    default = "default"
    platform = "platform"


@dataclass(frozen=True)
class SelectionChange:
    source: ChangeSource


class EventBus:
    """Synchronous publish/subscribe hub.

    Subscribers run in registration order, inside the ``publish`` call.
    Exceptions raised by a subscriber propagate to the publisher.
    """

    def __init__(self) -> None:
        self._subscribers: dict[str, list[Callable[[Any], None]]] = defaultdict(list)

    def subscribe(self, topic: str, callback: Callable[[Any], None]) -> Callable[[], None]:
        self._subscribers[topic].append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers[topic]:
                self._subscribers[topic].remove(callback)

        return unsubscribe

    def publish(self, topic: str, payload: Any = None) -> None:
        for callback in list(self._subscribers[topic]):
            callback(payload)
