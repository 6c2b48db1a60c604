from __future__ import annotations

import logging
from typing import Callable
from urllib.parse import urlsplit

logger = logging.getLogger(__name__)

PopStateListener = Callable[[str], None]


class History:
    """In-process stand-in for the browser session history.

    ``push_state`` changes the current URL without notifying anyone,
    like the browser API. Moving through the history with
    ``back``/``forward``/``go`` notifies popstate listeners with the URL
    that became current.
    """

    def __init__(self, url: str = "/") -> None:
        self._entries: list[str] = [url]
        self._index = 0
        self._listeners: list[PopStateListener] = []

    @property
    def url(self) -> str:
        return self._entries[self._index]

    @property
    def pathname(self) -> str:
        return urlsplit(self.url).path or "/"

    @property
    def query(self) -> str:
        return urlsplit(self.url).query

    def __len__(self) -> int:
        return len(self._entries)

    def push_state(self, url: str) -> None:
        del self._entries[self._index + 1:]
        self._entries.append(url)
        self._index += 1
        logger.debug("pushState %s", url)

    def add_popstate_listener(self, listener: PopStateListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def remove() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return remove

    def go(self, delta: int) -> bool:
        target = self._index + delta
        if delta == 0 or not 0 <= target < len(self._entries):
            return False
        self._index = target
        for listener in list(self._listeners):
            listener(self.url)
        return True

    def back(self) -> bool:
        return self.go(-1)

    def forward(self) -> bool:
        return self.go(1)
