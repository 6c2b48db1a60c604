from __future__ import annotations

import logging
from urllib.parse import urlsplit

from ..engine.events import SELECTION_CHANGED, ChangeSource, SelectionChange
from ..engine.selection import FilterSelection
from .codec import encode_query
from .history import History

logger = logging.getLogger(__name__)

# Changes decoded from the URL are never written back
_WRITE_SOURCES = (ChangeSource.user, ChangeSource.default)


class UrlSync:
    """Keeps a ``FilterSelection`` and a ``History`` in step."""

    def __init__(self, selection: FilterSelection, history: History) -> None:
        self.selection = selection
        self.history = history
        self._unsubscribe = selection.bus.subscribe(SELECTION_CHANGED, self._on_selection_changed)
        self._remove_listener = history.add_popstate_listener(self._on_popstate)

    def read(self) -> None:
        """Load the selection from the current history entry."""
        self.selection.load_from_url(self.history.query)

    def canonical_query(self) -> str:
        """The current query string rewritten from the selection."""
        catalog_regions, catalog_categories = self._vocabularies()
        return encode_query(
            self.history.query,
            self.selection.selected_regions,
            self.selection.selected_categories,
            catalog_regions,
            catalog_categories,
        )

    def write(self) -> str:
        """Push a history entry encoding the current selection."""
        query = self.canonical_query()
        url = f"{self.history.pathname}?{query}" if query else self.history.pathname
        self.history.push_state(url)
        return url

    def close(self) -> None:
        self._unsubscribe()
        self._remove_listener()

    def _vocabularies(self) -> tuple[list[str], list[str]]:
        catalog = self.selection.catalog
        return catalog.region_slugs, catalog.category_slugs

    def _on_selection_changed(self, change: SelectionChange) -> None:
        if change.source in _WRITE_SOURCES:
            self.write()

    def _on_popstate(self, url: str) -> None:
        logger.debug("popstate %s", url)
        self.selection.load_from_url(urlsplit(url).query)
