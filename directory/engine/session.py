from __future__ import annotations

import asyncio
import logging

from ..catalog.models import Item
from ..catalog.store import CatalogStore
from ..config import DEFAULT_DIRECTORY_CONFIG, DirectoryConfig
from ..urlsync.history import History
from ..urlsync.sync import UrlSync
from .events import RESULTS_CHANGED, SELECTION_CHANGED, ChangeSource, EventBus
from .ranking import PaginationWindow, rank_items
from .scoring import apply_filters
from .selection import FilterSelection

logger = logging.getLogger(__name__)


class DirectorySession:
    """One user's view of the directory.

    Owns the selection, the pagination window and the URL sync, and
    recomputes every item's ``active``/``score`` on each selection change.
    The session mutates the items of the catalog it is given, so pass it
    a ``CatalogStore.fresh_copy()`` when the catalog is shared.
    """

    def __init__(
        self,
        catalog: CatalogStore,
        history: History | None = None,
        config: DirectoryConfig = DEFAULT_DIRECTORY_CONFIG,
        bus: EventBus | None = None,
    ) -> None:
        self.catalog = catalog
        self.config = config
        self.bus = bus or EventBus()
        self.history = history or History()

        self.selection = FilterSelection(catalog, bus=self.bus)
        self.window = PaginationWindow(config)
        self._ranked: list[Item] = []

        # Scoring must run before the URL is rewritten
        self._unsubscribe = self.bus.subscribe(SELECTION_CHANGED, lambda _change: self.refresh())
        self.url_sync = UrlSync(self.selection, self.history)

        self.is_loading = True
        self.is_load_more_loading = False
        self._loading_started = False

    # -- lifecycle --------------------------------------------------------

    def start(self) -> None:
        """Initial render: activate a first page, then read the URL.

        With neither ``region`` nor ``category`` in the URL, every region
        and every category is selected.
        """
        self.activate_initial_items()
        self.url_sync.read()
        if self.selection.is_empty:
            self.selection.replace(
                self.catalog.region_slugs,
                self.catalog.category_slugs,
                source=ChangeSource.default,
            )

    def activate_initial_items(self) -> None:
        count = min(len(self.catalog.items), self.window.page_size)
        for item in self.catalog.items[:count]:
            item.active = True
        self._ranked = [item for item in self.catalog.items if item.active]

    async def finish_loading(self) -> None:
        """Clear ``is_loading`` after the first-render delay.

        The delay runs once per session; later calls return immediately.
        """
        if self._loading_started:
            return
        self._loading_started = True
        await asyncio.sleep(self.config.loading_delay)
        self.is_loading = False

    def close(self) -> None:
        self._unsubscribe()
        self.url_sync.close()

    # -- recomputation ----------------------------------------------------

    def refresh(self) -> None:
        apply_filters(
            self.catalog.items,
            self.selection.selected_regions,
            self.selection.selected_categories,
            config=self.config,
        )
        self._ranked = rank_items(self.catalog.items)
        logger.debug(
            "Recomputed directory: %d / %d active", len(self._ranked), len(self.catalog.items),
        )
        self.bus.publish(RESULTS_CHANGED, self)

    def load_more(self) -> None:
        self.is_load_more_loading = True
        self.window.load_more()
        self.bus.publish(RESULTS_CHANGED, self)

    # -- user actions -----------------------------------------------------

    def toggle_region(self, slug: str) -> None:
        self.selection.toggle_region(slug)

    def toggle_category(self, slug: str) -> None:
        self.selection.toggle_category(slug)

    def toggle_all_regions(self) -> None:
        self.selection.toggle_all_regions()

    def toggle_all_categories(self) -> None:
        self.selection.toggle_all_categories()

    def select_platform(self, slug: str | None) -> None:
        self.selection.select_platform(slug)

    # -- exposed to rendering ---------------------------------------------

    @property
    def ranked_items(self) -> list[Item]:
        return list(self._ranked)

    @property
    def visible_items(self) -> list[Item]:
        return self.window.visible(self._ranked)

    @property
    def active_count(self) -> int:
        return len(self._ranked)

    @property
    def total_items(self) -> int:
        return len(self.catalog.items)

    @property
    def has_more(self) -> bool:
        return self.window.has_more(self.active_count)

    @property
    def any_active(self) -> bool:
        return any(item.active for item in self.catalog.items)

    @property
    def any_regions(self) -> bool:
        return len(self.catalog.regions) > 0

    @property
    def any_categories(self) -> bool:
        return len(self.catalog.categories) > 0

    @property
    def all_regions_selected(self) -> bool:
        return self.selection.all_regions_selected

    @property
    def all_categories_selected(self) -> bool:
        return self.selection.all_categories_selected
