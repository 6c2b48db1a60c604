from __future__ import annotations

import logging
from typing import Iterable

from ..catalog.store import CatalogStore
from ..urlsync.codec import decode_query
from .events import SELECTION_CHANGED, ChangeSource, EventBus, SelectionChange

logger = logging.getLogger(__name__)


class FilterSelection:
    """Currently chosen region slugs, category slugs and platform tag.

    Every mutation publishes ``SELECTION_CHANGED`` on the bus so the
    scoring engine and the URL sync can react.
    """

    def __init__(self, catalog: CatalogStore, bus: EventBus | None = None) -> None:
        self.catalog = catalog
        self.bus = bus or EventBus()
        self.selected_regions: set[str] = set()
        self.selected_categories: set[str] = set()
        self.selected_platform: str | None = None

    # -- toggles ----------------------------------------------------------

    def toggle_region(self, slug: str) -> None:
        if not self.catalog.has_region(slug):
            logger.debug("Ignoring toggle of unknown region %r", slug)
            return
        self.selected_regions ^= {slug}
        self._changed(ChangeSource.user)

    def toggle_category(self, slug: str) -> None:
        if not self.catalog.has_category(slug):
            logger.debug("Ignoring toggle of unknown category %r", slug)
            return
        self.selected_categories ^= {slug}
        self._changed(ChangeSource.user)

    def select_platform(self, slug: str | None) -> None:
        self.selected_platform = slug or None
        self._changed(ChangeSource.platform)

    # -- wholesale replacement --------------------------------------------

    def select_all_regions(self) -> None:
        self.selected_regions = set(self.catalog.region_slugs)
        self._changed(ChangeSource.user)

    def select_no_regions(self) -> None:
        self.selected_regions = set()
        self._changed(ChangeSource.user)

    def select_all_categories(self) -> None:
        self.selected_categories = set(self.catalog.category_slugs)
        self._changed(ChangeSource.user)

    def select_no_categories(self) -> None:
        self.selected_categories = set()
        self._changed(ChangeSource.user)

    def toggle_all_regions(self) -> None:
        if self.all_regions_selected:
            self.select_no_regions()
        else:
            self.select_all_regions()

    def toggle_all_categories(self) -> None:
        if self.all_categories_selected:
            self.select_no_categories()
        else:
            self.select_all_categories()

    def replace(
        self,
        regions: Iterable[str],
        categories: Iterable[str],
        source: ChangeSource = ChangeSource.user,
    ) -> None:
        """Overwrite both sets at once and publish a single change."""
        self.selected_regions = set(regions)
        self.selected_categories = set(categories)
        self._changed(source)

    def load_from_url(self, query: str) -> None:
        regions, categories = decode_query(
            query, self.catalog.region_slugs, self.catalog.category_slugs,
        )
        self.replace(regions, categories, source=ChangeSource.url)

    # -- derived flags ----------------------------------------------------

    @property
    def all_regions_selected(self) -> bool:
        return len(self.selected_regions) == len(self.catalog.regions)

    @property
    def all_categories_selected(self) -> bool:
        return len(self.selected_categories) == len(self.catalog.categories)

    @property
    def is_empty(self) -> bool:
        return not self.selected_regions and not self.selected_categories

    def _changed(self, source: ChangeSource) -> None:
        self.bus.publish(SELECTION_CHANGED, SelectionChange(source=source))
