from __future__ import annotations

import logging
from typing import Iterable, Sequence

from ..catalog.models import Item
from ..config import DEFAULT_DIRECTORY_CONFIG, DirectoryConfig

logger = logging.getLogger(__name__)


def _rank_key(item: Item) -> tuple[int, int]:
    # Lower priority number first (sponsored placement), then higher score
    return (item.priority or 0, -(item.score or 0))


def rank_items(items: Iterable[Item]) -> list[Item]:
    """Return active items ordered by priority, then score.

    ``sorted`` is stable, so items with equal priority and score keep
    their catalog order.
    """
    return sorted((item for item in items if item.active), key=_rank_key)


class PaginationWindow:
    """Prefix of the ranked active items exposed for display.

    The page size only grows (``load_more``) until an explicit ``reset``.
    """

    def __init__(self, config: DirectoryConfig = DEFAULT_DIRECTORY_CONFIG) -> None:
        self._config = config
        self.page_size: int = max(0, config.initial_page_size)

    def load_more(self) -> None:
        self.page_size += self._config.page_step

    def reset(self) -> None:
        self.page_size = max(0, self._config.initial_page_size)

    def visible(self, ranked: Sequence[Item]) -> list[Item]:
        page = list(ranked[: self.page_size])
        level = logging.INFO if self._config.trace_scoring else logging.DEBUG
        if logger.isEnabledFor(level):
            logger.log(
                level,
                "Displaying %d (of %d active, page size %d)",
                len(page), len(ranked), self.page_size,
            )
            for rank, item in enumerate(page, start=1):
                row = {
                    "#": rank,
                    "title": item.title,
                    "priority": item.priority or 0,
                    "score": item.score or 0,
                    "regions": ", ".join(item.regions),
                    "categories": ", ".join(c.slug for c in item.categories),
                }
                logger.log(level, "Ranked: %s", row, extra={"ranked_item": row})
        return page

    def has_more(self, active_count: int) -> bool:
        return active_count > self.page_size
