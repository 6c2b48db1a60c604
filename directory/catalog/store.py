from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable

from pydantic import ValidationError

from ..config import DEFAULT_DIRECTORY_CONFIG, DirectoryConfig
from .models import CatalogData, FacetOption, Item

logger = logging.getLogger(__name__)


class CatalogLoadError(ValueError):
    """Raised when a catalog file is missing or does not match the schema."""


class CatalogStore:
    """Full item set plus the region and category vocabularies.

    Items are created once and never removed; only their ``active`` and
    ``score`` fields change, and only the scoring engine changes them.
    """

    def __init__(
        self,
        items: Iterable[Item],
        regions: Iterable[FacetOption],
        categories: Iterable[FacetOption],
    ) -> None:
        self.items: list[Item] = list(items)
        self.regions: tuple[FacetOption, ...] = tuple(regions)
        self.categories: tuple[FacetOption, ...] = tuple(categories)

    @classmethod
    def from_data(cls, data: CatalogData | dict) -> CatalogStore:
        if not isinstance(data, CatalogData):
            data = CatalogData.model_validate(data)
        return cls(data.items, data.regions, data.categories)

    @property
    def region_slugs(self) -> list[str]:
        return [r.slug for r in self.regions]

    @property
    def category_slugs(self) -> list[str]:
        return [c.slug for c in self.categories]

    def fresh_copy(self) -> CatalogStore:
        """Return a store with its own item objects, reset to inactive."""
        items = [item.model_copy(update={"active": False, "score": 0}) for item in self.items]
        return CatalogStore(items, self.regions, self.categories)

    def has_region(self, slug: str) -> bool:
        return slug in self.region_slugs

    def has_category(self, slug: str) -> bool:
        return slug in self.category_slugs

    def __len__(self) -> int:
        return len(self.items)


def load_catalog(path: Path | None = None, config: DirectoryConfig = DEFAULT_DIRECTORY_CONFIG) -> CatalogStore:
    """Read a catalog JSON file into a fresh ``CatalogStore``."""
    source = Path(path) if path is not None else config.catalog_path
    try:
        raw = json.loads(source.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise CatalogLoadError(f"Catalog file not found: {source}") from exc
    except OSError as exc:
        raise CatalogLoadError(f"Catalog file could not be read: {source}") from exc
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise CatalogLoadError(f"Catalog file is not valid JSON: {source}") from exc

    try:
        data = CatalogData.model_validate(raw)
    except ValidationError as exc:
        raise CatalogLoadError(f"Catalog file does not match schema: {source}") from exc

    logger.info(
        "Loaded catalog from %s: %d items, %d regions, %d categories",
        source, len(data.items), len(data.regions), len(data.categories),
    )
    return CatalogStore.from_data(data)


_catalog: CatalogStore | None = None


def get_catalog() -> CatalogStore:
    """Return the bundled catalog, loading it on first call."""
    global _catalog
    if _catalog is None:
        _catalog = load_catalog()
    return _catalog
