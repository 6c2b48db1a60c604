from __future__ import annotations

import pytest

from directory.catalog.store import CatalogStore
from directory.config import DirectoryConfig
from directory.tests.factories import CATEGORIES, REGIONS, make_item


@pytest.fixture
def catalog() -> CatalogStore:
    items = [
        make_item(1, ["eu"], ["crm"], priority=2),
        make_item(2, ["na", "eu"], ["payments"], priority=1),
        make_item(3, ["apac"], ["security", "crm"], priority=2),
        make_item(4, ["na"], ["crm", "payments"], priority=3),
    ]
    return CatalogStore(items, REGIONS, CATEGORIES)


@pytest.fixture
def config() -> DirectoryConfig:
    return DirectoryConfig(initial_page_size=2, page_step=2, loading_delay=0.0)
