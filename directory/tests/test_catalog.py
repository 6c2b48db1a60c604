import json
from pathlib import Path

import pytest

from directory.catalog.models import Item
from directory.catalog.store import CatalogLoadError, CatalogStore, get_catalog, load_catalog


def test_bundled_catalog_loads():
    catalog = get_catalog()
    assert len(catalog) == 16
    assert "europe" in catalog.region_slugs
    assert "dev-tools" in catalog.category_slugs


def test_item_input_is_normalised():
    item = Item.model_validate({
        "id": 7,
        "title": "Loose",
        "regions": "europe",
        "excerpt": None,
        "categories": None,
        "priority": None,
    })
    assert item.regions == []
    assert item.excerpt == ""
    assert item.categories == []
    assert item.priority == 0
    assert item.active is False
    assert item.score == 0


def test_item_slugs_are_trimmed_and_lowercased():
    item = Item(id=1, title="x", regions=[" EU "], categories=[{"name": "CRM", "slug": "CRM "}])
    assert item.region_slugs == ["eu"]
    assert item.category_slugs == ["crm"]


def test_load_catalog_missing_file(tmp_path: Path):
    with pytest.raises(CatalogLoadError):
        load_catalog(tmp_path / "nope.json")


def test_load_catalog_bad_schema(tmp_path: Path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps({"items": [{"id": 1}]}))
    with pytest.raises(CatalogLoadError):
        load_catalog(path)


def test_fresh_copy_does_not_share_items(catalog):
    catalog.items[0].active = True
    copy = catalog.fresh_copy()
    assert copy.items[0].active is False
    copy.items[1].score = 9
    assert catalog.items[1].score == 0


def test_empty_catalog():
    catalog = CatalogStore.from_data({})
    assert len(catalog) == 0
    assert catalog.region_slugs == []


def test_load_catalog_directory_path(tmp_path: Path):
    with pytest.raises(CatalogLoadError):
        load_catalog(tmp_path)


def test_load_catalog_not_utf8(tmp_path: Path):
    path = tmp_path / "catalog.json"
    path.write_bytes(b"\xff\xfe\xfa{}")
    with pytest.raises(CatalogLoadError):
        load_catalog(path)


def test_duplicate_slugs_collapse():
    item = Item(
        id=1,
        title="x",
        regions=["eu", " EU "],
        categories=[{"name": "CRM", "slug": "crm"}, {"name": "CRM", "slug": "CRM"}],
    )
    assert item.region_slugs == ["eu"]
    assert item.category_slugs == ["crm"]
