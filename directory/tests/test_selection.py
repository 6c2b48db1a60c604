from directory.engine.events import SELECTION_CHANGED, ChangeSource, EventBus
from directory.engine.selection import FilterSelection


def _selection(catalog):
    bus = EventBus()
    changes = []
    bus.subscribe(SELECTION_CHANGED, changes.append)
    return FilterSelection(catalog, bus=bus), changes


def test_toggle_adds_then_removes(catalog):
    selection, changes = _selection(catalog)
    selection.toggle_region("eu")
    assert selection.selected_regions == {"eu"}
    selection.toggle_region("eu")
    assert selection.selected_regions == set()
    assert [c.source for c in changes] == [ChangeSource.user, ChangeSource.user]


def test_toggle_unknown_slug_is_noop(catalog):
    selection, changes = _selection(catalog)
    selection.toggle_region("mars")
    selection.toggle_category("mars")
    assert selection.is_empty
    assert changes == []


def test_select_all_and_none(catalog):
    selection, _ = _selection(catalog)
    selection.select_all_categories()
    assert selection.all_categories_selected
    selection.select_no_categories()
    assert selection.selected_categories == set()
    selection.toggle_all_regions()
    assert selection.selected_regions == {"eu", "na", "apac"}
    selection.toggle_all_regions()
    assert selection.selected_regions == set()


def test_all_selected_compares_sizes(catalog):
    selection, _ = _selection(catalog)
    selection.toggle_region("eu")
    selection.toggle_region("na")
    assert selection.all_regions_selected is False
    selection.toggle_region("apac")
    assert selection.all_regions_selected is True


def test_load_from_url_replaces_atomically(catalog):
    selection, changes = _selection(catalog)
    selection.toggle_category("crm")
    changes.clear()
    selection.load_from_url("region=all")
    assert selection.selected_regions == {"eu", "na", "apac"}
    assert selection.selected_categories == set()
    assert len(changes) == 1
    assert changes[0].source is ChangeSource.url


def test_load_from_url_keeps_unknown_slugs(catalog):
    selection, _ = _selection(catalog)
    selection.load_from_url("region=bogus")
    assert selection.selected_regions == {"bogus"}


def test_select_platform(catalog):
    selection, changes = _selection(catalog)
    selection.select_platform("ios")
    assert selection.selected_platform == "ios"
    selection.select_platform("")
    assert selection.selected_platform is None
    assert all(c.source is ChangeSource.platform for c in changes)


def test_event_bus_unsubscribe():
    bus = EventBus()
    seen = []
    unsubscribe = bus.subscribe("topic", seen.append)
    bus.publish("topic", 1)
    unsubscribe()
    bus.publish("topic", 2)
    assert seen == [1]
