from directory.engine.scoring import apply_filters, score_item

from directory.tests.factories import make_item


def test_and_across_dimensions():
    item = make_item(1, ["eu"], ["crm"])
    score_item(item, {"eu"}, {"payments"})
    assert item.active is False

    score_item(item, {"eu"}, {"crm", "payments"})
    assert item.active is True
    assert item.score == 2


def test_empty_selection_matches_all_for_that_dimension():
    items = [make_item(1, ["eu"], ["crm"]), make_item(2, ["na"], ["crm"]), make_item(3, ["na"], ["payments"])]
    apply_filters(items, set(), {"crm"})
    assert [i.active for i in items] == [True, True, False]
    assert [i.score for i in items] == [1, 1, 0]


def test_no_selection_activates_everything_with_zero_score():
    items = [make_item(1, ["eu"], ["crm"]), make_item(2, [], [])]
    apply_filters(items, set(), set())
    assert all(i.active for i in items)
    assert all(i.score == 0 for i in items)


def test_score_is_set_for_inactive_items():
    item = make_item(1, ["eu", "na"], ["crm"])
    score_item(item, {"eu", "na"}, {"payments"})
    assert item.active is False
    assert item.score == 2


def test_recomputation_is_deterministic():
    items = [make_item(1, ["eu"], ["crm"]), make_item(2, ["na"], ["payments"])]
    first = apply_filters(items, {"eu"}, set())
    snapshot = [(i.active, i.score) for i in items]
    for _ in range(3):
        assert apply_filters(items, {"eu"}, set()) == first
        assert [(i.active, i.score) for i in items] == snapshot


def test_unknown_slug_matches_nothing():
    items = [make_item(1, ["eu"], ["crm"]), make_item(2, ["na"], ["payments"])]
    breakdowns = apply_filters(items, {"bogus"}, set())
    assert breakdowns == []
    assert not any(i.active for i in items)


def test_breakdown_trace_marks_unfiltered_dimension():
    item = make_item(1, ["eu"], ["crm"], title="Acme")
    breakdown = score_item(item, {"eu"}, set())
    trace = breakdown.as_trace()
    assert trace["title"] == "Acme"
    assert trace["matched_regions"] == "eu"
    assert trace["matched_categories"] == "(all)"


def test_duplicate_item_slugs_count_once():
    item = make_item(1, ["eu", " EU "], ["crm", "CRM"])
    score_item(item, {"eu"}, {"crm"})
    assert item.score == 2
