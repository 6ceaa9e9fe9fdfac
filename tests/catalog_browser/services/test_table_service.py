from __future__ import annotations

import pytest

from catalog_browser.core.catalog import CatalogStore
from catalog_browser.core.exceptions import InvalidViewStateError
from catalog_browser.services.table_service import TableController

STATUSES = ["standard", "experimental", "deprecated", "obsolete"]


def _make_controller() -> TableController:
    catalog = CatalogStore.from_raw(
        [
            {"tag": "div", "status": "standard", "category": "layout"},
            {"tag": "marquee", "status": "deprecated", "category": "text"},
            {"tag": "center", "status": "deprecated", "category": "layout"},
            {"tag": "span", "status": "standard", "category": "text"},
        ]
    )
    return TableController(catalog, STATUSES)


def _tags(rendered) -> list[str]:
    return [row.tag_label for row in rendered.rows]


def test_initial_render_shows_whole_catalog():
    ctl = _make_controller()
    rendered = ctl.render()

    assert _tags(rendered) == ["<center>", "<div>", "<marquee>", "<span>"]
    assert rendered.count_text == "Елементів: 4"


def test_transitions_rerender():
    ctl = _make_controller()

    rendered = ctl.set_status_filter("deprecated")
    assert _tags(rendered) == ["<center>", "<marquee>"]

    rendered = ctl.set_search_query("MAR")
    assert _tags(rendered) == ["<marquee>"]
    assert rendered.count_text == "Елементів: 1"

    rendered = ctl.set_search_query("")
    rendered = ctl.toggle_sort("tag")
    assert _tags(rendered) == ["<marquee>", "<center>"]


def test_sort_by_category_keeps_tag_order_for_ties():
    ctl = _make_controller()

    rendered = ctl.toggle_sort("category")
    assert _tags(rendered) == ["<center>", "<div>", "<marquee>", "<span>"]

    rendered = ctl.toggle_sort("category")
    assert _tags(rendered) == ["<marquee>", "<span>", "<center>", "<div>"]


def test_unknown_status_raises_and_keeps_state():
    ctl = _make_controller()
    with pytest.raises(InvalidViewStateError):
        ctl.set_status_filter("bogus")
    assert ctl.view.status_filter == "all"


def test_controllers_do_not_share_view_state():
    a = _make_controller()
    b = _make_controller()

    a.set_search_query("div")

    assert b.view.search_query == ""
    assert len(b.visible()) == 4


def test_failed_load_always_renders_error():
    ctl = TableController.failed_load(STATUSES)

    assert ctl.load_failed
    for rendered in (ctl.render(), ctl.set_search_query("div"), ctl.toggle_sort("status")):
        assert rendered.is_error
        assert rendered.rows == ()
        assert rendered.count_text == "Елементів: 0"
