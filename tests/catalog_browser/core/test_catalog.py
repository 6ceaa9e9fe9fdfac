from __future__ import annotations

import logging

from catalog_browser.core.catalog import CatalogStore


def test_from_raw_sorts_by_tag_case_sensitive():
    catalog = CatalogStore.from_raw(
        [{"tag": "span"}, {"tag": "B"}, {"tag": "a"}, {"tag": "Z"}]
    )

    # code-point order: upper case before lower case
    assert [r.tag for r in catalog] == ["B", "Z", "a", "span"]


def test_entries_without_tag_are_excluded(caplog):
    with caplog.at_level(logging.WARNING):
        catalog = CatalogStore.from_raw(
            [{"tag": "div"}, {"status": "standard"}, {"tag": ""}, None, {"tag": "p"}]
        )

    assert [r.tag for r in catalog] == ["div", "p"]
    assert "Skipping catalog entry" in caplog.text


def test_duplicate_tags_keep_first_occurrence():
    catalog = CatalogStore.from_raw(
        [
            {"tag": "div", "description": "first"},
            {"tag": "div", "description": "second"},
        ]
    )

    assert len(catalog) == 1
    assert catalog.get("div").description == "first"


def test_every_record_is_fully_populated():
    catalog = CatalogStore.from_raw([{"tag": "a"}, {"tag": "b", "status": "experimental"}])

    for rec in catalog:
        assert rec.tag and rec.status and rec.category
        assert rec.description is not None


def test_statuses_and_empty_catalog():
    catalog = CatalogStore.from_raw(
        [{"tag": "a"}, {"tag": "b", "status": "deprecated"}, {"tag": "c", "status": "deprecated"}]
    )
    assert catalog.statuses() == ["deprecated", "standard"]

    empty = CatalogStore.empty()
    assert len(empty) == 0
    assert not empty
    assert empty.statuses() == []


def test_records_are_immutable_tuple():
    catalog = CatalogStore.from_raw([{"tag": "a"}])
    assert isinstance(catalog.records, tuple)
