from __future__ import annotations

from typing import Iterable, List

from .record import Record
from .view_state import SORT_DESC, STATUS_ALL, ViewState


def matches_status(record: Record, status_filter: str) -> bool:
    return status_filter == STATUS_ALL or record.status == status_filter


def matches_search(record: Record, query: str) -> bool:
    """
    Case-insensitive, unanchored substring match over tag, description and category.

    :param query: already trimmed and lowercased; empty matches everything
    """
    if not query:
        return True
    if query in record.tag.lower():
        return True
    if record.description and query in record.description.lower():
        return True
    if record.category and query in record.category.lower():
        return True
    return False


def _sort_value(record: Record, key: str) -> str:
    return str(record.field_value(key)).lower()


def derive(catalog: Iterable[Record], view: ViewState) -> List[Record]:
    """
    Compute the visible records for a view state.

    Order of operations is fixed: status filter, then search, then sort.
    The sort is stable in both directions, so records with equal keys keep the
    order they had after filtering (which is the catalog's tag order).

    :param catalog: the CatalogStore (or any iterable of Records)
    :param view: current ViewState
    :return: a new list; never raises for a valid ViewState
    """
    query = view.search_query.lower().strip()

    visible = [
        r for r in catalog
        if matches_status(r, view.status_filter) and matches_search(r, query)
    ]

    # sorted(reverse=True) keeps equal elements in their original order
    return sorted(
        visible,
        key=lambda r: _sort_value(r, view.sort_key),
        reverse=view.sort_dir == SORT_DESC,
    )
