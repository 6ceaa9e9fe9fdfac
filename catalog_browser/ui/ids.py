from __future__ import annotations

__all__ = ["IDs", "filter_chip_id", "sort_header_id"]


class IDs:
    class Store:
        VIEW_STATE = "view-state"
        THEME = "theme-preference"
        PREFERS_DARK = "prefers-dark"

    class Control:
        ROOT = "app-root"

        SEARCH_INPUT = "search"
        TABLE_BODY = "elements-table-body"
        COUNT_TEXT = "elements-count"

        THEME_TOGGLE = "theme-toggle"
        THEME_TOGGLE_ICON = "theme-toggle-icon"
        THEME_TOGGLE_LABEL = "theme-toggle-label"

    class Pattern:
        # pattern-matching "type" strings
        FILTER_CHIP = "filter-chip"
        SORT_HEADER = "sort-header"


def filter_chip_id(status: str) -> dict:
    return {"type": IDs.Pattern.FILTER_CHIP, "index": status}


def sort_header_id(key: str) -> dict:
    return {"type": IDs.Pattern.SORT_HEADER, "index": key}
