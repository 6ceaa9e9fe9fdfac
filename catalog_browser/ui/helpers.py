from __future__ import annotations

from typing import List

from dash import html

from catalog_browser.core.renderer import RenderedTable, RowProjection
from catalog_browser.core.view_state import SORT_ASC, ViewState

N_COLUMNS = 4


def status_pill(row: RowProjection) -> html.Span:
    return html.Span(
        [
            html.Span(className="status-dot"),
            html.Span(row.status_label),
        ],
        className=f"status-pill {row.status_class}",
    )


def category_pill(row: RowProjection) -> html.Span:
    return html.Span(row.category_label, className="category-pill")


def table_row(row: RowProjection) -> html.Tr:
    return html.Tr(
        [
            html.Td(html.Span(row.tag_label, className="tag-code")),
            html.Td(status_pill(row)),
            html.Td(category_pill(row)),
            html.Td(row.description, className="description"),
        ]
    )


def table_rows(rendered: RenderedTable) -> List[html.Tr]:
    """
    Build the complete <tbody> children for one render.
    The result replaces the previous children wholesale.
    """
    if rendered.is_error:
        return [
            html.Tr(
                html.Td(
                    rendered.error_message,
                    colSpan=N_COLUMNS,
                    className="description",
                )
            )
        ]
    return [table_row(r) for r in rendered.rows]


def chip_class(status: str, view: ViewState) -> str:
    return "filter-chip active" if status == view.status_filter else "filter-chip"


def header_class(key: str, view: ViewState) -> str:
    if not view.is_sorted_by(key):
        return "sortable"
    return "sortable sort-asc" if view.sort_dir == SORT_ASC else "sortable sort-desc"
