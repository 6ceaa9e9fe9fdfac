from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, List, Tuple

import dash
from dash import ALL, Input, Output, html

from catalog_browser.ui.callbacks.callbacks_utils import safe_view_state
from catalog_browser.ui.config import SORTABLE_COLUMNS
from catalog_browser.ui.helpers import chip_class, header_class, table_rows
from catalog_browser.ui.ids import IDs

if TYPE_CHECKING:
    from catalog_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def render_view(ctx: AppConfig, view_data: Any) -> Tuple[List[html.Tr], str, List[str], List[str]]:
    """
    Pure helper: stored ViewState -> (tbody rows, count text, chip classes, header classes).
    Chip/header class lists follow layout order.
    """
    view = safe_view_state(view_data)
    rendered = ctx.controller(view).render()

    chips = [chip_class(status, view) for status in ctx.chip_values]
    headers = [header_class(key, view) for key in SORTABLE_COLUMNS]
    return table_rows(rendered), rendered.count_text, chips, headers


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # ViewState -> table, count, active chip, sorted header
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.TABLE_BODY, "children"),
        Output(IDs.Control.COUNT_TEXT, "children"),
        Output({"type": IDs.Pattern.FILTER_CHIP, "index": ALL}, "className"),
        Output({"type": IDs.Pattern.SORT_HEADER, "index": ALL}, "className"),
        Input(IDs.Store.VIEW_STATE, "data"),
    )
    def update_table_from_state(view_data: dict[str, Any] | None):
        rows, count_text, chips, headers = render_view(ctx, view_data)
        logger.debug(
            "render_done",
            extra={"n_rows": len(rows), "view_state": view_data},
        )
        return rows, count_text, chips, headers
