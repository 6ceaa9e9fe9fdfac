from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Iterable, Optional

import dash
from dash import ALL, Input, Output, State

from catalog_browser.core.exceptions import InvalidViewStateError
from catalog_browser.ui.callbacks.callbacks_utils import safe_view_state
from catalog_browser.ui.ids import IDs

if TYPE_CHECKING:
    from catalog_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def apply_ui_event(
        view_data: Any,
        triggered_id: Any,
        search_value: Optional[str],
        known_statuses: Iterable[str],
) -> dict[str, Any]:
    """
    Pure helper: map one UI event onto a ViewState transition and return the
    new store payload.

    - search input -> set_search_query
    - filter chip {"type": "filter-chip", "index": status} -> set_status_filter
    - column header {"type": "sort-header", "index": key} -> toggle_sort

    An event naming an unknown status/key leaves the state unchanged.
    """
    view = safe_view_state(view_data)

    try:
        if triggered_id == IDs.Control.SEARCH_INPUT:
            view.set_search_query(search_value)
        elif isinstance(triggered_id, dict):
            kind = triggered_id.get("type")
            value = triggered_id.get("index")
            if kind == IDs.Pattern.FILTER_CHIP:
                view.set_status_filter(value, known_statuses)
            elif kind == IDs.Pattern.SORT_HEADER:
                view.toggle_sort(value)
    except InvalidViewStateError:
        logger.warning(
            "Ignoring UI event with invalid value",
            extra={"triggered_id": str(triggered_id)},
        )
        return safe_view_state(view_data).to_dict()

    return view.to_dict()


def register_sync_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # UI events -> ViewState (canonical)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.VIEW_STATE, "data"),
        Input(IDs.Control.SEARCH_INPUT, "value"),
        Input({"type": IDs.Pattern.FILTER_CHIP, "index": ALL}, "n_clicks"),
        Input({"type": IDs.Pattern.SORT_HEADER, "index": ALL}, "n_clicks"),
        State(IDs.Store.VIEW_STATE, "data"),
        prevent_initial_call=True,
    )
    def sync_view_state_from_ui(search_value, _chip_clicks, _header_clicks, view_data):
        triggered_id = dash.ctx.triggered_id
        if triggered_id is None:
            raise dash.exceptions.PreventUpdate

        return apply_ui_event(view_data, triggered_id, search_value, ctx.known_statuses)
