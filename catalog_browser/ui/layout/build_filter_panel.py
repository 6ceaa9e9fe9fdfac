from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from catalog_browser.core.view_state import STATUS_ALL, ViewState
from catalog_browser.ui.helpers import chip_class
from catalog_browser.ui.ids import IDs, filter_chip_id


def _chip_label(ctx: "AppConfig", status: str) -> str:
    if status == STATUS_ALL:
        return ctx.messages.filter_all
    return status[:1].upper() + status[1:]


def build_filter_panel(ctx: "AppConfig") -> dbc.Card:
    initial = ViewState()

    chips = [
        html.Button(
            _chip_label(ctx, status),
            id=filter_chip_id(status),
            className=chip_class(status, initial),
            n_clicks=0,
        )
        for status in ctx.chip_values
    ]

    return dbc.Card(
        dbc.CardBody(
            [
                dbc.Input(
                    id=IDs.Control.SEARCH_INPUT,
                    type="search",
                    value="",
                    debounce=False,
                    placeholder=ctx.messages.search_placeholder,
                    className="mb-3",
                ),
                html.Div(chips, className="filter-chips d-flex flex-wrap gap-2"),
            ]
        ),
        className="cb-filters mt-3",
    )
