from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from catalog_browser.core.view_state import ViewState
from catalog_browser.ui.config import SORTABLE_COLUMNS
from catalog_browser.ui.helpers import header_class
from catalog_browser.ui.ids import IDs, sort_header_id


def build_table_panel(ctx: "AppConfig") -> dbc.Card:
    initial = ViewState()
    m = ctx.messages
    titles = {
        "tag": m.column_tag,
        "status": m.column_status,
        "category": m.column_category,
    }

    headers = [
        html.Th(
            titles[key],
            id=sort_header_id(key),
            className=header_class(key, initial),
            n_clicks=0,
        )
        for key in SORTABLE_COLUMNS
    ]
    headers.append(html.Th(m.column_description))

    return dbc.Card(
        dbc.CardBody(
            [
                html.Table(
                    [
                        html.Thead(html.Tr(headers)),
                        # Filled by the render callback
                        html.Tbody(id=IDs.Control.TABLE_BODY),
                    ],
                    className="table elements-table",
                ),
                html.Div(id=IDs.Control.COUNT_TEXT, className="elements-count text-muted"),
            ]
        ),
        className="cb-table mt-3",
    )
