from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from catalog_browser.core.catalog import CatalogStore
from catalog_browser.core.derive import derive
from catalog_browser.core.messages import DEFAULT_MESSAGES, Messages
from catalog_browser.core.record import Record
from catalog_browser.core.renderer import RenderedTable, render_load_error, render_table
from catalog_browser.core.view_state import ViewState

logger = logging.getLogger(__name__)


class TableController:
    """
    Owns one ViewState over one CatalogStore and re-derives + re-renders after
    every transition.

    Each transition method returns the freshly rendered table, so callers
    (Dash callbacks, tests, scripts) never have to remember to re-render.
    """

    def __init__(
            self,
            catalog: CatalogStore,
            known_statuses: Iterable[str],
            messages: Messages = DEFAULT_MESSAGES,
            view: Optional[ViewState] = None,
            failed: bool = False,
    ):
        self.catalog = catalog
        self.known_statuses: Tuple[str, ...] = tuple(known_statuses)
        self.messages = messages
        self.view = view if view is not None else ViewState()
        self._failed = failed

    @classmethod
    def failed_load(
            cls,
            known_statuses: Iterable[str],
            messages: Messages = DEFAULT_MESSAGES,
            view: Optional[ViewState] = None,
    ) -> TableController:
        """Controller for a load that failed: empty catalog, always the error state."""
        return cls(CatalogStore.empty(), known_statuses, messages, view=view, failed=True)

    @property
    def load_failed(self) -> bool:
        return self._failed

    def visible(self) -> List[Record]:
        return derive(self.catalog, self.view)

    def render(self) -> RenderedTable:
        if self._failed:
            return render_load_error(self.messages)
        return render_table(self.visible(), self.messages)

    def set_search_query(self, query: Optional[str]) -> RenderedTable:
        self.view.set_search_query(query)
        return self.render()

    def set_status_filter(self, status: str) -> RenderedTable:
        self.view.set_status_filter(status, self.known_statuses)
        return self.render()

    def toggle_sort(self, key: str) -> RenderedTable:
        self.view.toggle_sort(key)
        logger.debug(
            "sort_changed",
            extra={"sort_key": self.view.sort_key, "sort_dir": self.view.sort_dir},
        )
        return self.render()
