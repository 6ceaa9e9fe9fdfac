from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from catalog_browser.config.model import GlobalConfig
from catalog_browser.core.messages import DEFAULT_MESSAGES, Messages
from catalog_browser.core.view_state import STATUS_ALL, ViewState
from catalog_browser.services.catalog_loader import LoadResult
from catalog_browser.services.table_service import TableController

# Columns with a clickable header, in table order
SORTABLE_COLUMNS = ("tag", "status", "category")


@dataclass
class AppConfig:
    """
    Holds shared state for the Dash app: config, the (immutable) load result and
    the strings. Passed into layout + callback registration functions instead of
    using module-level globals. Per-user view state lives in the browser store.
    """
    config_root: Path
    global_config: GlobalConfig
    load_result: LoadResult = field(default_factory=LoadResult)
    messages: Messages = DEFAULT_MESSAGES
    known_statuses: List[str] = field(default_factory=list)

    @property
    def chip_values(self) -> List[str]:
        """Filter chip values in layout order."""
        return [STATUS_ALL, *self.known_statuses]

    def controller(self, view: Optional[ViewState] = None) -> TableController:
        if not self.load_result.ok:
            return TableController.failed_load(self.known_statuses, self.messages, view=view)
        return TableController(
            self.load_result.catalog,
            self.known_statuses,
            self.messages,
            view=view,
        )
