from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from catalog_browser.core.messages import Messages

DEFAULT_STATUSES: Tuple[str, ...] = ("standard", "experimental", "deprecated", "obsolete")


@dataclass
class GlobalConfig:
    """
    Parsed global.json.

    - data_source: URL (http/https) or local path of the catalog document,
      already resolved against the config root when relative
    - records_field: name of the array field holding the raw entries
    - statuses: closed set of status values offered as filter chips
    - messages: raw overrides for the user-facing strings
    """

    ui_title: str
    data_source: str
    subtitle: str = "Довідник HTML-елементів"
    records_field: str = "html_elements"
    statuses: List[str] = field(default_factory=lambda: list(DEFAULT_STATUSES))
    messages: Dict[str, Any] = field(default_factory=dict)

    def build_messages(self) -> Messages:
        return Messages().with_overrides(self.messages)
