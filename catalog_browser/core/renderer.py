from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from .messages import DEFAULT_MESSAGES, Messages
from .record import Record


@dataclass(frozen=True)
class RowProjection:
    """
    Display-ready form of one Record.

    - tag_label: the tag wrapped as "<tag>"
    - status_label: status text with a capitalised first letter
    - status_class: raw status, used by the display surface as a styling marker
    - category_label: category, or the placeholder glyph for an empty/fallback category
    - description: raw description text
    """

    tag_label: str
    status_label: str
    status_class: str
    category_label: str
    description: str


@dataclass(frozen=True)
class RenderedTable:
    """
    Full output of one render: replaces whatever the display surface showed before.
    error_message is set only for the load-failure state, which has no rows.
    """

    rows: Tuple[RowProjection, ...]
    count_text: str
    error_message: Optional[str] = None

    @property
    def is_error(self) -> bool:
        return self.error_message is not None


def _status_label(status: str) -> str:
    # Only the first letter changes, unlike str.capitalize()
    return status[:1].upper() + status[1:]


def project_row(record: Record, messages: Messages = DEFAULT_MESSAGES) -> RowProjection:
    category = record.category
    if not category or category == messages.default_category:
        category = messages.placeholder

    return RowProjection(
        tag_label=f"<{record.tag}>",
        status_label=_status_label(record.status),
        status_class=record.status,
        category_label=category,
        description=record.description or "",
    )


def render_table(visible: Iterable[Record], messages: Messages = DEFAULT_MESSAGES) -> RenderedTable:
    rows = tuple(project_row(r, messages) for r in visible)
    return RenderedTable(rows=rows, count_text=messages.count_text(len(rows)))


def render_load_error(messages: Messages = DEFAULT_MESSAGES) -> RenderedTable:
    return RenderedTable(
        rows=(),
        count_text=messages.count_text(0),
        error_message=messages.load_error,
    )
