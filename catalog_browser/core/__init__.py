"""
Core domain layer: records, the catalog store, view state, the derivation
engine and the renderer contract. No Dash or I/O in here.
"""

from .catalog import CatalogStore
from .derive import derive
from .messages import Messages
from .record import Record, normalize_record
from .renderer import RenderedTable, RowProjection, render_load_error, render_table
from .view_state import ViewState

__all__ = [
    "CatalogStore",
    "Messages",
    "Record",
    "RenderedTable",
    "RowProjection",
    "ViewState",
    "derive",
    "normalize_record",
    "render_load_error",
    "render_table",
]
