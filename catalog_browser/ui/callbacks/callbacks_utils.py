from __future__ import annotations
import logging

from catalog_browser.core.exceptions import InvalidViewStateError
from catalog_browser.core.view_state import ViewState

logger = logging.getLogger(__name__)


def safe_view_state(data: object) -> ViewState:
    """
    Rebuild the ViewState from the browser store. Anything unusable falls back
    to the default state instead of breaking the page.
    """
    if not isinstance(data, dict):
        return ViewState()
    try:
        return ViewState.from_dict(data)
    except InvalidViewStateError:
        logger.exception("Invalid view-state: %r", data)
        return ViewState()
