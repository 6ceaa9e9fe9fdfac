from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, Optional

from .exceptions import InvalidViewStateError
from .record import RECORD_FIELDS

STATUS_ALL = "all"
SORT_ASC = "asc"
SORT_DESC = "desc"

SORT_KEYS = RECORD_FIELDS
SORT_DIRECTIONS = (SORT_ASC, SORT_DESC)


@dataclass
class ViewState:
    """
    Represents the current filter / search / sort selection of the table.

    Fields:

    - status_filter: "all" or one specific status value
    - search_query: raw text typed by the user (trimmed/lowercased only when deriving)
    - sort_key: Record field the table is sorted by
    - sort_dir: "asc" or "desc"

    Always fully defined. Mutated in place by the transition methods; the
    visible set is never stored here, it is derived from this state each time.
    """

    status_filter: str = STATUS_ALL
    search_query: str = ""
    sort_key: str = "tag"
    sort_dir: str = SORT_ASC

    def __post_init__(self) -> None:
        _check_sort(self.sort_key, self.sort_dir)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def set_search_query(self, query: Optional[str]) -> None:
        self.search_query = query or ""

    def set_status_filter(self, status: str, known_statuses: Iterable[str]) -> None:
        """
        :param status: "all" or one of known_statuses
        :param known_statuses: the closed set of status values
        :raises InvalidViewStateError: if status is neither
        """
        if status != STATUS_ALL and status not in set(known_statuses):
            raise InvalidViewStateError(f"Unknown status filter '{status}'")
        self.status_filter = status

    def toggle_sort(self, key: str) -> None:
        """
        Same column flips the direction; a new column always starts ascending.
        """
        if key not in SORT_KEYS:
            raise InvalidViewStateError(f"Unknown sort key '{key}'")

        if key == self.sort_key:
            self.sort_dir = SORT_DESC if self.sort_dir == SORT_ASC else SORT_ASC
        else:
            self.sort_key = key
            self.sort_dir = SORT_ASC

    def is_sorted_by(self, key: str) -> bool:
        return self.sort_key == key

    # ------------------------------------------------------------------
    # Serialisation (browser-side store)
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> ViewState:
        data = data or {}
        return cls(
            status_filter=str(data.get("status_filter") or STATUS_ALL),
            search_query=str(data.get("search_query") or ""),
            sort_key=str(data.get("sort_key") or "tag"),
            sort_dir=str(data.get("sort_dir") or SORT_ASC),
        )


def _check_sort(sort_key: str, sort_dir: str) -> None:
    if sort_key not in SORT_KEYS:
        raise InvalidViewStateError(f"Unknown sort key '{sort_key}'")
    if sort_dir not in SORT_DIRECTIONS:
        raise InvalidViewStateError(f"Unknown sort direction '{sort_dir}'")
