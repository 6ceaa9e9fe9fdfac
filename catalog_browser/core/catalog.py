from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from .exceptions import RecordNormalizationError
from .record import DEFAULT_CATEGORY, Record, normalize_record

logger = logging.getLogger(__name__)


class CatalogStore:
    """
    The full, normalized record set.

    Purpose:
    - Built exactly once from the raw load input, then read-only
    - Keeps records ordered by tag (case-sensitive, code-point order), which is the
      order the derivation starts from before any sorting is applied

    Design Notes:
    - Entries that fail normalization are excluded (and logged) instead of failing the whole load
    - Tags are unique: a repeated tag keeps its first occurrence
    """

    def __init__(self, records: Iterable[Record] = ()):
        self._records: Tuple[Record, ...] = tuple(sorted(records, key=lambda r: r.tag))
        self._by_tag: Dict[str, Record] = {r.tag: r for r in self._records}

    @classmethod
    def empty(cls) -> CatalogStore:
        return cls(())

    @classmethod
    def from_raw(
            cls,
            entries: Iterable[Any],
            *,
            default_category: str = DEFAULT_CATEGORY,
    ) -> CatalogStore:
        """
        Normalize raw entries into a catalog.

        :param entries: the raw records array from the load input
        :param default_category: localized fallback category
        :return: a new CatalogStore
        """
        records: List[Record] = []
        seen: set[str] = set()
        skipped = 0

        for idx, raw in enumerate(entries):
            try:
                record = normalize_record(raw, default_category=default_category)
            except RecordNormalizationError as e:
                skipped += 1
                logger.warning(
                    "Skipping catalog entry: %s",
                    e,
                    extra={"entry_index": idx},
                )
                continue

            if record.tag in seen:
                skipped += 1
                logger.warning(
                    "Skipping duplicate tag %r",
                    record.tag,
                    extra={"entry_index": idx},
                )
                continue

            seen.add(record.tag)
            records.append(record)

        logger.info(
            "Catalog built",
            extra={"n_records": len(records), "n_skipped": skipped},
        )
        return cls(records)

    @property
    def records(self) -> Tuple[Record, ...]:
        return self._records

    def get(self, tag: str) -> Optional[Record]:
        return self._by_tag.get(tag)

    def statuses(self) -> List[str]:
        """Distinct statuses present in the catalog, sorted."""
        return sorted({r.status for r in self._records})

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    def __bool__(self) -> bool:
        return bool(self._records)

    def __repr__(self) -> str:
        return f"CatalogStore(n_records={len(self._records)})"
